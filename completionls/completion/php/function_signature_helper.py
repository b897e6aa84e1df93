"""
Signature help for PHP functions and methods declared in the same document.

The call around the cursor is found by scanning backwards for the
unclosed `(`; commas at that nesting level give the active parameter.
String literals are not skipped, so a `(` or `,` inside a string in the
argument list throws the count off.
"""

from __future__ import annotations

import re

from lsprotocol.types import ParameterInformation, SignatureHelp, SignatureInformation

from completionls.completion.php.words import clamp_offset
from completionls.completion.suggestion import ByteOffset, SourceDocument
from completionls.lsp.capabilities.signature_help import SignatureHelper

LABEL = rb"[A-Za-z_\x80-\xff][A-Za-z0-9_\x80-\xff]*"

DECLARATION_PATTERN = re.compile(
    rb"\bfunction\s+&?\s*(" + LABEL + rb")\s*\(([^)]*)\)(?:\s*:\s*([?\\\w|&]+))?"
)
CALLEE_PATTERN = re.compile(rb"(" + LABEL + rb")\s*\Z")
DECLARATION_NAME_PATTERN = re.compile(rb"\bfunction\s+&?\s*" + LABEL + rb"\s*\Z")

OPENING = b"([{"
CLOSING = b")]}"


def split_parameters(parameters: str) -> list[str]:
    """Split a parameter list on its top-level commas."""
    result = []
    depth = 0
    current = ""
    for char in parameters:
        if char in "([{":
            depth += 1
        elif char in ")]}":
            depth -= 1
        elif char == "," and depth == 0:
            result.append(current.strip())
            current = ""
            continue
        current += char
    result.append(current.strip())
    return [parameter for parameter in result if parameter]


def _enclosing_call(data: bytes, offset: int) -> tuple[int, int] | None:
    """Return (offset of the unclosed paren, active parameter) or None."""
    depth = 0
    commas = 0
    for index in range(offset - 1, -1, -1):
        byte = data[index]
        if byte in CLOSING:
            depth += 1
        elif byte in OPENING:
            if depth > 0:
                depth -= 1
            elif byte == ord("("):
                return index, commas
            elif byte == ord("["):
                # Inside an array literal argument.
                commas = 0
            else:
                return None
        elif depth == 0 and byte == ord(","):
            commas += 1
        elif depth == 0 and byte == ord(";"):
            return None
    return None


class FunctionSignatureHelper(SignatureHelper):
    """Shows the declared parameters of the function being called."""

    async def signature_help(
        self, document: SourceDocument, offset: ByteOffset
    ) -> SignatureHelp | None:
        data = document.data
        call = _enclosing_call(data, clamp_offset(data, offset))
        if call is None:
            return None

        paren, active_parameter = call
        prefix = data[:paren]
        if DECLARATION_NAME_PATTERN.search(prefix):
            return None

        callee = CALLEE_PATTERN.search(prefix)
        if callee is None:
            return None

        signature = self._declarations(data).get(callee.group(1).lower())
        if signature is None:
            return None

        if signature.parameters:
            active_parameter = min(active_parameter, len(signature.parameters) - 1)
        else:
            active_parameter = None

        return SignatureHelp(
            signatures=[signature],
            active_signature=0,
            active_parameter=active_parameter,
        )

    def _declarations(self, data: bytes) -> dict[bytes, SignatureInformation]:
        # PHP function names are case-insensitive; the first declaration wins.
        declarations: dict[bytes, SignatureInformation] = {}
        for match in DECLARATION_PATTERN.finditer(data):
            key = match.group(1).lower()
            if key in declarations:
                continue

            name = match.group(1).decode("utf-8", "replace")
            parameters = split_parameters(match.group(2).decode("utf-8", "replace"))
            label = f"{name}({', '.join(parameters)})"
            if match.group(3):
                label += f": {match.group(3).decode('utf-8', 'replace')}"

            declarations[key] = SignatureInformation(
                label=label,
                parameters=[ParameterInformation(label=p) for p in parameters],
            )
        return declarations
