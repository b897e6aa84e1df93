"""
Suggestion model shared by completors and the LSP layer.

Completors yield Suggestion records; the LSP layer turns each one into
a CompletionItem. Offsets are byte offsets into the UTF-8 encoded
document text, matching what PHP tooling works with.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NewType

ByteOffset = NewType("ByteOffset", int)


class SuggestionType(Enum):
    """Internal classification of a completion suggestion."""

    METHOD = "method"
    FUNCTION = "function"
    CONSTRUCTOR = "constructor"
    FIELD = "field"
    VARIABLE = "variable"           # $foo
    CLASS = "class"
    INTERFACE = "interface"
    MODULE = "module"               # namespaces
    PROPERTY = "property"
    UNIT = "unit"
    VALUE = "value"
    ENUM = "enum"
    KEYWORD = "keyword"             # foreach, function, ...
    SNIPPET = "snippet"
    COLOR = "color"
    FILE = "file"
    REFERENCE = "reference"
    CONSTANT = "constant"


@dataclass(frozen=True)
class ByteOffsetRange:
    """Half-open byte range [start, end) in a document."""

    start: ByteOffset
    end: ByteOffset

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < 0:
            raise ValueError(f"Negative offset in range {self.start}..{self.end}")
        if self.start > self.end:
            raise ValueError(f"Range start {self.start} is after end {self.end}")

    @classmethod
    def from_ints(cls, start: int, end: int) -> ByteOffsetRange:
        return cls(ByteOffset(start), ByteOffset(end))


@dataclass(frozen=True)
class Suggestion:
    """
    A single completion candidate produced by a completor.

    Attributes:
        name: Canonical name of the candidate (e.g. "$foo", "bar").
        type: SuggestionType, or a raw type string from a third-party
            completor. Unknown values are rendered as plain text.
        short_description: One-line detail, e.g. a signature.
        documentation: Longer free-form documentation.
        snippet: LSP snippet to insert instead of the name, if the client
            supports snippets.
        range: Byte range the candidate replaces, usually the word being
            typed.
    """

    name: str
    type: SuggestionType | str | None = None
    short_description: str | None = None
    documentation: str | None = None
    snippet: str | None = None
    range: ByteOffsetRange | None = None


@dataclass(frozen=True)
class SourceDocument:
    """Read-only document handed to completors."""

    uri: str
    text: str
    language_id: str

    @property
    def data(self) -> bytes:
        return self.text.encode("utf-8", "surrogatepass")
