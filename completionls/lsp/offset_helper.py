"""
Translate between LSP positions and byte offsets.

LSP positions are (line, character) pairs where character counts UTF-16
code units. Completors work with byte offsets into the UTF-8 encoded text.
Both functions clamp out-of-range input instead of raising, since clients
legitimately send positions at (or past) the end of a document.

Line terminators are "\\r\\n", "\\n" and "\\r", as in the LSP specification.
"""

from __future__ import annotations

import re
from bisect import bisect_right

from lsprotocol.types import Position

from completionls.completion.suggestion import ByteOffset

LINE_BREAK_PATTERN = re.compile(r"\r\n|\r|\n")


def _line_bounds(text: str) -> list[tuple[int, int]]:
    """Return (start, end) character indices of every line, terminators excluded."""
    bounds = []
    start = 0
    for match in LINE_BREAK_PATTERN.finditer(text):
        bounds.append((start, match.start()))
        start = match.end()
    bounds.append((start, len(text)))
    return bounds


def _utf16_length(text: str) -> int:
    return sum(2 if ord(char) > 0xFFFF else 1 for char in text)


def _utf8_length(text: str) -> int:
    return len(text.encode("utf-8", "surrogatepass"))


class LineIndex:
    """
    Line table of one document snapshot.

    Built once per request; afterwards every translation only looks at
    the line it lands on.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.lines = _line_bounds(text)
        self.byte_starts: list[int] = []

        byte_offset = 0
        previous_start = 0
        for start, _ in self.lines:
            byte_offset += _utf8_length(text[previous_start:start])
            self.byte_starts.append(byte_offset)
            previous_start = start
        self.byte_length = byte_offset + _utf8_length(text[previous_start:])

    def position_to_offset(self, position: Position) -> ByteOffset:
        """
        Convert an LSP position to a byte offset.

        A line past the end of the document maps to the end of the text; a
        character past the end of its line maps to the end of that line.
        """
        if position.line >= len(self.lines):
            return ByteOffset(self.byte_length)

        line_start, line_end = self.lines[position.line]
        index = line_start
        units = 0
        while index < line_end:
            width = 2 if ord(self.text[index]) > 0xFFFF else 1
            if units + width > position.character:
                break
            units += width
            index += 1

        return ByteOffset(
            self.byte_starts[position.line]
            + _utf8_length(self.text[line_start:index])
        )

    def offset_to_position(self, offset: int) -> Position:
        """
        Convert a byte offset to an LSP position.

        Offsets are clamped to the document, and an offset inside a
        multi-byte character is moved back to the start of that character.
        """
        offset = max(0, min(offset, self.byte_length))
        line = bisect_right(self.byte_starts, offset) - 1
        line_start, line_end = self.lines[line]
        data = self.text[line_start:line_end].encode("utf-8", "surrogatepass")

        # Between "\r" and "\n" of a CRLF pair.
        column = min(offset - self.byte_starts[line], len(data))
        while 0 < column < len(data) and data[column] & 0xC0 == 0x80:
            column -= 1

        prefix = data[:column].decode("utf-8", "surrogatepass")
        return Position(line=line, character=_utf16_length(prefix))


def position_to_offset(text: str, position: Position) -> ByteOffset:
    """Convert an LSP position in text to a byte offset."""
    return LineIndex(text).position_to_offset(position)


def offset_to_position(text: str, offset: int) -> Position:
    """Convert a byte offset into text to an LSP position."""
    return LineIndex(text).offset_to_position(offset)
