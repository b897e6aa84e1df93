"""Byte-level helpers for locating the PHP word under the cursor."""

from __future__ import annotations

import re

# PHP labels: [a-zA-Z_\x80-\xff][a-zA-Z0-9_\x80-\xff]*
LABEL_BYTES = frozenset(
    b"abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_"
) | frozenset(range(0x80, 0x100))

VARIABLE_PATTERN = re.compile(rb"\$[A-Za-z_\x80-\xff][A-Za-z0-9_\x80-\xff]*")


def clamp_offset(data: bytes, offset: int) -> int:
    return max(0, min(offset, len(data)))


def word_start(data: bytes, offset: int) -> int:
    """Return the byte offset where the label ending at offset begins."""
    start = clamp_offset(data, offset)
    while start > 0 and data[start - 1] in LABEL_BYTES:
        start -= 1
    return start


def preceded_by(data: bytes, offset: int, *tokens: bytes) -> bool:
    """Check whether the bytes right before offset end with any of tokens."""
    prefix = data[:offset]
    return any(prefix.endswith(token) for token in tokens)
