# Argline — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Scalar scanning over a UTF-8 encoded input line.

`Source` holds one input line both as text and as its UTF-8 encoding. Every
layer of the tokenizer addresses the line through byte offsets into that
encoding, stepping one Unicode scalar value at a time, so offsets recorded in
token spans line up with the bytes a transport actually received.
"""
from __future__ import annotations

from typing import Iterator

from argline.exceptions import ArgumentSyntaxError


def scalar_width(lead: int) -> int:
    """Return the encoded width of the UTF-8 sequence starting with byte `lead`."""
    if lead < 0x80:
        return 1
    if lead < 0xE0:
        return 2
    if lead < 0xF0:
        return 3
    return 4


# Information separators count as whitespace for str.isspace() but are not
# White_Space scalars, so they stay part of naked words.
WHITESPACE_EXCLUDED = frozenset("\x1c\x1d\x1e\x1f")


def is_whitespace(char: str) -> bool:
    return char.isspace() and char not in WHITESPACE_EXCLUDED


def trim_end(text: str) -> str:
    """Strip trailing whitespace scalars, as judged by `is_whitespace`."""
    end = len(text)
    while end and is_whitespace(text[end - 1]):
        end -= 1
    return text[:end]


class Source:
    """An immutable input line addressed by UTF-8 byte offset."""

    __slots__ = ("text", "data")

    def __init__(self, text: str) -> None:
        self.text: str = text
        try:
            self.data: bytes = text.encode("utf-8")
        except UnicodeEncodeError as error:
            raise ArgumentSyntaxError("Input is not valid Unicode text") from error

    def __len__(self) -> int:
        return len(self.data)

    def __repr__(self) -> str:
        return f"Source({self.text!r})"

    def at_end(self, offset: int) -> bool:
        return offset >= len(self.data)

    def peek(self, offset: int) -> str | None:
        """Return the scalar starting at `offset`, or None at end-of-input."""
        if offset >= len(self.data):
            return None
        end = offset + scalar_width(self.data[offset])
        return self.data[offset:end].decode("utf-8")

    def scalars(self, offset: int) -> Iterator[tuple[int, int, str]]:
        """Yield `(start, end, char)` for every scalar from `offset` onwards."""
        data = self.data
        length = len(data)
        while offset < length:
            end = offset + scalar_width(data[offset])
            yield offset, end, data[offset:end].decode("utf-8")
            offset = end

    def slice(self, start: int, end: int) -> str:
        return self.data[start:end].decode("utf-8")
