# Argline — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Lexical classifiers for identifiers and strings.

Every classifier takes the `Source` and a byte offset and returns
`(end, value)`, where `end` is the offset immediately after the recognized text.
Functions prefixed with an underscore assume the caller already dispatched on
the first scalar and raise `ValueError` when that assumption is broken; they are
never reached with such input through `expect_string()`.

String forms:
- naked:      `word`                 stops at whitespace; banned characters fail
- quoted:     `'...'`, `''...''`     any run of one quote character
- bracketed:  `(...)`, `([{|...|}])` run of `([{`, optionally ending in one `|`
"""
from __future__ import annotations

from argline.exceptions import ArgumentSyntaxError
from argline.parser.matcher import closing_delimiter, expect_delimited
from argline.parser.scanner import Source, is_whitespace
from argline.parser.utils import quote_char

QUOTE = "'"
DQUOTE = '"'
BQUOTE = "`"
PLUS = "+"
MINUS = "-"
EQUAL = "="
BAR = "|"

QUOTE_CHARS = frozenset((QUOTE, DQUOTE, BQUOTE))
SIGIL_CHARS = frozenset((PLUS, MINUS, EQUAL))
BRACKET_OPEN_CHARS = frozenset("([{|")
NAKED_STRING_BAN = frozenset("'\"`|{[(=+-)]}")


def _is_ident_char(char: str, first: bool) -> bool:
    if char == "_" or ("a" <= char <= "z") or ("A" <= char <= "Z"):
        return True
    return not first and "0" <= char <= "9"


def expect_ident(source: Source, start: int) -> tuple[int, str]:
    """Recognize `[A-Za-z_][A-Za-z0-9_]*` at `start`."""
    end = start
    for _, next_offset, char in source.scalars(start):
        if not _is_ident_char(char, end == start):
            break
        end = next_offset
    if end == start:
        found = source.peek(start)
        if found is None:
            raise ArgumentSyntaxError(
                "Expected ASCII letter to begin identifier; found end-of-input"
            )
        raise ArgumentSyntaxError(
            f"Expected ASCII letter to begin identifier; found {quote_char(found)}"
        )
    return end, source.slice(start, end)


def _expect_quote_run(source: Source, start: int) -> tuple[int, str]:
    """Consume a run of one repeated quote character; the run is the delimiter."""
    quote = source.peek(start)
    if quote is None:
        raise ValueError("(internal) empty input at quote run")
    if quote not in QUOTE_CHARS:
        raise ValueError(f"(internal) non-quote {quote!r} at quote run")
    end = start
    for _, next_offset, char in source.scalars(start):
        if char != quote:
            break
        end = next_offset
    return end, source.slice(start, end)


def _expect_bracket_run(source: Source, start: int) -> tuple[int, str]:
    """Consume a run of bracket openers, stopping right after the first bar."""
    end = start
    for _, next_offset, char in source.scalars(start):
        if char not in BRACKET_OPEN_CHARS:
            break
        end = next_offset
        if char == BAR:
            break
    if end == start:
        raise ValueError("(internal) empty bracket run")
    return end, source.slice(start, end)


def expect_naked_string(source: Source, start: int) -> tuple[int, str]:
    """Consume an unquoted string up to whitespace or end-of-input."""
    end = start
    for _, next_offset, char in source.scalars(start):
        if char in NAKED_STRING_BAN:
            raise ArgumentSyntaxError(
                f"In naked string, encountered banned character {quote_char(char)}; "
                "try wrapping the string in quotes or delimiters."
            )
        if is_whitespace(char):
            break
        end = next_offset
    return end, source.slice(start, end)


def expect_string(source: Source, start: int) -> tuple[int, str]:
    """Recognize a naked, quoted or bracketed string starting at `start`."""
    first = source.peek(start)
    if first is None:
        raise ArgumentSyntaxError("Expected string, found end of input")
    if first in BRACKET_OPEN_CHARS:
        start, left = _expect_bracket_run(source, start)
    elif first in QUOTE_CHARS:
        start, left = _expect_quote_run(source, start)
    elif first in SIGIL_CHARS:
        raise ArgumentSyntaxError(f"Expected string, found {quote_char(first)}")
    else:
        return expect_naked_string(source, start)
    return expect_delimited(source, start, left, closing_delimiter(left))
