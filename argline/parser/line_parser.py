# Argline — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Component parser and the top-level `parse()` entry point.

Grammar:

    <cmd>        ::= (<component> SP?)*
    <component>  ::= <flag> | <keyword> | <positional>
    <flag>       ::= ('+' | '-') <ident>
    <keyword>    ::= <ident> '=' <string>
    <positional> ::= <string>

Components are separated by whitespace. A string must be followed by
whitespace or end-of-input, so `"a""b"` is an error rather than one string.
Parsing is all-or-nothing: the first failure aborts the whole line.

Example:
    >>> parse('greet name="Ada Lovelace" +loud')
    [Positional(text='greet'), Keyword(name='name', text='Ada Lovelace'), Flag(enabled=True, name='loud')]
"""
from __future__ import annotations

from argline.exceptions import ArgumentSyntaxError
from argline.logger import logger
from argline.parser.arg import Arg, Flag, Keyword, Positional, Span
from argline.parser.lexer import EQUAL, MINUS, PLUS, expect_ident, expect_string
from argline.parser.scanner import Source, is_whitespace, trim_end
from argline.parser.utils import quote_char


def parse(line: str) -> list[Arg]:
    """
    Tokenize one line of text into argument tokens.

    Trailing whitespace is ignored. Leading whitespace before the first component
    is allowed; every later component must be preceded by whitespace.

    Args:
        line (str): The line to tokenize.

    Returns:
        list[Arg]: Positional, keyword and flag tokens in order of appearance.

    Raises:
        ArgumentSyntaxError: Describes the first problem found in the line.
    """
    source = Source(trim_end(line))
    offset = 0
    args: list[Arg] = []
    while offset < len(source):
        try:
            offset, arg = _expect_next_arg(source, offset)
        except ArgumentSyntaxError as error:
            logger.debug(
                "Argument parsing failed at offset %d after %r: %s", offset, args, error
            )
            raise
        args.append(arg)
    return args


def _expect_next_arg(source: Source, start: int) -> tuple[int, Arg]:
    """Skip the whitespace separating components, then parse one component."""
    if source.at_end(start):
        raise ValueError("(internal) undetected end-of-input before component")
    offset = start
    for _, next_offset, char in source.scalars(start):
        if not is_whitespace(char):
            break
        offset = next_offset
    if 0 < start and start == offset:
        found = source.peek(start)
        raise ArgumentSyntaxError(
            f"Expected some whitespace before more input; found {quote_char(found)}"
        )
    return _expect_immediate_arg(source, offset)


def _expect_immediate_arg(source: Source, start: int) -> tuple[int, Arg]:
    """Parse one flag, keyword or positional component starting exactly at `start`."""
    first = source.peek(start)
    if first is None:
        raise ValueError("(internal) undetected end-of-input in component")
    if is_whitespace(first):
        raise ValueError("(internal) unhandled whitespace in component")

    if first in (PLUS, MINUS):
        end, name = expect_ident(source, start + 1)
        return end, Flag(first == PLUS, name, Span(start, end))

    end, arg = _expect_keyword_or_positional(source, start)
    following = source.peek(end)
    if following is not None and not is_whitespace(following):
        raise ArgumentSyntaxError("Strings should be followed by whitespace or end-of-input")
    return end, arg


def _expect_keyword_or_positional(source: Source, start: int) -> tuple[int, Arg]:
    try:
        ident_end, name = expect_ident(source, start)
    except ArgumentSyntaxError:
        pass
    else:
        if source.peek(ident_end) == EQUAL:
            end, text = expect_string(source, ident_end + 1)
            return end, Keyword(name, text, Span(start, end))
    end, text = expect_string(source, start)
    return end, Positional(text, Span(start, end))
