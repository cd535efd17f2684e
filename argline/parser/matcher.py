# Argline — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Delimited string extraction.

A delimited string starts with an opening delimiter `left` chosen by the user at
parse time (a run of quotes such as `'''`, or a bracket stack such as `([{|`).
The closing delimiter `right` is derived from it by mirroring each bracket and
reversing the order, so `([{|` closes with `|}])`.

`expect_delimited()` finds the first occurrence of `right` after the opening
delimiter while rejecting any occurrence of `left` in between. Both searches run
in the same left-to-right pass, each driven by its own `DelimiterAutomaton`
(Knuth-Morris-Pratt matching), so extraction is linear in the input length.

When `left == right`, which is always the case for quote runs, the closing
automaton is checked first and wins every tie. A quote run therefore closes at
the first exact recurrence of itself, and shorter runs of the same quote
character may appear freely inside the string:

    ''it's mine''   ->   it's mine
"""
from __future__ import annotations

from argline.exceptions import ArgumentSyntaxError
from argline.parser.scanner import Source
from argline.parser.utils import quote_str

MIRRORED_DELIMITERS: dict[str, str] = {
    "(": ")",
    "[": "]",
    "{": "}",
    "|": "|",
    "'": "'",
    '"': '"',
    "`": "`",
}


def closing_delimiter(left: str) -> str:
    """Return the closing delimiter for the opening delimiter `left`."""
    try:
        return "".join(MIRRORED_DELIMITERS[char] for char in reversed(left))
    except KeyError as error:
        raise ValueError(f"Bad string delimiter in {left!r}: {error.args[0]!r}") from None


def failure_table(pattern: str) -> list[int]:
    """
    Build the KMP failure table for `pattern`.

    `table[k]` is the length of the longest proper border (prefix that is also a
    suffix) of `pattern[:k]`, for `0 <= k <= len(pattern)`.
    """
    table = [0] * (len(pattern) + 1)
    border = 0
    for index in range(1, len(pattern)):
        char = pattern[index]
        while border and pattern[border] != char:
            border = table[border]
        if pattern[border] == char:
            border += 1
        table[index + 1] = border
    return table


class DelimiterAutomaton:
    """
    Incremental substring matcher for a single delimiter.

    Feed the scanned text one character at a time with `step()`; it returns True
    whenever the characters seen so far end with a complete occurrence of the
    pattern. An empty pattern matches at every step.
    """

    __slots__ = ("pattern", "table", "matched")

    def __init__(self, pattern: str) -> None:
        self.pattern: str = pattern
        self.table: list[int] = failure_table(pattern)
        self.matched: int = 0

    def step(self, char: str) -> bool:
        pattern = self.pattern
        if not pattern:
            return True
        if self.matched == len(pattern):
            self.matched = self.table[self.matched]
        while self.matched and pattern[self.matched] != char:
            self.matched = self.table[self.matched]
        if pattern[self.matched] == char:
            self.matched += 1
        return self.is_matched

    @property
    def is_matched(self) -> bool:
        return self.matched == len(self.pattern)

    def __repr__(self) -> str:
        return f"DelimiterAutomaton(pattern={self.pattern!r}, matched={self.matched})"


def expect_delimited(source: Source, start: int, left: str, right: str) -> tuple[int, str]:
    """
    Extract the string content between an opening and a closing delimiter.

    Args:
        source (Source): The input line.
        start (int): Byte offset immediately after the opening delimiter.
        left (str): The opening delimiter that was consumed.
        right (str): The closing delimiter to look for.

    Returns:
        tuple[int, str]: The offset just past the closing delimiter and the content
        strictly between the delimiters.

    Raises:
        ArgumentSyntaxError: If `left` occurs again before `right`, or if the input
        ends before `right` is found.
    """
    left_matcher = DelimiterAutomaton(left)
    right_matcher = DelimiterAutomaton(right)
    right_width = len(right.encode("utf-8"))
    for _, end, char in source.scalars(start):
        if right_matcher.step(char):
            return end, source.slice(start, end - right_width)
        if left_matcher.step(char):
            raise ArgumentSyntaxError(
                f"Opening delimiter (here: {quote_str(left)}) not allowed in string content"
            )
    raise ArgumentSyntaxError(
        f"Unclosed string at end-of-input (left: {quote_str(left)}, "
        f"expected right: {quote_str(right)})"
    )
