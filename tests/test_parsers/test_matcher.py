import pytest

from argline.exceptions import ArgumentSyntaxError
from argline.parser.matcher import (
    DelimiterAutomaton,
    closing_delimiter,
    expect_delimited,
    failure_table,
)
from argline.parser.scanner import Source


@pytest.mark.parametrize(
    "left, right",
    [
        ("(", ")"),
        ("([{", "}])"),
        ("([{|", "|}])"),
        ("(|", "|)"),
        ("|", "|"),
        ("'''", "'''"),
        ('"', '"'),
        ("``", "``"),
    ],
)
def test_closing_delimiter(left, right):
    assert closing_delimiter(left) == right


def test_closing_delimiter_rejects_unknown_characters():
    with pytest.raises(ValueError):
        closing_delimiter("(x")


def test_failure_table():
    assert failure_table("") == [0]
    assert failure_table("abab") == [0, 0, 0, 1, 2]
    assert failure_table("aaa") == [0, 0, 1, 2]
    assert failure_table("|)") == [0, 0, 0]


def test_automaton_finds_overlapping_matches():
    automaton = DelimiterAutomaton("aba")
    assert [automaton.step(char) for char in "ababa"] == [
        False,
        False,
        True,
        False,
        True,
    ]


def test_automaton_falls_back_after_partial_match():
    automaton = DelimiterAutomaton("])")
    assert [automaton.step(char) for char in "]x])"] == [False, False, False, True]


def test_empty_automaton_always_matches():
    automaton = DelimiterAutomaton("")
    assert automaton.step("a")
    assert automaton.step("b")


def test_expect_delimited_returns_content_and_end():
    assert expect_delimited(Source("(a)"), 1, "(", ")") == (3, "a")
    assert expect_delimited(Source("(a) rest"), 1, "(", ")") == (3, "a")


def test_expect_delimited_multibyte_content():
    assert expect_delimited(Source("(é€)"), 1, "(", ")") == (7, "é€")


def test_expect_delimited_allows_partial_closers():
    assert expect_delimited(Source("([a]b])"), 2, "([", "])") == (7, "a]b")


def test_expect_delimited_allows_partial_openers():
    assert expect_delimited(Source("([a(b])"), 2, "([", "])") == (7, "a(b")


def test_expect_delimited_rejects_reoccurring_opener():
    with pytest.raises(ArgumentSyntaxError) as error:
        expect_delimited(Source("(a(b)"), 1, "(", ")")
    assert str(error.value) == 'Opening delimiter (here: "(") not allowed in string content'


def test_expect_delimited_unclosed():
    with pytest.raises(ArgumentSyntaxError) as error:
        expect_delimited(Source("''abc"), 2, "''", "''")
    assert (
        str(error.value)
        == "Unclosed string at end-of-input (left: \"''\", expected right: \"''\")"
    )


def test_identical_delimiters_close_instead_of_failing():
    # The closing check runs first, so a quote run never reports re-occurrence.
    assert expect_delimited(Source("''x''y''"), 2, "''", "''") == (5, "x")
    assert expect_delimited(Source("|a|"), 1, "|", "|") == (3, "a")
