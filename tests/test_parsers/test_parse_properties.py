from concurrent.futures import ThreadPoolExecutor

import pytest

from argline import ArgumentSyntaxError, Positional, parse


@pytest.mark.parametrize("word", ["hello", "naïve", "日本語", "x/y.z", "a*b", "!bot", "_"])
def test_single_bare_word_is_one_positional(word):
    assert parse(word) == [Positional(word)]


@pytest.mark.parametrize("quote", ["'", '"', "`"])
@pytest.mark.parametrize("n", [1, 2, 3, 4])
def test_shorter_quote_runs_survive_inside(quote, n):
    for m in range(n):
        inner = f"a{quote * m}b"
        assert parse(f"{quote * n}{inner}{quote * n}") == [Positional(inner)]


def test_parse_is_idempotent():
    line = "batch ; echo 'a b' ; printargs k=(v) +f -g ``x``"
    first = parse(line)
    second = parse(line)
    assert first == second
    assert [arg.span for arg in first] == [arg.span for arg in second]


def test_parse_is_thread_safe():
    line = "a 'b c' k=[d] +e " * 50
    expected = parse(line)
    with ThreadPoolExecutor(max_workers=8) as executor:
        results = list(executor.map(parse, [line] * 32))
    assert all(result == expected for result in results)


def test_many_components():
    assert parse("a " * 5000) == [Positional("a")] * 5000


def test_deep_bracket_stack():
    assert parse("(" * 50 + "x" + ")" * 50) == [Positional("x")]


@pytest.mark.parametrize(
    "line",
    [
        "(" + "x" * 10_000,
        "'" * 10_000,
        "([" + "x" * 10_000 + "([",
        "x" * 10_000 + "=",
        "a" + " +" * 5_000,
        "é" * 10_000 + "'",
    ],
)
def test_long_malformed_input_fails_cleanly(line):
    with pytest.raises(ArgumentSyntaxError):
        parse(line)
