# Argline — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the argument tokens produced by `argline.parse()`.

A parsed line is a list of tokens drawn from a closed family of three shapes:

- `Positional(text)`: a bare, quoted, or bracketed string.
- `Keyword(name, text)`: `name=string`.
- `Flag(enabled, name)`: `+name` (enabled) or `-name` (disabled).

`Arg` is the union of the three. Consumers are expected to `match` over it and
handle every shape.

Every token records the `Span` of the component it came from, as UTF-8 byte
offsets into the right-trimmed input line. Spans do not take part in equality,
so two tokens with the same content compare equal wherever they appeared.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple, Union


class Span(NamedTuple):
    """A `(start, end)` pair of UTF-8 byte offsets into the input line."""

    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class Positional:
    """A positional argument; `<string>`."""

    text: str
    span: Span | None = field(default=None, compare=False, repr=False)

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class Keyword:
    """A keyword argument; `<ident>=<string>`."""

    name: str
    text: str
    span: Span | None = field(default=None, compare=False, repr=False)

    def __str__(self) -> str:
        return f"{self.name}={self.text}"


@dataclass(frozen=True)
class Flag:
    """A flag argument; `+<ident>` (on) or `-<ident>` (off)."""

    enabled: bool
    name: str
    span: Span | None = field(default=None, compare=False, repr=False)

    def __str__(self) -> str:
        return f"{'+' if self.enabled else '-'}{self.name}"


Arg = Union[Positional, Keyword, Flag]
