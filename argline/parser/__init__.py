"""
Argline

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .arg import Arg, Flag, Keyword, Positional, Span
from .line_parser import parse
from .matcher import DelimiterAutomaton, closing_delimiter, expect_delimited
from .scanner import Source

__all__ = [
    "Arg",
    "Flag",
    "Keyword",
    "Positional",
    "Span",
    "parse",
    "DelimiterAutomaton",
    "closing_delimiter",
    "expect_delimited",
    "Source",
]
