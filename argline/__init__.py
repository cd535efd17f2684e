"""
Argline

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .command import Command
from .exceptions import ArgumentSyntaxError
from .parser import Arg, Flag, Keyword, Positional, Span, parse
from .shell import Shell

logger = logging.getLogger("argline")


__all__ = [
    "parse",
    "Arg",
    "Flag",
    "Keyword",
    "Positional",
    "Span",
    "ArgumentSyntaxError",
    "Command",
    "Shell",
]
