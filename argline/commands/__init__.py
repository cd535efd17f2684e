"""
Argline

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from argline.command import Command

from .batch import BatchCommand
from .echo import EchoCommand
from .help import HelpCommand


def get_builtin_commands() -> list[Command]:
    """Return fresh instances of the commands every shell ships with."""
    return [BatchCommand(), EchoCommand(), HelpCommand()]


__all__ = [
    "BatchCommand",
    "EchoCommand",
    "HelpCommand",
    "get_builtin_commands",
]
