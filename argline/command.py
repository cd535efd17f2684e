# Argline — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Command` base class for commands dispatched by the Argline shell.

A command declares every name it answers to in `prefixes`. When a message
arrives, the shell tokenizes it, looks up the first token (rendered with
`str()`) among all registered prefixes, and awaits the command's `run()` with
the full token list, including that first token. This lets one command behave
differently depending on the alias it was called by.

Example:
    class Shout(Command):
        prefixes = ("shout",)

        def help(self, args):
            return "***shout <args...>*** - say the arguments loudly."

        async def run(self, shell, args):
            await shell.say(" ".join(str(arg) for arg in args[1:]).upper())
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Sequence

from argline.parser import Arg

if TYPE_CHECKING:
    from argline.shell import Shell


class Command(ABC):
    """
    Base class for shell commands.

    Attributes:
        prefixes (tuple[str, ...]): Every name the command can be invoked by.
    """

    prefixes: tuple[str, ...] = ()

    @abstractmethod
    def help(self, args: Sequence[Arg]) -> str:
        """Return help text; `args` is the help topic line, starting with the name."""

    @abstractmethod
    async def run(self, shell: Shell, args: Sequence[Arg]) -> None:
        """Run the command; `args[0]` is the token the command was invoked by."""

    def __str__(self) -> str:
        return f"{type(self).__name__}(prefixes={list(self.prefixes)})"

    def __repr__(self) -> str:
        return str(self)
