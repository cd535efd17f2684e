# Argline — (c) 2025 rtj.dev LLC — MIT Licensed
"""Defines `HelpCommand`, which lists commands or shows help for one of them."""
from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from argline.command import Command
from argline.parser import Arg

if TYPE_CHECKING:
    from argline.shell import Shell

HELP_HELP = """\
__SIGNATURE__
with ***<this>*** being either **help** or just **h**,
- ***<this>*** - print general help about the shell.
- ***<this> <thing> <args...>*** - print help associated with \
***<thing> <args...>***, where ***<thing>*** can be a command or a topic.
"""


class HelpCommand(Command):
    """Show general help, or the help text of a named command."""

    prefixes = ("h", "help")

    def help(self, args: Sequence[Arg]) -> str:
        return HELP_HELP

    async def run(self, shell: Shell, args: Sequence[Arg]) -> None:
        rest = args[1:]
        if not rest:
            lines = [
                f"__GENERAL SYNTAX__ {shell.default_prefix} ***<command> <args...>***",
                "__FOR HELP__ ... (**h** or **help**) ***<command or topic> <...>***",
                "__AVAILABLE TOPICS AND COMMANDS__",
            ]
            lines.extend(f"- **{name}**" for name in shell.command_names())
            await shell.say("\n".join(lines) + "\n")
            return
        topic = str(rest[0])
        command = shell.get_command(topic)
        if command is None:
            await shell.say(f'Didn\'t find topic "{topic}"')
            return
        await shell.say(command.help(rest))
