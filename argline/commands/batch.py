# Argline — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `BatchCommand`, which runs several commands from one message.

The first argument after the command name is the separator; every following
argument equal to it starts a new command:

    !bot batch ; echo one ; echo two ; help
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from argline.command import Command
from argline.logger import logger
from argline.parser import Arg, Positional

if TYPE_CHECKING:
    from argline.shell import Shell

BATCH_HELP = """\
__SIGNATURE__
with ***<this>*** being **bat** or **batch**,
***<this> <sep> <command> <args...> (<sep> <command> <args...>)**** - run all \
attached commands sequentially, separated by ***<sep>***.
__CAVEATS__
- the separator needs to stay consistent throughout one usage of `batch`; the \
first argument is taken to be the expected separator.
- the separator must be a positional argument.
- put spaces before and after the separator.
- commands cannot see a string's delimiters, so `";"` and `;` are the same \
separator.
- unquoted newlines may not be used as separators, since they are not visible \
to commands.
"""


def split_on_separator(args: Sequence[Arg], separator: Arg) -> list[list[Arg]]:
    """Split `args` on every argument equal to `separator`, dropping empty runs."""
    segments: list[list[Arg]] = []
    current: list[Arg] = []
    for arg in args:
        if arg == separator:
            if current:
                segments.append(current)
            current = []
        else:
            current.append(arg)
    if current:
        segments.append(current)
    return segments


class BatchCommand(Command):
    """Run every separator-delimited command in sequence."""

    prefixes = ("batch", "bat")

    def help(self, args: Sequence[Arg]) -> str:
        return BATCH_HELP

    async def run(self, shell: Shell, args: Sequence[Arg]) -> None:
        rest = args[1:]
        if not rest:
            await shell.say("(**batch** | no arguments, not even a separator)")
            return
        separator = rest[0]
        if not isinstance(separator, Positional):
            await shell.say(
                "```\nExpected positional-argument separator; "
                f"found {separator} ({separator!r})\n```"
            )
            return
        segments = split_on_separator(rest[1:], separator)
        if not segments:
            await shell.say("(**batch** | no commands, only separators)")
            return
        logger.debug("[batch] Running %d command(s) split on %r", len(segments), str(separator))
        for segment in segments:
            await shell.run_command(segment)
