# Argline — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `EchoCommand`, which prints its arguments back.

- `echo` joins the arguments with spaces.
- `join` joins them with nothing.
- `printargs` (also `print_args`, `printArgs`) lists every argument with its kind,
  which is handy for learning how a line is tokenized.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from argline.command import Command
from argline.parser import Arg, Flag, Keyword, Positional

if TYPE_CHECKING:
    from argline.shell import Shell

ECHO_HELP = """\
__SIGNATURE__
***<this> <args...>***
where ***<this>*** may be
- **echo** - print arguments, space-separated.
- **join** - print arguments with no separator.
- **printargs**, **print_args**, or **printArgs** - pretty print arguments, for \
debugging and learning purposes.
"""


def describe_arg(arg: Arg) -> str:
    match arg:
        case Positional(text=text):
            return f"positional argument `{text}`"
        case Keyword(name=name, text=text):
            return f"keyword argument {name}=`{text}`"
        case Flag(enabled=enabled, name=name):
            return f"flag ({'on' if enabled else 'off'}) {name}"
    raise TypeError(f"Not an argument token: {arg!r}")


class EchoCommand(Command):
    """Print arguments back, joined or described."""

    prefixes = ("echo", "join", "printargs", "print_args", "printArgs")

    def help(self, args: Sequence[Arg]) -> str:
        return ECHO_HELP

    async def run(self, shell: Shell, args: Sequence[Arg]) -> None:
        name = args[0] if args else None
        if not isinstance(name, Positional) or name.text not in self.prefixes:
            raise ValueError(f"echo called on wrong arguments: {list(args)!r}")
        rest = args[1:]
        if not rest:
            reply = "(empty)"
        elif name.text == "echo":
            reply = " ".join(str(arg) for arg in rest)
        elif name.text == "join":
            reply = "".join(str(arg) for arg in rest)
        else:
            reply = "".join(
                f"{index}. {describe_arg(arg)}\n" for index, arg in enumerate(rest, 1)
            )
        await shell.say(reply)
