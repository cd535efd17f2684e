import asyncio
from typing import Sequence

from argline import Arg, Command, Flag, Keyword, Positional, Shell


class Greet(Command):
    """Greet someone, optionally loudly."""

    prefixes = ("greet", "hi")

    def help(self, args: Sequence[Arg]) -> str:
        return "***greet <name> [greeting=<text>] [+loud]*** - say hello."

    async def run(self, shell: Shell, args: Sequence[Arg]) -> None:
        name, greeting, loud = "world", "Hello", False
        for arg in args[1:]:
            match arg:
                case Positional(text=text):
                    name = text
                case Keyword(name="greeting", text=text):
                    greeting = text
                case Keyword(name=other):
                    await shell.say(f"Unknown keyword `{other}`")
                    return
                case Flag(enabled=enabled, name="loud"):
                    loud = enabled
                case Flag(name=other):
                    await shell.say(f"Unknown flag `{other}`")
                    return
        message = f"{greeting}, {name}!"
        await shell.say(message.upper() if loud else message)


async def main() -> None:
    shell = Shell("!bot", welcome_message="Try: greet 'Ada Lovelace' +loud")
    shell.register(Greet())
    await shell.handle_message("!bot greet ((Grace Hopper)) greeting=Howdy")
    await shell.handle_message("!bot batch ; hi Ada +loud ; help greet")
    await shell.repl()


if __name__ == "__main__":
    asyncio.run(main())
