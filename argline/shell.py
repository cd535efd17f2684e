# Argline — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Main class for receiving prefixed messages and dispatching them to commands.

`Shell` sits between a message transport and the registered commands:

- Messages that do not start with the configured default prefix are ignored.
- Addressed messages are tokenized with `argline.parse()`; syntax errors are
  sent back to the user verbatim.
- The leading prefix tokens are checked and stripped, and the remaining tokens
  are dispatched to the command registered under the first token's name.

Replies go through a pluggable transport, any callable (sync or async) taking
the reply text. The default transport renders replies as Markdown on the rich
console. `repl()` runs an interactive prompt_toolkit session that feeds each
entered line to `handle_message()`.

Example:
    shell = Shell("!bot")
    await shell.handle_message('!bot echo "hello there"')
"""
from __future__ import annotations

from functools import cached_property
from pathlib import Path
from typing import Any, Awaitable, Callable, Sequence

from prompt_toolkit import PromptSession
from prompt_toolkit.formatted_text import AnyFormattedText
from prompt_toolkit.history import FileHistory, History, InMemoryHistory
from rich.console import Console
from rich.markdown import Markdown

from argline.command import Command
from argline.commands import get_builtin_commands
from argline.completer import ArglineCompleter
from argline.console import console
from argline.exceptions import (
    ArgumentSyntaxError,
    CommandAlreadyExistsError,
    ConfigError,
    InvalidCommandError,
)
from argline.logger import logger
from argline.parser import Arg, parse
from argline.parser.utils import quote_str
from argline.signals import QuitSignal
from argline.utils import ensure_async
from argline.validators import ArgumentLineValidator

EXIT_WORDS = ("exit", "quit")


class Shell:
    """
    Prefix-addressed command dispatcher.

    Args:
        default_prefix (str): Text every addressed message starts with. It must
            itself tokenize cleanly; its tokens are compared against the leading
            tokens of each message.
        transport (Callable[[str], Any] | None): Sends reply text to the user.
            Defaults to printing Markdown on the console.
        prompt (AnyFormattedText): Prompt shown by `repl()`.
        welcome_message (str): Printed when `repl()` starts.
        exit_message (str): Printed when `repl()` ends.
        history_file (Path | str | None): File backing the REPL history; in-memory
            history is used when omitted.
        include_builtins (bool): Register the batch, echo and help commands.

    Raises:
        ConfigError: If `default_prefix` cannot be tokenized.
    """

    def __init__(
        self,
        default_prefix: str,
        transport: Callable[[str], Any] | None = None,
        prompt: AnyFormattedText = "argline > ",
        welcome_message: str = "",
        exit_message: str = "",
        history_file: Path | str | None = None,
        include_builtins: bool = True,
        console: Console = console,
    ) -> None:
        try:
            prefix_args = parse(default_prefix)
        except ArgumentSyntaxError as error:
            raise ConfigError(
                f"Default prefix {quote_str(default_prefix)} should be a valid "
                f"sequence of arguments: {error}"
            ) from error
        self.default_prefix: str = default_prefix
        self.default_prefix_args: tuple[Arg, ...] = tuple(prefix_args)
        self.commands: dict[str, Command] = {}
        self.console: Console = console
        self.transport: Callable[[str], Awaitable[Any]] = ensure_async(
            transport or self._print_reply
        )
        self.prompt: AnyFormattedText = prompt
        self.welcome_message: str = welcome_message
        self.exit_message: str = exit_message
        self.history_file: Path | None = Path(history_file) if history_file else None
        if include_builtins:
            self.register_all(get_builtin_commands())

    def register(self, command: Command) -> None:
        """Register `command` under every one of its prefixes."""
        if not isinstance(command, Command):
            raise InvalidCommandError("command must be an instance of Command.")
        collisions = [name for name in command.prefixes if name in self.commands]
        if collisions:
            raise CommandAlreadyExistsError(
                f"Duplicate command name(s) {', '.join(map(quote_str, collisions))} "
                f"for {command}."
            )
        for name in command.prefixes:
            self.commands[name] = command
        logger.debug("Registered %s", command)

    def register_all(self, commands: Sequence[Command]) -> None:
        for command in commands:
            self.register(command)

    def get_command(self, name: str) -> Command | None:
        return self.commands.get(name)

    def command_names(self) -> list[str]:
        return sorted(self.commands)

    async def _print_reply(self, text: str) -> None:
        self.console.print(Markdown(text))

    async def say(self, text: str) -> None:
        """Send `text` through the transport; failures are logged, not raised."""
        try:
            await self.transport(text)
        except Exception as error:
            logger.error(
                "Error sending message (%s): %s\nContent: %r",
                type(error).__name__,
                error,
                text,
                exc_info=True,
            )

    async def handle_message(self, content: str) -> bool:
        """
        Handle one incoming message.

        Returns:
            bool: True if the message was addressed to the shell (started with the
            default prefix), whether or not it ran successfully.
        """
        if not content.startswith(self.default_prefix):
            return False
        logger.info("Received command message: %r", content)
        try:
            args = parse(content)
        except ArgumentSyntaxError as error:
            logger.info("Argument parsing error: %s", error)
            await self.say(f"```\n{error}\n```")
            return True

        prefix = self.default_prefix_args
        if tuple(args[: len(prefix)]) != prefix:
            await self.say(
                f"```\nThe default prefix ({quote_str(self.default_prefix)}) is somehow "
                "messed up; did you forget to add a space?\n```"
            )
            return True
        await self.run_command(args[len(prefix) :])
        return True

    async def run_command(self, args: Sequence[Arg]) -> None:
        """Dispatch `args` to the command named by its first token."""
        if not args:
            await self.say(f"Hi! Try running `{self.default_prefix} help`!!")
            return
        name = str(args[0])
        command = self.get_command(name)
        if command is None:
            await self.say(f"The command {name} doesn't exist.")
            return
        logger.debug("[%s] Running %s with %r", name, command, list(args[1:]))
        try:
            await command.run(self, list(args))
        except Exception as error:
            logger.error(
                "[%s] Error (%s): %s", name, type(error).__name__, error, exc_info=True
            )
            await self.say(f"```\nError running {name}: {error}\n```")

    def address(self, line: str) -> str:
        """Prepend the default prefix to `line` unless it already starts with it."""
        if line.startswith(self.default_prefix):
            return line
        return f"{self.default_prefix} {line}"

    def _get_history(self) -> History:
        if self.history_file:
            self.history_file.parent.mkdir(parents=True, exist_ok=True)
            return FileHistory(str(self.history_file))
        return InMemoryHistory()

    @cached_property
    def prompt_session(self) -> PromptSession:
        """Returns the prompt session for the REPL."""
        return PromptSession(
            message=self.prompt,
            history=self._get_history(),
            multiline=False,
            completer=ArglineCompleter(self),
            validator=ArgumentLineValidator(),
            validate_while_typing=False,
            interrupt_exception=QuitSignal,
            eof_exception=QuitSignal,
        )

    async def repl(self) -> None:
        """Read lines interactively and handle each one as a message."""
        logger.info("Starting shell with prefix %r", self.default_prefix)
        if self.welcome_message:
            self.console.print(self.welcome_message)
        try:
            while True:
                try:
                    line = await self.prompt_session.prompt_async()
                except QuitSignal:
                    logger.info("[QuitSignal]. <- Exiting shell.")
                    break
                line = line.strip()
                if not line:
                    continue
                if line in EXIT_WORDS:
                    break
                await self.handle_message(self.address(line))
        finally:
            logger.info("Exiting shell.")
            if self.exit_message:
                self.console.print(self.exit_message)

    def __str__(self) -> str:
        return f"Shell(prefix={self.default_prefix!r}, commands={len(self.commands)})"
