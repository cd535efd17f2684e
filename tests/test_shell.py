import logging

import pytest

from argline import Command, Positional, Shell
from argline.exceptions import (
    CommandAlreadyExistsError,
    ConfigError,
    InvalidCommandError,
)
from argline.signals import QuitSignal


class Boom(Command):
    prefixes = ("boom",)

    def help(self, args):
        return "explodes"

    async def run(self, shell, args):
        raise RuntimeError("kaboom")


class FakePromptSession:
    def __init__(self, lines):
        self.lines = iter(lines)

    async def prompt_async(self):
        try:
            return next(self.lines)
        except StopIteration:
            raise QuitSignal() from None


@pytest.mark.asyncio
async def test_ignores_messages_without_prefix(shell, replies):
    assert await shell.handle_message("hello there") is False
    assert replies == []


@pytest.mark.asyncio
async def test_prefix_only_greets(shell, replies):
    assert await shell.handle_message("!bot") is True
    assert replies == ["Hi! Try running `!bot help`!!"]


@pytest.mark.asyncio
async def test_unknown_command(shell, replies):
    await shell.handle_message("!bot nope 1 2")
    assert replies == ["The command nope doesn't exist."]


@pytest.mark.asyncio
async def test_syntax_error_is_replied_verbatim(shell, replies):
    assert await shell.handle_message("!bot echo 'unclosed") is True
    assert replies == [
        "```\nUnclosed string at end-of-input (left: \"'\", expected right: \"'\")\n```"
    ]


@pytest.mark.asyncio
async def test_prefix_without_space(shell, replies):
    await shell.handle_message("!botecho hi")
    assert replies == [
        '```\nThe default prefix ("!bot") is somehow messed up; '
        "did you forget to add a space?\n```"
    ]


@pytest.mark.asyncio
async def test_multi_token_prefix(replies):
    shell = Shell("hey bot", transport=replies.append)
    assert shell.default_prefix_args == (Positional("hey"), Positional("bot"))
    await shell.handle_message("hey bot echo x")
    await shell.handle_message("hey botecho x")
    assert replies[0] == "x"
    assert "somehow messed up" in replies[1]


def test_invalid_prefix_is_rejected():
    with pytest.raises(ConfigError, match="should be a valid sequence of arguments"):
        Shell("a=")


def test_register_rejects_duplicates(shell):
    class Other(Command):
        prefixes = ("other", "echo")

        def help(self, args):
            return ""

        async def run(self, shell, args):
            pass

    with pytest.raises(CommandAlreadyExistsError):
        shell.register(Other())
    assert shell.get_command("other") is None


def test_register_rejects_non_commands(shell):
    with pytest.raises(InvalidCommandError):
        shell.register(object())


def test_builtins():
    assert Shell("!bot").command_names() == sorted(
        ["batch", "bat", "echo", "join", "printargs", "print_args", "printArgs", "h", "help"]
    )
    assert Shell("!bot", include_builtins=False).command_names() == []


@pytest.mark.asyncio
async def test_command_errors_are_reported(shell, replies, caplog):
    shell.register(Boom())
    with caplog.at_level(logging.ERROR, logger="argline"):
        await shell.handle_message("!bot batch ; boom ; echo still")
    assert replies == ["```\nError running boom: kaboom\n```", "still"]
    assert "kaboom" in caplog.text


@pytest.mark.asyncio
async def test_transport_failures_are_logged(caplog):
    async def broken(text):
        raise ConnectionError("offline")

    shell = Shell("!bot", transport=broken)
    with caplog.at_level(logging.ERROR, logger="argline"):
        assert await shell.handle_message("!bot echo hi") is True
    assert "offline" in caplog.text


@pytest.mark.asyncio
async def test_async_transport():
    received = []

    async def transport(text):
        received.append(text)

    shell = Shell("!bot", transport=transport)
    await shell.handle_message("!bot echo async")
    assert received == ["async"]


@pytest.mark.asyncio
async def test_default_transport_prints(capsys):
    shell = Shell("!bot")
    await shell.handle_message("!bot echo printed")
    assert "printed" in capsys.readouterr().out


def test_address(shell):
    assert shell.address("echo x") == "!bot echo x"
    assert shell.address("!bot echo x") == "!bot echo x"
    assert Shell("").address("echo x") == "echo x"


@pytest.mark.asyncio
async def test_repl_handles_lines_until_exit(shell, replies):
    shell.__dict__["prompt_session"] = FakePromptSession(
        ["echo one", "   ", "!bot echo two", "exit", "echo never"]
    )
    await shell.repl()
    assert replies == ["one", "two"]


@pytest.mark.asyncio
async def test_repl_stops_on_quit_signal(replies, capsys):
    shell = Shell(
        "!bot",
        transport=replies.append,
        welcome_message="Welcome!",
        exit_message="Goodbye!",
    )
    shell.__dict__["prompt_session"] = FakePromptSession(["join a b"])
    await shell.repl()
    assert replies == ["ab"]
    out = capsys.readouterr().out
    assert "Welcome!" in out
    assert "Goodbye!" in out


def test_str(shell):
    assert str(shell) == "Shell(prefix='!bot', commands=9)"
