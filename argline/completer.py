# Argline — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Provides `ArglineCompleter`, command-name completion for the Argline REPL.

Completion is offered for the first word after the default prefix (the command
name) and for the word following a help command (the help topic). Prompt lines
may be typed with or without the default prefix.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from argline.commands.help import HelpCommand

if TYPE_CHECKING:
    from argline.shell import Shell


class ArglineCompleter(Completer):
    """
    Prompt Toolkit completer for Argline shell input.

    Args:
        shell (Shell): The shell providing the registered command names.
    """

    def __init__(self, shell: Shell):
        self.shell = shell

    def get_completions(self, document: Document, complete_event) -> Iterable[Completion]:
        text = document.text_before_cursor
        prefix = self.shell.default_prefix
        if prefix and text.startswith(prefix):
            text = text[len(prefix) :]
            if not text[:1].isspace():
                return

        words = text.split()
        if not text or text[-1].isspace():
            words.append("")
        if len(words) == 1:
            yield from self._suggest_commands(words[0])
        elif len(words) == 2 and isinstance(
            self.shell.get_command(words[0]), HelpCommand
        ):
            yield from self._suggest_commands(words[1])

    def _suggest_commands(self, stub: str) -> Iterable[Completion]:
        for name in self.shell.command_names():
            if name.startswith(stub):
                yield Completion(name, start_position=-len(stub))
