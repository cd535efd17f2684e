"""
Argline

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import asyncio
import logging
import sys
from argparse import ArgumentParser, Namespace, _SubParsersAction
from pathlib import Path
from typing import Sequence

from rich.markup import escape
from rich.table import Table

from argline.config import ShellConfig, build_config, load_config
from argline.console import console
from argline.exceptions import ArgumentSyntaxError, ConfigError
from argline.parser import Arg, Flag, Keyword, Positional, parse
from argline.utils import setup_logging
from argline.version import __version__


def get_parsers() -> tuple[ArgumentParser, _SubParsersAction]:
    root_parser = ArgumentParser(
        prog="argline",
        description="Argline - tokenize prefixed command lines and dispatch them.",
        epilog="Tip: Use 'argline tokens LINE' to see how a line is tokenized.",
    )
    root_parser.add_argument(
        "-c", "--config", type=Path, help="Path to a YAML or TOML config file."
    )
    root_parser.add_argument(
        "-p", "--prefix", help="Default prefix messages must start with."
    )
    root_parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging."
    )
    root_parser.add_argument(
        "--log-file", default=None, help="Also write debug logs to this file."
    )
    root_parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    subparsers = root_parser.add_subparsers(dest="command")
    tokens_parser = subparsers.add_parser(
        "tokens",
        help="Print the argument tokens of a line",
        description="Tokenize LINE and print one row per argument.",
    )
    tokens_parser.add_argument("line", help="The line to tokenize.")
    send_parser = subparsers.add_parser(
        "send",
        help="Handle one message and print the replies",
        description="Handle LINE as a message addressed with the default prefix.",
    )
    send_parser.add_argument("line", help="The message text, including the prefix.")
    subparsers.add_parser(
        "repl",
        help="Start the interactive shell (default)",
        description="Read lines interactively; the prefix is added when omitted.",
    )
    return root_parser, subparsers


def build_tokens_table(args: Sequence[Arg]) -> Table:
    table = Table(title="Arguments", show_lines=False)
    table.add_column("#", justify="right", style="argline.comment")
    table.add_column("Kind", style="argline.kind")
    table.add_column("Name")
    table.add_column("Value", style="argline.value")
    table.add_column("Span", style="argline.comment")
    for index, arg in enumerate(args, 1):
        span = f"{arg.span.start}..{arg.span.end}" if arg.span else ""
        match arg:
            case Positional(text=text):
                row = ("positional", "", text)
            case Keyword(name=name, text=text):
                row = ("keyword", name, text)
            case Flag(enabled=enabled, name=name):
                row = ("flag", name, "on" if enabled else "off")
        table.add_row(str(index), *(escape(cell) for cell in row), span)
    return table


def resolve_config(cli_args: Namespace) -> ShellConfig:
    config = load_config(cli_args.config)
    if cli_args.prefix is not None:
        config = build_config({**config.model_dump(), "default_prefix": cli_args.prefix})
    return config


def main(argv: Sequence[str] | None = None) -> int:
    root_parser, _ = get_parsers()
    cli_args = root_parser.parse_args(argv)
    setup_logging(
        log_filename=cli_args.log_file,
        console_log_level=logging.DEBUG if cli_args.verbose else logging.WARNING,
    )

    if cli_args.command == "tokens":
        try:
            args = parse(cli_args.line)
        except ArgumentSyntaxError as error:
            console.print(f"[argline.error]{escape(str(error))}[/]")
            return 1
        console.print(build_tokens_table(args))
        return 0

    try:
        config = resolve_config(cli_args)
    except ConfigError as error:
        console.print(f"[argline.error]{escape(str(error))}[/]")
        return 1
    shell = config.to_shell()

    if cli_args.command == "send":
        handled = asyncio.run(shell.handle_message(cli_args.line))
        if not handled:
            console.print(
                f"[argline.comment]Ignored: message does not start with "
                f"{escape(repr(shell.default_prefix))}.[/]"
            )
            return 1
        return 0

    asyncio.run(shell.repl())
    return 0


if __name__ == "__main__":
    sys.exit(main())
