import shutil
import tempfile
from argparse import ArgumentParser, _SubParsersAction
from pathlib import Path

import pytest

import argline.__main__ as argline_main
from argline.__main__ import build_tokens_table, get_parsers, main
from argline.parser import parse
from argline.shell import Shell


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    temp_home = Path(tempfile.mkdtemp())
    monkeypatch.setattr(Path, "home", lambda: temp_home)
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ARGLINE_PREFIX", raising=False)
    monkeypatch.delenv("ARGLINE_CONFIG", raising=False)
    monkeypatch.setattr(argline_main, "setup_logging", lambda **kwargs: None)
    yield
    shutil.rmtree(temp_home, ignore_errors=True)


def test_get_parsers():
    root_parser, subparsers = get_parsers()
    assert isinstance(root_parser, ArgumentParser)
    assert isinstance(subparsers, _SubParsersAction)
    args = root_parser.parse_args(["-p", "!bot", "tokens", "a b"])
    assert args.command == "tokens"
    assert args.prefix == "!bot"
    assert args.line == "a b"
    assert root_parser.parse_args([]).command is None


def test_build_tokens_table():
    table = build_tokens_table(parse("a k=v +f"))
    assert table.row_count == 3


def test_tokens_command(capsys):
    assert main(["tokens", "a k=v -f"]) == 0
    out = capsys.readouterr().out
    assert "positional" in out
    assert "keyword" in out
    assert "flag" in out
    assert "off" in out


def test_tokens_command_error(capsys):
    assert main(["tokens", "'oops"]) == 1
    assert "Unclosed string" in capsys.readouterr().out


def test_send_command(capsys):
    assert main(["--prefix", "!bot", "send", "!bot echo hi there"]) == 0
    assert "hi there" in capsys.readouterr().out


def test_send_without_prefix(capsys):
    assert main(["--prefix", "!bot", "send", "echo hi"]) == 1
    assert "Ignored" in capsys.readouterr().out


def test_invalid_prefix(capsys):
    assert main(["--prefix", "a=", "send", "a= x"]) == 1
    assert "Invalid configuration" in capsys.readouterr().out


def test_config_file(tmp_path, capsys):
    path = tmp_path / "custom.yaml"
    path.write_text("default_prefix: '?q'\n", encoding="UTF-8")
    assert main(["-c", str(path), "send", "?q join a b"]) == 0
    assert "ab" in capsys.readouterr().out


def test_repl_is_default(monkeypatch):
    started = []

    async def fake_repl(self):
        started.append(self.default_prefix)

    monkeypatch.setattr(Shell, "repl", fake_repl)
    assert main([]) == 0
    assert started == ["!arg"]


def test_version(capsys):
    with pytest.raises(SystemExit):
        main(["--version"])
    assert "argline" in capsys.readouterr().out
