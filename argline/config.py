# Argline — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Configuration loader for the Argline shell.

Configuration is read from a YAML or TOML file:

    default_prefix: "!bot"
    prompt: "bot > "
    welcome_message: "Type `help` to get started."
    history_file: ~/.local/share/argline/history

The `ARGLINE_PREFIX` environment variable overrides `default_prefix`.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Callable

import toml
import yaml
from pydantic import BaseModel, ValidationError, field_validator

from argline.exceptions import ArgumentSyntaxError, ConfigError
from argline.logger import logger
from argline.parser import parse
from argline.shell import Shell

DEFAULT_PREFIX = "!arg"


class ShellConfig(BaseModel):
    """Argline shell configuration model."""

    default_prefix: str = DEFAULT_PREFIX
    prompt: str = "argline > "
    welcome_message: str = ""
    exit_message: str = ""
    history_file: Path | None = None

    @field_validator("default_prefix")
    @classmethod
    def validate_default_prefix(cls, value: str) -> str:
        try:
            parse(value)
        except ArgumentSyntaxError as error:
            raise ValueError(
                f"default_prefix should be a valid sequence of arguments: {error}"
            ) from error
        return value

    @field_validator("history_file")
    @classmethod
    def expand_history_file(cls, value: Path | None) -> Path | None:
        return value.expanduser() if value else None

    def to_shell(self, transport: Callable[[str], Any] | None = None) -> Shell:
        return Shell(
            default_prefix=self.default_prefix,
            transport=transport,
            prompt=self.prompt,
            welcome_message=self.welcome_message,
            exit_message=self.exit_message,
            history_file=self.history_file,
        )


def find_config() -> Path | None:
    candidates = [
        Path.cwd() / "argline.yaml",
        Path.cwd() / "argline.toml",
        Path.cwd() / ".argline.yaml",
        Path.cwd() / ".argline.toml",
        Path(os.environ.get("ARGLINE_CONFIG", "argline.yaml")),
        Path.home() / ".config" / "argline" / "argline.yaml",
        Path.home() / ".config" / "argline" / "argline.toml",
    ]
    return next((path for path in candidates if path.is_file()), None)


def read_config_file(path: Path) -> dict[str, Any]:
    """Read a YAML or TOML configuration file into a dictionary."""
    if not path.is_file():
        raise ConfigError(f"No such config file: {path}")

    suffix = path.suffix
    try:
        with path.open("r", encoding="UTF-8") as config_file:
            if suffix in (".yaml", ".yml"):
                raw_config = yaml.safe_load(config_file)
            elif suffix == ".toml":
                raw_config = toml.load(config_file)
            else:
                raise ConfigError(f"Unsupported config format: {suffix}")
    except (yaml.YAMLError, toml.TomlDecodeError) as error:
        raise ConfigError(f"Could not parse config file {path}: {error}") from error

    if raw_config is None:
        return {}
    if not isinstance(raw_config, dict):
        raise ConfigError(
            "Configuration file must contain a mapping.\n"
            "Example:\n"
            "default_prefix: '!bot'\n"
            "prompt: 'bot > '"
        )
    return raw_config


def build_config(raw_config: dict[str, Any]) -> ShellConfig:
    try:
        return ShellConfig(**raw_config)
    except ValidationError as error:
        raise ConfigError(f"Invalid configuration: {error}") from error


def load_config(file_path: Path | str | None = None) -> ShellConfig:
    """
    Load the shell configuration.

    Args:
        file_path (Path | str | None): Config file to read. When omitted, the
            first file found by `find_config()` is used, or defaults if none exists.

    Returns:
        ShellConfig: The validated configuration.

    Raises:
        ConfigError: If the file is missing, unreadable, or holds invalid values.
    """
    path = Path(file_path) if file_path is not None else find_config()
    raw_config: dict[str, Any] = {}
    if path is not None:
        logger.debug("Loading config from %s", path)
        raw_config = read_config_file(path)

    prefix = os.environ.get("ARGLINE_PREFIX")
    if prefix is not None:
        raw_config["default_prefix"] = prefix
    return build_config(raw_config)
