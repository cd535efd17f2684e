# Argline — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by Argline.

The tokenizer reports every syntax problem through a single exception type,
`ArgumentSyntaxError`, whose message is meant to be shown to the user verbatim.
Callers cannot branch on the kind of syntax error, only display it.

Exception Hierarchy:
- ArglineError
    ├── ArgumentSyntaxError
    ├── CommandAlreadyExistsError
    ├── InvalidCommandError
    └── ConfigError
"""


class ArglineError(Exception):
    """Base exception for Argline."""


class ArgumentSyntaxError(ArglineError):
    """Exception raised when a line cannot be tokenized into arguments."""


class CommandAlreadyExistsError(ArglineError):
    """Exception raised when a command alias is already registered."""


class InvalidCommandError(ArglineError):
    """Exception raised when a registered object is not a Command."""


class ConfigError(ArglineError):
    """Exception raised when the configuration cannot be loaded or is invalid."""
