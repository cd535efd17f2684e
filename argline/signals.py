# Argline — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines flow control signals used by the Argline shell.

Signals inherit from `FlowSignal`, a subclass of `BaseException`, so that they
bypass standard `except Exception` blocks in command handlers.

Signals:
- QuitSignal: Terminate the interactive session.
"""


class FlowSignal(BaseException):
    """Base class for all flow control signals in Argline.

    These are not errors. They're used to control flow like quitting the REPL.
    """


class QuitSignal(FlowSignal):
    """Raised to signal an immediate exit from the interactive shell."""

    def __init__(self, message: str = "Quit signal received."):
        super().__init__(message)
