# Argline — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py"""
from __future__ import annotations

import functools
import inspect
import logging
import os
from pathlib import Path
from typing import Any, Awaitable, Callable, TypeVar

import pythonjsonlogger.json
from rich.logging import RichHandler

from argline.logger import logger

T = TypeVar("T")

CONTAINER_MARKERS = ("docker", "kubepods", "containerd", "podman")
JSON_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
FILE_LOG_FORMAT = "%(asctime)s [%(name)s] [%(levelname)s] %(message)s"


def ensure_async(function: Callable[..., T]) -> Callable[..., Awaitable[T]]:
    """Wrap a plain callable so it can be awaited; coroutine functions pass through."""
    if not callable(function):
        raise TypeError(f"{function} is not callable")
    if inspect.iscoroutinefunction(function):
        return function  # type: ignore

    @functools.wraps(function)
    async def async_wrapper(*args, **kwargs) -> T:
        return function(*args, **kwargs)

    return async_wrapper


def running_in_container() -> bool:
    try:
        cgroup = Path("/proc/1/cgroup").read_text(encoding="UTF-8")
    except OSError:
        return False
    return any(marker in cgroup for marker in CONTAINER_MARKERS)


def default_log_mode() -> str:
    """`ARGLINE_LOG_MODE` if set, else "json" inside containers and "cli" elsewhere."""
    return os.getenv("ARGLINE_LOG_MODE") or (
        "json" if running_in_container() else "cli"
    )


def build_console_handler(mode: str) -> logging.Handler:
    if mode == "cli":
        return RichHandler(
            rich_tracebacks=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    if mode == "json":
        handler = logging.StreamHandler()
        handler.setFormatter(pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT))
        return handler
    raise ValueError(f"Invalid log mode: {mode}")


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = None,
    console_log_level: int = logging.WARNING,
) -> None:
    """
    Route log records to the console and, optionally, a debug log file.

    Args:
        mode (str | None): "cli" for Rich console logs or "json" for one JSON
            object per record. Defaults to `default_log_mode()`.
        log_filename (str | None): When given, every record down to DEBUG is
            also appended to this file.
        console_log_level (int): Minimum level shown on the console.

    Raises:
        ValueError: If `mode` is not "cli" or "json".
    """
    mode = mode or default_log_mode()
    handlers = [build_console_handler(mode)]
    handlers[0].setLevel(console_log_level)

    if log_filename:
        file_handler = logging.FileHandler(log_filename, "a", "UTF-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter(FILE_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        )
        handlers.append(file_handler)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.DEBUG)
    for handler in handlers:
        root.addHandler(handler)

    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("markdown_it").setLevel(logging.WARNING)
    logger.debug("Logging initialized in '%s' mode.", mode)
