# OptBag Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py"""
from __future__ import annotations

import logging
import os
import re
import sys
from typing import Sequence, TextIO

import pythonjsonlogger.json
from rich.logging import RichHandler

from optbag.exceptions import ParseError

PYTHON_EXECUTABLE_PATTERN = re.compile(r"python(\d+(\.\d+)*)?w?(\.exe)?")


def is_python_executable(entry: str) -> bool:
    """Return True if `entry` names a Python interpreter (e.g. `python3`, `/usr/bin/python`)."""
    if entry == sys.executable:
        return True
    name = os.path.basename(entry.replace("\\", "/")).lower()
    return PYTHON_EXECUTABLE_PATTERN.fullmatch(name) is not None


def strip_program_entries(argv: Sequence[str]) -> list[str]:
    """
    Drop the interpreter and program entries from a raw argument vector.

    `sys.argv` normally starts with the script name only, but embedding hosts and
    some launchers pass the interpreter too. Both leading entries are removed when
    the first one names a Python executable.
    """
    args = list(argv)
    if not args:
        return args
    if is_python_executable(args[0]) and len(args) > 1:
        return args[2:]
    return args[1:]


def read_stdin(stream: TextIO | None) -> str:
    """
    Read all of `stream` as one string.

    The read is blocking and has no timeout. Text streams that expose a binary
    `buffer` (such as `sys.stdin`) are read through it and decoded as UTF-8,
    whatever the locale encoding. Raises `ParseError` when there is no stream to
    read from or the stream cannot be read or decoded.
    """
    if stream is None:
        raise ParseError("Pipe data not found: no standard input is available")
    source = getattr(stream, "buffer", stream)
    try:
        data = source.read()
        if isinstance(data, bytes):
            data = data.decode("UTF-8")
    except (OSError, ValueError) as error:
        raise ParseError(f"Pipe data could not be read: {error}") from error
    return data


def running_in_container() -> bool:
    try:
        with open("/proc/1/cgroup", "r", encoding="UTF-8") as f:
            content = f.read()
            return (
                "docker" in content
                or "kubepods" in content
                or "containerd" in content
                or "podman" in content
            )
    except OSError:
        return False


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = None,
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
):
    """
    Configure logging for OptBag with support for both CLI-friendly and structured
    JSON output.

    Args:
        mode (str | None):
            Logging output mode. Can be:
                - "cli": human-readable Rich console logs (default outside containers)
                - "json": machine-readable JSON logs (default inside containers)
            If not provided, it will use the `OPTBAG_LOG_MODE` environment variable
            or fallback based on container detection.
        log_filename (str | None):
            Path to a log file. No file handler is installed when None.
        json_log_to_file (bool):
            Whether to format file logs as JSON (structured) instead of plain text.
        file_log_level (int):
            Logging level for file output. Defaults to `logging.DEBUG`.
        console_log_level (int):
            Logging level for console output. Defaults to `logging.WARNING`.

    Raises:
        ValueError: If an invalid logging `mode` is passed.
    """
    if not mode:
        mode = os.getenv("OPTBAG_LOG_MODE") or (
            "json" if running_in_container() else "cli"
        )

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    if root.hasHandlers():
        root.handlers.clear()

    if mode == "cli":
        console_handler: RichHandler | logging.StreamHandler = RichHandler(
            rich_tracebacks=True,
            show_time=True,
            show_level=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    elif mode == "json":
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(
            pythonjsonlogger.json.JsonFormatter(
                "%(asctime)s %(name)s %(levelname)s %(message)s"
            )
        )
    else:
        raise ValueError(f"Invalid log mode: {mode}")

    console_handler.setLevel(console_log_level)
    root.addHandler(console_handler)

    if log_filename:
        file_handler = logging.FileHandler(log_filename, "a", "UTF-8")
        file_handler.setLevel(file_log_level)
        if json_log_to_file:
            file_handler.setFormatter(
                pythonjsonlogger.json.JsonFormatter(
                    "%(asctime)s %(name)s %(levelname)s %(message)s"
                )
            )
        else:
            file_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s [%(name)s] [%(levelname)s] %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
        root.addHandler(file_handler)

    logger = logging.getLogger("optbag")
    logger.propagate = True
    logger.debug("Logging initialized in '%s' mode.", mode)
