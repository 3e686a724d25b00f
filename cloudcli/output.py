"""Coloured console messages at the error, warning, verbose and info levels."""

from __future__ import annotations

import os
import sys
from typing import NoReturn, TextIO

from cloudcli import options

_RED = 31
_YELLOW = 33
_CYAN = 36


def _use_color(stream: TextIO) -> bool:
    if "NO_COLOR" in os.environ or os.environ.get("TERM") == "dumb":
        return False
    isatty = getattr(stream, "isatty", None)
    try:
        return bool(isatty and isatty())
    except ValueError:
        return False


def _emit(color_code: int, text: str) -> None:
    stream = sys.stdout
    if not text.endswith("\n"):
        text += "\n"
    if _use_color(stream):
        text = f"\x1b[{color_code}m{text}\x1b[0m"
    stream.write(text)
    stream.flush()


def error(message: str) -> NoReturn:
    """Print an error message and terminate the program."""
    _emit(_RED, "ERROR: " + message)
    sys.exit(-1)


def warn(message: str) -> None:
    """Print a warning message."""
    _emit(_YELLOW, "WARNING: " + message)


def verbose(message: str) -> None:
    """Print a message only when verbose output is enabled."""
    if options.GLOBAL.verbose:
        _emit(_CYAN, message)


def info(message: str) -> None:
    """Print an informational message."""
    _emit(_CYAN, message)