"""Coloured diagnostic logging on standard error."""

from __future__ import annotations

import sys
from typing import NoReturn

ANSI_RED = "\x1b[1;31m"
ANSI_YLLW = "\x1b[1;33m"
ANSI_BLUE = "\x1b[1;34m"
ANSI_GREEN = "\x1b[0;32m"
ANSI_RESET = "\x1b[0m"


class GameError(Exception):
    """Raised when the engine reaches a state it cannot continue from."""


def _emit(tag: str, colour: str, message: str) -> None:
    print(f"[{colour} {tag} {ANSI_RESET}]: {message}", file=sys.stderr)


def log_info(message: str) -> None:
    """Write an informational line to standard error."""
    _emit("Info", ANSI_BLUE, message)


def log_warn(message: str) -> None:
    """Write a warning line to standard error."""
    _emit("Warn", ANSI_YLLW, message)


def log_error(message: str) -> NoReturn:
    """Write an error line to standard error and raise GameError."""
    _emit("Error", ANSI_RED, message)
    raise GameError(message)


def log_assert(condition: bool, message: str = "Assert Failed!") -> None:
    """Raise GameError with the message when the condition is false."""
    if not condition:
        log_error(message)