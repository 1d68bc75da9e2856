"""Timestamped log messages to the console and, optionally, a stream."""

from __future__ import annotations

import enum
import sys
import threading
import time
from dataclasses import dataclass
from typing import IO, Optional

_BOLD = "\033[1m"
_FG_RED = "\033[31m"
_FG_MAGENTA = "\033[35m"
_FG_DEFAULT = "\033[39m"
_NORMAL = "\033[0m"


class Level(enum.IntEnum):
    """Log levels; warnings show in magenta and errors in red on a terminal."""

    INFO = 0
    WARNING = 1
    ERROR = 2


@dataclass
class _Settings:
    console: bool = True
    stream: Optional[IO[str]] = None
    termattr: bool = True


_settings = _Settings()
_lock = threading.Lock()

_COLOURS = {Level.WARNING: _FG_MAGENTA, Level.ERROR: _FG_RED}


def _isatty(stream: IO[str]) -> bool:
    try:
        return bool(stream.isatty())
    except (AttributeError, ValueError):
        return False


def set_console(flag: bool) -> None:
    """Choose whether messages go to standard error."""
    _settings.console = bool(flag)


def set_stream(stream: Optional[IO[str]]) -> None:
    """Also log to ``stream``; standard error itself is ignored, None stops it."""
    if stream is not sys.stderr:
        _settings.stream = stream


def set_termattr(flag: bool) -> None:
    """Choose whether terminal attributes are used on the console."""
    _settings.termattr = bool(flag)


def message(level: Level, format: Optional[str], *args) -> None:
    """Log a printf-style message, prefixed with the date and time."""
    if format is None:
        return
    stamp = time.strftime("[%x %X] ")
    text = format % args
    newline = "" if format.endswith("\n") else "\n"

    with _lock:
        if _settings.console:
            console = sys.stderr
            tty = _settings.termattr and _isatty(console)
            parts = [stamp]
            if tty:
                parts.append(_BOLD)
                parts.append(_COLOURS.get(level, ""))
            parts.append(text)
            parts.append(newline)
            if tty:
                parts.append(_FG_DEFAULT)
                parts.append(_NORMAL)
            console.write("".join(parts))
            console.flush()

        if _settings.stream is not None:
            _settings.stream.write(stamp + text + newline)
            _settings.stream.flush()


def info(format: str, *args) -> None:
    """Log at INFO level."""
    message(Level.INFO, format, *args)


def warning(format: str, *args) -> None:
    """Log at WARNING level."""
    message(Level.WARNING, format, *args)


def error(format: str, *args) -> None:
    """Log at ERROR level."""
    message(Level.ERROR, format, *args)