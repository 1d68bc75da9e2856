"""Debug messages tagged with their source location, and assertions."""

from __future__ import annotations

import enum
import sys
import threading
from dataclasses import dataclass
from typing import IO, Optional

_BOLD = "\033[1m"
_FG_RED = "\033[31m"
_FG_DEFAULT = "\033[39m"
_NORMAL = "\033[0m"


class Severity(enum.IntEnum):
    """How serious a debug message is; anything above INFO is shown in red."""

    INFO = 0
    WARNING = 1
    ERROR = 2


@dataclass
class _Settings:
    trace: bool = True
    stream: Optional[IO[str]] = None
    termattr: bool = True


_settings = _Settings()
_lock = threading.Lock()


def _isatty(stream: IO[str]) -> bool:
    try:
        return bool(stream.isatty())
    except (AttributeError, ValueError):
        return False


def set_trace(flag: bool) -> None:
    """Choose whether messages are prefixed with ``file(line): ``."""
    _settings.trace = bool(flag)


def set_stream(stream: Optional[IO[str]]) -> None:
    """Send messages to ``stream``; None means standard error."""
    _settings.stream = stream


def set_termattr(flag: bool) -> None:
    """Choose whether terminal attributes are used when writing to a terminal."""
    _settings.termattr = bool(flag)


def message(file: str, line: int, severity: Severity, format: Optional[str], *args) -> None:
    """Write a printf-style debug message, ending it with a newline if needed."""
    if format is None:
        return
    stream = _settings.stream if _settings.stream is not None else sys.stderr
    tty = _settings.termattr and _isatty(stream)
    parts = []
    if tty:
        parts.append(_BOLD)
        if severity > Severity.INFO:
            parts.append(_FG_RED)
    if _settings.trace:
        parts.append(f"{file}({line}): ")
    parts.append(format % args)
    if tty:
        parts.append(_FG_DEFAULT)
        parts.append(_NORMAL)
    if not format.endswith("\n"):
        parts.append("\n")
    with _lock:
        stream.write("".join(parts))
        stream.flush()


def doassert(file: str, line: int, expression: str) -> None:
    """Report a failed assertion and raise AssertionError."""
    message(file, line, Severity.ERROR, "Assertion failed: %s\n", expression)
    raise AssertionError(expression)