"""Terminal and stream input helpers, and locked formatted output."""

from __future__ import annotations

import os
import sys
import termios
import threading
from typing import IO, Optional

_print_lock = threading.Lock()


def _stdin_fd() -> int:
    return sys.stdin.fileno()


def getchar(delay: int = 0) -> Optional[str]:
    """Read one keystroke from the terminal without waiting for Enter.

    Waits at most ``delay`` seconds; returns None if nothing was typed.
    """
    fd = _stdin_fd()
    try:
        old = termios.tcgetattr(fd)
    except termios.error as exc:
        raise OSError(f"cannot read terminal attributes: {exc}") from exc
    new = [*old[:6], list(old[6])]
    new[0] &= ~(termios.IXON | termios.IXOFF)
    new[3] &= ~(termios.ECHO | termios.ICANON | termios.ISIG | termios.IEXTEN)
    new[6][termios.VMIN] = 0
    new[6][termios.VTIME] = min(max(delay, 0) * 10, 255)
    try:
        termios.tcsetattr(fd, termios.TCSANOW, new)
    except termios.error as exc:
        raise OSError(f"cannot set terminal attributes: {exc}") from exc
    try:
        data = os.read(fd, 1)
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, old)
    return data.decode("latin-1") if data else None


def gets(stream: IO[str], size: int, terminator: str = "\n") -> Optional[str]:
    """Read up to ``size`` characters, stopping at ``terminator``.

    The terminator is consumed but not returned. Returns None at end of
    input when nothing was read.
    """
    if size < 1:
        raise ValueError("size must be positive")
    chars = []
    ch = ""
    while True:
        ch = stream.read(1)
        if not ch or ch == terminator:
            break
        chars.append(ch)
        if len(chars) == size:
            break
    if not chars and not ch:
        return None
    return "".join(chars)


def getpasswd(prompt: str, size: int) -> Optional[str]:
    """Prompt on the terminal and read a line without echoing it."""
    fd = _stdin_fd()
    if not os.isatty(fd) or not os.isatty(sys.stdout.fileno()):
        raise OSError("standard input and output must be a terminal")
    old = termios.tcgetattr(fd)
    new = [*old[:6], list(old[6])]
    new[3] &= ~termios.ECHO
    try:
        termios.tcsetattr(fd, termios.TCSANOW, new)
    except termios.error as exc:
        raise OSError(f"cannot set terminal attributes: {exc}") from exc
    try:
        sys.stdout.write(prompt)
        sys.stdout.flush()
        line = gets(sys.stdin, size, "\n")
        sys.stdout.write("\n")
        sys.stdout.flush()
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, old)
    return line


def getline(stream: IO[str], terminator: str = "\n") -> Optional[str]:
    """Read a line of any length, without the terminator.

    Returns None at end of input when nothing was read.
    """
    chars = []
    ch = ""
    while True:
        ch = stream.read(1)
        if not ch or ch == terminator:
            break
        chars.append(ch)
    if not chars and not ch:
        return None
    return "".join(chars)


def fprintf(stream: IO[str], format: str, *args) -> int:
    """Write printf-style formatted text while holding a lock.

    Returns the number of characters written.
    """
    text = format % args
    with _print_lock:
        stream.write(text)
    return len(text)