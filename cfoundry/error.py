"""Program error reporting and a per-thread library error number."""

from __future__ import annotations

import enum
import os
import sys
import threading
from typing import Optional


class ErrorCode(enum.IntEnum):
    """Library error numbers."""

    OK = 0
    INVALID_ARGUMENT = 1
    SOCKET = 2
    BAD_STATE = 3
    ADDRESS = 4
    BIND = 5
    BLOCKED = 6
    ACCEPT = 7
    BAD_SOCKET_TYPE = 8
    LISTEN = 9
    SOCKET_INFO = 10
    FCNTL = 11
    LOST_CONNECTION = 12
    FDOPEN = 13
    CONNECT = 14
    NO_CONNECTION = 15
    SEND = 16
    RECV = 17
    MESSAGE_TOO_BIG = 18
    SENDTO = 19
    RECVFROM = 20
    TIMED_OUT = 21
    SERVICE_INFO = 22
    FORK = 23
    TABLE_FULL = 24
    SELECT = 25
    IOCTL = 26
    TTY_ATTRIBUTES = 27
    NOT_A_TTY = 28
    GETPTY = 29
    OPEN = 30
    PTY = 31
    EXECV = 32
    NOT_IMPLEMENTED = 33


_MESSAGES = (
    "OK",
    "invalid argument(s)",
    "socket() call failed",
    "call not valid in this state",
    "unable to resolve network address",
    "bind() call failed",
    "operation would block",
    "accept() call failed",
    "wrong socket type for this operation",
    "listen() call failed",
    "unable to obtain socket info",
    "fcntl() call failed",
    "connection to peer lost",
    "fdopen() call failed",
    "connect() call failed",
    "no connection available",
    "send() call failed",
    "recv() call failed",
    "UDP message too big",
    "sendto() call failed",
    "recvfrom() call failed",
    "connection or I/O timed out",
    "unable to obtain service info",
    "unable to fork",
    "table full",
    "select() call failed",
    "ioctl() call failed",
    "unable to get/set TTY attributes",
    "descriptor does not refer to a TTY",
    "getpty() call failed",
    "open() call failed",
    "general pseudoterminal error",
    "execv() call failed",
    "function/feature not implemented",
)

_progname = ["<program>"]
_state = threading.local()
_lock = threading.Lock()


def init(progname: Optional[str]) -> None:
    """Set the program name used to prefix messages; empty or None is ignored."""
    if progname:
        _progname[0] = progname


def _write(text: str) -> None:
    with _lock:
        sys.stderr.write(text)
        sys.stderr.flush()


def printf(format: str, *args) -> None:
    """Write ``progname: `` and a printf-style message to standard error."""
    _write(f"{_progname[0]}: " + (format % args))


def usage(text: str) -> None:
    """Write a usage line to standard error."""
    name = _progname[0]
    _write(f"{name}: Usage: {name} {text}\n")


def syserr() -> None:
    """Write the description of the OS error being handled to standard error."""
    exc = sys.exc_info()[1]
    if isinstance(exc, OSError) and exc.errno:
        description = os.strerror(exc.errno)
    elif exc is not None:
        description = str(exc)
    else:
        description = os.strerror(0)
    _write(f"{_progname[0]}: {description}\n")


def error_string() -> Optional[str]:
    """Describe this thread's error number, or None if it is not a known code."""
    err = get_errno()
    if 0 <= err < len(_MESSAGES):
        return _MESSAGES[err]
    return None


def get_errno() -> int:
    """Return this thread's error number; 0 until one is set."""
    return getattr(_state, "errno", ErrorCode.OK)


def set_errno(err: int) -> None:
    """Set this thread's error number."""
    _state.errno = err