"""Running other programs with redirected standard streams."""

from __future__ import annotations

import os
import subprocess
import threading
from typing import BinaryIO, Dict, Optional, Sequence, Tuple, Union

_children: Dict[int, subprocess.Popen] = {}
_lock = threading.Lock()

PathLike = Union[str, "os.PathLike[str]"]


def _target(fd: Optional[int]):
    return subprocess.DEVNULL if fd is None or fd < 0 else fd


def _status(returncode: int) -> int:
    # A child killed by a signal has no exit status; report 0 for it.
    return max(returncode, 0)


def run(
    argv: Sequence[str],
    fdin: Optional[int] = None,
    fdout: Optional[int] = None,
    wait: bool = True,
    cwd: Optional[PathLike] = None,
) -> int:
    """Start ``argv`` with stdin from ``fdin`` and stdout and stderr to ``fdout``.

    A missing or negative descriptor means the null device. When ``wait`` is
    true, returns the exit status; otherwise returns the child's process id.
    """
    args = list(argv)
    if not args:
        raise ValueError("no program to run")
    out = _target(fdout)
    proc = subprocess.Popen(args, stdin=_target(fdin), stdout=out, stderr=out, cwd=cwd)
    if wait:
        return _status(proc.wait())
    with _lock:
        _children[proc.pid] = proc
    return proc.pid


def pipe_from(argv: Sequence[str], cwd: Optional[PathLike] = None) -> Tuple[int, BinaryIO]:
    """Start ``argv`` and return its pid and a stream reading its output."""
    rfd, wfd = os.pipe()
    try:
        pid = run(argv, None, wfd, False, cwd)
    except BaseException:
        os.close(rfd)
        raise
    finally:
        os.close(wfd)
    return pid, os.fdopen(rfd, "rb")


def pipe_to(argv: Sequence[str], cwd: Optional[PathLike] = None) -> Tuple[int, BinaryIO]:
    """Start ``argv`` and return its pid and a stream writing to its input."""
    rfd, wfd = os.pipe()
    try:
        pid = run(argv, rfd, None, False, cwd)
    except BaseException:
        os.close(wfd)
        raise
    finally:
        os.close(rfd)
    return pid, os.fdopen(wfd, "wb")


def wait(pid: Optional[int] = None) -> int:
    """Wait for child ``pid``, or for any child, and return its exit status."""
    if pid:
        with _lock:
            proc = _children.pop(pid, None)
        if proc is not None:
            return _status(proc.wait())
        _, status = os.waitpid(pid, 0)
    else:
        done, status = os.wait()
        with _lock:
            proc = _children.pop(done, None)
        if proc is not None:
            proc.returncode = os.waitstatus_to_exitcode(status)
    return os.WEXITSTATUS(status) if os.WIFEXITED(status) else 0


def call(*args: str) -> int:
    """Run a program on this process's stdin and stdout and return its status."""
    return run(args, 0, 1, True)