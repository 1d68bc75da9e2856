"""Directory listing, tree traversal, file tests, locking and loading."""

from __future__ import annotations

import enum
import fcntl
import os
import stat
from dataclasses import dataclass, field
from typing import IO, Callable, List, Union

PathLike = Union[str, "os.PathLike[str]"]


class ReadFlags(enum.Flag):
    """Options for :func:`readdir`."""

    NONE = 0
    SKIPDOT = enum.auto()
    SKIP2DOT = enum.auto()
    SKIPHIDDEN = enum.auto()
    ADDSLASH = enum.auto()
    SKIPFILES = enum.auto()
    SKIPDIRS = enum.auto()
    SEPARATE = enum.auto()
    SORT = enum.auto()


class LockType(enum.Enum):
    """Kinds of advisory file lock."""

    READ = "read"
    WRITE = "write"


@dataclass
class DirList:
    """The result of :func:`readdir`.

    ``dirs`` is filled only when directories are listed separately.
    """

    files: List[str] = field(default_factory=list)
    dirs: List[str] = field(default_factory=list)


def readdir(path: PathLike, flags: ReadFlags = ReadFlags.NONE) -> DirList:
    """List the regular files and directories in ``path``.

    The entries ``.`` and ``..`` are included unless skipped; other kinds
    of file (links, devices, pipes) are always left out.
    """
    names = [".", "..", *os.listdir(path)]
    result = DirList()
    for name in names:
        try:
            st = os.lstat(os.path.join(path, name))
        except OSError:
            continue
        hidden = name.startswith(".")
        if stat.S_ISDIR(st.st_mode):
            if name == ".":
                if flags & ReadFlags.SKIPDOT:
                    continue
            elif name == "..":
                if flags & ReadFlags.SKIP2DOT:
                    continue
            elif hidden and flags & ReadFlags.SKIPHIDDEN:
                continue
            if flags & ReadFlags.SKIPDIRS:
                continue
            entry = name + "/" if flags & ReadFlags.ADDSLASH else name
            if flags & ReadFlags.SEPARATE:
                result.dirs.append(entry)
            else:
                result.files.append(entry)
        elif stat.S_ISREG(st.st_mode):
            if flags & ReadFlags.SKIPFILES:
                continue
            if hidden and flags & ReadFlags.SKIPHIDDEN:
                continue
            result.files.append(name)
    if flags & ReadFlags.SORT:
        result.files.sort()
        result.dirs.sort()
    return result


def traverse(
    path: PathLike, examine: Callable[[str, os.stat_result, int], bool]
) -> bool:
    """Walk the tree under ``path``, calling ``examine(path, stat, depth)``.

    Each directory is examined before its contents. Only regular files and
    directories are examined. Returns False as soon as ``examine`` returns
    a false value, True when the whole tree was visited.
    """
    if not path:
        raise ValueError("path must not be empty")

    def descend(directory: str, depth: int) -> bool:
        try:
            with os.scandir(directory) as it:
                entries = list(it)
        except OSError:
            return True
        for entry in entries:
            try:
                st = entry.stat(follow_symlinks=False)
            except OSError:
                continue
            if stat.S_ISDIR(st.st_mode):
                if not examine(entry.path, st, depth):
                    return False
                if not descend(entry.path, depth + 1):
                    return False
            elif stat.S_ISREG(st.st_mode):
                if not examine(entry.path, st, depth):
                    return False
        return True

    return descend(os.fspath(path), 0)


def getcwd() -> str:
    """Return the current working directory."""
    return os.getcwd()


def _mode(path: PathLike, follow: bool = True):
    try:
        return (os.stat(path) if follow else os.lstat(path)).st_mode
    except OSError:
        return None


def issymlink(path: PathLike) -> bool:
    """Return whether ``path`` is a symbolic link."""
    mode = _mode(path, follow=False)
    return mode is not None and stat.S_ISLNK(mode)


def isdir(path: PathLike) -> bool:
    """Return whether ``path`` is a directory."""
    mode = _mode(path)
    return mode is not None and stat.S_ISDIR(mode)


def isfile(path: PathLike) -> bool:
    """Return whether ``path`` is a regular file."""
    mode = _mode(path)
    return mode is not None and stat.S_ISREG(mode)


def ispipe(path: PathLike) -> bool:
    """Return whether ``path`` is a named pipe."""
    mode = _mode(path)
    return mode is not None and stat.S_ISFIFO(mode)


def mkdirs(path: str, mode: int = 0o777) -> None:
    """Create every directory named before a ``/`` in ``path``.

    The part after the last slash is taken to be a file name and is not
    created, so ``"a/b/c"`` creates ``a`` and ``a/b`` while ``"a/b/c/"``
    creates all three.
    """
    if path is None:
        raise ValueError("path must be given")
    index = path.find("/")
    while index != -1:
        if index > 0:
            prefix = path[:index]
            if not os.access(prefix, os.F_OK | os.R_OK | os.X_OK):
                os.mkdir(prefix, mode)
        index = path.find("/", index + 1)


def _fd(stream: Union[IO, int]) -> int:
    return stream if isinstance(stream, int) else stream.fileno()


def _operation(locktype: LockType) -> int:
    return fcntl.LOCK_SH if LockType(locktype) is LockType.READ else fcntl.LOCK_EX


def lock(stream: Union[IO, int], locktype: LockType = LockType.WRITE) -> None:
    """Lock the whole file, waiting until the lock is granted."""
    fcntl.lockf(_fd(stream), _operation(locktype))


def trylock(stream: Union[IO, int], locktype: LockType = LockType.WRITE) -> bool:
    """Try to lock the whole file without waiting; return whether it worked."""
    try:
        fcntl.lockf(_fd(stream), _operation(locktype) | fcntl.LOCK_NB)
    except (BlockingIOError, PermissionError):
        return False
    return True


def unlock(stream: Union[IO, int], locktype: LockType = LockType.WRITE) -> None:
    """Release a lock on the whole file."""
    LockType(locktype)
    fcntl.lockf(_fd(stream), fcntl.LOCK_UN)


def load(path: PathLike) -> bytes:
    """Return the whole contents of a file."""
    if not path:
        raise ValueError("path must not be empty")
    with open(path, "rb") as fp:
        return fp.read()