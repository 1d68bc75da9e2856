"""Files mapped into memory."""

from __future__ import annotations

import mmap
import os


def _round_size(size: int) -> int:
    page = mmap.PAGESIZE
    return size + page - (size % page)


class MemoryFile:
    """An existing, non-empty file mapped into memory and shared with it.

    The mapped bytes are available through :attr:`data`.
    """

    def __init__(self, path: str, readonly: bool = False) -> None:
        length = os.stat(path).st_size
        if length == 0:
            raise ValueError("cannot map an empty file")
        self.path = path
        self.readonly = readonly
        self._fd = os.open(path, os.O_RDWR)
        try:
            self._map = self._mapping(length)
        except BaseException:
            os.close(self._fd)
            raise
        self.length = length
        self._closed = False

    def _mapping(self, length: int) -> mmap.mmap:
        access = mmap.ACCESS_READ if self.readonly else mmap.ACCESS_WRITE
        return mmap.mmap(self._fd, length, access=access)

    def __repr__(self) -> str:
        state = "closed" if self._closed else f"length={self.length}"
        return f"MemoryFile({self.path!r}, {state})"

    @property
    def data(self) -> mmap.mmap:
        """The mapped bytes."""
        if self._closed:
            raise ValueError("memory file is closed")
        return self._map

    def close(self) -> None:
        """Flush changes to the file and release the mapping."""
        if self._closed:
            return
        self._closed = True
        try:
            if not self.readonly:
                self._map.flush()
            self._map.close()
        finally:
            os.close(self._fd)

    def resize(self, length: int) -> None:
        """Resize the file and mapping to ``length`` rounded up to a page.

        The size always grows past ``length`` to the next page boundary;
        new bytes are zero.
        """
        if length < 0:
            raise ValueError("length cannot be negative")
        if self._closed:
            raise ValueError("memory file is closed")
        newsize = _round_size(length)
        if not self.readonly:
            self._map.flush()
        self._map.close()
        os.ftruncate(self._fd, newsize)
        self._map = self._mapping(newsize)
        self.length = newsize

    def sync(self, asynchronous: bool = False) -> None:
        """Write changes in the mapping back to the file.

        The flush always completes before returning, whichever mode is asked for.
        """
        if self._closed:
            raise ValueError("memory file is closed")
        if not self.readonly:
            self._map.flush()

    def __enter__(self) -> "MemoryFile":
        return self

    def __exit__(self, *args) -> None:
        self.close()