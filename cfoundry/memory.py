"""Resizable byte buffers and compaction of sequences."""

from __future__ import annotations

from typing import Any, Callable, MutableSequence


class Buffer:
    """A byte buffer with a record of how many bytes hold data."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("buffer size cannot be negative")
        self.data = bytearray(size)
        self.datalen = 0

    @property
    def size(self) -> int:
        return len(self.data)

    def __repr__(self) -> str:
        return f"Buffer(size={self.size}, datalen={self.datalen})"

    def resize(self, size: int) -> "Buffer":
        """Grow or shrink the buffer, keeping the leading bytes."""
        if size <= 0:
            raise ValueError("buffer size must be positive")
        if size < len(self.data):
            del self.data[size:]
        else:
            self.data.extend(bytes(size - len(self.data)))
        self.datalen = min(self.datalen, size)
        return self

    def clear(self) -> None:
        """Zero the contents and mark the buffer empty."""
        self.datalen = 0
        self.data[:] = bytes(len(self.data))


def defrag(items: MutableSequence[Any], isempty: Callable[[Any], bool]) -> int:
    """Move the non-empty items to the front, keeping their order.

    The empty items end up after them. Returns the number of non-empty items.
    """
    kept = [item for item in items if not isempty(item)]
    empties = [item for item in items if isempty(item)]
    items[:] = kept + empties
    return len(kept)