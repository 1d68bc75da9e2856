"""A fixed-size pool that hands out word-aligned slices of memory."""

from __future__ import annotations

import struct

_WORD = struct.calcsize("P")


class MemoryPool:
    """Bump allocator over one fixed block of bytes.

    Each allocation is rounded up to a multiple of the machine word size.
    Allocations are never freed individually.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("pool size cannot be negative")
        self.size = size
        self._base = bytearray(size)
        self._pos = 0

    def __repr__(self) -> str:
        return f"MemoryPool(size={self.size}, available={self.available()})"

    def alloc(self, size: int) -> memoryview:
        """Return a writable view of ``size`` bytes from the pool."""
        if size < 1:
            raise ValueError("allocation size must be positive")
        rounded = size + (-size % _WORD)
        if self.available() < rounded:
            raise MemoryError("memory pool exhausted")
        start = self._pos
        self._pos += rounded
        return memoryview(self._base)[start:start + size]

    def available(self) -> int:
        """Number of bytes not yet handed out."""
        return self.size - self._pos