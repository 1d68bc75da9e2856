"""A string-keyed hash table built on chained linked lists."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, List, Optional

from cfoundry.linklist import LinkedList, Position


def default_hash(key: str, modulo: int) -> int:
    """Hash a string into the range ``0 .. modulo - 1``."""
    if modulo < 1:
        raise ValueError("modulo must be positive")
    value = 0
    for byte in key.encode("utf-8"):
        value = (value * 31 + byte) & 0xFFFFFFFF
    return value % modulo


@dataclass
class _Tag:
    key: str
    data: Any


class HashTable:
    """Maps non-empty string keys to non-None values.

    Storing a key that is already present does not replace it: the newer
    entry shadows the older one until it is deleted.
    """

    def __init__(
        self,
        buckets: int,
        hashfunc: Optional[Callable[[str, int], int]] = None,
        destructor: Optional[Callable[[Any], None]] = None,
    ) -> None:
        if buckets < 1:
            raise ValueError("a hash table needs at least one bucket")
        self._table: List[Optional[LinkedList]] = [None] * buckets
        self._hashfunc = hashfunc or default_hash
        self._size = 0
        self.destructor = destructor

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str) or not key:
            return False
        return self.restore(key) is not None

    @staticmethod
    def _check_key(key: str) -> None:
        if not key:
            raise ValueError("key must be a non-empty string")

    def _index(self, key: str) -> int:
        return self._hashfunc(key, len(self._table))

    def store(self, key: str, data: Any) -> None:
        """Add an entry for ``key``."""
        self._check_key(key)
        if data is None:
            raise ValueError("cannot store None")
        index = self._index(key)
        bucket = self._table[index]
        if bucket is None:
            bucket = self._table[index] = LinkedList()
        bucket.prepend(_Tag(key, data))
        self._size += 1

    def restore(self, key: str) -> Any:
        """Return the newest value for ``key``, or None if absent."""
        self._check_key(key)
        bucket = self._table[self._index(key)]
        if bucket is None:
            return None
        return next((tag.data for tag in bucket if tag.key == key), None)

    def delete(self, key: str) -> None:
        """Remove the newest entry for ``key``."""
        self._check_key(key)
        bucket = self._table[self._index(key)]
        if bucket is not None:
            bucket.move(Position.HEAD)
            while (tag := bucket.restore()) is not None:
                if tag.key == key:
                    bucket.delete()
                    self._size -= 1
                    if self.destructor is not None:
                        self.destructor(tag.data)
                    return
                bucket.move(Position.NEXT)
        raise KeyError(key)

    def keys(self) -> List[str]:
        """Return every stored key, bucket by bucket."""
        return [tag.key for bucket in self._table if bucket is not None for tag in bucket]