"""A dynamic array whose deleted slots are reused by later stores."""

from __future__ import annotations

import heapq
import pickle
from typing import Any, Callable, List, Tuple

_EMPTY = object()


class DynamicArray:
    """An array of slots addressed by index.

    Values are appended after the highest slot in use until a slot is
    deleted; after that, each store fills the lowest free slot first.
    """

    def __init__(self, resize: int) -> None:
        if resize < 1:
            raise ValueError("resize must be at least 1")
        self.resize = resize
        self._slots: List[Any] = []
        self._free: List[int] = []

    def __len__(self) -> int:
        """Number of occupied slots."""
        return len(self._slots) - len(self._free)

    def store(self, data: Any) -> int:
        """Store ``data`` and return the index of its slot."""
        if self._free:
            index = heapq.heappop(self._free)
            self._slots[index] = data
        else:
            index = len(self._slots)
            self._slots.append(data)
        return index

    def _occupied(self, index: int) -> bool:
        return 0 <= index < len(self._slots) and self._slots[index] is not _EMPTY

    def restore(self, index: int) -> Any:
        """Return the value in slot ``index``."""
        if not self._occupied(index):
            raise IndexError(f"no element at index {index}")
        return self._slots[index]

    def delete(self, index: int) -> None:
        """Free slot ``index`` for reuse."""
        if not self._occupied(index):
            raise IndexError(f"no element at index {index}")
        self._slots[index] = _EMPTY
        heapq.heappush(self._free, index)

    def defragment(self) -> None:
        """Close the gaps left by deletions, keeping the order of values."""
        if not self._free:
            return
        self._slots = [value for value in self._slots if value is not _EMPTY]
        self._free = []

    def iterate(self, consumer: Callable[[Any, int], bool], start: int = 0) -> bool:
        """Pass each occupied slot from ``start`` on to ``consumer(value, index)``.

        Stops and returns False as soon as the consumer returns a false value.
        """
        for index in range(max(start, 0), len(self._slots)):
            value = self._slots[index]
            if value is not _EMPTY and not consumer(value, index):
                return False
        return True

    def save(self, path: str) -> None:
        """Write the array, free slots included, to ``path``."""
        slots: List[Tuple[bool, Any]] = [
            (False, None) if value is _EMPTY else (True, value) for value in self._slots
        ]
        with open(path, "wb") as fp:
            pickle.dump({"resize": self.resize, "slots": slots}, fp)

    @classmethod
    def load(cls, path: str) -> "DynamicArray":
        """Read an array written by :meth:`save`."""
        with open(path, "rb") as fp:
            try:
                state = pickle.load(fp)
                resize = state["resize"]
                slots = state["slots"]
            except (pickle.UnpicklingError, EOFError, KeyError, TypeError) as exc:
                raise ValueError(f"not a saved dynamic array: {path}") from exc
        array = cls(resize)
        for index, (used, value) in enumerate(slots):
            if used:
                array._slots.append(value)
            else:
                array._slots.append(_EMPTY)
                heapq.heappush(array._free, index)
        return array