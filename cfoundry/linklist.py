"""A doubly linked list with a movable cursor."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional


class Position(enum.Enum):
    """Cursor movements."""

    HEAD = "head"
    TAIL = "tail"
    NEXT = "next"
    PREV = "prev"
    END = "end"


@dataclass(eq=False)
class _Link:
    data: Any
    prev: Optional["_Link"] = None
    next: Optional["_Link"] = None


class LinkedList:
    """Doubly linked list of non-None items with a cursor.

    The cursor either rests on an item or sits past the tail ("the end").
    """

    def __init__(self, destructor: Optional[Callable[[Any], None]] = None) -> None:
        self._head: Optional[_Link] = None
        self._tail: Optional[_Link] = None
        self._cursor: Optional[_Link] = None
        self._size = 0
        self.destructor = destructor

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        link = self._head
        while link is not None:
            yield link.data
            link = link.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def _insert(self, data: Any, at: Optional[_Link]) -> _Link:
        if data is None:
            raise ValueError("cannot store None")
        link = _Link(data)
        if at is self._head:
            link.next = self._head
            if self._head is not None:
                self._head.prev = link
            self._head = link
            if self._tail is None:
                self._tail = link
        elif at is None:
            link.prev = self._tail
            if self._tail is not None:
                self._tail.next = link
            self._tail = link
        else:
            link.next = at
            link.prev = at.prev
            if at.prev is not None:
                at.prev.next = link
            at.prev = link
        self._size += 1
        return link

    def _unlink(self, link: _Link) -> None:
        if self._head is link:
            self._head = link.next
        if self._tail is link:
            self._tail = link.prev
        if link.prev is not None:
            link.prev.next = link.next
        if link.next is not None:
            link.next.prev = link.prev
        if self._cursor is link:
            self._cursor = link.next
        self._size -= 1

    def store(self, data: Any) -> None:
        """Insert before the cursor and move the cursor onto the new item."""
        self._cursor = self._insert(data, self._cursor)

    def restore(self) -> Any:
        """Return the item under the cursor, or None at the end."""
        return self._cursor.data if self._cursor is not None else None

    def search(self, data: Any) -> bool:
        """Move the cursor to the first item that is ``data`` itself."""
        self._cursor = self._head
        while self._cursor is not None:
            if self._cursor.data is data:
                return True
            self._cursor = self._cursor.next
        return False

    def prepend(self, data: Any) -> None:
        """Insert at the head without moving the cursor."""
        self._insert(data, self._head)

    def append(self, data: Any) -> None:
        """Insert at the tail without moving the cursor."""
        self._insert(data, None)

    def pop(self) -> Any:
        """Remove and return the head item."""
        if self._head is None:
            raise IndexError("pop from empty list")
        link = self._head
        self._unlink(link)
        return link.data

    def peek(self) -> Any:
        """Return the head item, or None when the list is empty."""
        return self._head.data if self._head is not None else None

    def delete(self) -> None:
        """Remove the item under the cursor; the cursor moves to the next one."""
        link = self._cursor
        if link is None:
            raise IndexError("cursor is at the end of the list")
        self._unlink(link)
        if self.destructor is not None:
            self.destructor(link.data)

    def move(self, where: Position) -> bool:
        """Move the cursor; return whether it moved."""
        where = Position(where)
        if where is Position.HEAD:
            self._cursor = self._head
        elif where is Position.TAIL:
            self._cursor = self._tail
        elif where is Position.END:
            self._cursor = None
        elif where is Position.NEXT:
            if self._cursor is None:
                return False
            self._cursor = self._cursor.next
        else:
            if self._cursor is None or self._cursor.prev is None:
                return False
            self._cursor = self._cursor.prev
        return True