"""A growable string with a read/write position, like an in-memory file."""

from __future__ import annotations

import enum
from typing import List, Optional

MIN_BLOCKSZ = 16


class Whence(enum.Enum):
    """Reference points for :meth:`DynamicString.seek`."""

    RELATIVE = "relative"
    ABSOLUTE = "absolute"
    END = "end"


class DynamicString:
    """A string that grows as it is written.

    Writes overwrite the text at the current position and extend it past
    the end; reads advance the position.
    """

    def __init__(self, blocksz: int = MIN_BLOCKSZ) -> None:
        if blocksz < MIN_BLOCKSZ:
            raise ValueError(f"block size must be at least {MIN_BLOCKSZ}")
        self.blocksz = blocksz
        self._chars: List[str] = []
        self._pos = 0

    def __len__(self) -> int:
        return len(self._chars)

    def __str__(self) -> str:
        return self.value()

    def __repr__(self) -> str:
        return f"DynamicString({self.value()!r}, pos={self._pos})"

    @property
    def position(self) -> int:
        """The current read/write position."""
        return self._pos

    def _write(self, text: str) -> None:
        end = self._pos + len(text)
        self._chars[self._pos:end] = text
        self._pos = end

    def putc(self, char: str) -> None:
        """Write one character at the current position."""
        if len(char) != 1 or char == "\0":
            raise ValueError("putc needs a single non-NUL character")
        self._write(char)

    def puts(self, text: str) -> None:
        """Write a non-empty string at the current position."""
        if not text:
            raise ValueError("puts needs a non-empty string")
        self._write(text)

    def getc(self) -> str:
        """Read one character; return an empty string at the end."""
        if self._pos >= len(self._chars):
            return ""
        char = self._chars[self._pos]
        self._pos += 1
        return char

    def gets(self, size: int, terminator: str = "\n") -> Optional[str]:
        """Read up to ``size`` characters, stopping before ``terminator``.

        The terminator itself is left unread. Returns None at the end.
        """
        if size < 1:
            raise ValueError("size must be positive")
        if self._pos == len(self._chars):
            return None
        chars = []
        while (
            self._pos < len(self._chars)
            and len(chars) < size
            and self._chars[self._pos] != terminator
        ):
            chars.append(self._chars[self._pos])
            self._pos += 1
        return "".join(chars)

    def seek(self, offset: int, whence: Whence = Whence.ABSOLUTE) -> int:
        """Move the position and return it.

        With ``Whence.END`` the offset counts back from the end.
        """
        whence = Whence(whence)
        if whence is Whence.RELATIVE:
            target = self._pos + offset
        elif whence is Whence.ABSOLUTE:
            target = offset
        else:
            target = len(self._chars) - offset
        if not 0 <= target <= len(self._chars):
            raise ValueError(f"position {target} out of range")
        self._pos = target
        return target

    def truncate(self, size: int) -> None:
        """Cut the text to ``size`` characters and move the position there."""
        if not 0 <= size <= len(self._chars):
            raise ValueError(f"cannot truncate to {size} characters")
        del self._chars[size:]
        self._pos = size

    def value(self) -> str:
        """Return the whole text."""
        return "".join(self._chars)

    def save(self, path: str) -> None:
        """Write the text to ``path``."""
        with open(path, "w", encoding="utf-8", newline="") as fp:
            fp.write(self.value())

    @classmethod
    def load(cls, path: str, blocksz: int = MIN_BLOCKSZ) -> "DynamicString":
        """Read a file into a new string positioned at its start."""
        dstring = cls(blocksz)
        with open(path, encoding="utf-8", newline="") as fp:
            dstring._chars = list(fp.read())
        return dstring