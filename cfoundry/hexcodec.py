"""Hexadecimal encoding of nibbles, bytes and byte strings."""

from __future__ import annotations

_DIGITS = "0123456789ABCDEF"
_VALID = frozenset("0123456789abcdefABCDEF")


def is_digit(char: str) -> bool:
    """Return whether ``char`` is a single hexadecimal digit."""
    return len(char) == 1 and char in _VALID


def to_nibble(value: int) -> str:
    """Return the upper-case hex digit for a value from 0 to 15."""
    if not 0 <= value <= 15:
        raise ValueError(f"nibble out of range: {value}")
    return _DIGITS[value]


def from_nibble(char: str) -> int:
    """Return the value of a single hex digit."""
    if not is_digit(char):
        raise ValueError(f"not a hex digit: {char!r}")
    return _DIGITS.index(char.upper())


def to_byte(value: int) -> str:
    """Return the two-digit hex form of a value from 0 to 255."""
    if not 0 <= value <= 255:
        raise ValueError(f"byte out of range: {value}")
    high, low = divmod(value, 16)
    return to_nibble(high) + to_nibble(low)


def from_byte(text: str) -> int:
    """Return the value of the first two hex digits of ``text``."""
    if len(text) < 2:
        raise ValueError("need two hex digits")
    return 16 * from_nibble(text[0]) + from_nibble(text[1])


def encode(data: bytes) -> str:
    """Encode non-empty bytes as upper-case hex."""
    if not data:
        raise ValueError("nothing to encode")
    return "".join(to_byte(b) for b in data)


def decode(text: str) -> bytes:
    """Decode a non-empty, even-length hex string."""
    if not text or len(text) % 2:
        raise ValueError("hex text must be non-empty and of even length")
    return bytes(from_byte(text[i:i + 2]) for i in range(0, len(text), 2))