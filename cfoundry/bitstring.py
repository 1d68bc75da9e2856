"""Fixed-length strings of bits packed into bytes."""

from __future__ import annotations


def _byte_offset(bit: int) -> int:
    return bit >> 3


def _byte_mask(bit: int) -> int:
    return 1 << (bit & 0x07)


class BitString:
    """A fixed number of bits, all initially clear."""

    __slots__ = ("_nbits", "_bits")

    def __init__(self, nbits: int) -> None:
        if nbits < 1:
            raise ValueError("a bit string needs at least one bit")
        self._nbits = nbits
        self._bits = bytearray(((nbits - 1) >> 3) + 1)

    def __len__(self) -> int:
        return self._nbits

    def __repr__(self) -> str:
        shown = "".join("1" if self.isset(i) else "0" for i in range(self._nbits))
        return f"BitString({shown!r})"

    def _check(self, bit: int) -> None:
        if not 0 <= bit < self._nbits:
            raise IndexError(f"bit {bit} out of range for {self._nbits} bits")

    def _check_range(self, start: int, end: int) -> None:
        if end < start:
            raise ValueError("end bit precedes start bit")
        self._check(start)
        self._check(end)

    def set(self, bit: int) -> None:
        """Set one bit."""
        self._check(bit)
        self._bits[_byte_offset(bit)] |= _byte_mask(bit)

    def clear(self, bit: int) -> None:
        """Clear one bit."""
        self._check(bit)
        self._bits[_byte_offset(bit)] &= ~_byte_mask(bit) & 0xFF

    def isset(self, bit: int) -> bool:
        """Return whether a bit is set."""
        self._check(bit)
        return bool(self._bits[_byte_offset(bit)] & _byte_mask(bit))

    def set_range(self, start: int, end: int) -> None:
        """Set every bit from ``start`` to ``end`` inclusive."""
        self._check_range(start, end)
        sbyte, ebyte = _byte_offset(start), _byte_offset(end)
        low = (0xFF << (start & 0x07)) & 0xFF
        high = 0xFF >> (7 - (end & 0x07))
        if sbyte == ebyte:
            self._bits[sbyte] |= low & high
            return
        self._bits[sbyte] |= low
        self._bits[sbyte + 1:ebyte] = b"\xff" * (ebyte - sbyte - 1)
        self._bits[ebyte] |= high

    def clear_range(self, start: int, end: int) -> None:
        """Clear every bit from ``start`` to ``end`` inclusive."""
        self._check_range(start, end)
        sbyte, ebyte = _byte_offset(start), _byte_offset(end)
        keep_low = 0xFF >> (8 - (start & 0x07))
        keep_high = (0xFF << ((end & 0x07) + 1)) & 0xFF
        if sbyte == ebyte:
            self._bits[sbyte] &= keep_low | keep_high
            return
        self._bits[sbyte] &= keep_low
        self._bits[sbyte + 1:ebyte] = bytes(ebyte - sbyte - 1)
        self._bits[ebyte] &= keep_high

    def intersects(self, other: BitString) -> bool:
        """True when both strings have the same length and share a set bit."""
        if self._nbits != other._nbits:
            return False
        return any(a & b for a, b in zip(self._bits, other._bits))