"""Conversion between host and network (big-endian) byte order."""

from __future__ import annotations

import struct


def _convert(value, code: str, source: str, target: str):
    try:
        packed = struct.pack(source + code, value)
    except struct.error as exc:
        raise ValueError(str(exc)) from exc
    return struct.unpack(target + code, packed)[0]


def _check_unsigned(value: int, bits: int) -> None:
    if not 0 <= value < (1 << bits):
        raise ValueError(f"{value} does not fit in {bits} unsigned bits")


def htons(value: int) -> int:
    """Host to network order for a 16-bit value."""
    _check_unsigned(value, 16)
    return _convert(value, "H", ">", "=")


def ntohs(value: int) -> int:
    """Network to host order for a 16-bit value."""
    _check_unsigned(value, 16)
    return _convert(value, "H", "=", ">")


def htonl(value: int) -> int:
    """Host to network order for a 32-bit value."""
    _check_unsigned(value, 32)
    return _convert(value, "I", ">", "=")


def ntohl(value: int) -> int:
    """Network to host order for a 32-bit value."""
    _check_unsigned(value, 32)
    return _convert(value, "I", "=", ">")


def htonll(value: int) -> int:
    """Host to network order for a 64-bit value."""
    _check_unsigned(value, 64)
    return _convert(value, "Q", ">", "=")


def ntohll(value: int) -> int:
    """Network to host order for a 64-bit value."""
    _check_unsigned(value, 64)
    return _convert(value, "Q", "=", ">")


def htonf(value: float) -> float:
    """Reorder the bytes of a single-precision float into network order."""
    return _convert(value, "f", ">", "=")


def ntohf(value: float) -> float:
    """Reorder the bytes of a network-order single-precision float."""
    return _convert(value, "f", "=", ">")


def htond(value: float) -> float:
    """Reorder the bytes of a double into network order."""
    return _convert(value, "d", ">", "=")


def ntohd(value: float) -> float:
    """Reorder the bytes of a network-order double."""
    return _convert(value, "d", "=", ">")