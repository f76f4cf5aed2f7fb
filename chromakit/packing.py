"""Packing of small integers into dense little-endian bit streams.

Each value contributes its low 3 or 5 bits; values are laid out from the
least significant bit of the first byte upwards.
"""

from __future__ import annotations

from collections.abc import Iterable


def packed_int3_size(size: int) -> int:
    """Return the number of bytes ``size`` 3-bit values pack into."""
    return (size * 3 + 7) // 8


def packed_int5_size(size: int) -> int:
    """Return the number of bytes ``size`` 5-bit values pack into."""
    return (size * 5 + 7) // 8


def unpacked_int3_size(size: int) -> int:
    """Return the number of 3-bit values held in ``size`` bytes."""
    return size * 8 // 3


def unpacked_int5_size(size: int) -> int:
    """Return the number of 5-bit values held in ``size`` bytes."""
    return size * 8 // 5


def _pack(values: Iterable[int], bits: int) -> bytes:
    mask = (1 << bits) - 1
    stream = 0
    count = 0
    for value in values:
        stream |= (value & mask) << (bits * count)
        count += 1
    return stream.to_bytes((count * bits + 7) // 8, "little")


def _unpack(data: bytes | bytearray | memoryview, bits: int) -> list[int]:
    raw = bytes(data)
    mask = (1 << bits) - 1
    stream = int.from_bytes(raw, "little")
    return [(stream >> (bits * i)) & mask for i in range(len(raw) * 8 // bits)]


def pack_int3_array(values: Iterable[int]) -> bytes:
    """Pack the low 3 bits of each value."""
    return _pack(values, 3)


def pack_int5_array(values: Iterable[int]) -> bytes:
    """Pack the low 5 bits of each value."""
    return _pack(values, 5)


def unpack_int3_array(data: bytes | bytearray | memoryview) -> list[int]:
    """Unpack every whole 3-bit value held in ``data``."""
    return _unpack(data, 3)


def unpack_int5_array(data: bytes | bytearray | memoryview) -> list[int]:
    """Unpack every whole 5-bit value held in ``data``."""
    return _unpack(data, 5)