"""Similarity hash over a sequence of 32-bit values."""

from __future__ import annotations

from collections.abc import Iterable


def simhash(data: Iterable[int]) -> int:
    """Return a 32-bit hash whose bit ``i`` is set when more than half of the
    values have bit ``i`` set. An empty input hashes to 0."""
    values = [value & 0xFFFFFFFF for value in data]
    threshold = len(values) // 2
    result = 0
    for bit in range(32):
        count = sum((value >> bit) & 1 for value in values)
        if count > threshold:
            result |= 1 << bit
    return result