"""Discrete gradient of a one-dimensional signal."""

from __future__ import annotations

from collections.abc import Iterable


def gradient(values: Iterable[float]) -> list[float]:
    """Return the gradient of ``values``, one entry per input value.

    Interior points use the central difference ``(next - previous) / 2``.
    The end points use one-sided differences. A single value has a gradient
    of 0, and an empty input gives an empty result.
    """
    items = list(values)
    if not items:
        return []
    if len(items) == 1:
        return [0]
    first = items[1] - items[0]
    if len(items) == 2:
        return [first, first]
    result = [first]
    result.extend((following - preceding) / 2 for preceding, following in zip(items, items[2:]))
    result.append(items[-1] - items[-2])
    return result