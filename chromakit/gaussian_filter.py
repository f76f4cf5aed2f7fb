"""Box filtering and its repeated use as an approximate Gaussian blur.

Samples beyond either end of the signal are taken from its mirror image,
with the edge sample repeated (``... x1 x0 | x0 x1 ... xn | xn xn-1 ...``).
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence


def _reflect(index: int, size: int) -> int:
    period = index % (2 * size)
    return period if period < size else 2 * size - 1 - period


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def box_filter(values: Iterable[float], width: int) -> list[float]:
    """Return the moving average of ``values`` over a window of ``width``.

    Output ``i`` averages the inputs at positions ``i - width // 2`` up to,
    but not including, ``i - width // 2 + width``. A width of 0 gives zeros.
    """
    if width < 0:
        raise ValueError(f"window width must not be negative, got {width}")
    items: Sequence[float] = list(values)
    size = len(items)
    if width == 0 or size == 0:
        return [0.0] * size

    left = width // 2
    total = 0.0
    for position in range(-left, width - left):
        total += items[_reflect(position, size)]

    result = []
    for index in range(size):
        result.append(total / width)
        entering = items[_reflect(index - left + width, size)]
        leaving = items[_reflect(index - left, size)]
        total += entering - leaving
    return result


def gaussian_filter(values: Iterable[float], sigma: float, passes: int) -> list[float]:
    """Approximate a Gaussian blur of ``sigma`` with ``passes`` box filters.

    The box widths are chosen so that the combined variance of the passes
    is as close as possible to ``sigma ** 2``.
    """
    if passes <= 0:
        raise ValueError(f"the number of passes must be positive, got {passes}")

    width = math.floor(math.sqrt(12 * sigma * sigma / passes + 1))
    lower = width - (1 if width % 2 == 0 else 0)
    upper = lower + 2
    lower_passes = _round_half_away(
        (12 * sigma * sigma - passes * lower * lower - 4 * passes * lower - 3 * passes)
        / (-4 * lower - 4)
    )
    lower_passes = max(lower_passes, 0)
    upper_passes = max(passes - lower_passes, 0)

    data = list(values)
    for _ in range(lower_passes):
        data = box_filter(data, lower)
    for _ in range(upper_passes):
        data = box_filter(data, upper)
    return data