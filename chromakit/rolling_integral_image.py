"""Integral image that keeps only a bounded number of recent rows."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import accumulate


class RollingIntegralImage:
    """Summed-area table over a stream of rows.

    Only the most recent rows are kept, so areas can be asked for only
    over rows that are still held.
    """

    def __init__(self, max_rows: int) -> None:
        if max_rows < 0:
            raise ValueError(f"max_rows must not be negative, got {max_rows}")
        self._max_rows = max_rows + 1
        self._num_columns = 0
        self._num_rows = 0
        self._data: list[list[float]] = []

    @classmethod
    def from_flat(cls, num_columns: int, values: Iterable[float]) -> RollingIntegralImage:
        """Build an image holding every row of a flat, row-major sequence."""
        if num_columns <= 0:
            raise ValueError(f"num_columns must be positive, got {num_columns}")
        items = list(values)
        if len(items) % num_columns:
            raise ValueError(
                f"{len(items)} values do not fill whole rows of {num_columns} columns"
            )
        image = cls(0)
        image._max_rows = max(len(items) // num_columns, 1)
        for start in range(0, len(items), num_columns):
            image.add_row(items[start:start + num_columns])
        return image

    @property
    def num_columns(self) -> int:
        """Number of columns, fixed by the first row added."""
        return self._num_columns

    @property
    def num_rows(self) -> int:
        """Number of rows added since creation or the last reset."""
        return self._num_rows

    def reset(self) -> None:
        """Forget every row and the column count."""
        self._data = []
        self._num_rows = 0
        self._num_columns = 0

    def _row(self, index: int) -> list[float]:
        return self._data[index % self._max_rows]

    def area(self, r1: int, c1: int, r2: int, c2: int) -> float:
        """Return the sum over rows ``[r1, r2)`` and columns ``[c1, c2)``."""
        if not (0 <= r1 <= self._num_rows and 0 <= r2 <= self._num_rows):
            raise IndexError(f"rows {r1}..{r2} are outside 0..{self._num_rows}")
        if self._num_rows > self._max_rows:
            oldest = self._num_rows - self._max_rows
            if r1 <= oldest or r2 <= oldest:
                raise IndexError(f"rows up to {oldest} are no longer held")
        if not (0 <= c1 <= self._num_columns and 0 <= c2 <= self._num_columns):
            raise IndexError(f"columns {c1}..{c2} are outside 0..{self._num_columns}")

        if r1 == r2 or c1 == c2:
            return 0.0
        if r2 < r1 or c2 < c1:
            raise ValueError("the area's end must not come before its start")

        bottom = self._row(r2 - 1)
        if r1 == 0:
            if c1 == 0:
                return bottom[c2 - 1]
            return bottom[c2 - 1] - bottom[c1 - 1]
        top = self._row(r1 - 1)
        if c1 == 0:
            return bottom[c2 - 1] - top[c2 - 1]
        return bottom[c2 - 1] - top[c2 - 1] - bottom[c1 - 1] + top[c1 - 1]

    def add_row(self, row: Iterable[float]) -> None:
        """Append a row; every row must have the same number of columns."""
        cells = [float(value) for value in row]
        if self._num_columns == 0:
            self._num_columns = len(cells)
            self._data = [[0.0] * self._num_columns for _ in range(self._max_rows)]
        if len(cells) != self._num_columns:
            raise ValueError(
                f"row has {len(cells)} columns, expected {self._num_columns}"
            )

        current = list(accumulate(cells))
        if self._num_rows > 0:
            previous = self._row(self._num_rows - 1)
            current = [above + here for above, here in zip(previous, current)]
        self._data[self._num_rows % self._max_rows] = current
        self._num_rows += 1