"""Feature-vector consumer that appends each vector to an image as a row."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol


class _Image(Protocol):
    @property
    def num_columns(self) -> int: ...

    def add_row(self, row: list[float]) -> None: ...


class ImageBuilder:
    """Append every consumed feature vector to ``image`` as a new row."""

    def __init__(self, image: _Image | None = None) -> None:
        self.image = image

    def reset(self, image: _Image | None) -> None:
        """Direct further rows to ``image``."""
        self.image = image

    def consume(self, features: Iterable[float]) -> None:
        """Append ``features`` as a row; its length must match the image."""
        if self.image is None:
            raise RuntimeError("no image to add rows to")
        row = list(features)
        if len(row) != self.image.num_columns:
            raise ValueError(
                f"feature vector has {len(row)} values, "
                f"the image has {self.image.num_columns} columns"
            )
        self.image.add_row(row)