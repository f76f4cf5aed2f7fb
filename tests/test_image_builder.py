import pytest

from chromakit.image_builder import ImageBuilder
from chromakit.rolling_integral_image import RollingIntegralImage


class _Image:
    def __init__(self, num_columns):
        self.num_columns = num_columns
        self.rows = []

    def add_row(self, row):
        self.rows.append(list(row))


def test_consume_appends_rows_in_order():
    image = _Image(3)
    builder = ImageBuilder(image)
    builder.consume([1.0, 2.0, 3.0])
    builder.consume((4.0, 5.0, 6.0))
    assert image.rows == [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]


def test_consume_rejects_wrong_length():
    image = _Image(3)
    builder = ImageBuilder(image)
    with pytest.raises(ValueError):
        builder.consume([1.0, 2.0])
    assert image.rows == []


def test_consume_without_image_raises():
    builder = ImageBuilder()
    with pytest.raises(RuntimeError):
        builder.consume([1.0])


def test_reset_switches_target_image():
    first = _Image(2)
    second = _Image(2)
    builder = ImageBuilder(first)
    builder.consume([1.0, 2.0])
    builder.reset(second)
    builder.consume([3.0, 4.0])
    assert builder.image is second
    assert first.rows == [[1.0, 2.0]]
    assert second.rows == [[3.0, 4.0]]


def test_builds_rolling_integral_image():
    image = RollingIntegralImage(4)
    image.add_row([1.0, 2.0])
    builder = ImageBuilder(image)
    builder.consume([3.0, 4.0])
    assert image.num_rows == 2
    assert image.area(0, 0, 2, 2) == pytest.approx(1.0 + 2.0 + 3.0 + 4.0)