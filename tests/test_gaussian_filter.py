import pytest
from hypothesis import given
from hypothesis import strategies as st

from chromakit.gaussian_filter import box_filter, gaussian_filter

signals = st.lists(st.integers(-1000, 1000), min_size=1, max_size=40)


def test_box_filter_of_empty_input_is_empty():
    assert box_filter([], 3) == []


def test_box_filter_with_zero_width_gives_zeros():
    assert box_filter([1, 2, 3], 0) == [0.0, 0.0, 0.0]


def test_box_filter_negative_width_raises():
    with pytest.raises(ValueError):
        box_filter([1, 2, 3], -1)


def test_box_filter_middle_of_three():
    result = box_filter([1, 2, 3], 3)
    assert len(result) == 3
    assert result[1] == pytest.approx(2.0)


@given(signals)
def test_box_filter_width_one_is_identity(values):
    assert box_filter(values, 1) == pytest.approx(values)


@given(st.floats(-100, 100), st.integers(1, 30), st.integers(1, 12))
def test_box_filter_keeps_constant_signal(level, size, width):
    result = box_filter([level] * size, width)
    assert result == pytest.approx([level] * size, abs=1e-9)


@given(signals, st.integers(1, 12))
def test_box_filter_stays_within_input_range(values, width):
    result = box_filter(values, width)
    assert len(result) == len(values)
    assert all(min(values) - 1e-9 <= r <= max(values) + 1e-9 for r in result)


@given(signals, st.integers(0, 6))
def test_box_filter_odd_width_commutes_with_reversal(values, half):
    width = 2 * half + 1
    assert box_filter(values[::-1], width) == box_filter(values, width)[::-1]


def test_gaussian_filter_requires_positive_passes():
    with pytest.raises(ValueError):
        gaussian_filter([1.0, 2.0], 1.0, 0)


@given(st.floats(-100, 100), st.integers(1, 30), st.floats(0.5, 5), st.integers(1, 4))
def test_gaussian_filter_keeps_constant_signal(level, size, sigma, passes):
    result = gaussian_filter([level] * size, sigma, passes)
    assert result == pytest.approx([level] * size, abs=1e-9)


@given(signals, st.floats(0.5, 5), st.integers(1, 4))
def test_gaussian_filter_stays_within_input_range(values, sigma, passes):
    result = gaussian_filter(values, sigma, passes)
    assert len(result) == len(values)
    assert all(min(values) - 1e-9 <= r <= max(values) + 1e-9 for r in result)


def test_gaussian_filter_leaves_input_untouched():
    values = [0.0, 0.0, 10.0, 0.0, 0.0]
    result = gaussian_filter(values, 1.5, 3)
    assert values == [0.0, 0.0, 10.0, 0.0, 0.0]
    assert result[2] < 10.0