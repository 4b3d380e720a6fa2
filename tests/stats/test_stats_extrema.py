"""Tests for NaN-safe extrema helpers."""

import math

import numpy as np
import pytest

from benchcmp.stats import compare_floats, max_value, min_value


class TestCompareFloats:
    def test_ordering(self) -> None:
        assert compare_floats(1.0, 2.0) == -1
        assert compare_floats(2.0, 1.0) == 1
        assert compare_floats(1.0, 1.0) == 0

    def test_nan_is_equal_to_everything(self) -> None:
        assert compare_floats(math.nan, 1.0) == 0
        assert compare_floats(1.0, math.nan) == 0
        assert compare_floats(math.nan, math.nan) == 0


class TestMaxValue:
    def test_max(self) -> None:
        assert max_value([1.0]) == 1.0
        assert max_value([-1.0]) == -1.0
        assert max_value([-2.0, -1.0]) == -1.0
        assert max_value([-1.0, 1.0]) == 1.0
        assert max_value([-1.0, 1.0, 0.0]) == 1.0

    def test_numpy_input(self) -> None:
        result = max_value(np.array([0.5, 2.5, 1.5]))
        assert isinstance(result, float)
        assert result == 2.5

    def test_nan_after_first_is_skipped(self) -> None:
        assert max_value([1.0, math.nan, 3.0]) == 3.0

    def test_empty_raises(self) -> None:
        with pytest.raises(ValueError):
            max_value([])


class TestMinValue:
    def test_min(self) -> None:
        assert min_value([1.0]) == 1.0
        assert min_value([-2.0, -1.0]) == -2.0
        assert min_value([3.0, 1.0, 2.0]) == 1.0

    def test_nan_after_first_is_skipped(self) -> None:
        assert min_value([2.0, math.nan, 0.5]) == 0.5

    def test_empty_raises(self) -> None:
        with pytest.raises(ValueError):
            min_value(np.array([], dtype=np.float64))
