"""NaN-safe ordering helpers for float sequences."""

from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray


def compare_floats(left: float, right: float) -> int:
    """
    Total three-way comparison of two floats.

    Returns -1, 0 or 1. Pairs that cannot be ordered (either side NaN)
    compare as equal instead of raising.
    """
    if left < right:
        return -1
    if left > right:
        return 1
    return 0


def _extremum(values: Sequence[float] | NDArray[np.float64], sign: int) -> float:
    if len(values) == 0:
        raise ValueError("Invalid values; expected at least one value but got none.")

    best = values[0]
    for value in values[1:]:
        # Only a strict improvement replaces the running extremum.
        if compare_floats(value, best) == sign:
            best = value
    return float(best)


def min_value(values: Sequence[float] | NDArray[np.float64]) -> float:
    """Return the smallest of ``values``, ignoring incomparable elements after the first."""
    return _extremum(values, -1)


def max_value(values: Sequence[float] | NDArray[np.float64]) -> float:
    """Return the largest of ``values``, ignoring incomparable elements after the first."""
    return _extremum(values, 1)
