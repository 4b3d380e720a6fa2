"""Relative speed of benchmark results against the fastest one."""

from collections.abc import Sequence

import numpy as np
from msgspec import Struct

from benchcmp.result import BenchmarkResult, Scalar
from benchcmp.stats import compare_floats


class AnnotatedResult(Struct, frozen=True):
    """A benchmark result together with its speed relative to the fastest result."""

    result: BenchmarkResult
    relative_speed: Scalar
    relative_speed_stddev: Scalar
    percent_change: Scalar
    is_fastest: bool


def compare_mean_time(left: BenchmarkResult, right: BenchmarkResult) -> int:
    """Order two results by mean time; NaN means compare as equal."""
    return compare_floats(left.mean, right.mean)


def fastest_index(results: Sequence[BenchmarkResult]) -> int:
    """
    Return the index of the first result with the smallest mean.

    Raises
    ------
    ValueError
        If ``results`` is empty.
    """
    if not results:
        raise ValueError(
            "Invalid results; expected at least one benchmark result but got none."
        )

    best = 0
    for i in range(1, len(results)):
        if compare_mean_time(results[i], results[best]) < 0:
            best = i
    return best


def compute_relative_speed(
    results: Sequence[BenchmarkResult],
) -> list[AnnotatedResult]:
    """
    Annotate every result with its speed relative to the fastest result.

    The output is aligned index for index with ``results``; sorting is left
    to the caller. Uncertainty is propagated to first order assuming the
    two means are independent (zero covariance), except for the fastest
    result against itself which is exactly 1 with no uncertainty.

    Parameters
    ----------
    results : Sequence[BenchmarkResult]
        Non-empty collection of results. Means are expected to be positive
        and finite; other values produce ``inf``/``nan`` annotations.

    Returns
    -------
    list[AnnotatedResult]
        One annotation per input result.

    Raises
    ------
    ValueError
        If ``results`` is empty.
    """
    idx = fastest_index(results)
    fastest = results[idx]

    means = np.array([r.mean for r in results], dtype=np.float64)
    stddevs = np.array([r.stddev for r in results], dtype=np.float64)
    fastest_mean = np.float64(fastest.mean)
    fastest_stddev = np.float64(fastest.stddev)

    with np.errstate(divide="ignore", invalid="ignore"):
        ratios = means / fastest_mean
        percent_changes = 100.0 * (means - fastest_mean) / means

        # https://en.wikipedia.org/wiki/Propagation_of_uncertainty#Example_formulas
        ratio_stddevs = ratios * np.sqrt(
            (stddevs / means) ** 2 + (fastest_stddev / fastest_mean) ** 2
        )

    ratios[idx] = 1.0
    ratio_stddevs[idx] = 0.0
    percent_changes[idx] = 0.0

    return [
        AnnotatedResult(
            result=result,
            relative_speed=float(ratios[i]),
            relative_speed_stddev=float(ratio_stddevs[i]),
            percent_change=float(percent_changes[i]),
            is_fastest=i == idx,
        )
        for i, result in enumerate(results)
    ]
