"""Rendering of the ranked comparison summary."""

import sys
from collections.abc import Sequence
from functools import cmp_to_key
from typing import TextIO

from benchcmp.comparison.config import ComparisonConfig
from benchcmp.comparison.relative import (
    AnnotatedResult,
    compare_mean_time,
    compute_relative_speed,
)
from benchcmp.logging import Logger
from benchcmp.result import BenchmarkResult


def rank_results(results: Sequence[BenchmarkResult]) -> list[AnnotatedResult]:
    """Annotate ``results`` and sort them fastest first; ties keep input order."""
    annotated = compute_relative_speed(results)
    annotated.sort(
        key=cmp_to_key(lambda left, right: compare_mean_time(left.result, right.result))
    )
    return annotated


def format_comparison(
    results: Sequence[BenchmarkResult],
    config: ComparisonConfig | None = None,
) -> list[str]:
    """
    Render the comparison summary of ``results`` as lines of text.

    Returns an empty list when fewer than two results are given.
    """
    if len(results) < 2:
        return []

    config = config if config is not None else ComparisonConfig.default()
    annotated = rank_results(results)
    fastest, others = annotated[0], annotated[1:]

    lines = [config.title, f"  '{fastest.result.command}' ran"]
    for item in others:
        speed = f"{item.relative_speed:{config.speed_width}.{config.speed_precision}f}"
        stddev = f"{item.relative_speed_stddev:.{config.speed_precision}f}"
        percent = f"{item.percent_change:.{config.percent_precision}f}"
        lines.append(
            f"{speed} ± {stddev} times faster than '{item.result.command}', -{percent}%"
        )
    return lines


def write_comparison(
    results: Sequence[BenchmarkResult],
    stream: TextIO | None = None,
    config: ComparisonConfig | None = None,
    logger: Logger | None = None,
) -> None:
    """
    Write the comparison summary of ``results`` to ``stream`` (stdout by default).

    Does nothing when fewer than two results are given.
    """
    lines = format_comparison(results, config)
    if not lines:
        if logger is not None:
            logger.debug(f"Skipping comparison; need at least 2 results but got {len(results)}")
        return

    if logger is not None:
        logger.debug(f"Writing comparison of {len(results)} results")

    stream = stream if stream is not None else sys.stdout
    stream.write("\n".join(lines) + "\n")
