"""Timing-quality checks on finished benchmark results."""

from enum import StrEnum

from benchcmp.logging import Logger
from benchcmp.result import BenchmarkResult, Second

MIN_EXECUTION_TIME: Second = 5e-3
"""Commands faster than this are dominated by process startup and shell overhead."""


class TimingWarning(StrEnum):
    """Reasons a result's timings may not be trustworthy."""

    FAST_EXECUTION_TIME = "fast_execution_time"

    def message(
        self, result: BenchmarkResult, min_execution_time: Second = MIN_EXECUTION_TIME
    ) -> str:
        """Render the human readable warning for ``result``."""
        match self:
            case TimingWarning.FAST_EXECUTION_TIME:
                return (
                    f"Command '{result.command}' took less than "
                    f"{min_execution_time * 1e3:.0f} ms to complete. "
                    "Results might be inaccurate."
                )


def check_timing(
    result: BenchmarkResult,
    min_execution_time: Second = MIN_EXECUTION_TIME,
    logger: Logger | None = None,
) -> list[TimingWarning]:
    """
    Return the timing warnings that apply to ``result``.

    Parameters
    ----------
    result : BenchmarkResult
        The result to inspect.

    min_execution_time : float
        Mean time (seconds) under which a result is flagged. Defaults to
        ``MIN_EXECUTION_TIME``.

    logger : Logger | None
        If given, every warning is also logged at warning level.

    Returns
    -------
    list[TimingWarning]
        The warnings, empty if the result looks sound.
    """
    if min_execution_time <= 0.0:
        raise ValueError(
            f"Invalid min_execution_time; expected >0 but got {min_execution_time}."
        )

    warnings: list[TimingWarning] = []
    if result.mean < min_execution_time:
        warnings.append(TimingWarning.FAST_EXECUTION_TIME)

    if logger is not None:
        for warning in warnings:
            logger.warning(warning.message(result, min_execution_time))

    return warnings
