"""Aggregate timing statistics for one benchmarked command."""

from typing import Any, Self

import msgspec
from msgspec import Struct

Second = float
Scalar = float


class BenchmarkResult(Struct, frozen=True):
    """
    Aggregate timing statistics of one repeatedly executed command.

    Parameters
    ----------
    command : str
        Display label of the command. Not guaranteed to be unique.

    mean, stddev, median, user, system, min, max : float
        Timing statistics in seconds. ``stddev`` may be zero when only a
        single sample was taken.

    times : list[float] | None
        Raw wall-clock samples, if the collector kept them.

    parameter : str | None
        Value of the swept parameter this run belongs to, if any.
    """

    command: str
    mean: Second
    stddev: Second
    median: Second
    user: Second
    system: Second
    min: Second
    max: Second
    times: list[Second] | None = None
    parameter: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Build a result from a plain mapping, as found in exported JSON."""
        return msgspec.convert(data, type=cls)


class _ExportDocument(Struct):
    results: list[BenchmarkResult]


_export_decoder = msgspec.json.Decoder(_ExportDocument)


def decode_results(data: bytes | str) -> list[BenchmarkResult]:
    """
    Decode the ``{"results": [...]}`` document written by the JSON exporter.

    Unknown fields (eg ``exit_codes`` from newer exporters) are ignored.

    Parameters
    ----------
    data : bytes | str
        The raw JSON document.

    Returns
    -------
    list[BenchmarkResult]
        The results, in document order.

    Raises
    ------
    msgspec.DecodeError
        If the document is not valid JSON.

    msgspec.ValidationError
        If a result is missing a field or has a field of the wrong type.
    """
    return _export_decoder.decode(data).results
