"""Benchmark result records and their JSON decoding."""

from .result import (
    BenchmarkResult as BenchmarkResult,
)
from .result import (
    Scalar as Scalar,
)
from .result import (
    Second as Second,
)
from .result import (
    decode_results as decode_results,
)
