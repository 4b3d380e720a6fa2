from collections.abc import Callable

import pytest

from benchcmp.result import BenchmarkResult


def pytest_configure(config: pytest.Config) -> None:
    """Register shared markers."""
    config.addinivalue_line("markers", "slow: mark test as slow running")


@pytest.fixture
def make_result() -> Callable[..., BenchmarkResult]:
    """Return a factory building results whose other statistics follow the mean."""

    def _make_result(
        command: str,
        mean: float,
        stddev: float = 1.0,
        parameter: str | None = None,
    ) -> BenchmarkResult:
        return BenchmarkResult(
            command=command,
            mean=mean,
            stddev=stddev,
            median=mean,
            user=mean,
            system=0.0,
            min=mean,
            max=mean,
            times=None,
            parameter=parameter,
        )

    return _make_result
