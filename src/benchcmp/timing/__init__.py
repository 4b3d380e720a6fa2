"""Timing-quality checks and thresholds."""

from .checks import (
    MIN_EXECUTION_TIME as MIN_EXECUTION_TIME,
)
from .checks import (
    TimingWarning as TimingWarning,
)
from .checks import (
    check_timing as check_timing,
)
