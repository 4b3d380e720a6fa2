"""Relative speed computation and comparison reporting."""

from .config import (
    ComparisonConfig as ComparisonConfig,
)
from .relative import (
    AnnotatedResult as AnnotatedResult,
)
from .relative import (
    compare_mean_time as compare_mean_time,
)
from .relative import (
    compute_relative_speed as compute_relative_speed,
)
from .relative import (
    fastest_index as fastest_index,
)
from .report import (
    format_comparison as format_comparison,
)
from .report import (
    rank_results as rank_results,
)
from .report import (
    write_comparison as write_comparison,
)
