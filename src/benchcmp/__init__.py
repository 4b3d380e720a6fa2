"""Result comparison and parameter tokenization for command-line benchmarks."""

from .comparison import (
    AnnotatedResult as AnnotatedResult,
)
from .comparison import (
    ComparisonConfig as ComparisonConfig,
)
from .comparison import (
    compute_relative_speed as compute_relative_speed,
)
from .comparison import (
    format_comparison as format_comparison,
)
from .comparison import (
    write_comparison as write_comparison,
)
from .logging import (
    FileLogHandler as FileLogHandler,
)
from .logging import (
    Logger as Logger,
)
from .logging import (
    LoggerConfig as LoggerConfig,
)
from .logging import (
    LogLevel as LogLevel,
)
from .logging import (
    StreamLogHandler as StreamLogHandler,
)
from .parameters import (
    tokenize as tokenize,
)
from .progress import (
    OutputStyle as OutputStyle,
)
from .progress import (
    get_progress_bar as get_progress_bar,
)
from .result import (
    BenchmarkResult as BenchmarkResult,
)
from .result import (
    decode_results as decode_results,
)
from .stats import (
    max_value as max_value,
)
from .stats import (
    min_value as min_value,
)
from .timing import (
    MIN_EXECUTION_TIME as MIN_EXECUTION_TIME,
)
from .timing import (
    check_timing as check_timing,
)

__all__ = [
    # Results
    "BenchmarkResult",
    "decode_results",
    # Comparison
    "AnnotatedResult",
    "ComparisonConfig",
    "compute_relative_speed",
    "format_comparison",
    "write_comparison",
    # Parameters
    "tokenize",
    # Stats & timing
    "min_value",
    "max_value",
    "MIN_EXECUTION_TIME",
    "check_timing",
    # Progress
    "OutputStyle",
    "get_progress_bar",
    # Logging
    "Logger",
    "LoggerConfig",
    "LogLevel",
    "FileLogHandler",
    "StreamLogHandler",
]
