"""Output styles and progress indication."""

from .bar import (
    ProgressBar as ProgressBar,
)
from .bar import (
    get_progress_bar as get_progress_bar,
)
from .style import (
    OutputStyle as OutputStyle,
)
from .style import (
    ProgressMode as ProgressMode,
)
