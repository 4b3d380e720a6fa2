from typing import Self

from msgspec import Struct


class ComparisonConfig(Struct):
    """Layout of the rendered comparison summary."""

    title: str = "Summary"
    speed_width: int = 8
    speed_precision: int = 2
    percent_precision: int = 1

    def __post_init__(self):
        """Validate that widths and precisions are non-negative."""
        if self.speed_width < 0:
            raise ValueError(
                f"Invalid speed_width; expected >=0 but got {self.speed_width}"
            )
        if self.speed_precision < 0:
            raise ValueError(
                f"Invalid speed_precision; expected >=0 but got {self.speed_precision}"
            )
        if self.percent_precision < 0:
            raise ValueError(
                f"Invalid percent_precision; expected >=0 but got {self.percent_precision}"
            )

    @classmethod
    def default(cls) -> Self:
        """Return the layout used by the command-line summary."""
        return cls(
            title="Summary",
            speed_width=8,
            speed_precision=2,
            percent_precision=1,
        )
