"""Output style selection and the progress mode it implies."""

from enum import StrEnum


class ProgressMode(StrEnum):
    """How progress is shown while commands are being measured."""

    BAR = "bar"
    SPINNER = "spinner"
    HIDDEN = "hidden"


class OutputStyle(StrEnum):
    """User-selected output style (``--style``)."""

    BASIC = "basic"
    FULL = "full"
    NO_COLOR = "nocolor"
    COLOR = "color"
    NONE = "none"

    def progress_mode(self) -> ProgressMode:
        """Return the progress mode for this style; only full styles animate."""
        if self in (OutputStyle.FULL, OutputStyle.NO_COLOR):
            return ProgressMode.BAR
        return ProgressMode.HIDDEN
