"""Progress bars for long-running measurement loops."""

from typing import Self, TextIO

from tqdm import tqdm

from benchcmp.progress.style import OutputStyle, ProgressMode

BAR_FORMAT = " {desc:<30} {percentage:3.0f}% |{bar}| ETA {remaining}"
SPINNER_FORMAT = " {desc:<30} {n_fmt} [{elapsed}]"
REFRESH_INTERVAL_S = 0.08


class ProgressBar:
    """
    Thin wrapper around a ``tqdm`` bar exposing only what measurement loops need.

    A hidden bar accepts every call and draws nothing, so callers never
    branch on the output style.
    """

    def __init__(
        self,
        length: int | None,
        msg: str,
        mode: ProgressMode,
        file: TextIO | None = None,
    ) -> None:
        if length is not None and length < 0:
            raise ValueError(f"Invalid length; expected >=0 but got {length}.")

        self._mode = mode
        # Tracked here as well since a disabled tqdm ignores updates.
        self._position = 0
        self._message = msg
        self._bar = tqdm(
            total=length if mode == ProgressMode.BAR else None,
            desc=msg,
            bar_format=BAR_FORMAT if mode == ProgressMode.BAR else SPINNER_FORMAT,
            mininterval=REFRESH_INTERVAL_S,
            disable=mode == ProgressMode.HIDDEN,
            leave=False,
            file=file,
        )

    @property
    def mode(self) -> ProgressMode:
        return self._mode

    @property
    def position(self) -> int:
        return self._position

    @property
    def message(self) -> str:
        return self._message

    def inc(self, n: int = 1) -> None:
        """Advance the bar by ``n`` steps."""
        self._position += n
        self._bar.update(n)

    def set_message(self, msg: str) -> None:
        """Replace the text shown next to the bar."""
        self._message = msg
        self._bar.set_description_str(msg)

    def finish(self) -> None:
        """Clear the bar from the terminal."""
        self._bar.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info) -> None:
        self.finish()


def get_progress_bar(
    length: int | None,
    msg: str,
    style: OutputStyle,
    file: TextIO | None = None,
) -> ProgressBar:
    """
    Return a pre-configured progress bar for ``style``.

    Parameters
    ----------
    length : int | None
        Number of steps, or None when the total is unknown. An animated
        style with an unknown total falls back to a spinner.

    msg : str
        Text shown next to the bar.

    style : OutputStyle
        The selected output style.

    file : TextIO | None
        Stream to draw on. Defaults to tqdm's default (stderr).
    """
    mode = style.progress_mode()
    if mode == ProgressMode.BAR and length is None:
        mode = ProgressMode.SPINNER
    return ProgressBar(length, msg, mode, file=file)
