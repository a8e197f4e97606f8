"""
Playback clock for CueKit.

Advances the playback offset by the elapsed frame time and loops it back to
the start once it passes the maximum offset.
"""

from typing import Callable

from .models import INVALID_OFFSET


def wrap_offset(candidate: float, max_offset: float) -> float:
    """
    Loop an offset that ran past ``max_offset`` back to the start.

    Offsets greater than ``max_offset`` are reduced into ``(0, max_offset]``,
    the same result as subtracting ``max_offset`` until the value fits. A
    non-positive ``max_offset`` disables wraparound.

    Example:
        >>> wrap_offset(2001, 2000)
        1
        >>> wrap_offset(4000, 2000)
        2000
        >>> wrap_offset(2001, 0)
        2001
    """
    if max_offset <= 0 or candidate <= max_offset:
        return candidate

    wrapped = candidate % max_offset
    return wrapped if wrapped > 0 else max_offset


class PlaybackClock:
    """
    Offset and pause state driven by a host frame loop.

    Every tick computes the next offset and hands it to ``seek``, which is
    expected to store it (typically ``CueScheduler.set_offset``).
    """

    def __init__(self, seek: Callable[[float], None], max_offset: Callable[[], float]):
        self.offset_ms: float = 0
        self.paused = False
        self._seek = seek
        self._max_offset = max_offset

    def tick(self, dt: float) -> None:
        """
        Advance playback by ``dt`` seconds.

        Does nothing while paused or while the offset is invalid.

        Raises:
            ValueError: If ``dt`` is negative
        """
        if dt < 0:
            raise ValueError(f"Elapsed time must be non-negative, got {dt}")

        if self.offset_ms == INVALID_OFFSET or self.paused:
            return

        candidate = self.offset_ms + dt * 1000.0
        self._seek(wrap_offset(candidate, self._max_offset()))

    def reset(self) -> None:
        self.offset_ms = 0
        self.paused = False

    def invalidate(self) -> None:
        self.offset_ms = INVALID_OFFSET
        self.paused = False
