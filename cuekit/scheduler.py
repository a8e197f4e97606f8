"""
Cue scheduler for CueKit.

Public facade combining the cue store, activation tracker and playback clock.
Consumers receive one notification per cue when the playback offset enters or
leaves its time window, either through an injected CueHandler or by
overriding ``on_cue_begin`` / ``on_cue_end`` in a subclass.
"""

import logging
from typing import Callable, FrozenSet, List, Optional

from .clock import PlaybackClock
from .models import INVALID_OFFSET, IndexedCue, SchedulerConfig
from .store import CueStore
from .tracker import ActivationTracker, find_active_cues

logger = logging.getLogger(__name__)


class CueHandler:
    """Receives cue notifications. Both hooks default to doing nothing."""

    def on_cue_begin(self, cue: IndexedCue) -> None:
        """Called when the offset enters the cue window; times are in milliseconds."""

    def on_cue_end(self, cue: IndexedCue) -> None:
        """Called when the offset leaves the cue window; times are in milliseconds."""


class CallbackHandler(CueHandler):
    """CueHandler that forwards to plain callables."""

    def __init__(
        self,
        on_begin: Optional[Callable[[IndexedCue], None]] = None,
        on_end: Optional[Callable[[IndexedCue], None]] = None
    ):
        self._on_begin = on_begin
        self._on_end = on_end

    def on_cue_begin(self, cue: IndexedCue) -> None:
        if self._on_begin is not None:
            self._on_begin(cue)

    def on_cue_end(self, cue: IndexedCue) -> None:
        if self._on_end is not None:
            self._on_end(cue)


class CueScheduler:
    """
    Fires begin/end notifications for subtitle cues as playback advances.

    Call ``update(dt)`` once per frame, or ``set_offset(ms)`` to seek. Each
    cue produces exactly one begin when it becomes active and one end when it
    stops being active. Within one call every end is delivered before any
    begin.

    Example:
        >>> scheduler = CueScheduler(CallbackHandler(on_begin=lambda c: print(c.text)))
        >>> scheduler.load("1\\n00:00:00,000 --> 00:00:01,000\\nHi\\n")
        True
        >>> scheduler.update(0.1)
        Hi
    """

    INVALID_OFFSET = INVALID_OFFSET

    def __init__(
        self,
        handler: Optional[CueHandler] = None,
        config: Optional[SchedulerConfig] = None
    ):
        self.handler = handler or CueHandler()
        self.config = config or SchedulerConfig()
        self.store = CueStore()
        self.tracker = ActivationTracker()
        self.clock = PlaybackClock(self.set_offset, lambda: self.store.max_offset_ms)
        # Offset of the last activation diff; None until the loaded list is evaluated
        self._evaluated_offset: Optional[float] = None
        # Bumped on every load so dispatch can tell the cue list was replaced
        self._generation = 0

    @property
    def offset_ms(self) -> float:
        return self.clock.offset_ms

    @property
    def paused(self) -> bool:
        return self.clock.paused

    @property
    def max_offset_ms(self) -> int:
        return self.store.max_offset_ms

    @property
    def cues(self) -> List[IndexedCue]:
        return self.store.cues

    @property
    def fired_cues(self) -> FrozenSet[int]:
        return self.tracker.fired_cues

    @property
    def active_cues(self) -> List[IndexedCue]:
        """Cues active at the current offset, whether fired or not."""
        return find_active_cues(self.clock.offset_ms, self.store.cues)

    def load(self, text: str, auto_max_offset: Optional[bool] = None) -> bool:
        """
        Load an SRT or WebVTT document and restart playback at offset 0.

        Args:
            text: Subtitle document
            auto_max_offset: Derive the max offset from the last cue end;
                defaults to the config value

        Returns:
            True on success. On failure all state is invalidated and playback
            stays inert until the next successful load.
        """
        if auto_max_offset is None:
            auto_max_offset = self.config.auto_max_offset

        self.tracker.clear()
        self._evaluated_offset = None
        self._generation += 1
        if self.store.load(text, auto_max_offset, self.config.subtitle_format):
            self.clock.reset()
            return True

        self.clock.invalidate()
        logger.debug("Playback disabled until the next successful load")
        return False

    set_subtitles_string = load

    def set_offset(self, new_offset: float) -> None:
        """
        Move playback to ``new_offset`` milliseconds and fire transitions.

        Ignored when ``new_offset`` was already evaluated, when it is the
        invalid sentinel, or while no valid cue list is loaded. The first
        call after a load or clear_fired_events() is always evaluated, so
        seeking to 0 right after loading fires the cues starting at 0.

        The fired set is updated before any hook runs. If a hook raises, the
        remaining notifications of that batch are not delivered later. If a
        hook reloads the cues, the remaining notifications are dropped since
        they refer to the replaced cue list.
        """
        if (
            new_offset == self._evaluated_offset
            or new_offset == INVALID_OFFSET
            or self.clock.offset_ms == INVALID_OFFSET
        ):
            return

        self.clock.offset_ms = new_offset
        self._evaluated_offset = new_offset
        transition = self.tracker.apply(new_offset, self.store.cues)
        generation = self._generation

        for cue in transition.ended:
            self.on_cue_end(cue)
            if self._generation != generation:
                return

        for cue in transition.began:
            self.on_cue_begin(cue)
            if self._generation != generation:
                return

    def update(self, dt: float) -> None:
        """Advance playback by ``dt`` seconds, looping at the max offset."""
        self.clock.tick(dt)

    def on_cue_begin(self, cue: IndexedCue) -> None:
        self.handler.on_cue_begin(cue)

    def on_cue_end(self, cue: IndexedCue) -> None:
        self.handler.on_cue_end(cue)

    def clear_fired_events(self) -> None:
        """Forget which cues are active without firing end notifications."""
        self.tracker.clear()
        self._evaluated_offset = None

    def set_max_length(self, value: int) -> None:
        """Set the offset at which playback loops, e.g. the video duration."""
        self.store.set_max_length(value)

    def pause(self) -> None:
        """Stop advancing on update(); set_offset() keeps working."""
        self.clock.paused = True

    def resume(self) -> None:
        self.clock.paused = False

    def get_offset_ms(self) -> float:
        return self.clock.offset_ms
