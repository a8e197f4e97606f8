"""
Cue storage for CueKit.

Holds the time-sorted, indexed cue list for one loaded subtitle document
together with the maximum playback offset used for looping.
"""

import logging
from typing import List, Optional, Sequence

from .models import INVALID_OFFSET, CueRecord, IndexedCue
from .parser import FormatError, parse
from .utils import milliseconds_to_timestamp

logger = logging.getLogger(__name__)


def index_cues(records: Sequence[CueRecord]) -> List[IndexedCue]:
    """
    Sort cue records by start time and assign sequential indices.

    Sorting is stable, so cues sharing a start time keep their document order.
    Records with ``end <= start`` can never be active and are dropped.

    Example:
        >>> cues = index_cues([CueRecord(1000, 2000, "b"), CueRecord(0, 1000, "a")])
        >>> [(c.index, c.text) for c in cues]
        [(0, 'a'), (1, 'b')]
    """
    valid = [record for record in records if record.end > record.start]
    if len(valid) != len(records):
        logger.debug(f"Dropped {len(records) - len(valid)} zero or negative length cues")

    ordered = sorted(valid, key=lambda record: record.start)
    return [IndexedCue.from_record(index, record) for index, record in enumerate(ordered)]


class CueStore:
    """
    Owns the loaded cue list and the maximum offset.

    The list is only ever replaced wholesale, so integer indices handed out
    for one load remain valid until the next call to ``load``.
    """

    def __init__(self):
        self._cues: List[IndexedCue] = []
        self.max_offset_ms: int = 0

    @property
    def cues(self) -> List[IndexedCue]:
        return self._cues

    def __len__(self) -> int:
        return len(self._cues)

    def __getitem__(self, index: int) -> IndexedCue:
        return self._cues[index]

    def load(
        self,
        text: str,
        auto_max_offset: bool = True,
        subtitle_format: Optional[str] = None
    ) -> bool:
        """
        Replace the stored cues with the cues parsed from ``text``.

        Args:
            text: SRT or WebVTT document
            auto_max_offset: Set the max offset to the latest cue end (default: True)
            subtitle_format: "srt", "vtt" or None to autodetect

        Returns:
            True on success. On a parse failure the store is invalidated and
            False is returned; the error is logged, not raised.
        """
        try:
            nodes = parse(text, subtitle_format)
        except FormatError as e:
            self.clear()
            logger.warning(f"Couldn't load the subtitles, please verify the subtitle format: {e}")
            return False

        self._cues = index_cues([node.data for node in nodes if node.type == "cue"])

        if auto_max_offset:
            self.max_offset_ms = max((cue.end for cue in self._cues), default=0)

        logger.info(
            f"Loaded {len(self._cues)} cues "
            f"(loops at {milliseconds_to_timestamp(self.max_offset_ms)})"
        )
        return True

    def clear(self) -> None:
        """Drop all cues and mark the store invalid."""
        self._cues = []
        self.max_offset_ms = INVALID_OFFSET

    def set_max_length(self, value: int) -> None:
        """
        Override the max offset, e.g. with the real media duration.

        No check is made against the stored cue end times.
        """
        self.max_offset_ms = value
