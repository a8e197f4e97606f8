"""
Data models for CueKit.

Defines the core data structures used throughout the package.
"""

from dataclasses import dataclass
from typing import Any, Optional

# Offset sentinel used while no valid cue list is loaded
INVALID_OFFSET = -1


@dataclass(frozen=True)
class CueRecord:
    """Represents a parsed cue with millisecond start/end times."""
    start: int  # ms
    end: int    # ms, exclusive
    text: str


@dataclass(frozen=True)
class SubtitleNode:
    """A block emitted by the parser: a cue or a piece of document metadata."""
    type: str  # "cue", "header", "note", "style" or "region"
    data: Any


@dataclass(frozen=True)
class IndexedCue:
    """A cue placed in a loaded cue list.

    ``index`` is the position after sorting by start time and identifies the
    cue for as long as that list stays loaded.
    """
    index: int
    start: int
    end: int
    text: str

    @classmethod
    def from_record(cls, index: int, record: CueRecord) -> "IndexedCue":
        return cls(index=index, start=record.start, end=record.end, text=record.text)

    def is_active(self, offset: float) -> bool:
        """Whether ``offset`` falls inside ``[start, end)``."""
        return self.start <= offset < self.end


@dataclass
class SchedulerConfig:
    """Configuration for CueScheduler."""
    auto_max_offset: bool = True
    subtitle_format: Optional[str] = None  # "srt", "vtt" or None to autodetect
