"""
CueKit - Edge-triggered subtitle cue scheduling

Drives begin/end notifications from SRT or WebVTT cues as a playback offset
advances, one notification per activation edge rather than one per frame.

Features:
- Parse SRT (via the srt library) and WebVTT documents
- Sort and index cues, derive the loop length from the last cue end
- Fire begin/end notifications exactly once per activation, ends first
- Looping playback driven by a host frame loop, with pause/resume and seeking

Example usage:
    >>> from cuekit import CueScheduler, CallbackHandler
    >>>
    >>> handler = CallbackHandler(
    ...     on_begin=lambda cue: print(f"Show {cue.text}"),
    ...     on_end=lambda cue: print(f"Hide {cue.text}"),
    ... )
    >>> scheduler = CueScheduler(handler)
    >>> scheduler.load(subtitle_text)
    >>>
    >>> # Once per frame
    >>> scheduler.update(dt)
"""

import logging

__version__ = "0.1.0"
__author__ = "CueKit Contributors"
__license__ = "MIT"

# Add NullHandler to prevent "No handler found" warnings
# Users should configure logging in their application if they want to see logs
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Core utility functions
from .utils import (
    timestamp_to_milliseconds,
    milliseconds_to_timestamp,
    timedelta_to_milliseconds,
)

# Parsing
from .parser import (
    FormatError,
    detect_format,
    parse,
    parse_cues,
    parse_srt,
    parse_vtt,
)

# Main classes
from .store import CueStore, index_cues
from .tracker import ActivationTracker, CueTransition, diff_active_cues, find_active_cues
from .clock import PlaybackClock, wrap_offset
from .scheduler import CueScheduler, CueHandler, CallbackHandler

# Data models
from .models import INVALID_OFFSET, CueRecord, IndexedCue, SubtitleNode, SchedulerConfig

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__license__",

    # Timestamp helpers
    "timestamp_to_milliseconds",
    "milliseconds_to_timestamp",
    "timedelta_to_milliseconds",

    # Parsing
    "FormatError",
    "detect_format",
    "parse",
    "parse_cues",
    "parse_srt",
    "parse_vtt",

    # Main classes
    "CueScheduler",
    "CueHandler",
    "CallbackHandler",
    "CueStore",
    "ActivationTracker",
    "PlaybackClock",
    "CueTransition",

    # Utility functions
    "index_cues",
    "diff_active_cues",
    "find_active_cues",
    "wrap_offset",

    # Models
    "INVALID_OFFSET",
    "CueRecord",
    "IndexedCue",
    "SubtitleNode",
    "SchedulerConfig",
]
