"""
Shared utility functions for CueKit.

Timestamp conversion between subtitle notation and integer milliseconds.
"""

import re
from datetime import timedelta

# HH:MM:SS.mmm or MM:SS.mmm; SRT uses a comma before the milliseconds
_TIMESTAMP_PATTERN = re.compile(r'^(?:(\d+):)?(\d{2}):(\d{2})[.,](\d{3})$')


def timestamp_to_milliseconds(timestamp: str) -> int:
    """
    Convert HH:MM:SS.mmm (or MM:SS.mmm) format to milliseconds.

    Args:
        timestamp: Timestamp string, '.' or ',' before the milliseconds

    Returns:
        Time in milliseconds

    Raises:
        ValueError: If the timestamp is malformed

    Example:
        >>> timestamp_to_milliseconds("00:01:30.500")
        90500
        >>> timestamp_to_milliseconds("01:02.003")
        62003
    """
    match = _TIMESTAMP_PATTERN.match(timestamp.strip())
    if not match:
        raise ValueError(f"Invalid timestamp: {timestamp!r}")

    hours, minutes, seconds, millis = match.groups()
    if int(minutes) > 59 or int(seconds) > 59:
        raise ValueError(f"Invalid timestamp: {timestamp!r}")

    return ((int(hours or 0) * 60 + int(minutes)) * 60 + int(seconds)) * 1000 + int(millis)


def milliseconds_to_timestamp(milliseconds: int) -> str:
    """
    Convert milliseconds to HH:MM:SS.mmm format.

    Example:
        >>> milliseconds_to_timestamp(90500)
        '00:01:30.500'
    """
    seconds, millis = divmod(int(milliseconds), 1000)
    minutes, seconds = divmod(seconds, 60)
    hours, minutes = divmod(minutes, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}.{millis:03d}"


def timedelta_to_milliseconds(delta: timedelta) -> int:
    """Convert a timedelta to whole milliseconds, truncating sub-millisecond parts."""
    return delta // timedelta(milliseconds=1)
