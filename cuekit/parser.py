"""
Subtitle parsing for CueKit.

Turns SRT or WebVTT documents into a flat sequence of subtitle nodes. Cue
nodes carry a CueRecord with millisecond times; metadata blocks (WebVTT
header, NOTE, STYLE and REGION blocks) are emitted as their own node types so
callers can keep or discard them. Every failure surfaces as FormatError.
"""

import logging
import re
from typing import List, Optional

import srt

from .models import CueRecord, SubtitleNode
from .utils import timestamp_to_milliseconds, timedelta_to_milliseconds

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS = ("srt", "vtt")

# Pre-compiled regex patterns
_BLANK_LINES_PATTERN = re.compile(r'\n(?:[ \t]*\n)+')
_VTT_SIGNATURE_PATTERN = re.compile(r'^WEBVTT(?:[ \t].*)?$')
_VTT_TIMING_PATTERN = re.compile(r'^(\S+)[ \t]+-->[ \t]+(\S+)(?:[ \t]+.*)?$')
_VTT_METADATA_BLOCKS = {
    "NOTE": "note",
    "STYLE": "style",
    "REGION": "region",
}


class FormatError(ValueError):
    """Raised when subtitle text cannot be parsed."""


def _normalize_newlines(text: str) -> str:
    return text.replace('\r\n', '\n').replace('\r', '\n')


def detect_format(text: str) -> str:
    """
    Guess the subtitle format of a document.

    Returns "vtt" when the document opens with the WEBVTT signature and "srt"
    otherwise.
    """
    if text.lstrip('\ufeff \t\r\n').startswith('WEBVTT'):
        return "vtt"
    return "srt"


def _parse_vtt_block(block: str) -> SubtitleNode:
    lines = block.split('\n')
    keyword = lines[0].split(None, 1)[0] if lines[0].strip() else ""
    if keyword in _VTT_METADATA_BLOCKS:
        return SubtitleNode(type=_VTT_METADATA_BLOCKS[keyword], data=block)

    # Timing line is either first or follows a cue identifier
    timing_idx = None
    for i, line in enumerate(lines[:2]):
        if '-->' in line:
            timing_idx = i
            break

    if timing_idx is None:
        raise FormatError(f"Invalid WebVTT block: {lines[0]!r}")

    match = _VTT_TIMING_PATTERN.match(lines[timing_idx].strip())
    if not match:
        raise FormatError(f"Invalid WebVTT timing line: {lines[timing_idx]!r}")

    try:
        start = timestamp_to_milliseconds(match.group(1))
        end = timestamp_to_milliseconds(match.group(2))
    except ValueError as e:
        raise FormatError(str(e)) from e

    text = '\n'.join(lines[timing_idx + 1:])
    return SubtitleNode(type="cue", data=CueRecord(start=start, end=end, text=text))


def parse_vtt(text: str) -> List[SubtitleNode]:
    """
    Parse a WebVTT document.

    Args:
        text: WebVTT document content

    Returns:
        List of nodes in document order, starting with the header node

    Raises:
        FormatError: If the signature is missing or a block is malformed

    Example:
        >>> nodes = parse_vtt("WEBVTT\\n\\n00:00.000 --> 00:01.000\\nHi\\n")
        >>> [node.type for node in nodes]
        ['header', 'cue']
    """
    content = _normalize_newlines(text).lstrip('\ufeff').strip('\n')
    blocks = _BLANK_LINES_PATTERN.split(content) if content else []

    if not blocks or not _VTT_SIGNATURE_PATTERN.match(blocks[0].split('\n', 1)[0]):
        raise FormatError("Missing WEBVTT signature")

    nodes = [SubtitleNode(type="header", data=blocks[0])]
    for block in blocks[1:]:
        if block.strip():
            nodes.append(_parse_vtt_block(block.strip('\n')))

    return nodes


def parse_srt(text: str) -> List[SubtitleNode]:
    """
    Parse a SubRip document with the srt library.

    Raises:
        FormatError: If the document contains content that is not a subtitle
    """
    try:
        subtitles = list(srt.parse(_normalize_newlines(text)))
    except (srt.SRTParseError, ValueError) as e:
        raise FormatError(f"Invalid SRT content: {e}") from e

    return [
        SubtitleNode(
            type="cue",
            data=CueRecord(
                start=timedelta_to_milliseconds(sub.start),
                end=timedelta_to_milliseconds(sub.end),
                text=sub.content,
            ),
        )
        for sub in subtitles
    ]


def parse(text: str, subtitle_format: Optional[str] = None) -> List[SubtitleNode]:
    """
    Parse an SRT or WebVTT document into subtitle nodes.

    Args:
        text: Subtitle document content
        subtitle_format: "srt", "vtt" or None to detect from the content

    Returns:
        List of SubtitleNode in document order (not sorted by time)

    Raises:
        FormatError: If the content cannot be parsed
    """
    if not isinstance(text, str):
        raise FormatError(f"Subtitle content must be a string, got {type(text).__name__}")

    if subtitle_format is None:
        subtitle_format = detect_format(text)
    elif subtitle_format not in SUPPORTED_FORMATS:
        raise FormatError(f"Unsupported subtitle format: {subtitle_format}")

    logger.debug(f"Parsing {len(text)} characters as {subtitle_format}")

    if subtitle_format == "vtt":
        return parse_vtt(text)
    return parse_srt(text)


def parse_cues(text: str, subtitle_format: Optional[str] = None) -> List[CueRecord]:
    """Parse a subtitle document and keep the cue records only."""
    return [node.data for node in parse(text, subtitle_format) if node.type == "cue"]
