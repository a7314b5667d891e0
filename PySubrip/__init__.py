"""
PySubrip - SubRip Subtitle Parsing Library

Parses SubRip (.srt) subtitles into timed cues for a media playback pipeline.

Basic Usage
-----------

# Parse a byte stream, shifting every event time by five seconds
with open("movie.srt", "rb") as f:
    document = parse(f, encoding="utf-8", start_time_us=5_000_000)

# Find the cues to display at a point in time
for cue in document.get_cues(12_000_000):
    print(cue.text)
"""
from __future__ import annotations

from typing import BinaryIO

from PySubrip.Formats.SubripParser import SubripParser, application_subrip
from PySubrip.SubtitleCue import SubtitleCue, BuildCue
from PySubrip.SubtitleDocument import SubtitleDocument
from PySubrip.SubtitleError import SubtitleError, SubtitleParseError, SubtitleTimestampError
from PySubrip.SubtitleParser import SubtitleParser
from PySubrip.Helpers.Markup import ResolveMarkup, StyleSpan
from PySubrip.Helpers.Time import ParseSubripTimestamp
from PySubrip.version import __version__


def parse(source: BinaryIO, encoding: str|None = None, start_time_us: int = 0) -> SubtitleDocument:
    """
    Parse a SubRip byte stream into a :class:`SubtitleDocument`.

    Parameters
    ----------
    source : BinaryIO
        Stream of SubRip data. It is closed before this function returns, even on failure.

    encoding : str|None
        Text encoding of the stream. Defaults to the DEFAULT_ENCODING environment variable, or utf-8.

    start_time_us : int
        Offset in microseconds added to every event time.

    Returns
    -------
    SubtitleDocument
        The parsed cues and their event times.

    Raises
    ------
    SubtitleParseError
        If the content does not follow the SubRip block structure.
    """
    return SubripParser().parse(source, encoding, start_time_us)

def parse_string(content: str, start_time_us: int = 0) -> SubtitleDocument:
    """
    Parse SubRip content that has already been decoded to a string.

    Examples
    --------

    document = parse_string("1\\n00:00:01,000 --> 00:00:03,000\\nHello world\\n")
    """
    return SubripParser().parse_string(content, start_time_us)

def supports_mime_type(mime_type: str) -> bool:
    """
    True if mime_type is exactly the SubRip MIME type (application/x-subrip).
    """
    return mime_type == application_subrip

__all__ = [
    '__version__',
    'application_subrip',
    'parse',
    'parse_string',
    'supports_mime_type',
    'BuildCue',
    'ParseSubripTimestamp',
    'ResolveMarkup',
    'StyleSpan',
    'SubripParser',
    'SubtitleCue',
    'SubtitleDocument',
    'SubtitleError',
    'SubtitleParseError',
    'SubtitleParser',
    'SubtitleTimestampError',
]
