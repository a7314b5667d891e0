import io
import logging
from collections.abc import Iterable, Iterator
from typing import BinaryIO, TextIO

import regex

from PySubrip.SubtitleParser import SubtitleParser, default_encoding
from PySubrip.SubtitleCue import BuildCue, SubtitleCue
from PySubrip.SubtitleDocument import SubtitleDocument
from PySubrip.SubtitleError import SubtitleParseError, SubtitleTimestampError
from PySubrip.Helpers.Markup import line_break
from PySubrip.Helpers.Time import FormatTimestamp, ParseSubripTimestamp

application_subrip = "application/x-subrip"


class _LineReader:
    """
    Forward-only line source that strips line endings and counts lines
    """
    def __init__(self, lines : Iterable[str]):
        self._lines : Iterator[str] = iter(lines)
        self.line_number = 0

    def readline(self) -> str|None:
        line = next(self._lines, None)
        if line is None:
            return None

        self.line_number += 1
        line = line.rstrip('\r\n')
        if self.line_number == 1:
            line = line.lstrip('\ufeff')
        return line


class SubripParser(SubtitleParser):
    """
    Parser for the SubRip (.srt) subtitle format.

    Each block is a numeric counter line, a timing line of the form
    "[HH:]MM:SS,mmm --> [HH:]MM:SS,mmm" and one or more text lines, terminated by
    a blank line or the end of input. Text lines are trimmed and joined with <br>,
    then resolved as inline markup to build the cue.

    Any structural problem fails the whole parse with a SubtitleParseError.
    The parser only holds configuration, so an instance can be shared.
    """

    SUPPORTED_MIME_TYPES = frozenset({application_subrip})

    _COUNTER_PATTERN = regex.compile(r'[0-9]+')
    _TIMING_LINE_PATTERN = regex.compile(r'(.*?)\s*-->\s*(.*)', regex.ASCII)

    def __init__(self, normalise_fraction : bool = False):
        self.normalise_fraction = normalise_fraction

    def parse(self, source : BinaryIO, encoding : str|None = None, start_time_us : int = 0) -> SubtitleDocument:
        """Decode and parse a SubRip byte stream, closing it when done."""
        with source, io.TextIOWrapper(source, encoding=encoding or default_encoding) as reader:
            return self._parse_lines(reader, start_time_us)

    def parse_file(self, file_obj : TextIO, start_time_us : int = 0) -> SubtitleDocument:
        """Parse SubRip content from an open text file."""
        return self._parse_lines(file_obj, start_time_us)

    def parse_string(self, content : str, start_time_us : int = 0) -> SubtitleDocument:
        """Parse SubRip string content."""
        return self._parse_lines(io.StringIO(content, newline=None), start_time_us)

    def _parse_lines(self, lines : Iterable[str], start_time_us : int) -> SubtitleDocument:
        reader = _LineReader(lines)
        cues : list[SubtitleCue] = []
        event_times : list[int] = []

        while True:
            counter = self._read_counter(reader)
            if counter is None:
                break

            start_us, end_us = self._read_timing(reader, counter)
            markup = self._read_text(reader, counter)

            if end_us < start_us:
                logging.warning(f"Subtitle {counter} ends before it starts ({FormatTimestamp(start_us)} --> {FormatTimestamp(end_us)})")

            event_times.append(start_time_us + start_us)
            event_times.append(start_time_us + end_us)
            cues.append(BuildCue(markup))

        logging.debug(f"Parsed {len(cues)} SubRip cues with start time offset {start_time_us}us")
        return SubtitleDocument(start_time_us, cues, event_times)

    def _read_counter(self, reader : _LineReader) -> int|None:
        """
        Read the counter line of the next block, or None at the end of input
        """
        line = reader.readline()
        while line is not None and not line.strip():
            line = reader.readline()

        if line is None:
            return None

        if not self._COUNTER_PATTERN.fullmatch(line.strip()):
            raise SubtitleParseError(f"Expected numeric counter: {line}", line=line, line_number=reader.line_number)

        return int(line.strip())

    def _read_timing(self, reader : _LineReader, counter : int) -> tuple[int, int]:
        line = reader.readline()
        if line is None:
            raise SubtitleParseError(f"Unexpected end of input: expected timing line for subtitle {counter}", line_number=reader.line_number)

        match = self._TIMING_LINE_PATTERN.fullmatch(line.strip())
        if not match:
            raise SubtitleParseError(f"Expected timing line: {line}", line=line, line_number=reader.line_number)

        try:
            start_us = ParseSubripTimestamp(match.group(1).strip(), self.normalise_fraction)
            end_us = ParseSubripTimestamp(match.group(2).strip(), self.normalise_fraction)
        except SubtitleTimestampError as e:
            raise SubtitleParseError(f"Expected timing line: {line} ({e.message})", e, line=line, line_number=reader.line_number)

        return start_us, end_us

    def _read_text(self, reader : _LineReader, counter : int) -> str:
        """
        Read text lines up to a blank line or the end of input and join them with line breaks
        """
        line = reader.readline()
        if line is None:
            raise SubtitleParseError(f"Unexpected end of input: expected text for subtitle {counter}", line_number=reader.line_number)

        text_lines : list[str] = []
        while line is not None and line.strip():
            text_lines.append(line.strip())
            line = reader.readline()

        if not text_lines:
            logging.debug(f"Subtitle {counter} has no text")

        return line_break.join(text_lines)
