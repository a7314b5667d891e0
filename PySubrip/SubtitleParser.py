from abc import ABC, abstractmethod
from typing import BinaryIO, TextIO
import os

from PySubrip.SubtitleDocument import SubtitleDocument

# Default encoding for decoding subtitle streams
default_encoding = os.getenv('DEFAULT_ENCODING', 'utf-8')


class SubtitleParser(ABC):
    """
    Abstract interface for subtitle parsers.

    Implementations turn subtitle content in one format into a SubtitleDocument.
    """

    SUPPORTED_MIME_TYPES: frozenset[str] = frozenset()

    @abstractmethod
    def parse(self, source: BinaryIO, encoding: str|None = None, start_time_us: int = 0) -> SubtitleDocument:
        """
        Parse a byte stream and return the subtitles it contains.

        The source is closed before returning, whether or not parsing succeeds.

        Args:
            source: Binary stream to read from
            encoding: Text encoding of the stream, default_encoding if None
            start_time_us: Offset added to every event time, in microseconds

        Returns:
            SubtitleDocument: Parsed cues and event times

        Raises:
            SubtitleParseError: If the content is malformed
        """
        raise NotImplementedError

    @abstractmethod
    def parse_file(self, file_obj: TextIO, start_time_us: int = 0) -> SubtitleDocument:
        """
        Parse an open text file and return the subtitles it contains.

        Raises:
            SubtitleParseError: If the content is malformed
        """
        raise NotImplementedError

    @abstractmethod
    def parse_string(self, content: str, start_time_us: int = 0) -> SubtitleDocument:
        """
        Parse subtitle string content and return the subtitles it contains.

        Raises:
            SubtitleParseError: If the content is malformed
        """
        raise NotImplementedError

    def can_parse(self, mime_type: str) -> bool:
        """
        Check whether this parser handles the given MIME type (exact, case-sensitive match)
        """
        return mime_type in self.__class__.SUPPORTED_MIME_TYPES

    def get_mime_types(self) -> list[str]:
        """
        Get MIME types supported by this parser.

        Returns:
            list[str]: Supported MIME types (e.g. ['application/x-subrip'])
        """
        return sorted(self.__class__.SUPPORTED_MIME_TYPES)
