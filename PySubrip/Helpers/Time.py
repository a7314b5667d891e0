from datetime import timedelta

import regex

from PySubrip.SubtitleError import SubtitleTimestampError

# Hours are optional, fractional part is a literal integer of any width
_subrip_timestamp_pattern = regex.compile(r"(?:(\d+):)?(\d+):(\d+),(\d+)", regex.ASCII)

def ParseSubripTimestamp(token : str, normalise_fraction : bool = False) -> int:
    """
    Convert a SubRip timestamp token ([HH:]MM:SS,mmm) to microseconds.

    The fractional group is added as a literal number of milliseconds, so "00:00:01,5"
    is 1005 ms. With normalise_fraction the group is padded or truncated to three digits
    first, giving 1500 ms for the same token.

    Raises:
        SubtitleTimestampError: if the whole token does not match the grammar
    """
    match = _subrip_timestamp_pattern.fullmatch(token)
    if not match:
        raise SubtitleTimestampError(f"Invalid SubRip timestamp: {token}", line=token)

    hours, minutes, seconds, fraction = match.groups()

    if normalise_fraction:
        fraction = fraction.ljust(3, '0')[:3]

    timestamp_ms = int(hours or 0) * 60 * 60 * 1000
    timestamp_ms += int(minutes) * 60 * 1000
    timestamp_ms += int(seconds) * 1000
    timestamp_ms += int(fraction)
    return timestamp_ms * 1000

def TimestampToTimedelta(timestamp_us : int) -> timedelta:
    """
    Convert a microsecond timestamp to a timedelta
    """
    return timedelta(microseconds=timestamp_us)

def TimedeltaToTimestamp(value : timedelta) -> int:
    """
    Convert a timedelta to a whole number of microseconds
    """
    return (value.days * 86400 + value.seconds) * 1_000_000 + value.microseconds

def FormatTimestamp(timestamp_us : int) -> str:
    """
    Format microseconds as HH:MM:SS,mmm for log messages
    """
    sign = '-' if timestamp_us < 0 else ''
    total_ms = abs(timestamp_us) // 1000
    hours, remainder = divmod(total_ms, 3600 * 1000)
    minutes, remainder = divmod(remainder, 60 * 1000)
    seconds, milliseconds = divmod(remainder, 1000)
    return f"{sign}{hours:02d}:{minutes:02d}:{seconds:02d},{milliseconds:03d}"
