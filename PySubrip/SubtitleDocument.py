from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterator, Sequence

from PySubrip.SubtitleCue import SubtitleCue

class SubtitleDocument:
    """
    Parsed subtitles: an ordered sequence of cues with a parallel sequence of event times.

    Cue i is displayed from event_times[2i] to event_times[2i+1], in microseconds.
    The start time offset has already been added to every event time.
    """
    def __init__(self, start_time_us : int, cues : Sequence[SubtitleCue], event_times : Sequence[int]):
        if len(event_times) != 2 * len(cues):
            raise ValueError(f"Expected {2 * len(cues)} event times for {len(cues)} cues, got {len(event_times)}")

        self._start_time_us = start_time_us
        self._cues : tuple[SubtitleCue, ...] = tuple(cues)
        self._event_times : tuple[int, ...] = tuple(event_times)

    @property
    def start_time_us(self) -> int:
        return self._start_time_us

    @property
    def cues(self) -> tuple[SubtitleCue, ...]:
        return self._cues

    @property
    def event_times(self) -> tuple[int, ...]:
        return self._event_times

    @property
    def event_time_count(self) -> int:
        return len(self._event_times)

    @property
    def last_event_time(self) -> int:
        """
        Time of the last event, or the start time if there are no events
        """
        if not self._event_times:
            return self._start_time_us
        return self._event_times[-1]

    def get_event_time(self, index : int) -> int:
        if index < 0 or index >= len(self._event_times):
            raise IndexError(f"Event time index {index} out of range (0-{len(self._event_times) - 1})")
        return self._event_times[index]

    def get_next_event_time_index(self, time_us : int) -> int:
        """
        Index of the first event strictly after time_us, or -1 if there is none
        """
        index = bisect_right(self._event_times, time_us)
        return index if index < len(self._event_times) else -1

    def get_cue_times(self, index : int) -> tuple[int, int]:
        """
        (start, end) times of the cue at index
        """
        if index < 0 or index >= len(self._cues):
            raise IndexError(f"Cue index {index} out of range (0-{len(self._cues) - 1})")
        return self._event_times[2 * index], self._event_times[2 * index + 1]

    def get_cues(self, time_us : int) -> list[SubtitleCue]:
        """
        The cues to display at time_us.

        The most recent event at or before time_us decides: a start time shows its cue,
        an end time shows nothing.
        """
        index = bisect_right(self._event_times, time_us) - 1
        if index < 0 or index % 2 == 1:
            return []

        return [self._cues[index // 2]]

    def __len__(self) -> int:
        return len(self._cues)

    def __iter__(self) -> Iterator[SubtitleCue]:
        return iter(self._cues)

    def __repr__(self) -> str:
        return f"SubtitleDocument(start_time_us={self._start_time_us}, cues={len(self._cues)})"
