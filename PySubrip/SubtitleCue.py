from __future__ import annotations

from PySubrip.Helpers.Markup import ResolveMarkup, StyleSpan

class SubtitleCue:
    """
    Immutable display payload for one subtitle block.

    markup holds the text lines as they were read, joined with <br>.
    text is the resolved display text and spans lists the inline styles applied to it.
    Timing is not stored on the cue, it lives in the owning SubtitleDocument.
    """
    __slots__ = ('_markup', '_text', '_spans')

    def __init__(self, markup : str, text : str|None = None, spans : list[StyleSpan]|tuple[StyleSpan, ...]|None = None):
        if text is None:
            text, spans = ResolveMarkup(markup)

        object.__setattr__(self, '_markup', markup)
        object.__setattr__(self, '_text', text)
        object.__setattr__(self, '_spans', tuple(spans or ()))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (SubtitleCue, (self._markup, self._text, self._spans))

    @property
    def markup(self) -> str:
        return self._markup

    @property
    def text(self) -> str:
        return self._text

    @property
    def spans(self) -> tuple[StyleSpan, ...]:
        return self._spans

    @property
    def is_empty(self) -> bool:
        return not self._text

    def __eq__(self, value: object) -> bool:
        if not isinstance(value, SubtitleCue):
            return False

        return (self._markup, self._text, self._spans) == (value._markup, value._text, value._spans)

    def __hash__(self) -> int:
        return hash((self._markup, self._text, self._spans))

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"SubtitleCue(markup={self._markup!r})"

def BuildCue(markup : str) -> SubtitleCue:
    """
    Build a cue from the accumulated markup of a block. Never raises for string input.
    """
    text, spans = ResolveMarkup(markup)
    return SubtitleCue(markup, text, spans)
