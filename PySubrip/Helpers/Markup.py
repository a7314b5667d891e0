import html
from typing import NamedTuple

import regex

line_break = "<br>"

_tag_pattern = regex.compile(r"<(/?)([A-Za-z][A-Za-z0-9]*)((?:[\s/][^<>]*)?)>")
_attribute_pattern = regex.compile(r"""(?<![-\w:.])([A-Za-z_:][-\w:.]*)\s*=\s*(?:"([^"]*)"|'([^']*)'|([^\s"'>]+))""")

_tag_styles = {
    'b': 'bold',
    'strong': 'bold',
    'i': 'italic',
    'em': 'italic',
    'cite': 'italic',
    'dfn': 'italic',
    'u': 'underline',
    's': 'strikethrough',
    'strike': 'strikethrough',
    'del': 'strikethrough',
    'big': 'big',
    'small': 'small',
    'sup': 'superscript',
    'sub': 'subscript',
    'tt': 'monospace',
}

_font_attributes = {
    'color': 'color',
    'face': 'face',
}

class StyleSpan(NamedTuple):
    """
    A style applied to text[start:end] of a resolved cue
    """
    start : int
    end : int
    style : str
    value : str|None = None

class _OpenTag(NamedTuple):
    name : str
    start : int
    styles : list[tuple[str, str|None]]

def ResolveMarkup(markup : str) -> tuple[str, list[StyleSpan]]:
    """
    Resolve basic inline HTML markup into display text and style spans.

    Entities are decoded, <br> becomes a newline and recognised inline tags become spans.
    Unknown tags are dropped, unmatched closing tags are ignored and unclosed tags extend
    to the end of the text. Anything that is not a well-formed tag is kept as literal text,
    so this never raises for string input.
    """
    parts : list[str] = []
    length = 0
    position = 0
    open_tags : list[_OpenTag] = []
    spans : list[StyleSpan] = []

    for match in _tag_pattern.finditer(markup):
        if match.start() > position:
            segment = html.unescape(markup[position:match.start()])
            parts.append(segment)
            length += len(segment)
        position = match.end()

        closing, name, attributes = match.groups()
        self_closing = attributes.rstrip().endswith("/")
        name = name.lower()

        if name == 'br':
            parts.append("\n")
            length += 1

        elif closing:
            for index in range(len(open_tags) - 1, -1, -1):
                if open_tags[index].name == name:
                    tag = open_tags.pop(index)
                    spans.extend(_close_tag(tag, length))
                    break

        elif not self_closing:
            styles = _get_tag_styles(name, attributes)
            if styles:
                open_tags.append(_OpenTag(name, length, styles))

    if position < len(markup):
        segment = html.unescape(markup[position:])
        parts.append(segment)
        length += len(segment)

    for tag in reversed(open_tags):
        spans.extend(_close_tag(tag, length))

    spans.sort(key=lambda span: (span.start, -span.end))
    return "".join(parts), spans

def _get_tag_styles(name : str, attributes : str) -> list[tuple[str, str|None]]:
    if name in _tag_styles:
        return [(_tag_styles[name], None)]

    if name == 'font':
        styles : list[tuple[str, str|None]] = []
        for attribute in _attribute_pattern.finditer(attributes or ""):
            key = attribute.group(1).lower()
            if key in _font_attributes:
                value = next(group for group in attribute.groups()[1:] if group is not None)
                styles.append((_font_attributes[key], html.unescape(value)))
        return styles

    return []

def _close_tag(tag : _OpenTag, end : int) -> list[StyleSpan]:
    if end <= tag.start:
        return []
    return [StyleSpan(tag.start, end, style, value) for style, value in tag.styles]
