"""
PySubStyle.Markup - inline markup tokenizers

Two dialects share one output contract, a tuple of lines of styled text segments:
    AssMarkup  - ASS/SSA override blocks ({\\b1}, {\\c&H0000FF&} ...)
    HtmlMarkup - HTML-like tags used by WebVTT, SRT and YouTube timed text (<b>, <font color=...> ...)
"""
from __future__ import annotations

from collections.abc import Sequence

import regex

from PySubStyle.SubtitleCue import Line, TextSegment
from PySubStyle.SubtitleStyle import StyleAttributes

_ENTITY_PATTERN = regex.compile(r'&(lt|gt|amp|quot|#39);')
_ENTITIES = { 'lt': '<', 'gt': '>', 'amp': '&', 'quot': '"', '#39': "'" }
_TAG_PATTERN = regex.compile(r'<[^>]*>')
_ATTRIBUTE_PATTERN = regex.compile(r'''([\w:\-]+)\s*=\s*(?:"([^"]*)"|'([^']*)'|([^\s"'>]+))''')


def DecodeEntities(text : str) -> str:
    """
    Decode the five standard HTML entities in a single pass, so &amp;lt; becomes &lt; rather than <
    """
    return _ENTITY_PATTERN.sub(lambda match: _ENTITIES[match.group(1)], text)


def StripTags(text : str) -> str:
    """
    Remove any remaining <...> tags
    """
    return _TAG_PATTERN.sub('', text)


def ParseAttributes(text : str) -> dict[str, str]:
    """
    Extract name=value attributes from the inside of a tag. Names are lower-cased, the first occurrence wins.
    """
    attributes : dict[str, str] = {}
    for match in _ATTRIBUTE_PATTERN.finditer(text):
        name = match.group(1).lower()
        if name not in attributes:
            value = next((group for group in match.groups()[1:] if group is not None), '')
            attributes[name] = value
    return attributes


def PruneEmptyLines(lines : Sequence[Line]) -> tuple[Line, ...]:
    """
    Drop a leading or trailing empty line. Interior empty lines are kept as intentional blank lines.
    """
    last_index = len(lines) - 1
    return tuple(line for index, line in enumerate(lines) if line or 0 < index < last_index)


class LineBuilder:
    """
    Accumulates runs of styled text into lines of segments.

    Newlines in the text start a new line. Adjacent runs with the same style are merged into one segment
    unless merge_segments is False.
    """
    def __init__(self, merge_segments : bool = True):
        self.merge_segments : bool = merge_segments
        self._lines : list[list[TextSegment]] = [[]]

    def add_text(self, text : str, style : StyleAttributes) -> None:
        for index, part in enumerate(text.split('\n')):
            if index > 0:
                self.new_line()
            if part:
                self.add_segment(TextSegment(part, style))

    def add_segment(self, segment : TextSegment) -> None:
        line = self._lines[-1]
        if self.merge_segments and line and line[-1].style == segment.style:
            line[-1] = TextSegment(line[-1].text + segment.text, segment.style)
        else:
            line.append(segment)

    def new_line(self) -> None:
        self._lines.append([])

    def build(self) -> tuple[Line, ...]:
        return PruneEmptyLines([ tuple(line) for line in self._lines ])
