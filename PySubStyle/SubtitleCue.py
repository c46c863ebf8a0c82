from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any, TypeAlias

from PySubStyle.SubtitleStyle import StyleAttributes


@dataclass(frozen=True)
class TextSegment:
    """An indivisible run of identically styled text"""
    text : str
    style : StyleAttributes = field(default_factory=StyleAttributes)

    def to_dict(self) -> dict[str, Any]:
        return { 'text': self.text, 'style': self.style.to_css() }


Line : TypeAlias = tuple[TextSegment, ...]

ALIGNMENTS = ('left', 'center', 'right')
VERTICAL_ALIGNMENTS = ('top', 'middle', 'bottom')


def FlattenLines(lines : Iterable[Sequence[TextSegment]]) -> str:
    """
    Join the text of styled lines: segments are concatenated, lines are separated by newlines
    """
    return '\n'.join(''.join(segment.text for segment in line) for line in lines)


@dataclass(frozen=True)
class Cue:
    """
    A single timed subtitle, made up of one or more lines of styled text segments.

    Times are in seconds. The plain text is derived from the lines, so it always matches them.
    """
    start_time : float
    end_time : float
    lines : tuple[Line, ...] = ()
    alignment : str|None = None
    vertical_align : str|None = None
    no_background : bool = False

    @classmethod
    def Construct(cls, start : float, end : float, lines : Iterable[Iterable[TextSegment]],
                  alignment : str|None = None, vertical_align : str|None = None, no_background : bool = False) -> Cue:
        """
        Create a cue from possibly malformed values: times are clamped so that 0 <= start <= end
        """
        start = max(0.0, float(start))
        end = max(start, float(end))

        if alignment not in ALIGNMENTS:
            alignment = None
        if vertical_align not in VERTICAL_ALIGNMENTS:
            vertical_align = None

        return cls(
            start_time=start,
            end_time=end,
            lines=tuple(tuple(line) for line in lines),
            alignment=alignment,
            vertical_align=vertical_align,
            no_background=no_background
        )

    @property
    def text(self) -> str:
        return FlattenLines(self.lines)

    @property
    def duration(self) -> float:
        return self.end_time - self.start_time

    def contains(self, time : float) -> bool:
        """True if the cue is displayed at the given time (both bounds inclusive)"""
        return self.start_time <= time <= self.end_time

    def to_dict(self) -> dict[str, Any]:
        """
        Renderer-facing representation of the cue. Optional hints are omitted when not set.
        """
        result : dict[str, Any] = {
            'startTime': self.start_time,
            'endTime': self.end_time,
            'text': self.text,
            'lines': [ [ segment.to_dict() for segment in line ] for line in self.lines ],
        }

        if self.alignment:
            result['alignment'] = self.alignment
        if self.vertical_align:
            result['verticalAlign'] = self.vertical_align
        if self.no_background:
            result['noBackground'] = True

        return result

    def __str__(self) -> str:
        return f"{self.start_time:.3f} --> {self.end_time:.3f}  {self.text}"
