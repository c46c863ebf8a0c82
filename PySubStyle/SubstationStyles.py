from __future__ import annotations

from collections.abc import Iterable

import pysubs2
import regex

from PySubStyle.Helpers import FormatNumber
from PySubStyle.Helpers.Color import Color
from PySubStyle.SubtitleStyle import CombineTextDecoration, StyleAttributes

_INTEGER_PATTERN = regex.compile(r'\s*([-+]?\d+)')
_FLOAT_PATTERN = regex.compile(r'\s*([-+]?(?:\d+(?:\.\d*)?|\.\d+))')

DEFAULT_FONT_NAME = 'Arial'
DEFAULT_FONT_SIZE = 20
DEFAULT_ALIGNMENT = 2
OPAQUE_BOX_BORDER_STYLE = 3

_WHITE = Color(255, 255, 255)
_BLACK = Color(0, 0, 0)

_LEFT_ALIGNMENTS = { 1, 4, 7 }
_RIGHT_ALIGNMENTS = { 3, 6, 9 }
_TOP_ALIGNMENTS = { 7, 8, 9 }
_MIDDLE_ALIGNMENTS = { 4, 5, 6 }


def _parse_int(value : str|None, default : int) -> int:
    """Leading integer of the value, or the default if there is none or it is zero"""
    match = _INTEGER_PATTERN.match(value) if value else None
    return int(match.group(1)) or default if match else default


def _parse_float(value : str|None, default : float) -> float:
    """Leading number of the value, or the default if there is none or it is zero"""
    match = _FLOAT_PATTERN.match(value) if value else None
    return float(match.group(1)) or default if match else default


def _parse_flag(value : str|None) -> bool:
    return value is not None and value.strip() in ('1', '-1')


def _parse_color(value : str|None, default : Color) -> pysubs2.Color:
    color = Color.from_ass(value) or default
    return color.to_pysubs2()


def _field(row : dict[str, str], *names : str) -> str|None:
    """Get the first of the alternative spellings of a field (Colour/Color) that is present"""
    return next((row[name] for name in names if name in row), None)


def ReadStyleRecord(row : dict[str, str]) -> pysubs2.SSAStyle:
    """
    Read a Style row into a pysubs2 style record.

    Missing or unparsable fields take their default values. Font size, scale and alignment also fall back to
    the default when they are zero. An unparsable primary colour is white.
    """
    return pysubs2.SSAStyle(
        fontname=row.get('fontname') or DEFAULT_FONT_NAME,
        fontsize=_parse_int(row.get('fontsize'), DEFAULT_FONT_SIZE),
        primarycolor=_parse_color(_field(row, 'primarycolour', 'primarycolor'), _WHITE),
        secondarycolor=_parse_color(_field(row, 'secondarycolour', 'secondarycolor'), _WHITE),
        outlinecolor=_parse_color(_field(row, 'outlinecolour', 'outlinecolor'), _BLACK),
        backcolor=_parse_color(_field(row, 'backcolour', 'backcolor'), _BLACK),
        bold=_parse_flag(row.get('bold')),
        italic=_parse_flag(row.get('italic')),
        underline=_parse_flag(row.get('underline')),
        strikeout=_parse_flag(row.get('strikeout')),
        scalex=_parse_float(row.get('scalex'), 100.0),
        scaley=_parse_float(row.get('scaley'), 100.0),
        spacing=_parse_float(row.get('spacing'), 0.0),
        angle=_parse_float(row.get('angle'), 0.0),
        borderstyle=_parse_int(row.get('borderstyle'), 1),
        outline=_parse_float(row.get('outline'), 0.0),
        shadow=_parse_float(row.get('shadow'), 0.0),
        alignment=_parse_int(row.get('alignment'), DEFAULT_ALIGNMENT),
        marginl=_parse_int(row.get('marginl'), 0),
        marginr=_parse_int(row.get('marginr'), 0),
        marginv=_parse_int(row.get('marginv'), 0),
        encoding=_parse_int(row.get('encoding'), 1)
    )


def GetTextAlign(code : int) -> str:
    """
    CSS text-align for an ASS alignment code, using the legacy SSA column rule (code mod 4)
    """
    return { 1: 'left', 2: 'center', 3: 'right' }.get(int(code) % 4, 'center')


def GetCueAlignment(code : int|None) -> tuple[str, str]:
    """
    Map an ASS alignment code to (horizontal, vertical) cue alignment on the numpad grid.
    Codes outside the grid are center/bottom.
    """
    if code is None:
        return 'center', 'bottom'

    code = int(code)
    horizontal = 'left' if code in _LEFT_ALIGNMENTS else 'right' if code in _RIGHT_ALIGNMENTS else 'center'
    vertical = 'top' if code in _TOP_ALIGNMENTS else 'middle' if code in _MIDDLE_ALIGNMENTS else 'bottom'
    return horizontal, vertical


def StyleFromRecord(record : pysubs2.SSAStyle) -> StyleAttributes:
    """
    Resolve a style record to renderer style attributes
    """
    primary = Color.from_pysubs2(record.primarycolor)
    decoration = CombineTextDecoration(None, *(
        name for name, active in (('underline', record.underline), ('line-through', record.strikeout)) if active
    ))

    style = StyleAttributes(
        color=primary.to_css(),
        font_family=record.fontname,
        font_size=f"{FormatNumber(record.fontsize)}px",
        font_weight='bold' if record.bold else 'normal',
        font_style='italic' if record.italic else 'normal',
        text_decoration=decoration,
        transform=f"rotate({FormatNumber(-record.angle)}deg) scale({FormatNumber(record.scalex / 100)}, {FormatNumber(record.scaley / 100)})",
        text_align=GetTextAlign(record.alignment)
    )

    changes : dict[str, object] = {}
    if primary.a > 0:
        changes['opacity'] = primary.opacity

    # The back colour only fills the box behind the text with the opaque box border style
    if record.borderstyle == OPAQUE_BOX_BORDER_STYLE:
        changes['background_color'] = Color.from_pysubs2(record.backcolor).to_css()

    if record.spacing:
        changes['letter_spacing'] = f"{FormatNumber(record.spacing)}px"

    if record.outline > 0:
        outline_color = Color.from_pysubs2(record.outlinecolor).to_css()
        changes['text_shadow'] = f"0 0 {FormatNumber(record.outline)}px {outline_color}"

    return style.with_changes(**changes)


BUILTIN_RECORD = ReadStyleRecord({})
BUILTIN_STYLE = StyleFromRecord(BUILTIN_RECORD)


class SubstationStyleTable:
    """
    Named ASS styles, resolved to style attributes.

    Names are case-sensitive and the first definition of a name wins. Resolution always succeeds: an unknown
    name falls back to "Default", then to the first style in the table, then to a built-in style.
    """
    DEFAULT_NAME = 'Default'

    def __init__(self):
        self.records : dict[str, pysubs2.SSAStyle] = {}
        self.styles : dict[str, StyleAttributes] = {}

    @classmethod
    def FromTable(cls, rows : Iterable[dict[str, str]]) -> SubstationStyleTable:
        table = cls()
        for row in rows:
            table.add_row(row)
        return table

    def add_row(self, row : dict[str, str]) -> bool:
        """
        Add a Style row to the table. Returns False if a style with the same name already exists.
        """
        name = row.get('name', '')
        if name in self.records:
            return False

        record = ReadStyleRecord(row)
        self.records[name] = record
        self.styles[name] = StyleFromRecord(record)
        return True

    def ResolveRecord(self, name : str|None) -> pysubs2.SSAStyle:
        """
        Get the style record for a name, with fallbacks
        """
        return self._resolve(name, self.records, BUILTIN_RECORD)

    def ResolveStyle(self, name : str|None) -> StyleAttributes:
        """
        Get the style attributes for a name, with fallbacks
        """
        return self._resolve(name, self.styles, BUILTIN_STYLE)

    def _resolve(self, name, values : dict, builtin):
        if name is not None and name in values:
            return values[name]
        if self.DEFAULT_NAME in values:
            return values[self.DEFAULT_NAME]
        return next(iter(values.values()), builtin)

    def to_dict(self) -> dict[str, dict[str, str|float]]:
        """
        The resolved styles as CSS property dictionaries, keyed by name
        """
        return { name: style.to_css() for name, style in self.styles.items() }

    def __contains__(self, name : str) -> bool:
        return name in self.styles

    def __len__(self) -> int:
        return len(self.styles)
