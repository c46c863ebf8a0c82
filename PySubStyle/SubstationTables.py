from __future__ import annotations

from collections.abc import Iterator

import regex

_SECTION_HEADER_PATTERN = regex.compile(r'^\s*\[([^\]]*)\]\s*$')
_FORMAT_LINE_PATTERN = regex.compile(r'^\s*format\s*:(.*)$', regex.IGNORECASE)
_STYLES_SECTION_PATTERN = regex.compile(r'v4\+?\s*styles', regex.IGNORECASE)
_EVENTS_SECTION_PATTERN = regex.compile(r'^\s*events\s*$', regex.IGNORECASE)
_INFO_SECTION_PATTERN = regex.compile(r'^\s*script\s+info\s*$', regex.IGNORECASE)

# Used for rows that appear before any Format: line (ASS v4+ field order)
DEFAULT_STYLE_FIELDS = [
    'name', 'fontname', 'fontsize', 'primarycolour', 'secondarycolour', 'outlinecolour', 'backcolour',
    'bold', 'italic', 'underline', 'strikeout', 'scalex', 'scaley', 'spacing', 'angle',
    'borderstyle', 'outline', 'shadow', 'alignment', 'marginl', 'marginr', 'marginv', 'encoding'
]

DEFAULT_EVENT_FIELDS = [
    'layer', 'start', 'end', 'style', 'name', 'marginl', 'marginr', 'marginv', 'effect', 'text'
]


def SplitRow(value : str, fields : list[str]) -> dict[str, str]:
    """
    Split the comma-separated values of a table row into a field -> value mapping.

    The split is capped at the number of fields, so commas in the last field (usually the dialogue text)
    are kept. Values are stripped of surrounding whitespace.
    """
    if not fields:
        return {}

    values = value.split(',', len(fields) - 1)
    return { field: item.strip() for field, item in zip(fields, values) }


def ParseFormatLine(value : str) -> list[str]:
    """
    Get the lower-cased field names declared by a Format: line
    """
    return [ field.strip().lower() for field in value.split(',') ]


def IterateSections(content : str) -> Iterator[tuple[str, list[str]]]:
    """
    Split an ASS/SSA document into (section name, lines) pairs.
    Lines before the first section header are returned with an empty section name.
    """
    name = ''
    lines : list[str] = []
    for line in content.splitlines():
        header = _SECTION_HEADER_PATTERN.match(line)
        if header:
            if name or lines:
                yield name, lines
            name, lines = header.group(1).strip(), []
        else:
            lines.append(line)

    if name or lines:
        yield name, lines


def ReadTable(lines : list[str], row_prefix : str, default_fields : list[str]) -> list[dict[str, str]]:
    """
    Read the rows of a Format:-declared table section.

    Args:
        lines: The lines of the section
        row_prefix: The prefix that identifies data rows (e.g. 'Style' or 'Dialogue'), matched case-insensitively
        default_fields: Field names to use until a Format: line is seen

    Returns:
        list[dict[str, str]]: One field -> value mapping per row, in document order
    """
    fields = default_fields
    rows : list[dict[str, str]] = []
    prefix = row_prefix.lower()

    for line in lines:
        format_match = _FORMAT_LINE_PATTERN.match(line)
        if format_match:
            fields = ParseFormatLine(format_match.group(1))
            continue

        key, separator, value = line.partition(':')
        if separator and key.strip().lower() == prefix:
            rows.append(SplitRow(value, fields))

    return rows


def ReadKeyValues(lines : list[str]) -> dict[str, str]:
    """
    Read 'Key: value' pairs from a [Script Info] section, skipping comments. The first occurrence of a key wins.
    """
    values : dict[str, str] = {}
    for line in lines:
        if not line.strip() or line.lstrip().startswith((';', '!:')):
            continue

        key, separator, value = line.partition(':')
        key = key.strip()
        if separator and key and key not in values:
            values[key] = value.strip()
    return values


class SubstationDocument:
    """
    The tables of an ASS/SSA document: script info, styles and dialogue events.

    Sections are recognised by name, so their order in the document does not matter.
    """
    def __init__(self, info : dict[str, str]|None = None, styles : list[dict[str, str]]|None = None,
                 events : list[dict[str, str]]|None = None):
        self.info : dict[str, str] = info or {}
        self.styles : list[dict[str, str]] = styles or []
        self.events : list[dict[str, str]] = events or []

    @classmethod
    def FromString(cls, content : str) -> SubstationDocument:
        document = cls()
        for name, lines in IterateSections(content.lstrip('\ufeff')):
            if _STYLES_SECTION_PATTERN.search(name):
                document.styles.extend(ReadTable(lines, 'Style', DEFAULT_STYLE_FIELDS))
            elif _EVENTS_SECTION_PATTERN.match(name):
                document.events.extend(ReadTable(lines, 'Dialogue', DEFAULT_EVENT_FIELDS))
            elif _INFO_SECTION_PATTERN.match(name):
                for key, value in ReadKeyValues(lines).items():
                    document.info.setdefault(key, value)
        return document

    def __repr__(self) -> str:
        return f"SubstationDocument(styles={len(self.styles)}, events={len(self.events)})"
