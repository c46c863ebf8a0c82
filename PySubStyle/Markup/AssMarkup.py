from __future__ import annotations

import regex

from PySubStyle.Helpers import FormatNumber
from PySubStyle.Helpers.Color import Color
from PySubStyle.Markup import DecodeEntities, LineBuilder, StripTags
from PySubStyle.SubtitleCue import Line
from PySubStyle.SubtitleStyle import StyleAttributes

_OVERRIDE_BLOCK_PATTERN = regex.compile(r'(\{[^}]*\})')
_ALIGNMENT_TAG_PATTERN = regex.compile(r'\\an(\d{1,2})')

# Tag bodies, matched against the text between backslashes in an override block
_BOLD_TAG = regex.compile(r'b([01])')
_ITALIC_TAG = regex.compile(r'i([01])')
_UNDERLINE_TAG = regex.compile(r'u1')
_STRIKEOUT_TAG = regex.compile(r's1')
_COLOR_TAG = regex.compile(r'1?c(&H[0-9a-fA-F]{1,8}&?)')
_FONT_SIZE_TAG = regex.compile(r'fs(\d+(?:\.\d+)?)')
_ROTATION_TAG = regex.compile(r'fr([xyz])([-+]?\d+(?:\.\d+)?)')
_SCALE_TAG = regex.compile(r'fsc([xy])(\d+(?:\.\d+)?)')


def ConvertAssLineBreaks(text : str) -> str:
    """
    Replace ASS hard/soft line breaks (\\N, \\n) with newlines and hard spaces (\\h) with spaces
    """
    return text.replace('\\N', '\n').replace('\\n', '\n').replace('\\h', ' ')


def ExtractAlignmentCode(text : str) -> int|None:
    """
    Get the numeric code of the first \\anN alignment tag in the text, if there is one
    """
    match = _ALIGNMENT_TAG_PATTERN.search(text)
    return int(match.group(1)) if match else None


def ApplyOverrideBlock(style : StyleAttributes, block : str) -> StyleAttributes:
    """
    Return the running style after the tags in an override block have been applied.

    Tags are applied left to right. Rotation and scale tags in the block are composed into a single
    transform that replaces any previous transform. Unrecognised tags are ignored.
    """
    changes : dict[str, object] = {}
    decorations : list[str] = []
    rotations : list[str] = []
    scale : dict[str, float] = {}

    for tag in block.strip('{}').split('\\'):
        tag = tag.strip()
        if not tag:
            continue

        if match := _BOLD_TAG.fullmatch(tag):
            changes['font_weight'] = 'bold' if match.group(1) == '1' else 'normal'
        elif match := _ITALIC_TAG.fullmatch(tag):
            changes['font_style'] = 'italic' if match.group(1) == '1' else 'normal'
        elif _UNDERLINE_TAG.fullmatch(tag):
            decorations.append('underline')
        elif _STRIKEOUT_TAG.fullmatch(tag):
            decorations.append('line-through')
        elif match := _COLOR_TAG.fullmatch(tag):
            color = Color.from_ass(match.group(1))
            if color:
                changes['color'] = color.to_css()
        elif match := _FONT_SIZE_TAG.fullmatch(tag):
            changes['font_size'] = f"{FormatNumber(float(match.group(1)))}px"
        elif match := _ROTATION_TAG.fullmatch(tag):
            axis, angle = match.group(1), float(match.group(2))
            if axis == 'z':
                angle = -angle
            rotations.append(f"rotate{axis.upper()}({FormatNumber(angle)}deg)")
        elif match := _SCALE_TAG.fullmatch(tag):
            scale[match.group(1)] = float(match.group(2)) / 100

    if scale:
        changes['display'] = 'inline-block'
        rotations.append(f"scale({FormatNumber(scale.get('x', 1.0))}, {FormatNumber(scale.get('y', 1.0))})")

    if rotations:
        changes['transform'] = ' '.join(rotations)

    style = style.with_changes(**changes)
    for decoration in decorations:
        style = style.with_decoration(decoration)

    return style


def StyleAssText(text : str, base_style : StyleAttributes) -> list[tuple[StyleAttributes, str]]:
    """
    Fold the override blocks in a line of ASS text into (style, text) runs.

    The running style starts from the base style and each block's changes persist until the next block
    or the end of the text.
    """
    runs : list[tuple[StyleAttributes, str]] = []
    style = base_style
    # Splitting on a capturing pattern puts the override blocks at odd indices
    for index, token in enumerate(_OVERRIDE_BLOCK_PATTERN.split(text)):
        if index % 2:
            style = ApplyOverrideBlock(style, token)
        elif token:
            runs.append((style, token))
    return runs


def ParseAssMarkup(text : str, base_style : StyleAttributes) -> tuple[tuple[Line, ...], int|None]:
    """
    Tokenize the text of an ASS dialogue event.

    Returns:
        The styled lines, and the code of the \\anN alignment tag if the text has one
    """
    text = ConvertAssLineBreaks(text)
    alignment_code = ExtractAlignmentCode(text)

    builder = LineBuilder()
    for style, run in StyleAssText(text, base_style):
        builder.add_text(DecodeEntities(StripTags(run)), style)

    return builder.build(), alignment_code
