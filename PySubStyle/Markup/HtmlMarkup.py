from __future__ import annotations

from collections.abc import Iterable

import regex

from PySubStyle.Markup import DecodeEntities, LineBuilder, ParseAttributes
from PySubStyle.SubtitleCue import Line
from PySubStyle.SubtitleStyle import StyleAttributes

_TAG_PATTERN = regex.compile(r'<[^>]*>')
_TAG_PARTS_PATTERN = regex.compile(r'<\s*(/?)\s*([A-Za-z][\w.\-]*)([^>]*?)/?\s*>', regex.DOTALL)

# Tags that push a style on opening and pop it on closing; anything else is stripped without effect
_STYLE_TAGS = { 'b', 'strong', 'i', 'em', 'u', 'font', 'c', 'span' }


def ApplyClassTokens(style : StyleAttributes, tokens : Iterable[str]) -> StyleAttributes:
    """
    Apply YouTube-style class names to a style.

    c.NAME sets the text colour and bg_NAME the background colour (underscores become spaces).
    The numeric SRV3 classes 7 and 8 set bold and italic.
    """
    changes : dict[str, str] = {}
    for token in tokens:
        if token.startswith('c.'):
            changes['color'] = token[2:].replace('_', ' ')
        elif token.startswith('bg_'):
            changes['background_color'] = token[3:].replace('_', ' ')
        elif token == '7':
            changes['font_weight'] = 'bold'
        elif token == '8':
            changes['font_style'] = 'italic'
    return style.with_changes(**changes)


def ApplyOpeningTag(style : StyleAttributes, name : str, attributes : dict[str, str]) -> StyleAttributes:
    """
    Return the style inside an opening tag
    """
    tag, *classes = name.lower().split('.')

    if tag in ('b', 'strong'):
        style = style.with_changes(font_weight='bold')
    elif tag in ('i', 'em'):
        style = style.with_changes(font_style='italic')
    elif tag == 'u':
        style = style.with_decoration('underline')
    elif tag == 'font':
        if attributes.get('color'):
            style = style.with_changes(color=attributes['color'])
        if attributes.get('face'):
            style = style.with_changes(font_family=attributes['face'])

    # <c.yellow.bg_black> is shorthand for class names c.yellow and bg_black. Classes on other tags
    # (e.g. <i.foreignphrase>) are semantic and carry no colour
    tokens : list[str] = []
    if tag == 'c':
        tokens = [ token if token.startswith('bg_') else f"c.{token}" for token in classes if token ]
    tokens.extend(attributes.get('class', '').split())
    return ApplyClassTokens(style, tokens)


def ParseHtmlMarkup(text : str) -> tuple[Line, ...]:
    """
    Tokenize HTML-like subtitle markup into lines of styled segments.

    Each recognised opening tag pushes the current style onto a stack before changing it, and each closing
    tag pops it. A closing tag with nothing to pop resets to the default style. <br> starts a new line,
    and unrecognised tags are stripped.
    """
    base_style = StyleAttributes()
    style = base_style
    stack : list[StyleAttributes] = []
    builder = LineBuilder()

    position = 0
    for match in _TAG_PATTERN.finditer(text):
        builder.add_text(DecodeEntities(text[position:match.start()]), style)
        position = match.end()

        parts = _TAG_PARTS_PATTERN.fullmatch(match.group(0))
        if not parts:
            continue

        closing, name, attribute_text = parts.groups()
        tag = name.lower().split('.')[0]

        if tag == 'br':
            builder.new_line()
        elif tag not in _STYLE_TAGS:
            continue
        elif closing:
            style = stack.pop() if stack else base_style
        else:
            stack.append(style)
            style = ApplyOpeningTag(style, name, ParseAttributes(attribute_text))

    builder.add_text(DecodeEntities(text[position:]), style)
    return builder.build()
