from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any

_CSS_PROPERTY_NAMES : dict[str, str] = {
    'color': 'color',
    'background_color': 'backgroundColor',
    'font_family': 'fontFamily',
    'font_size': 'fontSize',
    'font_weight': 'fontWeight',
    'font_style': 'fontStyle',
    'text_decoration': 'textDecoration',
    'transform': 'transform',
    'opacity': 'opacity',
    'display': 'display',
    'text_align': 'textAlign',
    'letter_spacing': 'letterSpacing',
    'text_shadow': 'textShadow',
}

_TEXT_DECORATIONS = ('underline', 'line-through')

@dataclass(frozen=True)
class StyleAttributes:
    """
    Style of a run of subtitle text, expressed in renderer (CSS) terms.

    Every attribute is optional. None means the renderer's default applies, not that the attribute is reset.
    Instances are immutable: use with_changes to derive a modified style.
    """
    color : str|None = None
    background_color : str|None = None
    font_family : str|None = None
    font_size : str|None = None
    font_weight : str|None = None
    font_style : str|None = None
    text_decoration : str|None = None
    transform : str|None = None
    opacity : float|None = None
    display : str|None = None
    text_align : str|None = None
    letter_spacing : str|None = None
    text_shadow : str|None = None

    def with_changes(self, **changes : Any) -> StyleAttributes:
        """
        Return a copy of the style with some attributes replaced
        """
        return replace(self, **changes) if changes else self

    def with_decoration(self, decoration : str) -> StyleAttributes:
        """
        Return a copy of the style with a text decoration (underline or line-through) added
        """
        return self.with_changes(text_decoration=CombineTextDecoration(self.text_decoration, decoration))

    @property
    def is_default(self) -> bool:
        return all(getattr(self, field.name) is None for field in fields(self))

    def to_css(self) -> dict[str, str|float]:
        """
        Get the attributes that are set, keyed by CSS property name
        """
        css : dict[str, str|float] = {}
        for field in fields(self):
            value = getattr(self, field.name)
            if value is not None:
                css[_CSS_PROPERTY_NAMES[field.name]] = value
        return css


def CombineTextDecoration(current : str|None, *decorations : str) -> str|None:
    """
    Add decorations to a space-separated text-decoration value, keeping a canonical order
    """
    active = set(current.split()) if current else set()
    active.update(decorations)
    combined = [ decoration for decoration in _TEXT_DECORATIONS if decoration in active ]
    return ' '.join(combined) or None
