from __future__ import annotations

import pysubs2
import regex

_ASS_HEX_PATTERN = regex.compile(r'&H([0-9a-fA-F]{1,8})&?')
_DECIMAL_PATTERN = regex.compile(r'\d+')

class Color:
    """
    Simple color representation.

    Alpha follows the ASS convention: 0 is opaque, 255 is fully transparent.
    Parsed from ASS colour notation, and converted to CSS or pysubs2.Color.
    """

    def __init__(self, r : int, g : int, b : int, a : int = 0):
        self.r = max(0, min(255, r))
        self.g = max(0, min(255, g))
        self.b = max(0, min(255, b))
        self.a = max(0, min(255, a))

    def __eq__(self, value: object) -> bool:
        if not isinstance(value, Color):
            return False

        return (self.r, self.g, self.b, self.a) == (value.r, value.g, value.b, value.a)

    def __repr__(self) -> str:
        return f"Color(r={self.r}, g={self.g}, b={self.b}, a={self.a})"

    @classmethod
    def from_ass(cls, value : str|None) -> Color|None:
        """
        Create Color from an ASS colour: &HBBGGRR&, &HAABBGGRR or a decimal integer with the same byte order.
        Returns None if the value is not a colour.
        """
        if not value:
            return None

        value = value.strip()
        hex_match = _ASS_HEX_PATTERN.fullmatch(value)
        if hex_match:
            number = int(hex_match.group(1), 16)
        elif _DECIMAL_PATTERN.fullmatch(value):
            number = int(value)
        else:
            return None

        return cls(
            number & 0xFF,
            (number >> 8) & 0xFF,
            (number >> 16) & 0xFF,
            (number >> 24) & 0xFF
        )

    @classmethod
    def from_pysubs2(cls, color : pysubs2.Color) -> Color:
        """Create Color from pysubs2.Color"""
        return cls(color.r, color.g, color.b, color.a)

    def to_pysubs2(self) -> pysubs2.Color:
        """Convert to pysubs2.Color"""
        return pysubs2.Color(self.r, self.g, self.b, self.a)

    def to_css(self) -> str:
        """Convert to a lower-case CSS #rrggbb colour, ignoring alpha"""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    @property
    def opacity(self) -> float:
        """CSS opacity equivalent of the ASS alpha"""
        return round(1 - self.a / 255, 3)
