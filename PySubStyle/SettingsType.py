from __future__ import annotations
from collections.abc import Mapping
from typing import TypeAlias

SettingType: TypeAlias = str | int | float | bool | None

class SettingsError(Exception):
    """Raised when a setting cannot be coerced to the expected type."""
    pass

class SettingsType(dict[str, SettingType]):
    """
    Settings dictionary with restricted range of types allowed and type-safe getters
    """
    def __init__(self, settings : Mapping[str,SettingType]|None = None):
        if not isinstance(settings, SettingsType):
            settings = dict(settings or {})
        super().__init__(settings)

    def get_bool(self, key: str, default: bool|None = False) -> bool:
        """Get a boolean setting with type safety"""
        value = self.get(key, default)
        if value is None:
            return False

        if isinstance(value, bool):
            return value
        elif isinstance(value, str):
            lower_val = value.lower()
            if lower_val in ('true', '1', 'yes'):
                return True
            elif lower_val in ('false', '0', 'no'):
                return False

        raise SettingsError(f"Cannot convert setting '{key}' of type {type(value).__name__} with value {repr(value)} to bool")

    def get_int(self, key: str, default: int|None = None) -> int|None:
        """Get an integer setting with type safety"""
        value = self.get(key, default)
        if value is None:
            return None

        if isinstance(value, (int,float)):
            return int(value)
        elif isinstance(value, str):
            try:
                return int(value)
            except ValueError:
                pass

        raise SettingsError(f"Cannot convert setting '{key}' of type {type(value).__name__} with value {repr(value)} to int")

    def get_float(self, key: str, default: float|None = None) -> float|None:
        """Get a float setting with type safety"""
        value = self.get(key, default)
        if value is None:
            return None

        if isinstance(value, (int, float)):
            return float(value)
        elif isinstance(value, str):
            try:
                return float(value)
            except ValueError:
                pass

        raise SettingsError(f"Cannot convert setting '{key}' of type {type(value).__name__} with value {repr(value)} to float")

    def get_str(self, key: str, default: str|None = None) -> str|None:
        """Get a string setting with type safety"""
        value = self.get(key, default)
        if value is None:
            return None
        elif isinstance(value, str):
            return value

        return str(value)
