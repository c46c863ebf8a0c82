from __future__ import annotations

import os
from collections.abc import Mapping

from PySubStyle.SettingsType import SettingType, SettingsType

default_settings : dict[str, SettingType] = {
    'default_encoding': os.getenv('DEFAULT_ENCODING', 'utf-8'),
    'fallback_encoding': os.getenv('FALLBACK_ENCODING', 'iso-8859-1'),
    'fetch_timeout': os.getenv('SUBSTYLE_FETCH_TIMEOUT', 30.0),
    'max_workers': os.getenv('SUBSTYLE_MAX_WORKERS', 4),
}

class Options(SettingsType):
    """
    Settings for retrieving and loading subtitle tracks.

    Caller-supplied settings are layered over defaults, which can be set with environment variables.
    None of these settings change how subtitle text is parsed.
    """
    def __init__(self, settings : Mapping[str, SettingType]|None = None, **kwargs : SettingType):
        super().__init__(default_settings)

        if settings:
            self.update({ key: value for key, value in settings.items() if value is not None })

        if kwargs:
            self.update({ key: value for key, value in kwargs.items() if value is not None })

    @property
    def default_encoding(self) -> str:
        return self.get_str('default_encoding') or 'utf-8'

    @property
    def fallback_encoding(self) -> str:
        return self.get_str('fallback_encoding') or 'iso-8859-1'

    @property
    def fetch_timeout(self) -> float:
        return self.get_float('fetch_timeout') or 30.0

    @property
    def max_workers(self) -> int:
        return max(1, self.get_int('max_workers') or 1)
