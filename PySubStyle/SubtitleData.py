from __future__ import annotations

from typing import Any

from PySubStyle.SubtitleCue import Cue


class SubtitleData:
    """
    Format-agnostic container for a parsed subtitle document.

    Attributes:
        cues (list[Cue]): The cues in display order (sorted by start time for ASS, document order otherwise)
        metadata (dict[str, Any]): File-level metadata extracted by specific formats
        detected_format (str|None): The format that was parsed (e.g. '.vtt'), or None if it was not recognised
    """

    def __init__(self, cues : list[Cue]|None = None, metadata : dict[str, Any]|None = None, detected_format : str|None = None):
        self.cues : list[Cue] = cues or []
        self.metadata : dict[str, Any] = metadata or {}
        self.detected_format : str|None = detected_format

    @property
    def has_cues(self) -> bool:
        return len(self.cues) > 0

    def __len__(self) -> int:
        return len(self.cues)

    def __repr__(self) -> str:
        return f"SubtitleData(format={self.detected_format}, cues={len(self.cues)})"
