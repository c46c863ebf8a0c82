from __future__ import annotations

from collections.abc import Sequence

TRACK_KINDS = ('subtitles', 'captions', 'descriptions', 'chapters', 'metadata')

class SubtitleTrack:
    """
    A subtitle track attached to a video: where to get the text, and how to present it in a track menu.
    """
    def __init__(self, src : str, label : str|None = None, language : str|None = None, default : bool = False, kind : str = 'subtitles'):
        if not src:
            raise ValueError("A subtitle track needs a source")

        if kind not in TRACK_KINDS:
            raise ValueError(f"Unknown track kind: {kind}. Expected one of {', '.join(TRACK_KINDS)}")

        self.src : str = src
        self.label : str|None = label
        self.language : str|None = language
        self.default : bool = bool(default)
        self.kind : str = kind

    @property
    def name(self) -> str:
        return self.label or self.language or self.src

    def __repr__(self) -> str:
        return f"SubtitleTrack({self.name!r}, kind={self.kind}{', default' if self.default else ''})"


def GetDefaultTrackIndex(tracks : Sequence[SubtitleTrack]) -> int|None:
    """
    Index of the first track flagged as default, else the first track, or None if there are no tracks
    """
    if not tracks:
        return None
    return next((index for index, track in enumerate(tracks) if track.default), 0)
