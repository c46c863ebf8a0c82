from __future__ import annotations

from collections.abc import Iterator, Sequence

from PySubStyle.SubtitleCue import Cue

class CueTimeIndex:
    """
    Point queries over a cue sequence by playback time.

    Cues are searched in their list order, so when cues overlap the first one in the list is returned.
    Overlapping cues are never merged.
    """
    def __init__(self, cues : Sequence[Cue]|None = None):
        self.cues : list[Cue] = list(cues or [])

    def find(self, time : float) -> Cue|None:
        """
        Get the first cue displayed at the given time (start and end are inclusive), or None
        """
        return next((cue for cue in self.cues if cue.contains(time)), None)

    def find_all(self, time : float) -> list[Cue]:
        """
        Get every cue displayed at the given time, in list order
        """
        return [ cue for cue in self.cues if cue.contains(time) ]

    def text_at(self, time : float) -> str:
        """
        Get the text of the cue displayed at the given time, or an empty string
        """
        cue = self.find(time)
        return cue.text if cue else ""

    def __iter__(self) -> Iterator[Cue]:
        return iter(self.cues)

    def __len__(self) -> int:
        return len(self.cues)


def GetCurrentCue(cues : Sequence[Cue], time : float) -> Cue|None:
    return CueTimeIndex(cues).find(time)

def GetCurrentText(cues : Sequence[Cue], time : float) -> str:
    return CueTimeIndex(cues).text_at(time)
