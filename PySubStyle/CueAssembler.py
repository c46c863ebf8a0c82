from __future__ import annotations

import logging
from collections.abc import Iterable

from PySubStyle.SubtitleCue import Cue

def AssembleCues(cues : Iterable[Cue], sort_by_start : bool = False) -> list[Cue]:
    """
    Produce the final cue sequence for a document.

    Cues without any text are dropped. If sort_by_start is True (ASS/SSA) the cues are sorted by start time,
    keeping the document order of cues that start together. Otherwise document order is preserved,
    even if it is not chronological.
    """
    assembled : list[Cue] = []
    for cue in cues:
        if not cue.text.strip():
            logging.debug(f"Skipping cue without text at {cue.start_time:.3f}")
            continue
        assembled.append(cue)

    if sort_by_start:
        assembled.sort(key=lambda cue: cue.start_time)

    return assembled
