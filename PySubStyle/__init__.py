"""
PySubStyle - Subtitle Ingestion and Styling Library

Turns WebVTT, SRT, ASS/SSA, YouTube timed text and SRV3 documents into a time-ordered list of styled cues
that a renderer can display in sync with playback.

Basic Usage
-----------

# Parse subtitle text, using the filename as a format hint
cues = parse_subtitles(content, source="movie.ass")

# Get the cue to display at the current playback time
cue = get_current_cue(cues, 12.5)
if cue:
    for line in cue.lines:
        for segment in line:
            render(segment.text, segment.style.to_css())

# Fetch and parse all the subtitle tracks of a video
tracks = [ SubtitleTrack("https://example.com/movie.en.vtt", label="English", language="en", default=True) ]
cues_by_track = load_subtitle_tracks(tracks)
"""
from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from PySubStyle.CueTimeIndex import CueTimeIndex, GetCurrentCue, GetCurrentText
from PySubStyle.Options import Options
from PySubStyle.SettingsType import SettingType, SettingsType
from PySubStyle.SubtitleCue import Cue, TextSegment
from PySubStyle.SubtitleData import SubtitleData
from PySubStyle.SubtitleError import SubtitleError, SubtitleFetchError, SubtitleParseError
from PySubStyle.SubtitleFormatRegistry import SubtitleFormatRegistry
from PySubStyle.SubtitleStyle import StyleAttributes
from PySubStyle.SubtitleTrack import SubtitleTrack
from PySubStyle.SubtitleTrackLoader import FetchFunction, FetchSubtitleText, SubtitleTrackLoader
from PySubStyle.version import __version__


def parse_subtitle_data(content : str, source : str|None = None) -> SubtitleData:
    """
    Parse a subtitle document into a :class:`SubtitleData` container.

    Parameters
    ----------
    content : str
        The text of the subtitle document.

    source : str|None
        Filename or URL of the document, used as a hint to detect the format.

    Returns
    -------
    SubtitleData : The cues, any file-level metadata and the detected format.
    Content in an unrecognised format gives an empty container. Malformed content never raises.
    """
    try:
        return SubtitleFormatRegistry.parse_string(content or "", source)

    except SubtitleParseError as e:
        logging.error(f"Unable to parse subtitles from {source or 'content'}: {e}")
        return SubtitleData()


def parse_subtitles(content : str, source : str|None = None) -> list[Cue]:
    """
    Parse a subtitle document into a list of styled cues.

    ASS/SSA cues are sorted by start time, cues in other formats are in document order.
    Unrecognised or unparsable content gives an empty list.

    Examples
    --------

    cues = parse_subtitles("WEBVTT\\n\\n00:00:01.000 --> 00:00:04.000\\nHello")
    """
    return parse_subtitle_data(content, source).cues


def load_subtitles(filepath : str, options : Options|Mapping[str, SettingType]|None = None) -> SubtitleData:
    """
    Read and parse a local subtitle file.

    The file is decoded with the default encoding, falling back to the fallback encoding.

    Raises
    ------
    SubtitleFetchError : If the file cannot be read.
    """
    options = Options(options)
    content = FetchSubtitleText(filepath, options)
    return parse_subtitle_data(content, filepath)


def get_current_cue(cues : Sequence[Cue], time : float) -> Cue|None:
    """
    Get the first cue in the list that is displayed at the given time (bounds inclusive), or None.
    """
    return GetCurrentCue(cues, time)


def get_current_text(cues : Sequence[Cue], time : float) -> str:
    """
    Get the text of the cue displayed at the given time, or an empty string if there is none.
    """
    return GetCurrentText(cues, time)


def load_subtitle_tracks(
    tracks : Sequence[SubtitleTrack],
    fetch : FetchFunction|None = None,
    options : Options|Mapping[str, SettingType]|None = None,
) -> dict[int, list[Cue]]:
    """
    Fetch and parse subtitle tracks independently and in parallel.

    Parameters
    ----------
    tracks : Sequence[SubtitleTrack]
        The tracks to load.

    fetch : Callable[[str], str], optional
        Retrieves the text of a track source. By default URLs are downloaded and other sources are read
        as local files.

    options : Options or SettingsType, optional
        Settings for retrieval, e.g. `fetch_timeout`, `max_workers`.

    Returns
    -------
    dict[int, list[Cue]] : The cues of each track keyed by its position in `tracks`. Tracks that could
    not be loaded have an empty list.
    """
    loader = SubtitleTrackLoader(fetch=fetch, options=Options(options))
    return loader.LoadTracks(tracks)


__all__ = [
    '__version__',
    'Cue',
    'CueTimeIndex',
    'Options',
    'SettingsType',
    'StyleAttributes',
    'SubtitleData',
    'SubtitleError',
    'SubtitleFetchError',
    'SubtitleFormatRegistry',
    'SubtitleParseError',
    'SubtitleTrack',
    'SubtitleTrackLoader',
    'TextSegment',
    'get_current_cue',
    'get_current_text',
    'load_subtitle_tracks',
    'load_subtitles',
    'parse_subtitle_data',
    'parse_subtitles',
]
