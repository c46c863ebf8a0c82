from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor

import httpx

from PySubStyle.Helpers import IsUrl, ReadSubtitleFile
from PySubStyle.Options import Options
from PySubStyle.SubtitleCue import Cue
from PySubStyle.SubtitleError import SubtitleFetchError
from PySubStyle.SubtitleEvents import SubtitleEvents
from PySubStyle.SubtitleFormatRegistry import SubtitleFormatRegistry
from PySubStyle.SubtitleTrack import SubtitleTrack

FetchFunction = Callable[[str], str]


def FetchSubtitleText(src : str, options : Options|None = None) -> str:
    """
    Get the text of a subtitle source: download URLs over HTTP, read anything else as a local file.

    Raises:
        SubtitleFetchError: If the text cannot be retrieved
    """
    options = options or Options()
    try:
        if IsUrl(src):
            response = httpx.get(src, follow_redirects=True, timeout=options.fetch_timeout)
            response.raise_for_status()
            return response.text

        return ReadSubtitleFile(src, options.default_encoding, options.fallback_encoding)

    except httpx.HTTPStatusError as e:
        raise SubtitleFetchError(f"Server returned {e.response.status_code} for {src}", e)
    except httpx.HTTPError as e:
        raise SubtitleFetchError(f"Failed to download {src}", e)
    except OSError as e:
        raise SubtitleFetchError(f"Failed to read {src}", e)
    except (UnicodeError, LookupError) as e:
        raise SubtitleFetchError(f"Failed to decode {src}", e)


class SubtitleTrackLoader:
    """
    Fetches and parses subtitle tracks.

    Each track is fetched and parsed independently. A track that cannot be loaded gives an empty cue list,
    and the failure is reported as an error rather than raised.

    Attach SubtitleEvents to receive track_loaded notifications and route messages through signals,
    otherwise messages are logged.
    """
    def __init__(self, fetch : FetchFunction|None = None, options : Options|None = None, events : SubtitleEvents|None = None):
        self.options : Options = options or Options()
        self.fetch : FetchFunction = fetch or (lambda src: FetchSubtitleText(src, self.options))
        self.events : SubtitleEvents|None = events

    def SetEvents(self, events : SubtitleEvents) -> None:
        """
        Attach events to use for notifications and log messages.
        """
        self.events = events

    def LoadTrack(self, track : SubtitleTrack, index : int = 0) -> list[Cue]:
        """
        Fetch and parse one track, returning its cues (empty if it could not be loaded)
        """
        cues : list[Cue] = []
        try:
            content = self.fetch(track.src)
            data = SubtitleFormatRegistry.parse_string(content, track.src)
            cues = data.cues
            if data.detected_format is None:
                self._emit_warning(f"Unrecognised subtitle format for {track.name}")
            else:
                self._emit_info(f"Loaded {len(cues)} cues from {track.name} ({data.detected_format})")

        except Exception as e:
            self._emit_error(f"Unable to load subtitle track {track.name}: {e}")

        if self.events:
            self.events.track_loaded.send(self, index=index, track=track, cues=cues)

        return cues

    def LoadTracks(self, tracks : Sequence[SubtitleTrack]) -> dict[int, list[Cue]]:
        """
        Load several tracks in parallel, returning the cues of each keyed by its position in the sequence
        """
        if not tracks:
            return {}

        worker_count = min(self.options.max_workers, len(tracks))
        with ThreadPoolExecutor(max_workers=worker_count) as executor:
            results = executor.map(lambda item: self.LoadTrack(item[1], item[0]), enumerate(tracks))
            return dict(enumerate(results))

    def _emit_error(self, message : str) -> None:
        if self.events:
            self.events.error.send(self, message=message)
        else:
            logging.error(message)

    def _emit_warning(self, message : str) -> None:
        if self.events:
            self.events.warning.send(self, message=message)
        else:
            logging.warning(message)

    def _emit_info(self, message : str) -> None:
        if self.events:
            self.events.info.send(self, message=message)
        else:
            logging.info(message)
