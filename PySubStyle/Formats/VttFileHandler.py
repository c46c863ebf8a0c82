import logging

import regex

from PySubStyle.CueAssembler import AssembleCues
from PySubStyle.Helpers.Time import ParseTimestamp
from PySubStyle.Markup.HtmlMarkup import ParseHtmlMarkup
from PySubStyle.SubtitleCue import Cue
from PySubStyle.SubtitleData import SubtitleData
from PySubStyle.SubtitleError import SubtitleParseError
from PySubStyle.SubtitleFileHandler import SubtitleFileHandler

# WebVTT align: values mapped to cue alignment
_CUE_ALIGNMENTS = {
    'start': 'left',
    'left': 'left',
    'center': 'center',
    'middle': 'center',
    'end': 'right',
    'right': 'right',
}

class VttFileHandler(SubtitleFileHandler):
    """
    WebVTT subtitle format handler.

    The document is split into blocks on blank lines. The first line of a block containing --> gives the
    cue timing (and optional cue settings), the lines after it are the cue text. Blocks without a timing
    line, including the WEBVTT header, NOTE and STYLE blocks, are skipped.
    """

    SUPPORTED_EXTENSIONS = {'.vtt': 10}
    FORMAT = '.vtt'

    _BLOCK_SEPARATOR = regex.compile(r'\n\s*\n')
    _TIMING_SEPARATOR = '-->'

    def parse_string(self, content : str) -> SubtitleData:
        """Parse string content and return SubtitleData with styled cues."""
        try:
            content = content.lstrip('\ufeff').replace('\r\n', '\n').replace('\r', '\n')

            cues = []
            for block in self._BLOCK_SEPARATOR.split(content):
                cue = self._parse_block(block)
                if cue:
                    cues.append(cue)

            return SubtitleData(cues=AssembleCues(cues), detected_format=self.FORMAT)

        except Exception as e:
            raise SubtitleParseError(f"Failed to parse content: {e}", e)

    def _parse_block(self, block : str) -> Cue|None:
        lines = block.split('\n')
        timing_index = next((index for index, line in enumerate(lines) if self._TIMING_SEPARATOR in line), None)
        if timing_index is None:
            if block.strip():
                logging.debug(f"Skipping block without timing: {block.strip()[:40]}")
            return None

        start_text, end_text = lines[timing_index].split(self._TIMING_SEPARATOR, 1)
        text = '\n'.join(line.strip() for line in lines[timing_index + 1:])

        return Cue.Construct(
            start=ParseTimestamp(start_text),
            end=ParseTimestamp(end_text),
            lines=ParseHtmlMarkup(text.strip()),
            alignment=self._parse_alignment(end_text)
        )

    def _parse_alignment(self, timing_text : str) -> str|None:
        """
        Get the cue alignment from the align: cue setting that follows the end time
        """
        for setting in timing_text.split()[1:]:
            name, _, value = setting.partition(':')
            if name.lower() == 'align':
                return _CUE_ALIGNMENTS.get(value.lower())
        return None
