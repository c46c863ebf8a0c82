import logging

import regex

from PySubStyle.CueAssembler import AssembleCues
from PySubStyle.Helpers.Time import ParseAssTimestamp
from PySubStyle.Markup.AssMarkup import ParseAssMarkup
from PySubStyle.SubstationStyles import GetCueAlignment, SubstationStyleTable
from PySubStyle.SubstationTables import SubstationDocument
from PySubStyle.SubtitleCue import Cue
from PySubStyle.SubtitleData import SubtitleData
from PySubStyle.SubtitleError import SubtitleParseError
from PySubStyle.SubtitleFileHandler import SubtitleFileHandler

# SSA v4 scripts declare ScriptType: v4.00, ASS scripts v4.00+
_SSA_SCRIPT_TYPE_PATTERN = regex.compile(r'^v4\.00$', regex.IGNORECASE)


class SSAFileHandler(SubtitleFileHandler):
    """
    File handler for Advanced SubStation Alpha (SSA/ASS) subtitles.

    Style rows are resolved into a style table, and each Dialogue event's text is tokenized from its
    resolved style with override tags applied. ASS cues draw their own backdrop, so they are flagged to
    suppress the renderer's subtitle background. Events are sorted by start time.

    The [Script Info] values and resolved styles are returned as metadata.
    """

    SUPPORTED_EXTENSIONS = {'.ass': 10, '.ssa': 10}

    def parse_string(self, content : str) -> SubtitleData:
        """
        Parse string content and return SubtitleData with styled cues and metadata.
        """
        try:
            document = SubstationDocument.FromString(content)
            styles = SubstationStyleTable.FromTable(document.styles)

            cues = []
            for event in document.events:
                cue = self._parse_event(event, styles)
                if cue:
                    cues.append(cue)

            metadata = {
                'info': document.info,
                'styles': styles.to_dict()
            }

            return SubtitleData(
                cues=AssembleCues(cues, sort_by_start=True),
                metadata=metadata,
                detected_format=self._get_detected_format(document)
            )

        except Exception as e:
            raise SubtitleParseError(f"Failed to parse content: {e}", e)

    def _parse_event(self, event : dict[str, str], styles : SubstationStyleTable) -> Cue|None:
        """
        Convert a Dialogue row to a cue
        """
        if 'start' not in event or 'end' not in event:
            logging.debug(f"Skipping event without start or end time: {event}")
            return None

        style_name = event.get('style')
        record = styles.ResolveRecord(style_name)
        lines, alignment_code = ParseAssMarkup(event.get('text', ''), styles.ResolveStyle(style_name))

        # An \an tag overrides the alignment of the event's style
        if alignment_code is None:
            alignment_code = record.alignment

        alignment, vertical_align = GetCueAlignment(alignment_code)

        return Cue.Construct(
            start=ParseAssTimestamp(event['start']),
            end=ParseAssTimestamp(event['end']),
            lines=lines,
            alignment=alignment,
            vertical_align=vertical_align,
            no_background=True
        )

    def _get_detected_format(self, document : SubstationDocument) -> str:
        script_type = document.info.get('ScriptType', '')
        return '.ssa' if _SSA_SCRIPT_TYPE_PATTERN.match(script_type.strip()) else '.ass'
