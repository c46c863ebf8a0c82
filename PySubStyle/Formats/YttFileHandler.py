import regex

from PySubStyle.CueAssembler import AssembleCues
from PySubStyle.Helpers.Time import ParseMilliseconds
from PySubStyle.Markup import ParseAttributes
from PySubStyle.Markup.HtmlMarkup import ParseHtmlMarkup
from PySubStyle.SubtitleCue import Cue, Line
from PySubStyle.SubtitleData import SubtitleData
from PySubStyle.SubtitleError import SubtitleParseError
from PySubStyle.SubtitleFileHandler import SubtitleFileHandler


class YttFileHandler(SubtitleFileHandler):
    """
    YouTube timed text handler.

    Each <p t="..." d="..."> element is a cue, with start and duration in milliseconds.
    The element body is tokenized as HTML-like markup.
    """

    SUPPORTED_EXTENSIONS = {'.ytt': 10}
    FORMAT = '.ytt'

    # Self-closing <p .../> elements have no body
    _PARAGRAPH_PATTERN = regex.compile(r'<p\b([^>]*?)(?<!/)>(.*?)</p>', regex.DOTALL | regex.IGNORECASE)

    def parse_string(self, content : str) -> SubtitleData:
        """Parse string content and return SubtitleData with styled cues."""
        try:
            cues = []
            for match in self._PARAGRAPH_PATTERN.finditer(content):
                attributes = ParseAttributes(match.group(1))
                start = ParseMilliseconds(attributes.get('t'))
                duration = ParseMilliseconds(attributes.get('d'))

                cues.append(Cue.Construct(
                    start=start,
                    end=start + duration,
                    lines=self._parse_body(match.group(2))
                ))

            return SubtitleData(cues=AssembleCues(cues), detected_format=self.FORMAT)

        except Exception as e:
            raise SubtitleParseError(f"Failed to parse content: {e}", e)

    def _parse_body(self, body : str) -> tuple[Line, ...]:
        return ParseHtmlMarkup(body.strip())
