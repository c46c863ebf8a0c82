import regex

from PySubStyle.Formats.YttFileHandler import YttFileHandler
from PySubStyle.Markup import DecodeEntities, LineBuilder, ParseAttributes, StripTags
from PySubStyle.Markup.HtmlMarkup import ApplyClassTokens
from PySubStyle.SubtitleCue import Line, TextSegment
from PySubStyle.SubtitleStyle import StyleAttributes


class Srv3FileHandler(YttFileHandler):
    """
    YouTube SRV3 timed text handler.

    Cues are <p> elements as in YouTube timed text. When a cue has <s> spans, each span becomes one segment
    of a single line, styled by the classes in its c attribute. Cues without spans are tokenized as
    HTML-like markup.
    """

    SUPPORTED_EXTENSIONS = {'.srv3': 10}
    FORMAT = '.srv3'

    _SPAN_PATTERN = regex.compile(r'<s\b([^>]*)>(.*?)</s>', regex.DOTALL | regex.IGNORECASE)

    def _parse_body(self, body : str) -> tuple[Line, ...]:
        spans = self._SPAN_PATTERN.findall(body)
        if not spans:
            return super()._parse_body(body)

        builder = LineBuilder(merge_segments=False)
        for attribute_text, span_text in spans:
            text = DecodeEntities(StripTags(span_text)).replace('\n', ' ')
            if text:
                classes = ParseAttributes(attribute_text).get('c', '').split()
                builder.add_segment(TextSegment(text, ApplyClassTokens(StyleAttributes(), classes)))

        return builder.build()
