import unittest

from PySubStyle.Formats.SSAFileHandler import SSAFileHandler
from PySubStyle.Helpers.TestCases import SAMPLE_ASS, CueTestCase
from PySubStyle.Helpers.Tests import log_input_expected_result

_HEADER = """[Script Info]
ScriptType: v4.00+

[V4+ Styles]
Format: Name, Fontname, Fontsize, PrimaryColour, Bold, Alignment
Style: Default,Arial,40,&H00FFFFFF,0,2
Style: Top,Arial,40,&H0000FFFF,0,8

[Events]
Format: Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text
"""

class TestSSAFileHandler(CueTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.handler = SSAFileHandler()

    def test_sample(self):
        data = self.handler.parse_string(SAMPLE_ASS)

        log_input_expected_result("cues", 3, len(data.cues))
        self.assertEqual(len(data.cues), 3)
        self.assertEqual(data.detected_format, '.ass')

        # Events are sorted by start time
        self.assert_cue_times(data.cues[0], 1.5, 3.0)
        self.assert_cue_text(data.cues[0], "First subtitle line")
        self.assert_cue_times(data.cues[1], 4.0, 6.5)
        self.assert_cue_text(data.cues[1], "Second subtitle line\nwith line break")
        self.assert_cue_times(data.cues[2], 7.0, 9.0)
        self.assert_text_matches_lines(data.cues)

        for cue in data.cues:
            self.assertTrue(cue.no_background)

    def test_base_style_and_alignment(self):
        data = self.handler.parse_string(SAMPLE_ASS)

        default_cue = data.cues[0]
        self.assertEqual(self.segment_style(default_cue).font_size, "50px")
        self.assertEqual((default_cue.alignment, default_cue.vertical_align), ("center", "bottom"))

        sign_cue = data.cues[1]
        style = self.segment_style(sign_cue)
        log_input_expected_result("Sign style", ("30px", "#ffff00", "bold"), (style.font_size, style.color, style.font_weight))
        self.assertEqual(style.font_size, "30px")
        self.assertEqual(style.color, "#ffff00")
        self.assertEqual(style.font_weight, "bold")
        self.assertEqual((sign_cue.alignment, sign_cue.vertical_align), ("center", "top"))

    def test_metadata(self):
        data = self.handler.parse_string(SAMPLE_ASS)

        log_input_expected_result("Title", "Sample Subtitles", data.metadata['info'].get('Title'))
        self.assertEqual(data.metadata['info'].get('Title'), "Sample Subtitles")
        self.assertEqual(data.metadata['info'].get('PlayResX'), "1280")
        self.assertEqual(list(data.metadata['styles'].keys()), ['Default', 'Sign'])
        self.assertEqual(data.metadata['styles']['Default']['fontSize'], '50px')

    def test_alignment_tag_overrides_style(self):
        data = self.handler.parse_string(_HEADER + "Dialogue: 0,0:00:01.00,0:00:02.00,Top,,0,0,0,,{\\an7}Corner\nDialogue: 0,0:00:03.00,0:00:04.00,Top,,0,0,0,,Style alignment\n")

        cue = data.cues[0]
        log_input_expected_result("\\an7", ("left", "top"), (cue.alignment, cue.vertical_align))
        self.assertEqual((cue.alignment, cue.vertical_align), ("left", "top"))
        self.assert_cue_text(cue, "Corner")

        cue = data.cues[1]
        self.assertEqual((cue.alignment, cue.vertical_align), ("center", "top"))

    def test_override_tags(self):
        data = self.handler.parse_string(_HEADER + "Dialogue: 0,0:00:01.00,0:00:02.00,Default,,0,0,0,,{\\b1}Bold{\\b0}Normal, with commas\n")

        cue = data.cues[0]
        self.assert_segments(cue, [["Bold", "Normal, with commas"]])
        self.assertEqual(self.segment_style(cue, 0, 0).font_weight, "bold")
        self.assertEqual(self.segment_style(cue, 0, 1).font_weight, "normal")
        self.assertEqual(self.segment_style(cue, 0, 1).font_size, "40px")

    def test_unknown_style_uses_default(self):
        data = self.handler.parse_string(_HEADER + "Dialogue: 0,0:00:01.00,0:00:02.00,Missing,,0,0,0,,Fallback\n")
        log_input_expected_result("color", "#ffffff", self.segment_style(data.cues[0]).color)
        self.assertEqual(self.segment_style(data.cues[0]).color, "#ffffff")

    def test_out_of_order_events_sorted(self):
        events = "\n".join([
            "Dialogue: 0,0:00:05.00,0:00:06.00,Default,,0,0,0,,C",
            "Dialogue: 0,0:00:01.00,0:00:02.00,Default,,0,0,0,,A",
            "Dialogue: 0,0:00:05.00,0:00:07.00,Default,,0,0,0,,D",
            "Dialogue: 0,0:00:03.00,0:00:04.00,Default,,0,0,0,,B",
        ])
        data = self.handler.parse_string(_HEADER + events)

        texts = [ cue.text for cue in data.cues ]
        log_input_expected_result("order", ["A", "B", "C", "D"], texts)
        self.assertEqual(texts, ["A", "B", "C", "D"])
        starts = [ cue.start_time for cue in data.cues ]
        self.assertEqual(starts, sorted(starts))

    def test_skipped_events(self):
        content = _HEADER + "\n".join([
            "Comment: 0,0:00:01.00,0:00:02.00,Default,,0,0,0,,Not shown",
            "Dialogue: 0,0:00:01.00,0:00:02.00,Default,,0,0,0,,{\\b1}",
            "Dialogue: 0,bad,0:00:02.00,Default,,0,0,0,,Starts at zero",
        ])
        data = self.handler.parse_string(content)

        log_input_expected_result("cues", 1, len(data.cues))
        self.assertEqual(len(data.cues), 1)
        self.assert_cue_times(data.cues[0], 0.0, 2.0)

    def test_events_without_times_skipped(self):
        content = "[Events]\nFormat: Style, Text\nDialogue: Default,No times\n"
        data = self.handler.parse_string(content)
        self.assertEqual(data.cues, [])

    def test_no_styles_section(self):
        content = "[Script Info]\nScriptType: v4.00\n\n[Events]\nFormat: Marked, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text\nDialogue: Marked=0,0:00:01.00,0:00:02.00,*Default,,0000,0000,0000,,Legacy\n"
        data = self.handler.parse_string(content)

        self.assertEqual(data.detected_format, '.ssa')
        self.assertEqual(len(data.cues), 1)
        style = self.segment_style(data.cues[0])
        log_input_expected_result("built-in style", ("20px", "#ffffff"), (style.font_size, style.color))
        self.assertEqual(style.font_size, "20px")
        self.assertEqual(style.color, "#ffffff")

if __name__ == '__main__':
    unittest.main()
