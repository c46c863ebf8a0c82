import unittest

from PySubStyle.Helpers.Tests import log_input_expected_result, log_test_name
from PySubStyle.SubtitleCue import Cue, FlattenLines
from PySubStyle.SubtitleStyle import StyleAttributes

class LoggedTestCase(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        super().setUpClass()
        log_test_name(f"{cls.__name__}")

    def setUp(self) -> None:
        super().setUp()
        log_test_name(self._testMethodName)


class CueTestCase(LoggedTestCase):
    """
    Test case with assertions for parsed cues
    """
    def assert_cue_times(self, cue : Cue, start : float, end : float) -> None:
        log_input_expected_result(cue.text, (start, end), (cue.start_time, cue.end_time))
        self.assertAlmostEqual(cue.start_time, start, places=3)
        self.assertAlmostEqual(cue.end_time, end, places=3)

    def assert_cue_text(self, cue : Cue, text : str) -> None:
        log_input_expected_result("Cue text", text, cue.text)
        self.assertEqual(cue.text, text)

    def assert_text_matches_lines(self, cues : list[Cue]) -> None:
        """Every cue's text is its lines flattened"""
        for cue in cues:
            self.assertEqual(cue.text, FlattenLines(cue.lines))

    def assert_segments(self, cue : Cue, expected : list[list[str]]) -> None:
        """Compare the text of each segment on each line of a cue"""
        actual = [ [ segment.text for segment in line ] for line in cue.lines ]
        log_input_expected_result("Segments", expected, actual)
        self.assertEqual(actual, expected)

    def segment_style(self, cue : Cue, line : int = 0, segment : int = 0) -> StyleAttributes:
        return cue.lines[line][segment].style


SAMPLE_ASS = """[Script Info]
Title: Sample Subtitles
ScriptType: v4.00+
PlayResX: 1280
PlayResY: 720

[V4+ Styles]
Format: Name, Fontname, Fontsize, PrimaryColour, SecondaryColour, OutlineColour, BackColour, Bold, Italic, Underline, StrikeOut, ScaleX, ScaleY, Spacing, Angle, BorderStyle, Outline, Shadow, Alignment, MarginL, MarginR, MarginV, Encoding
Style: Default,Arial,50,&H00FFFFFF,&H0000FFFF,&H00000000,&H00000000,0,0,0,0,100,100,0,0,1,2,0,2,30,30,30,1
Style: Sign,Verdana,30,&H0000FFFF,&H0000FFFF,&H00000000,&H80000000,-1,0,0,0,100,100,0,0,3,0,0,8,30,30,30,1

[Events]
Format: Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text
Dialogue: 0,0:00:07.00,0:00:09.00,Default,,0,0,0,,Third subtitle line
Dialogue: 0,0:00:01.50,0:00:03.00,Default,,0,0,0,,First subtitle line
Dialogue: 0,0:00:04.00,0:00:06.50,Sign,,0,0,0,,Second subtitle line\\Nwith line break
"""
