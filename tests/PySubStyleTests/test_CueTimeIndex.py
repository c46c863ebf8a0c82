import unittest

from PySubStyle.CueAssembler import AssembleCues
from PySubStyle.CueTimeIndex import CueTimeIndex, GetCurrentCue, GetCurrentText
from PySubStyle.Helpers.TestCases import LoggedTestCase
from PySubStyle.Helpers.Tests import log_input_expected_result
from PySubStyle.SubtitleCue import Cue, TextSegment

def make_cue(start : float, end : float, text : str) -> Cue:
    return Cue.Construct(start, end, [ [TextSegment(text)] ] if text else [])

class TestCueAssembler(LoggedTestCase):
    def test_document_order(self):
        cues = [ make_cue(5, 6, "b"), make_cue(1, 2, "a") ]
        result = AssembleCues(cues)
        log_input_expected_result("order", ["b", "a"], [ cue.text for cue in result ])
        self.assertEqual([ cue.text for cue in result ], ["b", "a"])

    def test_sorted_by_start_is_stable(self):
        cues = [ make_cue(5, 6, "b"), make_cue(1, 2, "a"), make_cue(5, 9, "c"), make_cue(3, 4, "x") ]
        result = AssembleCues(cues, sort_by_start=True)
        log_input_expected_result("order", ["a", "x", "b", "c"], [ cue.text for cue in result ])
        self.assertEqual([ cue.text for cue in result ], ["a", "x", "b", "c"])

    def test_empty_cues_dropped(self):
        cues = [ make_cue(1, 2, ""), make_cue(2, 3, "   "), make_cue(3, 4, "kept") ]
        result = AssembleCues(cues)
        self.assertEqual([ cue.text for cue in result ], ["kept"])


class TestCueTimeIndex(LoggedTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.cues = [
            make_cue(1.0, 4.0, "first"),
            make_cue(3.0, 6.0, "overlap"),
            make_cue(8.0, 9.0, "later"),
        ]
        self.index = CueTimeIndex(self.cues)

    def test_find(self):
        test_cases = [
            (0.5, None),
            (1.0, "first"),
            (3.5, "first"),
            (4.0, "first"),
            (4.001, "overlap"),
            (6.0, "overlap"),
            (7.0, None),
            (9.0, "later"),
            (9.5, None),
        ]
        for time, expected in test_cases:
            with self.subTest(time=time):
                cue = self.index.find(time)
                result = cue.text if cue else None
                log_input_expected_result(time, expected, result)
                self.assertEqual(result, expected)

    def test_find_all(self):
        self.assertEqual([ cue.text for cue in self.index.find_all(3.5) ], ["first", "overlap"])
        self.assertEqual(self.index.find_all(7.0), [])

    def test_text_at(self):
        self.assertEqual(self.index.text_at(8.5), "later")
        self.assertEqual(self.index.text_at(100), "")

    def test_list_order_wins(self):
        index = CueTimeIndex([ make_cue(2.0, 5.0, "listed first"), make_cue(1.0, 5.0, "starts first") ])
        log_input_expected_result(3.0, "listed first", index.text_at(3.0))
        self.assertEqual(index.text_at(3.0), "listed first")

    def test_helpers(self):
        cue = GetCurrentCue(self.cues, 2.0)
        self.assertIs(cue, self.cues[0])
        self.assertEqual(GetCurrentText(self.cues, 7.0), "")
        self.assertIsNone(GetCurrentCue([], 1.0))

    def test_empty_index(self):
        index = CueTimeIndex()
        self.assertEqual(len(index), 0)
        self.assertIsNone(index.find(0.0))

if __name__ == '__main__':
    unittest.main()
