import unittest

from PySubStyle.Helpers.TestCases import SAMPLE_ASS, LoggedTestCase
from PySubStyle.Helpers.Tests import log_input_expected_result
from PySubStyle.SubstationStyles import (
    BUILTIN_STYLE,
    GetCueAlignment,
    GetTextAlign,
    ReadStyleRecord,
    StyleFromRecord,
    SubstationStyleTable,
)
from PySubStyle.SubstationTables import SubstationDocument

class TestSubstationStyles(LoggedTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.document = SubstationDocument.FromString(SAMPLE_ASS)
        self.table = SubstationStyleTable.FromTable(self.document.styles)

    def test_default_style(self):
        style = self.table.ResolveStyle("Default")
        expected = {
            'color': '#ffffff',
            'fontFamily': 'Arial',
            'fontSize': '50px',
            'fontWeight': 'normal',
            'fontStyle': 'normal',
            'transform': 'rotate(0deg) scale(1, 1)',
            'textAlign': 'center',
            'textShadow': '0 0 2px #000000',
        }
        log_input_expected_result("Default", expected, style.to_css())
        self.assertEqual(style.to_css(), expected)

    def test_sign_style(self):
        style = self.table.ResolveStyle("Sign")
        log_input_expected_result("color", "#ffff00", style.color)
        self.assertEqual(style.color, "#ffff00")
        self.assertEqual(style.font_family, "Verdana")
        self.assertEqual(style.font_size, "30px")
        self.assertEqual(style.font_weight, "bold")

        # Opaque box border style fills the background with the back colour
        log_input_expected_result("background", "#000000", style.background_color)
        self.assertEqual(style.background_color, "#000000")
        self.assertIsNone(style.text_shadow)

    def test_flags(self):
        test_cases = [
            ({'bold': '1'}, 'bold'),
            ({'bold': '-1'}, 'bold'),
            ({'bold': '0'}, 'normal'),
            ({'bold': 'yes'}, 'normal'),
            ({}, 'normal'),
        ]
        for row, expected in test_cases:
            with self.subTest(row=row):
                style = StyleFromRecord(ReadStyleRecord(row))
                log_input_expected_result(row, expected, style.font_weight)
                self.assertEqual(style.font_weight, expected)

        style = StyleFromRecord(ReadStyleRecord({'italic': '-1', 'underline': '1', 'strikeout': '-1'}))
        self.assertEqual(style.font_style, 'italic')
        log_input_expected_result("decoration", "underline line-through", style.text_decoration)
        self.assertEqual(style.text_decoration, "underline line-through")

        style = StyleFromRecord(ReadStyleRecord({'strikeout': '1'}))
        self.assertEqual(style.text_decoration, "line-through")

    def test_numeric_defaults(self):
        record = ReadStyleRecord({'fontsize': '0', 'scalex': 'wide', 'alignment': '0', 'angle': 'x', 'outline': ''})
        log_input_expected_result("fontsize", 20, record.fontsize)
        self.assertEqual(record.fontsize, 20)
        self.assertEqual(record.scalex, 100.0)
        self.assertEqual(record.alignment, 2)
        self.assertEqual(record.angle, 0.0)
        self.assertEqual(record.outline, 0.0)

        style = StyleFromRecord(record)
        self.assertEqual(style.font_size, "20px")
        self.assertEqual(style.font_family, "Arial")
        self.assertEqual(style.color, "#ffffff")

    def test_transform(self):
        test_cases = [
            ({'angle': '15'}, "rotate(-15deg) scale(1, 1)"),
            ({'angle': '-7.5'}, "rotate(7.5deg) scale(1, 1)"),
            ({'scalex': '150', 'scaley': '50'}, "rotate(0deg) scale(1.5, 0.5)"),
        ]
        for row, expected in test_cases:
            with self.subTest(row=row):
                style = StyleFromRecord(ReadStyleRecord(row))
                log_input_expected_result(row, expected, style.transform)
                self.assertEqual(style.transform, expected)

    def test_supplemental_attributes(self):
        style = StyleFromRecord(ReadStyleRecord({'spacing': '2.5', 'primarycolour': '&H400000FF', 'outline': '3', 'outlinecolour': '&H00FF0000'}))
        log_input_expected_result("letter spacing", "2.5px", style.letter_spacing)
        self.assertEqual(style.letter_spacing, "2.5px")
        self.assertEqual(style.color, "#ff0000")
        self.assertEqual(style.opacity, 0.749)
        self.assertEqual(style.text_shadow, "0 0 3px #0000ff")

    def test_invalid_primary_colour_is_white(self):
        style = StyleFromRecord(ReadStyleRecord({'primarycolour': 'red'}))
        log_input_expected_result("red", "#ffffff", style.color)
        self.assertEqual(style.color, "#ffffff")

    def test_GetTextAlign(self):
        test_cases = [ (1, 'left'), (2, 'center'), (3, 'right'), (5, 'left'), (6, 'center'), (7, 'right'), (9, 'left'), (11, 'right'), (4, 'center'), (8, 'center') ]
        for code, expected in test_cases:
            with self.subTest(code=code):
                result = GetTextAlign(code)
                log_input_expected_result(code, expected, result)
                self.assertEqual(result, expected)

    def test_GetCueAlignment(self):
        test_cases = [
            (1, ('left', 'bottom')),
            (2, ('center', 'bottom')),
            (3, ('right', 'bottom')),
            (4, ('left', 'middle')),
            (5, ('center', 'middle')),
            (6, ('right', 'middle')),
            (7, ('left', 'top')),
            (8, ('center', 'top')),
            (9, ('right', 'top')),
            (10, ('center', 'bottom')),
            (11, ('center', 'bottom')),
            (None, ('center', 'bottom')),
        ]
        for code, expected in test_cases:
            with self.subTest(code=code):
                result = GetCueAlignment(code)
                log_input_expected_result(code, expected, result)
                self.assertEqual(result, expected)

    def test_first_definition_wins(self):
        table = SubstationStyleTable.FromTable([
            {'name': 'Main', 'fontsize': '30'},
            {'name': 'Main', 'fontsize': '40'},
            {'name': 'main', 'fontsize': '50'},
        ])
        log_input_expected_result("styles", 2, len(table))
        self.assertEqual(len(table), 2)
        self.assertEqual(table.ResolveStyle('Main').font_size, "30px")
        self.assertEqual(table.ResolveStyle('main').font_size, "50px")

    def test_style_resolution(self):
        log_input_expected_result("unknown", "50px", self.table.ResolveStyle("Missing").font_size)
        self.assertEqual(self.table.ResolveStyle("Missing"), self.table.ResolveStyle("Default"))
        self.assertEqual(self.table.ResolveStyle(None), self.table.ResolveStyle("Default"))

        no_default = SubstationStyleTable.FromTable([ {'name': 'First', 'fontsize': '11'}, {'name': 'Second', 'fontsize': '22'} ])
        self.assertEqual(no_default.ResolveStyle("Missing").font_size, "11px")
        self.assertEqual(no_default.ResolveRecord("Missing").fontsize, 11)

        empty = SubstationStyleTable()
        self.assertEqual(empty.ResolveStyle("Anything"), BUILTIN_STYLE)
        self.assertEqual(BUILTIN_STYLE.font_size, "20px")
        self.assertEqual(BUILTIN_STYLE.color, "#ffffff")

    def test_to_dict(self):
        styles = self.table.to_dict()
        self.assertEqual(list(styles.keys()), ['Default', 'Sign'])
        self.assertEqual(styles['Sign']['fontWeight'], 'bold')

if __name__ == '__main__':
    unittest.main()
