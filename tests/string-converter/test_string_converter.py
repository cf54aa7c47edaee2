#!/usr/bin/env python3
"""
Unit tests for the line to string array converter
"""

import unittest

from array_tools.api.string_converter import (
    DEFAULT_OUTPUT_FILENAME,
    convert_lines,
    converted_filename,
    lines_to_string_array,
    text_to_lines,
)


class TestStringConverter(unittest.TestCase):

    def test_lines_are_trimmed_and_blank_lines_dropped(self):
        self.assertEqual(text_to_lines("  foo \n\n bar\n"), ["foo", "bar"])

    def test_convert_basic(self):
        result = convert_lines("  foo \n\n bar\n")
        self.assertTrue(result['success'])
        self.assertEqual(result['result'], '[\n  "foo",\n  "bar"\n]')
        self.assertEqual(result['count'], 2)

    def test_convert_single_line(self):
        self.assertEqual(convert_lines("only")['result'], '[\n  "only"\n]')

    def test_windows_line_endings(self):
        self.assertEqual(convert_lines("a\r\nb\r\n")['result'], '[\n  "a",\n  "b"\n]')

    def test_quotes_are_escaped(self):
        self.assertEqual(convert_lines('say "hi"')['result'], '[\n  "say \\"hi\\""\n]')

    def test_numbers_stay_strings(self):
        self.assertEqual(convert_lines("12\n9223372036854775808")['result'],
                         '[\n  "12",\n  "9223372036854775808"\n]')

    def test_blank_input_gives_empty_result(self):
        for text in ("", "   ", "\n\n"):
            result = convert_lines(text)
            self.assertTrue(result['success'])
            self.assertEqual(result['result'], '')
            self.assertEqual(result['count'], 0)

    def test_lines_to_string_array_empty(self):
        self.assertEqual(lines_to_string_array([]), '')


class TestConvertedFilename(unittest.TestCase):

    def test_stem_gets_suffix(self):
        self.assertEqual(converted_filename('skus.csv'), 'skus_converted.txt')

    def test_only_first_dot_segment_is_kept(self):
        self.assertEqual(converted_filename('archive.tar.gz'), 'archive_converted.txt')

    def test_directories_are_ignored(self):
        self.assertEqual(converted_filename('exports/list.txt'), 'list_converted.txt')

    def test_missing_name_uses_default(self):
        self.assertEqual(converted_filename(None), DEFAULT_OUTPUT_FILENAME)
        self.assertEqual(converted_filename(''), DEFAULT_OUTPUT_FILENAME)
        self.assertEqual(converted_filename('.hidden'), DEFAULT_OUTPUT_FILENAME)


if __name__ == '__main__':
    unittest.main()
