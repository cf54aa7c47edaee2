#!/usr/bin/env python3
"""
End-to-end tests for parse -> reconcile -> format
"""

import pytest

import array_tools.api.arrays as arrays
from array_tools.api.arrays import (
    OUTPUT_FORCE_NUMBER,
    OUTPUT_FORCE_STRING,
    format_array,
    parse_array,
    process_arrays,
)


class TestRoundTrip:
    """Formatting then re-parsing gives back the same tokens"""

    @pytest.mark.parametrize('text', [
        '["a,b", "c\\"d", "7"]',
        'alpha\nbeta\ngamma',
        '[1, "x", true]',
        '"café", "naïve"',
        '',
    ])
    def test_string_form(self, text):
        tokens = parse_array(text)
        assert parse_array(format_array(tokens, OUTPUT_FORCE_STRING)) == tokens

    @pytest.mark.parametrize('text', [
        '1, 22, 333',
        '[9223372036854775807, 9223372036854775808]',
        '-4\n5\n-6',
        '[1.25, 3]',
        '123456789012345678901234567890',
        '-007, 008',
        '[-' + '9' * 5000 + ', 1]',
    ])
    def test_number_form(self, text):
        tokens = parse_array(text)
        assert parse_array(format_array(tokens, OUTPUT_FORCE_NUMBER)) == tokens

    def test_auto_form(self):
        tokens = parse_array('[9007199254740993, 9007199254740992]')
        assert parse_array(format_array(tokens)) == ['9007199254740993', '9007199254740992']


class TestProcessArrays:

    def test_large_integers_round_trip_in_number_mode(self):
        result = process_arrays('[9223372036854775807, 9223372036854775808]', '', 'merge', OUTPUT_FORCE_NUMBER)
        assert result['success'] is True
        assert result['result'] == '[\n  9223372036854775807,\n  9223372036854775808\n]'

    def test_diff_left_only_scenario(self):
        result = process_arrays('1,2,3', '[2,3,4]', 'diff-left-only', 'auto')
        assert result['success'] is True
        assert result['result'] == '[\n  1\n]'
        assert result['count'] == 1

    def test_merge_dedup_scenario(self):
        result = process_arrays('a, b\nb', '', 'merge-dedup', 'auto')
        assert result['success'] is True
        assert result['result'] == '[\n  "a",\n  "b"\n]'

    def test_malformed_input_is_not_an_error(self):
        result = process_arrays('[1,2', '', 'merge')
        assert result['success'] is True
        assert result['count'] == 2

    def test_empty_inputs_give_empty_array(self):
        result = process_arrays('', '', 'diff-symmetric')
        assert result['success'] is True
        assert result['result'] == '[]'

    def test_none_inputs_are_treated_as_empty(self):
        result = process_arrays(None, None, 'merge')
        assert result['result'] == '[]'

    def test_output_mode_alias_is_normalized(self):
        result = process_arrays('1', '', 'merge', 'number')
        assert result['output_mode'] == OUTPUT_FORCE_NUMBER

    def test_unknown_mode_is_reported(self):
        result = process_arrays('1', '2', 'bogus')
        assert result['success'] is False
        assert result['result'] == ''
        assert 'Invalid mode' in result['error']

    def test_unknown_output_mode_is_reported(self):
        result = process_arrays('1', '2', 'merge', 'hex')
        assert result['success'] is False
        assert 'Invalid output mode' in result['error']

    def test_unexpected_failure_is_caught(self, monkeypatch):
        def explode(left, right, mode):
            raise RuntimeError('boom')

        monkeypatch.setattr(arrays, 'reconcile', explode)
        result = process_arrays('1', '2', 'merge')
        assert result['success'] is False
        assert result['result'] == ''
        assert result['error'] == 'Unexpected error during processing: boom'
