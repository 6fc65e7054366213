"""
Tests for integer literal parsing.
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from minilang.lexer.literals import leading_digit_count, parse_leading_integer
from minilang.lexer.tokens import U32_MAX


class TestParseLeadingInteger(unittest.TestCase):

    def test_plain_runs(self):
        self.assertEqual(parse_leading_integer("34"), (34, 2))
        self.assertEqual(parse_leading_integer("123"), (123, 3))
        self.assertEqual(parse_leading_integer("0"), (0, 1))

    def test_stops_at_first_non_digit(self):
        self.assertEqual(parse_leading_integer("123あいう"), (123, 3))
        self.assertEqual(parse_leading_integer("42+1"), (42, 2))
        self.assertEqual(parse_leading_integer("7 8"), (7, 1))

    def test_start_offset(self):
        self.assertEqual(parse_leading_integer("ab12cd", 2), (12, 2))

    def test_no_digits(self):
        for text in ("", "あbc", "x1", " 1", "٣"):
            with self.subTest(text=text):
                with self.assertRaises(ValueError):
                    parse_leading_integer(text)

    def test_range_limits(self):
        self.assertEqual(parse_leading_integer(str(U32_MAX)), (U32_MAX, 10))
        with self.assertRaises(OverflowError):
            parse_leading_integer(str(U32_MAX + 1))

    def test_custom_limit(self):
        self.assertEqual(parse_leading_integer("255", limit=255), (255, 3))
        with self.assertRaises(OverflowError):
            parse_leading_integer("256", limit=255)

    def test_leading_zeros_do_not_overflow(self):
        self.assertEqual(parse_leading_integer("0000000000042"), (42, 13))
        self.assertEqual(parse_leading_integer("0000000000000"), (0, 13))

    def test_very_long_run_overflows(self):
        with self.assertRaises(OverflowError):
            parse_leading_integer("9" * 5000)


class TestLeadingDigitCount(unittest.TestCase):

    def test_counts_ascii_digits_only(self):
        self.assertEqual(leading_digit_count("2024年"), 4)
        self.assertEqual(leading_digit_count("١٢٣"), 0)
        self.assertEqual(leading_digit_count(""), 0)
        self.assertEqual(leading_digit_count("x99", 1), 2)


if __name__ == '__main__':
    unittest.main()
