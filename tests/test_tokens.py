"""
Tests for token values.
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from minilang.lexer.tokens import Token, TokenType, SourceLocation


class TestToken(unittest.TestCase):

    def test_equality_ignores_lexeme_and_offset(self):
        self.assertEqual(Token.integer(7, "007", 3), Token.integer(7))
        self.assertEqual(Token.operator("+", 5), Token.operator("+"))
        self.assertEqual(hash(Token.identifier("x", 1)), hash(Token.identifier("x")))

    def test_type_distinguishes_tokens(self):
        self.assertNotEqual(Token.operator("let"), Token.identifier("let"))
        self.assertNotEqual(Token.integer(1), Token.operator("1"))

    def test_constructors(self):
        self.assertEqual(Token.integer(42).type, TokenType.INTEGER_LITERAL)
        self.assertEqual(Token.integer(42).lexeme, "42")
        self.assertEqual(Token.eof().value, None)
        self.assertEqual(Token.eof().lexeme, "")

    def test_classification(self):
        self.assertTrue(Token.operator("def").is_keyword)
        self.assertFalse(Token.operator("def").is_operator)
        self.assertTrue(Token.operator("<|").is_operator)
        self.assertFalse(Token.operator("<|").is_keyword)
        self.assertTrue(Token.integer(1).is_literal)
        self.assertTrue(Token.identifier("x").is_identifier)
        self.assertTrue(Token.eof().is_eof)
        self.assertFalse(Token.identifier("def").is_keyword)

    def test_end(self):
        self.assertEqual(Token.identifier("abc", 4).end, 7)
        self.assertIsNone(Token.identifier("abc").end)

    def test_str(self):
        self.assertEqual(str(Token.integer(3)), "INTEGER_LITERAL(3)")
        self.assertEqual(str(Token.operator("<=")), "OPERATOR('<=')")
        self.assertEqual(str(Token.eof()), "EOF")


class TestSourceLocation(unittest.TestCase):

    def test_str(self):
        self.assertEqual(str(SourceLocation("main.ml", 12)), "main.ml:12")


if __name__ == '__main__':
    unittest.main()
