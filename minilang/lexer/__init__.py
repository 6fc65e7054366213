"""
minilang Lexer Package

Implements the lexical analyzer (tokenizer) for minilang, a small
expression and function-definition language.

Key Features:
- Greedy, longest-match-first operator recognition (<=, >=, <| before <, >)
- Keywords recognized by priority ahead of identifiers
- Unicode-aware identifiers (alphabetic start, alphanumeric tail)
- Unsigned 32-bit integer literals with overflow detection
- Structured errors instead of aborting on unknown input

Author: xwest
"""

from .tokens import Token, TokenType, SourceLocation, OPERATORS, KEYWORDS
from .lexer import Lexer, tokenize, tokenize_string, tokenize_file
from .errors import LexerError, UnrecognizedSymbolError, Diagnostic

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "SourceLocation",
    "OPERATORS",
    "KEYWORDS",
    "LexerError",
    "UnrecognizedSymbolError",
    "Diagnostic",
    "tokenize",
    "tokenize_string",
    "tokenize_file",
]
