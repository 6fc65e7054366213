"""
minilang Package

Front end for minilang, a small expression and function-definition
language. This package currently provides the lexer, which turns source text
into the token stream a parser consumes.

Architecture:
    minilang/
    └── lexer/           # Tokenization and lexical analysis

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__license__ = "MIT"

from .lexer import (
    Lexer,
    Token,
    TokenType,
    LexerError,
    UnrecognizedSymbolError,
    tokenize,
    tokenize_file,
)

__all__ = [
    # Core classes
    "Lexer",
    "Token",
    "TokenType",
    "LexerError",
    "UnrecognizedSymbolError",

    # Entry points
    "tokenize",
    "tokenize_file",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
