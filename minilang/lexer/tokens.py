"""
Token definitions for the minilang lexer.

The token set is deliberately tiny:
- Integer literals (unsigned 32-bit)
- Operators, punctuation and keywords (stored as their exact text)
- Identifiers
- A single end-of-input marker

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass, field
from typing import Any, Optional


class TokenType(Enum):
    """Enumeration of all token types in minilang."""

    INTEGER_LITERAL = auto()        # 42
    OPERATOR = auto()               # + <= ( def let ...
    IDENTIFIER = auto()             # add, x, Int
    EOF = auto()                    # End of input


@dataclass(frozen=True)
class SourceLocation:
    """
    Position of a token or diagnostic in the source.

    Only the offset is tracked; minilang has no line/column bookkeeping.
    """
    filename: str
    offset: int  # Index into the source string

    def __str__(self) -> str:
        return f"{self.filename}:{self.offset}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token.

    Two tokens are equal when their type and value match. The raw lexeme and
    the source offset are carried along for diagnostics but ignored by
    comparisons, so ``Token.integer(7)`` equals a scanned ``007``.
    """
    type: TokenType
    value: Any                                              # int, str or None (EOF)
    lexeme: str = field(default="", compare=False)          # Raw text from source
    offset: Optional[int] = field(default=None, compare=False)

    def __str__(self) -> str:
        if self.type == TokenType.EOF:
            return "EOF"
        return f"{self.type.name}({self.value!r})"

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, {self.lexeme!r}, {self.offset!r})"

    @classmethod
    def integer(cls, value: int, lexeme: Optional[str] = None, offset: Optional[int] = None) -> "Token":
        return cls(TokenType.INTEGER_LITERAL, value, str(value) if lexeme is None else lexeme, offset)

    @classmethod
    def operator(cls, text: str, offset: Optional[int] = None) -> "Token":
        return cls(TokenType.OPERATOR, text, text, offset)

    @classmethod
    def identifier(cls, text: str, offset: Optional[int] = None) -> "Token":
        return cls(TokenType.IDENTIFIER, text, text, offset)

    @classmethod
    def eof(cls, offset: Optional[int] = None) -> "Token":
        return cls(TokenType.EOF, None, "", offset)

    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.type == TokenType.INTEGER_LITERAL

    @property
    def is_keyword(self) -> bool:
        """Check if this token is one of the reserved words."""
        return self.type == TokenType.OPERATOR and self.value in KEYWORDS

    @property
    def is_operator(self) -> bool:
        """Check if this token is an operator or punctuation symbol (not a keyword)."""
        return self.type == TokenType.OPERATOR and self.value in OPERATORS

    @property
    def is_identifier(self) -> bool:
        return self.type == TokenType.IDENTIFIER

    @property
    def is_eof(self) -> bool:
        return self.type == TokenType.EOF

    @property
    def end(self) -> Optional[int]:
        """Offset just past the token's lexeme, if the token was scanned."""
        if self.offset is None:
            return None
        return self.offset + len(self.lexeme)


# Lookup tables used by the recognizers.
# Order matters: the scanner tries entries first to last and keeps the first
# match, so two-character operators must precede their one-character prefixes.

OPERATORS = (
    # Arithmetic
    "+",
    "-",

    # Delimiters
    "(",
    ")",
    "[",
    "]",
    "{",
    "}",

    # Comparison and pipe (two-character forms first)
    "<=",
    ">=",
    "<|",
    "<",
    ">",

    # Binding and punctuation
    "=",
    ":",
    ",",
)

KEYWORDS = (
    "if",
    "then",
    "let",
    "def",
)

# Only the ASCII space separates tokens
SPACE = " "

# Integer literals are unsigned 32-bit
U32_MAX = 2 ** 32 - 1
