"""
Recognizers used by the minilang scan loop.

A recognizer looks at the source at a given position and either returns the
token it found together with the number of characters it consumed, or None.
Recognizers never move the cursor themselves; the Lexer does that.
"""

import unicodedata
from typing import Callable, Optional, Tuple

from .tokens import Token, OPERATORS, KEYWORDS, SPACE
from .literals import parse_leading_integer

Match = Tuple[Token, int]
Recognizer = Callable[[str, int], Optional[Match]]

# Letters and letter-numbers (Roman numerals) start an identifier
IDENTIFIER_START_CATEGORIES = frozenset(('Lu', 'Ll', 'Lt', 'Lm', 'Lo', 'Nl'))

# Combining marks keep scripts like Devanagari whole (vowel signs, virama)
IDENTIFIER_CONTINUE_CATEGORIES = IDENTIFIER_START_CATEGORIES | {'Mn', 'Mc', 'Nd', 'No'}


def skip_spaces(source: str, pos: int) -> int:
    """Return the position after a run of ASCII spaces starting at ``pos``."""
    while pos < len(source) and source[pos] == SPACE:
        pos += 1
    return pos


def is_identifier_start(char: str) -> bool:
    """Check if character can start an identifier."""
    return unicodedata.category(char) in IDENTIFIER_START_CATEGORIES


def is_identifier_continue(char: str) -> bool:
    """Check if character can continue an identifier."""
    return unicodedata.category(char) in IDENTIFIER_CONTINUE_CATEGORIES


def literal_recognizer(literal: str, word_boundary: bool = False) -> Recognizer:
    """
    Build a recognizer for one fixed operator or keyword.

    With ``word_boundary`` the literal is rejected when an identifier
    character follows it, so ``iffy`` is not split into ``if`` + ``fy``.
    """
    def recognize(source: str, pos: int) -> Optional[Match]:
        if not source.startswith(literal, pos):
            return None

        end = pos + len(literal)
        if word_boundary and end < len(source) and is_identifier_continue(source[end]):
            return None

        return Token.operator(literal, pos), len(literal)

    recognize.__name__ = f"recognize_{literal!r}"
    return recognize


def recognize_identifier(source: str, pos: int) -> Optional[Match]:
    """Letter first, then letters, digits and combining marks."""
    if pos >= len(source) or not is_identifier_start(source[pos]):
        return None

    end = pos + 1
    while end < len(source) and is_identifier_continue(source[end]):
        end += 1

    return Token.identifier(source[pos:end], pos), end - pos


def recognize_integer(source: str, pos: int) -> Optional[Match]:
    """Decimal digit run that fits in an unsigned 32-bit integer."""
    try:
        value, length = parse_leading_integer(source, pos)
    except (ValueError, OverflowError):
        # Empty run or overflow is a plain no-match here
        return None

    return Token.integer(value, source[pos:pos + length], pos), length


def default_recognizers(keyword_boundary: bool = False) -> Tuple[Recognizer, ...]:
    """
    The recognizers in priority order: operators, keywords, identifier, integer.

    Keywords are tried before the generic identifier recognizer, which is
    the only thing that turns ``let`` into a keyword rather than a name.
    """
    operators = [literal_recognizer(op) for op in OPERATORS]
    keywords = [literal_recognizer(kw, word_boundary=keyword_boundary) for kw in KEYWORDS]
    return (*operators, *keywords, recognize_identifier, recognize_integer)
