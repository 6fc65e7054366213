"""
minilang Lexer - turns source text into a flat token list

Single pass, greedy. At every position the recognizers are tried in a fixed
priority order and the first one that matches wins; the two-character
operators sit ahead of their one-character prefixes so they always win.

xwest
"""

import logging
from typing import List, Tuple

from .tokens import Token
from .errors import create_unrecognized_symbol_error
from .recognizers import Recognizer, default_recognizers, skip_spaces

logger = logging.getLogger(__name__)


class Lexer:
    """
    minilang lexical analyzer.

    Holds the source, the cursor and the tokens produced so far. A lexer is
    meant to be used for one input; calling tokenize() again rescans from the
    start.
    """

    def __init__(self, source: str, filename: str = "<unknown>", keyword_boundary: bool = False):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string
            filename: Name used in diagnostics
            keyword_boundary: If True, keywords only match as whole words
                (``iffy`` becomes one identifier instead of ``if`` + ``fy``)
        """
        self.source = source
        self.filename = filename
        self.keyword_boundary = keyword_boundary
        self.pos = 0
        self.tokens: List[Token] = []
        self.recognizers: Tuple[Recognizer, ...] = default_recognizers(keyword_boundary)

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source.

        Returns:
            List of tokens ending with exactly one EOF token

        Raises:
            UnrecognizedSymbolError: If no recognizer matches at some position
        """
        self.pos = 0
        self.tokens = []

        while not self.at_eof():
            self._skip_whitespace()

            # Trailing spaces leave nothing to recognize
            if self.at_eof():
                break

            if not self._next_token():
                error = create_unrecognized_symbol_error(self.source, self.pos, self.filename)
                logger.debug(f"Tokenizing {self.filename} failed at offset {self.pos}: {error.code}")
                raise error

        self.tokens.append(Token.eof(self.pos))

        logger.debug(f"Tokenized {self.filename}: {len(self.tokens)} tokens")
        return self.tokens

    def _next_token(self) -> bool:
        """Try each recognizer in order; append the first match and advance."""
        for recognize in self.recognizers:
            match = recognize(self.source, self.pos)
            if match is not None:
                token, consumed = match
                self.tokens.append(token)
                self._advance_by(consumed)
                return True
        return False

    def remaining(self) -> str:
        """Unconsumed input from the cursor on."""
        return self.source[self.pos:]

    def at_eof(self) -> bool:
        return self.pos >= len(self.source)

    def _skip_whitespace(self):
        self.pos = skip_spaces(self.source, self.pos)

    def _advance_by(self, count: int):
        self.pos += count


def tokenize(source: str, filename: str = "<string>", keyword_boundary: bool = False) -> List[Token]:
    """
    Tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting
        keyword_boundary: Require keywords to end at a word boundary

    Returns:
        List of tokens, the last one being EOF

    Raises:
        UnrecognizedSymbolError: If lexing fails
    """
    return Lexer(source, filename, keyword_boundary=keyword_boundary).tokenize()


tokenize_string = tokenize


def tokenize_file(filepath: str, keyword_boundary: bool = False) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Args:
        filepath: Path to a UTF-8 source file

    Returns:
        List of tokens

    Raises:
        LexerError: If lexing fails
        IOError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize(source, filepath, keyword_boundary=keyword_boundary)
