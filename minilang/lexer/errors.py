"""
Error handling for the minilang lexer.

The scanner never aborts the process. When it cannot match anything at the
cursor it raises an UnrecognizedSymbolError that carries the offending offset
and the unconsumed remainder, and the caller decides what to do with it.

Author: xwest
"""

from typing import Optional, Tuple
from dataclasses import dataclass

from .tokens import SourceLocation, SPACE, U32_MAX
from .literals import leading_digit_count


@dataclass(frozen=True)
class Diagnostic:
    """What went wrong, where, and a hint for fixing it."""
    message: str
    location: SourceLocation
    code: str
    help_text: Optional[str] = None
    suggestions: Tuple[str, ...] = ()

    def __str__(self) -> str:
        lines = [f"ERROR: [{self.code}] {self.message}", f"  --> {self.location}"]
        if self.help_text:
            lines.append(f"  help: {self.help_text}")
        if self.suggestions:
            lines.append("  suggestions:")
            lines.extend(f"    - {suggestion}" for suggestion in self.suggestions)
        return "\n".join(lines) + "\n"


class LexerError(Exception):
    """Base exception for the lexer; wraps a Diagnostic."""

    def __init__(self, diagnostic: Diagnostic):
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    @property
    def code(self) -> str:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


class UnrecognizedSymbolError(LexerError):
    """
    No recognizer matched at the cursor.

    ``remainder`` is the unconsumed input starting at ``offset``.
    """

    def __init__(
        self,
        remainder: str,
        location: SourceLocation,
        code: str = "L001",
        help_text: Optional[str] = None,
        suggestions: Tuple[str, ...] = ()
    ):
        self.remainder = remainder
        self.offset = location.offset
        super().__init__(Diagnostic(
            message=f"Unknown symbol: {_preview(remainder)!r}",
            location=location,
            code=code,
            help_text=help_text,
            suggestions=suggestions,
        ))


# Error codes for categorization
ERROR_CODES = {
    "L001": "Unrecognized symbol",
    "L002": "Integer literal overflow",
}

PREVIEW_LENGTH = 20


def _preview(text: str) -> str:
    if len(text) <= PREVIEW_LENGTH:
        return text
    return text[:PREVIEW_LENGTH] + "..."


def create_unrecognized_symbol_error(source: str, pos: int, filename: str) -> UnrecognizedSymbolError:
    """Build the error for a scan that stalled at ``pos``, explaining the likely cause."""
    remainder = source[pos:]
    location = SourceLocation(filename, pos)

    digits = leading_digit_count(source, pos)
    if digits:
        # A digit run only fails to match when it does not fit in 32 bits
        return UnrecognizedSymbolError(
            remainder,
            location,
            code="L002",
            help_text=f"Integer literal {source[pos:pos + digits]} is larger than {U32_MAX}.",
        )

    char = remainder[0]
    suggestions: Tuple[str, ...] = ()
    if char.isspace():
        help_text = (f"Whitespace U+{ord(char):04X} is not allowed; "
                     f"tokens may only be separated by spaces.")
        suggestions = (f"Replace it with {SPACE!r}",)
    elif char == "_":
        help_text = "Identifiers may only contain letters and digits."
    elif char.isprintable():
        help_text = f"The character '{char}' is not valid in minilang source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return UnrecognizedSymbolError(
        remainder,
        location,
        code="L001",
        help_text=help_text,
        suggestions=suggestions,
    )
