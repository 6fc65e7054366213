"""
Integer literal parsing for the minilang lexer.

Only plain decimal digit runs are literals; there are no prefixes,
separators or signs.
"""

from typing import Tuple

from .tokens import U32_MAX

ASCII_DIGITS = frozenset("0123456789")


def leading_digit_count(text: str, start: int = 0) -> int:
    """Length of the run of ASCII digits beginning at ``start``."""
    end = start
    while end < len(text) and text[end] in ASCII_DIGITS:
        end += 1
    return end - start


def parse_leading_integer(text: str, start: int = 0, limit: int = U32_MAX) -> Tuple[int, int]:
    """
    Parse the leading digit run of ``text[start:]``.

    Args:
        text: Source text
        start: Where the run should begin
        limit: Largest accepted value

    Returns:
        ``(value, length)`` where length is the number of digits consumed

    Raises:
        ValueError: If there is no digit at ``start``
        OverflowError: If the value is larger than ``limit``
    """
    length = leading_digit_count(text, start)
    if length == 0:
        raise ValueError(f"no digits at offset {start}")

    significant = text[start:start + length].lstrip("0")
    # Reject over-long runs before int() sees them (str->int has a digit cap)
    if len(significant) > len(str(limit)):
        raise OverflowError(f"{length}-digit literal does not fit in [0, {limit}]")

    value = int(significant or "0")
    if value > limit:
        raise OverflowError(f"{value} does not fit in [0, {limit}]")

    return value, length
