"""Utilities for subscript and superscript digit glyphs in formulas."""

import re

SUBSCRIPT_DIGITS = "₀₁₂₃₄₅₆₇₈₉"
SUPERSCRIPT_DIGITS = "⁰¹²³⁴⁵⁶⁷⁸⁹"

_TO_SUBSCRIPT = str.maketrans("0123456789", SUBSCRIPT_DIGITS)
_TO_SUPERSCRIPT = str.maketrans("0123456789", SUPERSCRIPT_DIGITS)
_FROM_SUBSCRIPT = str.maketrans(SUBSCRIPT_DIGITS, "0123456789")

# Element symbol followed by a run of ASCII digits
_ASCII_COUNT_RE = re.compile(r"([A-Z][a-z]?)(\d+)")


def to_subscript_all(text: str) -> str:
    """
    Convert every ASCII digit to its subscript glyph.

    Examples:
        H2O -> H₂O
        C6H12O6 -> C₆H₁₂O₆
    """
    return text.translate(_TO_SUBSCRIPT)


def to_subscript_last_char(text: str) -> str:
    """Convert only the final character, if it is an ASCII digit."""
    if not text:
        return text
    return text[:-1] + text[-1].translate(_TO_SUBSCRIPT)


def to_superscript(text: str) -> str:
    """Convert every ASCII digit to its superscript glyph (10²³)."""
    return text.translate(_TO_SUPERSCRIPT)


def subscript_to_number(glyphs: str) -> int:
    """
    Decode a run of subscript glyphs as a base-10 count.

    An empty run means a count of 1. Characters that are not subscript
    digits, ASCII digits included, are ignored.
    """
    digits = "".join(ch for ch in glyphs if ch in SUBSCRIPT_DIGITS).translate(_FROM_SUBSCRIPT)
    return int(digits) if digits else 1


def subscript_counts(formula: str) -> str:
    """
    Convert digit runs that follow an element symbol into subscripts.

    Leading molecule coefficients stay as ASCII digits:
        2H2O -> 2H₂O
    """
    return _ASCII_COUNT_RE.sub(lambda m: m.group(1) + to_subscript_all(m.group(2)), formula)
