"""Helper utilities for formula text."""

from .subscripts import (
    SUBSCRIPT_DIGITS,
    SUPERSCRIPT_DIGITS,
    subscript_counts,
    subscript_to_number,
    to_subscript_all,
    to_subscript_last_char,
    to_superscript,
)

__all__ = [
    "SUBSCRIPT_DIGITS",
    "SUPERSCRIPT_DIGITS",
    "subscript_counts",
    "subscript_to_number",
    "to_subscript_all",
    "to_subscript_last_char",
    "to_superscript",
]
