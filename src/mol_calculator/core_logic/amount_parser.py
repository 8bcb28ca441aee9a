"""Parsing of free-text "value + unit" amounts, e.g. "1 mol" or "10kg"."""

import logging
import re

from ..models.amount import ParsedAmount, lookup_unit

logger = logging.getLogger(__name__)

AMOUNT_RE = re.compile(r"^(\d+(?:\.\d+)?)(.*)$", re.ASCII | re.DOTALL)


def parse_amount(text: str) -> ParsedAmount:
    """
    Split an amount string into a number and a unit label.

    The number is a required leading non-negative decimal. Whatever follows
    it, trimmed, is the unit label. Unknown labels are kept in unit_text with
    unit=None; rejecting them is left to the converter.

    Examples:
        "1 mol"   -> value=1.0, unit=MOLE, unit_text="mol"
        "2.5kg"   -> value=2.5, unit=KILOGRAM, unit_text="kg"
        "1 mol/L" -> value=1.0, unit=None, unit_text="mol/L"
        "abc"     -> value=None, unit=None, unit_text=""

    Args:
        text: Raw amount input

    Returns:
        ParsedAmount
    """
    match = AMOUNT_RE.match((text or "").strip())
    if not match:
        if text and text.strip():
            logger.debug(f"No leading number in amount {text!r}")
        return ParsedAmount()

    unit_text = match.group(2).strip()
    return ParsedAmount(
        value=float(match.group(1)),
        unit=lookup_unit(unit_text) if unit_text else None,
        unit_text=unit_text,
    )
