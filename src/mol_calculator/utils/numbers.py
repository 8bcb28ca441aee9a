"""Number formatting for arithmetic expressions shown to the user."""

from .subscripts import to_superscript

SCIENTIFIC_UPPER = 1e6
SCIENTIFIC_LOWER = 1e-4


def format_number(value: float, precision: int = 6) -> str:
    """
    Compact human-readable number.

    Large and tiny magnitudes use "×10ⁿ" notation with superscript
    exponents, everything else drops trailing zeros.

    Examples:
        10000.0 -> "10000"
        0.5551  -> "0.5551"
        6.02e23 -> "6.02×10²³"
        1.66e-24 -> "1.66×10⁻²⁴"
    """
    if value == 0:
        return "0"

    magnitude = abs(value)
    if SCIENTIFIC_LOWER <= magnitude < SCIENTIFIC_UPPER:
        return f"{value:.{precision}g}"

    mantissa, exponent = f"{value:.{precision - 1}e}".split("e")
    mantissa = mantissa.rstrip("0").rstrip(".")
    exp = int(exponent)
    sign = "⁻" if exp < 0 else ""
    return f"{mantissa}×10{sign}{to_superscript(str(abs(exp)))}"


def format_fixed(value: float, decimals: int) -> str:
    """Fixed-point formatting, e.g. formula weights with 3 decimals."""
    return f"{value:.{decimals}f}"
