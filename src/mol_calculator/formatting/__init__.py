"""Text formatting of calculator output."""

from .conversion_formatter import NOT_COMPUTED, QUANTITY_LABELS, ConversionFormatter
from .formula_formatter import FormulaFormatter
from .help_formatter import HelpFormatter
from .report_formatter import ReportFormatter

__all__ = [
    "NOT_COMPUTED",
    "QUANTITY_LABELS",
    "ConversionFormatter",
    "FormulaFormatter",
    "HelpFormatter",
    "ReportFormatter",
]
