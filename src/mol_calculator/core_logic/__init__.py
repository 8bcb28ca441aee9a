"""
Core logic: formula parsing, amount parsing and unit conversion.

Deterministic, side-effect free components composed by MolCalculator.
"""

from .amount_parser import AMOUNT_RE, parse_amount
from .formula_parser import (
    FormulaParser,
    formula_weight,
    molar_mass,
    parse_formula,
)
from .unit_converter import UnitConverter, convert_amount

__all__ = [
    "AMOUNT_RE",
    "parse_amount",
    "FormulaParser",
    "formula_weight",
    "molar_mass",
    "parse_formula",
    "UnitConverter",
    "convert_amount",
]
