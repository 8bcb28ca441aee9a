"""
mol_calculator: molar mass and amount conversion for chemical formulas.

Parses formulas such as H₂O against an atomic reference table, computes the
formula weight and converts an amount between moles, grams, gas volume at
0 °C / 1 atm and particle count.
"""

import logging

from .calculator import MolCalculator
from .config import CalculatorSettings, CountNotation
from .core_logic import FormulaParser, UnitConverter, convert_amount, parse_amount, parse_formula
from .errors import (
    AtomTableError,
    InvalidFormulaError,
    MolCalculatorError,
    UnknownElementError,
    UnsupportedUnitError,
)
from .models import CalculationReport, ConversionResult, FormulaParseResult, ParsedAmount
from .storage import AtomTable, get_default_atom_table, load_atom_table

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "MolCalculator",
    "CalculatorSettings",
    "CountNotation",
    "FormulaParser",
    "UnitConverter",
    "convert_amount",
    "parse_amount",
    "parse_formula",
    "AtomTableError",
    "InvalidFormulaError",
    "MolCalculatorError",
    "UnknownElementError",
    "UnsupportedUnitError",
    "CalculationReport",
    "ConversionResult",
    "FormulaParseResult",
    "ParsedAmount",
    "AtomTable",
    "get_default_atom_table",
    "load_atom_table",
]
