"""
Data models of mol_calculator.

Pydantic models for atomic reference data, parsed formulas, amounts,
conversion results and calculation reports.
"""

from .amount import (
    UNIT_ALIASES,
    AmountUnit,
    ConversionResult,
    ConversionStep,
    ParsedAmount,
    UnitFamily,
    aliases_by_family,
    lookup_unit,
)
from .atom_data import AtomEntry, AtomTableFile, AtomTableMetadata
from .formula import FormulaParseResult, ParsedAtom
from .report import CalculationFailure, CalculationReport, FailureKind

__all__ = [
    "UNIT_ALIASES",
    "AmountUnit",
    "ConversionResult",
    "ConversionStep",
    "ParsedAmount",
    "UnitFamily",
    "aliases_by_family",
    "lookup_unit",
    "AtomEntry",
    "AtomTableFile",
    "AtomTableMetadata",
    "FormulaParseResult",
    "ParsedAtom",
    "CalculationFailure",
    "CalculationReport",
    "FailureKind",
]
