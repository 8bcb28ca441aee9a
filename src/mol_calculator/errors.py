"""
Exceptions raised by the formula parser, the amount converter and the atom
table loader.

User-input errors (unknown elements, unsupported units, malformed formulas)
are caught by MolCalculator and turned into a CalculationFailure value.
AtomTableError is a startup failure and is left to propagate.
"""

from typing import Iterable, List


class MolCalculatorError(Exception):
    """Base class for all mol_calculator errors."""


class UnknownElementError(MolCalculatorError):
    """One or more matched symbols are absent from the atom table."""

    def __init__(self, symbols: Iterable[str]):
        self.symbols: List[str] = list(symbols)
        super().__init__(
            f"Unsupported element symbol(s): {', '.join(self.symbols)}"
        )


class UnsupportedUnitError(MolCalculatorError):
    """Unit text is present but not in the allow-list."""

    def __init__(self, unit: str):
        self.unit = unit
        super().__init__(f"Unsupported unit: {unit}")


class InvalidFormulaError(MolCalculatorError):
    """Formula text cannot be accepted (e.g. a zero molecule coefficient)."""


class AtomTableError(MolCalculatorError):
    """Atomic reference data could not be loaded or failed validation."""
