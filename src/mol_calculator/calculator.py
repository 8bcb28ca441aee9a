"""
MolCalculator: the formula -> molar mass -> conversion pipeline for one
user action.

Validation failures from the core (unknown elements, unsupported units,
malformed formulas) are returned as a CalculationFailure inside the report
instead of propagating, and the report then carries no atoms or
conversion.
"""

import logging
from typing import Optional

from .config import (
    DEFAULT_COUNT_NOTATION,
    CalculatorSettings,
    CountNotation,
    get_atom_table_path,
)
from .core_logic.amount_parser import parse_amount
from .core_logic.formula_parser import FormulaParser, formula_weight
from .core_logic.unit_converter import UnitConverter
from .errors import InvalidFormulaError, UnknownElementError, UnsupportedUnitError
from .models.amount import ParsedAmount
from .models.report import CalculationFailure, CalculationReport, FailureKind
from .storage.atom_table import AtomTable, get_default_atom_table, load_atom_table

logger = logging.getLogger(__name__)


class MolCalculator:
    """
    Composes FormulaParser, AmountParser and UnitConverter.

    The atom table is injected once and shared read-only, so a single
    instance can serve independent requests.
    """

    def __init__(
        self,
        atom_table: Optional[AtomTable] = None,
        count_notation: CountNotation = DEFAULT_COUNT_NOTATION,
        molecule_coefficient: bool = True,
        converter: Optional[UnitConverter] = None,
    ):
        """
        Args:
            atom_table: Reference table. Default: bundled table
            count_notation: Count notation for the parser
            molecule_coefficient: Accept a leading molecule coefficient
            converter: Unit converter. Default: standard constants
        """
        self.atom_table = atom_table if atom_table is not None else get_default_atom_table()
        self.parser = FormulaParser(
            self.atom_table,
            count_notation=count_notation,
            molecule_coefficient=molecule_coefficient,
        )
        self.converter = converter or UnitConverter()
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @classmethod
    def from_settings(cls, settings: CalculatorSettings) -> "MolCalculator":
        """Build a calculator from runtime settings."""
        path = get_atom_table_path(settings.atom_table_path)
        if path is not None:
            atom_table = load_atom_table(path)
        else:
            atom_table = get_default_atom_table()
        return cls(
            atom_table=atom_table,
            count_notation=settings.count_notation,
            molecule_coefficient=settings.molecule_coefficient,
        )

    def calculate(self, formula: str, amount_text: str = "") -> CalculationReport:
        """
        Run the whole pipeline for one formula/amount input.

        Args:
            formula: Formula text, e.g. "H₂O"
            amount_text: Amount text, e.g. "18 g". Empty for weight only

        Returns:
            CalculationReport; report.error is set on validation failure
        """
        amount = parse_amount(amount_text)

        # Unit is checked before the formula
        if amount.is_unsupported:
            error = UnsupportedUnitError(amount.unit_text)
            return self._failure(formula, amount_text, amount, FailureKind.UNSUPPORTED_UNIT, error, {"unit": error.unit})

        try:
            parsed = self.parser.parse(formula)
        except UnknownElementError as e:
            return self._failure(formula, amount_text, amount, FailureKind.UNKNOWN_ELEMENT, e, {"symbols": e.symbols})
        except InvalidFormulaError as e:
            return self._failure(formula, amount_text, amount, FailureKind.INVALID_FORMULA, e, {})

        weight = formula_weight(parsed.atoms, self.atom_table)
        total_molar_mass = parsed.molecule_count * weight
        atoms_per_molecule = parsed.atoms_per_molecule()

        conversion = self.converter.convert(total_molar_mass, atoms_per_molecule, amount)

        report = CalculationReport(
            formula=parsed.formula,
            amount_text=amount_text or "",
            atoms=parsed.atoms,
            molecule_count=parsed.molecule_count,
            formula_weight=weight,
            total_molar_mass=total_molar_mass,
            atoms_per_molecule=atoms_per_molecule,
            amount=amount,
            conversion=conversion,
        )
        self.logger.debug(f"Calculation complete: {report.summary()}")
        return report

    def _failure(
        self,
        formula: str,
        amount_text: str,
        amount: ParsedAmount,
        kind: FailureKind,
        error: Exception,
        details: dict,
    ) -> CalculationReport:
        self.logger.info(f"Rejected input {formula!r} / {amount_text!r}: {error}")
        return CalculationReport(
            formula=formula or "",
            amount_text=amount_text or "",
            amount=amount,
            error=CalculationFailure(kind=kind, message=str(error), details=details),
        )
