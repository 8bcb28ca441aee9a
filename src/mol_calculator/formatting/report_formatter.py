"""Full console rendering of one CalculationReport."""

from typing import List

from ..config import DEFAULT_MASS_DECIMALS, DEFAULT_MOLES_DECIMALS
from ..models.report import CalculationReport
from ..storage.atom_table import AtomTable
from .conversion_formatter import ConversionFormatter
from .formula_formatter import FormulaFormatter


class ReportFormatter:
    """
    Renders a report as the sections shown to the user:
    atoms, formula weight, amount echo, conversion table.

    A failed report renders only its error message.
    """

    def __init__(
        self,
        atom_table: AtomTable,
        mass_decimals: int = DEFAULT_MASS_DECIMALS,
        moles_decimals: int = DEFAULT_MOLES_DECIMALS,
    ):
        self.atom_table = atom_table
        self.mass_decimals = mass_decimals
        self.moles_decimals = moles_decimals

    def format(self, report: CalculationReport) -> str:
        if report.error is not None:
            return f"Error: {report.error.message}"

        sections: List[str] = [
            FormulaFormatter.format_atom_table(report.atoms, self.atom_table),
            FormulaFormatter.format_weight(
                report.atoms,
                self.atom_table,
                report.total_molar_mass,
                molecule_count=report.molecule_count,
                decimals=self.mass_decimals,
            ),
        ]

        if report.amount is not None and report.amount_text.strip():
            sections.append(ConversionFormatter.format_amount_echo(report.amount))
            if report.conversion is not None:
                sections.append(
                    ConversionFormatter.format_conversion_table(report.conversion, self.moles_decimals)
                )

        return "\n\n".join(sections)
