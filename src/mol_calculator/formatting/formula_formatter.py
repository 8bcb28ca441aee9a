"""
Formatting of parsed formulas: per-atom breakdown and formula weight.

The weight expression mirrors the arithmetic, e.g. for H₂O:
    2×1.008 + 1×15.999
    = 18.015
"""

from typing import List

from tabulate import tabulate

from ..config import DEFAULT_MASS_DECIMALS
from ..models.formula import ParsedAtom
from ..storage.atom_table import AtomTable
from ..utils.numbers import format_fixed, format_number


class FormulaFormatter:
    """Per-atom display and formula weight expression."""

    headers = ["Symbol", "Name", "Count", "Atomic mass (g/mol)"]

    @classmethod
    def atom_rows(cls, atoms: List[ParsedAtom], atom_table: AtomTable) -> List[List[str]]:
        rows = []
        for atom in atoms:
            entry = atom_table.get(atom.symbol)
            rows.append([
                atom.symbol,
                (entry.local_name or "") if entry else "",
                str(atom.count),
                format_number(entry.atomic_mass) if entry else "-",
            ])
        return rows

    @classmethod
    def format_atom_table(cls, atoms: List[ParsedAtom], atom_table: AtomTable) -> str:
        """Grid table of the parsed atoms in source order."""
        if not atoms:
            return "No atoms"
        return tabulate(
            cls.atom_rows(atoms, atom_table),
            headers=cls.headers,
            tablefmt="grid",
            disable_numparse=True,
        )

    @staticmethod
    def weight_expression(
        atoms: List[ParsedAtom],
        atom_table: AtomTable,
        molecule_count: int = 1,
    ) -> str:
        """
        Arithmetic expression of the formula weight.

        Examples:
            [H×2, O×1]      -> "2×1.008 + 1×15.999"
            same, count 2   -> "2 × (2×1.008 + 1×15.999)"
            []              -> "0"
        """
        if not atoms:
            return "0"
        terms = " + ".join(
            f"{atom.count}×{format_number(atom_table.mass_of(atom.symbol))}"
            for atom in atoms
        )
        if molecule_count > 1:
            return f"{molecule_count} × ({terms})"
        return terms

    @classmethod
    def format_weight(
        cls,
        atoms: List[ParsedAtom],
        atom_table: AtomTable,
        total: float,
        molecule_count: int = 1,
        decimals: int = DEFAULT_MASS_DECIMALS,
    ) -> str:
        """Formula weight block: expression line and total line."""
        expression = cls.weight_expression(atoms, atom_table, molecule_count)
        return f"Formula weight: {expression}\n= {format_fixed(total, decimals)} g/mol"
