"""Pydantic models for parsed chemical formulas."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class ParsedAtom(BaseModel):
    """One element token of a formula with its repeat count."""

    model_config = ConfigDict(frozen=True)

    symbol: str = Field(..., description="Element symbol")
    count: int = Field(1, ge=1, description="Repeat count")


class FormulaParseResult(BaseModel):
    """
    Result of parsing a formula string.

    Atoms keep the left-to-right order of the source text. Repeated symbols
    are separate entries, so totals must sum over every entry.
    """

    formula: str = Field(..., description="Source formula text")
    atoms: List[ParsedAtom] = Field(default_factory=list, description="Parsed atoms in order")
    molecule_count: int = Field(1, ge=1, description="Leading molecule coefficient, e.g. 2 in 2H₂O")

    @property
    def is_empty(self) -> bool:
        return not self.atoms

    def atoms_per_molecule(self) -> int:
        """Total number of atoms in one formula unit."""
        return sum(atom.count for atom in self.atoms)

    def symbols(self) -> List[str]:
        return [atom.symbol for atom in self.atoms]
