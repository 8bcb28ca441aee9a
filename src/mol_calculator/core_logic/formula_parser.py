"""
Chemical formula parser.

Tokenizes a formula string into (element symbol, count) pairs. Counts are
written as subscript glyphs (H₂O). Plain ASCII digits after a symbol are
skipped unless the SUBSCRIPT_OR_ASCII notation is enabled, so with the
default notation "H2O" parses as H×1 + O×1.

Examples (default notation):
    - "H₂O"  -> [H×2, O×1]
    - "CC"   -> [C×1, C×1]  (repeats are never merged)
    - "2H₂O" -> molecule_count=2, [H×2, O×1]
    - ""     -> []
"""

import logging
import re
from typing import List, Optional

from ..config import DEFAULT_COUNT_NOTATION, CountNotation
from ..errors import InvalidFormulaError, UnknownElementError
from ..models.formula import FormulaParseResult, ParsedAtom
from ..storage.atom_table import AtomTable
from ..utils.subscripts import subscript_to_number

logger = logging.getLogger(__name__)

SYMBOL_RE = re.compile(r"[A-Z][a-z]?")
SUBSCRIPT_TOKEN_RE = re.compile(r"([A-Z][a-z]?)([₀-₉]*)")
SUBSCRIPT_OR_ASCII_TOKEN_RE = re.compile(r"([A-Z][a-z]?)([₀-₉]+|[0-9]*)")
LEADING_COEFFICIENT_RE = re.compile(r"^\s*(\d+)")


class FormulaParser:
    """
    Parser bound to one atom table.

    The table is only read, so one parser can serve any number of callers.
    """

    def __init__(
        self,
        atom_table: AtomTable,
        count_notation: CountNotation = DEFAULT_COUNT_NOTATION,
        molecule_coefficient: bool = True,
    ):
        """
        Args:
            atom_table: Reference table used to validate symbols
            count_notation: Which digit glyphs count as repeat counts
            molecule_coefficient: Read a leading ASCII number as molecule_count
        """
        self.atom_table = atom_table
        self.count_notation = count_notation
        self.molecule_coefficient = molecule_coefficient
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

        if count_notation is CountNotation.SUBSCRIPT_OR_ASCII:
            self._token_re = SUBSCRIPT_OR_ASCII_TOKEN_RE
        else:
            self._token_re = SUBSCRIPT_TOKEN_RE

    def parse(self, formula: str) -> FormulaParseResult:
        """
        Parse a formula string.

        Args:
            formula: Formula text, e.g. "H₂O"

        Returns:
            FormulaParseResult with atoms in source order

        Raises:
            UnknownElementError: If any matched symbol is not in the atom table
            InvalidFormulaError: If a coefficient or count is zero
        """
        text = formula or ""
        molecule_count = 1

        if self.molecule_coefficient:
            text, molecule_count = self._split_coefficient(text)

        # All-or-nothing: validate every symbol before building atoms
        missing = self.atom_table.missing(SYMBOL_RE.findall(text))
        if missing:
            self.logger.warning(f"Unknown element symbols in {formula!r}: {missing}")
            raise UnknownElementError(missing)

        atoms = []
        for match in self._token_re.finditer(text):
            symbol, count_text = match.group(1), match.group(2)
            count = self._decode_count(count_text)
            if count == 0:
                raise InvalidFormulaError(f"Zero count for element {symbol} in {formula!r}")
            atoms.append(ParsedAtom(symbol=symbol, count=count))

        self.logger.debug(
            f"Parsed {formula!r}: "
            f"{[(a.symbol, a.count) for a in atoms]} x{molecule_count}"
        )
        return FormulaParseResult(formula=formula or "", atoms=atoms, molecule_count=molecule_count)

    def _split_coefficient(self, text: str):
        """Strip a leading ASCII number and return (rest, coefficient)."""
        match = LEADING_COEFFICIENT_RE.match(text)
        if not match:
            return text, 1

        coefficient = int(match.group(1))
        if coefficient == 0:
            raise InvalidFormulaError(f"Molecule coefficient must be at least 1: {text!r}")
        return text[match.end():], coefficient

    @staticmethod
    def _decode_count(count_text: str) -> int:
        if not count_text:
            return 1
        if count_text.isascii():
            return int(count_text)
        return subscript_to_number(count_text)


def parse_formula(
    formula: str,
    atom_table: AtomTable,
    count_notation: CountNotation = DEFAULT_COUNT_NOTATION,
    molecule_coefficient: bool = True,
) -> FormulaParseResult:
    """Parse a formula with a one-off FormulaParser."""
    parser = FormulaParser(
        atom_table,
        count_notation=count_notation,
        molecule_coefficient=molecule_coefficient,
    )
    return parser.parse(formula)


def formula_weight(atoms: List[ParsedAtom], atom_table: AtomTable) -> float:
    """
    Sum of count × atomic mass over every atom entry.

    Returns 0.0 for an empty atom list.
    """
    return sum(atom.count * atom_table.mass_of(atom.symbol) for atom in atoms)


def molar_mass(
    result: FormulaParseResult,
    atom_table: AtomTable,
    molecule_count: Optional[int] = None,
) -> float:
    """
    Total molar mass of a parsed formula, including the molecule coefficient.

    Args:
        result: Parsed formula
        atom_table: Reference table
        molecule_count: Override for result.molecule_count
    """
    multiplier = result.molecule_count if molecule_count is None else molecule_count
    return multiplier * formula_weight(result.atoms, atom_table)
