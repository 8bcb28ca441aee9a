"""Unit tests for the formula parser and formula weight."""

import pytest

from mol_calculator.config import CountNotation
from mol_calculator.core_logic.formula_parser import (
    FormulaParser,
    formula_weight,
    molar_mass,
    parse_formula,
)
from mol_calculator.errors import InvalidFormulaError, UnknownElementError
from mol_calculator.models.formula import ParsedAtom


def pairs(result):
    return [(atom.symbol, atom.count) for atom in result.atoms]


class TestFormulaParser:
    """Test tokenizing formulas with subscript counts."""

    def test_water(self, small_table):
        """H₂O parses into H×2, O×1."""
        result = parse_formula("H₂O", small_table)
        assert pairs(result) == [("H", 2), ("O", 1)]
        assert result.molecule_count == 1

    def test_multi_digit_subscripts(self, small_table):
        """Multi-digit subscript runs form one count."""
        result = parse_formula("C₆H₁₂O₆", small_table)
        assert pairs(result) == [("C", 6), ("H", 12), ("O", 6)]
        assert result.atoms_per_molecule() == 24

    def test_two_letter_symbol(self, small_table):
        """Uppercase plus lowercase is one symbol."""
        result = parse_formula("NaCl", small_table)
        assert pairs(result) == [("Na", 1), ("Cl", 1)]

    def test_repeated_symbols_not_merged(self, small_table):
        """Repeated symbols stay separate entries in source order."""
        result = parse_formula("CH₃COOH", small_table)
        assert result.symbols() == ["C", "H", "C", "O", "O", "H"]
        assert pairs(result)[1] == ("H", 3)

    def test_empty_formula(self, small_table):
        """Empty input gives an empty result, not an error."""
        result = parse_formula("", small_table)
        assert result.is_empty
        assert result.atoms_per_molecule() == 0

    def test_non_symbol_characters_ignored(self, small_table):
        """Characters outside symbols and counts are skipped."""
        result = parse_formula("H₂ O (l)", small_table)
        assert pairs(result) == [("H", 2), ("O", 1)]

    def test_ascii_digits_skipped_by_default(self, small_table):
        """With subscript notation ASCII digits are not counts."""
        result = parse_formula("H2O", small_table, molecule_coefficient=False)
        assert pairs(result) == [("H", 1), ("O", 1)]

    def test_ascii_digits_with_compat_notation(self, small_table):
        """SUBSCRIPT_OR_ASCII reads ASCII digit counts too."""
        result = parse_formula(
            "C6H12O6", small_table, count_notation=CountNotation.SUBSCRIPT_OR_ASCII
        )
        assert pairs(result) == [("C", 6), ("H", 12), ("O", 6)]

    def test_source_formula_kept(self, small_table):
        result = parse_formula("2H₂O", small_table)
        assert result.formula == "2H₂O"


class TestCaseSensitivity:
    """Symbols are case-sensitive."""

    def test_co_is_cobalt(self, default_table):
        assert pairs(parse_formula("Co", default_table)) == [("Co", 1)]

    def test_capital_co_is_carbon_monoxide(self, default_table):
        assert pairs(parse_formula("CO", default_table)) == [("C", 1), ("O", 1)]

    def test_lowercase_only_yields_nothing(self, small_table):
        """Lowercase letters never start a symbol."""
        assert parse_formula("h₂o", small_table).is_empty


class TestUnknownElements:
    """Test all-or-nothing symbol validation."""

    def test_unknown_symbol_raises(self, small_table):
        with pytest.raises(UnknownElementError) as exc_info:
            parse_formula("Xx₂", small_table)
        assert exc_info.value.symbols == ["Xx"]
        assert "Xx" in str(exc_info.value)

    def test_known_symbols_do_not_mask_unknown(self, small_table):
        """One unknown symbol rejects the whole formula."""
        with pytest.raises(UnknownElementError):
            parse_formula("H₂OZz", small_table)

    def test_unknown_symbols_deduplicated_in_order(self, small_table):
        with pytest.raises(UnknownElementError) as exc_info:
            parse_formula("QzXxQz", small_table)
        assert exc_info.value.symbols == ["Qz", "Xx"]


class TestMoleculeCoefficient:
    """Test the leading molecule coefficient."""

    def test_coefficient_parsed(self, small_table):
        result = parse_formula("2H₂O", small_table)
        assert result.molecule_count == 2
        assert pairs(result) == [("H", 2), ("O", 1)]

    def test_zero_coefficient_rejected(self, small_table):
        with pytest.raises(InvalidFormulaError):
            parse_formula("0H₂O", small_table)

    def test_coefficient_disabled(self, small_table):
        """Without the option a leading number is ignored."""
        parser = FormulaParser(small_table, molecule_coefficient=False)
        result = parser.parse("2H₂O")
        assert result.molecule_count == 1
        assert pairs(result) == [("H", 2), ("O", 1)]

    def test_coefficient_with_compat_notation(self, small_table):
        result = parse_formula(
            "3H2O", small_table, count_notation=CountNotation.SUBSCRIPT_OR_ASCII
        )
        assert result.molecule_count == 3
        assert pairs(result) == [("H", 2), ("O", 1)]


class TestZeroCount:
    """A zero repeat count is rejected."""

    def test_zero_subscript(self, small_table):
        with pytest.raises(InvalidFormulaError):
            parse_formula("H₀O", small_table)

    def test_zero_ascii(self, small_table):
        with pytest.raises(InvalidFormulaError):
            parse_formula("H0O", small_table, count_notation=CountNotation.SUBSCRIPT_OR_ASCII)


class TestFormulaWeight:
    """Test formula weight and molar mass sums."""

    def test_water_weight(self, small_table):
        result = parse_formula("H₂O", small_table)
        assert formula_weight(result.atoms, small_table) == pytest.approx(18.015)

    def test_empty_weight_is_zero(self, small_table):
        assert formula_weight([], small_table) == 0.0

    def test_weight_is_order_independent(self, small_table):
        a = formula_weight(parse_formula("NaCl", small_table).atoms, small_table)
        b = formula_weight(parse_formula("ClNa", small_table).atoms, small_table)
        assert a == pytest.approx(b)

    def test_repeated_entries_summed(self, small_table):
        atoms = [ParsedAtom(symbol="C", count=1), ParsedAtom(symbol="C", count=1)]
        assert formula_weight(atoms, small_table) == pytest.approx(24.022)

    def test_molar_mass_includes_coefficient(self, small_table):
        result = parse_formula("2H₂O", small_table)
        assert molar_mass(result, small_table) == pytest.approx(36.03)

    def test_molar_mass_override(self, small_table):
        result = parse_formula("H₂O", small_table)
        assert molar_mass(result, small_table, molecule_count=3) == pytest.approx(54.045)

    def test_glucose_default_table(self, default_table):
        result = parse_formula("C₆H₁₂O₆", default_table)
        assert formula_weight(result.atoms, default_table) == pytest.approx(180.156)


class TestParsedTotals:
    """Totals computed from parsed formulas."""

    def test_repeated_carbon_parsed(self, small_table):
        """CC keeps two entries and weighs twice one carbon."""
        result = parse_formula("CC", small_table)
        assert pairs(result) == [("C", 1), ("C", 1)]
        assert formula_weight(result.atoms, small_table) == pytest.approx(2 * small_table.mass_of("C"))

    def test_unknown_symbol_with_ascii_digit(self, small_table):
        with pytest.raises(UnknownElementError) as exc_info:
            parse_formula("Xx2", small_table)
        assert exc_info.value.symbols == ["Xx"]


class TestNonAsciiDigits:
    """Only subscript glyphs and ASCII 0-9 are counts."""

    def test_arabic_indic_digit_not_a_count(self, small_table):
        result = parse_formula(
            "H٢O", small_table, count_notation=CountNotation.SUBSCRIPT_OR_ASCII
        )
        assert pairs(result) == [("H", 1), ("O", 1)]

    def test_fullwidth_digit_not_a_count(self, small_table):
        result = parse_formula(
            "H２", small_table, count_notation=CountNotation.SUBSCRIPT_OR_ASCII
        )
        assert pairs(result) == [("H", 1)]
