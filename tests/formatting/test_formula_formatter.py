"""Tests for formula and formula weight formatting."""

from mol_calculator.formatting import FormulaFormatter
from mol_calculator.models.formula import ParsedAtom

WATER = [ParsedAtom(symbol="H", count=2), ParsedAtom(symbol="O", count=1)]


class TestWeightExpression:
    """Tests for the formula weight expression."""

    def test_water(self, small_table):
        assert FormulaFormatter.weight_expression(WATER, small_table) == "2×1.008 + 1×15.999"

    def test_molecule_coefficient(self, small_table):
        expression = FormulaFormatter.weight_expression(WATER, small_table, molecule_count=2)
        assert expression == "2 × (2×1.008 + 1×15.999)"

    def test_empty(self, small_table):
        assert FormulaFormatter.weight_expression([], small_table) == "0"

    def test_format_weight(self, small_table):
        text = FormulaFormatter.format_weight(WATER, small_table, 18.015)
        assert text == "Formula weight: 2×1.008 + 1×15.999\n= 18.015 g/mol"

    def test_format_weight_decimals(self, small_table):
        text = FormulaFormatter.format_weight(WATER, small_table, 18.015, decimals=1)
        assert text.endswith("= 18.0 g/mol")


class TestAtomDisplay:
    """Tests for per-atom output."""

    def test_rows_keep_order(self, default_table):
        rows = FormulaFormatter.atom_rows(WATER, default_table)
        assert rows == [
            ["H", "수소", "2", "1.008"],
            ["O", "산소", "1", "15.999"],
        ]

    def test_table(self, small_table):
        table = FormulaFormatter.format_atom_table(WATER, small_table)
        assert "Symbol" in table
        assert "15.999" in table
        assert table.startswith("+")

    def test_empty_table(self, small_table):
        assert FormulaFormatter.format_atom_table([], small_table) == "No atoms"
