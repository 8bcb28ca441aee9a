"""Tests for amount echo and conversion table formatting."""

from mol_calculator.core_logic.amount_parser import parse_amount
from mol_calculator.core_logic.unit_converter import convert_amount
from mol_calculator.formatting import ConversionFormatter, HelpFormatter, ReportFormatter
from mol_calculator.models.amount import ConversionResult, ParsedAmount


class TestAmountEcho:
    """Tests for the "value / unit" echo line."""

    def test_parsed_amount(self):
        assert ConversionFormatter.format_amount_echo(parse_amount("1 mol")) == "value: 1 / unit: mol"

    def test_unknown_unit_echoed_raw(self):
        echo = ConversionFormatter.format_amount_echo(parse_amount("2.5 mol/L"))
        assert echo == "value: 2.5 / unit: mol/L"

    def test_empty_amount(self):
        assert ConversionFormatter.format_amount_echo(ParsedAmount()) == "value: - / unit: -"


class TestConversionTable:
    """Tests for the conversion breakdown."""

    def test_format_value(self):
        assert ConversionFormatter.format_value("moles", 1.0) == "1.0000"
        assert ConversionFormatter.format_value("moles", 0.5, moles_decimals=2) == "0.50"
        assert ConversionFormatter.format_value("grams", 18.015) == "18.015"
        assert ConversionFormatter.format_value("particle_count", 1.806e24) == "1.806×10²⁴"
        assert ConversionFormatter.format_value("liters", None) == "-"

    def test_rows_for_computed_result(self):
        result = convert_amount(18.015, 3, parse_amount("1 mol"))
        rows = ConversionFormatter.conversion_rows(result)
        assert [row[0] for row in rows] == ["Amount", "Mass", "Gas volume (0 °C, 1 atm)", "Particles"]
        assert rows[0] == ["Amount", "1.0000", "mol", ""]
        assert rows[1][3] == "1 mol × 18.015 g/mol"

    def test_rows_not_computed(self):
        rows = ConversionFormatter.conversion_rows(ConversionResult.not_computed())
        assert all(row[1] == "-" for row in rows)

    def test_table(self):
        result = convert_amount(18.015, 3, parse_amount("18.015 g"))
        table = ConversionFormatter.format_conversion_table(result)
        assert "Calculation" in table
        assert "18.015 g ÷ 18.015 g/mol" in table


class TestHelpFormatter:
    """Tests for help output."""

    def test_element_lines(self, default_table):
        lines = HelpFormatter.element_lines(default_table)
        assert len(lines) == 118
        assert lines[0] == "H (H, 수소)"
        assert "Na (Na, 나트륨)" in lines

    def test_element_line_without_local_name(self, small_table):
        assert HelpFormatter.element_lines(small_table)[0] == "H (H)"

    def test_unit_lines(self):
        assert HelpFormatter.unit_lines() == [
            "Amount: mol, mole, 몰",
            "Mass: g, kg",
            "Volume: L, mL",
            "Particles: NA",
        ]

    def test_usage_mentions_commands(self):
        assert ":sub" in HelpFormatter.format_usage()


class TestReportFormatter:
    """Tests for the full rendered report."""

    def test_success(self, calculator, small_table):
        output = ReportFormatter(small_table).format(calculator.calculate("H₂O", "1 mol"))
        assert "= 18.015 g/mol" in output
        assert "value: 1 / unit: mol" in output
        assert "22.4" in output

    def test_formula_only(self, calculator, small_table):
        output = ReportFormatter(small_table).format(calculator.calculate("H₂O"))
        assert "= 18.015 g/mol" in output
        assert "value:" not in output

    def test_echo_for_amount_without_number(self, calculator, small_table):
        """A non-empty amount field is echoed even when nothing was parsed."""
        output = ReportFormatter(small_table).format(calculator.calculate("H₂O", "abc"))
        assert "value: - / unit: -" in output

    def test_no_echo_for_blank_amount(self, calculator, small_table):
        output = ReportFormatter(small_table).format(calculator.calculate("H₂O", "   "))
        assert "value:" not in output

    def test_error_only(self, calculator, small_table):
        output = ReportFormatter(small_table).format(calculator.calculate("H₂O", "1 mol/L"))
        assert output == "Error: Unsupported unit: mol/L"

    def test_empty_formula_placeholders(self, calculator, small_table):
        output = ReportFormatter(small_table).format(calculator.calculate("", "1 mol"))
        assert "No atoms" in output
        assert "= 0.000 g/mol" in output
        assert "value: 1 / unit: mol" in output
