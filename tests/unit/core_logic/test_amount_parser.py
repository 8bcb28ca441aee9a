"""Unit tests for free-text amount parsing."""

import pytest

from mol_calculator.core_logic.amount_parser import parse_amount
from mol_calculator.models.amount import AmountUnit


class TestParseAmount:
    """Test splitting "value + unit" strings."""

    @pytest.mark.parametrize(
        "text, value, unit",
        [
            ("1 mol", 1.0, AmountUnit.MOLE),
            ("2.5kg", 2.5, AmountUnit.KILOGRAM),
            ("  10 g  ", 10.0, AmountUnit.GRAM),
            ("3몰", 3.0, AmountUnit.MOLE),
            ("0.5 mole", 0.5, AmountUnit.MOLE),
            ("500 mL", 500.0, AmountUnit.MILLILITER),
            ("22.4 L", 22.4, AmountUnit.LITER),
            ("100 NA", 100.0, AmountUnit.PARTICLE_COUNT),
        ],
    )
    def test_supported_units(self, text, value, unit):
        amount = parse_amount(text)
        assert amount.value == value
        assert amount.unit is unit
        assert not amount.is_unsupported

    def test_unit_text_trimmed(self):
        amount = parse_amount("1   mol  ")
        assert amount.unit_text == "mol"

    def test_number_without_unit(self):
        """A bare number has a value but nothing to convert from."""
        amount = parse_amount("5")
        assert amount.value == 5.0
        assert amount.unit is None
        assert amount.unit_text == ""
        assert not amount.is_unsupported

    @pytest.mark.parametrize("text", ["", "   ", "abc", "mol", "-1 mol", ".5 mol"])
    def test_no_leading_number(self, text):
        """Without a leading non-negative number the result is empty."""
        amount = parse_amount(text)
        assert amount.value is None
        assert amount.unit is None
        assert amount.unit_text == ""

    def test_none_input(self):
        assert parse_amount(None).value is None

    @pytest.mark.parametrize("unit_text", ["mol/L", "ML", "Kg", "grams", "l"])
    def test_unknown_unit_kept(self, unit_text):
        """Unknown labels are kept raw and flagged, not rejected here."""
        amount = parse_amount(f"1 {unit_text}")
        assert amount.value == 1.0
        assert amount.unit is None
        assert amount.unit_text == unit_text
        assert amount.is_unsupported
