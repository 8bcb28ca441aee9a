"""Formatting of parsed amounts and unit conversion results."""

from typing import Dict, List, Optional, Tuple

from tabulate import tabulate

from ..config import DEFAULT_MOLES_DECIMALS
from ..models.amount import ConversionResult, ParsedAmount
from ..utils.numbers import format_fixed, format_number

NOT_COMPUTED = "-"

# quantity -> (label, unit)
QUANTITY_LABELS: Dict[str, Tuple[str, str]] = {
    "moles": ("Amount", "mol"),
    "grams": ("Mass", "g"),
    "liters": ("Gas volume (0 °C, 1 atm)", "L"),
    "particle_count": ("Particles", "atoms"),
}


class ConversionFormatter:
    """Amount echo and four-way conversion breakdown."""

    headers = ["Quantity", "Value", "Unit", "Calculation"]

    @staticmethod
    def format_amount_echo(amount: ParsedAmount) -> str:
        """Show what was understood from the input, e.g. "value: 1 / unit: mol"."""
        value = format_number(amount.value) if amount.value is not None else NOT_COMPUTED
        unit = amount.unit_text or NOT_COMPUTED
        return f"value: {value} / unit: {unit}"

    @staticmethod
    def format_value(
        quantity: str,
        value: Optional[float],
        moles_decimals: int = DEFAULT_MOLES_DECIMALS,
    ) -> str:
        """Single converted value, "-" if it was not computed."""
        if value is None:
            return NOT_COMPUTED
        if quantity == "moles":
            return format_fixed(value, moles_decimals)
        return format_number(value)

    @classmethod
    def conversion_rows(
        cls,
        result: ConversionResult,
        moles_decimals: int = DEFAULT_MOLES_DECIMALS,
    ) -> List[List[str]]:
        rows = []
        for quantity, value in result.to_dict().items():
            label, unit = QUANTITY_LABELS[quantity]
            step = result.step_for(quantity)
            rows.append([
                label,
                cls.format_value(quantity, value, moles_decimals),
                unit,
                step.expression if step else "",
            ])
        return rows

    @classmethod
    def format_conversion_table(
        cls,
        result: ConversionResult,
        moles_decimals: int = DEFAULT_MOLES_DECIMALS,
    ) -> str:
        """Grid table with the value and expression of every quantity."""
        return tabulate(
            cls.conversion_rows(result, moles_decimals),
            headers=cls.headers,
            tablefmt="grid",
            disable_numparse=True,
        )
