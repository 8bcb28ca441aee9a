"""Help text: usage, supported elements and supported units."""

from typing import Dict, List

from ..models.amount import UnitFamily, aliases_by_family
from ..storage.atom_table import AtomTable

FAMILY_LABELS: Dict[UnitFamily, str] = {
    UnitFamily.AMOUNT: "Amount",
    UnitFamily.MASS: "Mass",
    UnitFamily.VOLUME: "Volume",
    UnitFamily.PARTICLES: "Particles",
}

USAGE_TEXT = """Usage
  1. Enter a formula (e.g. H₂O) to get its formula weight.
     Counts are written as subscripts; ":sub" turns the last digit of the
     formula into a subscript, ":suball" turns every digit into one.
  2. Enter an amount with a unit (e.g. "1 mol" or "10 g") to convert it
     into the other units. Leave it empty for the formula weight only.

Commands: :help  :elements  :units  :sub  :suball  :quit"""


class HelpFormatter:
    """Static help content built from the atom table and unit allow-list."""

    @staticmethod
    def format_usage() -> str:
        return USAGE_TEXT

    @staticmethod
    def element_lines(atom_table: AtomTable) -> List[str]:
        """One line per element, e.g. "Na (Na, 나트륨)"."""
        lines = []
        for symbol, entry in atom_table.items():
            name = f", {entry.local_name}" if entry.local_name else ""
            lines.append(f"{symbol} ({entry.symbol}{name})")
        return lines

    @classmethod
    def format_elements(cls, atom_table: AtomTable) -> str:
        return "Supported elements\n" + "\n".join(
            f"  {line}" for line in cls.element_lines(atom_table)
        )

    @staticmethod
    def unit_lines() -> List[str]:
        """One line per unit family, e.g. "Mass: g, kg"."""
        return [
            f"{FAMILY_LABELS[family]}: {', '.join(tokens)}"
            for family, tokens in aliases_by_family().items()
        ]

    @classmethod
    def format_units(cls) -> str:
        return "Supported units\n" + "\n".join(f"  {line}" for line in cls.unit_lines())
