"""
Pydantic models and enums for amounts and unit conversion.

AmountUnit is a closed enumeration. UNIT_ALIASES is the single allow-list of
unit tokens accepted in user input; an unrecognized token is represented by
unit=None together with the raw unit_text.
"""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class UnitFamily(Enum):
    """Physical quantity an amount unit measures."""
    AMOUNT = "amount"
    MASS = "mass"
    VOLUME = "volume"
    PARTICLES = "particles"


class AmountUnit(Enum):
    """Supported amount units. Values are the canonical display tokens."""
    MOLE = "mol"
    GRAM = "g"
    KILOGRAM = "kg"
    LITER = "L"
    MILLILITER = "mL"
    PARTICLE_COUNT = "NA"

    @property
    def family(self) -> UnitFamily:
        return UNIT_FAMILIES[self]


UNIT_FAMILIES: Dict[AmountUnit, UnitFamily] = {
    AmountUnit.MOLE: UnitFamily.AMOUNT,
    AmountUnit.GRAM: UnitFamily.MASS,
    AmountUnit.KILOGRAM: UnitFamily.MASS,
    AmountUnit.LITER: UnitFamily.VOLUME,
    AmountUnit.MILLILITER: UnitFamily.VOLUME,
    AmountUnit.PARTICLE_COUNT: UnitFamily.PARTICLES,
}

# Exact-match allow-list (after trimming). Case-sensitive: "ML" or "Kg" are rejected.
UNIT_ALIASES: Dict[str, AmountUnit] = {
    "mol": AmountUnit.MOLE,
    "mole": AmountUnit.MOLE,
    "몰": AmountUnit.MOLE,
    "g": AmountUnit.GRAM,
    "kg": AmountUnit.KILOGRAM,
    "L": AmountUnit.LITER,
    "mL": AmountUnit.MILLILITER,
    "NA": AmountUnit.PARTICLE_COUNT,
}


def lookup_unit(unit_text: str) -> Optional[AmountUnit]:
    """Resolve a unit token through the allow-list, None if not allowed."""
    return UNIT_ALIASES.get(unit_text.strip())


def aliases_by_family() -> Dict[UnitFamily, List[str]]:
    """Allow-listed tokens grouped by unit family, in declaration order."""
    grouped: Dict[UnitFamily, List[str]] = {family: [] for family in UnitFamily}
    for token, unit in UNIT_ALIASES.items():
        grouped[unit.family].append(token)
    return grouped


class ParsedAmount(BaseModel):
    """Amount parsed from a free-text "value + unit" string."""

    model_config = ConfigDict(frozen=True)

    value: Optional[float] = Field(None, ge=0, description="Numeric amount, None if absent")
    unit: Optional[AmountUnit] = Field(None, description="Recognized unit, None if absent or not allowed")
    unit_text: str = Field("", description="Raw unit label after trimming")

    @property
    def has_unit_text(self) -> bool:
        return bool(self.unit_text)

    @property
    def is_unsupported(self) -> bool:
        """Unit text is present but not in the allow-list."""
        return self.has_unit_text and self.unit is None


class ConversionStep(BaseModel):
    """Arithmetic expression behind one converted quantity."""

    model_config = ConfigDict(frozen=True)

    quantity: str = Field(..., description="moles | grams | liters | particle_count")
    expression: str = Field(..., description="Literal expression, e.g. '18 g ÷ 18.015 g/mol'")
    value: float = Field(..., description="Result of the expression")


class ConversionResult(BaseModel):
    """
    Four equivalent representations of one amount.

    A field set to None was not computed, which is distinct from 0.0.
    """

    moles: Optional[float] = None
    grams: Optional[float] = None
    liters: Optional[float] = None
    particle_count: Optional[float] = None
    steps: List[ConversionStep] = Field(default_factory=list)

    @classmethod
    def not_computed(cls) -> "ConversionResult":
        return cls()

    @property
    def is_computed(self) -> bool:
        return any(
            value is not None
            for value in (self.moles, self.grams, self.liters, self.particle_count)
        )

    def step_for(self, quantity: str) -> Optional[ConversionStep]:
        for step in self.steps:
            if step.quantity == quantity:
                return step
        return None

    def to_dict(self) -> dict:
        """Plain values for logging and tables."""
        return {
            "moles": self.moles,
            "grams": self.grams,
            "liters": self.liters,
            "particle_count": self.particle_count,
        }
