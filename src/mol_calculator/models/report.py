"""Models describing the outcome of one calculator action."""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .amount import ConversionResult, ParsedAmount
from .formula import ParsedAtom


class FailureKind(Enum):
    """Kinds of user-input validation failures."""
    UNKNOWN_ELEMENT = "unknown_element"
    UNSUPPORTED_UNIT = "unsupported_unit"
    INVALID_FORMULA = "invalid_formula"


class CalculationFailure(BaseModel):
    """Structured failure value rendered by the caller as a user message."""

    kind: FailureKind
    message: str
    details: Dict[str, Any] = Field(default_factory=dict)


class CalculationReport(BaseModel):
    """
    Everything the display layer needs for one formula/amount input.

    On failure atoms and conversion are always empty, so a stale result is
    never shown together with an error.
    """

    formula: str = ""
    amount_text: str = ""
    atoms: List[ParsedAtom] = Field(default_factory=list)
    molecule_count: int = 1
    formula_weight: float = 0.0
    total_molar_mass: float = 0.0
    atoms_per_molecule: int = 0
    amount: Optional[ParsedAmount] = None
    conversion: Optional[ConversionResult] = None
    error: Optional[CalculationFailure] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def summary(self) -> Dict[str, Any]:
        """Flat summary for logging."""
        return {
            "formula": self.formula,
            "amount": self.amount_text,
            "atoms": len(self.atoms),
            "molar_mass": round(self.total_molar_mass, 6),
            "converted": bool(self.conversion and self.conversion.is_computed),
            "error": self.error.kind.value if self.error else None,
        }
