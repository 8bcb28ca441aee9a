"""
Pydantic models for the atomic reference data.

The reference table is a YAML file keyed by element symbol. Each entry is
validated into an immutable AtomEntry when the table is loaded.
"""

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

ELEMENT_SYMBOL_PATTERN = r"^[A-Z][a-z]?$"


class AtomEntry(BaseModel):
    """Single element record."""

    model_config = ConfigDict(frozen=True)

    symbol: str = Field(..., pattern=ELEMENT_SYMBOL_PATTERN, description="Canonical element code, e.g. Na")
    local_name: Optional[str] = Field(None, description="Display name in the local language")
    atomic_mass: float = Field(..., gt=0, description="Atomic mass, g/mol")


class AtomTableMetadata(BaseModel):
    """Metadata block of the reference file."""

    source: str = Field(..., description="Where the masses come from")
    version: str = Field(..., description="Data version")
    notes: Optional[str] = Field(None, description="Additional notes")


class AtomTableFile(BaseModel):
    """Complete structure of the YAML reference file."""

    metadata: AtomTableMetadata = Field(..., description="File metadata")
    atoms: Dict[str, AtomEntry] = Field(..., description="Element records keyed by symbol")

    @field_validator("atoms")
    @classmethod
    def validate_not_empty(cls, v):
        """An empty table cannot resolve any formula."""
        if not v:
            raise ValueError("Atom table must contain at least one element")
        return v

    @model_validator(mode="after")
    def validate_keys_match_symbols(self):
        """Every mapping key must equal the symbol of its entry."""
        mismatched = [key for key, entry in self.atoms.items() if key != entry.symbol]
        if mismatched:
            raise ValueError(
                f"Keys do not match entry symbols: {', '.join(mismatched)}"
            )
        return self

    def to_dict(self) -> dict:
        """Serialize a summary for logging."""
        return {
            "source": self.metadata.source,
            "version": self.metadata.version,
            "elements_count": len(self.atoms),
        }
