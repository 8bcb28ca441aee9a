"""
Atomic reference table loaded from YAML.

The table is read once at startup, validated through pydantic and then
shared read-only by the formula parser and the molar mass lookup.
"""

import logging
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Optional, Union

import yaml
from pydantic import ValidationError

from ..errors import AtomTableError
from ..models.atom_data import AtomEntry, AtomTableFile, AtomTableMetadata

logger = logging.getLogger(__name__)

DEFAULT_ATOM_TABLE_PATH = Path(__file__).parent.parent / "data" / "atoms.yaml"


class AtomTable(Mapping):
    """
    Read-only mapping of element symbol -> AtomEntry.

    Symbols are case-sensitive ("Co" is cobalt, "CO" is two tokens).
    """

    def __init__(
        self,
        entries: Iterable[AtomEntry],
        metadata: Optional[AtomTableMetadata] = None,
    ):
        table: Dict[str, AtomEntry] = {}
        duplicates: List[str] = []
        for entry in entries:
            if entry.symbol in table:
                duplicates.append(entry.symbol)
            table[entry.symbol] = entry
        if duplicates:
            raise AtomTableError(f"Duplicate element symbols: {', '.join(duplicates)}")

        self._entries = MappingProxyType(table)
        self.metadata = metadata

    @classmethod
    def from_masses(cls, masses: Dict[str, float]) -> "AtomTable":
        """Build a table from a plain symbol -> mass mapping."""
        try:
            return cls(
                AtomEntry(symbol=symbol, atomic_mass=mass)
                for symbol, mass in masses.items()
            )
        except ValidationError as e:
            raise AtomTableError(f"Invalid atom data: {e}") from e

    def __getitem__(self, symbol: str) -> AtomEntry:
        return self._entries[symbol]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"AtomTable({len(self)} elements)"

    def mass_of(self, symbol: str) -> float:
        """
        Atomic mass of an element.

        Raises:
            KeyError: If the symbol is not in the table
        """
        return self._entries[symbol].atomic_mass

    def symbols(self) -> List[str]:
        """Element symbols in table order."""
        return list(self._entries)

    def missing(self, symbols: Iterable[str]) -> List[str]:
        """Symbols absent from the table, each once, in order of appearance."""
        seen = set()
        result = []
        for symbol in symbols:
            if symbol not in self._entries and symbol not in seen:
                seen.add(symbol)
                result.append(symbol)
        return result


def load_atom_table(path: Optional[Union[str, Path]] = None) -> AtomTable:
    """
    Load and validate an atom table from YAML.

    Args:
        path: YAML file path. Default: bundled data/atoms.yaml

    Returns:
        AtomTable

    Raises:
        AtomTableError: If the file is missing, unreadable or invalid
    """
    yaml_path = Path(path) if path is not None else DEFAULT_ATOM_TABLE_PATH

    if not yaml_path.exists():
        raise AtomTableError(f"Atom table not found: {yaml_path}")

    try:
        with open(yaml_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise AtomTableError(f"Cannot read atom table {yaml_path}: {e}") from e

    if not isinstance(data, dict):
        raise AtomTableError(f"Atom table {yaml_path} must be a mapping")

    try:
        table_file = AtomTableFile(**data)
    except ValidationError as e:
        raise AtomTableError(f"Invalid atom table {yaml_path}: {e}") from e

    logger.info(f"Loaded atom table {yaml_path.name}: {table_file.to_dict()}")
    return AtomTable(table_file.atoms.values(), metadata=table_file.metadata)


@lru_cache(maxsize=1)
def get_default_atom_table() -> AtomTable:
    """Process-wide bundled table, loaded on first use."""
    return load_atom_table(DEFAULT_ATOM_TABLE_PATH)
