"""Atomic reference data storage."""

from .atom_table import (
    DEFAULT_ATOM_TABLE_PATH,
    AtomTable,
    get_default_atom_table,
    load_atom_table,
)

__all__ = [
    "DEFAULT_ATOM_TABLE_PATH",
    "AtomTable",
    "get_default_atom_table",
    "load_atom_table",
]
