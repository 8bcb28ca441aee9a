"""Shared fixtures for mol_calculator tests."""

import pytest

from mol_calculator.calculator import MolCalculator
from mol_calculator.storage.atom_table import AtomTable, get_default_atom_table


@pytest.fixture
def small_table():
    """Small atom table with round-trip friendly masses."""
    return AtomTable.from_masses({
        "H": 1.008,
        "C": 12.011,
        "O": 15.999,
        "Na": 22.99,
        "Cl": 35.45,
    })


@pytest.fixture
def default_table():
    """Bundled 118-element table."""
    return get_default_atom_table()


@pytest.fixture
def calculator(small_table):
    """Calculator over the small table with default settings."""
    return MolCalculator(atom_table=small_table)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Isolate tests from MOLCALC_* variables of the host."""
    for name in (
        "MOLCALC_COUNT_NOTATION",
        "MOLCALC_MOLECULE_COEFFICIENT",
        "MOLCALC_ATOM_TABLE",
        "MOLCALC_MASS_DECIMALS",
        "MOLCALC_MOLES_DECIMALS",
        "MOLCALC_LOG_LEVEL",
        "MOLCALC_LOGS_DIR",
        "MOLCALC_FILE_LOGGING",
    ):
        monkeypatch.delenv(name, raising=False)
