"""
Configuration of mol_calculator.

Physical constants, parser defaults and runtime settings.
"""

from .calculator_config import (
    AVOGADRO_NUMBER,
    CALCULATOR_CONFIG,
    DEFAULT_COUNT_NOTATION,
    DEFAULT_MASS_DECIMALS,
    DEFAULT_MOLES_DECIMALS,
    GRAMS_PER_KILOGRAM,
    MILLILITERS_PER_LITER,
    MOLAR_GAS_VOLUME_L,
    CalculatorSettings,
    CountNotation,
    get_atom_table_path,
    get_calculator_config,
    get_count_notation,
    validate_config,
)

__all__ = [
    "AVOGADRO_NUMBER",
    "CALCULATOR_CONFIG",
    "DEFAULT_COUNT_NOTATION",
    "DEFAULT_MASS_DECIMALS",
    "DEFAULT_MOLES_DECIMALS",
    "GRAMS_PER_KILOGRAM",
    "MILLILITERS_PER_LITER",
    "MOLAR_GAS_VOLUME_L",
    "CalculatorSettings",
    "CountNotation",
    "get_atom_table_path",
    "get_calculator_config",
    "get_count_notation",
    "validate_config",
]
