"""
Configuration of the formula parser and amount converter.

Holds the physical reference constants, the default parser behaviour and
the console/logging settings.
"""

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

# Reference constants, engineering precision
MOLAR_GAS_VOLUME_L: float = 22.4  # L/mol at 0 °C, 1 atm
AVOGADRO_NUMBER: float = 6.02e23  # 1/mol
GRAMS_PER_KILOGRAM: float = 1000.0
MILLILITERS_PER_LITER: float = 1000.0


class CountNotation(Enum):
    """How repeat counts after an element symbol are written."""
    SUBSCRIPT = "subscript"  # only ₀-₉ glyphs, "H2O" is H×1 + O×1
    SUBSCRIPT_OR_ASCII = "subscript_or_ascii"  # also accept "H2O"


CALCULATOR_CONFIG: Dict[str, Any] = {
    # Parser behaviour
    "count_notation": CountNotation.SUBSCRIPT.value,
    "molecule_coefficient": True,  # "2H₂O" -> molecule_count=2

    # Reference data (None = bundled data/atoms.yaml)
    "atom_table_path": None,

    # Output formatting
    "mass_decimals": 3,  # formula weight
    "moles_decimals": 4,

    # Logging
    "log_level": "INFO",
    "logs_dir": "logs/sessions",
    "enable_file_logging": False,
}

DEFAULT_COUNT_NOTATION: CountNotation = CountNotation(CALCULATOR_CONFIG["count_notation"])
DEFAULT_MASS_DECIMALS: int = CALCULATOR_CONFIG["mass_decimals"]
DEFAULT_MOLES_DECIMALS: int = CALCULATOR_CONFIG["moles_decimals"]


def get_calculator_config() -> Dict[str, Any]:
    """Return a copy of the default configuration."""
    return CALCULATOR_CONFIG.copy()


def get_count_notation(override: Optional[str] = None) -> CountNotation:
    """
    Resolve the count notation.

    Args:
        override: Notation name overriding the default

    Returns:
        CountNotation member
    """
    if override is not None:
        return CountNotation(override)
    return CountNotation(CALCULATOR_CONFIG["count_notation"])


def get_atom_table_path(override: Optional[str] = None) -> Optional[Path]:
    """Path of the atom table file, None means the bundled table."""
    value = override if override is not None else CALCULATOR_CONFIG["atom_table_path"]
    if not value:
        return None
    return Path(value)


def validate_config(config: Optional[Dict[str, Any]] = None) -> bool:
    """
    Validate a configuration dictionary.

    Args:
        config: Configuration to check, defaults to CALCULATOR_CONFIG

    Returns:
        True if the configuration is valid

    Raises:
        ValueError: Listing every invalid setting
    """
    config = CALCULATOR_CONFIG if config is None else config
    errors = []

    valid_notations = {notation.value for notation in CountNotation}
    if config.get("count_notation") not in valid_notations:
        errors.append(f"count_notation must be one of {sorted(valid_notations)}")

    if not isinstance(config.get("molecule_coefficient"), bool):
        errors.append("molecule_coefficient must be bool")

    for key in ("mass_decimals", "moles_decimals"):
        value = config.get(key)
        if not isinstance(value, int) or isinstance(value, bool) or value < 0:
            errors.append(f"{key} must be a non-negative int")

    if str(config.get("log_level", "")).upper() not in {"DEBUG", "INFO", "WARNING", "ERROR"}:
        errors.append("log_level must be DEBUG, INFO, WARNING or ERROR")

    if errors:
        raise ValueError("Invalid calculator configuration: " + "; ".join(errors))
    return True


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer: {value!r}") from None


@dataclass
class CalculatorSettings:
    """Runtime settings, usually built from environment variables."""

    count_notation: CountNotation = DEFAULT_COUNT_NOTATION
    molecule_coefficient: bool = CALCULATOR_CONFIG["molecule_coefficient"]
    atom_table_path: Optional[str] = CALCULATOR_CONFIG["atom_table_path"]

    mass_decimals: int = DEFAULT_MASS_DECIMALS
    moles_decimals: int = DEFAULT_MOLES_DECIMALS

    log_level: str = CALCULATOR_CONFIG["log_level"]
    logs_dir: str = CALCULATOR_CONFIG["logs_dir"]
    enable_file_logging: bool = CALCULATOR_CONFIG["enable_file_logging"]

    @classmethod
    def from_env(cls) -> "CalculatorSettings":
        """
        Create settings from MOLCALC_* environment variables.

        Unset variables fall back to CALCULATOR_CONFIG.

        Raises:
            ValueError: If a variable cannot be converted
        """
        config = get_calculator_config()

        notation = os.getenv("MOLCALC_COUNT_NOTATION", config["count_notation"])
        try:
            count_notation = get_count_notation(notation)
        except ValueError:
            valid = ", ".join(n.value for n in CountNotation)
            raise ValueError(f"MOLCALC_COUNT_NOTATION must be one of {valid}: {notation!r}") from None

        return cls(
            count_notation=count_notation,
            molecule_coefficient=_env_bool("MOLCALC_MOLECULE_COEFFICIENT", config["molecule_coefficient"]),
            atom_table_path=os.getenv("MOLCALC_ATOM_TABLE") or config["atom_table_path"],

            mass_decimals=_env_int("MOLCALC_MASS_DECIMALS", config["mass_decimals"]),
            moles_decimals=_env_int("MOLCALC_MOLES_DECIMALS", config["moles_decimals"]),

            log_level=os.getenv("MOLCALC_LOG_LEVEL", config["log_level"]).upper(),
            logs_dir=os.getenv("MOLCALC_LOGS_DIR", config["logs_dir"]),
            enable_file_logging=_env_bool("MOLCALC_FILE_LOGGING", config["enable_file_logging"]),
        )

    def validate(self) -> List[str]:
        """Return a list of configuration errors, empty if valid."""
        errors = []

        if self.mass_decimals < 0:
            errors.append("MOLCALC_MASS_DECIMALS must not be negative")

        if self.moles_decimals < 0:
            errors.append("MOLCALC_MOLES_DECIMALS must not be negative")

        if self.log_level not in {"DEBUG", "INFO", "WARNING", "ERROR"}:
            errors.append("MOLCALC_LOG_LEVEL must be DEBUG, INFO, WARNING or ERROR")

        if self.atom_table_path and not Path(self.atom_table_path).exists():
            errors.append(f"MOLCALC_ATOM_TABLE not found: {self.atom_table_path}")

        return errors
