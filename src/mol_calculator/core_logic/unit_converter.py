"""
Amount unit converter.

Converts one amount of a substance into moles, grams, liters of gas at
0 °C / 1 atm, and particle count. Moles are the pivot quantity: the input
is normalized (kg -> g, mL -> L), turned into moles, and every other
quantity is derived from moles.

Formulas:
    moles     = grams / M         = liters / 22.4  = particles / 6.02e23
    grams     = moles * M
    liters    = moles * 22.4
    particles = moles * 6.02e23 * atoms_per_molecule

Note: particles from moles are scaled by atoms_per_molecule (atom count),
while moles from a particle-count input are not.
"""

import logging
from typing import List

from ..config import (
    AVOGADRO_NUMBER,
    GRAMS_PER_KILOGRAM,
    MILLILITERS_PER_LITER,
    MOLAR_GAS_VOLUME_L,
)
from ..errors import UnsupportedUnitError
from ..models.amount import (
    AmountUnit,
    ConversionResult,
    ConversionStep,
    ParsedAmount,
    UnitFamily,
)
from ..utils.numbers import format_number

logger = logging.getLogger(__name__)


class UnitConverter:
    """
    Deterministic amount converter.

    Holds only the reference constants; every call is independent.
    """

    def __init__(
        self,
        molar_gas_volume: float = MOLAR_GAS_VOLUME_L,
        avogadro_number: float = AVOGADRO_NUMBER,
    ):
        """
        Args:
            molar_gas_volume: Volume of one mole of ideal gas, L/mol
            avogadro_number: Particles per mole
        """
        if molar_gas_volume <= 0 or avogadro_number <= 0:
            raise ValueError("Reference constants must be positive")
        self.molar_gas_volume = molar_gas_volume
        self.avogadro_number = avogadro_number
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def convert(
        self,
        total_molar_mass: float,
        atoms_per_molecule: int,
        amount: ParsedAmount,
    ) -> ConversionResult:
        """
        Compute the amount in all four representations.

        Args:
            total_molar_mass: Molar mass of the substance, g/mol
            atoms_per_molecule: Atom count of one formula unit
            amount: Parsed input amount

        Returns:
            ConversionResult. All fields are None when there is no value,
            no unit, or the molar mass is not positive.

        Raises:
            UnsupportedUnitError: If unit text is present but not allowed
        """
        if amount.is_unsupported:
            raise UnsupportedUnitError(amount.unit_text)

        if amount.value is None or amount.unit is None:
            return ConversionResult.not_computed()

        if total_molar_mass <= 0:
            # Empty formula: nothing to divide by, show placeholders instead
            self.logger.debug("Molar mass is 0, conversion skipped")
            return ConversionResult.not_computed()

        if atoms_per_molecule < 0:
            raise ValueError(f"atoms_per_molecule must not be negative: {atoms_per_molecule}")

        family = amount.unit.family
        if family is UnitFamily.MASS:
            result = self._from_mass(total_molar_mass, atoms_per_molecule, amount)
        elif family is UnitFamily.AMOUNT:
            result = self._from_moles(total_molar_mass, atoms_per_molecule, amount.value)
        elif family is UnitFamily.VOLUME:
            result = self._from_volume(total_molar_mass, atoms_per_molecule, amount)
        else:
            result = self._from_particles(total_molar_mass, amount.value)

        self.logger.debug(
            f"Converted {format_number(amount.value)} {amount.unit.value} "
            f"(M={total_molar_mass:.3f}, k={atoms_per_molecule}): {result.to_dict()}"
        )
        return result

    # Input families

    def _from_mass(self, molar_mass: float, atoms: int, amount: ParsedAmount) -> ConversionResult:
        steps: List[ConversionStep] = []
        grams = amount.value
        if amount.unit is AmountUnit.KILOGRAM:
            grams = amount.value * GRAMS_PER_KILOGRAM
            steps.append(self._step(
                "grams",
                f"{format_number(amount.value)} kg × {format_number(GRAMS_PER_KILOGRAM)}",
                grams,
            ))

        moles = grams / molar_mass
        steps.append(self._step(
            "moles",
            f"{format_number(grams)} g ÷ {molar_mass:.3f} g/mol",
            moles,
        ))
        liters = self._liters_from_moles(moles, steps)
        particles = self._particles_from_moles(moles, atoms, steps)
        return ConversionResult(moles=moles, grams=grams, liters=liters, particle_count=particles, steps=steps)

    def _from_moles(self, molar_mass: float, atoms: int, moles: float) -> ConversionResult:
        steps: List[ConversionStep] = []
        grams = self._grams_from_moles(moles, molar_mass, steps)
        liters = self._liters_from_moles(moles, steps)
        particles = self._particles_from_moles(moles, atoms, steps)
        return ConversionResult(moles=moles, grams=grams, liters=liters, particle_count=particles, steps=steps)

    def _from_volume(self, molar_mass: float, atoms: int, amount: ParsedAmount) -> ConversionResult:
        steps: List[ConversionStep] = []
        liters = amount.value
        if amount.unit is AmountUnit.MILLILITER:
            liters = amount.value / MILLILITERS_PER_LITER
            steps.append(self._step(
                "liters",
                f"{format_number(amount.value)} mL ÷ {format_number(MILLILITERS_PER_LITER)}",
                liters,
            ))

        moles = liters / self.molar_gas_volume
        steps.append(self._step(
            "moles",
            f"{format_number(liters)} L ÷ {format_number(self.molar_gas_volume)} L/mol",
            moles,
        ))
        grams = self._grams_from_moles(moles, molar_mass, steps)
        particles = self._particles_from_moles(moles, atoms, steps)
        return ConversionResult(moles=moles, grams=grams, liters=liters, particle_count=particles, steps=steps)

    def _from_particles(self, molar_mass: float, particles: float) -> ConversionResult:
        steps: List[ConversionStep] = []
        moles = particles / self.avogadro_number
        steps.append(self._step(
            "moles",
            f"{format_number(particles)} ÷ {format_number(self.avogadro_number)}",
            moles,
        ))
        grams = self._grams_from_moles(moles, molar_mass, steps)
        liters = self._liters_from_moles(moles, steps)
        return ConversionResult(moles=moles, grams=grams, liters=liters, particle_count=particles, steps=steps)

    # Derivations from moles

    def _grams_from_moles(self, moles: float, molar_mass: float, steps: List[ConversionStep]) -> float:
        grams = moles * molar_mass
        steps.append(self._step(
            "grams",
            f"{format_number(moles)} mol × {molar_mass:.3f} g/mol",
            grams,
        ))
        return grams

    def _liters_from_moles(self, moles: float, steps: List[ConversionStep]) -> float:
        liters = moles * self.molar_gas_volume
        steps.append(self._step(
            "liters",
            f"{format_number(moles)} mol × {format_number(self.molar_gas_volume)} L/mol",
            liters,
        ))
        return liters

    def _particles_from_moles(self, moles: float, atoms: int, steps: List[ConversionStep]) -> float:
        particles = moles * self.avogadro_number * atoms
        steps.append(self._step(
            "particle_count",
            f"{format_number(moles)} mol × {format_number(self.avogadro_number)} × {atoms}",
            particles,
        ))
        return particles

    @staticmethod
    def _step(quantity: str, expression: str, value: float) -> ConversionStep:
        return ConversionStep(quantity=quantity, expression=expression, value=value)


_DEFAULT_CONVERTER = UnitConverter()


def convert_amount(
    total_molar_mass: float,
    atoms_per_molecule: int,
    amount: ParsedAmount,
) -> ConversionResult:
    """Convert with the standard reference constants."""
    return _DEFAULT_CONVERTER.convert(total_molar_mass, atoms_per_molecule, amount)
