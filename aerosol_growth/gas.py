"""
Gas species model.

A gas is either the condensing vapor or the bulk air it diffuses through.
"""

import numpy as np

from .constants import (
    AVOGADRO_CONSTANT,
    CM2_TO_M2,
    FULLER_PREFACTOR,
    FULLER_TEMPERATURE_EXPONENT,
    KG_TO_G,
    PI,
)
from .transport import ThermalTransportEntity
from .validation import require_non_negative, require_positive


class Gas(ThermalTransportEntity):
    """Represents one gas species and its per-molecule transport quantities."""

    def __init__(
        self,
        name: str,
        molar_mass: float,
        density: float,
        temperature: float,
        diffusion_volume: float,
        concentration: float
    ):
        """
        Initialize a gas species.

        Args:
            name: Label of the species
            molar_mass: Molar mass (kg/mol)
            density: Density of the condensed phase (kg/m^3)
            temperature: Temperature (K)
            diffusion_volume: Fuller diffusion volume (dimensionless)
            concentration: Number concentration (molecules/m^3)
        """
        super().__init__(name, temperature)
        self.molar_mass = molar_mass
        self.density = density
        self.diffusion_volume = diffusion_volume
        self.concentration = concentration

    @property
    def molar_mass(self) -> float:
        """Molar mass (kg/mol)."""
        return self._molar_mass

    @molar_mass.setter
    def molar_mass(self, value: float):
        self._molar_mass = require_positive("molar_mass", value)

    @property
    def density(self) -> float:
        """Density of the condensed phase (kg/m^3)."""
        return self._density

    @density.setter
    def density(self, value: float):
        self._density = require_positive("density", value)

    @property
    def diffusion_volume(self) -> float:
        return self._diffusion_volume

    @diffusion_volume.setter
    def diffusion_volume(self, value: float):
        self._diffusion_volume = require_positive("diffusion_volume", value)

    @property
    def concentration(self) -> float:
        """Number concentration (molecules/m^3)."""
        return self._concentration

    @concentration.setter
    def concentration(self, value: float):
        self._concentration = require_non_negative("concentration", value)

    @property
    def mass(self) -> float:
        """Mass of one molecule (kg)."""
        return self.molar_mass / AVOGADRO_CONSTANT

    @property
    def radius(self) -> float:
        """Effective molecular radius from molecular mass and density (m)."""
        return (3.0 * self.mass / (4.0 * PI * self.density)) ** (1.0 / 3.0)

    def binary_diffusion_coefficient(
        self,
        medium_diffusion_volume: float,
        medium_molar_mass: float,
        pressure: float
    ) -> float:
        """
        Binary diffusion coefficient of this species through a medium.

        Uses the Fuller-Schettler-Giddings correlation, which is written for
        molar masses in g/mol and pressure in atm and gives cm²/s.

        Args:
            medium_diffusion_volume: Fuller diffusion volume of the medium
            medium_molar_mass: Molar mass of the medium (g/mol)
            pressure: Total pressure (atm)

        Returns:
            Diffusion coefficient in m²/s
        """
        medium_diffusion_volume = require_positive(
            "medium_diffusion_volume", medium_diffusion_volume
        )
        medium_molar_mass = require_positive("medium_molar_mass", medium_molar_mass)
        pressure = require_positive("pressure", pressure)

        own_molar_mass = self.molar_mass * KG_TO_G
        volumes = self.diffusion_volume ** (1.0 / 3.0) + medium_diffusion_volume ** (1.0 / 3.0)

        coefficient = (FULLER_PREFACTOR
                       * self.temperature ** FULLER_TEMPERATURE_EXPONENT
                       * np.sqrt(1.0 / own_molar_mass + 1.0 / medium_molar_mass)
                       / (pressure * volumes ** 2))
        return coefficient * CM2_TO_M2
