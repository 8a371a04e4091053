"""
Shared interface for entities that take part in thermal transport.

Both the growing particle and the gas species expose a mass, a radius and a
temperature; thermal speed and continuum diffusivity follow from those.
"""

from abc import ABC, abstractmethod

import numpy as np

from .constants import BOLTZMANN_CONSTANT, PI
from .validation import require_positive


class ThermalTransportEntity(ABC):
    """Something with a mass, a radius and a temperature that moves thermally."""

    def __init__(self, name: str, temperature: float):
        self.name = name
        self._temperature = require_positive("temperature", temperature)

    @property
    @abstractmethod
    def mass(self) -> float:
        """Mass of one molecule or particle (kg)."""

    @property
    @abstractmethod
    def radius(self) -> float:
        """Radius used for free path and Knudsen number calculations (m)."""

    @property
    def temperature(self) -> float:
        """Temperature (K)."""
        return self._temperature

    @temperature.setter
    def temperature(self, value: float):
        self._temperature = require_positive("temperature", value)

    def set_temperature(self, temperature: float):
        """Set the temperature; derived quantities are computed on demand."""
        self.temperature = temperature

    def thermal_speed(self) -> float:
        """
        Mean thermal speed.

        Returns:
            sqrt(8 k T / (pi m)) in m/s
        """
        return np.sqrt(8.0 * BOLTZMANN_CONSTANT * self._temperature / (PI * self.mass))

    def diffusion_coefficient(
        self,
        medium_free_path: float,
        medium_viscosity: float
    ) -> float:
        """
        Diffusion coefficient in a near-continuum medium.

        Dahneke parameterization, which reduces to Stokes-Einstein for
        radius >> medium_free_path.

        Args:
            medium_free_path: Mean free path of the medium (m)
            medium_viscosity: Dynamic viscosity of the medium (Pa·s)

        Returns:
            Diffusion coefficient in m²/s
        """
        medium_free_path = require_positive("medium_free_path", medium_free_path)
        medium_viscosity = require_positive("medium_viscosity", medium_viscosity)

        radius = self.radius
        x = medium_free_path / radius
        continuum = BOLTZMANN_CONSTANT * self._temperature / (3.0 * PI * medium_viscosity)

        return (continuum / (2.0 * radius)) * (
            (5.0 + 4.0 * x + 6.0 * x ** 2 + 18.0 * x ** 3) /
            (5.0 - x + (8.0 + PI) * x ** 2)
        )

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(name='{self.name}', radius={self.radius:.3e}, "
                f"temperature={self._temperature})")
