"""
Particle module for the condensational growth simulation.

Defines the single spherical aerosol particle whose radius is integrated.
"""

from .constants import PI
from .transport import ThermalTransportEntity
from .validation import require_positive


class Particle(ThermalTransportEntity):
    """Represents the growing spherical particle."""

    def __init__(
        self,
        name: str,
        radius: float,
        density: float,
        temperature: float = 293.15
    ):
        """
        Initialize a particle.

        Args:
            name: Label of the particle
            radius: Radius (m)
            density: Density (kg/m^3)
            temperature: Temperature (K); replaced by the ambient value once
                the particle is placed in an Atmosphere
        """
        super().__init__(name, temperature)
        self.radius = radius
        self.density = density

    @property
    def radius(self) -> float:
        """Radius (m)."""
        return self._radius

    @radius.setter
    def radius(self, value: float):
        self._radius = require_positive("radius", value)

    @property
    def density(self) -> float:
        """Density (kg/m^3)."""
        return self._density

    @density.setter
    def density(self, value: float):
        self._density = require_positive("density", value)

    def set_radius(self, radius: float):
        self.radius = radius

    @property
    def diameter(self) -> float:
        return 2.0 * self._radius

    @property
    def mass(self) -> float:
        """Mass of the sphere, density * (4/3) pi r^3 (kg)."""
        return self.density * (4.0 / 3.0) * PI * self._radius ** 3
