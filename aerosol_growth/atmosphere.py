"""
Atmosphere model for condensational particle growth.

Owns the particle, the condensing vapor and the background air, and
integrates the particle radius forward in time.
"""

import copy
import logging

import numpy as np

from .constants import (
    AIR_CONCENTRATION,
    AIR_DENSITY,
    AIR_DIFFUSION_VOLUME,
    AIR_MEAN_FREE_PATH,
    AIR_MOLAR_MASS,
    AIR_NAME,
    AIR_VISCOSITY,
    BOLTZMANN_CONSTANT,
    FUCHS_SUTUGIN_CONSTANT,
    KG_TO_G,
    MASS_ACCOMMODATION_COEFFICIENT,
    PI,
)
from .gas import Gas
from .particle import Particle
from .validation import require_non_negative, require_positive

logger = logging.getLogger(__name__)


def fuchs_sutugin_correction(knudsen: float) -> float:
    """
    Transition regime mass flux correction factor.

    Evaluated at MASS_ACCOMMODATION_COEFFICIENT, which is 1; other values
    of the coefficient are not supported.

    Args:
        knudsen: Knudsen number

    Returns:
        Correction factor, 1 in the continuum limit and decreasing with Kn
    """
    a = 4.0 / (3.0 * MASS_ACCOMMODATION_COEFFICIENT)
    return (1.0 + knudsen) / (1.0 + (a + FUCHS_SUTUGIN_CONSTANT) * knudsen + a * knudsen ** 2)


class Atmosphere:
    """
    Growth engine for one particle in a vapor/air mixture.

    The particle, vapor and air always share the ambient temperature.
    Steps are explicit Euler; keep dt around one second or less.
    """

    def __init__(
        self,
        particle: Particle,
        vapor: Gas,
        pressure: float,
        temperature: float,
        start_time: float = 0.0
    ):
        """
        Initialize the atmosphere.

        Args:
            particle: Particle to grow; the atmosphere keeps its own copy
            vapor: Condensing vapor; the atmosphere keeps its own copy
            pressure: Ambient pressure (atm)
            temperature: Ambient temperature (K), imposed on every entity
            start_time: Initial simulation time (s)
        """
        self._pressure = require_positive("pressure", pressure)
        self._temperature = require_positive("temperature", temperature)
        self._time = float(start_time)

        self._particle = copy.deepcopy(particle)
        self._vapor = copy.deepcopy(vapor)
        self._air = Gas(
            AIR_NAME,
            AIR_MOLAR_MASS,
            AIR_DENSITY,
            self._temperature,
            AIR_DIFFUSION_VOLUME,
            AIR_CONCENTRATION
        )

        self.equilibrate()
        logger.debug(
            "Atmosphere created: particle=%s vapor=%s P=%g atm T=%g K t0=%g s",
            self._particle.name, self._vapor.name,
            self._pressure, self._temperature, self._time
        )

    # Owned entities

    @property
    def particle(self) -> Particle:
        return self._particle

    @particle.setter
    def particle(self, particle: Particle):
        self.replace_particle(particle)

    @property
    def vapor(self) -> Gas:
        return self._vapor

    @vapor.setter
    def vapor(self, vapor: Gas):
        self.replace_vapor(vapor)

    @property
    def air(self) -> Gas:
        return self._air

    def replace_particle(self, particle: Particle):
        """Swap in a new particle, e.g. to restart growth from a new radius."""
        self._particle = copy.deepcopy(particle)
        self._particle.temperature = self._temperature
        logger.debug("Particle replaced: %s", self._particle.name)

    def replace_vapor(self, vapor: Gas):
        """Swap in a new condensing vapor."""
        self._vapor = copy.deepcopy(vapor)
        self._vapor.temperature = self._temperature
        logger.debug("Vapor replaced: %s", self._vapor.name)

    # Ambient state

    @property
    def radius(self) -> float:
        """Current particle radius (m)."""
        return self._particle.radius

    @property
    def simulation_time(self) -> float:
        """Simulation clock (s)."""
        return self._time

    @property
    def pressure(self) -> float:
        """Ambient pressure (atm)."""
        return self._pressure

    @pressure.setter
    def pressure(self, pressure: float):
        self._pressure = require_positive("pressure", pressure)

    def set_pressure(self, pressure: float):
        self.pressure = pressure

    @property
    def temperature(self) -> float:
        """Ambient temperature (K)."""
        return self._temperature

    @temperature.setter
    def temperature(self, temperature: float):
        self._temperature = require_positive("temperature", temperature)
        self.equilibrate()

    def set_temperature(self, temperature: float):
        """Set the ambient temperature and bring every entity to it."""
        self.temperature = temperature

    def equilibrate(self):
        """Put air, vapor and particle in thermal equilibrium with the ambient."""
        self._air.temperature = self._temperature
        self._vapor.temperature = self._temperature
        self._particle.temperature = self._temperature
        logger.debug("Equilibrated to %g K", self._temperature)

    # Transport

    def mean_free_path(self) -> float:
        """
        Mean free path of the particle-vapor pair.

        Returns:
            3 (D_p + D_v) / sqrt(c_p^2 + c_v^2) in m
        """
        particle_diffusion = self._particle.diffusion_coefficient(
            AIR_MEAN_FREE_PATH, AIR_VISCOSITY
        )
        vapor_diffusion = self._vapor.binary_diffusion_coefficient(
            self._air.diffusion_volume,
            self._air.molar_mass * KG_TO_G,
            self._pressure
        )
        speed = np.sqrt(self._particle.thermal_speed() ** 2 + self._vapor.thermal_speed() ** 2)

        return 3.0 * (particle_diffusion + vapor_diffusion) / speed

    def knudsen_number(self) -> float:
        """Knudsen number 2 lambda / (r_p + r_v)."""
        return 2.0 * self.mean_free_path() / (self._particle.radius + self._vapor.radius)

    def correction_factor(self) -> float:
        """Fuchs-Sutugin mass flux correction for the current state."""
        return fuchs_sutugin_correction(self.knudsen_number())

    def growth_rate(self) -> float:
        """
        Radius growth rate from vapor condensation.

        Returns:
            dr/dt in m/s
        """
        particle = self._particle
        vapor = self._vapor

        knudsen = self.knudsen_number()
        gamma = (4.0 / 3.0) * knudsen * fuchs_sutugin_correction(knudsen)

        return (gamma / (2.0 * vapor.density)
                * (1.0 + vapor.radius / particle.radius) ** 2
                * np.sqrt(8.0 * BOLTZMANN_CONSTANT * self._temperature / PI)
                * np.sqrt(1.0 / particle.mass + 1.0 / vapor.mass)
                * vapor.mass * vapor.concentration)

    def advance(self, dt: float) -> float:
        """
        Advance the clock and grow the particle by one Euler step.

        Args:
            dt: Time step (s)

        Returns:
            New particle radius (m)
        """
        dt = require_non_negative("dt", dt)

        rate = self.growth_rate()
        # Half step: dr/dt * dt / 2
        radius = require_positive("radius", self._particle.radius + (rate * dt) / 2.0)

        self._time += dt
        self._particle.radius = radius

        return self._particle.radius

    def __repr__(self) -> str:
        return (f"Atmosphere(P={self._pressure} atm, T={self._temperature} K, "
                f"t={self._time} s, r={self._particle.radius:.4e} m)")
