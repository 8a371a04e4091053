"""
Run configuration for the growth simulator.

A configuration can come from a JSON file, a dictionary or command-line
flags; all of them end up as a GrowthConfig.
"""

import json
from dataclasses import asdict, dataclass, fields

from .atmosphere import Atmosphere
from .gas import Gas
from .particle import Particle
from .validation import require_non_negative, require_positive

# Nested JSON sections and the flat field prefix they map to
_SECTIONS = {"particle": "particle_", "vapor": "vapor_"}


@dataclass
class GrowthConfig:
    """All inputs needed to build and run one growth simulation."""

    # Particle
    particle_name: str = "seed"
    particle_radius: float = 1.5e-9  # m
    particle_density: float = 1830.0  # kg/m^3

    # Condensing vapor (sulfuric acid by default)
    vapor_name: str = "sulfuric acid"
    vapor_molar_mass: float = 0.098079  # kg/mol
    vapor_density: float = 1830.0  # kg/m^3
    vapor_diffusion_volume: float = 51.96
    vapor_concentration: float = 1e13  # molecules/m^3

    # Ambient
    pressure: float = 1.0  # atm
    temperature: float = 293.15  # K
    start_time: float = 0.0  # s

    # Run
    duration: float = 3600.0  # s
    time_step: float = 1.0  # s
    output: str = "growth_output"

    def __post_init__(self):
        """Validate run settings; physical inputs are checked by the models."""
        self.duration = require_non_negative("duration", self.duration)
        self.time_step = require_positive("time_step", self.time_step)

    @classmethod
    def from_dict(cls, data: dict) -> "GrowthConfig":
        """
        Create a configuration from a dictionary.

        Particle and vapor settings may be given flat ("particle_radius") or
        nested ({"particle": {"radius": ...}}).
        """
        flat = {}
        for key, value in data.items():
            if key in _SECTIONS and isinstance(value, dict):
                for sub_key, sub_value in value.items():
                    flat[_SECTIONS[key] + sub_key] = sub_value
            else:
                flat[key] = value

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(flat) - known)
        if unknown:
            raise ValueError(f"Unknown configuration keys: {', '.join(unknown)}")

        return cls(**flat)

    def to_dict(self) -> dict:
        return asdict(self)

    def build_particle(self) -> Particle:
        return Particle(
            self.particle_name,
            self.particle_radius,
            self.particle_density,
            self.temperature
        )

    def build_vapor(self) -> Gas:
        return Gas(
            self.vapor_name,
            self.vapor_molar_mass,
            self.vapor_density,
            self.temperature,
            self.vapor_diffusion_volume,
            self.vapor_concentration
        )

    def build_atmosphere(self) -> Atmosphere:
        """Create the growth engine described by this configuration."""
        return Atmosphere(
            self.build_particle(),
            self.build_vapor(),
            pressure=self.pressure,
            temperature=self.temperature,
            start_time=self.start_time
        )


def load_config(config_file: str) -> GrowthConfig:
    """Load configuration from JSON file."""
    with open(config_file, 'r') as f:
        return GrowthConfig.from_dict(json.load(f))
