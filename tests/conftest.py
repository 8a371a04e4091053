"""Shared fixtures for the growth tests."""

import pytest

from aerosol_growth import Atmosphere, Gas, Particle


@pytest.fixture
def seed_particle():
    """A 1.5 nm radius sulfuric acid seed."""
    return Particle("seed", 1.5e-9, 1830.0, 293.15)


@pytest.fixture
def sulfuric_acid():
    """Sulfuric acid vapor at 1e7 cm^-3."""
    return Gas("sulfuric acid", 0.098079, 1830.0, 293.15, 51.96, 1e13)


@pytest.fixture
def atmosphere(seed_particle, sulfuric_acid):
    return Atmosphere(seed_particle, sulfuric_acid, pressure=1.0, temperature=293.15)


@pytest.fixture
def make_golden():
    """Factory for the reference state used as a regression fixture."""

    def build():
        particle = Particle("golden", 1.5e-9, 1.0, 1.0)
        vapor = Gas("golden", 1.0, 1.0, 1.0, 1.0, 1.0)
        return Atmosphere(particle, vapor, pressure=1.0, temperature=300.0, start_time=0.0)

    return build
