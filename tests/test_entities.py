"""
Tests for the gas and particle models.
"""

import numpy as np
import pytest

from aerosol_growth import Gas, Particle, ThermalTransportEntity
from aerosol_growth.constants import AVOGADRO_CONSTANT, BOLTZMANN_CONSTANT


def test_particle_creation():
    """Test basic particle creation."""
    particle = Particle("seed", radius=1e-6, density=1000.0, temperature=300.0)

    assert particle.name == "seed"
    assert particle.radius == 1e-6
    assert particle.diameter == 2e-6
    assert particle.temperature == 300.0
    assert particle.mass == pytest.approx(4.18879e-15, rel=1e-5)


def test_particle_radius_setter():
    """Test radius updates and validation."""
    particle = Particle("seed", 1e-9, 1000.0)

    particle.set_radius(2e-9)
    assert particle.radius == 2e-9

    with pytest.raises(ValueError):
        particle.radius = 0.0
    with pytest.raises(ValueError):
        particle.set_radius(-1e-9)
    assert particle.radius == 2e-9


def test_particle_density_setter():
    """Test that density is checked on assignment."""
    particle = Particle("seed", 1e-9, 1000.0)

    with pytest.raises(ValueError):
        particle.density = 0.0
    with pytest.raises(ValueError):
        particle.density = -5.0
    assert particle.density == 1000.0

    particle.density = 1830.0
    assert particle.mass == pytest.approx(1830.0 * 4.0 / 3.0 * np.pi * 1e-27)


@pytest.mark.parametrize("kwargs", [
    {"radius": 0.0, "density": 1000.0},
    {"radius": 1e-9, "density": -1.0},
    {"radius": float("nan"), "density": 1000.0},
    {"radius": 1e-9, "density": 1000.0, "temperature": 0.0},
])
def test_particle_rejects_invalid_inputs(kwargs):
    """Test that non-physical particles are refused."""
    with pytest.raises(ValueError):
        Particle("bad", **kwargs)


def test_gas_creation():
    """Test gas creation and derived molecular quantities."""
    air = Gas("air", 0.02897, 1.2, 300.0, 19.7, 1e25)

    assert air.mass == pytest.approx(0.02897 / AVOGADRO_CONSTANT)
    volume = 4.0 / 3.0 * np.pi * air.radius ** 3
    assert volume * air.density == pytest.approx(air.mass)


@pytest.mark.parametrize("args", [
    ("x", 0.0, 1.0, 300.0, 1.0, 1.0),
    ("x", 1.0, 0.0, 300.0, 1.0, 1.0),
    ("x", 1.0, 1.0, -5.0, 1.0, 1.0),
    ("x", 1.0, 1.0, 300.0, 0.0, 1.0),
    ("x", 1.0, 1.0, 300.0, 1.0, -1.0),
])
def test_gas_rejects_invalid_inputs(args):
    """Test that non-physical gases are refused."""
    with pytest.raises(ValueError):
        Gas(*args)


def test_gas_setters_validate():
    """Test that every physical gas attribute is checked on assignment."""
    gas = Gas("vapor", 0.1, 1000.0, 300.0, 50.0, 1e13)

    for attribute in ["molar_mass", "density", "diffusion_volume", "temperature"]:
        with pytest.raises(ValueError):
            setattr(gas, attribute, 0.0)
    with pytest.raises(ValueError):
        gas.concentration = -1e13

    assert gas.molar_mass == 0.1
    assert gas.density == 1000.0
    assert gas.diffusion_volume == 50.0
    assert gas.temperature == 300.0
    assert gas.concentration == 1e13

    gas.concentration = 2e13
    gas.density = 1500.0
    assert gas.concentration == 2e13
    assert gas.density == 1500.0


def test_gas_allows_zero_concentration():
    """A vapor that is absent is still a valid gas."""
    gas = Gas("none", 0.1, 1000.0, 300.0, 50.0, 0.0)
    assert gas.concentration == 0.0


def test_thermal_speed():
    """Test mean thermal speed of air molecules."""
    air = Gas("air", 0.02897, 1.2, 300.0, 19.7, 1e25)

    assert air.thermal_speed() == pytest.approx(468.2, rel=1e-3)

    air.set_temperature(1200.0)
    assert air.thermal_speed() == pytest.approx(2 * 468.2, rel=1e-3)


def test_both_entities_share_interface():
    """Test that gas and particle are thermal transport entities."""
    gas = Gas("vapor", 0.1, 1000.0, 300.0, 50.0, 1e13)
    particle = Particle("seed", 1e-9, 1000.0, 300.0)

    for entity in (gas, particle):
        assert isinstance(entity, ThermalTransportEntity)
        assert entity.thermal_speed() > 0
        assert entity.diffusion_coefficient(68e-9, 18.27e-6) > 0


def test_continuum_diffusion_coefficient():
    """Test Dahneke diffusivity against its closed form and continuum limit."""
    free_path = 68e-9
    viscosity = 18.27e-6
    particle = Particle("large", 1e-6, 1000.0, 300.0)

    x = free_path / 1e-6
    stokes_einstein = BOLTZMANN_CONSTANT * 300.0 / (6 * np.pi * viscosity * 1e-6)
    expected = stokes_einstein * (5 + 4 * x + 6 * x**2 + 18 * x**3) / (5 - x + (8 + np.pi) * x**2)

    assert particle.diffusion_coefficient(free_path, viscosity) == pytest.approx(expected)

    huge = Particle("huge", 1.0, 1000.0, 300.0)
    assert huge.diffusion_coefficient(free_path, viscosity) == pytest.approx(
        BOLTZMANN_CONSTANT * 300.0 / (6 * np.pi * viscosity), rel=1e-6
    )


def test_diffusion_decreases_with_size():
    """Test that larger particles diffuse more slowly."""
    small = Particle("small", 1e-9, 1000.0, 300.0)
    large = Particle("large", 1e-7, 1000.0, 300.0)

    assert small.diffusion_coefficient(68e-9, 18.27e-6) > large.diffusion_coefficient(68e-9, 18.27e-6)


def test_binary_diffusion_coefficient():
    """Test Fuller diffusivity of sulfuric acid in air."""
    vapor = Gas("sulfuric acid", 0.098079, 1830.0, 293.15, 51.96, 1e13)

    d_1atm = vapor.binary_diffusion_coefficient(19.7, 28.97, 1.0)
    d_2atm = vapor.binary_diffusion_coefficient(19.7, 28.97, 2.0)

    assert d_1atm == pytest.approx(1.06e-5, rel=0.02)
    assert d_2atm == pytest.approx(d_1atm / 2)

    with pytest.raises(ValueError):
        vapor.binary_diffusion_coefficient(19.7, 28.97, 0.0)


def test_binary_diffusion_increases_with_temperature():
    """Test T^1.75 dependence of the Fuller correlation."""
    vapor = Gas("vapor", 0.1, 1000.0, 300.0, 50.0, 1e13)
    cold = vapor.binary_diffusion_coefficient(19.7, 28.97, 1.0)

    vapor.temperature = 600.0
    warm = vapor.binary_diffusion_coefficient(19.7, 28.97, 1.0)

    assert warm / cold == pytest.approx(2.0 ** 1.75)
