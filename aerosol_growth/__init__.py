"""
Aerosol Growth - single particle growth by vapor condensation.

This package integrates the radius of one aerosol particle growing in a
vapor/air mixture, with transition regime mass transfer.
"""

__version__ = "0.1.0"
__author__ = "aerosol_growth contributors"

from .atmosphere import Atmosphere, fuchs_sutugin_correction
from .config import GrowthConfig, load_config
from .gas import Gas
from .output import GrowthCurveOutput
from .particle import Particle
from .simulator import GrowthSimulator
from .transport import ThermalTransportEntity

__all__ = [
    "Atmosphere",
    "Gas",
    "Particle",
    "ThermalTransportEntity",
    "GrowthSimulator",
    "GrowthCurveOutput",
    "GrowthConfig",
    "load_config",
    "fuchs_sutugin_correction",
]
