"""
Physical constants used by the condensational growth engine.

Ambient air is described by fixed standard values; the growth engine never
scales them with pressure or temperature.
"""

from scipy.constants import Avogadro, Boltzmann, pi

# Fundamental constants
BOLTZMANN_CONSTANT = Boltzmann  # J/K
AVOGADRO_CONSTANT = Avogadro  # mol^-1
PI = pi

# Unit conversions
KG_TO_G = 1e3  # g/kg
CM2_TO_M2 = 1e-4  # m²/cm²
M_TO_NM = 1e9  # nm/m
S_TO_H = 1.0 / 3600.0  # h/s

# Dry air
AIR_NAME = "air"
AIR_MOLAR_MASS = 0.02897  # kg/mol
AIR_DENSITY = 1.2  # kg/m³
AIR_DIFFUSION_VOLUME = 19.7  # Fuller atomic diffusion volume sum
AIR_CONCENTRATION = 1e25  # molecules/m³, not used by the growth law
AIR_MEAN_FREE_PATH = 68.0e-9  # m
AIR_VISCOSITY = 18.27e-6  # Pa·s

# Condensation
MASS_ACCOMMODATION_COEFFICIENT = 1.0
FUCHS_SUTUGIN_CONSTANT = 0.337

# Fuller-Schettler-Giddings correlation prefactor, cm²/s with g/mol and atm
FULLER_PREFACTOR = 1.0e-3
FULLER_TEMPERATURE_EXPONENT = 1.75
