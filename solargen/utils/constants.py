"""Physical constants and generation tuning values."""

import math

# Physical constants (SI)
GRAVITATIONAL_CONSTANT = 6.674e-11  # m^3 / kg / s^2
STEFAN_BOLTZMANN = 5.67e-8  # W / m^2 / K^4
BOLTZMANN = 1.381e-23  # J / K
HYDROGEN_MOLECULE_MASS = 2 * 1.67e-27  # kg (H2)

# Unit conversions
AU_M = 1.496e11  # metres per astronomical unit
EARTH_MASS_KG = 5.97e24
EARTH_RADIUS_M = 6.371e6
SOLAR_MASS_KG = 1.989e30
SOLAR_RADIUS_AU = 0.00465
SOLAR_LUMINOSITY_W = 3.828e26
JUPITER_MASS_EARTH = 317.8
EARTH_MASSES_PER_SOLAR_MASS = 333000
DAYS_PER_YEAR = 365.25
SECONDS_PER_YEAR = DAYS_PER_YEAR * 24 * 3600

# Stellar relations
SOLAR_TEMPERATURE = 5778  # K
SOLAR_MAIN_SEQUENCE_LIFETIME = 1e10  # years

# Planetary heuristics
DEFAULT_ALBEDO = 0.3
JEANS_ESCAPE_FACTOR = 6  # v_escape must exceed this multiple of v_thermal(H2)
HABITABLE_TEMPERATURE_RANGE = (273, 373)  # K, liquid water
HABITABLE_MASS_RANGE = (0.1, 5)  # Earth masses
RING_MASS_THRESHOLD = 10  # Earth masses
RING_PROBABILITY = 0.3

# Tidal locking (Gladman et al. 1996 despinning)
DEFAULT_TIDAL_Q = 100
TIDAL_LOVE_NUMBER = 0.3
INITIAL_SPIN_PERIOD_HOURS = 12
MOMENT_OF_INERTIA_FACTOR = 0.4

# Mean-motion resonances, checked in this order (ties keep the earlier entry)
RESONANCE_TABLE = (
    (2, 1),
    (3, 2),
    (4, 3),
    (5, 4),
    (5, 3),
    (7, 4),
    (3, 1),
    (4, 1),
    (5, 1),
)
RESONANCE_TOLERANCE = 0.05  # max relative deviation from an exact ratio
RESONANCE_STRENGTH_SLOPE = 20
RESONANCE_DETECTION_THRESHOLD = 0.1  # minimum strength kept by the analyzer

# Stability
HILL_SPACING_COEFFICIENT = 2.4
HILL_STABILITY_THRESHOLD = 3.0
CHAOS_PREDICTION_THRESHOLD = 1e-5
CHAOS_INSTABILITY_THRESHOLD = 1e-3
CLOSE_ENCOUNTER_THRESHOLD = 5.0
KOZAI_INSTABILITY_TIMESCALE = 1e6  # years
STABILITY_TIMESCALE_SCALE = 1e6  # years per unit of archetype Hill factor

# Architecture strategies
COMPACT_BASE_PERIOD = 1.5  # days
COMPACT_PERIOD_RATIO = (1.5, 1.8)
RESONANT_BASE_PERIOD = 5.0  # days
RESONANT_CHAIN_RATIOS = (3 / 2, 4 / 3, 5 / 4, 6 / 5, 7 / 6)
TITIUS_BODE_BASE = 0.4  # AU
TITIUS_BODE_RATIO = 1.7
TERRESTRIAL_BOUNDARY = 2.0  # AU, standard architecture mass split

# Disks
PROTOPLANETARY_INNER_RADIUS = 0.1  # AU
DEBRIS_BELT_WIDTH = (0.8, 1.2)  # fractions of the nominal debris radius
DEBRIS_ALBEDO = 0.1

# Evolution
EVOLUTION_MIGRATION_SCALE = 1e8  # years per solar mass before orbits expand
EVOLUTION_EXPANSION_FACTOR = 1.1
DEFAULT_EVOLUTION_STEPS = (0, 1e9, 5e9, 10e9)  # years

MAIN_SEQUENCE_PHASES = frozenset({"main_sequence", "pre_main_sequence"})

# Luminosity / temperature multipliers applied to main-sequence values
EVOLVED_PHASE_SCALING = {
    "subgiant": (3.0, 0.85),
    "red_giant": (10.0, 0.7),
    "post_main_sequence": (10.0, 0.7),
}

# Fixed (mass, temperature K, luminosity L_sun) profiles for compact hosts
REMNANT_PROFILES = {
    "white_dwarf": (0.6, 10000.0, 1e-3),
    "neutron_star": (1.4, 1e6, 1e-4),
    "pulsar": (1.4, 1e6, 1e-4),
    "brown_dwarf": (0.05, 1300.0, 1e-5),
}

# Host masses for compact systems by spectral type
COMPACT_HOST_MASSES = {
    "M_dwarf": 0.089,
    "K_dwarf": 0.75,
    "G_dwarf": 1.0,
    "F_dwarf": 1.3,
}

# Rendering hints carried on the config
DEFAULT_ORBIT_RESOLUTION = 128
MAX_ORBIT_RESOLUTION = 512
N_BODY_PLANET_LIMIT = 8

# Batch generation
DEFAULT_BATCH_WORKERS = 4

# Testing
RNG_SEED_DEFAULT = 42

FULL_CIRCLE_DEGREES = 360.0
TWO_PI = 2 * math.pi
