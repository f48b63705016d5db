"""Utility functions and constants for solar system generation."""

from .constants import (
    DAYS_PER_YEAR,
    DEFAULT_BATCH_WORKERS,
    DEFAULT_EVOLUTION_STEPS,
    DEFAULT_ORBIT_RESOLUTION,
    EARTH_MASSES_PER_SOLAR_MASS,
    HILL_STABILITY_THRESHOLD,
    MAX_ORBIT_RESOLUTION,
    RNG_SEED_DEFAULT,
)
from .rng import SystemRNG
from .units import (
    AU,
    Days,
    EarthMasses,
    SolarMasses,
    Years,
    days_to_years,
    earth_to_solar_masses,
    solar_to_earth_masses,
    years_to_days,
)

__all__ = [
    "AU",
    "DAYS_PER_YEAR",
    "DEFAULT_BATCH_WORKERS",
    "DEFAULT_EVOLUTION_STEPS",
    "DEFAULT_ORBIT_RESOLUTION",
    "Days",
    "EARTH_MASSES_PER_SOLAR_MASS",
    "EarthMasses",
    "HILL_STABILITY_THRESHOLD",
    "MAX_ORBIT_RESOLUTION",
    "RNG_SEED_DEFAULT",
    "SolarMasses",
    "SystemRNG",
    "Years",
    "days_to_years",
    "earth_to_solar_masses",
    "solar_to_earth_masses",
    "years_to_days",
]
