"""Unit-tagged float types.

Periods are carried in days, ages and timescales in years, distances in AU,
planetary masses in Earth masses and stellar masses in solar masses. The
aliases cost nothing at runtime but make mixed-unit arithmetic visible to
type checkers and readers.
"""

from typing import NewType

from .constants import DAYS_PER_YEAR, EARTH_MASSES_PER_SOLAR_MASS

Days = NewType("Days", float)
Years = NewType("Years", float)
AU = NewType("AU", float)
EarthMasses = NewType("EarthMasses", float)
SolarMasses = NewType("SolarMasses", float)


def days_to_years(days: Days) -> Years:
    """Convert an orbital period in days to years."""
    return Years(days / DAYS_PER_YEAR)


def years_to_days(years: Years) -> Days:
    """Convert a duration in years to days."""
    return Days(years * DAYS_PER_YEAR)


def earth_to_solar_masses(mass: EarthMasses) -> SolarMasses:
    """Convert Earth masses to solar masses."""
    return SolarMasses(mass / EARTH_MASSES_PER_SOLAR_MASS)


def solar_to_earth_masses(mass: SolarMasses) -> EarthMasses:
    """Convert solar masses to Earth masses."""
    return EarthMasses(mass * EARTH_MASSES_PER_SOLAR_MASS)
