"""Stellar physical relations.

Main-sequence stars use empirical mass relations. Evolved stars scale the
main-sequence luminosity and temperature by fixed per-phase factors, and
compact remnants and brown dwarfs use fixed profiles. Radii of anything off
the main sequence come from the Stefan-Boltzmann law in solar units.
"""

import math
from typing import NamedTuple

from ..errors import NumericDomainError
from ..models.system_type import HabitabilityZone
from ..utils.units import SolarMasses, Years
from ..utils.constants import (
    EVOLVED_PHASE_SCALING,
    MAIN_SEQUENCE_PHASES,
    REMNANT_PROFILES,
    SOLAR_MAIN_SEQUENCE_LIFETIME,
    SOLAR_TEMPERATURE,
)

# Spectral class lower bounds in K, hottest first
SPECTRAL_THRESHOLDS = (
    (30000, "O"),
    (10000, "B"),
    (7500, "A"),
    (6000, "F"),
    (5200, "G"),
    (3700, "K"),
)


class StellarDescription(NamedTuple):
    """Derived physical description of a star."""

    spectral_type: str
    mass: float  # Solar masses
    radius: float  # Solar radii
    temperature: float  # K
    luminosity: float  # Solar luminosities


def _require_positive_mass(mass: float):
    if not mass > 0:
        raise NumericDomainError(f"Stellar mass must be > 0, got {mass}")


def mass_to_luminosity(mass: SolarMasses) -> float:
    """Main-sequence mass-luminosity relation.

    The branches meet only approximately: about 3.5% apart at 0.43 solar
    masses, about 1% at 2 and by orders of magnitude at 20.

    Args:
        mass: Stellar mass in solar masses

    Returns:
        Luminosity in solar luminosities
    """
    _require_positive_mass(mass)
    if mass < 0.43:
        return 0.23 * mass**2.3
    if mass < 2:
        return mass**4
    if mass < 20:
        return 1.4 * mass**3.5
    return 32000 * mass


def mass_to_temperature(mass: SolarMasses) -> float:
    """Approximate main-sequence effective temperature in K."""
    _require_positive_mass(mass)
    return SOLAR_TEMPERATURE * math.sqrt(mass)


def main_sequence_radius(mass: SolarMasses) -> float:
    """Main-sequence radius in solar radii."""
    _require_positive_mass(mass)
    if mass < 1:
        return mass**0.8
    return mass**0.57


def stefan_boltzmann_radius(luminosity: float, temperature: float) -> float:
    """Radius in solar radii of a blackbody with the given L and T.

    Args:
        luminosity: Solar luminosities (> 0)
        temperature: Effective temperature in K (> 0)
    """
    if not luminosity > 0:
        raise NumericDomainError(f"Luminosity must be > 0, got {luminosity}")
    if not temperature > 0:
        raise NumericDomainError(f"Temperature must be > 0, got {temperature}")
    return math.sqrt(luminosity) / (temperature / SOLAR_TEMPERATURE) ** 2


def main_sequence_lifetime(mass: SolarMasses) -> Years:
    """Main-sequence lifetime in years (1e10 * M^-2.5)."""
    _require_positive_mass(mass)
    return Years(SOLAR_MAIN_SEQUENCE_LIFETIME * mass**-2.5)


def classify_spectral_type(temperature: float) -> str:
    """Map an effective temperature to a spectral class O-M."""
    for threshold, spectral_class in SPECTRAL_THRESHOLDS:
        if temperature > threshold:
            return spectral_class
    return "M"


def describe_star(mass: SolarMasses, phase: str = "main_sequence") -> StellarDescription:
    """Derive spectral type, radius, temperature and luminosity for a star.

    Args:
        mass: Stellar mass in solar masses
        phase: Evolution phase (main_sequence, pre_main_sequence, subgiant,
            red_giant, post_main_sequence, white_dwarf, neutron_star, pulsar
            or brown_dwarf)

    Returns:
        StellarDescription for the star

    Raises:
        NumericDomainError: If mass is not positive
        ValueError: If phase is not recognised
    """
    _require_positive_mass(mass)

    if phase in MAIN_SEQUENCE_PHASES:
        temperature = mass_to_temperature(mass)
        return StellarDescription(
            spectral_type=classify_spectral_type(temperature),
            mass=mass,
            radius=main_sequence_radius(mass),
            temperature=temperature,
            luminosity=mass_to_luminosity(mass),
        )

    if phase in EVOLVED_PHASE_SCALING:
        luminosity_factor, temperature_factor = EVOLVED_PHASE_SCALING[phase]
        luminosity = mass_to_luminosity(mass) * luminosity_factor
        temperature = mass_to_temperature(mass) * temperature_factor
        return StellarDescription(
            spectral_type=classify_spectral_type(temperature),
            mass=mass,
            radius=stefan_boltzmann_radius(luminosity, temperature),
            temperature=temperature,
            luminosity=luminosity,
        )

    if phase in REMNANT_PROFILES:
        _, temperature, luminosity = REMNANT_PROFILES[phase]
        return StellarDescription(
            spectral_type=phase,
            mass=mass,
            radius=stefan_boltzmann_radius(luminosity, temperature),
            temperature=temperature,
            luminosity=luminosity,
        )

    raise ValueError(f"Invalid evolution phase: {phase}")


def calculate_habitability_zone(luminosity: float) -> HabitabilityZone:
    """Conservative habitable zone for a total stellar luminosity.

    Args:
        luminosity: Total luminosity in solar luminosities (> 0)

    Returns:
        HabitabilityZone with edges in AU
    """
    if not luminosity > 0:
        raise NumericDomainError(f"Luminosity must be > 0, got {luminosity}")

    root = math.sqrt(luminosity)
    inner_edge = math.sqrt(luminosity / 1.1)
    outer_edge = math.sqrt(luminosity / 0.53)
    return HabitabilityZone(
        inner_edge=inner_edge,
        outer_edge=outer_edge,
        optimum_zone=root,
        snow_line=2.7 * root,
        tidally_locked_zone=0.1 * root,
        runaway_greenhouse_zone=0.9 * inner_edge,
        maximum_greenhouse_zone=outer_edge,
    )
