"""Orbital mechanics: Kepler's law, resonances, Hill stability and observables."""

import math
from typing import NamedTuple, Sequence, Tuple

from ..errors import NumericDomainError
from ..utils.units import (
    AU,
    Days,
    EarthMasses,
    SolarMasses,
    Years,
    days_to_years,
    earth_to_solar_masses,
    years_to_days,
)
from ..utils.constants import (
    AU_M,
    EARTH_MASS_KG,
    GRAVITATIONAL_CONSTANT,
    HILL_SPACING_COEFFICIENT,
    JUPITER_MASS_EARTH,
    RESONANCE_STRENGTH_SLOPE,
    RESONANCE_TABLE,
    RESONANCE_TOLERANCE,
    SOLAR_MASS_KG,
    SOLAR_RADIUS_AU,
)

# K for a Jupiter-mass planet on a 1-year orbit around a solar-mass star
RV_JUPITER_AMPLITUDE = 28.4329  # m/s


class Resonance(NamedTuple):
    """Best mean-motion resonance match for a period pair."""

    ratio: Tuple[int, int]
    strength: float


def _require_positive(name: str, value: float):
    if not value > 0:
        raise NumericDomainError(f"{name} must be > 0, got {value}")


def kepler_period(semi_major_axis: AU, central_mass: SolarMasses) -> Days:
    """Orbital period in days for an orbit in AU around a mass in solar masses."""
    _require_positive("Semi-major axis", semi_major_axis)
    _require_positive("Central mass", central_mass)
    return years_to_days(Years(math.sqrt(semi_major_axis**3 / central_mass)))


def kepler_semi_major_axis(period: Days, central_mass: SolarMasses) -> AU:
    """Semi-major axis in AU for a period in days around a mass in solar masses."""
    _require_positive("Period", period)
    _require_positive("Central mass", central_mass)
    return AU((days_to_years(period) ** 2 * central_mass) ** (1 / 3))


def orbital_resonance(inner_period: float, outer_period: float) -> Resonance:
    """Match a period ratio against the common mean-motion resonances.

    Entries are tried in table order and only a strictly stronger match
    replaces the current best, so ties keep the earlier entry.

    Args:
        inner_period: Period of the first planet
        outer_period: Period of the second planet (same units)

    Returns:
        Resonance with ratio (p, q) and strength 1 - 20 * deviation, or
        ratio (1, 1) and strength 0 if nothing is within 5%
    """
    _require_positive("Inner period", inner_period)
    _require_positive("Outer period", outer_period)

    ratio = outer_period / inner_period
    best_ratio = (1, 1)
    best_strength = 0.0

    for p, q in RESONANCE_TABLE:
        exact = p / q
        deviation = abs(ratio - exact) / exact
        if deviation < RESONANCE_TOLERANCE:
            strength = 1 - deviation * RESONANCE_STRENGTH_SLOPE
            if strength > best_strength:
                best_ratio = (p, q)
                best_strength = strength

    return Resonance(ratio=best_ratio, strength=best_strength)


def hill_stability(
    masses: Sequence[EarthMasses], semi_major_axes: Sequence[AU], stellar_mass: SolarMasses
) -> float:
    """Minimum mutual-Hill spacing factor over adjacent planet pairs.

    For each neighbouring pair, r_H = mean(a) * ((m1 + m2) / 3 M*)^(1/3) and
    the factor is delta_a / (2.4 r_H). Planets are taken in the given order,
    which should be increasing distance.

    Args:
        masses: Planet masses in Earth masses
        semi_major_axes: Orbits in AU, parallel to masses
        stellar_mass: Host mass in solar masses

    Returns:
        Smallest factor, or inf for fewer than two planets
    """
    if len(masses) != len(semi_major_axes):
        raise ValueError(
            f"Invalid planet arrays: {len(masses)} masses, {len(semi_major_axes)} orbits"
        )
    _require_positive("Stellar mass", stellar_mass)

    minimum = math.inf
    for i in range(len(masses) - 1):
        delta_a = semi_major_axes[i + 1] - semi_major_axes[i]
        mean_a = (semi_major_axes[i] + semi_major_axes[i + 1]) / 2
        pair_mass = earth_to_solar_masses(masses[i] + masses[i + 1])

        hill_radius = mean_a * (pair_mass / (3 * stellar_mass)) ** (1 / 3)
        minimum = min(minimum, delta_a / (HILL_SPACING_COEFFICIENT * hill_radius))

    return minimum


def migration_timescale(
    planet_mass: EarthMasses, disk_mass: SolarMasses, semi_major_axis: AU
) -> Years:
    """Simplified Type I migration timescale in years.

    (M_sun / M_disk) * a^2 * (M_sun / M_p) * 1e6, with a in AU.

    Args:
        planet_mass: Earth masses
        disk_mass: Solar masses
        semi_major_axis: AU
    """
    _require_positive("Planet mass", planet_mass)
    _require_positive("Disk mass", disk_mass)
    _require_positive("Semi-major axis", semi_major_axis)

    planet_kg = planet_mass * EARTH_MASS_KG
    disk_kg = disk_mass * SOLAR_MASS_KG
    return Years(
        (SOLAR_MASS_KG / disk_kg) * semi_major_axis**2 * (SOLAR_MASS_KG / planet_kg) * 1e6
    )


def orbital_angular_momentum(
    mass: EarthMasses, semi_major_axis: AU, eccentricity: float, stellar_mass: SolarMasses
) -> float:
    """Orbital angular momentum of a planet in kg m^2 / s."""
    _require_positive("Planet mass", mass)
    _require_positive("Semi-major axis", semi_major_axis)
    _require_positive("Stellar mass", stellar_mass)
    if not (0 <= eccentricity < 1):
        raise NumericDomainError(f"Eccentricity must be in [0, 1), got {eccentricity}")

    mu = GRAVITATIONAL_CONSTANT * stellar_mass * SOLAR_MASS_KG
    return (
        mass
        * EARTH_MASS_KG
        * math.sqrt(mu * semi_major_axis * AU_M * (1 - eccentricity**2))
    )


def radial_velocity_semi_amplitude(
    mass: EarthMasses,
    period: Days,
    eccentricity: float,
    stellar_mass: SolarMasses,
    inclination: float = 90.0,
) -> float:
    """Stellar reflex velocity semi-amplitude in m/s.

    Args:
        mass: Planet mass in Earth masses
        period: Orbital period in days
        eccentricity: Orbital eccentricity
        stellar_mass: Host mass in solar masses
        inclination: Orbit inclination to the sky plane in degrees
    """
    _require_positive("Planet mass", mass)
    _require_positive("Period", period)
    _require_positive("Stellar mass", stellar_mass)
    if not (0 <= eccentricity < 1):
        raise NumericDomainError(f"Eccentricity must be in [0, 1), got {eccentricity}")

    jupiter_masses = mass * math.sin(math.radians(inclination)) / JUPITER_MASS_EARTH
    years = days_to_years(period)
    return (
        RV_JUPITER_AMPLITUDE
        * jupiter_masses
        * years ** (-1 / 3)
        * stellar_mass ** (-2 / 3)
        / math.sqrt(1 - eccentricity**2)
    )


def transit_probability(stellar_radius: float, semi_major_axis: AU) -> float:
    """Geometric transit probability R*/a, clipped to [0, 1].

    Args:
        stellar_radius: Solar radii
        semi_major_axis: AU
    """
    _require_positive("Stellar radius", stellar_radius)
    _require_positive("Semi-major axis", semi_major_axis)
    return min(1.0, stellar_radius * SOLAR_RADIUS_AU / semi_major_axis)
