"""Planetary physical relations and derived flags."""

import math

from ..errors import NumericDomainError
from ..models.system_type import HabitabilityZone
from ..utils.constants import (
    AU_M,
    BOLTZMANN,
    DEFAULT_ALBEDO,
    DEFAULT_TIDAL_Q,
    EARTH_MASS_KG,
    EARTH_RADIUS_M,
    GRAVITATIONAL_CONSTANT,
    HABITABLE_TEMPERATURE_RANGE,
    HYDROGEN_MOLECULE_MASS,
    INITIAL_SPIN_PERIOD_HOURS,
    JEANS_ESCAPE_FACTOR,
    MOMENT_OF_INERTIA_FACTOR,
    RING_MASS_THRESHOLD,
    RING_PROBABILITY,
    SECONDS_PER_YEAR,
    SOLAR_LUMINOSITY_W,
    SOLAR_MASS_KG,
    STEFAN_BOLTZMANN,
    TIDAL_LOVE_NUMBER,
)
from ..utils.rng import SystemRNG
from ..utils.units import AU, EarthMasses, SolarMasses, Years


def _require_positive(name: str, value: float):
    if not value > 0:
        raise NumericDomainError(f"{name} must be > 0, got {value}")


def planet_radius(mass: EarthMasses) -> float:
    """Mass-radius relation in Earth units.

    The gas-giant branch has a negative exponent, so radius drops from about
    14.5 to about 0.83 Earth radii across the 100 Earth-mass boundary.

    Args:
        mass: Planet mass in Earth masses

    Returns:
        Radius in Earth radii
    """
    _require_positive("Planet mass", mass)
    if mass < 2:
        return mass**0.27  # rocky
    if mass < 100:
        return mass**0.58  # sub-Neptune
    return mass**-0.04  # gas giant


def equilibrium_temperature(
    semi_major_axis: AU, luminosity: float, albedo: float = DEFAULT_ALBEDO
) -> float:
    """Blackbody equilibrium temperature of a fast rotator.

    T = ((1 - A) L / (16 pi sigma d^2))^(1/4)

    Args:
        semi_major_axis: Orbital distance in AU
        luminosity: Total irradiating luminosity in solar luminosities
        albedo: Bond albedo in [0, 1]

    Returns:
        Temperature in K
    """
    _require_positive("Semi-major axis", semi_major_axis)
    if luminosity < 0:
        raise NumericDomainError(f"Luminosity must be >= 0, got {luminosity}")
    if not (0 <= albedo <= 1):
        raise NumericDomainError(f"Albedo must be in [0, 1], got {albedo}")

    distance = semi_major_axis * AU_M
    absorbed = (1 - albedo) * luminosity * SOLAR_LUMINOSITY_W
    return (absorbed / (16 * math.pi * STEFAN_BOLTZMANN * distance**2)) ** 0.25


def escape_velocity(mass: EarthMasses) -> float:
    """Surface escape velocity in m/s for a planet of the given Earth masses."""
    radius_m = planet_radius(mass) * EARTH_RADIUS_M
    return math.sqrt(2 * GRAVITATIONAL_CONSTANT * mass * EARTH_MASS_KG / radius_m)


def has_atmosphere(mass: EarthMasses, temperature: float) -> bool:
    """Jeans-escape retention test for molecular hydrogen.

    Args:
        mass: Planet mass in Earth masses
        temperature: Equilibrium temperature in K

    Returns:
        True if escape velocity exceeds six times the H2 thermal velocity
    """
    if temperature < 0:
        raise NumericDomainError(f"Temperature must be >= 0, got {temperature}")
    thermal_velocity = math.sqrt(3 * BOLTZMANN * temperature / HYDROGEN_MOLECULE_MASS)
    return escape_velocity(mass) > JEANS_ESCAPE_FACTOR * thermal_velocity


def habitability_score(
    mass: EarthMasses,
    semi_major_axis: AU,
    temperature: float,
    atmosphere: bool,
    zone: HabitabilityZone,
) -> float:
    """Weighted habitability score in [0, 1].

    40% distance from the zone optimum (triangular falloff over the zone
    width), 30% closeness of log10 mass to Earth, 20% liquid-water
    temperature, plus a flat 0.1 for an atmosphere.
    """
    _require_positive("Planet mass", mass)
    width = zone.outer_edge - zone.inner_edge
    if not width > 0:
        raise NumericDomainError(f"Habitable zone width must be > 0, got {width}")

    score = 0.0

    zone_score = 1 - abs(semi_major_axis - zone.optimum_zone) / width
    score += max(0.0, zone_score) * 0.4

    mass_score = 1 - abs(math.log10(mass)) / 2
    score += max(0.0, mass_score) * 0.3

    low, high = HABITABLE_TEMPERATURE_RANGE
    if low < temperature < high:
        score += 0.2

    if atmosphere:
        score += 0.1

    return min(1.0, max(0.0, score))


def moon_count(mass: EarthMasses, rng: SystemRNG) -> int:
    """Draw a moon count from mass bands."""
    if mass < 0.1:
        return 0
    if mass < 1:
        return 1 if rng.random() < 0.5 else 0
    if mass < 10:
        return int(rng.random() * 3)
    if mass < 100:
        return int(rng.random() * 20)
    return int(rng.random() * 80)  # Jupiter-like


def has_rings(mass: EarthMasses, rng: SystemRNG) -> bool:
    """Giant planets above the threshold mass get rings 30% of the time.

    The draw only happens for qualifying masses.
    """
    return mass > RING_MASS_THRESHOLD and rng.random() < RING_PROBABILITY


def tidal_locking_time(
    mass: EarthMasses,
    radius: float,
    semi_major_axis: AU,
    stellar_mass: SolarMasses,
    q_factor: float = DEFAULT_TIDAL_Q,
) -> Years:
    """Tidal despinning timescale (Gladman et al. 1996).

    t = w a^6 I Q / (3 G M*^2 k2 R^5) with I = 0.4 m R^2, an initial spin
    period of 12 hours and k2 = 0.3.

    Args:
        mass: Planet mass in Earth masses
        radius: Planet radius in Earth radii
        semi_major_axis: Orbit in AU
        stellar_mass: Host mass in solar masses
        q_factor: Tidal dissipation quality factor

    Returns:
        Timescale in years
    """
    _require_positive("Planet mass", mass)
    _require_positive("Planet radius", radius)
    _require_positive("Semi-major axis", semi_major_axis)
    _require_positive("Stellar mass", stellar_mass)
    _require_positive("Tidal Q", q_factor)

    mass_kg = mass * EARTH_MASS_KG
    radius_m = radius * EARTH_RADIUS_M
    distance = semi_major_axis * AU_M
    star_kg = stellar_mass * SOLAR_MASS_KG

    spin_rate = 2 * math.pi / (INITIAL_SPIN_PERIOD_HOURS * 3600)
    moment_of_inertia = MOMENT_OF_INERTIA_FACTOR * mass_kg * radius_m**2

    seconds = (spin_rate * distance**6 * moment_of_inertia * q_factor) / (
        3 * GRAVITATIONAL_CONSTANT * star_kg**2 * TIDAL_LOVE_NUMBER * radius_m**5
    )
    return Years(seconds / SECONDS_PER_YEAR)


def is_tidally_locked(
    mass: EarthMasses, semi_major_axis: AU, stellar_mass: SolarMasses, system_age: Years
) -> bool:
    """Planet is locked if despinning finishes within the system age."""
    locking_time = tidal_locking_time(
        mass, planet_radius(mass), semi_major_axis, stellar_mass
    )
    return locking_time < system_age


def classify_planet_type(mass: EarthMasses, semi_major_axis: AU) -> str:
    """Type tag from mass (Earth masses) and distance (AU)."""
    if mass < 0.3:
        return "mercury_like"
    if mass < 2 and semi_major_axis < 1:
        return "venus_like"
    if mass < 2:
        return "earth_like"
    if mass < 10:
        return "super_earth"
    if mass < 30:
        return "mini_neptune"
    if mass < 100:
        return "neptune_like"
    return "jupiter_like"
