"""Planetary architecture strategies.

Each strategy lays out periods, semi-major axes, eccentricities,
inclinations and masses for N planets around a central mass, drawing from
the caller's RNG. Orbits always come out sorted by increasing distance.
"""

from typing import Callable, NamedTuple, Tuple

from ..models.enums import ArchitectureKind
from ..physics.orbital import kepler_period, kepler_semi_major_axis
from ..physics.planetary import classify_planet_type
from ..utils.constants import (
    COMPACT_BASE_PERIOD,
    COMPACT_PERIOD_RATIO,
    RESONANT_BASE_PERIOD,
    RESONANT_CHAIN_RATIOS,
    TERRESTRIAL_BOUNDARY,
    TITIUS_BODE_BASE,
    TITIUS_BODE_RATIO,
)
from ..utils.rng import SystemRNG
from ..utils.units import AU, Days, EarthMasses, SolarMasses


class PlanetLayout(NamedTuple):
    """Parallel per-planet arrays produced by a strategy."""

    periods: Tuple[Days, ...]
    semi_major_axes: Tuple[AU, ...]
    eccentricities: Tuple[float, ...]
    inclinations: Tuple[float, ...]  # degrees
    masses: Tuple[EarthMasses, ...]

    @property
    def planet_types(self) -> Tuple[str, ...]:
        return tuple(
            classify_planet_type(mass, a) for mass, a in zip(self.masses, self.semi_major_axes)
        )


def compact_architecture(
    rng: SystemRNG, number_of_planets: int, central_mass: SolarMasses
) -> PlanetLayout:
    """Tightly packed short-period planets.

    The first planet sits at 1.5 days; each further planet multiplies the
    previous period by a ratio drawn from [1.5, 1.8).
    """
    periods, axes, eccs, incs, masses = [], [], [], [], []
    period = COMPACT_BASE_PERIOD

    for i in range(number_of_planets):
        if i > 0:
            period *= rng.uniform(*COMPACT_PERIOD_RATIO)
        periods.append(period)
        axes.append(kepler_semi_major_axis(period, central_mass))
        eccs.append(rng.uniform(0, 0.05))
        incs.append(rng.uniform(0, 2))
        masses.append(rng.uniform(0.3, 3))

    return PlanetLayout(tuple(periods), tuple(axes), tuple(eccs), tuple(incs), tuple(masses))


def resonant_chain_architecture(
    rng: SystemRNG, number_of_planets: int, central_mass: SolarMasses
) -> PlanetLayout:
    """Chain of super-Earths in successive first-order resonances.

    Starting at 5 days, each period is the previous one times the next ratio
    of the 3/2, 4/3, 5/4, 6/5, 7/6 cycle.
    """
    periods, axes, eccs, incs, masses = [], [], [], [], []
    period = RESONANT_BASE_PERIOD

    for i in range(number_of_planets):
        periods.append(period)
        axes.append(kepler_semi_major_axis(period, central_mass))
        eccs.append(rng.uniform(0, 0.02))
        incs.append(rng.uniform(0, 1))
        masses.append(rng.uniform(1, 10))
        period *= RESONANT_CHAIN_RATIOS[i % len(RESONANT_CHAIN_RATIOS)]

    return PlanetLayout(tuple(periods), tuple(axes), tuple(eccs), tuple(incs), tuple(masses))


def gas_giant_architecture(
    rng: SystemRNG, number_of_planets: int, central_mass: SolarMasses
) -> PlanetLayout:
    """Giants in the inner half of the system, small planets beyond.

    Orbits are drawn uniformly from [0.5, 20) AU and sorted before masses are
    assigned, so "inner" means inner by distance.
    """
    axes = sorted(rng.uniform(0.5, 20) for _ in range(number_of_planets))
    eccs, incs, masses = [], [], []

    for i in range(number_of_planets):
        eccs.append(rng.uniform(0, 0.3))
        incs.append(rng.uniform(0, 5))
        if i < number_of_planets / 2:
            masses.append(rng.uniform(50, 500))
        else:
            masses.append(rng.uniform(0.5, 5))

    periods = tuple(kepler_period(a, central_mass) for a in axes)
    return PlanetLayout(periods, tuple(axes), tuple(eccs), tuple(incs), tuple(masses))


def rocky_architecture(
    rng: SystemRNG, number_of_planets: int, central_mass: SolarMasses
) -> PlanetLayout:
    """Terrestrial planets scattered over [0.3, 3) AU."""
    axes = sorted(rng.uniform(0.3, 3) for _ in range(number_of_planets))
    eccs, incs, masses = [], [], []

    for _ in range(number_of_planets):
        eccs.append(rng.uniform(0, 0.1))
        incs.append(rng.uniform(0, 3))
        masses.append(rng.uniform(0.1, 8))

    periods = tuple(kepler_period(a, central_mass) for a in axes)
    return PlanetLayout(periods, tuple(axes), tuple(eccs), tuple(incs), tuple(masses))


def standard_architecture(
    rng: SystemRNG, number_of_planets: int, central_mass: SolarMasses
) -> PlanetLayout:
    """Titius-Bode-like spacing a_i = 0.4 * 1.7^i.

    Planets inside 2 AU are terrestrial (0.1-2 Earth masses), planets beyond
    are giants (10-300 Earth masses).
    """
    axes = tuple(TITIUS_BODE_BASE * TITIUS_BODE_RATIO**i for i in range(number_of_planets))
    eccs, incs, masses = [], [], []

    for a in axes:
        eccs.append(rng.uniform(0, 0.2))
        incs.append(rng.uniform(0, 5))
        if a < TERRESTRIAL_BOUNDARY:
            masses.append(rng.uniform(0.1, 2))
        else:
            masses.append(rng.uniform(10, 300))

    periods = tuple(kepler_period(a, central_mass) for a in axes)
    return PlanetLayout(periods, axes, tuple(eccs), tuple(incs), tuple(masses))


ARCHITECTURES: dict[ArchitectureKind, Callable[[SystemRNG, int, float], PlanetLayout]] = {
    ArchitectureKind.COMPACT: compact_architecture,
    ArchitectureKind.RESONANT_CHAIN: resonant_chain_architecture,
    ArchitectureKind.GAS_GIANT: gas_giant_architecture,
    ArchitectureKind.ROCKY: rocky_architecture,
    ArchitectureKind.STANDARD: standard_architecture,
}


def generate_architecture(
    kind: ArchitectureKind, rng: SystemRNG, number_of_planets: int, central_mass: SolarMasses
) -> PlanetLayout:
    """Dispatch to the strategy for an architecture kind."""
    return ARCHITECTURES[kind](rng, number_of_planets, central_mass)
