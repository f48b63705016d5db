"""Time-step evolution of a generated configuration."""

import logging
import math
from dataclasses import replace

from ..errors import EvolutionInputError
from ..models.system_config import SystemConfig
from ..models.system_type import HabitabilityZone
from ..physics.orbital import kepler_period
from ..physics.planetary import classify_planet_type
from ..physics.stellar import (
    calculate_habitability_zone,
    describe_star,
    main_sequence_lifetime,
)
from ..utils.constants import (
    EVOLUTION_EXPANSION_FACTOR,
    EVOLUTION_MIGRATION_SCALE,
    HABITABLE_MASS_RANGE,
    MAIN_SEQUENCE_PHASES,
)
from ..utils.units import AU, EarthMasses, SolarMasses, Years

logger = logging.getLogger(__name__)


def stellar_luminosities(
    masses: tuple[SolarMasses, ...], primary_phase: str
) -> tuple[float, ...]:
    """Luminosity of each star; companions are always on the main sequence."""
    return tuple(
        describe_star(mass, primary_phase if i == 0 else "main_sequence").luminosity
        for i, mass in enumerate(masses)
    )


def habitable_planet_indices(
    semi_major_axes: tuple[AU, ...], masses: tuple[EarthMasses, ...], zone: HabitabilityZone
) -> tuple[int, ...]:
    """Indices of planets inside the zone with a habitable mass."""
    low, high = HABITABLE_MASS_RANGE
    return tuple(
        i
        for i, (a, mass) in enumerate(zip(semi_major_axes, masses))
        if zone.contains(a) and low <= mass <= high
    )


def evolve_system(config: SystemConfig, time_step: Years) -> SystemConfig:
    """Advance a configuration by time_step years.

    Stellar ages and the system age grow by the step. A main-sequence
    primary that outlives its main-sequence lifetime becomes a red giant.
    Steps longer than primary_mass * 1e8 years widen every orbit by 10% and
    recompute periods from Kepler's law. Luminosities, the habitable zone,
    the habitable-planet list and planet type tags are then recomputed so the
    result stays self-consistent.

    Args:
        config: Configuration to evolve
        time_step: Years to advance (finite, >= 0)

    Returns:
        New configuration; the input is unchanged

    Raises:
        EvolutionInputError: If config is not a SystemConfig or the step is
            negative or not finite
    """
    if not isinstance(config, SystemConfig):
        raise EvolutionInputError(f"Invalid config: expected SystemConfig, got {type(config).__name__}")
    if not isinstance(time_step, (int, float)) or not math.isfinite(time_step) or time_step < 0:
        raise EvolutionInputError(f"Invalid time_step: {time_step} (must be finite and >= 0)")

    system_age = config.system_age + time_step
    ages = tuple(age + time_step for age in config.stellar_ages)

    phase = config.primary_phase
    if phase in MAIN_SEQUENCE_PHASES and ages[0] > main_sequence_lifetime(config.primary_mass):
        logger.debug(f"Primary left the main sequence at {ages[0]:.3g} yr")
        phase = "red_giant"

    axes = config.semi_major_axes
    periods = config.orbital_periods
    if time_step > config.primary_mass * EVOLUTION_MIGRATION_SCALE:
        axes = tuple(a * EVOLUTION_EXPANSION_FACTOR for a in axes)
        periods = tuple(kepler_period(a, config.central_mass) for a in axes)

    luminosities = stellar_luminosities(config.stellar_masses, phase)
    zone = calculate_habitability_zone(sum(luminosities))

    return replace(
        config,
        stellar_ages=ages,
        stellar_luminosities=luminosities,
        primary_phase=phase,
        system_age=system_age,
        semi_major_axes=axes,
        orbital_periods=periods,
        planet_types=tuple(
            classify_planet_type(mass, a) for mass, a in zip(config.masses, axes)
        ),
        habitability_zone=zone,
        habitable_planets=habitable_planet_indices(axes, config.masses, zone),
        show_stellar_evolution=phase != "main_sequence",
    )
