"""Summary statistics for a generated system.

Every metric is a pure function of the configuration, archetype, bodies and
dynamics passed in, so statistics can be recomputed at any time and always
match the result they describe.
"""

from typing import Sequence

from ..models.disk import DiskData
from ..models.dynamics import DynamicsData
from ..models.enums import ObservationalStatus
from ..models.planet import PlanetData
from ..models.star import StarData
from ..models.statistics import SolarSystemStatistics
from ..models.system_config import SystemConfig
from ..models.system_type import SolarSystemTypeDefinition
from ..physics.orbital import (
    orbital_angular_momentum,
    radial_velocity_semi_amplitude,
    transit_probability,
)
from ..physics.stellar import main_sequence_lifetime
from ..registry.classification import calculate_system_habitability
from ..utils.constants import MAIN_SEQUENCE_PHASES, MAX_ORBIT_RESOLUTION
from ..utils.units import earth_to_solar_masses


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def _orbital_spacing(planets: Sequence[PlanetData]) -> float:
    """Mean ratio of neighbouring semi-major axes (0 with fewer than two planets)."""
    ratios = [
        outer.semi_major_axis / inner.semi_major_axis
        for inner, outer in zip(planets, planets[1:])
    ]
    return _mean(ratios)


def calculate_statistics(
    config: SystemConfig,
    system_type: SolarSystemTypeDefinition,
    planets: Sequence[PlanetData],
    stars: Sequence[StarData],
    disks: Sequence[DiskData],
    dynamics: DynamicsData,
) -> SolarSystemStatistics:
    """Reduce a generated system to its summary metrics.

    Empty planet sets give 0.0 for every orbital aggregate and observable
    derived from planets. The Hill factor is taken from the dynamics and is
    inf for fewer than two planets.

    Args:
        config: Configuration the bodies were generated from
        system_type: Archetype of the configuration
        planets: Generated planets, ordered by distance
        stars: Generated stars, primary first
        disks: Generated disks
        dynamics: Dynamics analysis of the configuration

    Returns:
        SolarSystemStatistics for the system
    """
    axes = [p.semi_major_axis for p in planets]
    total_stellar_mass = sum(s.mass for s in stars)
    total_planetary_mass = sum(p.mass for p in planets)
    system_radius = max(axes) if axes else 0.0

    # Resonances
    if dynamics.resonances:
        strongest = max(dynamics.resonances, key=lambda r: r.strength)
        strongest_ratio = strongest.ratio
        resonance_strength = strongest.strength
    else:
        strongest_ratio = (1, 1)
        resonance_strength = 0.0

    # Habitability
    habitability = calculate_system_habitability(
        config.habitability_zone,
        system_type.orbital_dynamics.dynamical_stability,
        system_type.stellar_properties.stellar_activity_level,
        planets,
    )
    atmospheric_retention = (
        sum(1 for p in planets if p.atmosphere) / len(planets) if planets else 0.0
    )

    # Observables
    if planets:
        transit = transit_probability(stars[0].radius, planets[0].semi_major_axis)
        heaviest = max(planets, key=lambda p: p.mass)
        rv_amplitude = radial_velocity_semi_amplitude(
            heaviest.mass, heaviest.period, heaviest.eccentricity, config.central_mass
        )
    else:
        transit = 0.0
        rv_amplitude = 0.0

    # Evolution
    if config.primary_phase in MAIN_SEQUENCE_PHASES:
        remaining = max(0.0, main_sequence_lifetime(config.primary_mass) - config.system_age)
    else:
        remaining = 0.0
    predictions = dynamics.evolution_prediction

    return SolarSystemStatistics(
        total_system_mass=total_stellar_mass + earth_to_solar_masses(total_planetary_mass),
        system_radius=system_radius,
        total_angular_momentum=sum(
            orbital_angular_momentum(p.mass, p.semi_major_axis, p.eccentricity, config.central_mass)
            for p in planets
        ),
        system_age=config.system_age,
        total_stellar_mass=total_stellar_mass,
        total_stellar_luminosity=sum(s.luminosity for s in stars),
        combined_stellar_temperature=_mean([s.temperature for s in stars]),
        stellar_metallicity=config.metallicity,
        total_planetary_mass=total_planetary_mass,
        rocky_planet_count=sum(1 for p in planets if p.mass < 10),
        gas_giant_count=sum(1 for p in planets if p.mass >= 100),
        ice_giant_count=sum(1 for p in planets if 10 <= p.mass < 100),
        habitable_planet_count=sum(1 for p in planets if p.habitability > 0.5),
        inner_most_orbit=min(axes) if axes else 0.0,
        outer_most_orbit=system_radius,
        orbital_spacing=_orbital_spacing(planets),
        eccentricity_mean=_mean([p.eccentricity for p in planets]),
        inclination_mean=_mean([p.inclination for p in planets]),
        resonant_pairs=len(dynamics.resonances),
        strongest_resonance=strongest_ratio,
        resonance_strength=resonance_strength,
        libration_amplitude=system_type.orbital_dynamics.libration_amplitude,
        hill_stability_factor=dynamics.hill_stability_factor,
        lyapunov_timescale=system_type.lyapunov_timescale,
        dynamical_lifetime=dynamics.stability_analysis.timescale,
        collisional_lifetime=system_type.collisional_timescale,
        habitable_zone_range=(
            config.habitability_zone.inner_edge,
            config.habitability_zone.outer_edge,
        ),
        habitability_score=habitability,
        water_delivery_potential=habitability * 0.8,
        atmospheric_retention_factor=atmospheric_retention,
        formation_timescale=system_type.formation_timescale,
        migration_extent=system_radius * 0.5,
        disk_dissipation_time=system_type.disk_properties.disk_dissipation_time,
        bombardment_intensity=(1e6 / config.system_age) * 1e6 if config.system_age > 0 else 0.0,
        transit_probability=transit,
        rv_amplitude=rv_amplitude,
        astrometric_signal=system_type.astrometric_signal,
        infrared_excess=1.5 if disks else 1.0,
        stellar_evolution_phase=config.primary_phase,
        remaining_main_sequence_time=remaining,
        future_habitability_changes=tuple(p for p in predictions if "habitable" in p),
        system_evolution_predictions=predictions,
        complexity_level=min(5, len(planets) // 2 + (len(stars) - 1) + len(disks)),
        physics_accuracy=(
            1.0 if system_type.observational_status == ObservationalStatus.CONFIRMED else 0.7
        ),
        visual_fidelity=config.orbit_resolution / MAX_ORBIT_RESOLUTION,
    )
