"""Archetype definition models.

A SolarSystemTypeDefinition is the static description of one system class:
baseline stellar, orbital, disk and habitability parameters plus the
metadata the generator and gameplay layers read. Definitions are built once
by the registry and never mutated.
"""

from dataclasses import dataclass
from typing import Tuple

from .enums import (
    ArchitectureKind,
    FormationMechanism,
    MigrationType,
    ObservationalStatus,
    ResonanceType,
    SolarSystemClass,
    StellarMultiplicity,
)


@dataclass(frozen=True)
class StellarProperties:
    """Baseline stellar parameters for an archetype."""

    primary_mass: float  # Solar masses
    primary_age: float  # years
    primary_metallicity: float  # [Fe/H]
    primary_temperature: float  # K
    primary_luminosity: float  # Solar luminosities
    main_sequence_lifetime: float  # years (0 for remnants)
    current_evolution_phase: str = "main_sequence"
    secondary_mass: float = 0.0  # Solar masses
    binary_period: float = 0.0  # days
    binary_eccentricity: float = 0.0
    binary_inclination: float = 0.0  # degrees
    binary_separation: float = 0.0  # AU
    tertiary_mass: float = 0.0  # Solar masses
    tertiary_period: float = 0.0  # years
    tertiary_separation: float = 0.0  # AU
    stellar_wind_mass_loss_rate: float = 0.0  # Solar masses/year
    magnetic_field_strength: float = 1.0  # Gauss
    stellar_activity_level: float = 0.1  # 0-1

    def __post_init__(self):
        if self.primary_mass <= 0:
            raise ValueError(f"Invalid primary_mass: {self.primary_mass} (must be > 0)")
        if self.primary_age < 0:
            raise ValueError(f"Invalid primary_age: {self.primary_age} (must be >= 0)")
        if self.secondary_mass < 0 or self.tertiary_mass < 0:
            raise ValueError(
                f"Invalid companion masses: {self.secondary_mass}, {self.tertiary_mass} "
                "(must be >= 0)"
            )
        if not (0 <= self.binary_eccentricity < 1):
            raise ValueError(
                f"Invalid binary_eccentricity: {self.binary_eccentricity} (must be 0-1)"
            )
        if not (0 <= self.stellar_activity_level <= 1):
            raise ValueError(
                f"Invalid stellar_activity_level: {self.stellar_activity_level} (must be 0-1)"
            )


@dataclass(frozen=True)
class OrbitalDynamics:
    """Baseline dynamical parameters for an archetype."""

    total_angular_momentum: float  # kg m^2 / s
    system_age: float  # years
    dynamical_stability: float  # 0-1 (1 = stable)
    kozai_timescale: float  # years (0 = not applicable)
    migration_timescale: float  # years
    disk_lifetime: float  # years
    gas_dissipation_time: float  # years
    resonance_strength: float
    libration_amplitude: float  # degrees
    chaos_parameter: float  # Lyapunov exponent
    tidal_q_factor: float
    tidal_circularization_time: float  # years
    tidal_heating_rate: float  # W
    impact_velocity: float  # km/s
    collision_probability: float  # per year
    debris_production_rate: float  # kg/year

    def __post_init__(self):
        if not (0 <= self.dynamical_stability <= 1):
            raise ValueError(
                f"Invalid dynamical_stability: {self.dynamical_stability} (must be 0-1)"
            )
        if self.chaos_parameter < 0:
            raise ValueError(f"Invalid chaos_parameter: {self.chaos_parameter} (must be >= 0)")


@dataclass(frozen=True)
class DiskProperties:
    """Protoplanetary and debris disk parameters for an archetype."""

    disk_mass: float = 0.0  # Solar masses
    disk_radius: float = 0.0  # AU
    disk_scale_height: float = 0.0  # AU
    disk_temperature: float = 0.0  # K
    disk_viscosity: float = 0.0  # alpha parameter
    dust_to_gas_ratio: float = 0.0
    grain_size_distribution: float = 0.0  # power-law index
    settling_timescale: float = 0.0  # years
    debris_disk_mass: float = 0.0  # Earth masses
    debris_disk_radius: float = 0.0  # AU
    collisional_age: float = 0.0  # years
    stirring_mechanism: str = "none"
    photoevaporation_rate: float = 0.0  # Solar masses/year
    disk_dissipation_time: float = 0.0  # years
    transitional_disk_phase: bool = False

    def __post_init__(self):
        if self.disk_mass < 0 or self.debris_disk_mass < 0:
            raise ValueError(
                f"Invalid disk masses: {self.disk_mass}, {self.debris_disk_mass} (must be >= 0)"
            )
        if self.disk_mass > 0 and self.disk_radius <= 0:
            raise ValueError(f"Invalid disk_radius: {self.disk_radius} (disk has mass)")
        if self.debris_disk_mass > 0 and self.debris_disk_radius <= 0:
            raise ValueError(
                f"Invalid debris_disk_radius: {self.debris_disk_radius} (debris has mass)"
            )


@dataclass(frozen=True)
class HabitabilityZone:
    """Habitable-zone boundaries around a star, in AU."""

    inner_edge: float
    outer_edge: float
    optimum_zone: float
    snow_line: float
    tidally_locked_zone: float
    runaway_greenhouse_zone: float
    maximum_greenhouse_zone: float
    habitable_planets: int = 0

    def __post_init__(self):
        if not (0 < self.inner_edge < self.outer_edge):
            raise ValueError(
                f"Invalid habitable zone: inner {self.inner_edge}, outer {self.outer_edge} "
                "(must satisfy 0 < inner < outer)"
            )
        if self.habitable_planets < 0:
            raise ValueError(
                f"Invalid habitable_planets: {self.habitable_planets} (must be >= 0)"
            )

    def contains(self, semi_major_axis: float) -> bool:
        """Check whether an orbit lies inside the zone (edges inclusive)."""
        return self.inner_edge <= semi_major_axis <= self.outer_edge


@dataclass(frozen=True)
class SolarSystemTypeDefinition:
    """Immutable archetype for one SolarSystemClass."""

    system_class: SolarSystemClass
    name: str
    description: str
    real_world_example: str
    observational_status: ObservationalStatus

    # Architecture
    stellar_multiplicity: StellarMultiplicity
    number_of_stars: int
    number_of_planets: Tuple[int, int]  # inclusive [min, max]
    planet_mass_range: Tuple[float, float]  # log10 Earth masses
    orbital_period_range: Tuple[float, float]  # log10 days
    architecture: ArchitectureKind

    # Physical baselines
    stellar_properties: StellarProperties
    orbital_dynamics: OrbitalDynamics
    disk_properties: DiskProperties
    habitability_zone: HabitabilityZone

    # Formation and evolution
    formation_mechanisms: Tuple[FormationMechanism, ...]
    formation_timescale: float  # years
    formation_efficiency: float  # 0-1
    migration_history: Tuple[MigrationType, ...]
    resonance_types: Tuple[ResonanceType, ...]

    # Observables
    transit_probability: float  # 0-1
    radial_velocity_amplitude: float  # m/s
    astrometric_signal: float  # microarcseconds
    photometric_variability: float  # ppm

    # Stability
    hill_stability_factor: float
    lyapunov_timescale: float  # years
    collisional_timescale: float  # years
    escape_timescale: float  # years

    # Environment
    galactic_environment: str
    stellar_density: float  # stars/pc^3
    encounter_rate: float  # encounters/Myr
    supernova_rate: float  # SN/Myr/kpc^2

    # Gameplay
    discoverability: float  # 0-1 (rarer = lower)
    scientific_value: int  # 1-10
    colonization_difficulty: int  # 1-10
    resource_abundance: int  # 1-10
    exploration_challenges: Tuple[str, ...] = ()
    unique_features: Tuple[str, ...] = ()
    astrophysical_processes: Tuple[str, ...] = ()

    # Planets orbit the combined stellar mass rather than the primary
    circumbinary: bool = False

    def __post_init__(self):
        """Validate archetype invariants."""
        low, high = self.number_of_planets
        if not (0 <= low <= high):
            raise ValueError(
                f"Invalid number_of_planets: {self.number_of_planets} (need 0 <= min <= max)"
            )
        if self.number_of_stars < 1:
            raise ValueError(f"Invalid number_of_stars: {self.number_of_stars} (must be >= 1)")
        if self.planet_mass_range[0] > self.planet_mass_range[1]:
            raise ValueError(f"Invalid planet_mass_range: {self.planet_mass_range}")
        if self.orbital_period_range[0] > self.orbital_period_range[1]:
            raise ValueError(f"Invalid orbital_period_range: {self.orbital_period_range}")
        if not (0 <= self.discoverability <= 1):
            raise ValueError(f"Invalid discoverability: {self.discoverability} (must be 0-1)")
        if not (0 <= self.transit_probability <= 1):
            raise ValueError(
                f"Invalid transit_probability: {self.transit_probability} (must be 0-1)"
            )
        if not (0 <= self.formation_efficiency <= 1):
            raise ValueError(
                f"Invalid formation_efficiency: {self.formation_efficiency} (must be 0-1)"
            )
        for field_name in ("scientific_value", "colonization_difficulty", "resource_abundance"):
            value = getattr(self, field_name)
            if not (1 <= value <= 10):
                raise ValueError(f"Invalid {field_name}: {value} (must be 1-10)")
