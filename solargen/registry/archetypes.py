"""Archetype table: one SolarSystemTypeDefinition per SolarSystemClass.

The single-star, binary, compact, resonant-chain, debris-rich, protoplanetary
and post-stellar archetypes are hand-tuned against their real-world
prototypes. The remaining classes start from those and override what
distinguishes them. Their stellar temperature, luminosity and habitable zone
are derived from the stellar mass and phase.
"""

from dataclasses import replace
from typing import Dict

from ..models.enums import (
    ArchitectureKind,
    FormationMechanism,
    MigrationType,
    ObservationalStatus,
    ResonanceType,
    SolarSystemClass,
    StellarMultiplicity,
)
from ..models.system_type import (
    DiskProperties,
    HabitabilityZone,
    OrbitalDynamics,
    SolarSystemTypeDefinition,
    StellarProperties,
)
from ..physics.stellar import (
    calculate_habitability_zone,
    describe_star,
    main_sequence_lifetime,
    mass_to_luminosity,
)
from ..utils.constants import REMNANT_PROFILES

# ---------------------------------------------------------------------------
# Shared building blocks
# ---------------------------------------------------------------------------

_SOLAR_DYNAMICS = OrbitalDynamics(
    total_angular_momentum=3.15e43,
    system_age=4.6e9,
    dynamical_stability=0.99,
    kozai_timescale=0,
    migration_timescale=1e8,
    disk_lifetime=3e6,
    gas_dissipation_time=3e6,
    resonance_strength=0.1,
    libration_amplitude=10,
    chaos_parameter=1e-7,
    tidal_q_factor=100,
    tidal_circularization_time=1e9,
    tidal_heating_rate=1e14,
    impact_velocity=20,
    collision_probability=1e-8,
    debris_production_rate=1e12,
)

_BINARY_DYNAMICS = OrbitalDynamics(
    total_angular_momentum=1e43,
    system_age=3e9,
    dynamical_stability=0.85,
    kozai_timescale=1e5,
    migration_timescale=5e7,
    disk_lifetime=1e6,
    gas_dissipation_time=1e6,
    resonance_strength=0.3,
    libration_amplitude=30,
    chaos_parameter=1e-5,
    tidal_q_factor=50,
    tidal_circularization_time=1e8,
    tidal_heating_rate=1e15,
    impact_velocity=30,
    collision_probability=1e-7,
    debris_production_rate=1e13,
)

_ASTEROID_BELT = DiskProperties(
    debris_disk_mass=1e-6,
    debris_disk_radius=3,
    collisional_age=4.6e9,
    stirring_mechanism="planetary_perturbations",
    disk_dissipation_time=3e6,
)

_CIRCUMBINARY_DISK = DiskProperties(
    disk_mass=0.01,
    disk_radius=5,
    disk_scale_height=0.5,
    disk_temperature=150,
    disk_viscosity=0.01,
    dust_to_gas_ratio=0.01,
    grain_size_distribution=-3.5,
    settling_timescale=1e5,
    debris_disk_mass=1e-5,
    debris_disk_radius=5,
    collisional_age=3e9,
    stirring_mechanism="binary_perturbations",
    photoevaporation_rate=1e-10,
    disk_dissipation_time=1e6,
)

_NO_DISK = DiskProperties()


def _stellar(mass: float, age: float, phase: str = "main_sequence", **kwargs) -> StellarProperties:
    """Stellar baseline with temperature and luminosity derived from mass and phase."""
    description = describe_star(mass, phase)
    lifetime = 0.0 if phase in REMNANT_PROFILES else main_sequence_lifetime(mass)
    metallicity = kwargs.pop("metallicity", 0.0)
    return StellarProperties(
        primary_mass=mass,
        primary_age=age,
        primary_metallicity=metallicity,
        primary_temperature=description.temperature,
        primary_luminosity=description.luminosity,
        main_sequence_lifetime=lifetime,
        current_evolution_phase=phase,
        **kwargs,
    )


def _baseline_luminosity(stellar: StellarProperties) -> float:
    luminosity = stellar.primary_luminosity
    for companion in (stellar.secondary_mass, stellar.tertiary_mass):
        if companion > 0:
            luminosity += mass_to_luminosity(companion)
    return luminosity


# ---------------------------------------------------------------------------
# Hand-tuned archetypes
# ---------------------------------------------------------------------------

SINGLE_STAR = SolarSystemTypeDefinition(
    system_class=SolarSystemClass.SINGLE_STAR,
    name="Single-Star System",
    description="Solar system with one central star, like our own Solar System",
    real_world_example="Solar System, Kepler-442, HD 40307",
    observational_status=ObservationalStatus.CONFIRMED,
    stellar_multiplicity=StellarMultiplicity.SINGLE,
    number_of_stars=1,
    number_of_planets=(0, 15),
    planet_mass_range=(-2, 3),
    orbital_period_range=(-1, 4),
    architecture=ArchitectureKind.STANDARD,
    stellar_properties=StellarProperties(
        primary_mass=1.0,
        primary_age=4.6e9,
        primary_metallicity=0.0,
        primary_temperature=5778,
        primary_luminosity=1.0,
        main_sequence_lifetime=10e9,
        stellar_wind_mass_loss_rate=2e-14,
        magnetic_field_strength=1,
        stellar_activity_level=0.1,
    ),
    orbital_dynamics=_SOLAR_DYNAMICS,
    disk_properties=_ASTEROID_BELT,
    habitability_zone=HabitabilityZone(
        inner_edge=0.95,
        outer_edge=1.67,
        optimum_zone=1.0,
        snow_line=2.7,
        tidally_locked_zone=0.1,
        runaway_greenhouse_zone=0.84,
        maximum_greenhouse_zone=1.67,
        habitable_planets=1,
    ),
    formation_mechanisms=(FormationMechanism.CORE_ACCRETION,),
    formation_timescale=100e6,
    formation_efficiency=0.1,
    migration_history=(MigrationType.TYPE_II,),
    resonance_types=(ResonanceType.FIRST_ORDER, ResonanceType.SECULAR_RESONANCE),
    transit_probability=0.5,
    radial_velocity_amplitude=0.1,
    astrometric_signal=0.3,
    photometric_variability=10,
    hill_stability_factor=10,
    lyapunov_timescale=5e6,
    collisional_timescale=1e8,
    escape_timescale=1e10,
    galactic_environment="galactic_disk",
    stellar_density=0.14,
    encounter_rate=0.2,
    supernova_rate=1.2,
    discoverability=0.8,
    scientific_value=7,
    colonization_difficulty=3,
    resource_abundance=8,
    exploration_challenges=("asteroid_impacts", "solar_radiation", "orbital_mechanics"),
    unique_features=("habitable_zone", "diverse_planet_types", "stable_orbits", "asteroid_belt"),
    astrophysical_processes=("planetary_formation", "tidal_evolution", "atmospheric_evolution"),
)

BINARY_STAR = replace(
    SINGLE_STAR,
    system_class=SolarSystemClass.BINARY_STAR,
    name="Binary Star System",
    description="System with two stars, supporting circumbinary or S-type planetary orbits",
    real_world_example="Kepler-16, Kepler-47, Alpha Centauri",
    stellar_multiplicity=StellarMultiplicity.CLOSE_BINARY,
    number_of_stars=2,
    number_of_planets=(0, 10),
    planet_mass_range=(-1, 2.5),
    orbital_period_range=(0, 3.5),
    stellar_properties=StellarProperties(
        primary_mass=0.69,
        primary_age=3e9,
        primary_metallicity=-0.3,
        primary_temperature=4450,
        primary_luminosity=0.2,
        main_sequence_lifetime=15e9,
        secondary_mass=0.2,
        binary_period=41.08,
        binary_eccentricity=0.16,
        binary_inclination=90.34,
        binary_separation=0.22,
        stellar_wind_mass_loss_rate=1e-14,
        magnetic_field_strength=10,
        stellar_activity_level=0.3,
    ),
    orbital_dynamics=_BINARY_DYNAMICS,
    disk_properties=_CIRCUMBINARY_DISK,
    habitability_zone=HabitabilityZone(
        inner_edge=0.6,
        outer_edge=1.2,
        optimum_zone=0.9,
        snow_line=1.8,
        tidally_locked_zone=0.3,
        runaway_greenhouse_zone=0.5,
        maximum_greenhouse_zone=1.2,
    ),
    formation_mechanisms=(
        FormationMechanism.CORE_ACCRETION,
        FormationMechanism.GRAVITATIONAL_INSTABILITY,
    ),
    formation_timescale=200e6,
    formation_efficiency=0.05,
    migration_history=(MigrationType.TYPE_I, MigrationType.STOCHASTIC),
    resonance_types=(ResonanceType.MEAN_MOTION, ResonanceType.KOZAI_LIDOV),
    transit_probability=0.3,
    radial_velocity_amplitude=50,
    astrometric_signal=10,
    photometric_variability=1000,
    hill_stability_factor=3,
    lyapunov_timescale=1e4,
    collisional_timescale=1e7,
    escape_timescale=1e8,
    discoverability=0.3,
    scientific_value=9,
    colonization_difficulty=8,
    resource_abundance=6,
    exploration_challenges=("complex_dynamics", "radiation_environment", "tidal_forces"),
    unique_features=(
        "binary_stars",
        "circumbinary_planets",
        "complex_tides",
        "eclipsing_geometry",
    ),
    astrophysical_processes=(
        "binary_evolution",
        "circumbinary_disk_dynamics",
        "kozai_oscillations",
    ),
)

COMPACT_SYSTEM = replace(
    SINGLE_STAR,
    system_class=SolarSystemClass.COMPACT_SYSTEM,
    name="Compact Planetary System",
    description="System with planets packed close to the star in tight, often resonant orbits",
    real_world_example="TRAPPIST-1, Kepler-11, HD 219134",
    number_of_planets=(3, 8),
    planet_mass_range=(-1, 1),
    orbital_period_range=(-1, 1.5),
    architecture=ArchitectureKind.COMPACT,
    stellar_properties=StellarProperties(
        primary_mass=0.089,
        primary_age=7.6e9,
        primary_metallicity=0.04,
        primary_temperature=2511,
        primary_luminosity=0.000525,
        main_sequence_lifetime=12e12,
        stellar_wind_mass_loss_rate=1e-15,
        magnetic_field_strength=600,
        stellar_activity_level=0.8,
    ),
    orbital_dynamics=OrbitalDynamics(
        total_angular_momentum=1e41,
        system_age=7.6e9,
        dynamical_stability=0.95,
        kozai_timescale=0,
        migration_timescale=1e7,
        disk_lifetime=10e6,
        gas_dissipation_time=10e6,
        resonance_strength=0.8,
        libration_amplitude=5,
        chaos_parameter=1e-8,
        tidal_q_factor=50,
        tidal_circularization_time=1e6,
        tidal_heating_rate=1e16,
        impact_velocity=15,
        collision_probability=1e-9,
        debris_production_rate=1e10,
    ),
    disk_properties=DiskProperties(
        disk_mass=0.001,
        disk_radius=1,
        disk_scale_height=0.05,
        disk_temperature=300,
        disk_viscosity=0.001,
        dust_to_gas_ratio=0.01,
        grain_size_distribution=-3.5,
        settling_timescale=1e4,
        debris_disk_mass=1e-8,
        debris_disk_radius=0.5,
        collisional_age=7.6e9,
        stirring_mechanism="planetary_resonances",
        photoevaporation_rate=1e-12,
        disk_dissipation_time=10e6,
    ),
    habitability_zone=HabitabilityZone(
        inner_edge=0.011,
        outer_edge=0.054,
        optimum_zone=0.028,
        snow_line=0.1,
        tidally_locked_zone=0.1,
        runaway_greenhouse_zone=0.009,
        maximum_greenhouse_zone=0.054,
        habitable_planets=3,
    ),
    formation_mechanisms=(FormationMechanism.PEBBLE_ACCRETION, FormationMechanism.CORE_ACCRETION),
    formation_timescale=50e6,
    formation_efficiency=0.2,
    migration_history=(MigrationType.TYPE_I,),
    resonance_types=(ResonanceType.FIRST_ORDER, ResonanceType.LAPLACE_RESONANCE),
    transit_probability=0.8,
    radial_velocity_amplitude=5,
    astrometric_signal=0.1,
    photometric_variability=1000,
    hill_stability_factor=8,
    lyapunov_timescale=1e7,
    collisional_timescale=1e9,
    escape_timescale=1e11,
    discoverability=0.6,
    scientific_value=10,
    colonization_difficulty=9,
    resource_abundance=7,
    exploration_challenges=(
        "tidal_locking",
        "stellar_flares",
        "atmospheric_escape",
        "close_orbits",
    ),
    unique_features=(
        "resonant_chains",
        "tidally_locked_planets",
        "multiple_habitable_worlds",
        "compact_architecture",
    ),
    astrophysical_processes=(
        "tidal_evolution",
        "atmospheric_escape",
        "resonant_capture",
        "stellar_irradiation",
    ),
)

RESONANT_CHAIN = replace(
    SINGLE_STAR,
    system_class=SolarSystemClass.RESONANT_CHAIN,
    name="Resonant Chain System",
    description="System with planets locked in a chain of mean-motion resonances",
    real_world_example="Kepler-223, TOI-178, K2-138",
    number_of_planets=(4, 8),
    planet_mass_range=(-0.5, 1.5),
    orbital_period_range=(0, 2),
    architecture=ArchitectureKind.RESONANT_CHAIN,
    stellar_properties=StellarProperties(
        primary_mass=1.13,
        primary_age=3.5e9,
        primary_metallicity=0.1,
        primary_temperature=5930,
        primary_luminosity=1.5,
        main_sequence_lifetime=8e9,
        stellar_wind_mass_loss_rate=3e-14,
        magnetic_field_strength=2,
        stellar_activity_level=0.2,
    ),
    orbital_dynamics=OrbitalDynamics(
        total_angular_momentum=5e42,
        system_age=3.5e9,
        dynamical_stability=0.98,
        kozai_timescale=0,
        migration_timescale=2e7,
        disk_lifetime=5e6,
        gas_dissipation_time=5e6,
        resonance_strength=0.9,
        libration_amplitude=2,
        chaos_parameter=1e-9,
        tidal_q_factor=100,
        tidal_circularization_time=1e7,
        tidal_heating_rate=1e15,
        impact_velocity=25,
        collision_probability=1e-10,
        debris_production_rate=1e9,
    ),
    disk_properties=DiskProperties(
        disk_mass=0.05,
        disk_radius=10,
        disk_scale_height=0.8,
        disk_temperature=200,
        disk_viscosity=0.005,
        dust_to_gas_ratio=0.01,
        grain_size_distribution=-3.5,
        settling_timescale=5e4,
        debris_disk_mass=1e-6,
        debris_disk_radius=8,
        collisional_age=3.5e9,
        stirring_mechanism="resonant_perturbations",
        photoevaporation_rate=1e-11,
        disk_dissipation_time=5e6,
    ),
    habitability_zone=HabitabilityZone(
        inner_edge=1.1,
        outer_edge=2.0,
        optimum_zone=1.5,
        snow_line=3.0,
        tidally_locked_zone=0.15,
        runaway_greenhouse_zone=0.9,
        maximum_greenhouse_zone=2.0,
    ),
    formation_mechanisms=(FormationMechanism.CORE_ACCRETION, FormationMechanism.PEBBLE_ACCRETION),
    formation_timescale=80e6,
    formation_efficiency=0.15,
    migration_history=(MigrationType.TYPE_I,),
    resonance_types=(
        ResonanceType.FIRST_ORDER,
        ResonanceType.SECOND_ORDER,
        ResonanceType.LAPLACE_RESONANCE,
    ),
    transit_probability=0.9,
    radial_velocity_amplitude=10,
    astrometric_signal=0.5,
    photometric_variability=2000,
    hill_stability_factor=15,
    lyapunov_timescale=1e8,
    collisional_timescale=1e10,
    escape_timescale=1e12,
    discoverability=0.4,
    scientific_value=10,
    colonization_difficulty=6,
    resource_abundance=8,
    exploration_challenges=(
        "precise_navigation",
        "resonant_perturbations",
        "synchronized_dynamics",
    ),
    unique_features=(
        "perfect_resonant_chain",
        "synchronized_orbits",
        "stable_architecture",
        "predictable_dynamics",
    ),
    astrophysical_processes=(
        "resonant_capture",
        "convergent_migration",
        "eccentricity_damping",
    ),
)

DEBRIS_RICH_SYSTEM = replace(
    SINGLE_STAR,
    system_class=SolarSystemClass.DEBRIS_RICH_SYSTEM,
    name="Debris-Rich System",
    description="System with significant dust, debris disks, and ongoing collisional activity",
    real_world_example="Beta Pictoris, Fomalhaut, HR 4796A",
    number_of_planets=(0, 6),
    planet_mass_range=(0, 3),
    orbital_period_range=(1, 4),
    stellar_properties=StellarProperties(
        primary_mass=1.75,
        primary_age=23e6,
        primary_metallicity=0.05,
        primary_temperature=8052,
        primary_luminosity=8.7,
        main_sequence_lifetime=2e9,
        stellar_wind_mass_loss_rate=1e-13,
        magnetic_field_strength=20,
        stellar_activity_level=0.9,
    ),
    orbital_dynamics=OrbitalDynamics(
        total_angular_momentum=1e44,
        system_age=23e6,
        dynamical_stability=0.7,
        kozai_timescale=0,
        migration_timescale=1e6,
        disk_lifetime=100e6,
        gas_dissipation_time=10e6,
        resonance_strength=0.2,
        libration_amplitude=45,
        chaos_parameter=1e-4,
        tidal_q_factor=10,
        tidal_circularization_time=1e5,
        tidal_heating_rate=1e17,
        impact_velocity=50,
        collision_probability=1e-5,
        debris_production_rate=1e15,
    ),
    disk_properties=DiskProperties(
        disk_mass=0.1,
        disk_radius=1000,
        disk_scale_height=10,
        disk_temperature=50,
        disk_viscosity=0.1,
        dust_to_gas_ratio=0.1,
        grain_size_distribution=-3.0,
        settling_timescale=1e6,
        debris_disk_mass=100,
        debris_disk_radius=500,
        collisional_age=23e6,
        stirring_mechanism="planetary_perturbations",
        photoevaporation_rate=1e-9,
        disk_dissipation_time=100e6,
        transitional_disk_phase=True,
    ),
    habitability_zone=HabitabilityZone(
        inner_edge=2.5,
        outer_edge=4.5,
        optimum_zone=3.5,
        snow_line=6.0,
        tidally_locked_zone=0.3,
        runaway_greenhouse_zone=2.0,
        maximum_greenhouse_zone=4.5,
    ),
    formation_mechanisms=(
        FormationMechanism.CORE_ACCRETION,
        FormationMechanism.COLLISION_CASCADE,
    ),
    formation_timescale=500e6,
    formation_efficiency=0.02,
    migration_history=(MigrationType.STOCHASTIC, MigrationType.TYPE_II),
    resonance_types=(ResonanceType.SECULAR_RESONANCE,),
    transit_probability=0.1,
    radial_velocity_amplitude=100,
    astrometric_signal=10,
    photometric_variability=500,
    hill_stability_factor=2,
    lyapunov_timescale=1e3,
    collisional_timescale=1e5,
    escape_timescale=1e7,
    discoverability=0.7,
    scientific_value=9,
    colonization_difficulty=10,
    resource_abundance=4,
    exploration_challenges=(
        "debris_impacts",
        "dust_storms",
        "unstable_orbits",
        "radiation_hazards",
    ),
    unique_features=("massive_debris_disk", "ongoing_collisions", "dust_asymmetries", "young_age"),
    astrophysical_processes=(
        "collisional_cascade",
        "Poynting_Robertson_drag",
        "radiation_pressure",
    ),
)

PROTO_SYSTEM = replace(
    SINGLE_STAR,
    system_class=SolarSystemClass.PROTO_SYSTEM,
    name="Protoplanetary System",
    description="Young system still forming planets from a circumstellar disk",
    real_world_example="HL Tauri, TW Hydrae, HD 163296",
    number_of_planets=(0, 3),
    planet_mass_range=(-1, 2),
    orbital_period_range=(1, 3),
    stellar_properties=StellarProperties(
        primary_mass=0.55,
        primary_age=1e6,
        primary_metallicity=0.0,
        primary_temperature=4000,
        primary_luminosity=0.7,
        main_sequence_lifetime=20e9,
        current_evolution_phase="pre_main_sequence",
        stellar_wind_mass_loss_rate=1e-12,
        magnetic_field_strength=1000,
        stellar_activity_level=1.0,
    ),
    orbital_dynamics=OrbitalDynamics(
        total_angular_momentum=1e42,
        system_age=1e6,
        dynamical_stability=0.5,
        kozai_timescale=0,
        migration_timescale=1e5,
        disk_lifetime=3e6,
        gas_dissipation_time=3e6,
        resonance_strength=0.05,
        libration_amplitude=90,
        chaos_parameter=1e-2,
        tidal_q_factor=1,
        tidal_circularization_time=1e4,
        tidal_heating_rate=1e18,
        impact_velocity=10,
        collision_probability=1e-3,
        debris_production_rate=1e16,
    ),
    disk_properties=DiskProperties(
        disk_mass=0.3,
        disk_radius=100,
        disk_scale_height=8,
        disk_temperature=300,
        disk_viscosity=0.01,
        dust_to_gas_ratio=0.01,
        grain_size_distribution=-3.5,
        settling_timescale=1e4,
        debris_disk_mass=1000,
        debris_disk_radius=100,
        collisional_age=1e6,
        stirring_mechanism="turbulence",
        photoevaporation_rate=1e-8,
        disk_dissipation_time=3e6,
    ),
    habitability_zone=HabitabilityZone(
        inner_edge=0.6,
        outer_edge=1.2,
        optimum_zone=0.9,
        snow_line=2.0,
        tidally_locked_zone=0.1,
        runaway_greenhouse_zone=0.5,
        maximum_greenhouse_zone=1.2,
    ),
    formation_mechanisms=(
        FormationMechanism.CORE_ACCRETION,
        FormationMechanism.STREAMING_INSTABILITY,
    ),
    formation_timescale=10e6,
    formation_efficiency=0.5,
    migration_history=(MigrationType.TYPE_I,),
    resonance_types=(ResonanceType.NONE,),
    transit_probability=0.01,
    radial_velocity_amplitude=1,
    astrometric_signal=0.01,
    photometric_variability=10000,
    hill_stability_factor=1,
    lyapunov_timescale=100,
    collisional_timescale=1e4,
    escape_timescale=1e6,
    galactic_environment="star_forming_region",
    stellar_density=100,
    encounter_rate=10,
    supernova_rate=10,
    discoverability=0.9,
    scientific_value=10,
    colonization_difficulty=10,
    resource_abundance=10,
    exploration_challenges=(
        "disk_turbulence",
        "stellar_variability",
        "formation_chaos",
        "high_temperatures",
    ),
    unique_features=("active_planet_formation", "massive_disk", "gap_structures", "young_star"),
    astrophysical_processes=(
        "disk_accretion",
        "planetesimal_formation",
        "gap_opening",
        "stellar_outflows",
    ),
)

POST_STELLAR_SYSTEM = replace(
    SINGLE_STAR,
    system_class=SolarSystemClass.POST_STELLAR_SYSTEM,
    name="Post-Stellar System",
    description="System around evolved stellar remnants like white dwarfs or pulsars",
    real_world_example="PSR B1257+12, WD 1145+017, PSR J1719-1438",
    number_of_planets=(1, 4),
    planet_mass_range=(-2, 1),
    orbital_period_range=(-2, 2),
    stellar_properties=StellarProperties(
        primary_mass=1.4,
        primary_age=1e9,
        primary_metallicity=0.0,
        primary_temperature=1e6,
        primary_luminosity=0.0001,
        main_sequence_lifetime=0,
        current_evolution_phase="neutron_star",
        stellar_wind_mass_loss_rate=1e-16,
        magnetic_field_strength=1e12,
        stellar_activity_level=0.1,
    ),
    orbital_dynamics=OrbitalDynamics(
        total_angular_momentum=1e40,
        system_age=1e9,
        dynamical_stability=0.9,
        kozai_timescale=0,
        migration_timescale=1e8,
        disk_lifetime=0,
        gas_dissipation_time=0,
        resonance_strength=0.1,
        libration_amplitude=10,
        chaos_parameter=1e-6,
        tidal_q_factor=1000,
        tidal_circularization_time=1e10,
        tidal_heating_rate=1e12,
        impact_velocity=100,
        collision_probability=1e-12,
        debris_production_rate=1e6,
    ),
    disk_properties=DiskProperties(
        debris_disk_mass=1e-10,
        debris_disk_radius=1,
        collisional_age=1e9,
    ),
    habitability_zone=HabitabilityZone(
        inner_edge=0.001,
        outer_edge=0.002,
        optimum_zone=0.0015,
        snow_line=0.01,
        tidally_locked_zone=1,
        runaway_greenhouse_zone=0.0005,
        maximum_greenhouse_zone=0.002,
    ),
    formation_mechanisms=(
        FormationMechanism.STELLAR_CAPTURE,
        FormationMechanism.DISK_FRAGMENTATION,
    ),
    formation_timescale=1e6,
    formation_efficiency=0.001,
    migration_history=(MigrationType.STELLAR_EVOLUTION,),
    resonance_types=(ResonanceType.FIRST_ORDER,),
    transit_probability=0.8,
    radial_velocity_amplitude=1000,
    astrometric_signal=100,
    photometric_variability=100,
    hill_stability_factor=20,
    lyapunov_timescale=1e9,
    collisional_timescale=1e12,
    escape_timescale=1e13,
    discoverability=0.1,
    scientific_value=10,
    colonization_difficulty=10,
    resource_abundance=1,
    exploration_challenges=(
        "intense_radiation",
        "magnetic_fields",
        "tidal_forces",
        "extreme_physics",
    ),
    unique_features=(
        "neutron_star_host",
        "pulsar_timing",
        "extreme_magnetic_fields",
        "post_supernova_formation",
    ),
    astrophysical_processes=(
        "pulsar_emission",
        "magnetospheric_physics",
        "relativistic_effects",
    ),
)


# ---------------------------------------------------------------------------
# Derived archetypes
# ---------------------------------------------------------------------------


def _derived(
    base: SolarSystemTypeDefinition,
    system_class: SolarSystemClass,
    stellar: StellarProperties,
    dynamics: OrbitalDynamics = _SOLAR_DYNAMICS,
    habitable_planets: int = 0,
    **fields,
) -> SolarSystemTypeDefinition:
    """Build an archetype from a base, deriving its habitable zone from the stars."""
    zone = replace(
        calculate_habitability_zone(_baseline_luminosity(stellar)),
        habitable_planets=habitable_planets,
    )
    return replace(
        base,
        system_class=system_class,
        stellar_properties=stellar,
        orbital_dynamics=replace(dynamics, system_age=stellar.primary_age),
        habitability_zone=zone,
        **fields,
    )


TRIPLE_STAR = _derived(
    BINARY_STAR,
    SolarSystemClass.TRIPLE_STAR,
    _stellar(
        1.1,
        5.3e9,
        metallicity=0.2,
        secondary_mass=0.9,
        binary_eccentricity=0.52,
        binary_inclination=79.2,
        binary_separation=23.4,
        tertiary_mass=0.12,
        tertiary_period=5.5e5,
        tertiary_separation=13000,
        magnetic_field_strength=2,
        stellar_activity_level=0.2,
    ),
    dynamics=_BINARY_DYNAMICS,
    name="Triple Star System",
    description="Close stellar pair with a distant third companion",
    real_world_example="Alpha Centauri, LTT 1445, Gliese 667",
    stellar_multiplicity=StellarMultiplicity.HIERARCHICAL_TRIPLE,
    number_of_stars=3,
    number_of_planets=(0, 6),
    disk_properties=_ASTEROID_BELT,
    hill_stability_factor=4,
    discoverability=0.2,
    colonization_difficulty=7,
    unique_features=("triple_sunsets", "kozai_cycles", "wide_companion"),
    astrophysical_processes=("hierarchical_dynamics", "kozai_oscillations", "tidal_truncation"),
)

QUADRUPLE_STAR = _derived(
    BINARY_STAR,
    SolarSystemClass.QUADRUPLE_STAR,
    _stellar(
        1.5,
        2e9,
        secondary_mass=0.41,
        binary_eccentricity=0.21,
        binary_inclination=87.4,
        binary_separation=0.17,
        tertiary_mass=0.99,
        tertiary_period=1.1e4,
        tertiary_separation=1000,
        stellar_activity_level=0.3,
    ),
    dynamics=replace(_BINARY_DYNAMICS, dynamical_stability=0.75, chaos_parameter=5e-5),
    name="Quadruple Star System",
    description="Two stellar pairs bound together, with circumbinary planets around one pair",
    real_world_example="Kepler-64 (PH1), 30 Arietis",
    stellar_multiplicity=StellarMultiplicity.TRAPEZIUM,
    number_of_stars=4,
    number_of_planets=(0, 4),
    hill_stability_factor=3,
    discoverability=0.1,
    scientific_value=10,
    colonization_difficulty=9,
    resource_abundance=5,
    circumbinary=True,
    unique_features=("four_suns", "circumbinary_planets", "nested_orbits"),
    astrophysical_processes=("multiple_star_dynamics", "circumbinary_disk_dynamics"),
)

MULTIPLE_STAR = _derived(
    BINARY_STAR,
    SolarSystemClass.MULTIPLE_STAR,
    _stellar(
        2.0,
        3e8,
        secondary_mass=1.5,
        binary_eccentricity=0.3,
        binary_inclination=60,
        binary_separation=50,
        tertiary_mass=1.0,
        tertiary_period=2e4,
        tertiary_separation=500,
        stellar_activity_level=0.4,
    ),
    dynamics=replace(
        _BINARY_DYNAMICS, dynamical_stability=0.5, chaos_parameter=1e-4, kozai_timescale=5e4
    ),
    name="Multiple Star System",
    description="Five or more gravitationally bound stars with sparse planetary companions",
    real_world_example="Castor, Nu Scorpii, AR Cassiopeiae",
    observational_status=ObservationalStatus.PROBABLE,
    stellar_multiplicity=StellarMultiplicity.TRAPEZIUM,
    number_of_stars=5,
    number_of_planets=(0, 3),
    disk_properties=_NO_DISK,
    hill_stability_factor=2,
    lyapunov_timescale=1e3,
    discoverability=0.05,
    scientific_value=10,
    colonization_difficulty=10,
    resource_abundance=5,
    unique_features=("many_suns", "chaotic_illumination", "stellar_ejections"),
    astrophysical_processes=("few_body_dynamics", "stellar_ejection", "kozai_oscillations"),
)

ROCKY_DOMINATED = _derived(
    SINGLE_STAR,
    SolarSystemClass.ROCKY_DOMINATED,
    _stellar(0.8, 6e9, metallicity=-0.1, stellar_activity_level=0.15),
    name="Rocky-Dominated System",
    description="Inner system of terrestrial planets with no gas giants",
    real_world_example="Kepler-186, Tau Ceti, Gliese 581",
    number_of_planets=(2, 8),
    planet_mass_range=(-1, 1),
    orbital_period_range=(0, 3),
    architecture=ArchitectureKind.ROCKY,
    habitable_planets=1,
    migration_history=(MigrationType.NONE,),
    discoverability=0.6,
    resource_abundance=9,
    unique_features=("many_terrestrial_worlds", "no_gas_giants", "heavy_bombardment"),
)

GAS_GIANT_DOMINATED = _derived(
    SINGLE_STAR,
    SolarSystemClass.GAS_GIANT_DOMINATED,
    _stellar(1.2, 3e9, metallicity=0.3, stellar_activity_level=0.1),
    name="Gas-Giant-Dominated System",
    description="System whose mass budget is held by several giant planets",
    real_world_example="HR 8799, 55 Cancri, Kepler-90",
    number_of_planets=(2, 8),
    planet_mass_range=(0, 3.5),
    orbital_period_range=(1, 4.5),
    architecture=ArchitectureKind.GAS_GIANT,
    disk_properties=replace(_ASTEROID_BELT, debris_disk_mass=0.1, debris_disk_radius=100),
    formation_mechanisms=(
        FormationMechanism.CORE_ACCRETION,
        FormationMechanism.GRAVITATIONAL_INSTABILITY,
    ),
    migration_history=(MigrationType.TYPE_II,),
    radial_velocity_amplitude=30,
    hill_stability_factor=6,
    discoverability=0.5,
    scientific_value=8,
    colonization_difficulty=6,
    unique_features=("giant_planets", "moon_systems", "ring_systems"),
)

SUPER_EARTH_SYSTEM = _derived(
    SINGLE_STAR,
    SolarSystemClass.SUPER_EARTH_SYSTEM,
    _stellar(0.9, 5e9, stellar_activity_level=0.15),
    name="Super-Earth System",
    description="Several planets between Earth and Neptune in mass on short orbits",
    real_world_example="HD 40307, Kepler-10, 55 Cancri e",
    number_of_planets=(2, 6),
    planet_mass_range=(0.3, 1),
    orbital_period_range=(0, 2.5),
    architecture=ArchitectureKind.ROCKY,
    habitable_planets=1,
    formation_mechanisms=(FormationMechanism.PEBBLE_ACCRETION, FormationMechanism.CORE_ACCRETION),
    migration_history=(MigrationType.TYPE_I,),
    radial_velocity_amplitude=3,
    discoverability=0.7,
    scientific_value=8,
    colonization_difficulty=5,
    unique_features=("super_earths", "high_surface_gravity", "thick_atmospheres"),
)

MINI_NEPTUNE_SYSTEM = _derived(
    SINGLE_STAR,
    SolarSystemClass.MINI_NEPTUNE_SYSTEM,
    _stellar(0.95, 8e9, stellar_activity_level=0.1),
    name="Mini-Neptune System",
    description="Planets with rocky cores and extended hydrogen envelopes",
    real_world_example="Kepler-11, GJ 1214, TOI-270",
    number_of_planets=(2, 7),
    planet_mass_range=(0.5, 1.3),
    orbital_period_range=(0, 2.5),
    formation_mechanisms=(FormationMechanism.CORE_ACCRETION, FormationMechanism.PEBBLE_ACCRETION),
    migration_history=(MigrationType.TYPE_I,),
    transit_probability=0.6,
    radial_velocity_amplitude=2,
    discoverability=0.6,
    scientific_value=8,
    colonization_difficulty=7,
    unique_features=("puffy_envelopes", "radius_valley", "water_worlds"),
)

HOT_JUPITER_SYSTEM = _derived(
    SINGLE_STAR,
    SolarSystemClass.HOT_JUPITER_SYSTEM,
    _stellar(1.1, 4e9, metallicity=0.2, stellar_activity_level=0.2),
    name="Hot Jupiter System",
    description="Giant planet on a few-day orbit after inward migration",
    real_world_example="51 Pegasi, HD 209458, WASP-12",
    number_of_planets=(1, 3),
    planet_mass_range=(2, 3.5),
    orbital_period_range=(-0.5, 1),
    architecture=ArchitectureKind.GAS_GIANT,
    disk_properties=_NO_DISK,
    migration_history=(MigrationType.TYPE_II, MigrationType.TIDAL_MIGRATION),
    resonance_types=(ResonanceType.NONE,),
    transit_probability=0.1,
    radial_velocity_amplitude=60,
    photometric_variability=10000,
    hill_stability_factor=8,
    discoverability=0.5,
    scientific_value=8,
    colonization_difficulty=8,
    resource_abundance=5,
    unique_features=("inflated_giant", "tidal_locking", "atmospheric_escape"),
    astrophysical_processes=("disk_migration", "tidal_circularization", "photoevaporation"),
)

EXTENDED_SYSTEM = _derived(
    SINGLE_STAR,
    SolarSystemClass.EXTENDED_SYSTEM,
    _stellar(1.3, 1e9, stellar_activity_level=0.1),
    name="Extended System",
    description="Planets spread to hundreds of AU with wide orbital spacing",
    real_world_example="HD 106906, Fomalhaut b, GU Piscium",
    number_of_planets=(3, 12),
    planet_mass_range=(-1, 3.5),
    orbital_period_range=(1, 6),
    disk_properties=replace(_ASTEROID_BELT, debris_disk_mass=0.01, debris_disk_radius=150),
    formation_mechanisms=(
        FormationMechanism.GRAVITATIONAL_INSTABILITY,
        FormationMechanism.CORE_ACCRETION,
    ),
    migration_history=(MigrationType.STOCHASTIC,),
    transit_probability=0.05,
    astrometric_signal=50,
    hill_stability_factor=12,
    discoverability=0.3,
    scientific_value=8,
    colonization_difficulty=6,
    unique_features=("wide_orbits", "direct_imaging_targets", "cold_giants"),
)

HIERARCHICAL_SYSTEM = _derived(
    BINARY_STAR,
    SolarSystemClass.HIERARCHICAL_SYSTEM,
    _stellar(
        1.06,
        4e9,
        metallicity=0.1,
        secondary_mass=0.96,
        binary_eccentricity=0.5,
        binary_inclination=34,
        binary_separation=12.3,
        tertiary_mass=0.67,
        tertiary_period=0.43,
        tertiary_separation=0.67,
        stellar_activity_level=0.2,
    ),
    dynamics=_BINARY_DYNAMICS,
    name="Hierarchical System",
    description="Planet-hosting star orbited by a tight stellar pair",
    real_world_example="HD 188753, 16 Cygni",
    stellar_multiplicity=StellarMultiplicity.HIERARCHICAL_TRIPLE,
    number_of_stars=3,
    number_of_planets=(0, 5),
    disk_properties=_ASTEROID_BELT,
    hill_stability_factor=4,
    discoverability=0.15,
    unique_features=("nested_orbits", "kozai_cycles", "truncated_disk"),
)

CHAOTIC_SYSTEM = _derived(
    SINGLE_STAR,
    SolarSystemClass.CHAOTIC_SYSTEM,
    _stellar(1.0, 2e9, stellar_activity_level=0.2),
    dynamics=replace(
        _SOLAR_DYNAMICS, dynamical_stability=0.4, chaos_parameter=5e-3, libration_amplitude=60
    ),
    name="Chaotic System",
    description="Planets on crossing or scattering orbits with short Lyapunov times",
    real_world_example="Upsilon Andromedae, HD 82943",
    observational_status=ObservationalStatus.THEORETICAL,
    number_of_planets=(2, 8),
    migration_history=(MigrationType.STOCHASTIC,),
    resonance_types=(ResonanceType.SECULAR_RESONANCE, ResonanceType.MEAN_MOTION),
    hill_stability_factor=2.5,
    lyapunov_timescale=1e4,
    collisional_timescale=1e7,
    discoverability=0.2,
    scientific_value=9,
    colonization_difficulty=9,
    resource_abundance=6,
    unique_features=("planet_scattering", "eccentric_orbits", "ejections"),
)

MATURE_SYSTEM = _derived(
    SINGLE_STAR,
    SolarSystemClass.MATURE_SYSTEM,
    _stellar(0.9, 9e9, metallicity=-0.2, stellar_activity_level=0.05),
    dynamics=replace(_SOLAR_DYNAMICS, chaos_parameter=1e-8),
    habitable_planets=1,
    name="Mature System",
    description="Old, dynamically relaxed system on a quiet main-sequence star",
    real_world_example="Tau Ceti, Kepler-444",
    number_of_planets=(2, 10),
    disk_properties=replace(_ASTEROID_BELT, collisional_age=9e9),
    hill_stability_factor=15,
    lyapunov_timescale=1e8,
    discoverability=0.7,
    colonization_difficulty=2,
    unique_features=("stable_orbits", "quiet_star", "depleted_debris"),
)

EVOLVED_SYSTEM = _derived(
    SINGLE_STAR,
    SolarSystemClass.EVOLVED_SYSTEM,
    _stellar(1.5, 4e9, phase="red_giant", stellar_activity_level=0.3),
    dynamics=replace(_SOLAR_DYNAMICS, dynamical_stability=0.8, chaos_parameter=1e-6),
    name="Evolved System",
    description="Planets around a red giant that has left the main sequence",
    real_world_example="Kepler-56, HD 102272, Kepler-91",
    number_of_planets=(1, 5),
    migration_history=(MigrationType.STELLAR_EVOLUTION, MigrationType.TIDAL_MIGRATION),
    radial_velocity_amplitude=40,
    photometric_variability=300,
    discoverability=0.3,
    scientific_value=8,
    colonization_difficulty=7,
    resource_abundance=5,
    unique_features=("red_giant_host", "engulfed_planets", "migrating_habitable_zone"),
    astrophysical_processes=("stellar_mass_loss", "tidal_decay", "orbital_expansion"),
)

MIGRATION_SYSTEM = _derived(
    SINGLE_STAR,
    SolarSystemClass.MIGRATION_SYSTEM,
    _stellar(1.0, 1e7, stellar_activity_level=0.7),
    dynamics=replace(
        _SOLAR_DYNAMICS, migration_timescale=1e5, dynamical_stability=0.6, chaos_parameter=1e-4
    ),
    name="Migration System",
    description="Young system whose giant planets are moving through the gas disk",
    real_world_example="HD 80606, WASP-12, Kepler-9",
    observational_status=ObservationalStatus.PROBABLE,
    number_of_planets=(1, 6),
    disk_properties=DiskProperties(
        disk_mass=0.02,
        disk_radius=50,
        disk_scale_height=2,
        disk_temperature=200,
        disk_viscosity=0.01,
        dust_to_gas_ratio=0.01,
        grain_size_distribution=-3.5,
        settling_timescale=1e5,
        collisional_age=1e7,
        stirring_mechanism="planet_disk_torques",
        photoevaporation_rate=1e-9,
        disk_dissipation_time=1e7,
    ),
    migration_history=(MigrationType.TYPE_I, MigrationType.TYPE_II, MigrationType.TYPE_III),
    resonance_types=(ResonanceType.MEAN_MOTION, ResonanceType.FIRST_ORDER),
    hill_stability_factor=4,
    discoverability=0.4,
    scientific_value=9,
    colonization_difficulty=8,
    unique_features=("migrating_giants", "gas_disk", "resonance_capture"),
)

DISRUPTED_SYSTEM = _derived(
    SINGLE_STAR,
    SolarSystemClass.DISRUPTED_SYSTEM,
    _stellar(0.85, 2e9, stellar_activity_level=0.2),
    dynamics=replace(
        _SOLAR_DYNAMICS, dynamical_stability=0.3, chaos_parameter=1e-3, libration_amplitude=90
    ),
    name="Disrupted System",
    description="System scrambled by a stellar flyby or planet-planet scattering",
    real_world_example="HD 106906, Kepler-419",
    observational_status=ObservationalStatus.THEORETICAL,
    number_of_planets=(0, 5),
    migration_history=(MigrationType.STOCHASTIC,),
    resonance_types=(ResonanceType.SECULAR_RESONANCE,),
    hill_stability_factor=2,
    lyapunov_timescale=1e4,
    collisional_timescale=1e7,
    stellar_density=10,
    encounter_rate=5,
    discoverability=0.15,
    scientific_value=9,
    colonization_difficulty=9,
    resource_abundance=6,
    unique_features=("eccentric_orbits", "missing_planets", "stirred_debris"),
)

CAPTURED_SYSTEM = _derived(
    SINGLE_STAR,
    SolarSystemClass.CAPTURED_SYSTEM,
    _stellar(0.5, 5e9, stellar_activity_level=0.3),
    name="Captured System",
    description="Star that acquired free-floating planets in its birth cluster",
    real_world_example="2MASS J2126-8140 (wide-orbit candidate)",
    observational_status=ObservationalStatus.SPECULATIVE,
    number_of_planets=(1, 4),
    formation_mechanisms=(FormationMechanism.STELLAR_CAPTURE,),
    migration_history=(MigrationType.STOCHASTIC,),
    resonance_types=(ResonanceType.NONE,),
    hill_stability_factor=6,
    discoverability=0.1,
    scientific_value=9,
    colonization_difficulty=6,
    resource_abundance=6,
    unique_features=("captured_planets", "misaligned_orbits", "exotic_compositions"),
)

STRIPPED_SYSTEM = _derived(
    SINGLE_STAR,
    SolarSystemClass.STRIPPED_SYSTEM,
    _stellar(0.5, 1e9, stellar_activity_level=0.9, magnetic_field_strength=500),
    name="Stripped System",
    description="Close-in planets whose envelopes were removed by stellar radiation",
    real_world_example="CoRoT-7, Kepler-10, LHS 3844",
    observational_status=ObservationalStatus.PROBABLE,
    number_of_planets=(1, 5),
    planet_mass_range=(-0.5, 1),
    orbital_period_range=(-0.5, 1.5),
    migration_history=(MigrationType.TYPE_I,),
    transit_probability=0.2,
    photometric_variability=2000,
    discoverability=0.3,
    scientific_value=8,
    colonization_difficulty=7,
    resource_abundance=7,
    unique_features=("bare_cores", "lava_worlds", "atmospheric_escape"),
    astrophysical_processes=("photoevaporation", "core_powered_mass_loss"),
)

CIRCUMBINARY_SYSTEM = _derived(
    BINARY_STAR,
    SolarSystemClass.CIRCUMBINARY_SYSTEM,
    _stellar(
        1.05,
        6e9,
        metallicity=-0.07,
        secondary_mass=1.02,
        binary_eccentricity=0.52,
        binary_inclination=89.9,
        binary_separation=0.23,
        stellar_activity_level=0.2,
    ),
    dynamics=_BINARY_DYNAMICS,
    name="Circumbinary System",
    description="Planets orbiting both stars of a close binary",
    real_world_example="Kepler-34, Kepler-35, TOI-1338",
    number_of_planets=(1, 3),
    hill_stability_factor=4,
    discoverability=0.2,
    circumbinary=True,
    unique_features=("double_sunsets", "circumbinary_planets", "orbital_precession"),
)

S_TYPE_BINARY = _derived(
    BINARY_STAR,
    SolarSystemClass.S_TYPE_BINARY,
    _stellar(
        1.4,
        3e9,
        secondary_mass=0.4,
        binary_eccentricity=0.41,
        binary_inclination=70,
        binary_separation=20,
        stellar_activity_level=0.15,
    ),
    dynamics=_BINARY_DYNAMICS,
    name="S-Type Binary",
    description="Planets orbiting one star of a wide binary",
    real_world_example="Gamma Cephei, HD 41004, 30 Arietis",
    stellar_multiplicity=StellarMultiplicity.WIDE_BINARY,
    number_of_planets=(1, 4),
    disk_properties=_ASTEROID_BELT,
    hill_stability_factor=5,
    discoverability=0.3,
    unique_features=("distant_companion_star", "truncated_disk", "kozai_cycles"),
)

P_TYPE_BINARY = _derived(
    BINARY_STAR,
    SolarSystemClass.P_TYPE_BINARY,
    _stellar(
        1.04,
        5e9,
        metallicity=-0.25,
        secondary_mass=0.36,
        binary_eccentricity=0.02,
        binary_inclination=89.3,
        binary_separation=0.08,
        stellar_activity_level=0.2,
    ),
    dynamics=_BINARY_DYNAMICS,
    name="P-Type Binary",
    description="Planets on orbits enclosing a tight stellar pair",
    real_world_example="Kepler-47, Kepler-453",
    number_of_planets=(1, 4),
    hill_stability_factor=4,
    discoverability=0.2,
    circumbinary=True,
    unique_features=("circumbinary_planets", "stability_limit", "eclipse_timing"),
)

TROJAN_SYSTEM = _derived(
    SINGLE_STAR,
    SolarSystemClass.TROJAN_SYSTEM,
    _stellar(1.0, 4e9, stellar_activity_level=0.1),
    name="Trojan System",
    description="Co-orbital planets sharing an orbit at the L4/L5 Lagrange points",
    real_world_example="Jupiter Trojans (asteroidal), TOI-2202 candidate",
    observational_status=ObservationalStatus.THEORETICAL,
    number_of_planets=(2, 6),
    resonance_types=(ResonanceType.MEAN_MOTION,),
    hill_stability_factor=6,
    discoverability=0.15,
    scientific_value=9,
    colonization_difficulty=5,
    unique_features=("co_orbital_planets", "lagrange_points", "tadpole_orbits"),
)

RETROGRADE_SYSTEM = _derived(
    SINGLE_STAR,
    SolarSystemClass.RETROGRADE_SYSTEM,
    _stellar(1.3, 3e9, stellar_activity_level=0.2),
    dynamics=replace(_SOLAR_DYNAMICS, kozai_timescale=1e6, chaos_parameter=1e-5),
    name="Retrograde System",
    description="Planets orbiting against the stellar spin after Kozai cycling",
    real_world_example="WASP-17, HAT-P-7, Kepler-56",
    number_of_planets=(1, 3),
    migration_history=(MigrationType.TYPE_II, MigrationType.TIDAL_MIGRATION),
    resonance_types=(ResonanceType.KOZAI_LIDOV,),
    transit_probability=0.1,
    radial_velocity_amplitude=50,
    hill_stability_factor=5,
    discoverability=0.3,
    scientific_value=9,
    colonization_difficulty=7,
    resource_abundance=6,
    unique_features=("retrograde_orbits", "spin_orbit_misalignment", "kozai_cycles"),
)

PULSAR_SYSTEM = _derived(
    POST_STELLAR_SYSTEM,
    SolarSystemClass.PULSAR_SYSTEM,
    _stellar(1.4, 8e8, phase="pulsar", magnetic_field_strength=1e9),
    dynamics=POST_STELLAR_SYSTEM.orbital_dynamics,
    name="Pulsar System",
    description="Planets orbiting a millisecond pulsar",
    real_world_example="PSR B1257+12, PSR B1620-26",
    number_of_planets=(1, 4),
    discoverability=0.05,
    unique_features=("pulsar_host", "timing_planets", "radiation_beams"),
)

WHITE_DWARF_SYSTEM = _derived(
    POST_STELLAR_SYSTEM,
    SolarSystemClass.WHITE_DWARF_SYSTEM,
    _stellar(0.6, 5e9, phase="white_dwarf", metallicity=0.0),
    dynamics=replace(POST_STELLAR_SYSTEM.orbital_dynamics, chaos_parameter=1e-5),
    name="White Dwarf System",
    description="Surviving planets and tidally shredded debris around a white dwarf",
    real_world_example="WD 1856+534, SDSS J1228+1040",
    number_of_planets=(0, 3),
    disk_properties=DiskProperties(
        debris_disk_mass=1e-4,
        debris_disk_radius=0.01,
        collisional_age=1e8,
        stirring_mechanism="tidal_disruption",
    ),
    formation_mechanisms=(FormationMechanism.CORE_ACCRETION,),
    migration_history=(MigrationType.STELLAR_EVOLUTION,),
    radial_velocity_amplitude=100,
    discoverability=0.1,
    resource_abundance=3,
    unique_features=("white_dwarf_host", "polluted_atmosphere", "disintegrating_planetesimals"),
)

BROWN_DWARF_SYSTEM = _derived(
    SINGLE_STAR,
    SolarSystemClass.BROWN_DWARF_SYSTEM,
    _stellar(0.05, 5e9, phase="brown_dwarf", stellar_activity_level=0.4),
    name="Brown Dwarf System",
    description="Planetary-mass companions around a substellar host",
    real_world_example="2M1207, OTS 44",
    number_of_planets=(0, 3),
    planet_mass_range=(-1, 2.5),
    orbital_period_range=(0, 3),
    disk_properties=_NO_DISK,
    formation_mechanisms=(
        FormationMechanism.DISK_FRAGMENTATION,
        FormationMechanism.GRAVITATIONAL_INSTABILITY,
    ),
    migration_history=(MigrationType.NONE,),
    resonance_types=(ResonanceType.NONE,),
    radial_velocity_amplitude=200,
    discoverability=0.2,
    scientific_value=8,
    colonization_difficulty=6,
    resource_abundance=4,
    unique_features=("substellar_host", "dim_illumination", "infrared_glow"),
)

ROGUE_SYSTEM = _derived(
    SINGLE_STAR,
    SolarSystemClass.ROGUE_SYSTEM,
    _stellar(0.015, 3e9, phase="brown_dwarf", stellar_activity_level=0.0),
    name="Rogue System",
    description="Free-floating substellar object with a few bound companions",
    real_world_example="Cha 110913-773444, OTS 44",
    observational_status=ObservationalStatus.SPECULATIVE,
    number_of_planets=(0, 2),
    planet_mass_range=(-2, 1),
    orbital_period_range=(0, 2),
    disk_properties=_NO_DISK,
    formation_mechanisms=(FormationMechanism.STELLAR_CAPTURE, FormationMechanism.DISK_FRAGMENTATION),
    migration_history=(MigrationType.NONE,),
    resonance_types=(ResonanceType.NONE,),
    transit_probability=0.01,
    galactic_environment="interstellar",
    stellar_density=0.01,
    encounter_rate=0.01,
    discoverability=0.05,
    scientific_value=9,
    colonization_difficulty=8,
    resource_abundance=2,
    unique_features=("no_host_star", "eternal_night", "tidally_heated_moons"),
)

GALACTIC_HALO_SYSTEM = _derived(
    SINGLE_STAR,
    SolarSystemClass.GALACTIC_HALO_SYSTEM,
    _stellar(0.8, 12e9, metallicity=-1.5, stellar_activity_level=0.02),
    dynamics=replace(_SOLAR_DYNAMICS, chaos_parameter=1e-8),
    name="Galactic Halo System",
    description="Ancient metal-poor star on a halo orbit with few planets",
    real_world_example="Kapteyn's Star, HIP 13044",
    observational_status=ObservationalStatus.PROBABLE,
    number_of_planets=(0, 3),
    disk_properties=_NO_DISK,
    formation_efficiency=0.01,
    migration_history=(MigrationType.NONE,),
    galactic_environment="galactic_halo",
    stellar_density=0.001,
    encounter_rate=0.01,
    supernova_rate=0.1,
    discoverability=0.05,
    scientific_value=9,
    colonization_difficulty=5,
    resource_abundance=2,
    unique_features=("metal_poor", "ancient_star", "sparse_neighbourhood"),
)


def build_archetypes() -> Dict[SolarSystemClass, SolarSystemTypeDefinition]:
    """Return the full archetype table keyed by class, in enum order."""
    table = {
        definition.system_class: definition
        for definition in (
            SINGLE_STAR,
            BINARY_STAR,
            TRIPLE_STAR,
            QUADRUPLE_STAR,
            MULTIPLE_STAR,
            ROCKY_DOMINATED,
            GAS_GIANT_DOMINATED,
            SUPER_EARTH_SYSTEM,
            MINI_NEPTUNE_SYSTEM,
            HOT_JUPITER_SYSTEM,
            COMPACT_SYSTEM,
            EXTENDED_SYSTEM,
            RESONANT_CHAIN,
            HIERARCHICAL_SYSTEM,
            CHAOTIC_SYSTEM,
            PROTO_SYSTEM,
            MATURE_SYSTEM,
            EVOLVED_SYSTEM,
            POST_STELLAR_SYSTEM,
            DEBRIS_RICH_SYSTEM,
            MIGRATION_SYSTEM,
            DISRUPTED_SYSTEM,
            CAPTURED_SYSTEM,
            STRIPPED_SYSTEM,
            CIRCUMBINARY_SYSTEM,
            S_TYPE_BINARY,
            P_TYPE_BINARY,
            TROJAN_SYSTEM,
            RETROGRADE_SYSTEM,
            PULSAR_SYSTEM,
            WHITE_DWARF_SYSTEM,
            BROWN_DWARF_SYSTEM,
            ROGUE_SYSTEM,
            GALACTIC_HALO_SYSTEM,
        )
    }
    return {system_class: table[system_class] for system_class in SolarSystemClass}
