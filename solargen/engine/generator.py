"""Solar system generation pipeline.

A generation call runs these stages in order:
1. Type selection (registry lookup or discoverability-weighted pick)
2. Configuration (stellar masses, planetary architecture, orbital angles,
   habitable zone, disks)
3. Stellar generation
4. Planetary generation
5. Disk generation
6. Dynamics analysis
7. Statistics aggregation

The stages are strictly sequential. Any failure aborts the whole call with
no partial result and returns the generator to IDLE.
"""

import logging
import math
import time
from typing import Sequence

from ..analysis.statistics import calculate_statistics
from ..errors import SolarSystemGenerationError
from ..models.disk import DiskData
from ..models.dynamics import StabilityVerdict
from ..models.enums import DiskType, GenerationStage, ResonanceType, SolarSystemClass
from ..models.planet import PlanetData
from ..models.result import SystemResult
from ..models.star import StarData
from ..models.system_config import (
    BinaryProperties,
    ConfigOverrides,
    DebrisDiskSpec,
    SystemConfig,
)
from ..models.system_type import SolarSystemTypeDefinition
from ..physics.orbital import kepler_period
from ..physics.planetary import (
    equilibrium_temperature,
    habitability_score,
    has_atmosphere,
    has_rings,
    is_tidally_locked,
    moon_count,
    planet_radius,
)
from ..physics.stellar import calculate_habitability_zone, describe_star
from ..registry.classification import (
    assess_system_stability,
    calculate_system_habitability,
    predict_system_evolution,
)
from ..registry.registry import SystemTypeRegistry, get_registry
from ..utils.constants import (
    COMPACT_HOST_MASSES,
    DEBRIS_ALBEDO,
    DEBRIS_BELT_WIDTH,
    DEFAULT_EVOLUTION_STEPS,
    DEFAULT_ORBIT_RESOLUTION,
    FULL_CIRCLE_DEGREES,
    N_BODY_PLANET_LIMIT,
    PROTOPLANETARY_INNER_RADIUS,
    REMNANT_PROFILES,
    RNG_SEED_DEFAULT,
    TWO_PI,
)
from ..utils.rng import SystemRNG
from ..utils.units import Years, solar_to_earth_masses
from .architectures import generate_architecture
from .dynamics import analyze_dynamics
from .evolution import evolve_system, habitable_planet_indices, stellar_luminosities

logger = logging.getLogger(__name__)

POST_STELLAR_REMNANTS = ("white_dwarf", "neutron_star", "pulsar")


class SolarSystemGenerator:
    """Deterministic generator of complete solar systems.

    Each instance owns one RNG stream. Generators with different seeds share
    nothing mutable, so independent instances can run on separate threads.
    The registry is read-only and may be shared.
    """

    def __init__(self, seed: int = RNG_SEED_DEFAULT, registry: SystemTypeRegistry | None = None):
        """Initialize generator.

        Args:
            seed: RNG seed; the same seed and class always give the same system
            registry: Archetype registry (defaults to the process-wide one)
        """
        self.seed = seed
        self.rng = SystemRNG(seed)
        self.registry = registry if registry is not None else get_registry()
        self.stage = GenerationStage.IDLE

    def _reset(self):
        if self.stage != GenerationStage.IDLE:
            self._advance(GenerationStage.IDLE)

    def _advance(self, stage: GenerationStage):
        logger.debug(f"Generator seed={self.seed}: {self.stage.value} -> {stage.value}")
        self.stage = stage

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def generate_solar_system(
        self,
        system_class: SolarSystemClass | str | None = None,
        overrides: ConfigOverrides | None = None,
    ) -> SystemResult:
        """Generate a complete system.

        Args:
            system_class: Archetype to generate; None picks one weighted by
                discoverability
            overrides: Adjustments applied before derived config fields

        Returns:
            Immutable SystemResult

        Raises:
            UnknownSystemClassError: If system_class is not registered
        """
        self._reset()
        start = time.perf_counter()
        try:
            if system_class is None:
                system_type = self.registry.get_random(self.rng)
            else:
                system_type = self.registry.get_by_class(system_class)
            self._advance(GenerationStage.TYPE_SELECTED)

            config = self.generate_config(system_type, overrides)
            result = self._build(config, system_type)
        except (SolarSystemGenerationError, ValueError) as e:
            logger.error(f"Generation failed for class {system_class} (seed {self.seed}): {e}")
            self.stage = GenerationStage.IDLE
            raise

        self._log_done(result, start)
        return result

    def generate_system_from_config(self, config: SystemConfig) -> SystemResult:
        """Run the pipeline from stellar generation onward on a given config.

        Used for evolved configurations. Planet moon and ring draws continue
        this generator's RNG stream.
        """
        self._reset()
        start = time.perf_counter()
        try:
            system_type = self.registry.get_by_class(config.system_class)
            self._advance(GenerationStage.TYPE_SELECTED)
            result = self._build(config, system_type)
        except (SolarSystemGenerationError, ValueError) as e:
            logger.error(f"Generation from config failed (seed {config.seed}): {e}")
            self.stage = GenerationStage.IDLE
            raise

        self._log_done(result, start)
        return result

    def _log_done(self, result: SystemResult, start: float):
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            f"Generated {result.config.system_class.value} (seed {result.config.seed}): "
            f"{result.config.number_of_stars} stars, {result.config.number_of_planets} planets "
            f"in {elapsed_ms:.1f} ms"
        )

    def _build(self, config: SystemConfig, system_type: SolarSystemTypeDefinition) -> SystemResult:
        stars = self.generate_stars(config)
        self._advance(GenerationStage.STELLAR_GENERATED)

        planets = self.generate_planets(config, stars)
        self._advance(GenerationStage.PLANETARY_GENERATED)

        disks = self.generate_disks(config, system_type)
        self._advance(GenerationStage.DISK_GENERATED)

        dynamics = analyze_dynamics(config)
        self._advance(GenerationStage.DYNAMICS_COMPUTED)

        statistics = calculate_statistics(config, system_type, planets, stars, disks, dynamics)
        self._advance(GenerationStage.STATISTICS_COMPUTED)

        result = SystemResult(
            config=config,
            system_type=system_type,
            planets=planets,
            stars=stars,
            disks=disks,
            dynamics=dynamics,
            statistics=statistics,
        )
        self._advance(GenerationStage.DONE)
        return result

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def generate_config(
        self,
        system_type: SolarSystemTypeDefinition,
        overrides: ConfigOverrides | None = None,
    ) -> SystemConfig:
        """Draw a concrete configuration from an archetype.

        Overrides are applied before the habitable zone, Kepler periods and
        other derived fields are computed.

        Args:
            system_type: Archetype to draw from
            overrides: Optional adjustments

        Returns:
            SystemConfig with planets sorted by distance
        """
        overrides = overrides or ConfigOverrides()
        stellar = system_type.stellar_properties

        # Planet count
        if overrides.number_of_planets is not None:
            number_of_planets = overrides.number_of_planets
        else:
            number_of_planets = self.rng.randint(*system_type.number_of_planets)

        # Stars
        number_of_stars = system_type.number_of_stars
        masses = self._stellar_masses(system_type, overrides)
        ages = tuple(stellar.primary_age for _ in masses)
        phase = overrides.primary_phase or stellar.current_evolution_phase
        luminosities = stellar_luminosities(masses, phase)
        total_luminosity = sum(luminosities)
        central_mass = sum(masses) if system_type.circumbinary else masses[0]

        binary = None
        if number_of_stars > 1:
            separation = stellar.binary_separation
            binary = BinaryProperties(
                separation=separation,
                eccentricity=stellar.binary_eccentricity,
                inclination=stellar.binary_inclination,
                period=kepler_period(separation, masses[0] + masses[1]),
            )

        # Planets
        layout = generate_architecture(
            system_type.architecture, self.rng, number_of_planets, central_mass
        )
        ascending_nodes = []
        arguments_of_periapsis = []
        mean_anomalies = []
        for _ in range(number_of_planets):
            ascending_nodes.append(self.rng.uniform(0, FULL_CIRCLE_DEGREES))
            arguments_of_periapsis.append(self.rng.uniform(0, FULL_CIRCLE_DEGREES))
            mean_anomalies.append(self.rng.uniform(0, FULL_CIRCLE_DEGREES))

        if not system_type.resonance_types:
            resonance_chain = ResonanceType.NONE
        else:
            resonance_chain = self.rng.choice(system_type.resonance_types)

        # Habitability
        zone = calculate_habitability_zone(total_luminosity)
        habitable = habitable_planet_indices(layout.semi_major_axes, layout.masses, zone)

        # Disks
        disk = system_type.disk_properties
        disk_mass = overrides.disk_mass if overrides.disk_mass is not None else disk.disk_mass
        debris_disks = ()
        if disk.debris_disk_mass > 0:
            inner_factor, outer_factor = DEBRIS_BELT_WIDTH
            debris_disks = (
                DebrisDiskSpec(
                    mass=disk.debris_disk_mass,
                    inner_radius=disk.debris_disk_radius * inner_factor,
                    outer_radius=disk.debris_disk_radius * outer_factor,
                    temperature=equilibrium_temperature(
                        disk.debris_disk_radius, total_luminosity, DEBRIS_ALBEDO
                    ),
                ),
            )

        return SystemConfig(
            system_class=system_type.system_class,
            seed=self.seed,
            number_of_stars=number_of_stars,
            stellar_masses=masses,
            stellar_ages=ages,
            stellar_luminosities=luminosities,
            primary_phase=phase,
            central_mass=central_mass,
            binary_properties=binary,
            number_of_planets=number_of_planets,
            planet_types=layout.planet_types,
            orbital_periods=layout.periods,
            semi_major_axes=layout.semi_major_axes,
            eccentricities=layout.eccentricities,
            inclinations=layout.inclinations,
            masses=layout.masses,
            ascending_nodes=tuple(ascending_nodes),
            arguments_of_periapsis=tuple(arguments_of_periapsis),
            mean_anomalies=tuple(mean_anomalies),
            system_age=stellar.primary_age,
            metallicity=stellar.primary_metallicity,
            galactic_environment=system_type.galactic_environment,
            resonance_chain=resonance_chain,
            migration_history=system_type.migration_history,
            stability_factor=system_type.hill_stability_factor,
            chaos_parameter=system_type.orbital_dynamics.chaos_parameter,
            has_disk=disk_mass > 0,
            disk_mass=disk_mass,
            disk_radius=disk.disk_radius,
            debris_disks=debris_disks,
            habitability_zone=zone,
            habitable_planets=habitable,
            render_distance=100,
            orbit_resolution=DEFAULT_ORBIT_RESOLUTION,
            show_debris_disks=True,
            show_resonances=bool(system_type.resonance_types),
            show_habitable_zone=bool(habitable),
            show_stellar_evolution=phase != "main_sequence",
            enable_n_body_physics=number_of_planets <= N_BODY_PLANET_LIMIT,
            enable_tidal_effects=True,
            enable_atmospheric_evolution=True,
            enable_stellar_activity=stellar.stellar_activity_level > 0.1,
            unique_features=system_type.unique_features,
            astrophysical_processes=system_type.astrophysical_processes,
            scientific_value=system_type.scientific_value,
            exploration_challenges=system_type.exploration_challenges,
        )

    def _stellar_masses(
        self, system_type: SolarSystemTypeDefinition, overrides: ConfigOverrides
    ) -> tuple[float, ...]:
        """Primary, then secondary and tertiary from the archetype, then random companions."""
        stellar = system_type.stellar_properties
        primary = overrides.primary_mass or stellar.primary_mass
        secondary = overrides.secondary_mass or stellar.secondary_mass

        masses = [primary]
        for i in range(1, system_type.number_of_stars):
            if i == 1 and secondary > 0:
                masses.append(secondary)
            elif i == 2 and stellar.tertiary_mass > 0:
                masses.append(stellar.tertiary_mass)
            else:
                masses.append(primary * self.rng.uniform(0.1, 0.8))
        return tuple(masses)

    # ------------------------------------------------------------------
    # Bodies
    # ------------------------------------------------------------------

    def generate_stars(self, config: SystemConfig) -> tuple[StarData, ...]:
        """Stars of a configuration; companions sit on a ring at the binary separation."""
        stars = []
        for i, mass in enumerate(config.stellar_masses):
            phase = config.primary_phase if i == 0 else "main_sequence"
            description = describe_star(mass, phase)

            position = (0.0, 0.0, 0.0)
            if i > 0 and config.binary_properties is not None:
                angle = (i - 1) * TWO_PI / (config.number_of_stars - 1)
                distance = config.binary_properties.separation
                position = (distance * math.cos(angle), 0.0, distance * math.sin(angle))

            stars.append(
                StarData(
                    id=f"star_{i}",
                    name="Primary" if i == 0 else f"Secondary_{i}",
                    type=description.spectral_type,
                    mass=mass,
                    radius=description.radius,
                    temperature=description.temperature,
                    luminosity=config.stellar_luminosities[i],
                    age=config.stellar_ages[i],
                    metallicity=config.metallicity,
                    evolution_phase=phase,
                    position=position,
                )
            )
        return tuple(stars)

    def generate_planets(
        self, config: SystemConfig, stars: Sequence[StarData]
    ) -> tuple[PlanetData, ...]:
        """Planets of a configuration with their derived physical flags."""
        planets = []
        luminosity = config.total_luminosity
        host_mass = stars[0].mass

        for i in range(config.number_of_planets):
            mass = config.masses[i]
            a = config.semi_major_axes[i]
            temperature = equilibrium_temperature(a, luminosity)
            atmosphere = has_atmosphere(mass, temperature)

            planets.append(
                PlanetData(
                    id=f"planet_{i}",
                    name=f"Planet {chr(98 + i)}",
                    type=config.planet_types[i],
                    mass=mass,
                    radius=planet_radius(mass),
                    semi_major_axis=a,
                    eccentricity=config.eccentricities[i],
                    inclination=config.inclinations[i],
                    period=config.orbital_periods[i],
                    temperature=temperature,
                    atmosphere=atmosphere,
                    habitability=habitability_score(
                        mass, a, temperature, atmosphere, config.habitability_zone
                    ),
                    moons=moon_count(mass, self.rng),
                    rings=has_rings(mass, self.rng),
                    tidally_locked=is_tidally_locked(mass, a, host_mass, config.system_age),
                )
            )
        return tuple(planets)

    def generate_disks(
        self, config: SystemConfig, system_type: SolarSystemTypeDefinition
    ) -> tuple[DiskData, ...]:
        """Protoplanetary (or transitional) disk and debris belts. Masses in Earth masses."""
        disks = []
        properties = system_type.disk_properties

        if config.has_disk:
            transitional = properties.transitional_disk_phase
            disks.append(
                DiskData(
                    id="protoplanetary_disk",
                    name="Transitional Disk" if transitional else "Protoplanetary Disk",
                    type=DiskType.TRANSITIONAL if transitional else DiskType.PROTOPLANETARY,
                    mass=solar_to_earth_masses(config.disk_mass),
                    inner_radius=PROTOPLANETARY_INNER_RADIUS,
                    outer_radius=config.disk_radius,
                    temperature=properties.disk_temperature,
                    dust_to_gas_ratio=properties.dust_to_gas_ratio,
                )
            )

        for i, debris in enumerate(config.debris_disks):
            disks.append(
                DiskData(
                    id=f"debris_disk_{i}",
                    name=f"Debris Disk {i + 1}",
                    type=DiskType.DEBRIS,
                    mass=debris.mass,
                    inner_radius=debris.inner_radius,
                    outer_radius=debris.outer_radius,
                    temperature=debris.temperature,
                    dust_to_gas_ratio=1.0,
                )
            )
        return tuple(disks)

    # ------------------------------------------------------------------
    # Convenience generators
    # ------------------------------------------------------------------

    def generate_binary_system(
        self,
        primary_class: SolarSystemClass | str | None = None,
        secondary_class: SolarSystemClass | str | None = None,
    ) -> SystemResult:
        """Binary system with stellar masses taken from two archetypes.

        Each named archetype contributes its primary mass; the heavier becomes
        the primary. Omitted classes keep the binary archetype's own masses.
        """
        binary = self.registry.get_by_class(SolarSystemClass.BINARY_STAR).stellar_properties
        primary_mass = binary.primary_mass
        secondary_mass = binary.secondary_mass
        if primary_class is not None:
            primary_mass = self.registry.get_by_class(primary_class).stellar_properties.primary_mass
        if secondary_class is not None:
            secondary_mass = self.registry.get_by_class(
                secondary_class
            ).stellar_properties.primary_mass
        if secondary_mass > primary_mass:
            primary_mass, secondary_mass = secondary_mass, primary_mass

        return self.generate_solar_system(
            SolarSystemClass.BINARY_STAR,
            ConfigOverrides(primary_mass=primary_mass, secondary_mass=secondary_mass),
        )

    def generate_compact_system(self, star_type: str = "M_dwarf") -> SystemResult:
        """Compact system around a host of the given spectral type.

        Args:
            star_type: One of M_dwarf, K_dwarf, G_dwarf, F_dwarf

        Raises:
            ValueError: If star_type is not recognised
        """
        if star_type not in COMPACT_HOST_MASSES:
            raise ValueError(
                f"Invalid star type: {star_type} (must be one of {', '.join(COMPACT_HOST_MASSES)})"
            )
        return self.generate_solar_system(
            SolarSystemClass.COMPACT_SYSTEM,
            ConfigOverrides(primary_mass=COMPACT_HOST_MASSES[star_type]),
        )

    def generate_resonant_chain(self, number_of_planets: int = 6) -> SystemResult:
        """Resonant chain with an exact planet count inside the archetype's range."""
        low, high = self.registry.get_by_class(SolarSystemClass.RESONANT_CHAIN).number_of_planets
        if not (low <= number_of_planets <= high):
            raise ValueError(
                f"Invalid number_of_planets: {number_of_planets} (must be {low}-{high})"
            )
        return self.generate_solar_system(
            SolarSystemClass.RESONANT_CHAIN,
            ConfigOverrides(number_of_planets=number_of_planets),
        )

    def generate_protoplanetary_system(self, disk_mass: float = 0.1) -> SystemResult:
        """Protoplanetary system with the given disk mass in solar masses."""
        if not disk_mass > 0:
            raise ValueError(f"Invalid disk_mass: {disk_mass} (must be > 0)")
        return self.generate_solar_system(
            SolarSystemClass.PROTO_SYSTEM, ConfigOverrides(disk_mass=disk_mass)
        )

    def generate_post_stellar_system(self, remnant_type: str) -> SystemResult:
        """Post-stellar system around a white dwarf, neutron star or pulsar."""
        if remnant_type not in POST_STELLAR_REMNANTS:
            raise ValueError(
                f"Invalid remnant type: {remnant_type} "
                f"(must be one of {', '.join(POST_STELLAR_REMNANTS)})"
            )
        mass, _, _ = REMNANT_PROFILES[remnant_type]
        return self.generate_solar_system(
            SolarSystemClass.POST_STELLAR_SYSTEM,
            ConfigOverrides(primary_mass=mass, primary_phase=remnant_type),
        )

    def generate_evolution_sequence(
        self,
        initial_class: SolarSystemClass | str,
        time_steps: Sequence[Years] = DEFAULT_EVOLUTION_STEPS,
    ) -> list[SystemResult]:
        """Base system followed by one evolved system per later time step.

        Each later step is applied to the base configuration, not to the
        previous evolved one.
        """
        base = self.generate_solar_system(initial_class)
        sequence = [base]
        for step in list(time_steps)[1:]:
            sequence.append(self.generate_system_from_config(evolve_system(base.config, step)))
        return sequence

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def get_available_system_types(self) -> list[SolarSystemClass]:
        return self.registry.classes()

    def get_system_type_info(self, system_class: SolarSystemClass | str) -> SolarSystemTypeDefinition:
        return self.registry.get_by_class(system_class)

    def calculate_habitability_score(self, result: SystemResult) -> float:
        """System habitability of a result, using its own habitable zone."""
        return calculate_system_habitability(
            result.config.habitability_zone,
            result.system_type.orbital_dynamics.dynamical_stability,
            result.system_type.stellar_properties.stellar_activity_level,
            result.planets,
        )

    def predict_evolution(self, result: SystemResult, time_step: Years) -> SolarSystemTypeDefinition:
        """Archetype of a result advanced by time_step years."""
        return predict_system_evolution(result.system_type, time_step)

    def analyze_stability(self, result: SystemResult) -> StabilityVerdict:
        """Archetype-level stability verdict for a result."""
        return assess_system_stability(result.system_type)


def generate_solar_system(
    system_class: SolarSystemClass | str | None = None, seed: int = RNG_SEED_DEFAULT
) -> SystemResult:
    """Generate one system with a fresh generator."""
    return SolarSystemGenerator(seed).generate_solar_system(system_class)
