"""Per-call system configuration drawn from an archetype and a seed."""

from dataclasses import dataclass
from typing import Optional, Tuple

from ..utils.units import AU, Days, EarthMasses, SolarMasses, Years
from .enums import MigrationType, ResonanceType, SolarSystemClass
from .system_type import HabitabilityZone


@dataclass(frozen=True)
class BinaryProperties:
    """Orbit of the companion star(s) around the primary."""

    separation: AU
    eccentricity: float
    inclination: float  # degrees
    period: Days

    def __post_init__(self):
        if self.separation <= 0:
            raise ValueError(f"Invalid separation: {self.separation} (must be > 0)")
        if not (0 <= self.eccentricity < 1):
            raise ValueError(f"Invalid eccentricity: {self.eccentricity} (must be 0-1)")
        if self.period <= 0:
            raise ValueError(f"Invalid period: {self.period} (must be > 0)")


@dataclass(frozen=True)
class DebrisDiskSpec:
    """Debris belt placement chosen during configuration."""

    mass: EarthMasses
    inner_radius: AU
    outer_radius: AU
    temperature: float  # K

    def __post_init__(self):
        if self.mass <= 0:
            raise ValueError(f"Invalid mass: {self.mass} (must be > 0)")
        if not (0 < self.inner_radius < self.outer_radius):
            raise ValueError(
                f"Invalid radii: inner {self.inner_radius}, outer {self.outer_radius}"
            )


@dataclass(frozen=True)
class ConfigOverrides:
    """Adjustments applied before derived configuration fields are computed.

    Used by the convenience generators to force a planet count, stellar
    masses, disk mass or primary evolution phase while keeping the habitable
    zone and Kepler periods consistent with the adjusted values.
    """

    number_of_planets: Optional[int] = None
    primary_mass: Optional[SolarMasses] = None
    secondary_mass: Optional[SolarMasses] = None
    disk_mass: Optional[SolarMasses] = None
    primary_phase: Optional[str] = None

    def __post_init__(self):
        if self.number_of_planets is not None and self.number_of_planets < 0:
            raise ValueError(
                f"Invalid number_of_planets: {self.number_of_planets} (must be >= 0)"
            )
        for field_name in ("primary_mass", "secondary_mass"):
            value = getattr(self, field_name)
            if value is not None and value <= 0:
                raise ValueError(f"Invalid {field_name}: {value} (must be > 0)")
        if self.disk_mass is not None and self.disk_mass < 0:
            raise ValueError(f"Invalid disk_mass: {self.disk_mass} (must be >= 0)")


@dataclass(frozen=True)
class SystemConfig:
    """Concrete system instance drawn from a type definition and a seed.

    Per-planet values are parallel tuples indexed by planet, ordered by
    increasing semi-major axis. Angles are in degrees, periods in days,
    distances in AU, stellar masses in solar masses and planet masses in
    Earth masses.
    """

    system_class: SolarSystemClass
    seed: int

    # Stars
    number_of_stars: int
    stellar_masses: Tuple[SolarMasses, ...]
    stellar_ages: Tuple[Years, ...]
    stellar_luminosities: Tuple[float, ...]
    primary_phase: str
    central_mass: SolarMasses  # mass the planets orbit
    binary_properties: Optional[BinaryProperties]

    # Planets
    number_of_planets: int
    planet_types: Tuple[str, ...]
    orbital_periods: Tuple[Days, ...]
    semi_major_axes: Tuple[AU, ...]
    eccentricities: Tuple[float, ...]
    inclinations: Tuple[float, ...]
    masses: Tuple[EarthMasses, ...]
    ascending_nodes: Tuple[float, ...]
    arguments_of_periapsis: Tuple[float, ...]
    mean_anomalies: Tuple[float, ...]

    # System
    system_age: Years
    metallicity: float  # [Fe/H]
    galactic_environment: str

    # Dynamics
    resonance_chain: ResonanceType
    migration_history: Tuple[MigrationType, ...]
    stability_factor: float
    chaos_parameter: float

    # Disks
    has_disk: bool
    disk_mass: SolarMasses
    disk_radius: AU
    debris_disks: Tuple[DebrisDiskSpec, ...]

    # Habitability
    habitability_zone: HabitabilityZone
    habitable_planets: Tuple[int, ...]

    # Rendering hints
    render_distance: float
    orbit_resolution: int
    show_debris_disks: bool
    show_resonances: bool
    show_habitable_zone: bool
    show_stellar_evolution: bool

    # Feature toggles
    enable_n_body_physics: bool
    enable_tidal_effects: bool
    enable_atmospheric_evolution: bool
    enable_stellar_activity: bool

    # Descriptive
    unique_features: Tuple[str, ...] = ()
    astrophysical_processes: Tuple[str, ...] = ()
    scientific_value: int = 1
    exploration_challenges: Tuple[str, ...] = ()

    def __post_init__(self):
        """Validate config invariants."""
        if self.number_of_stars < 1:
            raise ValueError(f"Invalid number_of_stars: {self.number_of_stars} (must be >= 1)")
        for name in ("stellar_masses", "stellar_ages", "stellar_luminosities"):
            if len(getattr(self, name)) != self.number_of_stars:
                raise ValueError(
                    f"Invalid {name}: expected {self.number_of_stars} entries, "
                    f"got {len(getattr(self, name))}"
                )
        if any(m <= 0 for m in self.stellar_masses):
            raise ValueError(f"Invalid stellar_masses: {self.stellar_masses} (must be > 0)")
        if self.central_mass <= 0:
            raise ValueError(f"Invalid central_mass: {self.central_mass} (must be > 0)")

        if self.number_of_planets < 0:
            raise ValueError(
                f"Invalid number_of_planets: {self.number_of_planets} (must be >= 0)"
            )
        per_planet = (
            "planet_types",
            "orbital_periods",
            "semi_major_axes",
            "eccentricities",
            "inclinations",
            "masses",
            "ascending_nodes",
            "arguments_of_periapsis",
            "mean_anomalies",
        )
        for name in per_planet:
            if len(getattr(self, name)) != self.number_of_planets:
                raise ValueError(
                    f"Invalid {name}: expected {self.number_of_planets} entries, "
                    f"got {len(getattr(self, name))}"
                )
        if any(not (0 <= e < 1) for e in self.eccentricities):
            raise ValueError(f"Invalid eccentricities: {self.eccentricities} (must be 0-1)")
        if any(m <= 0 for m in self.masses):
            raise ValueError(f"Invalid masses: {self.masses} (must be > 0)")
        if any(a <= 0 for a in self.semi_major_axes):
            raise ValueError(f"Invalid semi_major_axes: {self.semi_major_axes} (must be > 0)")
        if any(not (0 <= i < self.number_of_planets) for i in self.habitable_planets):
            raise ValueError(f"Invalid habitable_planets: {self.habitable_planets}")
        if self.disk_mass < 0:
            raise ValueError(f"Invalid disk_mass: {self.disk_mass} (must be >= 0)")
        if self.system_age < 0:
            raise ValueError(f"Invalid system_age: {self.system_age} (must be >= 0)")

    @property
    def primary_mass(self) -> float:
        return self.stellar_masses[0]

    @property
    def total_luminosity(self) -> float:
        return sum(self.stellar_luminosities)
