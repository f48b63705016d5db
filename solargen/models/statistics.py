"""Aggregate system statistics model."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class SolarSystemStatistics:
    """Summary metrics derived from a generated system.

    Every field is a pure function of the config, type definition and bodies
    it was computed from; it holds no independent state.
    """

    # Basic properties
    total_system_mass: float  # Solar masses
    system_radius: float  # AU
    total_angular_momentum: float  # kg m^2 / s (planetary orbits)
    system_age: float  # years

    # Stellar properties
    total_stellar_mass: float  # Solar masses
    total_stellar_luminosity: float  # Solar luminosities
    combined_stellar_temperature: float  # K (mean)
    stellar_metallicity: float  # [Fe/H]

    # Planetary properties
    total_planetary_mass: float  # Earth masses
    rocky_planet_count: int
    gas_giant_count: int
    ice_giant_count: int
    habitable_planet_count: int

    # Orbital properties
    inner_most_orbit: float  # AU
    outer_most_orbit: float  # AU
    orbital_spacing: float  # mean adjacent semi-major-axis ratio
    eccentricity_mean: float
    inclination_mean: float  # degrees

    # Resonances
    resonant_pairs: int
    strongest_resonance: Tuple[int, int]
    resonance_strength: float  # 0-1
    libration_amplitude: float  # degrees

    # Stability
    hill_stability_factor: float
    lyapunov_timescale: float  # years
    dynamical_lifetime: float  # years
    collisional_lifetime: float  # years

    # Habitability
    habitable_zone_range: Tuple[float, float]  # AU
    habitability_score: float  # 0-1
    water_delivery_potential: float  # 0-1
    atmospheric_retention_factor: float  # 0-1

    # Formation
    formation_timescale: float  # years
    migration_extent: float  # AU
    disk_dissipation_time: float  # years
    bombardment_intensity: float  # impacts/Myr

    # Observables
    transit_probability: float  # 0-1
    rv_amplitude: float  # m/s
    astrometric_signal: float  # microarcseconds
    infrared_excess: float  # factor

    # Evolution
    stellar_evolution_phase: str
    remaining_main_sequence_time: float  # years
    future_habitability_changes: Tuple[str, ...]
    system_evolution_predictions: Tuple[str, ...]

    # Metadata
    complexity_level: int  # 0-5
    physics_accuracy: float  # 0-1
    visual_fidelity: float  # 0-1

    def __post_init__(self):
        if not (0 <= self.habitability_score <= 1):
            raise ValueError(
                f"Invalid habitability_score: {self.habitability_score} (must be 0-1)"
            )
