"""Pure physical calculators used by the generator."""

from .orbital import (
    Resonance,
    hill_stability,
    kepler_period,
    kepler_semi_major_axis,
    migration_timescale,
    orbital_angular_momentum,
    orbital_resonance,
    radial_velocity_semi_amplitude,
    transit_probability,
)
from .planetary import (
    classify_planet_type,
    equilibrium_temperature,
    habitability_score,
    has_atmosphere,
    has_rings,
    is_tidally_locked,
    moon_count,
    planet_radius,
    tidal_locking_time,
)
from .stellar import (
    StellarDescription,
    calculate_habitability_zone,
    classify_spectral_type,
    describe_star,
    main_sequence_lifetime,
    mass_to_luminosity,
    mass_to_temperature,
)

__all__ = [
    "Resonance",
    "StellarDescription",
    "calculate_habitability_zone",
    "classify_planet_type",
    "classify_spectral_type",
    "describe_star",
    "equilibrium_temperature",
    "habitability_score",
    "has_atmosphere",
    "has_rings",
    "hill_stability",
    "is_tidally_locked",
    "kepler_period",
    "kepler_semi_major_axis",
    "main_sequence_lifetime",
    "mass_to_luminosity",
    "mass_to_temperature",
    "migration_timescale",
    "moon_count",
    "orbital_angular_momentum",
    "orbital_resonance",
    "planet_radius",
    "radial_velocity_semi_amplitude",
    "tidal_locking_time",
    "transit_probability",
]
