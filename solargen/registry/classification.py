"""Archetype-level classification helpers.

These work on type definitions or generated planets rather than on a full
generation result, so callers can reason about a class before generating
anything from it.
"""

import math
from dataclasses import replace
from typing import Sequence

from ..models.dynamics import StabilityVerdict
from ..models.enums import SolarSystemClass, StellarMultiplicity
from ..models.planet import PlanetData
from ..models.system_type import HabitabilityZone, SolarSystemTypeDefinition
from ..utils.constants import (
    CHAOS_INSTABILITY_THRESHOLD,
    EVOLVED_PHASE_SCALING,
    HILL_STABILITY_THRESHOLD,
    KOZAI_INSTABILITY_TIMESCALE,
    MAIN_SEQUENCE_PHASES,
)
from ..utils.units import Years

# Extra resource weights per class; negative values are hazards
CLASS_RESOURCES = {
    SolarSystemClass.SINGLE_STAR: {
        "habitable_zones": 1.0,
        "stable_orbits": 0.9,
        "predictable_dynamics": 0.95,
    },
    SolarSystemClass.BINARY_STAR: {
        "complex_dynamics": 1.0,
        "tidal_heating": 0.8,
        "variable_irradiation": 0.9,
    },
    SolarSystemClass.COMPACT_SYSTEM: {
        "resonant_stability": 1.0,
        "synchronized_motion": 0.95,
        "tidal_interactions": 0.8,
    },
    SolarSystemClass.DEBRIS_RICH_SYSTEM: {
        "raw_materials": 1.0,
        "active_formation": 0.9,
        "impact_hazards": -0.8,
    },
    SolarSystemClass.PROTO_SYSTEM: {
        "formation_potential": 1.0,
        "disk_materials": 0.95,
        "stellar_variability": -0.7,
    },
    SolarSystemClass.POST_STELLAR_SYSTEM: {
        "exotic_physics": 1.0,
        "timing_precision": 0.99,
        "radiation_hazard": -0.9,
    },
}


def assess_system_stability(system: SolarSystemTypeDefinition) -> StabilityVerdict:
    """Judge an archetype's long-term stability from its baseline parameters.

    Args:
        system: Archetype to assess

    Returns:
        Verdict listing every failed criterion; the timescale is the
        archetype's Lyapunov timescale
    """
    factors = []

    if system.hill_stability_factor < HILL_STABILITY_THRESHOLD:
        factors.append("Hill sphere overlap")

    if system.orbital_dynamics.chaos_parameter > CHAOS_INSTABILITY_THRESHOLD:
        factors.append("Chaotic dynamics")

    if (
        system.stellar_multiplicity != StellarMultiplicity.SINGLE
        and system.orbital_dynamics.kozai_timescale < KOZAI_INSTABILITY_TIMESCALE
    ):
        factors.append("Kozai-Lidov oscillations")

    if system.collisional_timescale < system.stellar_properties.primary_age:
        factors.append("Collisional disruption")

    return StabilityVerdict(
        stable=not factors,
        timescale=system.lyapunov_timescale,
        factors=tuple(factors),
    )


def generate_system_resources(system: SolarSystemTypeDefinition) -> dict[str, float]:
    """Resource weights for gameplay: three base resources plus class extras."""
    resources = {
        "stellar_energy": math.log10(system.stellar_properties.primary_luminosity + 0.01),
        "planetary_materials": system.number_of_planets[1] / 10,
        "orbital_stability": system.orbital_dynamics.dynamical_stability,
    }
    resources.update(CLASS_RESOURCES.get(system.system_class, {}))
    return resources


def predict_system_evolution(
    system: SolarSystemTypeDefinition, time_step: Years
) -> SolarSystemTypeDefinition:
    """Advance an archetype's baseline by time_step years.

    A main-sequence primary that outlives its main-sequence lifetime moves to
    the post-main-sequence phase with 10x luminosity and 0.7x temperature.
    If planetary migration is faster than the step, dynamical stability drops
    by 10% and the chaos parameter rises by 10%.

    Args:
        system: Archetype to evolve
        time_step: Years to advance

    Returns:
        New definition; the input is unchanged
    """
    stellar = system.stellar_properties
    new_age = stellar.primary_age + time_step

    if (
        stellar.current_evolution_phase in MAIN_SEQUENCE_PHASES
        and new_age > stellar.main_sequence_lifetime
    ):
        luminosity_factor, temperature_factor = EVOLVED_PHASE_SCALING["post_main_sequence"]
        stellar = replace(
            stellar,
            primary_age=new_age,
            current_evolution_phase="post_main_sequence",
            primary_luminosity=stellar.primary_luminosity * luminosity_factor,
            primary_temperature=stellar.primary_temperature * temperature_factor,
        )
    else:
        stellar = replace(stellar, primary_age=new_age)

    dynamics = replace(system.orbital_dynamics, system_age=new_age)
    if dynamics.migration_timescale < time_step:
        dynamics = replace(
            dynamics,
            dynamical_stability=dynamics.dynamical_stability * 0.9,
            chaos_parameter=dynamics.chaos_parameter * 1.1,
        )

    return replace(system, stellar_properties=stellar, orbital_dynamics=dynamics)


def classify_system_by_architecture(planets: Sequence[PlanetData]) -> SolarSystemClass:
    """Infer the closest archetype class from a list of generated planets.

    Checks run in order: all inside 1 AU (compact), a chain of near 2:1 or
    3:2 period ratios (resonant chain), more than half gas giants, more than
    80% rocky. Anything else is a single-star system.
    """
    if not planets:
        return SolarSystemClass.SINGLE_STAR

    if all(p.semi_major_axis < 1 for p in planets):
        return SolarSystemClass.COMPACT_SYSTEM

    resonant = 0
    for inner, outer in zip(planets, planets[1:]):
        ratio = outer.period / inner.period
        if abs(ratio - 2) < 0.1 or abs(ratio - 1.5) < 0.1:
            resonant += 1
    if resonant >= len(planets) - 2:
        return SolarSystemClass.RESONANT_CHAIN

    gas_giants = sum(1 for p in planets if p.mass > 100)
    if gas_giants > len(planets) / 2:
        return SolarSystemClass.GAS_GIANT_DOMINATED

    rocky = sum(1 for p in planets if p.mass < 10)
    if rocky > len(planets) * 0.8:
        return SolarSystemClass.ROCKY_DOMINATED

    return SolarSystemClass.SINGLE_STAR


def calculate_system_habitability(
    zone: HabitabilityZone,
    dynamical_stability: float,
    stellar_activity: float,
    planets: Sequence[PlanetData],
) -> float:
    """System-level habitability in [0, 1].

    The best planet inside the zone scores 0.5, plus 0.3 for an Earth-like
    mass (0.5-2) and 0.2 for an atmosphere. Very stable systems get a 20%
    bonus and active stars a 20% penalty.
    """
    best = 0.0
    for planet in planets:
        if not zone.contains(planet.semi_major_axis):
            continue
        score = 0.5
        if 0.5 <= planet.mass <= 2:
            score += 0.3
        if planet.atmosphere:
            score += 0.2
        best = max(best, score)

    if dynamical_stability > 0.9:
        best *= 1.2
    if stellar_activity > 0.5:
        best *= 0.8

    return min(1.0, best)


def get_observational_signatures(system: SolarSystemTypeDefinition) -> list[str]:
    """Detection methods an archetype is expected to be visible to."""
    signatures = []

    if system.transit_probability > 0.1:
        signatures.append("transit_photometry")
    if system.radial_velocity_amplitude > 1:
        signatures.append("radial_velocity")
    if system.astrometric_signal > 0.1:
        signatures.append("astrometry")
    if system.photometric_variability > 100:
        signatures.append("photometric_variability")
    if system.disk_properties.debris_disk_mass > 1e-6:
        signatures.append("infrared_excess")
    if system.stellar_multiplicity != StellarMultiplicity.SINGLE:
        signatures.append("binary_signatures")
    if system.system_class == SolarSystemClass.POST_STELLAR_SYSTEM:
        signatures.append("pulsar_timing")

    return signatures
