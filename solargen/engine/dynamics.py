"""Orbital dynamics and stability analysis of a generated configuration."""

import logging
import math

from ..models.dynamics import DynamicsData, ResonancePair, StabilityVerdict
from ..models.system_config import SystemConfig
from ..physics.orbital import hill_stability, orbital_resonance
from ..physics.stellar import main_sequence_lifetime
from ..utils.constants import (
    CHAOS_PREDICTION_THRESHOLD,
    CLOSE_ENCOUNTER_THRESHOLD,
    HILL_STABILITY_THRESHOLD,
    MAIN_SEQUENCE_PHASES,
    RESONANCE_DETECTION_THRESHOLD,
    STABILITY_TIMESCALE_SCALE,
)

logger = logging.getLogger(__name__)


def find_resonances(config: SystemConfig) -> tuple[ResonancePair, ...]:
    """Every planet pair (i < j) whose period ratio is near a resonance.

    Pairs weaker than the detection threshold are dropped.
    """
    periods = config.orbital_periods
    pairs = []
    for i in range(len(periods)):
        for j in range(i + 1, len(periods)):
            resonance = orbital_resonance(periods[i], periods[j])
            if resonance.strength > RESONANCE_DETECTION_THRESHOLD:
                pairs.append(
                    ResonancePair(planets=(i, j), ratio=resonance.ratio, strength=resonance.strength)
                )
    return tuple(pairs)


def interaction_matrix(config: SystemConfig) -> tuple[tuple[float, ...], ...]:
    """Pairwise interaction strength m_i * m_j / delta_a^2.

    Coincident orbits get inf; the diagonal is zero.
    """
    masses = config.masses
    axes = config.semi_major_axes
    n = len(masses)
    rows = []
    for i in range(n):
        row = []
        for j in range(n):
            if i == j:
                row.append(0.0)
                continue
            separation = abs(axes[j] - axes[i])
            if separation == 0:
                row.append(math.inf)
            else:
                row.append(masses[i] * masses[j] / separation**2)
        rows.append(tuple(row))
    return tuple(rows)


def predict_evolution(config: SystemConfig) -> tuple[str, ...]:
    """Qualitative long-term predictions from threshold checks."""
    predictions = []

    if config.chaos_parameter > CHAOS_PREDICTION_THRESHOLD:
        predictions.append("System shows chaotic behavior - long-term instability possible")

    if config.stability_factor < CLOSE_ENCOUNTER_THRESHOLD:
        predictions.append("Close planetary encounters likely within 1 Gyr")

    if (
        config.primary_phase in MAIN_SEQUENCE_PHASES
        and config.system_age > main_sequence_lifetime(config.primary_mass)
    ):
        predictions.append("Stellar evolution will disrupt planetary orbits")

    return tuple(predictions)


def analyze_dynamics(config: SystemConfig) -> DynamicsData:
    """Build the dynamical picture of a configuration.

    Args:
        config: Generated configuration

    Returns:
        DynamicsData with orbital elements, resonances, the Hill verdict,
        the interaction matrix and evolution predictions
    """
    elements = tuple(
        zip(
            config.semi_major_axes,
            config.eccentricities,
            config.inclinations,
            config.ascending_nodes,
            config.arguments_of_periapsis,
            config.mean_anomalies,
        )
    )

    hill_factor = hill_stability(config.masses, config.semi_major_axes, config.central_mass)
    stable = hill_factor > HILL_STABILITY_THRESHOLD
    verdict = StabilityVerdict(
        stable=stable,
        timescale=config.stability_factor * STABILITY_TIMESCALE_SCALE,
        factors=("Dynamically stable",) if stable else ("Hill sphere overlap",),
    )

    resonances = find_resonances(config)
    logger.debug(
        f"Dynamics: {len(resonances)} resonant pairs, Hill factor {hill_factor:.2f}, "
        f"stable={stable}"
    )

    return DynamicsData(
        orbital_elements=elements,
        resonances=resonances,
        stability_analysis=verdict,
        evolution_prediction=predict_evolution(config),
        interaction_matrix=interaction_matrix(config),
        hill_stability_factor=hill_factor,
    )
