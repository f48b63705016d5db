"""Orbital dynamics analysis results."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ResonancePair:
    """A planet pair near a mean-motion resonance."""

    planets: Tuple[int, int]  # planet indices (inner, outer)
    ratio: Tuple[int, int]  # p:q
    strength: float  # 0-1

    def __post_init__(self):
        if not (0 <= self.strength <= 1):
            raise ValueError(f"Invalid strength: {self.strength} (must be 0-1)")


@dataclass(frozen=True)
class StabilityVerdict:
    """Stability assessment with the factors that drove it."""

    stable: bool
    timescale: float  # years
    factors: Tuple[str, ...]


@dataclass(frozen=True)
class DynamicsData:
    """Dynamical state of a generated system.

    orbital_elements has one row per planet: (a, e, i, node, periapsis,
    mean anomaly), angles in degrees. interaction_matrix is symmetric with a
    zero diagonal.
    """

    orbital_elements: Tuple[Tuple[float, ...], ...]
    resonances: Tuple[ResonancePair, ...]
    stability_analysis: StabilityVerdict
    evolution_prediction: Tuple[str, ...]
    interaction_matrix: Tuple[Tuple[float, ...], ...]
    hill_stability_factor: float  # inf with fewer than two planets
