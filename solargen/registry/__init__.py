"""System archetype catalogue and classification helpers."""

from .classification import (
    assess_system_stability,
    calculate_system_habitability,
    classify_system_by_architecture,
    generate_system_resources,
    get_observational_signatures,
    predict_system_evolution,
)
from .registry import SystemTypeRegistry, get_registry

__all__ = [
    "SystemTypeRegistry",
    "assess_system_stability",
    "calculate_system_habitability",
    "classify_system_by_architecture",
    "generate_system_resources",
    "get_observational_signatures",
    "get_registry",
    "predict_system_evolution",
]
