"""Procedural solar system generation."""

from .engine import SolarSystemGenerator, evolve_system, generate_batch, generate_solar_system
from .errors import (
    EvolutionInputError,
    NumericDomainError,
    SolarSystemGenerationError,
    UnknownSystemClassError,
)
from .models import SolarSystemClass, SystemConfig, SystemResult
from .registry import get_registry

__version__ = "0.1.0"

__all__ = [
    "EvolutionInputError",
    "NumericDomainError",
    "SolarSystemClass",
    "SolarSystemGenerationError",
    "SolarSystemGenerator",
    "SystemConfig",
    "SystemResult",
    "UnknownSystemClassError",
    "evolve_system",
    "generate_batch",
    "generate_solar_system",
    "get_registry",
]
