"""Generation engine: architectures, pipeline, dynamics, evolution and batching."""

from .architectures import PlanetLayout, generate_architecture
from .batch import generate_batch
from .dynamics import analyze_dynamics
from .evolution import evolve_system
from .generator import SolarSystemGenerator, generate_solar_system

__all__ = [
    "PlanetLayout",
    "SolarSystemGenerator",
    "analyze_dynamics",
    "evolve_system",
    "generate_architecture",
    "generate_batch",
    "generate_solar_system",
]
