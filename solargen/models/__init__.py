"""Data models for solar system generation."""

from .disk import DiskData
from .dynamics import DynamicsData, ResonancePair, StabilityVerdict
from .enums import (
    ArchitectureKind,
    DiskType,
    FormationMechanism,
    GenerationStage,
    MigrationType,
    ObservationalStatus,
    ResonanceType,
    SolarSystemClass,
    StellarMultiplicity,
)
from .planet import PlanetData
from .result import SystemResult
from .star import StarData
from .statistics import SolarSystemStatistics
from .system_config import BinaryProperties, ConfigOverrides, DebrisDiskSpec, SystemConfig
from .system_type import (
    DiskProperties,
    HabitabilityZone,
    OrbitalDynamics,
    SolarSystemTypeDefinition,
    StellarProperties,
)

__all__ = [
    "ArchitectureKind",
    "BinaryProperties",
    "ConfigOverrides",
    "DebrisDiskSpec",
    "DiskData",
    "DiskProperties",
    "DiskType",
    "DynamicsData",
    "FormationMechanism",
    "GenerationStage",
    "HabitabilityZone",
    "MigrationType",
    "ObservationalStatus",
    "OrbitalDynamics",
    "PlanetData",
    "ResonancePair",
    "ResonanceType",
    "SolarSystemClass",
    "SolarSystemStatistics",
    "SolarSystemTypeDefinition",
    "StabilityVerdict",
    "StarData",
    "StellarMultiplicity",
    "StellarProperties",
    "SystemConfig",
    "SystemResult",
]
