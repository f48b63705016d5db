"""Circumstellar disk data model."""

from dataclasses import dataclass

from ..utils.units import AU, EarthMasses
from .enums import DiskType


@dataclass(frozen=True)
class DiskData:
    """A generated protoplanetary, transitional or debris disk."""

    id: str
    name: str
    type: DiskType
    mass: EarthMasses
    inner_radius: AU
    outer_radius: AU
    temperature: float  # K
    dust_to_gas_ratio: float

    def __post_init__(self):
        """Validate disk data after initialization."""
        if self.mass <= 0:
            raise ValueError(f"Invalid mass: {self.mass} (must be > 0)")
        if not (0 <= self.inner_radius < self.outer_radius):
            raise ValueError(
                f"Invalid radii: inner {self.inner_radius}, outer {self.outer_radius} "
                "(must satisfy 0 <= inner < outer)"
            )
        if self.temperature < 0:
            raise ValueError(f"Invalid temperature: {self.temperature} (must be >= 0)")
