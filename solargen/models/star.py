"""Star body data model."""

from dataclasses import dataclass
from typing import Tuple

from ..utils.units import SolarMasses, Years


@dataclass(frozen=True)
class StarData:
    """A generated star.

    Stars carry only physical attributes. The primary sits at the origin;
    companions are placed on a ring at the binary separation.
    """

    id: str  # "star_0", "star_1", ...
    name: str  # "Primary", "Secondary_1", ...
    type: str  # Spectral class (O-M) or remnant kind
    mass: SolarMasses
    radius: float  # Solar radii
    temperature: float  # K
    luminosity: float  # Solar luminosities
    age: Years
    metallicity: float  # [Fe/H]
    evolution_phase: str
    position: Tuple[float, float, float] = (0.0, 0.0, 0.0)  # AU

    def __post_init__(self):
        """Validate star data after initialization."""
        if self.mass <= 0:
            raise ValueError(f"Invalid mass: {self.mass} (must be > 0)")
        if self.radius <= 0:
            raise ValueError(f"Invalid radius: {self.radius} (must be > 0)")
        if self.temperature <= 0:
            raise ValueError(f"Invalid temperature: {self.temperature} (must be > 0)")
        if self.luminosity < 0:
            raise ValueError(f"Invalid luminosity: {self.luminosity} (must be >= 0)")
        if self.age < 0:
            raise ValueError(f"Invalid age: {self.age} (must be >= 0)")
