"""Planet body data model."""

from dataclasses import dataclass

from ..utils.units import AU, Days, EarthMasses


@dataclass(frozen=True)
class PlanetData:
    """A generated planet with its derived flags."""

    id: str  # "planet_0", "planet_1", ...
    name: str  # "Planet b", "Planet c", ...
    type: str  # mercury_like ... jupiter_like
    mass: EarthMasses
    radius: float  # Earth radii
    semi_major_axis: AU
    eccentricity: float
    inclination: float  # degrees
    period: Days
    temperature: float  # K (equilibrium)
    atmosphere: bool
    habitability: float  # 0-1
    moons: int
    rings: bool
    tidally_locked: bool

    def __post_init__(self):
        """Validate planet data after initialization."""
        if self.mass <= 0:
            raise ValueError(f"Invalid mass: {self.mass} (must be > 0)")
        if self.radius <= 0:
            raise ValueError(f"Invalid radius: {self.radius} (must be > 0)")
        if self.semi_major_axis <= 0:
            raise ValueError(f"Invalid semi_major_axis: {self.semi_major_axis} (must be > 0)")
        if not (0 <= self.eccentricity < 1):
            raise ValueError(f"Invalid eccentricity: {self.eccentricity} (must be 0-1)")
        if not (0 <= self.habitability <= 1):
            raise ValueError(f"Invalid habitability: {self.habitability} (must be 0-1)")
        if self.moons < 0:
            raise ValueError(f"Invalid moons: {self.moons} (must be >= 0)")
