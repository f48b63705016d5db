"""Complete generation result."""

from dataclasses import dataclass
from typing import Tuple

from .disk import DiskData
from .dynamics import DynamicsData
from .planet import PlanetData
from .star import StarData
from .statistics import SolarSystemStatistics
from .system_config import SystemConfig
from .system_type import SolarSystemTypeDefinition


@dataclass(frozen=True)
class SystemResult:
    """Everything one generation call produces.

    A plain, fully-owned value: renderers read it, nothing in the engine keeps
    a reference to it after returning.
    """

    config: SystemConfig
    system_type: SolarSystemTypeDefinition
    planets: Tuple[PlanetData, ...]
    stars: Tuple[StarData, ...]
    disks: Tuple[DiskData, ...]
    dynamics: DynamicsData
    statistics: SolarSystemStatistics

    def __post_init__(self):
        if len(self.planets) != self.config.number_of_planets:
            raise ValueError(
                f"Invalid planets: expected {self.config.number_of_planets}, "
                f"got {len(self.planets)}"
            )
        if len(self.stars) != self.config.number_of_stars:
            raise ValueError(
                f"Invalid stars: expected {self.config.number_of_stars}, got {len(self.stars)}"
            )
