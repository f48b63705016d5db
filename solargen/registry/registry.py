"""Read-only catalogue of system archetypes."""

import logging
from functools import lru_cache
from types import MappingProxyType
from typing import Iterator, Mapping

from ..errors import UnknownSystemClassError
from ..models.enums import SolarSystemClass
from ..models.system_type import SolarSystemTypeDefinition
from ..utils.rng import SystemRNG
from .archetypes import build_archetypes

logger = logging.getLogger(__name__)


class SystemTypeRegistry:
    """Immutable mapping from SolarSystemClass to its type definition.

    The registry has no mutation API. It is safe to share one instance across
    any number of generators and threads.
    """

    def __init__(self, types: Mapping[SolarSystemClass, SolarSystemTypeDefinition]):
        """Create a registry over a fixed table.

        Args:
            types: Archetype table keyed by class; copied on construction
        """
        self._types = MappingProxyType(dict(types))

    def __len__(self) -> int:
        return len(self._types)

    def __contains__(self, system_class) -> bool:
        try:
            return SolarSystemClass(system_class) in self._types
        except ValueError:
            return False

    def __iter__(self) -> Iterator[SolarSystemTypeDefinition]:
        return iter(self._types.values())

    def get_by_class(self, system_class: SolarSystemClass | str) -> SolarSystemTypeDefinition:
        """Look up an archetype by class.

        Args:
            system_class: Enum member or its string value

        Returns:
            Type definition for the class

        Raises:
            UnknownSystemClassError: If the class is not in the registry
        """
        try:
            key = SolarSystemClass(system_class)
        except ValueError:
            raise UnknownSystemClassError(system_class) from None

        definition = self._types.get(key)
        if definition is None:
            raise UnknownSystemClassError(system_class)
        return definition

    def get_random(self, rng: SystemRNG) -> SolarSystemTypeDefinition:
        """Pick an archetype weighted by discoverability.

        Each archetype is kept with probability equal to its discoverability,
        in catalogue order, and one of the kept archetypes is chosen
        uniformly. If none is kept the pick is uniform over all archetypes.

        Args:
            rng: Stream to draw from

        Returns:
            Selected type definition
        """
        candidates = [t for t in self._types.values() if rng.random() < t.discoverability]
        if not candidates:
            logger.debug("No archetype passed the discoverability filter, picking uniformly")
            candidates = list(self._types.values())
        return rng.choice(candidates)

    def get_by_star_count(self, number_of_stars: int) -> list[SolarSystemTypeDefinition]:
        """All archetypes with exactly this many stars."""
        return [t for t in self._types.values() if t.number_of_stars == number_of_stars]

    def get_by_age_range(self, min_age: float, max_age: float) -> list[SolarSystemTypeDefinition]:
        """All archetypes whose primary age lies in [min_age, max_age] years."""
        return [
            t
            for t in self._types.values()
            if min_age <= t.stellar_properties.primary_age <= max_age
        ]

    def all_types(self) -> list[SolarSystemTypeDefinition]:
        """Every archetype in catalogue order."""
        return list(self._types.values())

    def classes(self) -> list[SolarSystemClass]:
        """Every registered class in catalogue order."""
        return list(self._types.keys())


@lru_cache(maxsize=None)
def get_registry() -> SystemTypeRegistry:
    """Process-wide registry, built on first use."""
    registry = SystemTypeRegistry(build_archetypes())
    logger.debug(f"Loaded {len(registry)} system archetypes")
    return registry
