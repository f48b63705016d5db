"""Exceptions raised by the generation engine.

Every error is local to a single generation call. Nothing is retried; the
caller decides whether to try again with a different seed or class.
"""


class SolarSystemGenerationError(Exception):
    """Base class for all generation failures."""


class UnknownSystemClassError(SolarSystemGenerationError, LookupError):
    """Requested archetype is not present in the registry."""

    def __init__(self, system_class):
        self.system_class = system_class
        super().__init__(f"Invalid solar system class: {system_class}")


class NumericDomainError(SolarSystemGenerationError, ValueError):
    """A physics calculator received an input outside its domain."""


class EvolutionInputError(SolarSystemGenerationError, ValueError):
    """Time-step evolution was called with a malformed config or step."""
