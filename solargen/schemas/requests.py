"""Pydantic request schemas for batch and command-line generation."""

from pydantic import BaseModel, Field

from ..models.enums import SolarSystemClass
from ..utils.constants import DEFAULT_BATCH_WORKERS, RNG_SEED_DEFAULT


class GenerationRequest(BaseModel):
    """Request to generate one system."""

    system_class: SolarSystemClass | None = Field(
        default=None, description="Archetype to generate; omitted picks by discoverability"
    )
    seed: int = Field(default=RNG_SEED_DEFAULT, ge=0, description="RNG seed for determinism")


class BatchGenerationRequest(BaseModel):
    """Request to generate many independent systems in parallel."""

    requests: list[GenerationRequest] = Field(description="Systems to generate, in output order")
    max_workers: int = Field(
        default=DEFAULT_BATCH_WORKERS, ge=1, le=64, description="Worker threads"
    )
