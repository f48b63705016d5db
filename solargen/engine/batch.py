"""Parallel generation of independent systems.

Each request gets its own SolarSystemGenerator, so workers share nothing
but the read-only registry.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Sequence

from ..models.result import SystemResult
from ..registry.registry import get_registry
from ..schemas.requests import GenerationRequest
from ..utils.constants import DEFAULT_BATCH_WORKERS
from .generator import SolarSystemGenerator

logger = logging.getLogger(__name__)


def _generate_one(request: GenerationRequest) -> SystemResult:
    return SolarSystemGenerator(request.seed).generate_solar_system(request.system_class)


def generate_batch(
    requests: Sequence[GenerationRequest], max_workers: int = DEFAULT_BATCH_WORKERS
) -> list[SystemResult]:
    """Generate one system per request on a thread pool.

    Args:
        requests: Systems to generate
        max_workers: Worker threads (>= 1)

    Returns:
        Results in request order

    Raises:
        ValueError: If max_workers < 1
        SolarSystemGenerationError: The first failure, after all workers finish
    """
    if max_workers < 1:
        raise ValueError(f"Invalid max_workers: {max_workers} (must be >= 1)")
    if not requests:
        return []

    get_registry()  # build the shared table before workers start
    logger.info(f"Generating {len(requests)} systems on {max_workers} workers")
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        return list(executor.map(_generate_one, requests))
