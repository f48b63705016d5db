"""Request and response schemas for the batch and command-line boundary."""

from .requests import BatchGenerationRequest, GenerationRequest
from .responses import SystemSummaryResponse

__all__ = ["BatchGenerationRequest", "GenerationRequest", "SystemSummaryResponse"]
