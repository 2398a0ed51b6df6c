"""Application layer - use cases and orchestration."""

from .commands import GeneratePartsCommand
from .dtos import GenerationOutput, GenerationRequest

__all__ = [
    "GeneratePartsCommand",
    "GenerationOutput",
    "GenerationRequest",
]
