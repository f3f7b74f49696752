"""Generation run domain exports."""

from .collection_generation_use_case import GenerationError, execute_collection_generation
from .run_contracts import GenerationOutcome, GenerationRequest

__all__ = [
    "GenerationRequest",
    "GenerationOutcome",
    "GenerationError",
    "execute_collection_generation",
]
