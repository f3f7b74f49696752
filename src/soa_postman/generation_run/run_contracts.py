"""Generation run entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class GenerationRequest:
    """Input contract for generating one collection."""

    structure_path: str
    output_path: str
    config_path: str | None = None
    include_internal: bool = False


@dataclass(frozen=True)
class GenerationOutcome:
    """Output contract for one written collection."""

    output_path: Path
    operation_count: int
    internal_operation_count: int
