"""Collection generation use-case service."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path

from soa_postman.collection_building import build_collection
from soa_postman.configuration import ConfigurationError, load_configuration
from soa_postman.schema_management import SchemaError, load_structure_document

from .run_contracts import GenerationOutcome, GenerationRequest

LOGGER = logging.getLogger(__name__)


class GenerationError(Exception):
    """Raised when a collection cannot be generated."""


def execute_collection_generation(
    request: GenerationRequest, *, generated_at: datetime | None = None
) -> GenerationOutcome:
    """Load configuration and structure, build the collection and write it as JSON."""
    try:
        config = load_configuration(request.config_path)
        document = load_structure_document(request.structure_path)
    except (ConfigurationError, SchemaError, OSError) as exc:
        raise GenerationError(str(exc)) from exc

    LOGGER.info("Loaded structure document %s", document.source_path)
    result = build_collection(
        document.root,
        config,
        include_internal=request.include_internal,
        generated_at=generated_at,
    )

    output_path = Path(request.output_path)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(
            json.dumps(result.collection, indent=2, ensure_ascii=False), encoding="utf-8"
        )
    except OSError as exc:
        raise GenerationError(f"Failed to write collection {output_path}: {exc}") from exc

    return GenerationOutcome(
        output_path=output_path.resolve(),
        operation_count=result.operation_count,
        internal_operation_count=result.internal_operation_count,
    )
