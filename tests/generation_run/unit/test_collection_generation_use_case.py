"""Collection generation use-case tests."""

from __future__ import annotations

import json
import shutil
from datetime import datetime
from pathlib import Path

import pytest
from soa_postman.generation_run import (
    GenerationError,
    GenerationRequest,
    execute_collection_generation,
)

_SAMPLE_STRUCTURE = Path(__file__).resolve().parents[3] / "samples" / "sample-structure.js"


def _copy_sample(tmp_path: Path) -> Path:
    destination = tmp_path / "structure.js"
    shutil.copyfile(_SAMPLE_STRUCTURE, destination)
    return destination


def _folder(parent: dict, name: str) -> dict:
    return next(item for item in parent["item"] if item["name"] == name)


def test_generation_writes_collection_for_sample_structure(tmp_path: Path) -> None:
    structure_path = _copy_sample(tmp_path)
    output_path = tmp_path / "out" / "collection.json"

    outcome = execute_collection_generation(
        GenerationRequest(structure_path=str(structure_path), output_path=str(output_path)),
        generated_at=datetime(2025, 6, 1, 12, 0, 0),
    )
    collection = json.loads(output_path.read_text(encoding="utf-8"))

    assert outcome.output_path == output_path.resolve()
    assert outcome.operation_count == 3
    assert outcome.internal_operation_count == 0
    assert collection["info"]["name"] == "Teamcenter REST API (2025-06-01 12:00:00)"
    assert [folder["name"] for folder in collection["item"]] == ["Core", "ChangeManagement"]


def test_generation_samples_nested_references_and_enumerations(tmp_path: Path) -> None:
    output_path = tmp_path / "collection.json"

    execute_collection_generation(
        GenerationRequest(
            structure_path=str(_copy_sample(tmp_path)), output_path=str(output_path)
        )
    )
    collection = json.loads(output_path.read_text(encoding="utf-8"))
    data_management = _folder(_folder(_folder(collection, "Core"), "Services"), "DataManagement")
    get_properties = _folder(_folder(data_management, "2006-03"), "getProperties")
    change = _folder(_folder(_folder(collection, "ChangeManagement"), "Services"), "Change")
    create_change = _folder(_folder(change, "2020-04 (Cm)"), "createChange")

    body = json.loads(get_properties["request"]["body"]["raw"])["body"]
    assert body == {
        "objects": [{}],
        "attributes": [""],
        "options": {"mode": "Lazy", "limit": 0, "parent": {}},
    }
    assert "*Enum:* [Lazy, Eager]" in get_properties["request"]["description"]
    assert "- `options.parent`" in get_properties["request"]["description"]
    assert json.loads(create_change["request"]["body"]["raw"])["body"] == {"status": "Open"}
    example = json.loads(get_properties["response"][0]["body"])
    assert example["modelObjects"] == {}
    assert example["plain"] == []


def test_generation_includes_internal_operations_when_requested(tmp_path: Path) -> None:
    outcome = execute_collection_generation(
        GenerationRequest(
            structure_path=str(_copy_sample(tmp_path)),
            output_path=str(tmp_path / "collection.json"),
            include_internal=True,
        )
    )

    assert outcome.operation_count == 4
    assert outcome.internal_operation_count == 1


def test_generation_applies_configuration(tmp_path: Path) -> None:
    config_path = tmp_path / "soa-postman.yaml"
    config_path.write_text("variables:\n  TCURL: https://plm.example.com\n", encoding="utf-8")
    output_path = tmp_path / "collection.json"

    execute_collection_generation(
        GenerationRequest(
            structure_path=str(_copy_sample(tmp_path)),
            output_path=str(output_path),
            config_path=str(config_path),
        )
    )
    collection = json.loads(output_path.read_text(encoding="utf-8"))

    assert collection["variable"][0] == {"key": "TCURL", "value": "https://plm.example.com"}


def test_missing_structure_raises_generation_error(tmp_path: Path) -> None:
    output_path = tmp_path / "collection.json"

    with pytest.raises(GenerationError, match="Structure file not found"):
        execute_collection_generation(
            GenerationRequest(
                structure_path=str(tmp_path / "missing.js"), output_path=str(output_path)
            )
        )
    assert not output_path.exists()


def test_invalid_configuration_raises_generation_error(tmp_path: Path) -> None:
    config_path = tmp_path / "bad.yaml"
    config_path.write_text("- not a mapping\n", encoding="utf-8")

    with pytest.raises(GenerationError, match="Configuration root must be a mapping"):
        execute_collection_generation(
            GenerationRequest(
                structure_path=str(_copy_sample(tmp_path)),
                output_path=str(tmp_path / "collection.json"),
                config_path=str(config_path),
            )
        )
