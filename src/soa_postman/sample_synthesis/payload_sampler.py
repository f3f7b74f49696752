"""Sample payload synthesis service."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from soa_postman.schema_management.schema_models import SchemaTree, TypeDescriptor, TypeShape
from soa_postman.schema_management.type_resolution import (
    classify_type,
    enumerated_values,
    node_type_name,
    resolve_namespace_path,
)

LOGGER = logging.getLogger(__name__)

MODEL_OBJECT_SAMPLE_KEY = "AAAAAAAAAAAAAA"
GENERIC_SAMPLE_KEY = "SampleKey"
QNAME_PREFIX = "http://teamcenter.com/Schemas/"

_PRIMITIVE_SAMPLES: dict[TypeShape, Any] = {
    TypeShape.BOOLEAN: False,
    TypeShape.INTEGER: 0,
    TypeShape.FLOATING: 0.0,
    TypeShape.TEXT: "",
    TypeShape.DATETIME: "",
    TypeShape.IDENTIFIER: "",
}


def synthesize_sample(raw_type: Any, tree: SchemaTree, guard: set[str] | None = None) -> Any:
    """Return a representative value for ``raw_type``.

    Arrays hold one element, maps hold one entry, and namespaced references are
    expanded field by field. A reference already present in ``guard`` yields an
    empty object so self-referencing types terminate.
    """
    in_progress = guard if guard is not None else set()
    return _synthesize(classify_type(raw_type), tree, in_progress)


def _synthesize(descriptor: TypeDescriptor, tree: SchemaTree, guard: set[str]) -> Any:
    if descriptor.shape is TypeShape.ARRAY and descriptor.element is not None:
        return [_synthesize(descriptor.element, tree, guard)]
    if descriptor.shape is TypeShape.MAP and descriptor.value is not None:
        return {map_sample_key(descriptor.key): _synthesize(descriptor.value, tree, guard)}
    if descriptor.shape is TypeShape.REFERENCE:
        return _synthesize_reference(descriptor.raw, tree, guard)
    if descriptor.is_primitive:
        return _PRIMITIVE_SAMPLES[descriptor.shape]
    return {}


def _synthesize_reference(reference: str, tree: SchemaTree, guard: set[str]) -> Any:
    if reference in guard:
        return {}
    resolved = resolve_namespace_path(tree, reference)
    if resolved is None:
        LOGGER.debug("Unresolved type reference %s", reference)
    enum_type_values = enumerated_values(resolved)
    if enum_type_values:
        return enum_type_values[0]
    if not isinstance(resolved, Mapping):
        return {}

    guard.add(reference)
    try:
        sample: dict[str, Any] = {}
        for field_name, field_node in resolved.items():
            enum_values = enumerated_values(field_node)
            if enum_values:
                sample[field_name] = enum_values[0]
            else:
                sample[field_name] = synthesize_sample(node_type_name(field_node), tree, guard)
        return sample
    finally:
        guard.discard(reference)


def map_sample_key(key_type: str) -> str:
    """Object-keyed maps use a recognisable fixed key."""
    if "imodelobject" in key_type.lower():
        return MODEL_OBJECT_SAMPLE_KEY
    return GENERIC_SAMPLE_KEY


def build_request_body(input_definition: Any, tree: SchemaTree) -> dict[str, Any]:
    """Deep-sample every input parameter of an operation."""
    body: dict[str, Any] = {}
    if not isinstance(input_definition, Mapping):
        return body

    for parameter, definition in input_definition.items():
        sample = synthesize_sample(node_type_name(definition), tree, set())
        properties = definition.get("properties") if isinstance(definition, Mapping) else None
        if isinstance(properties, Mapping):
            sample = {
                name: synthesize_sample(node_type_name(child), tree, set())
                for name, child in properties.items()
            }
        elif isinstance(properties, list) and properties:
            sample = enumerated_values(definition)[0]
        body[parameter] = sample
    return body


def shallow_sample(raw_type: Any) -> Any:
    """Top-level placeholder without expanding references; arrays stay empty."""
    descriptor = classify_type(raw_type)
    if descriptor.shape is TypeShape.ARRAY:
        return []
    return _PRIMITIVE_SAMPLES.get(descriptor.shape, {})


def build_example_output(
    library: str,
    version: str,
    service: str,
    operation: str,
    output_definition: Any,
) -> dict[str, Any]:
    """Build the example response body with its ``.QName`` and shallow field samples."""
    operation_title = operation[:1].upper() + operation[1:]
    example: dict[str, Any] = {
        ".QName": f"{QNAME_PREFIX}{library}/{version}/{service}.{operation_title}Response"
    }
    if isinstance(output_definition, Mapping):
        for name, definition in output_definition.items():
            key = "PartialErrors" if name == "partialErrors" else name
            example[key] = shallow_sample(node_type_name(definition))
    return example
