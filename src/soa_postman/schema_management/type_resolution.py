"""Type descriptor classification and namespaced reference resolution."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .schema_models import (
    ARRAY_SUFFIX,
    DEFAULT_TYPE_NAME,
    MAP_SEPARATOR,
    SCOPE_SEPARATOR,
    SchemaTree,
    TypeDescriptor,
    TypeShape,
)

_STD_NAMESPACE_PREFIX = "std::"


def classify_type(raw_type: Any) -> TypeDescriptor:
    """Classify a type descriptor string by suffix, separator, scope, then primitive name."""
    raw = raw_type.strip() if isinstance(raw_type, str) else DEFAULT_TYPE_NAME

    if raw.endswith(ARRAY_SUFFIX):
        element = classify_type(raw[: -len(ARRAY_SUFFIX)])
        return TypeDescriptor(raw=raw, shape=TypeShape.ARRAY, element=element)

    if MAP_SEPARATOR in raw:
        key, value = raw.split(MAP_SEPARATOR, 1)
        return TypeDescriptor(
            raw=raw, shape=TypeShape.MAP, key=key.strip(), value=classify_type(value)
        )

    if SCOPE_SEPARATOR in raw and not raw.lower().startswith(_STD_NAMESPACE_PREFIX):
        return TypeDescriptor(raw=raw, shape=TypeShape.REFERENCE)

    return TypeDescriptor(raw=raw, shape=_primitive_shape(raw))


def _primitive_shape(raw: str) -> TypeShape:
    lowered = raw.lower()
    if "bool" in lowered:
        return TypeShape.BOOLEAN
    if any(token in lowered for token in ("int", "long", "short")):
        return TypeShape.INTEGER
    if any(token in lowered for token in ("double", "float", "decimal")):
        return TypeShape.FLOATING
    if lowered.endswith("string"):
        return TypeShape.TEXT
    if "datetime" in lowered:
        return TypeShape.DATETIME
    if "uid" in lowered:
        return TypeShape.IDENTIFIER
    return TypeShape.UNKNOWN


def node_type_name(node: Any) -> str:
    """Return the declared ``type`` of a schema node, ``object`` when absent."""
    if isinstance(node, Mapping):
        declared = node.get("type")
        if isinstance(declared, str):
            return declared
        if declared is not None:
            return str(declared)
    return DEFAULT_TYPE_NAME


def resolve_namespace_path(tree: SchemaTree, namespaced_path: str) -> Any | None:
    """Walk ``tree`` along ``A::B::C``; ``None`` when any segment is missing."""
    current: Any = tree
    for segment in namespaced_path.strip().split(SCOPE_SEPARATOR):
        if not isinstance(current, Mapping) or segment not in current:
            return None
        current = current[segment]
    return current


def enumerated_values(node: Any) -> list[str]:
    """Return the literal values of a node whose ``properties`` is a list."""
    if not isinstance(node, Mapping):
        return []
    properties = node.get("properties")
    if not isinstance(properties, list):
        return []
    return ["" if value is None else _as_text(value) for value in properties]


def _as_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
