"""Request body field documentation service."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any

from soa_postman.html_conversion import html_to_markdown
from soa_postman.schema_management.schema_models import SchemaTree, TypeShape
from soa_postman.schema_management.type_resolution import (
    classify_type,
    enumerated_values,
    node_type_name,
    resolve_namespace_path,
)

from .field_doc_models import FieldDoc

BODY_FIELDS_HEADING = "### Body fields"
NO_BODY_MARKER = "*(no body)*"
NO_FIELDS_MARKER = "*(no fields)*"

_WHITESPACE_RUN = re.compile(r"\s+")


def collect_field_docs(
    path: str,
    node: Any,
    tree: SchemaTree,
    type_stack: set[str],
    out: list[FieldDoc],
    visited: set[str],
) -> None:
    """Flatten ``node`` into ``out`` as one FieldDoc per distinct dotted path.

    ``type_stack`` holds the references being expanded on the current branch;
    meeting one of them again documents the field without descending.
    ``visited`` makes the collection idempotent per path.
    """
    if path in visited:
        return
    visited.add(path)

    descriptor = classify_type(node_type_name(node))
    description = _node_description(node)

    if _declares_enumeration(node):
        enum_values = tuple(enumerated_values(node))
        out.append(FieldDoc(path, descriptor.display, description, enum_values))
        return

    properties = node.get("properties") if isinstance(node, Mapping) else None
    if isinstance(properties, Mapping):
        out.append(FieldDoc(path, descriptor.display, description))
        for child_name, child in properties.items():
            collect_field_docs(f"{path}.{child_name}", child, tree, type_stack, out, visited)
        return

    if descriptor.shape is not TypeShape.REFERENCE:
        out.append(FieldDoc(path, descriptor.display, description))
        return

    reference = descriptor.raw
    if reference in type_stack:
        out.append(FieldDoc(path, descriptor.display, description))
        return

    resolved = resolve_namespace_path(tree, reference)
    resolved_enum = enumerated_values(resolved)
    if resolved_enum:
        out.append(FieldDoc(path, descriptor.display, description, tuple(resolved_enum)))
        return

    out.append(FieldDoc(path, descriptor.display, description))
    if not isinstance(resolved, Mapping):
        return
    type_stack.add(reference)
    try:
        for field_name, field_node in resolved.items():
            collect_field_docs(f"{path}.{field_name}", field_node, tree, type_stack, out, visited)
    finally:
        type_stack.discard(reference)


def _declares_enumeration(node: Any) -> bool:
    return isinstance(node, Mapping) and isinstance(node.get("properties"), list)


def _node_description(node: Any) -> str:
    if not isinstance(node, Mapping):
        return ""
    description = node.get("description")
    if not isinstance(description, str):
        return ""
    return html_to_markdown(description)


def collect_body_field_docs(input_definition: Any, tree: SchemaTree) -> list[FieldDoc]:
    """Collect the FieldDocs of every input parameter, sorted by path."""
    fields: list[FieldDoc] = []
    if not isinstance(input_definition, Mapping):
        return fields
    visited: set[str] = set()
    for root_name, definition in input_definition.items():
        collect_field_docs(root_name, definition, tree, set(), fields, visited)
    return sorted(fields, key=lambda field: field.path)


def render_body_fields_markdown(input_definition: Any, tree: SchemaTree) -> str:
    """Render the ``Body fields`` Markdown section for one operation."""
    if not isinstance(input_definition, Mapping):
        return f"{BODY_FIELDS_HEADING}\n{NO_BODY_MARKER}"
    fields = collect_body_field_docs(input_definition, tree)
    if not fields:
        return f"{BODY_FIELDS_HEADING}\n{NO_FIELDS_MARKER}"
    return format_field_docs(fields)


def format_field_docs(fields: Sequence[FieldDoc]) -> str:
    lines = [BODY_FIELDS_HEADING]
    for field in fields:
        line = f"- `{field.path}`"
        if field.type.strip():
            line += f" *({field.type})*"
        if field.description.strip():
            line += " — " + _WHITESPACE_RUN.sub(" ", field.description).strip()
        if field.enum_values:
            line += "  \n  *Enum:* [" + ", ".join(field.enum_values) + "]"
        lines.append(line)
    return "\n".join(lines).strip()
