"""Schema management exports."""

from .schema_models import SchemaDocument, SchemaTree, TypeDescriptor, TypeShape
from .structure_loader import (
    SchemaError,
    extract_root_object,
    load_structure_document,
    parse_lenient_json,
)
from .type_resolution import (
    classify_type,
    enumerated_values,
    node_type_name,
    resolve_namespace_path,
)

__all__ = [
    "SchemaDocument",
    "SchemaTree",
    "TypeDescriptor",
    "TypeShape",
    "SchemaError",
    "extract_root_object",
    "load_structure_document",
    "parse_lenient_json",
    "classify_type",
    "enumerated_values",
    "node_type_name",
    "resolve_namespace_path",
]
