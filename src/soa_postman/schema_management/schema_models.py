"""Schema management entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

SchemaTree = Mapping[str, Any]

ARRAY_SUFFIX = "[]"
MAP_SEPARATOR = ";"
SCOPE_SEPARATOR = "::"
DEFAULT_TYPE_NAME = "object"


class TypeShape(str, Enum):
    """Shape tag produced once per type descriptor."""

    ARRAY = "array"
    MAP = "map"
    REFERENCE = "reference"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOATING = "floating"
    TEXT = "text"
    DATETIME = "datetime"
    IDENTIFIER = "identifier"
    UNKNOWN = "unknown"


PRIMITIVE_SHAPES = frozenset(
    {
        TypeShape.BOOLEAN,
        TypeShape.INTEGER,
        TypeShape.FLOATING,
        TypeShape.TEXT,
        TypeShape.DATETIME,
        TypeShape.IDENTIFIER,
    }
)


@dataclass(frozen=True)
class TypeDescriptor:
    """Classified type descriptor string."""

    raw: str
    shape: TypeShape
    element: TypeDescriptor | None = None
    key: str = ""
    value: TypeDescriptor | None = None

    @property
    def is_primitive(self) -> bool:
        return self.shape in PRIMITIVE_SHAPES

    @property
    def display(self) -> str:
        if self.shape is TypeShape.MAP:
            value = self.value.raw if self.value is not None else ""
            return f"({self.key} → {value}) map"
        return self.raw


@dataclass(frozen=True)
class SchemaDocument:
    """Parsed structure document."""

    source_path: Path | None
    root: SchemaTree
