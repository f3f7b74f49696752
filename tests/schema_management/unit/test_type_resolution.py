"""Type classification and reference resolution tests."""

from __future__ import annotations

import pytest
from soa_postman.schema_management import (
    TypeShape,
    classify_type,
    enumerated_values,
    node_type_name,
    resolve_namespace_path,
)


@pytest.mark.parametrize(
    ("raw_type", "shape"),
    [
        ("bool", TypeShape.BOOLEAN),
        ("int", TypeShape.INTEGER),
        ("unsigned long", TypeShape.INTEGER),
        ("short", TypeShape.INTEGER),
        ("double", TypeShape.FLOATING),
        ("Decimal", TypeShape.FLOATING),
        ("std::string", TypeShape.TEXT),
        ("DateTime", TypeShape.DATETIME),
        ("Guid", TypeShape.IDENTIFIER),
        ("object", TypeShape.UNKNOWN),
        ("", TypeShape.UNKNOWN),
        ("Teamcenter::Soa::Geometry::Point", TypeShape.REFERENCE),
        ("int[]", TypeShape.ARRAY),
        ("std::string;int", TypeShape.MAP),
    ],
)
def test_classify_type_shapes(raw_type: str, shape: TypeShape) -> None:
    assert classify_type(raw_type).shape is shape


def test_scope_marker_wins_over_primitive_substrings() -> None:
    descriptor = classify_type("Foo::Bar::Constraint")

    assert descriptor.shape is TypeShape.REFERENCE
    assert descriptor.raw == "Foo::Bar::Constraint"


def test_array_descriptor_exposes_nested_element() -> None:
    primitive_array = classify_type("  int[][] ")
    reference_array = classify_type("Foo::Bar[]")

    assert primitive_array.element is not None
    assert primitive_array.element.shape is TypeShape.ARRAY
    assert primitive_array.element.element is not None
    assert primitive_array.element.element.is_primitive
    assert reference_array.element is not None
    assert reference_array.element.shape is TypeShape.REFERENCE
    assert not reference_array.element.is_primitive


def test_map_descriptor_splits_on_first_separator_and_renders_display() -> None:
    descriptor = classify_type("Teamcenter::Soa::Client::Model::IModelObject ; std::string;int")

    assert descriptor.key == "Teamcenter::Soa::Client::Model::IModelObject"
    assert descriptor.value is not None
    assert descriptor.value.raw == "std::string;int"
    assert descriptor.value.shape is TypeShape.MAP
    assert descriptor.value.value is not None
    assert descriptor.value.value.shape is TypeShape.INTEGER
    assert descriptor.display == (
        "(Teamcenter::Soa::Client::Model::IModelObject → std::string;int) map"
    )


def test_non_string_type_defaults_to_object() -> None:
    assert classify_type(None).raw == "object"
    assert node_type_name({"type": "int"}) == "int"
    assert node_type_name({"description": "no type"}) == "object"
    assert node_type_name(["not", "a", "node"]) == "object"


def test_resolve_namespace_path_walks_segments() -> None:
    tree = {"Foo": {"Bar": {"Status": {"type": "enum"}}}}

    assert resolve_namespace_path(tree, "Foo::Bar::Status") == {"type": "enum"}
    assert resolve_namespace_path(tree, "Foo::Bar") == {"Status": {"type": "enum"}}


@pytest.mark.parametrize("path", ["Foo::Missing", "Foo::Bar::Status::type::deeper", "Other"])
def test_resolve_namespace_path_returns_none_when_unresolved(path: str) -> None:
    tree = {"Foo": {"Bar": {"Status": {"type": "enum"}}}}

    assert resolve_namespace_path(tree, path) is None


def test_enumerated_values_only_for_list_properties() -> None:
    assert enumerated_values({"properties": ["Open", 2, None, True]}) == [
        "Open",
        "2",
        "",
        "true",
    ]
    assert enumerated_values({"properties": {"nested": {}}}) == []
    assert enumerated_values("leaf") == []
