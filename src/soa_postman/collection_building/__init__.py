"""Collection building exports."""

from .collection_builder import (
    build_collection,
    build_operation_item,
    ensure_child_folder,
    is_operation_node,
    version_key_to_pretty,
)
from .collection_models import CollectionBuildResult, OperationLocation

__all__ = [
    "CollectionBuildResult",
    "OperationLocation",
    "build_collection",
    "build_operation_item",
    "ensure_child_folder",
    "is_operation_node",
    "version_key_to_pretty",
]
