"""Postman collection assembly service."""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Iterator, Mapping
from datetime import datetime
from typing import Any

from soa_postman.configuration.runtime_settings import GeneratorConfig
from soa_postman.field_documentation import render_body_fields_markdown
from soa_postman.html_conversion import html_to_markdown
from soa_postman.sample_synthesis import build_example_output, build_request_body
from soa_postman.schema_management.schema_models import SchemaTree

from .collection_models import (
    COLLECTION_DESCRIPTION,
    COLLECTION_NAME_PREFIX,
    INTERNAL_KEY,
    POSTMAN_SCHEMA_URL,
    PRIMARY_TEMPLATE_NAME,
    REST_SERVICES_URL_PREFIX,
    SERVICES_FOLDER_NAME,
    SOA_KEY,
    CollectionBuildResult,
    OperationLocation,
)

LOGGER = logging.getLogger(__name__)

_VERSION_KEY = re.compile(r"^_(\d{4})_(\d{2})$")
_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def build_collection(
    tree: SchemaTree,
    config: GeneratorConfig,
    *,
    include_internal: bool = False,
    generated_at: datetime | None = None,
) -> CollectionBuildResult:
    """Walk every template library and attach one request item per operation."""
    timestamp = (generated_at or datetime.now()).strftime(_TIMESTAMP_FORMAT)
    collection = build_empty_collection(f"{COLLECTION_NAME_PREFIX} ({timestamp})", config)

    operation_count = 0
    internal_count = 0
    for template_name, library_name, library_node, internal in _iter_libraries(
        tree, include_internal
    ):
        added = _collect_from_library(
            collection,
            template_name=template_name,
            library_name=library_name,
            library_node=library_node,
            tree=tree,
            internal=internal,
            config=config,
        )
        operation_count += added
        if internal:
            internal_count += added

    LOGGER.info("Collected %d operations (%d internal)", operation_count, internal_count)
    return CollectionBuildResult(
        collection=collection,
        operation_count=operation_count,
        internal_operation_count=internal_count,
    )


def _iter_libraries(
    tree: SchemaTree, include_internal: bool
) -> Iterator[tuple[str, str, Mapping[str, Any], bool]]:
    for template_name, template_node in tree.items():
        if not isinstance(template_node, Mapping):
            continue
        soa = template_node.get(SOA_KEY)
        if not isinstance(soa, Mapping):
            LOGGER.debug("Template %s has no %s section", template_name, SOA_KEY)
            continue

        for library_name, library_node in soa.items():
            if library_name == INTERNAL_KEY or not isinstance(library_node, Mapping):
                continue
            yield template_name, library_name, library_node, False

        if not include_internal:
            continue
        internal = soa.get(INTERNAL_KEY)
        if not isinstance(internal, Mapping):
            continue
        for library_name, library_node in internal.items():
            if isinstance(library_node, Mapping):
                yield template_name, library_name, library_node, True


def _collect_from_library(
    collection: dict[str, Any],
    *,
    template_name: str,
    library_name: str,
    library_node: Mapping[str, Any],
    tree: SchemaTree,
    internal: bool,
    config: GeneratorConfig,
) -> int:
    services_folder = ensure_child_folder(
        ensure_child_folder(collection, library_name), SERVICES_FOLDER_NAME
    )
    added = 0
    for version_key, version_node in library_node.items():
        if not isinstance(version_key, str) or not version_key.startswith("_"):
            continue
        if not isinstance(version_node, Mapping):
            continue
        version = version_key_to_pretty(version_key)
        for service_name, service_node in version_node.items():
            if not isinstance(service_node, Mapping):
                continue
            service_folder = ensure_child_folder(services_folder, service_name)
            date_folder_name = (
                version if template_name == PRIMARY_TEMPLATE_NAME else f"{version} ({template_name})"
            )
            date_folder = ensure_child_folder(service_folder, date_folder_name)

            for operation_name, operation_node in service_node.items():
                if not is_operation_node(operation_name, operation_node):
                    continue
                location = OperationLocation(
                    template=template_name,
                    library=library_name,
                    version=version,
                    service=service_name,
                    operation=operation_name,
                    internal=internal,
                )
                date_folder["item"].append(
                    build_operation_item(location, operation_node, tree, config)
                )
                added += 1
    return added


def build_operation_item(
    location: OperationLocation,
    operation_node: Any,
    tree: SchemaTree,
    config: GeneratorConfig,
) -> dict[str, Any]:
    """Build the Postman item (request plus example response) for one operation."""
    definition = operation_node if isinstance(operation_node, Mapping) else {}
    input_definition = definition.get("input")

    payload = {
        "header": config.request_header(),
        "body": build_request_body(input_definition, tree),
    }
    request = post_request(
        REST_SERVICES_URL_PREFIX + location.url_path,
        payload,
        operation_description(location, definition, tree),
    )
    example_output = build_example_output(
        location.library,
        location.version,
        location.service,
        location.operation,
        definition.get("output"),
    )
    LOGGER.debug("Built item %s", location.url_path)
    return {
        "name": location.operation,
        "_internal": location.internal,
        "request": request,
        "response": [
            {
                "name": "Example 200",
                "status": "OK",
                "code": 200,
                "header": [],
                "_postman_previewlanguage": "json",
                "body": to_pretty_json(example_output),
            }
        ],
    }


def operation_description(
    location: OperationLocation, definition: Mapping[str, Any], tree: SchemaTree
) -> str:
    """Converted HTML description followed by the body fields section."""
    raw_description = definition.get("description")
    description = html_to_markdown(raw_description if isinstance(raw_description, str) else "")
    if location.internal:
        description = f"**Internal:** true\n\n{description}".strip()

    body_fields = render_body_fields_markdown(definition.get("input"), tree)
    if not description.strip():
        return body_fields
    return f"{description}\n\n{body_fields}"


def is_operation_node(name: str, node: Any) -> bool:
    """Operations start lowercase and are neither numeric nor *Request/*Response types."""
    if not isinstance(name, str) or not name or node is None:
        return False
    if not name[0].islower():
        return False
    if name.isdigit():
        return False
    lowered = name.lower()
    if lowered.endswith("response") or lowered.endswith("request"):
        return False
    return isinstance(node, (Mapping, list))


def version_key_to_pretty(version_key: str) -> str:
    """``_2011_06`` becomes ``2011-06``; other keys only lose the leading underscore."""
    match = _VERSION_KEY.match(version_key)
    if match:
        return f"{match.group(1)}-{match.group(2)}"
    return version_key[1:] if version_key.startswith("_") else version_key


def build_empty_collection(name: str, config: GeneratorConfig) -> dict[str, Any]:
    variables = config.variables
    return {
        "info": {
            "name": name,
            "description": COLLECTION_DESCRIPTION,
            "schema": POSTMAN_SCHEMA_URL,
        },
        "item": [],
        "variable": [
            {"key": "TCURL", "value": variables.tcurl},
            {"key": "TCURL_WEBTIER_PORT", "value": variables.webtier_port},
            {"key": "WEBTIER_APP_NAME", "value": variables.webtier_app_name},
        ],
    }


def post_request(raw_url: str, payload: Mapping[str, Any], description: str) -> dict[str, Any]:
    # url stays a plain string; Postman drops structured urls without host parts
    request: dict[str, Any] = {
        "method": "POST",
        "header": [{"key": "Content-Type", "value": "application/json"}],
        "url": raw_url,
        "body": {"mode": "raw", "raw": to_pretty_json(payload)},
    }
    if description and description.strip():
        request["description"] = description
    return request


def ensure_child_folder(parent: dict[str, Any], name: str) -> dict[str, Any]:
    """Return the child folder called ``name``, creating it on first use."""
    items = parent.get("item")
    if not isinstance(items, list):
        items = []
        parent["item"] = items
    for item in items:
        if isinstance(item, dict) and item.get("name") == name and "request" not in item:
            return item
    folder: dict[str, Any] = {"name": name, "item": []}
    items.append(folder)
    return folder


def to_pretty_json(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False)
