"""Collection building entities and constants."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

POSTMAN_SCHEMA_URL = "https://schema.getpostman.com/json/collection/v2.1.0/collection.json"
COLLECTION_NAME_PREFIX = "Teamcenter REST API"
PRIMARY_TEMPLATE_NAME = "Teamcenter"
SOA_KEY = "Soa"
INTERNAL_KEY = "Internal"
SERVICES_FOLDER_NAME = "Services"
REST_SERVICES_URL_PREFIX = "{{TCURL}}:{{TCURL_WEBTIER_PORT}}/{{WEBTIER_APP_NAME}}/JsonRestServices/"

COLLECTION_DESCRIPTION = """# Teamcenter REST API Collection

This collection was generated from **structure.js**.
It mirrors Teamcenter JsonRestServices:
`<Library> → Services → <Service> → <YYYY-MM> → <operation>`.

> **What you should do now**
> 1. Set Postman variables: **TCURL**, **TCURL_WEBTIER_PORT**, **WEBTIER_APP_NAME** (defaults come from config).
> 2. Open **Core → Services → Session → 2011-06 → login** and try a request.
> 3. Fill the `body.credentials` fields (user, password).
> 4. Keep the `header` section as-is (already included from config).
> 5. (Optional) Re-run the generator with `--include-internal` to add Internal APIs.

**Notes**
- Example responses include `.QName` and minimal placeholders.
- Internal APIs are **excluded by default**. Include them with `--include-internal`.
"""


@dataclass(frozen=True)
class OperationLocation:
    """Position of one operation inside the structure tree."""

    template: str
    library: str
    version: str
    service: str
    operation: str
    internal: bool

    @property
    def url_path(self) -> str:
        path = f"{self.library}-{self.version}-{self.service}/{self.operation}"
        return f"{INTERNAL_KEY}-{path}" if self.internal else path


@dataclass(frozen=True)
class CollectionBuildResult:
    """Assembled collection plus traversal counters."""

    collection: dict[str, Any]
    operation_count: int
    internal_operation_count: int
