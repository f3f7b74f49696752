"""Configuration domain entities."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

DEFAULT_TCURL = "http://127.0.0.1"
DEFAULT_WEBTIER_PORT = "7001"
DEFAULT_WEBTIER_APP_NAME = "tc"

DEFAULT_REQUEST_HEADER: Mapping[str, Any] = {
    "state": {
        "formatProperties": True,
        "stateless": True,
        "unloadObjects": False,
        "enableServerStateHeaders": True,
        "locale": "en_US",
    },
    "policy": {
        "types": [
            {
                "name": "ItemRevision",
                "properties": [
                    {"name": "item_id"},
                    {"name": "item_revision_id"},
                    {"name": "object_name"},
                    {"name": "owning_user"},
                    {"name": "last_mod_date"},
                ],
            }
        ]
    },
}


@dataclass(frozen=True)
class CollectionVariables:
    """Postman collection variables used to build request URLs."""

    tcurl: str = DEFAULT_TCURL
    webtier_port: str = DEFAULT_WEBTIER_PORT
    webtier_app_name: str = DEFAULT_WEBTIER_APP_NAME


@dataclass(frozen=True)
class GeneratorConfig:
    """Top-level generator configuration aggregate."""

    path: Path | None = None
    header: Mapping[str, Any] | None = None
    variables: CollectionVariables = field(default_factory=CollectionVariables)

    def request_header(self) -> dict[str, Any]:
        """Return a private copy of the header embedded in every request payload."""
        source = self.header if self.header is not None else DEFAULT_REQUEST_HEADER
        return copy.deepcopy(dict(source))
