"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import (
    DEFAULT_TCURL,
    DEFAULT_WEBTIER_APP_NAME,
    DEFAULT_WEBTIER_PORT,
    CollectionVariables,
    GeneratorConfig,
)


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str | None) -> GeneratorConfig:
    """Load and validate the configuration file; ``None`` yields the defaults."""
    if config_path is None:
        return GeneratorConfig()

    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Failed to read configuration file {path}: {exc}") from exc

    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    return GeneratorConfig(
        path=path,
        header=_parse_header_section(parsed.get("header")),
        variables=_parse_variables_section(parsed.get("variables")),
    )


def _parse_header_section(value: Any) -> Mapping[str, Any] | None:
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise ConfigurationError("Configuration section 'header' must be a mapping.")
    return dict(value)


def _parse_variables_section(value: Any) -> CollectionVariables:
    if value is None:
        return CollectionVariables()
    if not isinstance(value, Mapping):
        raise ConfigurationError("Configuration section 'variables' must be a mapping.")
    return CollectionVariables(
        tcurl=_scalar_text(value.get("TCURL"), "variables.TCURL", DEFAULT_TCURL),
        webtier_port=_scalar_text(
            value.get("TCURL_WEBTIER_PORT"), "variables.TCURL_WEBTIER_PORT", DEFAULT_WEBTIER_PORT
        ),
        webtier_app_name=_scalar_text(
            value.get("WEBTIER_APP_NAME"), "variables.WEBTIER_APP_NAME", DEFAULT_WEBTIER_APP_NAME
        ),
    )


def _scalar_text(value: Any, field_name: str, default: str) -> str:
    if value is None:
        return default
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be a string or number.")
    if isinstance(value, (int, float)):
        return str(value)
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string or number.")
    stripped = value.strip()
    return stripped or default
