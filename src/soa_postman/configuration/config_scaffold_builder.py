"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "soa-postman.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Generator configuration for soa-postman.
# Every section is optional; remove a section to fall back to the built-in default.

variables:
  # Postman collection variables used in every request URL.
  TCURL: "http://127.0.0.1"
  TCURL_WEBTIER_PORT: "7001"
  WEBTIER_APP_NAME: "tc"

# The header replaces the default "header" block of every request payload.
header:
  state:
    formatProperties: true
    stateless: true
    unloadObjects: false
    enableServerStateHeaders: true
    locale: "en_US"
  policy:
    types:
      - name: "ItemRevision"
        properties:
          - name: "item_id"
          - name: "item_revision_id"
          - name: "object_name"
          - name: "owning_user"
          - name: "last_mod_date"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML generator configuration with the default values and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the generator configuration scaffold to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
