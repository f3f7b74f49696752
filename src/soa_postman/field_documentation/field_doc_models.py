"""Field documentation entities."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldDoc:
    """One documented request body field path."""

    path: str
    type: str
    description: str
    enum_values: tuple[str, ...] = ()
