"""Schema derivation entities."""

from __future__ import annotations

from typing import Any

SchemaObject = dict[str, Any]
SchemaFragment = dict[str, Any]
SchemaRegistry = list[dict[str, SchemaObject]]
VisitationStack = list[str]

SCHEMA_PATH_PREFIX = "#/components/schemas/"


def get_schema_path(model_name: str) -> str:
    """Return the ``$ref`` path of a named component schema."""
    return f"{SCHEMA_PATH_PREFIX}{model_name}"
