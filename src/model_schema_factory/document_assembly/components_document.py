"""Flatten schema registries into OpenAPI components documents."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping, Sequence
from enum import Enum
from typing import Any

import yaml

from model_schema_factory.schema_derivation import SchemaObject, SchemaRegistry


class DuplicatePolicy(str, Enum):
    """Rule applied when the registry holds several entries with one name."""

    LAST_WINS = "last_wins"
    FIRST_WINS = "first_wins"
    ERROR = "error"


class OutputFormat(str, Enum):
    """Supported rendering formats."""

    JSON = "json"
    YAML = "yaml"


class DuplicateSchemaError(Exception):
    """Raised when two different schemas are registered under one name."""


def flatten_registry(
    registry: SchemaRegistry, policy: DuplicatePolicy = DuplicatePolicy.LAST_WINS
) -> dict[str, SchemaObject]:
    """Merge registry entries into one mapping keyed by schema name.

    Identical duplicates are always accepted. With ``DuplicatePolicy.ERROR``
    differing duplicates raise ``DuplicateSchemaError``.
    """
    schemas: dict[str, SchemaObject] = {}
    for entry in registry:
        for name, schema in entry.items():
            if name not in schemas:
                schemas[name] = schema
                continue
            if schemas[name] == schema:
                continue
            if policy is DuplicatePolicy.ERROR:
                raise DuplicateSchemaError(
                    f"Schema '{name}' is registered more than once with different definitions."
                )
            if policy is DuplicatePolicy.LAST_WINS:
                schemas[name] = schema
    return schemas


def build_components_document(
    registry: SchemaRegistry,
    *,
    policy: DuplicatePolicy = DuplicatePolicy.LAST_WINS,
    parameters: Sequence[Mapping[str, Any]] | None = None,
) -> dict[str, Any]:
    """Return ``{"components": {"schemas": ...}}`` plus optional rendered parameters."""
    document: dict[str, Any] = {"components": {"schemas": flatten_registry(registry, policy)}}
    if parameters:
        document["parameters"] = [dict(parameter) for parameter in parameters]
    return document


def render_document(document: Mapping[str, Any], output_format: OutputFormat) -> str:
    """Serialize a document as JSON or YAML text."""
    if output_format is OutputFormat.YAML:
        return yaml.safe_dump(_plain(document), sort_keys=False, allow_unicode=True)
    return json.dumps(document, indent=2, ensure_ascii=False, default=str) + "\n"


def _plain(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {str(key): _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    return str(value)


def registry_names(registry: Iterable[Mapping[str, SchemaObject]]) -> list[str]:
    """Return registered names in registration order, duplicates included."""
    return [name for entry in registry for name in entry]
