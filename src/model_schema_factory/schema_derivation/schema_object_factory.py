"""Model schema derivation service."""

from __future__ import annotations

import inspect
import logging
import types
from collections.abc import Iterable, Mapping
from dataclasses import replace
from typing import Any, Union, get_args, get_origin

from model_schema_factory.model_metadata import (
    ModelPropertiesAccessor,
    PropertyMetadata,
    resolve_type_ref,
)
from model_schema_factory.type_mapping import (
    is_built_in_type,
    map_type_to_openapi_type,
    type_name,
)

from .schema_models import (
    SchemaFragment,
    SchemaObject,
    SchemaRegistry,
    VisitationStack,
    get_schema_path,
)

_LOGGER = logging.getLogger(__name__)

_BOOKKEEPING_KEYS = ("name", "is_array", "required")
_REFERENCE_KEYS_TO_REMOVE = ("type", "is_array", "required", "name")
_ARRAY_KEYS_TO_REMOVE = ("type", "enum")
_COLLECTION_ORIGINS = (list, tuple, set, frozenset)
_MAPPING_ORIGINS = (dict,)
_UNION_ORIGINS = (Union, types.UnionType)
_DEFAULT_ARRAY_ITEM_TYPE = "string"


class SchemaDerivationError(Exception):
    """Raised when a model graph cannot be turned into schema definitions."""


class UnresolvableTypeReferenceError(SchemaDerivationError):
    """Raised when a property declares no resolvable type."""

    def __init__(self, property_key: str, message: str | None = None) -> None:
        super().__init__(
            message
            or f'A circular dependency has been detected (property key: "{property_key}"). '
            "Make sure each side of a bidirectional relationship declares its type lazily, "
            "e.g. api_property(type=Deferred(lambda: Model))."
        )
        self.property_key = property_key


class SchemaObjectFactory:
    """Derive named component schemas from models declared with ``api_property``."""

    def __init__(self, properties_accessor: ModelPropertiesAccessor | None = None) -> None:
        self._properties_accessor = properties_accessor or ModelPropertiesAccessor()

    def explore_model_schema(
        self,
        model: Any,
        registry: SchemaRegistry,
        stack: VisitationStack | None = None,
    ) -> str:
        """Register the object schema of ``model`` and every model it references.

        Args:
          model: Model class to derive.
          registry: Registry appended to in place; shared by the whole traversal.
          stack: Names already explored during this traversal. A fresh stack
            seeded with the root model name is used when omitted.

        Returns:
          The registered schema name, or ``""`` when ``model`` is not a class.

        Raises:
          UnresolvableTypeReferenceError: If a reachable property declares no type.
        """
        if not inspect.isclass(model):
            return ""
        model_name = model.__name__
        if stack is None:
            stack = [model_name]

        resolved_by_name: dict[str, SchemaFragment] = {}
        for key in self._properties_accessor.get_model_properties(model):
            resolved = self.merge_property_with_metadata(key, model, registry, stack)
            resolved_by_name[resolved["name"]] = resolved

        type_definition: SchemaObject = {
            "type": "object",
            "properties": {
                name: _omit(resolved, _BOOKKEEPING_KEYS)
                for name, resolved in resolved_by_name.items()
            },
        }
        required_fields = [
            name
            for name, resolved in resolved_by_name.items()
            if resolved.get("required") is not False
        ]
        if required_fields:
            type_definition["required"] = required_fields

        registry.append({model_name: type_definition})
        _LOGGER.debug(
            "Registered schema %s with %d properties", model_name, len(resolved_by_name)
        )
        return model_name

    def merge_property_with_metadata(
        self,
        key: str,
        model: type,
        registry: SchemaRegistry,
        stack: VisitationStack,
    ) -> SchemaFragment:
        """Resolve one declared property into a schema fragment."""
        metadata = _normalize_type(self._properties_accessor.get_property_metadata(model, key))
        fields = metadata.as_fields()

        if isinstance(metadata.type, str):
            return {**fields, "name": metadata.name or key}
        if not is_built_in_type(metadata.type):
            return self.create_not_built_in_type_reference(key, metadata, registry, stack)

        item_type = map_type_to_openapi_type(type_name(metadata.type))
        if metadata.is_array:
            return self.transform_to_array_schema_property(fields, key, item_type)
        if item_type == "array":
            return self.transform_to_array_schema_property(fields, key, _DEFAULT_ARRAY_ITEM_TYPE)
        return {**fields, "name": metadata.name or key, "type": item_type}

    def create_not_built_in_type_reference(
        self,
        key: str,
        metadata: PropertyMetadata,
        registry: SchemaRegistry,
        stack: VisitationStack,
    ) -> SchemaFragment:
        """Return a ``$ref`` fragment for a nested model, deriving it on first sight."""
        if metadata.type is None:
            raise UnresolvableTypeReferenceError(key)
        if not inspect.isclass(metadata.type):
            raise UnresolvableTypeReferenceError(
                key,
                f'Property "{key}" declares type {metadata.type!r}, which is not a model class. '
                "Declare a single model, a built-in type or Optional[Model].",
            )

        schema_object_name = type_name(metadata.type)
        if schema_object_name not in stack:
            stack.append(schema_object_name)
            schema_object_name = self.explore_model_schema(metadata.type, registry, stack)
        else:
            _LOGGER.debug("Reusing %s for property %s without re-deriving", schema_object_name, key)

        ref = get_schema_path(schema_object_name)
        if metadata.is_array:
            return self.transform_to_array_schema_property(metadata.as_fields(), key, {"$ref": ref})

        constraints = _omit(metadata.as_fields(), _REFERENCE_KEYS_TO_REMOVE)
        name = metadata.name or key
        if not constraints:
            return {"name": name, "required": metadata.required, "schema": {"$ref": ref}}
        return {
            "name": name,
            "required": metadata.required,
            "title": schema_object_name,
            "schema": {"allOf": [{"$ref": ref}, constraints]},
        }

    def transform_to_array_schema_property(
        self,
        fields: Mapping[str, Any],
        key: str,
        item_type: str | Mapping[str, Any],
    ) -> SchemaFragment:
        """Wrap an item type into an ``{"type": "array", "items": ...}`` fragment.

        ``type`` and ``enum`` describe the item, so they are removed from the
        array itself; ``enum`` is kept on primitive items.
        """
        schema_host = _omit(fields, _ARRAY_KEYS_TO_REMOVE)
        schema_host["name"] = fields.get("name") or key
        schema_host["type"] = "array"
        if isinstance(item_type, str):
            items: dict[str, Any] = {"type": item_type, "enum": fields.get("enum")}
        else:
            items = dict(item_type)
        schema_host["items"] = {name: value for name, value in items.items() if value is not None}
        return schema_host


def _normalize_type(metadata: PropertyMetadata) -> PropertyMetadata:
    resolved = resolve_type_ref(metadata.type)
    required = metadata.required
    if get_origin(resolved) in _UNION_ORIGINS:
        union_args = get_args(resolved)
        members = [arg for arg in union_args if arg is not type(None)]
        if len(members) == 1 and len(members) < len(union_args):
            resolved = resolve_type_ref(members[0])
            required = False

    origin = get_origin(resolved)
    if origin in _COLLECTION_ORIGINS:
        args = [arg for arg in get_args(resolved) if arg is not Ellipsis]
        if args:
            return replace(
                metadata, type=resolve_type_ref(args[0]), is_array=True, required=required
            )
        resolved = origin
    elif origin in _MAPPING_ORIGINS:
        resolved = origin
    if resolved is metadata.type and required == metadata.required:
        return metadata
    return replace(metadata, type=resolved, required=required)


def _omit(values: Mapping[str, Any], keys: Iterable[str]) -> dict[str, Any]:
    excluded = set(keys)
    return {key: value for key, value in values.items() if key not in excluded}
