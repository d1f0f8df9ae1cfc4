"""Rewrite body parameters into schema-bearing parameters."""

from __future__ import annotations

from collections.abc import Iterable

from model_schema_factory.model_metadata import resolve_type_ref
from model_schema_factory.schema_derivation import (
    SchemaObjectFactory,
    SchemaRegistry,
    get_schema_path,
)
from model_schema_factory.type_mapping import (
    is_array_type,
    is_built_in_type,
    is_primitive_type,
    map_type_to_openapi_type,
    type_name,
)

from .parameter_models import ParamWithTypeMetadata, SchemaBearingParameter, is_body_parameter

ParameterResult = ParamWithTypeMetadata | SchemaBearingParameter


def build_parameter_schemas(
    parameters: Iterable[ParamWithTypeMetadata],
    registry: SchemaRegistry,
    *,
    factory: SchemaObjectFactory | None = None,
) -> list[ParameterResult]:
    """Return parameters with body-carried models rewritten to ``$ref`` schemas.

    Non-body and primitive parameters are returned unchanged. Every derived
    model schema is appended to ``registry``; each parameter starts its own
    visitation stack.

    Raises:
      UnresolvableTypeReferenceError: If a reachable model property declares no type.
    """
    resolved_factory = factory or SchemaObjectFactory()
    return [_build_parameter_schema(param, registry, resolved_factory) for param in parameters]


def _build_parameter_schema(
    param: ParamWithTypeMetadata,
    registry: SchemaRegistry,
    factory: SchemaObjectFactory,
) -> ParameterResult:
    if not is_body_parameter(param):
        return param
    param_type = resolve_type_ref(param.type)
    if is_primitive_type(param_type):
        return param
    if is_array_type(param_type):
        return _map_array_marker_param(param)
    if is_built_in_type(param_type):
        return _map_built_in_param(param, map_type_to_openapi_type(type_name(param_type)))

    model_name = factory.explore_model_schema(param_type, registry)
    if not model_name:
        return param
    ref = {"$ref": get_schema_path(model_name)}
    schema = {"allOf": [ref, dict(param.schema)]} if param.schema else ref
    return SchemaBearingParameter(
        name=param.name or model_name,
        location=param.location,
        required=param.required,
        schema={"type": "array", "items": schema} if param.is_array else schema,
        description=param.description,
    )


def _map_array_marker_param(param: ParamWithTypeMetadata) -> SchemaBearingParameter:
    return SchemaBearingParameter(
        name=param.name,
        location=param.location,
        required=param.required,
        schema={"type": "array", "items": {"type": "string"}},
        description=param.description,
    )


def _map_built_in_param(param: ParamWithTypeMetadata, openapi_type: str) -> SchemaBearingParameter:
    if openapi_type == "array":
        item_schema: dict = {"type": "array", "items": {"type": "string"}}
    else:
        item_schema = {**(param.schema or {}), "type": openapi_type}
    return SchemaBearingParameter(
        name=param.name,
        location=param.location,
        required=param.required,
        schema={"type": "array", "items": item_schema} if param.is_array else item_schema,
        description=param.description,
    )
