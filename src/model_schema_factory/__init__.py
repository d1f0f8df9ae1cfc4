"""Derive OpenAPI component schemas from declaratively annotated model classes."""

from .model_metadata import Deferred, ModelPropertiesAccessor, PropertyMetadata, api_property
from .parameter_schemas import (
    ParamWithTypeMetadata,
    SchemaBearingParameter,
    build_parameter_schemas,
)
from .schema_derivation import (
    SchemaDerivationError,
    SchemaObjectFactory,
    UnresolvableTypeReferenceError,
    get_schema_path,
)

__all__ = [
    "Deferred",
    "ModelPropertiesAccessor",
    "ParamWithTypeMetadata",
    "PropertyMetadata",
    "SchemaBearingParameter",
    "SchemaDerivationError",
    "SchemaObjectFactory",
    "UnresolvableTypeReferenceError",
    "api_property",
    "build_parameter_schemas",
    "get_schema_path",
]
