"""Type mapping exports."""

from .openapi_type_mapper import (
    is_array_type,
    is_built_in_type,
    is_primitive_type,
    map_type_to_openapi_type,
    type_name,
)

__all__ = [
    "is_array_type",
    "is_built_in_type",
    "is_primitive_type",
    "map_type_to_openapi_type",
    "type_name",
]
