"""Static mapping from Python built-in types to OpenAPI type strings."""

from __future__ import annotations

from datetime import date, datetime, time
from decimal import Decimal
from typing import Any

_BUILT_IN_TYPES: tuple[type, ...] = (
    str,
    bytes,
    bool,
    int,
    float,
    Decimal,
    list,
    tuple,
    set,
    dict,
    datetime,
    date,
    time,
)

_OPENAPI_TYPES_BY_NAME: dict[str, str] = {
    "str": "string",
    "bytes": "string",
    "bool": "boolean",
    "int": "integer",
    "float": "number",
    "Decimal": "number",
    "list": "array",
    "tuple": "array",
    "set": "array",
    "dict": "object",
    "datetime": "string",
    "date": "string",
    "time": "string",
}

_PRIMITIVE_TYPES: tuple[type, ...] = (str, bool, int, float)


def map_type_to_openapi_type(type_name: str) -> str:
    """Return the OpenAPI type string for a built-in type name.

    Raises:
      KeyError: If the name is not a known built-in type.
    """
    return _OPENAPI_TYPES_BY_NAME[type_name]


def is_built_in_type(value: Any) -> bool:
    """Return whether the value is one of the mapped built-in types."""
    return any(value is candidate for candidate in _BUILT_IN_TYPES)


def is_primitive_type(value: Any) -> bool:
    return any(value is candidate for candidate in _PRIMITIVE_TYPES)


def is_array_type(value: Any) -> bool:
    return value is list


def type_name(value: Any) -> str:
    """Return the declared name of a type, or the value itself for string types."""
    if isinstance(value, str):
        return value
    return getattr(value, "__name__", str(value))
