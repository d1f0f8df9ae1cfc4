"""Parameter schema builder tests."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

import pytest
from model_schema_factory.model_metadata import Deferred, api_property
from model_schema_factory.parameter_schemas import (
    ParamWithTypeMetadata,
    SchemaBearingParameter,
    build_parameter_schemas,
    is_body_parameter,
)
from model_schema_factory.schema_derivation import (
    SchemaRegistry,
    UnresolvableTypeReferenceError,
)


class Cat:
    name = api_property(type=str)
    mother = api_property(type=Deferred(lambda: Cat), required=False)


def _body(param_type: object, **overrides: object) -> ParamWithTypeMetadata:
    return ParamWithTypeMetadata(
        name=overrides.pop("name", None),  # type: ignore[arg-type]
        location="body",
        type=param_type,
        **overrides,  # type: ignore[arg-type]
    )


@pytest.mark.parametrize("param_type", [str, int, float, bool])
def test_primitive_body_parameters_pass_through_unchanged(param_type: type) -> None:
    registry: SchemaRegistry = []
    param = _body(param_type, name="value")

    assert build_parameter_schemas([param], registry) == [param]
    assert build_parameter_schemas([param], registry)[0] is param
    assert registry == []


def test_non_body_parameters_pass_through_even_with_model_types() -> None:
    registry: SchemaRegistry = []
    param = ParamWithTypeMetadata(name="cat", location="query", type=Cat)

    result = build_parameter_schemas([param], registry)

    assert result[0] is param
    assert registry == []


def test_array_marker_expands_to_string_items() -> None:
    result = build_parameter_schemas([_body(list, name="ids")], [])

    assert result == [
        SchemaBearingParameter(
            name="ids",
            location="body",
            required=True,
            schema={"type": "array", "items": {"type": "string"}},
        )
    ]


@pytest.mark.parametrize(
    ("param_type", "expected"),
    [
        (dict, {"type": "object"}),
        (datetime, {"type": "string"}),
        (bytes, {"type": "string"}),
        (Decimal, {"type": "number"}),
        (tuple, {"type": "array", "items": {"type": "string"}}),
    ],
)
def test_built_in_body_types_get_inline_schemas(param_type: type, expected: dict) -> None:
    registry: SchemaRegistry = []

    [result] = build_parameter_schemas([_body(param_type, name="payload")], registry)

    assert result == SchemaBearingParameter(
        name="payload", location="body", required=True, schema=expected
    )
    assert registry == []


def test_built_in_array_body_keeps_declared_constraints_on_items() -> None:
    param = _body(datetime, name="stamps", is_array=True, schema={"format": "date-time"})

    [result] = build_parameter_schemas([param], [])

    assert result.schema == {
        "type": "array",
        "items": {"format": "date-time", "type": "string"},
    }


def test_model_parameter_is_rewritten_to_reference() -> None:
    registry: SchemaRegistry = []

    [result] = build_parameter_schemas([_body(Cat)], registry)

    assert isinstance(result, SchemaBearingParameter)
    assert result.name == "Cat"
    assert result.schema == {"$ref": "#/components/schemas/Cat"}
    assert [name for entry in registry for name in entry] == ["Cat"]


def test_array_model_parameter_wraps_reference_in_array() -> None:
    [result] = build_parameter_schemas([_body(Cat, name="cats", is_array=True)], [])

    assert result.name == "cats"
    assert result.schema == {"type": "array", "items": {"$ref": "#/components/schemas/Cat"}}


def test_declared_schema_constraints_are_composed_with_all_of() -> None:
    param = _body(Cat, schema={"description": "Cat to adopt"})

    [result] = build_parameter_schemas([param], [])

    assert result.schema == {
        "allOf": [{"$ref": "#/components/schemas/Cat"}, {"description": "Cat to adopt"}]
    }


def test_deferred_parameter_types_are_resolved() -> None:
    [result] = build_parameter_schemas([_body(Deferred(lambda: Cat))], [])

    assert result.schema == {"$ref": "#/components/schemas/Cat"}


def test_non_model_body_types_pass_through() -> None:
    param = _body(42, name="answer")

    assert build_parameter_schemas([param], [])[0] is param


def test_each_parameter_registers_its_model_again() -> None:
    registry: SchemaRegistry = []

    build_parameter_schemas([_body(Cat, name="a"), _body(Cat, name="b")], registry)

    assert [name for entry in registry for name in entry] == ["Cat", "Cat"]
    assert registry[0] == registry[1]


def test_mixed_parameters_keep_their_order() -> None:
    query = ParamWithTypeMetadata(name="limit", location="query", type=int)
    body = _body(Cat, name="cat")

    result = build_parameter_schemas([query, body], [])

    assert result[0] is query
    assert isinstance(result[1], SchemaBearingParameter)


def test_errors_from_derivation_propagate() -> None:
    class Broken:
        link = api_property()

    with pytest.raises(UnresolvableTypeReferenceError):
        build_parameter_schemas([_body(Broken)], [])


def test_to_openapi_renders_parameter_object() -> None:
    parameter = SchemaBearingParameter(
        name="cat",
        location="body",
        required=False,
        schema={"$ref": "#/components/schemas/Cat"},
        description="Cat payload",
    )

    assert parameter.to_openapi() == {
        "in": "body",
        "name": "cat",
        "required": False,
        "description": "Cat payload",
        "schema": {"$ref": "#/components/schemas/Cat"},
    }


def test_is_body_parameter() -> None:
    assert is_body_parameter(_body(Cat))
    assert not is_body_parameter(ParamWithTypeMetadata(name="id", location="path", type=str))
