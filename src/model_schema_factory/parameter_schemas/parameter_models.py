"""Operation parameter entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

BODY_LOCATION = "body"
PARAMETER_LOCATIONS = ("body", "query", "path", "header", "cookie")


@dataclass(frozen=True)
class ParamWithTypeMetadata:
    """Operation parameter as declared on a handler, before schema expansion."""

    name: str | None
    location: str
    type: Any = None
    is_array: bool = False
    required: bool = True
    schema: Mapping[str, Any] | None = None
    description: str | None = None


@dataclass(frozen=True)
class SchemaBearingParameter:
    """Body parameter rewritten to carry an OpenAPI schema."""

    name: str | None
    location: str
    required: bool
    schema: Mapping[str, Any]
    description: str | None = None

    def to_openapi(self) -> dict[str, Any]:
        """Render the parameter as an OpenAPI parameter object."""
        rendered: dict[str, Any] = {"in": self.location}
        if self.name:
            rendered["name"] = self.name
        rendered["required"] = self.required
        if self.description:
            rendered["description"] = self.description
        rendered["schema"] = dict(self.schema)
        return rendered


def is_body_parameter(parameter: ParamWithTypeMetadata) -> bool:
    return parameter.location == BODY_LOCATION
