"""Parameter schema exports."""

from .parameter_models import (
    BODY_LOCATION,
    PARAMETER_LOCATIONS,
    ParamWithTypeMetadata,
    SchemaBearingParameter,
    is_body_parameter,
)
from .parameter_schema_builder import ParameterResult, build_parameter_schemas

__all__ = [
    "BODY_LOCATION",
    "PARAMETER_LOCATIONS",
    "ParamWithTypeMetadata",
    "ParameterResult",
    "SchemaBearingParameter",
    "build_parameter_schemas",
    "is_body_parameter",
]
