"""Derivation run use-case service."""

from __future__ import annotations

import logging
from pathlib import Path

from model_schema_factory.configuration import (
    Configuration,
    ConfigurationError,
    ParameterConfig,
    load_configuration,
    resolve_import_path,
    resolve_parameter_type,
)
from model_schema_factory.document_assembly import (
    DuplicateSchemaError,
    build_components_document,
    registry_names,
    render_document,
)
from model_schema_factory.parameter_schemas import (
    ParamWithTypeMetadata,
    SchemaBearingParameter,
    build_parameter_schemas,
)
from model_schema_factory.schema_derivation import (
    SchemaDerivationError,
    SchemaObjectFactory,
    SchemaRegistry,
)
from model_schema_factory.type_mapping import is_built_in_type, map_type_to_openapi_type, type_name

from .run_contracts import RunOutcome, RunRequest

_LOGGER = logging.getLogger(__name__)


class RunExecutionError(Exception):
    """Raised when a derivation run cannot be completed."""


def execute_schema_derivation_run(
    request: RunRequest, *, factory: SchemaObjectFactory | None = None
) -> RunOutcome:
    """Derive configured models and parameters into one components document."""
    resolved_factory = factory or SchemaObjectFactory()
    try:
        configuration = load_configuration(request.config_path)
        search_path = configuration.path.parent
        models = [
            resolve_import_path(model_path, search_path=search_path)
            for model_path in configuration.models
        ]
        parameters = [
            _to_parameter(config, search_path=search_path) for config in configuration.parameters
        ]
    except ConfigurationError as exc:
        raise RunExecutionError(str(exc)) from exc

    registry: SchemaRegistry = []
    try:
        for model in models:
            if not resolved_factory.explore_model_schema(model, registry):
                raise RunExecutionError(f"Configured model is not a class: {model!r}")
        built_parameters = build_parameter_schemas(parameters, registry, factory=resolved_factory)
        document = build_components_document(
            registry,
            policy=configuration.output.duplicate_policy,
            parameters=[_render_parameter(parameter) for parameter in built_parameters],
        )
    except (SchemaDerivationError, DuplicateSchemaError) as exc:
        raise RunExecutionError(str(exc)) from exc

    _LOGGER.info("Derived %d schema entries from %s", len(registry), configuration.path)
    rendered = render_document(document, _resolve_output_format(request, configuration))
    output_path = _write_output(rendered, request.output_path)
    return RunOutcome(
        document=document,
        rendered=rendered,
        schema_names=tuple(registry_names(registry)),
        output_path=output_path,
    )


def _to_parameter(config: ParameterConfig, *, search_path: Path) -> ParamWithTypeMetadata:
    return ParamWithTypeMetadata(
        name=config.name,
        location=config.location,
        type=resolve_parameter_type(config.type_path, search_path=search_path),
        is_array=config.is_array,
        required=config.required,
        description=config.description,
    )


def _render_parameter(parameter: ParamWithTypeMetadata | SchemaBearingParameter) -> dict:
    if isinstance(parameter, SchemaBearingParameter):
        return parameter.to_openapi()
    rendered: dict = {"in": parameter.location}
    if parameter.name:
        rendered["name"] = parameter.name
    rendered["required"] = parameter.required
    if parameter.description:
        rendered["description"] = parameter.description
    if parameter.schema:
        rendered["schema"] = dict(parameter.schema)
    elif is_built_in_type(parameter.type):
        rendered["schema"] = {"type": map_type_to_openapi_type(type_name(parameter.type))}
    return rendered


def _resolve_output_format(request: RunRequest, configuration: Configuration):
    return request.output_format or configuration.output.output_format


def _write_output(rendered: str, output_path: str | None) -> Path | None:
    if output_path is None:
        return None
    destination = Path(output_path)
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(rendered, encoding="utf-8")
    except OSError as exc:
        raise RunExecutionError(f"Cannot write output file {destination}: {exc}") from exc
    return destination.resolve()
