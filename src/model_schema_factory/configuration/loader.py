"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from model_schema_factory.document_assembly import DuplicatePolicy, OutputFormat
from model_schema_factory.parameter_schemas import PARAMETER_LOCATIONS

from .runtime_settings import Configuration, OutputSettings, ParameterConfig


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    models = _parse_models_section(parsed.get("models"))
    parameters = _parse_parameters_section(parsed.get("parameters"))
    output = _parse_output_section(parsed.get("output"))

    return Configuration(path=path, models=models, parameters=parameters, output=output)


def _parse_models_section(value: Any) -> tuple[str, ...]:
    if value is None:
        raise ConfigurationError("Configuration section 'models' is required.")
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise ConfigurationError("models must be a list of import paths.")
    models = []
    for index, item in enumerate(value):
        models.append(_require_import_path(item, f"models[{index}]"))
    if not models:
        raise ConfigurationError("models must contain at least one import path.")
    return tuple(models)


def _parse_parameters_section(value: Any) -> tuple[ParameterConfig, ...]:
    if value is None:
        return ()
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise ConfigurationError("parameters must be a list of mappings.")
    return tuple(
        _parse_parameter(item, f"parameters[{index}]") for index, item in enumerate(value)
    )


def _parse_parameter(value: Any, label: str) -> ParameterConfig:
    section = _require_mapping(value, label)
    location = _require_non_empty_string(section.get("in", "body"), f"{label}.in").lower()
    if location not in PARAMETER_LOCATIONS:
        raise ConfigurationError(
            f"{label}.in must be one of: {', '.join(PARAMETER_LOCATIONS)}."
        )
    type_path = _require_non_empty_string(section.get("type"), f"{label}.type")
    return ParameterConfig(
        name=_optional_string(section.get("name"), f"{label}.name"),
        location=location,
        type_path=type_path,
        is_array=_optional_bool(section.get("is_array"), f"{label}.is_array", default=False),
        required=_optional_bool(section.get("required"), f"{label}.required", default=True),
        description=_optional_string(section.get("description"), f"{label}.description"),
    )


def _parse_output_section(value: Any) -> OutputSettings:
    section = value if value is not None else {}
    section = _require_mapping(section, "output")
    output_format = _parse_choice(
        section.get("format", OutputFormat.JSON.value), OutputFormat, "output.format"
    )
    duplicate_policy = _parse_choice(
        section.get("duplicate_policy", DuplicatePolicy.LAST_WINS.value),
        DuplicatePolicy,
        "output.duplicate_policy",
    )
    return OutputSettings(output_format=output_format, duplicate_policy=duplicate_policy)


def _parse_choice(value: Any, choices, field_name: str):
    raw = _require_non_empty_string(value, field_name).lower()
    try:
        return choices(raw)
    except ValueError as exc:
        allowed = ", ".join(choice.value for choice in choices)
        raise ConfigurationError(f"{field_name} must be one of: {allowed}.") from exc


def _require_import_path(value: Any, field_name: str) -> str:
    path = _require_non_empty_string(value, field_name)
    module_name, separator, attribute = path.partition(":")
    if not separator or not module_name.strip() or not attribute.strip():
        raise ConfigurationError(
            f"{field_name} '{path}' must use the form 'package.module:Attribute'."
        )
    return path


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _optional_bool(value: Any, field_name: str, *, default: bool) -> bool:
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be a boolean.")
    return value
