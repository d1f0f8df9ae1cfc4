"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .import_paths import PRIMITIVE_TYPE_ALIASES, resolve_import_path, resolve_parameter_type
from .loader import ConfigurationError, load_configuration
from .runtime_settings import Configuration, OutputSettings, ParameterConfig

__all__ = [
    "Configuration",
    "OutputSettings",
    "ParameterConfig",
    "ConfigurationError",
    "load_configuration",
    "PRIMITIVE_TYPE_ALIASES",
    "resolve_import_path",
    "resolve_parameter_type",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
