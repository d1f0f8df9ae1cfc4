"""Document assembly exports."""

from .components_document import (
    DuplicatePolicy,
    DuplicateSchemaError,
    OutputFormat,
    build_components_document,
    flatten_registry,
    registry_names,
    render_document,
)

__all__ = [
    "DuplicatePolicy",
    "DuplicateSchemaError",
    "OutputFormat",
    "build_components_document",
    "flatten_registry",
    "registry_names",
    "render_document",
]
