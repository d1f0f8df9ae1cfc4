"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from model_schema_factory.document_assembly import DuplicatePolicy, OutputFormat


@dataclass(frozen=True)
class ParameterConfig:
    """Operation parameter declared in the configuration file."""

    name: str | None
    location: str
    type_path: str
    is_array: bool
    required: bool
    description: str | None


@dataclass(frozen=True)
class OutputSettings:
    """Rendering settings for the components document."""

    output_format: OutputFormat
    duplicate_policy: DuplicatePolicy


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    models: tuple[str, ...]
    parameters: tuple[ParameterConfig, ...]
    output: OutputSettings
