"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from model_schema_factory.document_assembly import OutputFormat


@dataclass(frozen=True)
class RunRequest:
    """Input contract for one derivation run."""

    config_path: str
    output_path: str | None = None
    output_format: OutputFormat | None = None


@dataclass(frozen=True)
class RunOutcome:
    """Output contract for one completed derivation run."""

    document: dict[str, Any]
    rendered: str
    schema_names: tuple[str, ...]
    output_path: Path | None
