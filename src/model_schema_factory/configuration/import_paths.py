"""Resolve configured ``module:Attribute`` import paths."""

from __future__ import annotations

import importlib
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from .loader import ConfigurationError

PRIMITIVE_TYPE_ALIASES: dict[str, type] = {
    "string": str,
    "integer": int,
    "number": float,
    "boolean": bool,
    "array": list,
}


def resolve_import_path(import_path: str, *, search_path: Path | None = None) -> Any:
    """Import ``package.module:Attribute`` and return the attribute.

    Args:
      import_path: Module and attribute separated by a colon.
      search_path: Directory searched first while importing, usually the
        directory of the configuration file.

    Raises:
      ConfigurationError: If the module or attribute cannot be loaded.
    """
    module_name, _, attribute_path = import_path.partition(":")
    if not module_name or not attribute_path:
        raise ConfigurationError(
            f"Import path '{import_path}' must use the form 'package.module:Attribute'."
        )
    with _prepended_sys_path(search_path):
        target: Any = _import_module(module_name)
    for attribute in attribute_path.split("."):
        try:
            target = getattr(target, attribute)
        except AttributeError as exc:
            raise ConfigurationError(
                f"Module '{module_name}' has no attribute '{attribute_path}'."
            ) from exc
    return target


def resolve_parameter_type(type_path: str, *, search_path: Path | None = None) -> Any:
    """Return the Python type of a configured parameter."""
    if type_path in PRIMITIVE_TYPE_ALIASES:
        return PRIMITIVE_TYPE_ALIASES[type_path]
    return resolve_import_path(type_path, search_path=search_path)


def _import_module(module_name: str) -> Any:
    try:
        return importlib.import_module(module_name)
    except ImportError as exc:
        raise ConfigurationError(f"Cannot import module '{module_name}': {exc}") from exc
    except NameError as exc:
        raise ConfigurationError(
            f"Cannot import module '{module_name}': {exc}. Models that reference a class "
            "declared later must use api_property(type=Deferred(lambda: Model))."
        ) from exc
    except Exception as exc:  # pylint: disable=broad-exception-caught
        raise ConfigurationError(
            f"Cannot import module '{module_name}': {type(exc).__name__}: {exc}"
        ) from exc


@contextmanager
def _prepended_sys_path(directory: Path | None) -> Iterator[None]:
    if directory is None:
        yield
        return
    entry = str(directory.resolve())
    sys.path.insert(0, entry)
    try:
        yield
    finally:
        if entry in sys.path:
            sys.path.remove(entry)
