"""Read declared property metadata from model classes."""

from __future__ import annotations

import inspect
from typing import Any

from .property_metadata import PropertyMetadata

_EMPTY_METADATA = PropertyMetadata()


class ModelPropertiesAccessor:
    """Default property metadata accessor for classes declared with ``api_property``."""

    def get_model_properties(self, model: type) -> list[str]:
        """Return declared property keys, base classes first, without duplicates."""
        keys: list[str] = []
        for klass in reversed(inspect.getmro(model)):
            for key, value in vars(klass).items():
                if isinstance(value, PropertyMetadata) and key not in keys:
                    keys.append(key)
        return keys

    def get_property_metadata(self, model: type, key: str) -> PropertyMetadata:
        """Return metadata for ``key``, or empty metadata when it is undeclared."""
        value: Any = inspect.getattr_static(model, key, None)
        if isinstance(value, PropertyMetadata):
            return value
        return _EMPTY_METADATA
