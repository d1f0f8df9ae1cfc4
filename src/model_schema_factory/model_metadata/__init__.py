"""Model property metadata exports."""

from .model_properties_accessor import ModelPropertiesAccessor
from .property_metadata import Deferred, PropertyMetadata, api_property, resolve_type_ref

__all__ = [
    "Deferred",
    "ModelPropertiesAccessor",
    "PropertyMetadata",
    "api_property",
    "resolve_type_ref",
]
