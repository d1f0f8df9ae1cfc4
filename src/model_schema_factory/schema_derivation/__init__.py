"""Schema derivation exports."""

from .schema_models import (
    SCHEMA_PATH_PREFIX,
    SchemaFragment,
    SchemaObject,
    SchemaRegistry,
    VisitationStack,
    get_schema_path,
)
from .schema_object_factory import (
    SchemaDerivationError,
    SchemaObjectFactory,
    UnresolvableTypeReferenceError,
)

__all__ = [
    "SCHEMA_PATH_PREFIX",
    "SchemaDerivationError",
    "SchemaFragment",
    "SchemaObject",
    "SchemaObjectFactory",
    "SchemaRegistry",
    "UnresolvableTypeReferenceError",
    "VisitationStack",
    "get_schema_path",
]
