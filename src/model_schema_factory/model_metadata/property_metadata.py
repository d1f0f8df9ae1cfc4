"""Declarative property metadata entities."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

_RECOGNIZED_OPTIONS = frozenset({"type", "is_array", "required", "name", "enum"})


@dataclass(frozen=True)
class Deferred:
    """Type reference resolved lazily, used to break declaration-order cycles.

    ``Deferred(lambda: Owner)`` lets two models reference each other even though
    one of them is declared first.
    """

    resolver: Callable[[], Any]

    def resolve(self) -> Any:
        return self.resolver()


def resolve_type_ref(type_ref: Any) -> Any:
    """Invoke deferred references until a concrete type (or ``None``) is reached."""
    resolved = type_ref
    while isinstance(resolved, Deferred):
        resolved = resolved.resolve()
    return resolved


@dataclass(frozen=True)
class PropertyMetadata:
    """Schema metadata declared for one model property."""

    type: Any = None
    is_array: bool = False
    required: bool = True
    name: str | None = None
    enum: Sequence[Any] | None = None
    extra: Mapping[str, Any] = field(default_factory=dict)

    def as_fields(self) -> dict[str, Any]:
        """Return pass-through fields merged with recognized fields.

        Recognized fields take precedence over same-named pass-through keys.
        ``None``-valued recognized fields are omitted.
        """
        fields = dict(self.extra)
        fields["is_array"] = self.is_array
        fields["required"] = self.required
        if self.type is not None:
            fields["type"] = self.type
        if self.name is not None:
            fields["name"] = self.name
        if self.enum is not None:
            fields["enum"] = [getattr(member, "value", member) for member in self.enum]
        return fields


def api_property(**options: Any) -> PropertyMetadata:
    """Declare schema metadata for a model attribute.

    Recognized options are ``type``, ``is_array``, ``required``, ``name`` and
    ``enum``. Any other keyword (``description``, ``format``, ``example``, ...)
    is carried unchanged into the emitted schema.

    Example:
      >>> class Cat:
      ...     age = api_property(type=int, minimum=0)
    """
    recognized = {key: value for key, value in options.items() if key in _RECOGNIZED_OPTIONS}
    extra = {key: value for key, value in options.items() if key not in _RECOGNIZED_OPTIONS}
    return PropertyMetadata(**recognized, extra=extra)
