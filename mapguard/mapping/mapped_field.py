"""MappedField: persisted-field descriptor built from an ``Annotated`` type hint."""

import collections.abc
import types
import typing
from typing import Any, Optional

from mapguard.mapping.annotations import (
    Embedded,
    Id,
    MappingAnnotation,
    Property,
    Reference,
    Serialized,
    Version,
)

ID_STORED_NAME = "_id"

# Markers whose ``name`` overrides the stored attribute name, in precedence order
_NAMING_ANNOTATIONS = (Property, Embedded, Reference, Serialized, Version)

_MAPPING_ORIGINS = (dict, collections.abc.Mapping, collections.abc.MutableMapping)


def _strip_optional(hint: Any) -> tuple[Any, bool]:
    """Return (inner type, was_optional) for ``X | None`` / ``Optional[X]``."""
    origin = typing.get_origin(hint)
    if origin is typing.Union or origin is types.UnionType:
        args = [a for a in typing.get_args(hint) if a is not type(None)]
        if len(args) == 1 and len(typing.get_args(hint)) == 2:
            return args[0], True
    return hint, False


class MappedField:
    """Read-only description of one persisted attribute of a mapped class."""

    def __init__(
        self,
        declaring_class: type,
        name: str,
        declared_type: Any,
        annotations: Optional[list[MappingAnnotation]] = None,
    ):
        self.declaring_class = declaring_class
        self.name = name
        self.declared_type = declared_type
        self._annotations: dict[type, MappingAnnotation] = {}
        for marker in annotations or []:
            self._annotations.setdefault(type(marker), marker)
        self.type, self.is_optional = _strip_optional(declared_type)

    @classmethod
    def from_hint(cls, declaring_class: type, name: str, hint: Any) -> "MappedField":
        """Build from a resolved type hint, splitting ``Annotated`` metadata off."""
        markers = []
        if typing.get_origin(hint) is typing.Annotated:
            base, *metadata = typing.get_args(hint)
            markers = [m for m in metadata if isinstance(m, MappingAnnotation)]
            hint = base
        return cls(declaring_class, name, hint, markers)

    # ── Annotations ──

    @property
    def annotations(self) -> tuple[MappingAnnotation, ...]:
        return tuple(self._annotations.values())

    def has_annotation(self, annotation_type: type) -> bool:
        return annotation_type in self._annotations

    def get_annotation(self, annotation_type: type) -> Optional[MappingAnnotation]:
        return self._annotations.get(annotation_type)

    # ── Naming ──

    @property
    def stored_name(self) -> str:
        """Name the value is stored under in the document."""
        if self.has_annotation(Id):
            return ID_STORED_NAME
        for annotation_type in _NAMING_ANNOTATIONS:
            marker = self.get_annotation(annotation_type)
            if marker is not None and marker.name:
                return marker.name
        return self.name

    @property
    def full_name(self) -> str:
        return f"{self.declaring_class.__module__}.{self.declaring_class.__qualname__}.{self.name}"

    # ── Type inspection ──

    @property
    def type_origin(self) -> Any:
        """Unsubscripted type: ``dict`` for ``dict[str, int]``, the type itself otherwise."""
        return typing.get_origin(self.type) or self.type

    @property
    def is_map(self) -> bool:
        origin = self.type_origin
        if origin in _MAPPING_ORIGINS:
            return True
        return isinstance(origin, type) and issubclass(origin, collections.abc.Mapping)

    def type_argument(self, index: int) -> Optional[Any]:
        """The ``index``-th type parameter (``dict[K, V]`` → K at 0), or None."""
        args = typing.get_args(self.type)
        return args[index] if index < len(args) else None

    def __repr__(self) -> str:
        labels = ", ".join(a.label() for a in self._annotations)
        return f"MappedField({self.full_name}: {labels or 'unannotated'})"
