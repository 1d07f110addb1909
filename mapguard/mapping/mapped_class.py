"""MappedClass: the descriptor constraints inspect for one mapped Python class."""

import inspect
import typing
from typing import Optional

from mapguard.mapping.annotations import (
    Embedded,
    Entity,
    Id,
    Transient,
    class_annotations,
)
from mapguard.mapping.mapped_field import MappedField
from mapguard.exceptions import MappingError


class MappedClass:
    """Class-level markers plus the persisted fields of a class.

    Fields come from the class's resolved type hints (inherited ones included).
    ``ClassVar`` hints and ``@Transient`` fields are not persisted and are left out.
    """

    def __init__(self, clazz: type):
        self.clazz = clazz
        self._annotations = class_annotations(clazz)
        self.fields = self._discover_fields(clazz)

    @staticmethod
    def _discover_fields(clazz: type) -> list[MappedField]:
        try:
            hints = typing.get_type_hints(clazz, include_extras=True)
        except (NameError, TypeError) as e:
            raise MappingError(f"Cannot resolve type hints of {clazz.__qualname__}: {e}") from e

        fields = []
        for name, hint in hints.items():
            if typing.get_origin(hint) is typing.ClassVar:
                continue
            mapped_field = MappedField.from_hint(clazz, name, hint)
            if mapped_field.has_annotation(Transient):
                continue
            fields.append(mapped_field)
        return fields

    # ── Identity ──

    @property
    def name(self) -> str:
        return f"{self.clazz.__module__}.{self.clazz.__qualname__}"

    @property
    def is_abstract(self) -> bool:
        return inspect.isabstract(self.clazz)

    # ── Class annotations ──

    @property
    def entity_annotation(self) -> Optional[Entity]:
        return self._annotations.get(Entity)

    @property
    def embedded_annotation(self) -> Optional[Embedded]:
        return self._annotations.get(Embedded)

    # ── Fields ──

    def fields_annotated_with(self, annotation_type: type) -> list[MappedField]:
        return [f for f in self.fields if f.has_annotation(annotation_type)]

    def get_field(self, name: str) -> Optional[MappedField]:
        for mapped_field in self.fields:
            if mapped_field.name == name:
                return mapped_field
        return None

    @property
    def id_field(self) -> Optional[MappedField]:
        id_fields = self.fields_annotated_with(Id)
        return id_fields[0] if id_fields else None

    def __repr__(self) -> str:
        return f"MappedClass({self.name}, {len(self.fields)} fields)"
