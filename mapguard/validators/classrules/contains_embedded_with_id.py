"""ContainsEmbeddedWithId: ids inside nested values are never used as identities.

Walks the value types reachable through embedded and plain property fields
(recursively) and warns once if any of them declares an @Id field.
"""

import builtins
import typing
from typing import TYPE_CHECKING, Any

from mapguard.exceptions import MappingError
from mapguard.mapping.annotations import Id, Reference, Serialized
from mapguard.mapping.mapped_class import MappedClass
from mapguard.validators.base import ClassConstraint
from mapguard.validators.models import Level
from mapguard.validators.violation_set import ViolationSet

if TYPE_CHECKING:
    from mapguard.mapper import Mapper


def nested_types(hint: Any) -> list[type]:
    """User classes a value of type ``hint`` may hold.

    Descends through every type argument, so containers of unions
    (``dict[str, Optional[Badge]]``) and nested containers are covered.
    """
    if typing.get_origin(hint) is None and isinstance(hint, type):
        return [hint] if hint.__module__ != builtins.__name__ else []

    found = []
    for arg in typing.get_args(hint):
        found.extend(nested_types(arg))
    return found


class ContainsEmbeddedWithId(ClassConstraint):
    """Warns when a value stored inside the document carries an @Id field."""

    default_level = Level.WARNING

    def check(self, mapper: "Mapper", mapped_class: MappedClass, violations: ViolationSet) -> None:
        visited = {mapped_class.clazz}
        pending = self._value_types(mapped_class)

        while pending:
            clazz = pending.pop()
            if clazz in visited:
                continue
            visited.add(clazz)

            try:
                nested = mapper.get_mapped_class(clazz)
            except MappingError:
                continue
            if nested.id_field is not None:
                violations.add(self._violation(
                    mapped_class,
                    f"You cannot use {Id.label()} on any field of an embedded/property "
                    f"object ({nested.name}.{nested.id_field.name})",
                ))
                return
            pending.extend(self._value_types(nested))

    @staticmethod
    def _value_types(mapped_class: MappedClass) -> list[type]:
        types = []
        for mapped_field in mapped_class.fields:
            if mapped_field.has_annotation(Id) or mapped_field.has_annotation(Reference):
                continue
            if mapped_field.has_annotation(Serialized):
                continue
            types.extend(nested_types(mapped_field.type))
        return types
