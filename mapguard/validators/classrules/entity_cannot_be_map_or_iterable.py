"""EntityCannotBeMapOrIterable: entities are stored field by field, not as containers."""

import collections.abc
from typing import TYPE_CHECKING

from mapguard.mapping.annotations import Entity
from mapguard.mapping.mapped_class import MappedClass
from mapguard.validators.base import ClassConstraint
from mapguard.validators.violation_set import ViolationSet

if TYPE_CHECKING:
    from mapguard.mapper import Mapper


class EntityCannotBeMapOrIterable(ClassConstraint):
    """Flags @entity classes that subclass a Mapping or an Iterable."""

    def check(self, mapper: "Mapper", mapped_class: MappedClass, violations: ViolationSet) -> None:
        if mapped_class.entity_annotation is None:
            return
        if issubclass(mapped_class.clazz, (collections.abc.Mapping, collections.abc.Iterable)):
            violations.add(self._violation(
                mapped_class,
                f"Classes annotated with {Entity.label()} cannot implement Mapping or Iterable.",
            ))
