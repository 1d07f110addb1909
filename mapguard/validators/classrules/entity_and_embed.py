"""EntityAndEmbed: a class is either a top-level entity or an embedded value."""

from typing import TYPE_CHECKING

from mapguard.mapping.annotations import Embedded, Entity
from mapguard.mapping.mapped_class import MappedClass
from mapguard.validators.base import ClassConstraint
from mapguard.validators.violation_set import ViolationSet

if TYPE_CHECKING:
    from mapguard.mapper import Mapper


class EntityAndEmbed(ClassConstraint):
    """Flags classes decorated with both @entity and @embedded."""

    def check(self, mapper: "Mapper", mapped_class: MappedClass, violations: ViolationSet) -> None:
        if mapped_class.entity_annotation is not None and mapped_class.embedded_annotation is not None:
            violations.add(self._violation(
                mapped_class,
                f"Cannot have both {Entity.label()} and {Embedded.label()} annotation at class level.",
            ))
