"""MultipleId: a class may declare at most one @Id field."""

from typing import TYPE_CHECKING

from mapguard.mapping.annotations import Id
from mapguard.mapping.mapped_class import MappedClass
from mapguard.validators.base import ClassConstraint
from mapguard.validators.violation_set import ViolationSet

if TYPE_CHECKING:
    from mapguard.mapper import Mapper


class MultipleId(ClassConstraint):
    """Flags classes with more than one identifier field."""

    def check(self, mapper: "Mapper", mapped_class: MappedClass, violations: ViolationSet) -> None:
        id_fields = mapped_class.fields_annotated_with(Id)
        if len(id_fields) > 1:
            violations.add(self._violation(
                mapped_class,
                f"More than one {Id.label()} Field found ({self._field_names(id_fields)}).",
            ))
