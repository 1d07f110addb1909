"""NoId: every class that is not embedded needs an @Id field."""

from typing import TYPE_CHECKING

from mapguard.mapping.annotations import Id
from mapguard.mapping.mapped_class import MappedClass
from mapguard.validators.base import ClassConstraint
from mapguard.validators.violation_set import ViolationSet

if TYPE_CHECKING:
    from mapguard.mapper import Mapper


class NoId(ClassConstraint):
    """Flags stand-alone classes that have nothing to identify their documents by."""

    def check(self, mapper: "Mapper", mapped_class: MappedClass, violations: ViolationSet) -> None:
        if mapped_class.id_field is None and mapped_class.embedded_annotation is None:
            violations.add(self._violation(
                mapped_class,
                f"No field is annotated with {Id.label()}; but it is required",
            ))
