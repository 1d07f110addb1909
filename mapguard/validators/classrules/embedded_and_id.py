"""EmbeddedAndId: embedded values are stored inline and have no identity of their own."""

from typing import TYPE_CHECKING

from mapguard.mapping.annotations import Embedded, Id
from mapguard.mapping.mapped_class import MappedClass
from mapguard.validators.base import ClassConstraint
from mapguard.validators.violation_set import ViolationSet

if TYPE_CHECKING:
    from mapguard.mapper import Mapper


class EmbeddedAndId(ClassConstraint):
    """Flags @embedded classes that declare an identifier field."""

    def check(self, mapper: "Mapper", mapped_class: MappedClass, violations: ViolationSet) -> None:
        if mapped_class.embedded_annotation is not None and mapped_class.id_field is not None:
            violations.add(self._violation(
                mapped_class,
                f"{Embedded.label()} classes cannot specify a {Id.label()} field",
            ))
