"""ContradictingFieldAnnotation: two markers that each claim how a field is stored."""

from typing import TYPE_CHECKING, Optional

from mapguard.mapping.mapped_class import MappedClass
from mapguard.mapping.mapped_field import MappedField
from mapguard.validators.base import FieldConstraint
from mapguard.validators.models import Level
from mapguard.validators.violation_set import ViolationSet

if TYPE_CHECKING:
    from mapguard.mapper import Mapper


class ContradictingFieldAnnotation(FieldConstraint):
    """Flags fields carrying both ``first`` and ``second``.

    One instance is registered per conflicting pair.
    """

    def __init__(self, first: type, second: type, level: Optional[Level] = None):
        super().__init__(level)
        self.first = first
        self.second = second

    def check_field(
        self,
        mapper: "Mapper",
        mapped_class: MappedClass,
        mapped_field: MappedField,
        violations: ViolationSet,
    ) -> None:
        if mapped_field.has_annotation(self.first) and mapped_field.has_annotation(self.second):
            violations.add(self._violation(
                mapped_class,
                f"A field can be either annotated with {self.first.label()} OR "
                f"{self.second.label()}, but not both.",
                mapped_field=mapped_field,
            ))

    def __repr__(self) -> str:
        return f"ContradictingFieldAnnotation({self.first.__name__}, {self.second.__name__})"
