"""MultipleVersions: a class may declare at most one @Version field."""

from typing import TYPE_CHECKING

from mapguard.mapping.annotations import Version
from mapguard.mapping.mapped_class import MappedClass
from mapguard.validators.base import ClassConstraint
from mapguard.validators.violation_set import ViolationSet

if TYPE_CHECKING:
    from mapguard.mapper import Mapper


class MultipleVersions(ClassConstraint):
    """Flags classes with more than one optimistic-locking version field."""

    def check(self, mapper: "Mapper", mapped_class: MappedClass, violations: ViolationSet) -> None:
        version_fields = mapped_class.fields_annotated_with(Version)
        if len(version_fields) > 1:
            violations.add(self._violation(
                mapped_class,
                f"Multiple {Version.label()} annotations are not allowed. "
                f"({self._field_names(version_fields)})",
            ))
