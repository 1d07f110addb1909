"""DuplicatedAttributeNames: two fields may not be stored under the same document key."""

from typing import TYPE_CHECKING

from mapguard.mapping.mapped_class import MappedClass
from mapguard.validators.base import ClassConstraint
from mapguard.validators.violation_set import ViolationSet

if TYPE_CHECKING:
    from mapguard.mapper import Mapper


class DuplicatedAttributeNames(ClassConstraint):
    """Flags every field whose stored name an earlier field already uses."""

    def check(self, mapper: "Mapper", mapped_class: MappedClass, violations: ViolationSet) -> None:
        seen: dict[str, str] = {}
        for mapped_field in mapped_class.fields:
            stored_name = mapped_field.stored_name
            if stored_name in seen:
                violations.add(self._violation(
                    mapped_class,
                    f"Mapping to document field name '{stored_name}' is duplicated "
                    f"('{seen[stored_name]}' and '{mapped_field.name}'); "
                    f"you cannot map different attributes to the same document field.",
                    mapped_field=mapped_field,
                ))
            else:
                seen[stored_name] = mapped_field.name
