"""VersionMisuse: @Version fields must be integers starting from a blank value.

The initial value is read from a throwaway instance built by the object factory:
an ``int`` field must start at 0, an ``Optional[int]`` field at None.
"""

from typing import TYPE_CHECKING, Optional

from mapguard.exceptions import MappingError
from mapguard.mapping.annotations import Version
from mapguard.mapping.mapped_class import MappedClass
from mapguard.mapping.mapped_field import MappedField
from mapguard.mapping.object_factory import ObjectFactory
from mapguard.validators.base import FieldConstraint
from mapguard.validators.models import Level
from mapguard.validators.violation_set import ViolationSet

if TYPE_CHECKING:
    from mapguard.mapper import Mapper

_UNSET = object()


class VersionMisuse(FieldConstraint):
    """Checks the type and the initial value of @Version fields."""

    def __init__(self, object_factory: ObjectFactory, level: Optional[Level] = None):
        super().__init__(level)
        self.object_factory = object_factory

    def check_field(
        self,
        mapper: "Mapper",
        mapped_class: MappedClass,
        mapped_field: MappedField,
        violations: ViolationSet,
    ) -> None:
        if not mapped_field.has_annotation(Version) or mapped_class.is_abstract:
            return

        if mapped_field.type is not int:
            violations.add(self._violation(
                mapped_class,
                f"{Version.label()} can only be used on an int or Optional[int] field.",
                mapped_field=mapped_field,
            ))
            return

        try:
            instance = self.object_factory.create_instance(mapped_class.clazz)
        except MappingError as e:
            violations.add(self._violation(
                mapped_class,
                f"Cannot create an instance to check the initial {Version.label()} value: {e}",
                mapped_field=mapped_field,
                level=Level.SEVERE,
            ))
            return

        initial = getattr(instance, mapped_field.name, _UNSET)
        if mapped_field.is_optional:
            if initial is not None and initial is not _UNSET:
                violations.add(self._violation(
                    mapped_class,
                    f"When using {Version.label()} on an Optional[int] field, it must be initialized to None.",
                    mapped_field=mapped_field,
                ))
        elif initial != 0:
            violations.add(self._violation(
                mapped_class,
                f"When using {Version.label()} on an int field, it must be initialized to 0.",
                mapped_field=mapped_field,
            ))
