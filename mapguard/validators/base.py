"""Base constraints: abstract classes implementing the Strategy Pattern.

Each constraint is a standalone, independently testable rule. New rules are
added to the engine's registration list without modifying the engine.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Iterable, Optional

from mapguard.mapping.mapped_class import MappedClass
from mapguard.mapping.mapped_field import MappedField
from mapguard.validators.models import Level, Violation
from mapguard.validators.violation_set import ViolationSet

if TYPE_CHECKING:
    from mapguard.mapper import Mapper


class ClassConstraint(ABC):
    """Abstract base for all mapping constraints.

    Contract:
        - check() reports problems by adding Violations, it does not raise for bad metadata
        - check() never removes or alters violations already in the set
        - No state is kept between calls beyond what __init__ captured
    """

    default_level: Level = Level.FATAL

    def __init__(self, level: Optional[Level] = None):
        self.level = level or self.default_level

    @property
    def name(self) -> str:
        """Human-readable name used in rendered messages."""
        return type(self).__name__

    @abstractmethod
    def check(self, mapper: "Mapper", mapped_class: MappedClass, violations: ViolationSet) -> None:
        """Run the rule against one mapped class.

        Args:
            mapper: Metadata provider, for looking up other mapped classes
            mapped_class: The class under validation
            violations: Shared set to add findings to
        """
        ...

    # ── Helper Methods ──

    def _violation(
        self,
        mapped_class: MappedClass,
        message: str,
        mapped_field: Optional[MappedField] = None,
        level: Optional[Level] = None,
    ) -> Violation:
        """Build a Violation located at the class, or at one of its fields."""
        prefix = mapped_field.full_name if mapped_field is not None else f"{mapped_class.name}."
        return Violation(
            level=level or self.level,
            prefix=prefix,
            message=f"{self.name} complained about {prefix}: {message}",
        )

    @staticmethod
    def _field_names(fields: Iterable[MappedField]) -> str:
        return ", ".join(f.name for f in fields)


class FieldConstraint(ClassConstraint):
    """A constraint evaluated field by field."""

    def check(self, mapper: "Mapper", mapped_class: MappedClass, violations: ViolationSet) -> None:
        for mapped_field in mapped_class.fields:
            self.check_field(mapper, mapped_class, mapped_field, violations)

    @abstractmethod
    def check_field(
        self,
        mapper: "Mapper",
        mapped_class: MappedClass,
        mapped_field: MappedField,
        violations: ViolationSet,
    ) -> None:
        ...
