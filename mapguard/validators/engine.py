"""Validation Engine: runs every registered constraint over the mapped classes.

This is the single point that turns accumulated violations into an outcome:
either a raised MappingValidationError (fatal) or one log record per violation.

Usage:
    validator = MappingValidator(DefaultObjectFactory())
    validator.validate(mapper, mapper.mapped_classes)
"""

from concurrent.futures import ThreadPoolExecutor
from operator import attrgetter
from typing import TYPE_CHECKING, Iterable, Optional, Sequence

import structlog

from mapguard.config import get_settings
from mapguard.exceptions import MappingValidationError, UnclassifiedViolationError
from mapguard.mapping.annotations import Embedded, Property, Reference, Serialized
from mapguard.mapping.mapped_class import MappedClass
from mapguard.mapping.object_factory import DefaultObjectFactory, ObjectFactory
from mapguard.validators.base import ClassConstraint
from mapguard.validators.models import Level, Violation
from mapguard.validators.violation_set import ViolationSet

# Import all constraints
from mapguard.validators.classrules import (
    ContainsEmbeddedWithId,
    DuplicatedAttributeNames,
    EmbeddedAndId,
    EntityAndEmbed,
    EntityCannotBeMapOrIterable,
    MultipleId,
    MultipleVersions,
    MustHaveNoArgConstructor,
    NoId,
)
from mapguard.validators.fieldrules import (
    ContradictingFieldAnnotation,
    MapNotSerializable,
    VersionMisuse,
)

if TYPE_CHECKING:
    from mapguard.mapper import Mapper

logger = structlog.get_logger()


def _log_violation(violation: Violation) -> None:
    """Write one violation at the log level matching its severity."""
    log_methods = {
        Level.SEVERE: logger.error,
        Level.WARNING: logger.warning,
        Level.INFO: logger.info,
        Level.MINOR: logger.debug,
    }
    log = log_methods.get(violation.level)
    if log is None:
        raise UnclassifiedViolationError(
            f"Cannot log {type(violation).__name__} of level {violation.level.name}"
        )
    log(
        "mapping_constraint_violation",
        violation=violation.render(),
        prefix=violation.prefix,
        severity=violation.level.value,
    )


class MappingValidator:
    """Validates the mapping metadata of a list of classes.

    The constraint list is fixed at construction and shared read-only by every
    run; each call to validate() starts from an empty ViolationSet.
    """

    def __init__(
        self,
        object_factory: Optional[ObjectFactory] = None,
        constraints: Optional[Iterable[ClassConstraint]] = None,
        fatal_level: Optional[Level] = None,
        max_workers: Optional[int] = None,
    ):
        """Initialize with the default constraints or a custom list.

        Args:
            object_factory: Builds throwaway instances for constraints that need one
            constraints: Optional constraint list, in execution order. If None, uses all defaults.
            fatal_level: Violations at this level or worse abort validation
            max_workers: Check classes on this many threads when > 1
        """
        settings = get_settings()
        self.object_factory = object_factory or DefaultObjectFactory()
        self.constraints: tuple[ClassConstraint, ...] = tuple(
            constraints if constraints is not None else self._default_constraints(self.object_factory)
        )
        self.fatal_level = fatal_level or Level(settings.VALIDATION_FATAL_LEVEL)
        self.max_workers = max_workers or settings.VALIDATION_MAX_WORKERS

    @staticmethod
    def _default_constraints(object_factory: ObjectFactory) -> list[ClassConstraint]:
        """Create the default constraint chain in execution order."""
        return [
            # class-level
            MustHaveNoArgConstructor(),
            MultipleId(),
            MultipleVersions(),
            NoId(),
            EmbeddedAndId(),
            EntityAndEmbed(),
            EntityCannotBeMapOrIterable(),
            DuplicatedAttributeNames(),
            ContainsEmbeddedWithId(),
            # field-level
            MapNotSerializable(),
            VersionMisuse(object_factory),
            ContradictingFieldAnnotation(Reference, Serialized),
            ContradictingFieldAnnotation(Reference, Property),
            ContradictingFieldAnnotation(Reference, Embedded),
            ContradictingFieldAnnotation(Embedded, Serialized),
            ContradictingFieldAnnotation(Embedded, Property),
            ContradictingFieldAnnotation(Property, Serialized),
        ]

    def validate(self, mapper: "Mapper", classes: Sequence[MappedClass]) -> list[Violation]:
        """Run all constraints against every class.

        Args:
            mapper: Metadata provider handed to each constraint
            classes: The mapped classes to validate, in reporting order

        Returns:
            The violations that were logged, ordered by prefix (empty if none)

        Raises:
            MappingValidationError: The worst violation is at or beyond the fatal level.
                Carries every violation found in this run. Nothing is logged.
        """
        violations = ViolationSet()

        if self.max_workers > 1 and len(classes) > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
                list(pool.map(lambda c: self._check_class(mapper, c, violations), classes))
        else:
            for mapped_class in classes:
                self._check_class(mapper, mapped_class, violations)

        worst = violations.worst()
        if worst is None:
            return []

        if worst.level.is_at_least(self.fatal_level):
            raise MappingValidationError(violations)

        # sort by class to make it more readable
        report = sorted(violations, key=attrgetter("prefix"))
        for violation in report:
            _log_violation(violation)
        return report

    def _check_class(self, mapper: "Mapper", mapped_class: MappedClass, violations: ViolationSet) -> None:
        for constraint in self.constraints:
            try:
                constraint.check(mapper, mapped_class, violations)
            except Exception as e:
                # A broken rule must not hide the findings of the others
                violations.add(Violation(
                    level=Level.SEVERE,
                    prefix=f"{mapped_class.name}.",
                    message=(
                        f"{constraint.name} crashed while checking {mapped_class.name}: "
                        f"{type(e).__name__}: {e}"
                    ),
                ))
