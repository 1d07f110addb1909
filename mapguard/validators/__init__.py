"""Mapping Validator: structural checks over mapped classes before they are used.

Usage:
    from mapguard.validators import MappingValidator

    MappingValidator(object_factory).validate(mapper, mapped_classes)
    # raises MappingValidationError on fatal findings, logs the rest
"""

from mapguard.validators.base import ClassConstraint, FieldConstraint
from mapguard.validators.engine import MappingValidator
from mapguard.validators.models import Level, Violation
from mapguard.validators.violation_set import ViolationSet

__all__ = [
    "ClassConstraint",
    "FieldConstraint",
    "MappingValidator",
    "Level",
    "Violation",
    "ViolationSet",
]
