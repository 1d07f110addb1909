"""mapguard: structural validation of object-to-document mapping metadata."""

from mapguard.exceptions import MappingError, MappingValidationError, UnclassifiedViolationError
from mapguard.mapper import Mapper
from mapguard.validators import Level, MappingValidator, Violation, ViolationSet

__all__ = [
    "MappingError",
    "MappingValidationError",
    "UnclassifiedViolationError",
    "Mapper",
    "Level",
    "MappingValidator",
    "Violation",
    "ViolationSet",
]
