"""Field-level mapping constraints."""

from mapguard.validators.fieldrules.contradicting_field_annotation import ContradictingFieldAnnotation
from mapguard.validators.fieldrules.map_not_serializable import MapNotSerializable
from mapguard.validators.fieldrules.version_misuse import VersionMisuse

__all__ = [
    "ContradictingFieldAnnotation",
    "MapNotSerializable",
    "VersionMisuse",
]
