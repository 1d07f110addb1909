"""Mapping annotations.

Field annotations ride on ``typing.Annotated`` metadata::

    @entity("users")
    class User:
        id: Annotated[str, Id()]
        name: Annotated[str, Property("n")]
        address: Annotated[Address, Embedded()]

Class annotations are applied with the ``entity`` / ``embedded`` decorators.
"""

from dataclasses import dataclass
from typing import Optional

CLASS_ANNOTATIONS_ATTR = "__mapping_annotations__"


class MappingAnnotation:
    """Base for every mapping marker."""

    name: Optional[str] = None

    @classmethod
    def label(cls) -> str:
        return f"@{cls.__name__}"


@dataclass(frozen=True)
class Entity(MappingAnnotation):
    name: Optional[str] = None


@dataclass(frozen=True)
class Embedded(MappingAnnotation):
    name: Optional[str] = None


@dataclass(frozen=True)
class Id(MappingAnnotation):
    pass


@dataclass(frozen=True)
class Version(MappingAnnotation):
    name: Optional[str] = None


@dataclass(frozen=True)
class Property(MappingAnnotation):
    name: Optional[str] = None


@dataclass(frozen=True)
class Reference(MappingAnnotation):
    name: Optional[str] = None


@dataclass(frozen=True)
class Serialized(MappingAnnotation):
    name: Optional[str] = None


@dataclass(frozen=True)
class Transient(MappingAnnotation):
    pass


def _annotate(cls: type, marker: MappingAnnotation) -> type:
    # Copy rather than mutate, so subclasses don't write into their parent's dict
    markers = dict(cls.__dict__.get(CLASS_ANNOTATIONS_ATTR, {}))
    markers[type(marker)] = marker
    setattr(cls, CLASS_ANNOTATIONS_ATTR, markers)
    return cls


def entity(name=None):
    """Mark a class as a top-level persisted entity.

    Usable bare (``@entity``) or with a collection name (``@entity("users")``).
    """
    if isinstance(name, type):
        return _annotate(name, Entity())
    return lambda cls: _annotate(cls, Entity(name))


def embedded(name=None):
    """Mark a class as a value embedded inside another document."""
    if isinstance(name, type):
        return _annotate(name, Embedded())
    return lambda cls: _annotate(cls, Embedded(name))


def class_annotations(cls: type) -> dict:
    """Markers declared directly on ``cls`` (not inherited)."""
    return dict(cls.__dict__.get(CLASS_ANNOTATIONS_ATTR, {}))
