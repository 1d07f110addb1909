"""Mapping model: annotations and the class/field descriptors validation reads."""

from mapguard.mapping.annotations import (
    Embedded,
    Entity,
    Id,
    MappingAnnotation,
    Property,
    Reference,
    Serialized,
    Transient,
    Version,
    embedded,
    entity,
)
from mapguard.mapping.mapped_class import MappedClass
from mapguard.mapping.mapped_field import MappedField
from mapguard.mapping.object_factory import DefaultObjectFactory, ObjectFactory

__all__ = [
    "Embedded",
    "Entity",
    "Id",
    "MappingAnnotation",
    "Property",
    "Reference",
    "Serialized",
    "Transient",
    "Version",
    "embedded",
    "entity",
    "MappedClass",
    "MappedField",
    "DefaultObjectFactory",
    "ObjectFactory",
]
