"""Tests for the field-level constraints."""

import io
import types
from abc import ABC, abstractmethod
from typing import Annotated, Callable, Optional

from mapguard.exceptions import MappingError
from mapguard.mapping import (
    DefaultObjectFactory,
    Embedded,
    Id,
    ObjectFactory,
    Property,
    Reference,
    Serialized,
    Version,
    entity,
)
from mapguard.validators import Level, ViolationSet
from mapguard.validators.fieldrules import ContradictingFieldAnnotation, MapNotSerializable, VersionMisuse

from _mapping_helpers import Address, User


def run(constraint, mapper, clazz) -> list:
    violations = ViolationSet()
    constraint.check(mapper, mapper.get_mapped_class(clazz), violations)
    return list(violations)


# ── ContradictingFieldAnnotation ──

@entity
class Conflicted:
    id: Annotated[str, Id()] = ""
    home: Annotated[Address, Reference(), Embedded()] = None
    blob: Annotated[bytes, Property(), Serialized()] = b""


def test_field_with_both_markers_is_flagged(mapper):
    [violation] = run(ContradictingFieldAnnotation(Reference, Embedded), mapper, Conflicted)

    assert violation.level is Level.FATAL
    assert violation.prefix.endswith("Conflicted.home")
    assert "either annotated with @Reference OR @Embedded, but not both" in violation.message


def test_each_pair_only_reports_its_own_conflict(mapper):
    assert run(ContradictingFieldAnnotation(Reference, Serialized), mapper, Conflicted) == []
    assert len(run(ContradictingFieldAnnotation(Property, Serialized), mapper, Conflicted)) == 1


def test_clean_fields_pass(mapper):
    assert run(ContradictingFieldAnnotation(Embedded, Property), mapper, User) == []


# ── MapNotSerializable ──

def test_serialized_map_with_unpicklable_value(mapper):
    @entity
    class Handles:
        id: Annotated[str, Id()] = ""
        streams: Annotated[dict[str, io.StringIO], Serialized()] = None

    [violation] = run(MapNotSerializable(), mapper, Handles)

    assert "Value class (StringIO) is not serializable" in violation.message


def test_serialized_map_with_unpicklable_key(mapper):
    @entity
    class Modules:
        id: Annotated[str, Id()] = ""
        loaded: Annotated[dict[types.ModuleType, int], Serialized()] = None

    [violation] = run(MapNotSerializable(), mapper, Modules)

    assert f"Key class ({types.ModuleType.__qualname__}) is not serializable" in violation.message


def test_serialized_map_of_callables(mapper):
    @entity
    class Hooks:
        id: Annotated[str, Id()] = ""
        handlers: Annotated[dict[str, Callable[..., int]], Serialized()] = None

    [violation] = run(MapNotSerializable(), mapper, Hooks)

    assert "Value class" in violation.message
    assert "is not serializable" in violation.message


def test_plain_serialized_map_passes(mapper):
    @entity
    class Settings:
        id: Annotated[str, Id()] = ""
        values: Annotated[dict[str, int], Serialized()] = None
        raw: Annotated[dict, Serialized()] = None

    assert run(MapNotSerializable(), mapper, Settings) == []


def test_unserialized_map_is_not_checked(mapper):
    @entity
    class Streams:
        id: Annotated[str, Id()] = ""
        streams: dict[str, io.StringIO] = None

    assert run(MapNotSerializable(), mapper, Streams) == []


# ── VersionMisuse ──

def version_rule():
    return VersionMisuse(DefaultObjectFactory())


def test_zero_initialized_int_version_passes(mapper):
    @entity
    class Doc:
        id: Annotated[str, Id()] = ""
        version: Annotated[int, Version()] = 0

    assert run(version_rule(), mapper, Doc) == []


def test_none_initialized_optional_version_passes(mapper):
    assert run(version_rule(), mapper, User) == []


def test_int_version_must_start_at_zero(mapper):
    @entity
    class Doc:
        id: Annotated[str, Id()] = ""
        version: Annotated[int, Version()] = 3

    [violation] = run(version_rule(), mapper, Doc)

    assert "on an int field, it must be initialized to 0" in violation.message


def test_uninitialized_int_version_is_flagged(mapper):
    @entity
    class Doc:
        id: Annotated[str, Id()] = ""
        version: Annotated[int, Version()]

    assert len(run(version_rule(), mapper, Doc)) == 1


def test_optional_version_must_start_as_none(mapper):
    @entity
    class Doc:
        id: Annotated[str, Id()] = ""
        version: Annotated[Optional[int], Version()] = 1

    [violation] = run(version_rule(), mapper, Doc)

    assert "must be initialized to None" in violation.message


def test_version_on_non_int_field(mapper):
    @entity
    class Doc:
        id: Annotated[str, Id()] = ""
        version: Annotated[str, Version()] = ""

    [violation] = run(version_rule(), mapper, Doc)

    assert "can only be used on an int or Optional[int] field" in violation.message


def test_abstract_classes_are_skipped(mapper):
    @entity
    class Base(ABC):
        id: Annotated[str, Id()] = ""
        version: Annotated[int, Version()] = 7

        @abstractmethod
        def kind(self):
            ...

    assert run(version_rule(), mapper, Base) == []


def test_instantiation_failure_is_reported_not_raised(mapper):
    @entity
    class Doc:
        id: Annotated[str, Id()] = ""
        version: Annotated[int, Version()] = 0

        def __init__(self, required):
            self.required = required

    [violation] = run(version_rule(), mapper, Doc)

    assert violation.level is Level.SEVERE
    assert "Cannot create an instance" in violation.message


def test_uses_the_configured_factory(mapper):
    class Recording(ObjectFactory):
        def __init__(self):
            self.created = []

        def create_instance(self, clazz):
            self.created.append(clazz)
            raise MappingError("not today")

    factory = Recording()

    violations = run(VersionMisuse(factory), mapper, User)

    assert factory.created == [User]
    assert [v.level for v in violations] == [Level.SEVERE]
