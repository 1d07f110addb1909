"""MapNotSerializable: keys and values of a @Serialized mapping must be picklable."""

import collections.abc
import io
import socket
import threading
import types
import typing
from typing import TYPE_CHECKING, Any

from mapguard.mapping.annotations import Serialized
from mapguard.mapping.mapped_class import MappedClass
from mapguard.mapping.mapped_field import MappedField
from mapguard.validators.base import FieldConstraint
from mapguard.validators.violation_set import ViolationSet

if TYPE_CHECKING:
    from mapguard.mapper import Mapper

# Types pickle refuses (or cannot meaningfully restore)
UNSERIALIZABLE_TYPES = (
    io.IOBase,
    socket.socket,
    types.FunctionType,
    types.GeneratorType,
    types.ModuleType,
    type(threading.Lock()),
)


def is_serializable(hint: Any) -> bool:
    """False for hints whose values pickle cannot store, callables included."""
    if hint is collections.abc.Callable or typing.get_origin(hint) is collections.abc.Callable:
        return False
    if not isinstance(hint, type):
        return True
    return not issubclass(hint, UNSERIALIZABLE_TYPES)


def _type_name(hint: Any) -> str:
    return getattr(hint, "__qualname__", None) or repr(hint)


class MapNotSerializable(FieldConstraint):
    """Flags @Serialized mappings whose key or value type cannot be pickled."""

    def check_field(
        self,
        mapper: "Mapper",
        mapped_class: MappedClass,
        mapped_field: MappedField,
        violations: ViolationSet,
    ) -> None:
        if not (mapped_field.is_map and mapped_field.has_annotation(Serialized)):
            return

        key_class = mapped_field.type_argument(0)
        value_class = mapped_field.type_argument(1)
        if key_class is not None and not is_serializable(key_class):
            violations.add(self._violation(
                mapped_class,
                f"Key class ({_type_name(key_class)}) is not serializable",
                mapped_field=mapped_field,
            ))
        if value_class is not None and not is_serializable(value_class):
            violations.add(self._violation(
                mapped_class,
                f"Value class ({_type_name(value_class)}) is not serializable",
                mapped_field=mapped_field,
            ))
