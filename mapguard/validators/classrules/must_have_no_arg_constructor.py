"""MustHaveNoArgConstructor: persisted classes must be constructible without arguments."""

import inspect
from typing import TYPE_CHECKING

from mapguard.mapping.mapped_class import MappedClass
from mapguard.validators.base import ClassConstraint
from mapguard.validators.violation_set import ViolationSet

if TYPE_CHECKING:
    from mapguard.mapper import Mapper

_REQUIRED_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
    inspect.Parameter.KEYWORD_ONLY,
)


def required_parameters(clazz: type) -> list[str]:
    """Constructor parameters that have no default value.

    Classes whose constructor comes from a C-implemented base (``Exception``,
    builtins without a text signature) cannot be inspected; if their ``__init__``
    is not Python code either, nothing is known to be required.
    """
    try:
        parameters = list(inspect.signature(clazz).parameters.values())
    except (TypeError, ValueError):
        init = clazz.__init__
        if not inspect.isfunction(init):
            return []
        parameters = list(inspect.signature(init).parameters.values())[1:]

    return [
        p.name for p in parameters
        if p.kind in _REQUIRED_KINDS and p.default is inspect.Parameter.empty
    ]


class MustHaveNoArgConstructor(ClassConstraint):
    """Entities and embedded values are rebuilt from documents with ``cls()``."""

    def check(self, mapper: "Mapper", mapped_class: MappedClass, violations: ViolationSet) -> None:
        if mapped_class.entity_annotation is None and mapped_class.embedded_annotation is None:
            return

        required = required_parameters(mapped_class.clazz)
        if required:
            violations.add(self._violation(
                mapped_class,
                f"No usable constructor for {mapped_class.name}; "
                f"parameters without defaults: {', '.join(required)}.",
            ))
