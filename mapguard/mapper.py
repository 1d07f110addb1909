"""Mapper: registry of mapped classes and the entry point that validates them."""

import threading
from typing import Optional

import structlog

from mapguard.config import get_settings
from mapguard.mapping.mapped_class import MappedClass
from mapguard.mapping.object_factory import DefaultObjectFactory, ObjectFactory
from mapguard.validators.engine import MappingValidator

logger = structlog.get_logger()


class Mapper:
    """Builds and caches MappedClass descriptors.

    ``map()`` registers classes and, when VALIDATE_ON_MAP is set, validates them
    as one batch so all findings are reported together. Descriptors built only
    through ``get_mapped_class()`` (for example while a constraint looks at a
    nested value type) are cached but not registered.
    """

    def __init__(
        self,
        object_factory: Optional[ObjectFactory] = None,
        validator: Optional[MappingValidator] = None,
        validate_on_map: Optional[bool] = None,
    ):
        settings = get_settings()
        self.object_factory = object_factory or DefaultObjectFactory()
        self.validator = validator or MappingValidator(self.object_factory)
        self.validate_on_map = settings.VALIDATE_ON_MAP if validate_on_map is None else validate_on_map
        self._lock = threading.RLock()
        self._descriptors: dict[type, MappedClass] = {}
        self._mapped: dict[type, MappedClass] = {}

    def get_mapped_class(self, clazz: type) -> MappedClass:
        """Descriptor for ``clazz``, built on first request."""
        with self._lock:
            mapped_class = self._descriptors.get(clazz)
            if mapped_class is None:
                mapped_class = MappedClass(clazz)
                self._descriptors[clazz] = mapped_class
            return mapped_class

    def map(self, *classes: type) -> list[MappedClass]:
        """Register classes, validating the new batch first.

        Raises:
            MappingValidationError: A fatal violation was found; none of the
                classes are registered.
        """
        batch = [self.get_mapped_class(clazz) for clazz in classes]

        if self.validate_on_map:
            self.validator.validate(self, batch)

        with self._lock:
            for mapped_class in batch:
                self._mapped[mapped_class.clazz] = mapped_class

        logger.debug("classes_mapped", classes=[mc.name for mc in batch])
        return batch

    def is_mapped(self, clazz: type) -> bool:
        with self._lock:
            return clazz in self._mapped

    @property
    def mapped_classes(self) -> list[MappedClass]:
        with self._lock:
            return list(self._mapped.values())
