"""Object factories: build instances of mapped classes outside of normal loading."""

from abc import ABC, abstractmethod

from mapguard.exceptions import MappingError


class ObjectFactory(ABC):
    """Creates instances of mapped classes.

    Validation uses it to build throwaway instances whose initial attribute
    values are then inspected.
    """

    @abstractmethod
    def create_instance(self, clazz: type) -> object:
        """Return a new instance of ``clazz`` or raise MappingError."""
        ...


class DefaultObjectFactory(ObjectFactory):
    """Instantiates classes through their no-argument constructor."""

    def create_instance(self, clazz: type) -> object:
        try:
            return clazz()
        except Exception as e:
            raise MappingError(
                f"No usable constructor for {clazz.__module__}.{clazz.__qualname__}: {e}"
            ) from e
