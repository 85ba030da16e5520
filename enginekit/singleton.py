"""Per-class lazily created single instances."""

from __future__ import annotations

from typing import Any, TypeVar

_T = TypeVar("_T", bound="Singleton")


class Singleton:
    """Base class giving each subclass exactly one lazily created instance.

    Every subclass gets its own instance; a subclass never shares the
    instance of its base. Instances cannot be copied.
    """

    _instance: Any = None

    @classmethod
    def get(cls: type[_T]) -> _T:
        """Return the instance of this class, creating it on first use."""
        instance = cls.__dict__.get("_instance")
        if instance is None:
            instance = cls()
            cls._instance = instance
        return instance

    @classmethod
    def destroy(cls) -> None:
        """Drop the instance so that the next ``get`` creates a fresh one."""
        if cls.__dict__.get("_instance") is not None:
            cls._instance = None

    def __copy__(self):
        raise TypeError(f"{type(self).__name__} is a singleton and cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError(f"{type(self).__name__} is a singleton and cannot be copied")