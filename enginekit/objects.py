"""Base object model with run-time class information and checked casts."""

from __future__ import annotations

from typing import TypeVar, Union

from .names import Name

_UINT32_MAX = 0xFFFFFFFF

_T = TypeVar("_T", bound="UObject")


class UObject:
    """Root of the object hierarchy; every subclass gets a ``UClass``."""

    def __init__(self) -> None:
        self.fname = Name("None")
        self.uuid = 0
        self.internal_index = _UINT32_MAX

    @classmethod
    def static_class(cls) -> "UClass":
        """Return the class information describing ``cls``, built once."""
        info = cls.__dict__.get("_static_class")
        if info is None:
            super_class = next(
                (base.static_class() for base in cls.__mro__[1:]
                 if isinstance(base, type) and issubclass(base, UObject)),
                None,
            )
            info = UClass(cls.__name__, super_class)
            info.python_type = cls
            cls._static_class = info
        return info

    @property
    def name(self) -> str:
        return self.fname.to_string()

    def get_class(self) -> "UClass":
        """Return the class information of this object's type."""
        return type(self).static_class()

    def is_a(self, some_base: Union["UClass", type]) -> bool:
        """Tell whether this object is of ``some_base`` or one of its subclasses."""
        return self.get_class().is_child_of(_as_class_info(some_base))

    def __copy__(self):
        raise TypeError(f"{type(self).__name__} objects cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError(f"{type(self).__name__} objects cannot be copied")


class UClass(UObject):
    """Run-time information about a ``UObject`` class."""

    def __init__(self, name: str, super_class: "UClass | None" = None) -> None:
        super().__init__()
        self.fname = Name(name)
        self.super_class = super_class
        self.python_type: type | None = None
        self._default_object: UObject | None = None

    def is_child_of(self, some_base: "UClass | None") -> bool:
        """Tell whether this class is ``some_base`` or derives from it."""
        if some_base is None:
            return False
        current: UClass | None = self
        while current is not None:
            if current is some_base:
                return True
            current = current.super_class
        return False

    def get_default_object(self) -> UObject | None:
        """Return the class default object, creating it on first use."""
        if self._default_object is None and self.python_type is not None:
            self._default_object = self.python_type()
        return self._default_object

    def __repr__(self) -> str:
        return f"UClass({self.name!r})"


def _as_class_info(target: Union[UClass, type, None]) -> UClass | None:
    if target is None or isinstance(target, UClass):
        return target
    if isinstance(target, type) and issubclass(target, UObject):
        return target.static_class()
    raise TypeError(f"{target!r} is not a UObject class")


def cast(obj: UObject | None, target: Union[type, UClass]) -> UObject | None:
    """Return ``obj`` if it is an instance of ``target``, otherwise None."""
    if obj is None:
        return None
    if isinstance(target, type) and isinstance(obj, target):
        return obj
    if isinstance(obj, UObject) and obj.is_a(target):
        return obj
    return None


def cast_checked(obj: UObject | None, target: Union[type, UClass]) -> UObject:
    """Like ``cast`` but raise TypeError instead of returning None."""
    if obj is None:
        raise TypeError("cannot cast None")
    result = cast(obj, target)
    if result is None:
        target_name = target.name if isinstance(target, UClass) else target.__name__
        raise TypeError(f"{type(obj).__name__} is not a {target_name}")
    return result