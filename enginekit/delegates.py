"""Single-cast and multicast delegates with removable handles."""

from __future__ import annotations

import itertools
import threading
from functools import partial
from typing import Any, Callable

_UINT64_MASK = (1 << 64) - 1

_id_lock = threading.Lock()
_id_counter = itertools.count(1)


def _next_handle_id() -> int:
    with _id_lock:
        value = next(_id_counter) & _UINT64_MASK
        if value == 0:
            # Zero marks an invalid handle; skip it on wrap-around.
            value = next(_id_counter) & _UINT64_MASK
        return value


class DelegateHandle:
    """Identifies one function bound to a multicast delegate."""

    __slots__ = ("_handle_id",)

    def __init__(self, handle_id: int = 0) -> None:
        self._handle_id = handle_id & _UINT64_MASK

    @classmethod
    def create(cls) -> "DelegateHandle":
        """Return a handle with a new, never-zero id."""
        return cls(_next_handle_id())

    @property
    def handle_id(self) -> int:
        return self._handle_id

    def is_valid(self) -> bool:
        return self._handle_id != 0

    def invalidate(self) -> None:
        self._handle_id = 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DelegateHandle):
            return NotImplemented
        return self._handle_id == other._handle_id

    def __hash__(self) -> int:
        return hash(self._handle_id)

    def __repr__(self) -> str:
        return f"DelegateHandle({self._handle_id})"


class Delegate:
    """Holds at most one callable, optionally with arguments bound up front."""

    def __init__(self) -> None:
        self._func: Callable[..., Any] | None = None

    def bind_lambda(self, func: Callable[..., Any], *args: Any) -> None:
        """Bind ``func``; any ``args`` are passed before the call's own ones."""
        self._func = partial(func, *args) if args else func

    def unbind(self) -> None:
        self._func = None

    def is_bound(self) -> bool:
        return self._func is not None

    def execute(self, *args: Any) -> Any:
        """Call the bound function and return its result.

        Raises RuntimeError if nothing is bound.
        """
        if self._func is None:
            raise RuntimeError("delegate is not bound")
        return self._func(*args)

    def execute_if_bound(self, *args: Any) -> bool:
        """Call the bound function if there is one; tell whether it was called."""
        if not self.is_bound():
            return False
        self.execute(*args)
        return True


class MulticastDelegate:
    """Calls every added function on broadcast."""

    def __init__(self) -> None:
        self._functions: dict[DelegateHandle, Callable[..., Any]] = {}

    def add_lambda(self, func: Callable[..., Any], *args: Any) -> DelegateHandle:
        """Add ``func`` and return the handle that removes it again."""
        handle = DelegateHandle.create()
        self._functions[handle] = partial(func, *args) if args else func
        return handle

    def remove(self, handle: DelegateHandle) -> bool:
        """Remove the function under ``handle``; False for an invalid handle."""
        if not handle.is_valid():
            return False
        self._functions.pop(handle, None)
        return True

    def broadcast(self, *args: Any) -> None:
        """Call every function; changes made during the call apply next time."""
        for func in list(self._functions.values()):
            func(*args)

    def __len__(self) -> int:
        return len(self._functions)