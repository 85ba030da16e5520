"""Shared engine enumerations and interfaces."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum


class EndPlayReason(IntEnum):
    """Why an actor stopped playing."""

    DESTROYED = 0
    """Explicitly destroyed."""
    WORLD_TRANSITION = 1
    """The world changed."""
    QUIT = 2
    """The program quit."""


class GizmoInterface(ABC):
    """Marks actors that belong to the editing gizmo."""

    @abstractmethod
    def is_gizmo(self) -> bool:
        """Tell whether this actor is part of a gizmo."""