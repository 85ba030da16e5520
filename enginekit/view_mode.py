"""Global view mode selecting the rasterizer state used for drawing."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum, IntEnum

from .singleton import Singleton


class ViewModeIndex(IntEnum):
    DEFAULT = 0
    """No global rasterizer state is applied."""
    SOLID = 1
    WIREFRAME = 2


class FillMode(Enum):
    WIREFRAME = "wireframe"
    SOLID = "solid"


class CullMode(Enum):
    NONE = "none"
    FRONT = "front"
    BACK = "back"


@dataclass(frozen=True)
class RasterizerDesc:
    """Description of a rasterizer state."""

    fill_mode: FillMode = FillMode.SOLID
    cull_mode: CullMode = CullMode.BACK
    front_counter_clockwise: bool = False
    depth_clip_enable: bool = False
    scissor_enable: bool = False
    multisample_enable: bool = False
    antialiased_line_enable: bool = False


class ViewMode(Singleton):
    """Holds the current view mode and the rasterizer state for each mode."""

    def __init__(self) -> None:
        self.view_mode = ViewModeIndex.SOLID
        self.rasterizer_states: dict[ViewModeIndex, RasterizerDesc] = {}

    @classmethod
    def get(cls) -> "ViewMode":
        """Return the shared instance."""
        return super().get()

    def initialize(self) -> None:
        """Create the rasterizer states and switch to the default mode."""
        solid = RasterizerDesc(
            fill_mode=FillMode.SOLID,
            cull_mode=CullMode.BACK,
            front_counter_clockwise=False,
            depth_clip_enable=True,
            multisample_enable=True,
        )
        self.rasterizer_states[ViewModeIndex.SOLID] = solid
        self.rasterizer_states[ViewModeIndex.WIREFRAME] = replace(
            solid, fill_mode=FillMode.WIREFRAME
        )
        self.view_mode = ViewModeIndex.DEFAULT

    def set_view_mode(self, view_mode: ViewModeIndex) -> None:
        self.view_mode = ViewModeIndex(view_mode)

    def apply_view_mode(self) -> RasterizerDesc | None:
        """Return the rasterizer state to apply, None for the default mode."""
        return self.rasterizer_states.get(self.view_mode)