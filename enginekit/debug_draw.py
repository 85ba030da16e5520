"""Batches debug lines for drawing."""

from __future__ import annotations

from dataclasses import dataclass

from .singleton import Singleton

Vector3 = tuple[float, float, float]
Color4 = tuple[float, float, float, float]

_BOX_EDGES = (
    (0, 1), (1, 2), (2, 3), (3, 0),
    (4, 5), (5, 6), (6, 7), (7, 4),
    (0, 4), (1, 5), (2, 6), (3, 7),
)


@dataclass(frozen=True)
class LineVertex:
    """One end of a debug line."""

    position: Vector3
    color: Color4


class DebugDrawManager(Singleton):
    """Collects line vertices and indices until the batch is cleared."""

    def __init__(self) -> None:
        self.vertices: list[LineVertex] = []
        self.indices: list[int] = []

    def draw_line(self, start: Vector3, end: Vector3, color: Color4,
                  life_time: float = 1.0) -> None:
        """Add a line from ``start`` to ``end``."""
        index = len(self.vertices)
        self.vertices.append(LineVertex(tuple(start), tuple(color)))
        self.vertices.append(LineVertex(tuple(end), tuple(color)))
        self.indices.extend((index, index + 1))

    def draw_aabb_box(self, box_min: Vector3, box_max: Vector3, color: Color4,
                      life_time: float = 1.0) -> None:
        """Add the twelve edges of an axis-aligned box."""
        (x0, y0, z0), (x1, y1, z1) = box_min, box_max
        corners = (
            (x0, y0, z0), (x1, y0, z0), (x1, y1, z0), (x0, y1, z0),
            (x0, y0, z1), (x1, y0, z1), (x1, y1, z1), (x0, y1, z1),
        )
        for a, b in _BOX_EDGES:
            self.draw_line(corners[a], corners[b], color)

    def clear_debug(self) -> None:
        """Drop every queued line."""
        self.vertices.clear()
        self.indices.clear()