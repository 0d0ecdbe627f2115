"""
Path primitives and the trail store.

TrailStore keeps one bounded point sequence per trail name. It lives next to
the command buffer, not inside it: trails survive across frames no matter
how the commands that visualize them were filed.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import ClassVar, Sequence

import numpy as np

from gizmos.core.config import RenderConfig
from gizmos.geombase import as_vec3
from gizmos.primitives.shapes import Cube
from gizmos.render.sink import WireframeSink

DEFAULT_TRAIL_POINTS = 300


def _draw_dots(config: RenderConfig, sink: WireframeSink, points, dots_size: float) -> None:
    size = np.full(3, float(dots_size))
    for point in points:
        Cube(config, point, size).render(sink)


@dataclass(frozen=True, eq=False)
class Path:
    default_name: ClassVar[str] = "Path"

    config: RenderConfig
    points: Sequence[np.ndarray]
    closed: bool = False
    dots_size: float = 0.0

    def render(self, sink: WireframeSink) -> None:
        sink.add_path(self.points, self.closed)
        if self.dots_size > 0:
            _draw_dots(self.config, sink, self.points, self.dots_size)


class TrailStore:
    """
    Именованные «хвосты», то есть ограниченные последовательности точек.

    При переполнении отбрасываются самые старые точки.
    """

    def __init__(self) -> None:
        self._trails: dict[str, deque] = {}

    def add_point(self, name: str, point, max_points: int = DEFAULT_TRAIL_POINTS) -> None:
        """Добавляет точку; при смене max_points хвост перестраивается."""
        if max_points <= 0:
            raise ValueError(f"max_points must be positive, got {max_points}")
        trail = self._trails.get(name)
        if trail is None:
            trail = deque(maxlen=max_points)
            self._trails[name] = trail
        elif trail.maxlen != max_points:
            # deque keeps the newest items when built with a smaller maxlen
            trail = deque(trail, maxlen=max_points)
            self._trails[name] = trail
        trail.append(as_vec3(point))

    def get_points(self, name: str) -> list[np.ndarray]:
        trail = self._trails.get(name)
        return list(trail) if trail is not None else []

    def clear(self, name: str) -> None:
        """Очищает точки, сам хвост остаётся."""
        trail = self._trails.get(name)
        if trail is not None:
            trail.clear()

    def delete(self, name: str) -> None:
        self._trails.pop(name, None)

    def names(self) -> list[str]:
        return list(self._trails)

    def __contains__(self, name: str) -> bool:
        return name in self._trails


@dataclass(frozen=True, eq=False)
class TrailingPath:
    """Draws the current contents of one trail."""
    default_name: ClassVar[str] = "TrailingPath"

    config: RenderConfig
    trail_name: str
    store: TrailStore
    dots_size: float = 0.0

    def render(self, sink: WireframeSink) -> None:
        points = self.store.get_points(self.trail_name)
        if len(points) > 1:
            sink.add_path(points, False)
        if self.dots_size > 0:
            _draw_dots(self.config, sink, points, self.dots_size)
