"""
Raycast visualizations.

Each cast is drawn entirely in the hit color when a result is given (shape
at origin and at impact, travel ray, hit marker) or in the miss color along
the full direction otherwise. The sink color is restored afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional

import numpy as np

from gizmos.core.config import Color3, RenderConfig
from gizmos.geombase import Frame3, FrameLike, as_frame, as_vec3, generate_circle_points
from gizmos.primitives.shapes import DEFAULT_ARROW_ANGLE, DEFAULT_ARROW_LENGTH, Cube, Ray, Sphere
from gizmos.render.sink import WireframeSink

DEFAULT_HIT_COLOR: Color3 = (0.0, 1.0, 0.0)
DEFAULT_MISS_COLOR: Color3 = (1.0, 0.0, 0.0)

HIT_MARKER_RADIUS = 0.15
HIT_NORMAL_LENGTH = 0.3
HIT_MARKER_SEGMENTS = 16


@dataclass(frozen=True, eq=False)
class RaycastResult:
    """Hit information of a cast."""
    position: np.ndarray
    normal: np.ndarray
    distance: float


def _travel(direction, result: RaycastResult) -> np.ndarray:
    d = as_vec3(direction)
    norm = float(np.linalg.norm(d))
    if norm == 0.0:
        return np.zeros(3)
    return d / norm * result.distance


def _draw_hit_marker(sink: WireframeSink, result: RaycastResult) -> None:
    hit = as_vec3(result.position)
    normal = as_vec3(result.normal)
    sink.add_path(generate_circle_points(hit, HIT_MARKER_RADIUS, normal, HIT_MARKER_SEGMENTS), True)
    sink.add_line(hit, hit + normal * HIT_NORMAL_LENGTH)


@dataclass(frozen=True, eq=False)
class Raycast:
    default_name: ClassVar[str] = "Raycast"

    config: RenderConfig
    origin: np.ndarray
    direction: np.ndarray
    result: Optional[RaycastResult] = None
    hit_color: Color3 = DEFAULT_HIT_COLOR
    miss_color: Color3 = DEFAULT_MISS_COLOR
    arrow_angle: float = DEFAULT_ARROW_ANGLE
    arrow_length_ratio: float = DEFAULT_ARROW_LENGTH

    def render(self, sink: WireframeSink) -> None:
        original_color = sink.color

        if self.result is not None:
            sink.color = self.hit_color
            travel = _travel(self.direction, self.result)
            Ray(self.config, self.origin, travel, self.arrow_angle, self.arrow_length_ratio).render(sink)
            _draw_hit_marker(sink, self.result)
        else:
            sink.color = self.miss_color
            Ray(self.config, self.origin, self.direction, self.arrow_angle, self.arrow_length_ratio).render(sink)

        sink.color = original_color


@dataclass(frozen=True, eq=False)
class Spherecast:
    default_name: ClassVar[str] = "Spherecast"

    config: RenderConfig
    origin: np.ndarray
    radius: float
    direction: np.ndarray
    result: Optional[RaycastResult] = None
    hit_color: Color3 = DEFAULT_HIT_COLOR
    miss_color: Color3 = DEFAULT_MISS_COLOR
    arrow_angle: float = DEFAULT_ARROW_ANGLE
    arrow_length_ratio: float = DEFAULT_ARROW_LENGTH

    def render(self, sink: WireframeSink) -> None:
        original_color = sink.color
        frame = Frame3.look_along(self.origin, self.direction)

        if self.result is not None:
            sink.color = self.hit_color
            travel = _travel(self.direction, self.result)
        else:
            sink.color = self.miss_color
            travel = as_vec3(self.direction)

        Sphere(self.config, frame, self.radius).render(sink)
        Sphere(self.config, frame.translated(travel), self.radius).render(sink)
        Ray(self.config, frame.position, travel, self.arrow_angle, self.arrow_length_ratio).render(sink)
        if self.result is not None:
            _draw_hit_marker(sink, self.result)

        sink.color = original_color


@dataclass(frozen=True, eq=False)
class Blockcast:
    default_name: ClassVar[str] = "Blockcast"

    config: RenderConfig
    frame: FrameLike
    size: np.ndarray
    direction: np.ndarray
    result: Optional[RaycastResult] = None
    hit_color: Color3 = DEFAULT_HIT_COLOR
    miss_color: Color3 = DEFAULT_MISS_COLOR
    arrow_angle: float = DEFAULT_ARROW_ANGLE
    arrow_length_ratio: float = DEFAULT_ARROW_LENGTH

    def render(self, sink: WireframeSink) -> None:
        original_color = sink.color

        if self.result is not None:
            sink.color = self.hit_color
            travel = _travel(self.direction, self.result)
        else:
            sink.color = self.miss_color
            travel = as_vec3(self.direction)

        frame = as_frame(self.frame)
        Cube(self.config, frame, self.size).render(sink)
        Cube(self.config, frame.translated(travel), self.size).render(sink)
        Ray(self.config, frame.position, travel, self.arrow_angle, self.arrow_length_ratio).render(sink)
        if self.result is not None:
            _draw_hit_marker(sink, self.result)

        sink.color = original_color
