"""Wireframe shape primitives."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import ClassVar, Optional

import numpy as np

from gizmos.core.config import Color3, RenderConfig
from gizmos.geombase import Frame3, FrameLike, as_frame, as_vec3, generate_circle_points, perpendicular_vector
from gizmos.render.sink import WireframeSink

X_AXIS = np.array([1.0, 0.0, 0.0])
Y_AXIS = np.array([0.0, 1.0, 0.0])
Z_AXIS = np.array([0.0, 0.0, 1.0])

DEFAULT_ARROW_ANGLE = 30.0
DEFAULT_ARROW_LENGTH = 1.0 / 20.0
DEFAULT_SEGMENTS = 16

# Cube corner order: bottom ring (y = min), then top ring (y = max)
_CUBE_CORNERS = np.array([
    [-1, -1, -1],
    [1, -1, -1],
    [1, -1, 1],
    [-1, -1, 1],
    [-1, 1, -1],
    [1, 1, -1],
    [1, 1, 1],
    [-1, 1, 1],
], dtype=np.float64)

_CUBE_EDGES = [
    (0, 1), (1, 2), (2, 3), (3, 0),
    (4, 5), (5, 6), (6, 7), (7, 4),
    (0, 4), (1, 5), (2, 6), (3, 7),
]


def _check_segments(segments: int) -> None:
    if segments < 3:
        raise ValueError(f"segments must be >= 3, got {segments}")


@dataclass(frozen=True, eq=False)
class Line:
    default_name: ClassVar[str] = "Line"

    config: RenderConfig
    start: np.ndarray
    end: np.ndarray

    def render(self, sink: WireframeSink) -> None:
        sink.add_line(self.start, self.end)


@dataclass(frozen=True, eq=False)
class Ray:
    """Line from origin along direction with a two-stroke arrow head."""
    default_name: ClassVar[str] = "Ray"

    config: RenderConfig
    origin: np.ndarray
    direction: np.ndarray
    arrow_angle: float = DEFAULT_ARROW_ANGLE
    arrow_length_ratio: float = DEFAULT_ARROW_LENGTH

    def render(self, sink: WireframeSink) -> None:
        origin = as_vec3(self.origin)
        direction = as_vec3(self.direction)
        end = origin + direction
        sink.add_line(origin, end)

        magnitude = float(np.linalg.norm(direction))
        if magnitude == 0.0:
            return

        arrow_length = magnitude * self.arrow_length_ratio
        spread = arrow_length * math.tan(math.radians(self.arrow_angle))
        unit = direction / magnitude
        perp = perpendicular_vector(unit)

        back = end - unit * arrow_length
        sink.add_line(end, back + perp * spread)
        sink.add_line(end, back - perp * spread)


@dataclass(frozen=True, eq=False)
class Point:
    """Three-axis cross marker."""
    default_name: ClassVar[str] = "Point"

    config: RenderConfig
    position: np.ndarray
    size: float = 0.1

    def render(self, sink: WireframeSink) -> None:
        pos = as_vec3(self.position)
        points = []
        for axis in (X_AXIS, Y_AXIS, Z_AXIS):
            points.append(pos - axis * self.size)
            points.append(pos + axis * self.size)
        sink.add_lines(points)


@dataclass(frozen=True, eq=False)
class Cube:
    default_name: ClassVar[str] = "Cube"

    config: RenderConfig
    frame: FrameLike
    size: np.ndarray

    def render(self, sink: WireframeSink) -> None:
        frame = as_frame(self.frame)
        half = as_vec3(self.size) * 0.5
        corners = [frame.transform_point(c * half) for c in _CUBE_CORNERS]
        points = []
        for a, b in _CUBE_EDGES:
            points.append(corners[a])
            points.append(corners[b])
        sink.add_lines(points)


@dataclass(frozen=True, eq=False)
class Circle:
    default_name: ClassVar[str] = "Circle"

    config: RenderConfig
    position: np.ndarray
    radius: float
    normal: np.ndarray = field(default_factory=lambda: Y_AXIS.copy())
    segments: int = DEFAULT_SEGMENTS

    def __post_init__(self) -> None:
        _check_segments(self.segments)

    def render(self, sink: WireframeSink) -> None:
        points = generate_circle_points(self.position, self.radius, self.normal, self.segments)
        sink.add_path(points, True)


@dataclass(frozen=True, eq=False)
class Sphere:
    """Three orthogonal circles around the frame's axes."""
    default_name: ClassVar[str] = "Sphere"

    config: RenderConfig
    frame: FrameLike
    radius: float
    segments: int = DEFAULT_SEGMENTS

    def __post_init__(self) -> None:
        _check_segments(self.segments)

    def render(self, sink: WireframeSink) -> None:
        frame = as_frame(self.frame)
        for axis in (X_AXIS, Y_AXIS, Z_AXIS):
            normal = frame.transform_vector(axis)
            points = generate_circle_points(frame.position, self.radius, normal, self.segments)
            sink.add_path(points, True)


@dataclass(frozen=True, eq=False)
class Pyramid:
    """Square base in the frame's XZ plane, apex along +Y."""
    default_name: ClassVar[str] = "Pyramid"

    config: RenderConfig
    frame: FrameLike
    base_size: float
    height: float

    def render(self, sink: WireframeSink) -> None:
        frame = as_frame(self.frame)
        h = self.base_size / 2.0
        p = [
            frame.transform_point((h, 0.0, h)),
            frame.transform_point((-h, 0.0, h)),
            frame.transform_point((-h, 0.0, -h)),
            frame.transform_point((h, 0.0, -h)),
            frame.transform_point((0.0, self.height, 0.0)),
        ]
        # Base ring + two apex edges, then the remaining two apex edges
        sink.add_path([p[0], p[1], p[2], p[3], p[0], p[4], p[1]], False)
        sink.add_path([p[2], p[4], p[3]], False)


@dataclass(frozen=True, eq=False)
class FrameAxes:
    """Frame axes: X red, Y green, Z blue, unless a single color is given."""
    default_name: ClassVar[str] = "FrameAxes"

    config: RenderConfig
    frame: Frame3
    size: float = 1.0
    single_color: Optional[Color3] = None

    AXIS_COLORS: ClassVar[tuple[Color3, Color3, Color3]] = (
        (1.0, 0.0, 0.0),
        (0.0, 1.0, 0.0),
        (0.0, 0.0, 1.0),
    )

    def render(self, sink: WireframeSink) -> None:
        frame = as_frame(self.frame)
        pos = frame.position
        original_color = sink.color

        axes = (frame.right_vector, frame.up_vector, -frame.look_vector)
        for axis, axis_color in zip(axes, self.AXIS_COLORS):
            sink.color = self.single_color if self.single_color is not None else axis_color
            sink.add_line(pos, pos + axis * self.size)

        sink.color = original_color
