"""
Drawable gizmo primitives.

Every primitive carries its resolved RenderConfig and renders itself into a
WireframeSink.
"""

from .base import Primitive, display_name
from .shapes import Circle, Cube, FrameAxes, Line, Point, Pyramid, Ray, Sphere
from .raycasts import (
    DEFAULT_HIT_COLOR,
    DEFAULT_MISS_COLOR,
    Blockcast,
    Raycast,
    RaycastResult,
    Spherecast,
)
from .paths import DEFAULT_TRAIL_POINTS, Path, TrailingPath, TrailStore
from .text import ScreenLog, WorldText

__all__ = [
    "DEFAULT_HIT_COLOR",
    "DEFAULT_MISS_COLOR",
    "DEFAULT_TRAIL_POINTS",
    "Blockcast",
    "Circle",
    "Cube",
    "FrameAxes",
    "Line",
    "Path",
    "Point",
    "Primitive",
    "Pyramid",
    "Ray",
    "Raycast",
    "RaycastResult",
    "ScreenLog",
    "Sphere",
    "Spherecast",
    "TrailStore",
    "TrailingPath",
    "WorldText",
    "display_name",
]
