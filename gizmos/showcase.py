"""Showcase scene: one of every primitive plus a color strip."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from gizmos.geombase import Frame3

if TYPE_CHECKING:
    from gizmos.api import Gizmos

SHOWCASE_COLORS = [
    (1.0, 0.0, 0.0),
    (1.0, 0.5, 0.0),
    (1.0, 1.0, 0.0),
    (0.0, 1.0, 0.0),
    (0.0, 1.0, 1.0),
    (0.0, 0.0, 1.0),
    (0.5, 0.0, 1.0),
    (1.0, 0.0, 1.0),
    (0.0, 0.0, 0.0),
    (0.5, 0.5, 0.5),
    (1.0, 1.0, 1.0),
]


def draw_showcase(gizmos: "Gizmos", origin=(0.0, 0.0, 10.0), step: float = 2.0) -> None:
    """Draw every primitive in a row along +X starting at `origin`."""
    x = np.array([1.0, 0.0, 0.0])
    y = np.array([0.0, 1.0, 0.0])
    z = np.array([0.0, 0.0, 1.0])
    p = np.asarray(origin, dtype=np.float64)

    def advance():
        nonlocal p
        p = p + x * step

    gizmos.draw_line(p, p + y)
    advance()

    gizmos.draw_ray(p, y)
    advance()

    gizmos.draw_path([
        p + (-0.3, 0.0, -0.3),
        p + (0.4, 0.0, 0.0),
        p + (0.1, 0.0, 0.5),
        p + (0.6, 0.0, 0.9),
    ])
    advance()

    gizmos.draw_point(p)
    advance()

    gizmos.draw_cube(p + y * 0.5, (1.0, 1.0, 1.0))
    advance()

    gizmos.draw_circle(p, 0.5)
    advance()

    gizmos.draw_sphere(p + y * 0.5, 0.5)
    advance()

    gizmos.draw_pyramid(p, 1.0, 1.0)
    advance()

    gizmos.draw_frame(Frame3(p))
    advance()

    gizmos.draw_text(p, "Hello")
    advance()

    gizmos.draw_raycast(p, z)
    advance()

    gizmos.draw_spherecast(p, 0.3, z)
    advance()

    gizmos.draw_blockcast(Frame3(p), (0.6, 0.6, 0.6), z)
    advance()

    gizmos.log("Test completed!")

    p = np.asarray(origin, dtype=np.float64) + z * 2.0
    for color in SHOWCASE_COLORS:
        gizmos.draw_circle(p, 0.15, color=color)
        p = p + x
