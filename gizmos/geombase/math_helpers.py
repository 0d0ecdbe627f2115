"""Math and formatting helpers shared by gizmo primitives."""

from __future__ import annotations

import numbers

import numpy as np

from gizmos.geombase.frame import Frame3, as_vec3


def perpendicular_vector(v) -> np.ndarray:
    """Return a unit vector perpendicular to `v`."""
    v = as_vec3(v)
    perp = np.array([-v[1], v[0], 0.0])
    if float(np.linalg.norm(perp)) == 0.0:
        perp = np.array([0.0, -v[2], v[1]])
    norm = float(np.linalg.norm(perp))
    if norm == 0.0:
        # zero input vector
        return np.array([1.0, 0.0, 0.0])
    return perp / norm


def generate_circle_points(center, radius: float, normal, segments: int) -> np.ndarray:
    """
    Points of a circle lying in the plane orthogonal to `normal`.

    Returns (segments, 3) array. The first point is one step past angle 0 so
    the closing edge lands on the start.
    """
    if segments < 3:
        raise ValueError(f"segments must be >= 3, got {segments}")
    frame = Frame3.look_along(center, normal)
    angles = (2.0 * np.pi / segments) * np.arange(1, segments + 1)
    local = np.stack(
        [np.cos(angles) * radius, np.sin(angles) * radius, np.zeros(segments)],
        axis=1,
    )
    return frame.position + local @ frame.rotation.T


def format_value(value, precision: int = 3) -> str:
    """Format a value for screen / world text display."""
    fmt = f"{{:.{precision}f}}"
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, numbers.Real):
        return fmt.format(float(value))
    if isinstance(value, Frame3):
        p = value.position
        rx, ry, rz = value.euler_xyz_degrees()
        pos = ", ".join(fmt.format(c) for c in p)
        rot = ", ".join(fmt.format(c) for c in (rx, ry, rz))
        return f"pos=({pos}) rot=({rot})"
    if isinstance(value, (np.ndarray, tuple, list)) and len(value) == 3:
        try:
            vec = as_vec3(value)
        except (TypeError, ValueError):
            return str(value)
        return "(" + ", ".join(fmt.format(c) for c in vec) + ")"
    return str(value)
