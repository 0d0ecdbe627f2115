"""
Frame3 - rigid frame (position + orientation) used to place gizmo shapes.

Orientation is stored as a 3x3 rotation matrix whose columns are the local
X (right), Y (up) and Z axes expressed in world space. As in most scene
conventions the frame "looks" along its local -Z axis.
"""

from __future__ import annotations

import math
from typing import Union

import numpy as np


def as_vec3(value) -> np.ndarray:
    """Convert any 3-component sequence to a float64 numpy vector."""
    vec = np.asarray(value, dtype=np.float64)
    if vec.shape != (3,):
        raise ValueError(f"Expected a 3-component vector, got shape {vec.shape}")
    return vec


class Frame3:
    """Position plus rotation matrix."""

    __slots__ = ("position", "rotation")

    def __init__(self, position=(0.0, 0.0, 0.0), rotation: np.ndarray | None = None):
        self.position = as_vec3(position)
        if rotation is None:
            self.rotation = np.eye(3, dtype=np.float64)
        else:
            self.rotation = np.asarray(rotation, dtype=np.float64).reshape(3, 3)

    @classmethod
    def identity(cls) -> "Frame3":
        return cls()

    @classmethod
    def from_position(cls, position) -> "Frame3":
        return cls(position)

    @classmethod
    def look_along(cls, origin, direction, up=(0.0, 1.0, 0.0)) -> "Frame3":
        """
        Build a frame at `origin` whose look vector (-Z) points along `direction`.

        Falls back to the identity orientation for a zero direction, and to an
        alternative up axis when `direction` is parallel to `up`.
        """
        d = as_vec3(direction)
        length = float(np.linalg.norm(d))
        if length == 0.0:
            return cls(origin)
        forward = d / length

        up_vec = as_vec3(up)
        right = np.cross(forward, up_vec)
        if float(np.linalg.norm(right)) < 1e-9:
            up_vec = np.array([0.0, 0.0, 1.0]) if abs(forward[2]) < 0.9 else np.array([1.0, 0.0, 0.0])
            right = np.cross(forward, up_vec)
        right /= np.linalg.norm(right)
        true_up = np.cross(right, forward)

        rotation = np.column_stack([right, true_up, -forward])
        return cls(origin, rotation)

    @property
    def right_vector(self) -> np.ndarray:
        return self.rotation[:, 0].copy()

    @property
    def up_vector(self) -> np.ndarray:
        return self.rotation[:, 1].copy()

    @property
    def look_vector(self) -> np.ndarray:
        return -self.rotation[:, 2]

    def transform_point(self, point) -> np.ndarray:
        """Local point -> world point."""
        return self.position + self.rotation @ as_vec3(point)

    def transform_vector(self, vector) -> np.ndarray:
        """Local direction -> world direction (no translation)."""
        return self.rotation @ as_vec3(vector)

    def translated(self, offset) -> "Frame3":
        """Same orientation, position moved by a world-space offset."""
        return Frame3(self.position + as_vec3(offset), self.rotation)

    def euler_xyz_degrees(self) -> tuple[float, float, float]:
        """XYZ Euler angles (degrees) such that R = Rx * Ry * Rz."""
        r = self.rotation
        sy = max(-1.0, min(1.0, float(r[0, 2])))
        ry = math.asin(sy)
        if abs(sy) < 0.999999:
            rx = math.atan2(-r[1, 2], r[2, 2])
            rz = math.atan2(-r[0, 1], r[0, 0])
        else:
            # Gimbal lock: fold Z rotation into X
            rx = math.atan2(r[2, 1], r[1, 1])
            rz = 0.0
        # +0.0 turns -0.0 into 0.0
        return math.degrees(rx) + 0.0, math.degrees(ry) + 0.0, math.degrees(rz) + 0.0

    def __repr__(self) -> str:
        p = self.position
        return f"Frame3(position=({p[0]:.3f}, {p[1]:.3f}, {p[2]:.3f}))"


FrameLike = Union[Frame3, np.ndarray, tuple, list]


def as_frame(value: FrameLike) -> Frame3:
    """Accept either a Frame3 or a bare position."""
    if isinstance(value, Frame3):
        return value
    return Frame3.from_position(value)
