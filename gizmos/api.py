"""
Gizmos - public debug-drawing API.

A Gizmos object bundles one state store, command buffer, render engine and
trail store. Draw calls resolve their configuration from keyword options
and file exactly one command; update() renders the frame and drops the
transient commands.

Usage:
    gizmos = Gizmos()
    gizmos.enable()
    gizmos.create_group("physics", color=(0, 1, 0))

    # every frame
    gizmos.draw_line((0, 0, 0), (0, 1, 0), group="physics")
    gizmos.draw_sphere((1, 0, 0), 0.5, persistent=True, name="target")
    gizmos.update()
"""

from __future__ import annotations

import time
from typing import Any, Callable, Optional, Sequence

import numpy as np

from gizmos.core.command_buffer import CommandBuffer
from gizmos.core.config import Color3, GizmosGroup, RenderConfig, normalize_color
from gizmos.core.render_engine import LogDisplay, RenderEngine
from gizmos.core.state import GizmosState
from gizmos.geombase import Frame3, FrameLike, as_frame, as_vec3
from gizmos.primitives import (
    DEFAULT_HIT_COLOR,
    DEFAULT_MISS_COLOR,
    DEFAULT_TRAIL_POINTS,
    Blockcast,
    Circle,
    Cube,
    FrameAxes,
    Line,
    Path,
    Point,
    Primitive,
    Pyramid,
    Ray,
    Raycast,
    RaycastResult,
    ScreenLog,
    Sphere,
    Spherecast,
    TrailingPath,
    TrailStore,
    WorldText,
)
from gizmos.primitives.shapes import DEFAULT_ARROW_ANGLE, DEFAULT_ARROW_LENGTH, DEFAULT_SEGMENTS, Y_AXIS
from gizmos.render.sink import LineBatchSink, WireframeSink


class Gizmos:
    """
    Debug drawing context.

    Every collaborator is optional. `sink` and `log_display` configure the
    default RenderEngine, so they cannot be combined with `engine`.
    """

    def __init__(
        self,
        sink: WireframeSink | None = None,
        state: GizmosState | None = None,
        buffer: CommandBuffer | None = None,
        engine: RenderEngine | None = None,
        trails: TrailStore | None = None,
        log_display: LogDisplay | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.state = state if state is not None else GizmosState()
        self.buffer = buffer if buffer is not None else CommandBuffer(clock)
        if engine is None:
            engine = RenderEngine(sink if sink is not None else LineBatchSink(), log_display, clock)
        elif sink is not None or log_display is not None:
            raise TypeError("sink and log_display configure the default engine; pass them to RenderEngine instead")
        self.engine = engine
        self.trails = trails if trails is not None else TrailStore()

    @property
    def sink(self) -> WireframeSink:
        return self.engine.sink

    def _file(self, primitive: Primitive) -> None:
        self.buffer.add_command(primitive)

    # ============================================================
    # Configuration
    # ============================================================

    def set_global_config(self, **config: Any) -> None:
        self.state.set_global_config(config)

    def get_global_config(self) -> RenderConfig:
        return self.state.get_global_config()

    # ============================================================
    # Groups
    # ============================================================

    def create_group(self, name: str, **config: Any) -> None:
        self.state.create_group(name, config)

    def delete_group(self, name: str) -> None:
        """Remove the group and every command buffered under it."""
        self.state.delete_group(name)
        self.buffer.clear_group(name)

    def get_group(self, name: str) -> Optional[GizmosGroup]:
        return self.state.get_group(name)

    def list_groups(self) -> list[str]:
        return self.state.list_groups()

    def set_group_config(self, name: str, **config: Any) -> None:
        self.state.set_group_config(name, config)

    def get_group_config(self, name: str) -> Optional[RenderConfig]:
        return self.state.get_group_config(name)

    def enable_group(self, name: str) -> None:
        self.state.set_group_config(name, {"enabled": True})

    def disable_group(self, name: str) -> None:
        self.state.set_group_config(name, {"enabled": False})

    def toggle_group(self, name: str) -> None:
        enabled = self.state.is_group_enabled(name)
        self.state.set_group_config(name, {"enabled": not enabled})

    def is_group_enabled(self, name: str) -> bool:
        return self.state.is_group_enabled(name)

    def clear_group(self, name: str) -> None:
        self.buffer.clear_group(name)

    def clear_all(self) -> None:
        """Drop every buffered command and the screen log."""
        self.buffer.clear_all()
        self.engine.clear_log()

    def get_group_gizmos(self, name: str) -> dict[str, Primitive]:
        return self.buffer.get_group_gizmos(name)

    # ============================================================
    # Master switch / UI
    # ============================================================

    def enable(self) -> None:
        self.state.set_master_enabled(True)

    def disable(self) -> None:
        self.state.set_master_enabled(False)

    def set_master_enabled(self, enabled: bool) -> None:
        self.state.set_master_enabled(enabled)

    def is_master_enabled(self) -> bool:
        return self.state.is_master_enabled()

    def show_ui(self) -> None:
        self.state.set_ui_visible(True)

    def hide_ui(self) -> None:
        self.state.set_ui_visible(False)

    def toggle_ui(self) -> None:
        self.state.set_ui_visible(not self.state.is_ui_visible())

    def is_ui_visible(self) -> bool:
        return self.state.is_ui_visible()

    def set_ui_hotkey(self, key: str) -> None:
        self.state.set_ui_hotkey(key)

    def get_ui_hotkey(self) -> str:
        return self.state.get_ui_hotkey()

    # ============================================================
    # Drawing - shapes
    # ============================================================

    def draw_line(self, start, end, **config: Any) -> None:
        resolved = self.state.resolve_config(config)
        self._file(Line(resolved, as_vec3(start), as_vec3(end)))

    def draw_ray(
        self,
        origin,
        direction,
        arrow_angle: float = DEFAULT_ARROW_ANGLE,
        arrow_length: float = DEFAULT_ARROW_LENGTH,
        **config: Any,
    ) -> None:
        """Line with an arrow head; arrow_length is a fraction of the ray length."""
        resolved = self.state.resolve_config(config)
        self._file(Ray(resolved, as_vec3(origin), as_vec3(direction), arrow_angle, arrow_length))

    def draw_point(self, position, size: float = 0.1, **config: Any) -> None:
        resolved = self.state.resolve_config(config)
        self._file(Point(resolved, as_vec3(position), size))

    def draw_cube(self, frame: FrameLike, size, **config: Any) -> None:
        resolved = self.state.resolve_config(config)
        self._file(Cube(resolved, as_frame(frame), as_vec3(size)))

    def draw_circle(
        self,
        position,
        radius: float,
        normal=None,
        segments: int = DEFAULT_SEGMENTS,
        **config: Any,
    ) -> None:
        resolved = self.state.resolve_config(config)
        normal = as_vec3(normal) if normal is not None else Y_AXIS.copy()
        self._file(Circle(resolved, as_vec3(position), radius, normal, segments))

    def draw_sphere(self, frame: FrameLike, radius: float, segments: int = DEFAULT_SEGMENTS, **config: Any) -> None:
        resolved = self.state.resolve_config(config)
        self._file(Sphere(resolved, as_frame(frame), radius, segments))

    def draw_pyramid(self, frame: FrameLike, base_size: float, height: float, **config: Any) -> None:
        resolved = self.state.resolve_config(config)
        self._file(Pyramid(resolved, as_frame(frame), base_size, height))

    def draw_frame(
        self,
        frame: Frame3,
        size: float = 1.0,
        axis_color: Color3 | None = None,
        **config: Any,
    ) -> None:
        """Draw frame axes (RGB for XYZ, or one axis_color for all)."""
        resolved = self.state.resolve_config(config)
        single = normalize_color(axis_color) if axis_color is not None else None
        self._file(FrameAxes(resolved, as_frame(frame), size, single))

    # ============================================================
    # Drawing - raycasts
    # ============================================================

    def draw_raycast(
        self,
        origin,
        direction,
        result: RaycastResult | None = None,
        hit_color: Color3 = DEFAULT_HIT_COLOR,
        miss_color: Color3 = DEFAULT_MISS_COLOR,
        arrow_angle: float = DEFAULT_ARROW_ANGLE,
        arrow_length: float = DEFAULT_ARROW_LENGTH,
        **config: Any,
    ) -> None:
        resolved = self.state.resolve_config(config)
        self._file(Raycast(
            resolved,
            as_vec3(origin),
            as_vec3(direction),
            result,
            normalize_color(hit_color),
            normalize_color(miss_color),
            arrow_angle,
            arrow_length,
        ))

    def draw_spherecast(
        self,
        origin,
        radius: float,
        direction,
        result: RaycastResult | None = None,
        hit_color: Color3 = DEFAULT_HIT_COLOR,
        miss_color: Color3 = DEFAULT_MISS_COLOR,
        arrow_angle: float = DEFAULT_ARROW_ANGLE,
        arrow_length: float = DEFAULT_ARROW_LENGTH,
        **config: Any,
    ) -> None:
        resolved = self.state.resolve_config(config)
        self._file(Spherecast(
            resolved,
            as_vec3(origin),
            radius,
            as_vec3(direction),
            result,
            normalize_color(hit_color),
            normalize_color(miss_color),
            arrow_angle,
            arrow_length,
        ))

    def draw_blockcast(
        self,
        frame: FrameLike,
        size,
        direction,
        result: RaycastResult | None = None,
        hit_color: Color3 = DEFAULT_HIT_COLOR,
        miss_color: Color3 = DEFAULT_MISS_COLOR,
        arrow_angle: float = DEFAULT_ARROW_ANGLE,
        arrow_length: float = DEFAULT_ARROW_LENGTH,
        **config: Any,
    ) -> None:
        resolved = self.state.resolve_config(config)
        self._file(Blockcast(
            resolved,
            as_frame(frame),
            as_vec3(size),
            as_vec3(direction),
            result,
            normalize_color(hit_color),
            normalize_color(miss_color),
            arrow_angle,
            arrow_length,
        ))

    # ============================================================
    # Drawing - paths
    # ============================================================

    def draw_path(self, points: Sequence, closed: bool = False, dots_size: float = 0.0, **config: Any) -> None:
        resolved = self.state.resolve_config(config)
        self._file(Path(resolved, [as_vec3(p) for p in points], closed, dots_size))

    def add_to_path(
        self,
        name: str,
        position,
        max_points: int = DEFAULT_TRAIL_POINTS,
        dots_size: float = 0.0,
        **config: Any,
    ) -> None:
        """Append a point to trail `name` and draw the trail."""
        resolved = self.state.resolve_config(config)
        self.trails.add_point(name, position, max_points)
        self._file(TrailingPath(resolved, name, self.trails, dots_size))

    def clear_path(self, name: str) -> None:
        self.trails.clear(name)

    def delete_path(self, name: str) -> None:
        self.trails.delete(name)

    # ============================================================
    # Drawing - text
    # ============================================================

    def draw_text(self, position, text: str, font_size: float | None = None, **config: Any) -> None:
        resolved = self.state.resolve_config(config)
        self._file(WorldText(resolved, as_vec3(position), str(text), font_size))

    def log(self, *values: object, precision: int = 3) -> None:
        """Add one line to the on-screen log for the next frame."""
        resolved = self.state.resolve_config()
        self._file(ScreenLog(resolved, values, self.engine, precision))

    # ============================================================
    # Frame
    # ============================================================

    def update(self, tick: float | None = None) -> bool:
        """
        Render the frame, then drop transient commands.

        Returns True if a frame was drawn. A repeated call within an already
        rendered tick does nothing, so transient commands filed after the
        pass wait for the next frame.
        """
        rendered = self.engine.render(self.buffer, self.state.is_master_enabled(), tick)
        if rendered:
            self.buffer.clear_transient()
        return rendered

    # ============================================================
    # Stats
    # ============================================================

    def get_command_count(self) -> int:
        return self.buffer.get_command_count()

    def get_last_frame_time(self) -> float:
        return self.engine.last_frame_time


def vec3(x: float, y: float, z: float) -> np.ndarray:
    """Shorthand for a float64 numpy 3-vector."""
    return np.array([x, y, z], dtype=np.float64)
