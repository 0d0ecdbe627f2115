"""
GLFWViewer - minimal window that drives gizmos once per frame.

The viewer is the per-frame scheduler: every loop iteration it polls input,
runs the user frame callback, calls Gizmos.update() with the frame index as
tick and draws the collected wireframe with GLLineRenderer. The screen log
is shown in the window title.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Callable, Optional

import glfw
import numpy as np

from gizmos import log
from gizmos.render.opengl import GLLineRenderer
from gizmos.render.sink import LineBatchSink

if TYPE_CHECKING:
    from gizmos.api import Gizmos


def _ensure_glfw():
    if not glfw.init():
        raise RuntimeError("Failed to initialize GLFW")


def look_at(eye, target, up=(0.0, 1.0, 0.0)) -> np.ndarray:
    """Right-handed view matrix (row-major)."""
    eye = np.asarray(eye, dtype=np.float64)
    forward = np.asarray(target, dtype=np.float64) - eye
    forward /= np.linalg.norm(forward)
    right = np.cross(forward, np.asarray(up, dtype=np.float64))
    right /= np.linalg.norm(right)
    true_up = np.cross(right, forward)

    view = np.eye(4)
    view[0, :3] = right
    view[1, :3] = true_up
    view[2, :3] = -forward
    view[:3, 3] = -view[:3, :3] @ eye
    return view


def perspective(fov_y_deg: float, aspect: float, near: float, far: float) -> np.ndarray:
    """OpenGL perspective projection matrix (row-major)."""
    f = 1.0 / math.tan(math.radians(fov_y_deg) / 2.0)
    proj = np.zeros((4, 4))
    proj[0, 0] = f / aspect
    proj[1, 1] = f
    proj[2, 2] = (far + near) / (near - far)
    proj[2, 3] = 2.0 * far * near / (near - far)
    proj[3, 2] = -1.0
    return proj


class _TitleLogDisplay:
    """Shows the screen log's last line in the window title."""

    def __init__(self, viewer: "GLFWViewer"):
        self._viewer = viewer

    def set_text(self, text: str) -> None:
        self._viewer.set_status(text.splitlines()[-1] if text else "")


class GLFWViewer:
    """
    Window + frame loop for a Gizmos context.

    The context must render into a LineBatchSink.
    """

    def __init__(
        self,
        gizmos: "Gizmos",
        width: int = 1280,
        height: int = 720,
        title: str = "gizmos",
        eye=(12.0, 8.0, 24.0),
        target=(12.0, 0.0, 10.0),
    ):
        if not isinstance(gizmos.sink, LineBatchSink):
            raise TypeError("GLFWViewer requires a Gizmos context rendering into a LineBatchSink")

        self.gizmos = gizmos
        self.title = title
        self.eye = eye
        self.target = target
        self.clear_color = (0.12, 0.12, 0.14, 1.0)
        self._status = ""
        self._frame_index = 0

        _ensure_glfw()
        glfw.window_hint(glfw.CONTEXT_VERSION_MAJOR, 3)
        glfw.window_hint(glfw.CONTEXT_VERSION_MINOR, 3)
        glfw.window_hint(glfw.OPENGL_PROFILE, glfw.OPENGL_CORE_PROFILE)
        glfw.window_hint(glfw.OPENGL_FORWARD_COMPAT, glfw.TRUE)
        glfw.window_hint(glfw.RESIZABLE, glfw.TRUE)

        self._window = glfw.create_window(width, height, title, None, None)
        if not self._window:
            glfw.terminate()
            raise RuntimeError("Failed to create GLFW window")
        glfw.make_context_current(self._window)
        glfw.swap_interval(1)
        glfw.set_key_callback(self._window, self._on_key)

        self.renderer = GLLineRenderer()
        gizmos.engine.log_display = _TitleLogDisplay(self)
        log.info(f"[GLFWViewer] Window {width}x{height} created")

    @property
    def frame_index(self) -> int:
        return self._frame_index

    def set_status(self, text: str) -> None:
        if text == self._status or self._window is None:
            return
        self._status = text
        glfw.set_window_title(self._window, f"{self.title} - {text}" if text else self.title)

    def should_close(self) -> bool:
        return self._window is None or glfw.window_should_close(self._window)

    def run(self, on_frame: Optional[Callable[["Gizmos", int], None]] = None, max_frames: int | None = None) -> None:
        """Loop until the window is closed or `max_frames` frames were drawn."""
        try:
            while not self.should_close():
                if max_frames is not None and self._frame_index >= max_frames:
                    break
                self.step(on_frame)
        finally:
            self.close()

    def step(self, on_frame: Optional[Callable[["Gizmos", int], None]] = None) -> None:
        """One frame: input, user callback, gizmos update, draw, swap."""
        from OpenGL import GL as gl

        glfw.poll_events()
        if on_frame is not None:
            on_frame(self.gizmos, self._frame_index)

        self.gizmos.update(tick=self._frame_index)

        width, height = glfw.get_framebuffer_size(self._window)
        gl.glViewport(0, 0, width, height)
        gl.glClearColor(*self.clear_color)
        gl.glClear(gl.GL_COLOR_BUFFER_BIT | gl.GL_DEPTH_BUFFER_BIT)

        aspect = width / height if height > 0 else 1.0
        view = look_at(self.eye, self.target)
        proj = perspective(60.0, aspect, 0.1, 500.0)
        self.renderer.draw(self.gizmos.sink, view, proj)

        glfw.swap_buffers(self._window)
        self._frame_index += 1

    def close(self) -> None:
        if self._window is None:
            return
        glfw.make_context_current(self._window)
        self.renderer.release()
        glfw.destroy_window(self._window)
        self._window = None
        glfw.terminate()
        log.info(f"[GLFWViewer] Closed after {self._frame_index} frames")

    # ============================================================
    # Input
    # ============================================================

    def _on_key(self, _win, key, scancode, action, mods):
        if action != glfw.PRESS:
            return
        if key == glfw.KEY_ESCAPE:
            glfw.set_window_should_close(self._window, True)
            return
        if key == hotkey_code(self.gizmos.get_ui_hotkey()):
            self.gizmos.toggle_ui()
            if self.gizmos.is_ui_visible():
                self._log_stats()

    def _log_stats(self) -> None:
        gizmos = self.gizmos
        log.info(
            f"[GLFWViewer] commands={gizmos.get_command_count()} "
            f"frame_time={gizmos.get_last_frame_time():.3f}ms"
        )
        for name in gizmos.list_groups():
            count = gizmos.buffer.get_group_command_count(name)
            state = "on" if gizmos.is_group_enabled(name) else "off"
            log.info(f"[GLFWViewer]   group '{name}' [{state}] commands={count}")


def hotkey_code(name: str) -> int:
    """GLFW key code for a key name such as 'F2' or 'G'; -1 if unknown."""
    return getattr(glfw, f"KEY_{name.upper()}", -1)
