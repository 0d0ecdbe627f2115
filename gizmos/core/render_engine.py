"""
RenderEngine - per-frame render driver.

Drains the command buffer into a wireframe sink once per tick. Repeated
calls with the same tick value are ignored, so several schedulers may
trigger the pass within one frame without double clearing.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Callable, Protocol

from gizmos import log

if TYPE_CHECKING:
    from gizmos.core.command_buffer import CommandBuffer
    from gizmos.render.sink import WireframeSink


class LogDisplay(Protocol):
    """Surface that shows the screen log text (label, window title, ...)."""

    def set_text(self, text: str) -> None:
        ...


class RenderEngine:
    """
    Renders buffered commands into a sink.

    Tracks the last rendered tick, the screen log lines produced during the
    current pass and the duration of the last pass.
    """

    def __init__(
        self,
        sink: "WireframeSink",
        log_display: LogDisplay | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.sink = sink
        self.log_display = log_display
        self._clock = clock
        self._log_buffer: list[str] = []
        self._log_text = ""
        self._last_tick: float | None = None
        self._last_frame_time = 0.0
        self._frames_rendered = 0

    @property
    def last_frame_time(self) -> float:
        """Duration of the last render pass, milliseconds."""
        return self._last_frame_time

    @property
    def frames_rendered(self) -> int:
        return self._frames_rendered

    @property
    def log_text(self) -> str:
        """Screen log text pushed at the end of the last pass."""
        return self._log_text

    def render(self, buffer: "CommandBuffer", master_enabled: bool, tick: float | None = None) -> bool:
        """
        Draw every enabled command of `buffer`.

        Returns False when this tick was already rendered.
        """
        start = time.perf_counter()
        current_tick = self._clock() if tick is None else tick

        if current_tick == self._last_tick:
            return False
        self._last_tick = current_tick

        sink = self.sink
        sink.clear()
        self._log_buffer = []

        for command in buffer.get_commands_to_render():
            primitive = command.primitive
            config = primitive.config

            # config.enabled already carries the group layer from resolution
            if not (master_enabled and config.enabled):
                continue

            sink.color = config.color
            sink.transparency = config.transparency
            sink.always_on_top = config.always_on_top

            try:
                primitive.render(sink)
            except Exception as e:
                log.error(f"[RenderEngine] Failed to render {type(primitive).__name__}: {e}")

        self._push_log_text("\n".join(self._log_buffer))
        self._frames_rendered += 1
        self._last_frame_time = (time.perf_counter() - start) * 1000.0
        return True

    def add_log(self, text: str) -> None:
        """Append one screen log line for the current pass."""
        self._log_buffer.append(text)

    def clear_log(self) -> None:
        self._log_buffer = []
        self._push_log_text("")

    def _push_log_text(self, text: str) -> None:
        self._log_text = text
        if self.log_display is not None:
            self.log_display.set_text(text)
