"""Text primitives: world-space labels and the on-screen log."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Protocol, Sequence

import numpy as np

from gizmos.core.config import RenderConfig
from gizmos.geombase import format_value
from gizmos.render.sink import WireframeSink


class LogTarget(Protocol):
    def add_log(self, text: str) -> None:
        ...


@dataclass(frozen=True, eq=False)
class WorldText:
    default_name: ClassVar[str] = "WorldText"

    config: RenderConfig
    position: np.ndarray
    text: str
    font_size: Optional[float] = None

    def render(self, sink: WireframeSink) -> None:
        sink.add_text(self.position, self.text, self.font_size)


@dataclass(frozen=True, eq=False)
class ScreenLog:
    """One line of the screen log; written to the render engine, not the sink."""
    default_name: ClassVar[str] = "ScreenLog"

    config: RenderConfig
    values: Sequence[object]
    target: LogTarget
    precision: int = 3

    def format(self) -> str:
        return " ".join(format_value(v, self.precision) for v in self.values)

    def render(self, sink: WireframeSink) -> None:
        self.target.add_log(self.format())
