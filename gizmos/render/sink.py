"""
Wireframe sinks.

A sink is the write-only surface primitives emit geometry into. The render
engine sets the active color / transparency / always-on-top flag before
each primitive; primitives only append lines, paths and text.

LineBatchSink keeps everything in memory as numpy segment batches, ready to
be uploaded by GLLineRenderer or inspected by tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, Sequence

import numpy as np

from gizmos.core.config import Color3
from gizmos.geombase import as_vec3


class WireframeSink(Protocol):
    """Append-style rendering surface."""

    color: Color3
    transparency: float
    always_on_top: bool

    def clear(self) -> None:
        ...

    def add_line(self, start, end) -> None:
        ...

    def add_lines(self, points: Sequence) -> None:
        ...

    def add_path(self, points: Sequence, closed: bool) -> None:
        ...

    def add_text(self, position, text: str, font_size: float | None = None) -> None:
        ...


@dataclass
class LineBatch:
    """Run of segments sharing one style."""
    color: Color3
    transparency: float
    always_on_top: bool
    segments: list[np.ndarray] = field(default_factory=list)

    def as_array(self) -> np.ndarray:
        """(N, 2, 3) float32 array of segment endpoints."""
        if not self.segments:
            return np.zeros((0, 2, 3), dtype=np.float32)
        return np.concatenate(self.segments, axis=0).astype(np.float32)

    @property
    def segment_count(self) -> int:
        return sum(len(s) for s in self.segments)


@dataclass(frozen=True)
class TextLabel:
    position: np.ndarray
    text: str
    color: Color3
    transparency: float
    font_size: float | None = None


class LineBatchSink:
    """In-memory sink collecting styled line batches and text labels."""

    def __init__(self) -> None:
        self.color: Color3 = (1.0, 1.0, 1.0)
        self.transparency: float = 0.0
        self.always_on_top: bool = True
        self.batches: list[LineBatch] = []
        self.texts: list[TextLabel] = []
        self.clear_count = 0

    def clear(self) -> None:
        self.batches = []
        self.texts = []
        self.clear_count += 1

    def add_line(self, start, end) -> None:
        segment = np.stack([as_vec3(start), as_vec3(end)])[np.newaxis]
        self._append_segments(segment)

    def add_lines(self, points: Sequence) -> None:
        """Consecutive point pairs are independent segments."""
        pts = self._as_points(points)
        if len(pts) % 2 != 0:
            raise ValueError(f"add_lines expects an even number of points, got {len(pts)}")
        if len(pts) == 0:
            return
        self._append_segments(pts.reshape(-1, 2, 3))

    def add_path(self, points: Sequence, closed: bool) -> None:
        pts = self._as_points(points)
        if len(pts) < 2:
            return
        if closed:
            pts = np.concatenate([pts, pts[:1]], axis=0)
        self._append_segments(np.stack([pts[:-1], pts[1:]], axis=1))

    def add_text(self, position, text: str, font_size: float | None = None) -> None:
        self.texts.append(
            TextLabel(as_vec3(position), str(text), self.color, self.transparency, font_size)
        )

    # ============================================================
    # Queries
    # ============================================================

    def segments(self) -> np.ndarray:
        """All segments of the frame as one (N, 2, 3) array."""
        arrays = [batch.as_array() for batch in self.batches]
        if not arrays:
            return np.zeros((0, 2, 3), dtype=np.float32)
        return np.concatenate(arrays, axis=0)

    @property
    def segment_count(self) -> int:
        return sum(batch.segment_count for batch in self.batches)

    # ============================================================
    # Internal helpers
    # ============================================================

    @staticmethod
    def _as_points(points: Sequence) -> np.ndarray:
        pts = np.asarray(points, dtype=np.float64)
        if pts.size == 0:
            return np.zeros((0, 3), dtype=np.float64)
        return pts.reshape(-1, 3)

    def _append_segments(self, segments: np.ndarray) -> None:
        style = (tuple(self.color), float(self.transparency), bool(self.always_on_top))
        if self.batches:
            last = self.batches[-1]
            if (last.color, last.transparency, last.always_on_top) == style:
                last.segments.append(segments)
                return
        self.batches.append(LineBatch(*style, segments=[segments]))
