"""Rendering sinks and the OpenGL line renderer."""

from .sink import LineBatch, LineBatchSink, TextLabel, WireframeSink
from .opengl import GLLineRenderer

__all__ = [
    "GLLineRenderer",
    "LineBatch",
    "LineBatchSink",
    "TextLabel",
    "WireframeSink",
]
