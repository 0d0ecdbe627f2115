"""
Core of the gizmos library: configuration model, state store,
command buffer and per-frame render driver.
"""

from .config import (
    DEFAULT_CONFIG,
    Color3,
    GizmosGroup,
    RenderConfig,
    normalize_color,
    normalize_overrides,
)
from .state import DEFAULT_UI_HOTKEY, GizmosState
from .command_buffer import DEFAULT_PERSISTENT_GROUP, CommandBuffer, DrawCommand
from .render_engine import LogDisplay, RenderEngine

__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_PERSISTENT_GROUP",
    "DEFAULT_UI_HOTKEY",
    "Color3",
    "CommandBuffer",
    "DrawCommand",
    "GizmosGroup",
    "GizmosState",
    "LogDisplay",
    "RenderConfig",
    "RenderEngine",
    "normalize_color",
    "normalize_overrides",
]
