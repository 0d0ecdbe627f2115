"""
Primitive interface.

Primitives form a closed set of frozen dataclasses sharing one operation,
render(sink), and a per-type default display name. Composite primitives
(raycasts, dotted paths) build and render other primitives instead of
inheriting from them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from gizmos.core.config import RenderConfig
    from gizmos.render.sink import WireframeSink


@runtime_checkable
class Primitive(Protocol):
    default_name: ClassVar[str]
    config: "RenderConfig"

    def render(self, sink: "WireframeSink") -> None:
        """Emit geometry into the sink."""
        ...


def display_name(primitive: Primitive) -> str:
    """Explicit config name if set, otherwise the primitive type's default."""
    name = primitive.config.name
    return name if name is not None else primitive.default_name
