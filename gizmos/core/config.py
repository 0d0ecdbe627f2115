"""
Configuration model for gizmos.

A RenderConfig is a fully populated, immutable set of visual options.
Layers (global, group, per-call) are expressed as partial mappings that hold
only the keys a layer sets; merging overlays those keys onto a full config
and returns a new value.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple

Color3 = Tuple[float, float, float]


@dataclass(frozen=True)
class RenderConfig:
    """Resolved visual configuration attached to every draw command."""
    enabled: bool = True
    color: Color3 = (1.0, 1.0, 1.0)
    transparency: float = 0.0
    group: Optional[str] = None
    name: Optional[str] = None
    always_on_top: bool = True
    persistent: bool = False

    def merged(self, partial: Mapping[str, Any] | None) -> "RenderConfig":
        """Overlay the keys present in `partial`; unset keys fall through."""
        if not partial:
            return self
        return dataclasses.replace(self, **normalize_overrides(partial))

    def as_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self)


DEFAULT_CONFIG = RenderConfig()

CONFIG_FIELDS = frozenset(f.name for f in dataclasses.fields(RenderConfig))


@dataclass(frozen=True)
class GizmosGroup:
    """Named group together with its stored configuration."""
    name: str
    config: RenderConfig


def normalize_color(color) -> Color3:
    """Validate an RGB triple with components in [0, 1]."""
    try:
        components = tuple(float(c) for c in color)
    except TypeError as e:
        raise ValueError(f"color must be a sequence of 3 floats, got {color!r}") from e
    if len(components) != 3:
        raise ValueError(f"color must have 3 components, got {len(components)}")
    for c in components:
        if not 0.0 <= c <= 1.0:
            raise ValueError(f"color components must be in [0, 1], got {color!r}")
    return components  # type: ignore[return-value]


def normalize_overrides(partial: Mapping[str, Any]) -> dict[str, Any]:
    """
    Validate a partial configuration.

    Raises TypeError for unknown keys and ValueError for malformed values
    (flags must be real bools: the string "false" is rejected, not coerced).
    Returns a new dict with normalized values.
    """
    unknown = set(partial) - CONFIG_FIELDS
    if unknown:
        raise TypeError(f"Unknown gizmo config option(s): {', '.join(sorted(unknown))}")

    result = dict(partial)
    if "color" in result:
        result["color"] = normalize_color(result["color"])
    if "transparency" in result:
        transparency = float(result["transparency"])
        if not 0.0 <= transparency <= 1.0:
            raise ValueError(f"transparency must be in [0, 1], got {transparency}")
        result["transparency"] = transparency
    for key in ("enabled", "always_on_top", "persistent"):
        if key in result and not isinstance(result[key], bool):
            raise ValueError(f"{key} must be a bool, got {result[key]!r}")
    for key in ("group", "name"):
        if key in result and result[key] is not None:
            result[key] = str(result[key])
    return result
