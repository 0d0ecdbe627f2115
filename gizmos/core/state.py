"""
GizmosState - configuration store for a gizmos context.

Holds the global configuration, named group configurations, the master
switch and the UI flags. Resolves per-call configuration with precedence

    built-in default -> global -> group -> call

Group mutations on unknown names are permissive no-ops: debug drawing must
never break the calling code.
"""

from __future__ import annotations

from typing import Any, Mapping

from gizmos import log
from gizmos.core.config import DEFAULT_CONFIG, GizmosGroup, RenderConfig, normalize_overrides

DEFAULT_UI_HOTKEY = "F2"


class GizmosState:
    """Global config, group registry, master switch and UI state."""

    def __init__(self, global_config: RenderConfig = DEFAULT_CONFIG):
        self._global_config = global_config
        self._groups: dict[str, RenderConfig] = {}
        self._ui_visible = False
        self._ui_hotkey = DEFAULT_UI_HOTKEY
        self._master_enabled = False

    # ============================================================
    # Resolution
    # ============================================================

    def resolve_config(self, partial: Mapping[str, Any] | None = None) -> RenderConfig:
        """
        Produce the effective configuration for one draw call.

        An unknown group in `partial` skips the group layer, but the group
        name itself is kept in the result.
        """
        overrides = normalize_overrides(partial) if partial else {}

        # Global config starts as DEFAULT_CONFIG and is only ever merged,
        # so it already covers the default layer.
        resolved = self._global_config

        group_name = overrides.get("group")
        if group_name is not None:
            group_config = self._groups.get(group_name)
            if group_config is not None:
                resolved = group_config

        return resolved.merged(overrides)

    # ============================================================
    # Global config
    # ============================================================

    def set_global_config(self, partial: Mapping[str, Any]) -> None:
        self._global_config = self._global_config.merged(partial)

    def get_global_config(self) -> RenderConfig:
        return self._global_config

    # ============================================================
    # Groups
    # ============================================================

    def create_group(self, name: str, partial: Mapping[str, Any] | None = None) -> None:
        """Create (or replace) a group from a snapshot of the global config."""
        self._groups[name] = self._global_config.merged(partial)
        log.debug(f"[GizmosState] Created group '{name}'")

    def delete_group(self, name: str) -> None:
        """Remove the group from the registry. Buffered commands are untouched."""
        if self._groups.pop(name, None) is None:
            log.debug(f"[GizmosState] delete_group: no group '{name}'")
            return
        log.debug(f"[GizmosState] Deleted group '{name}'")

    def has_group(self, name: str) -> bool:
        return name in self._groups

    def get_group(self, name: str) -> GizmosGroup | None:
        config = self._groups.get(name)
        if config is None:
            return None
        return GizmosGroup(name, config)

    def list_groups(self) -> list[str]:
        return list(self._groups)

    def set_group_config(self, name: str, partial: Mapping[str, Any]) -> None:
        """Overlay `partial` onto an existing group. Unknown group: no-op."""
        existing = self._groups.get(name)
        if existing is None:
            log.debug(f"[GizmosState] set_group_config: no group '{name}', ignored")
            return
        self._groups[name] = existing.merged(partial)

    def get_group_config(self, name: str) -> RenderConfig | None:
        return self._groups.get(name)

    def is_group_enabled(self, name: str) -> bool:
        """Group's own enabled flag; an absent group counts as disabled."""
        config = self._groups.get(name)
        return config.enabled if config is not None else False

    # ============================================================
    # UI / master switch
    # ============================================================

    def is_ui_visible(self) -> bool:
        return self._ui_visible

    def set_ui_visible(self, visible: bool) -> None:
        self._ui_visible = bool(visible)

    def get_ui_hotkey(self) -> str:
        return self._ui_hotkey

    def set_ui_hotkey(self, key: str) -> None:
        self._ui_hotkey = str(key).upper()

    def is_master_enabled(self) -> bool:
        return self._master_enabled

    def set_master_enabled(self, enabled: bool) -> None:
        self._master_enabled = bool(enabled)
