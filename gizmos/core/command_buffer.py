"""
Буфер команд отрисовки.

Команды делятся на два хранилища:
- transient: живут ровно один кадр, очищаются после прохода рендера;
- persistent: сгруппированы по имени группы и живут до явной очистки.

Куда попадает команда, решается один раз в add_command() по флагу
persistent из конфигурации примитива и больше не пересматривается.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from gizmos.primitives.base import Primitive

DEFAULT_PERSISTENT_GROUP = "_default"


@dataclass(frozen=True)
class DrawCommand:
    """Primitive together with the time it was filed."""
    primitive: "Primitive"
    timestamp: float


class CommandBuffer:
    """
    Хранилище команд между вызовами draw_* и проходом рендера.

    Команда находится ровно в одном из хранилищ (transient или одна
    persistent-группа).
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._transient: list[DrawCommand] = []
        self._persistent: dict[str, list[DrawCommand]] = {}

    def add_command(self, primitive: "Primitive") -> DrawCommand:
        """Файлирует примитив по его (уже разрешённой) конфигурации."""
        config = primitive.config
        command = DrawCommand(primitive, self._clock())

        if config.persistent:
            group = config.group if config.group is not None else DEFAULT_PERSISTENT_GROUP
            self._persistent.setdefault(group, []).append(command)
        else:
            self._transient.append(command)
        return command

    def get_commands_to_render(self) -> list[DrawCommand]:
        """Transient-команды, затем все persistent-группы в порядке создания."""
        commands = list(self._transient)
        for group_commands in self._persistent.values():
            commands.extend(group_commands)
        return commands

    def clear_transient(self) -> None:
        self._transient = []

    def clear_group(self, group: str) -> None:
        """
        Удаляет persistent-список группы и transient-команды,
        помеченные этой группой.
        """
        self._persistent.pop(group, None)
        self._transient = [
            cmd for cmd in self._transient if cmd.primitive.config.group != group
        ]

    def clear_all(self) -> None:
        self._transient = []
        self._persistent.clear()

    # ============================================================
    # Queries
    # ============================================================

    def get_command_count(self) -> int:
        count = len(self._transient)
        for group_commands in self._persistent.values():
            count += len(group_commands)
        return count

    def get_transient_count(self) -> int:
        return len(self._transient)

    def get_group_command_count(self, group: str) -> int:
        persistent = len(self._persistent.get(group, ()))
        transient = sum(1 for cmd in self._transient if cmd.primitive.config.group == group)
        return persistent + transient

    def persistent_groups(self) -> list[str]:
        return list(self._persistent)

    def get_group_gizmos(self, group: str) -> dict[str, "Primitive"]:
        """
        Display name -> primitive for one group.

        Persistent commands are inserted first, then transient ones, so on a
        name collision the transient primitive wins.
        """
        from gizmos.primitives.base import display_name

        gizmos: dict[str, "Primitive"] = {}
        for cmd in self._persistent.get(group, ()):
            gizmos[display_name(cmd.primitive)] = cmd.primitive
        for cmd in self._transient:
            if cmd.primitive.config.group == group:
                gizmos[display_name(cmd.primitive)] = cmd.primitive
        return gizmos
