# src/bartasks/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..lists.list_manager import TaskListManager
    from ..shell.popover import Popover


@dataclass
class AppState:
    # Settings (or a SimpleNamespace in tests) for easy access in command handlers.
    settings: Any

    popover: Popover

    @property
    def lists(self) -> dict[str, TaskListManager]:
        return self.popover.lists

    def get_list(self, name: str) -> TaskListManager | None:
        """Case-insensitive lookup by list name ("now", "Later", ...)."""
        return self.popover.lists.get(name.strip().lower())
