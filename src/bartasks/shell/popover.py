# src/bartasks/shell/popover.py

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..lists.list_manager import TaskListManager

logger = logging.getLogger(__name__)


class Popover:
    """
    Host of the list views, toggled by the status item.

    show() mounts every list (loads it from storage); close() is the
    teardown signal and persists every list.
    """

    def __init__(self, lists: Iterable[TaskListManager]) -> None:
        self.lists: dict[str, TaskListManager] = {m.name.lower(): m for m in lists}
        self._shown = False

    @property
    def is_shown(self) -> bool:
        return self._shown

    def show(self) -> None:
        if self._shown:
            return
        for manager in self.lists.values():
            manager.load()
        self._shown = True
        logger.debug("Popover shown lists=%s", list(self.lists))

    def close(self) -> None:
        if not self._shown:
            return
        for manager in self.lists.values():
            manager.teardown()
        self._shown = False
        logger.debug("Popover closed")

    def toggle(self) -> bool:
        """Flip visibility; returns the new state."""
        if self._shown:
            self.close()
        else:
            self.show()
        return self._shown
