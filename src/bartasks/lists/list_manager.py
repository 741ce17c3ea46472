# src/bartasks/lists/list_manager.py

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..core import transitions as tr
from ..core.errors import TransferError
from ..core.models import ListKeys, TaskItem
from ..core.ports import TaskItemRepo
from ..core.transfer import TransferPayload, decode_items, export_items

logger = logging.getLogger(__name__)


class TaskListManager:
    """
    Owns one named list (active + completed sequences).

    Every mutation goes through core.transitions and is followed by a full
    write of both sequences. Storage failures are absorbed by the repo; the
    in-memory state stays authoritative for the session.
    """

    def __init__(self, name: str, keys: ListKeys, repo: TaskItemRepo) -> None:
        self.name = name
        self.keys = keys
        self._repo = repo
        self._state = tr.ListState()

        # Input buffer of the add field.
        self.pending_text: str = ""
        self.pending_image: bytes | None = None

    # ---- read access ----

    @property
    def state(self) -> tr.ListState:
        return self._state

    @property
    def active(self) -> tuple[TaskItem, ...]:
        return self._state.active

    @property
    def completed(self) -> tuple[TaskItem, ...]:
        return self._state.completed

    # ---- persistence ----

    def load(self) -> None:
        """Replace in-memory state with what storage holds (view initialization)."""
        active = self._repo.load(self.keys.active_key)
        completed = self._repo.load(self.keys.completed_key)
        self._state = tr.ListState.of(active, completed)
        logger.info("List %s loaded active=%d completed=%d", self.name, len(active), len(completed))

    def persist(self) -> None:
        self._repo.save(self._state.active, self.keys.active_key)
        self._repo.save(self._state.completed, self.keys.completed_key)

    def teardown(self) -> None:
        """View went away: write current state unconditionally."""
        self.persist()
        logger.debug("List %s torn down", self.name)

    # ---- mutations ----

    def add(self, text: str | None = None, image_data: bytes | None = None) -> TaskItem | None:
        """
        Add an item from the given text (or the input buffer).

        Blank text is ignored and leaves the input buffer untouched.
        """
        if text is None:
            text = self.pending_text
        if image_data is None:
            image_data = self.pending_image

        self._state, item = tr.add_item(self._state, text, image_data)
        if item is None:
            return None

        self.persist()
        self.pending_text = ""
        self.pending_image = None
        logger.info("List %s added id=%s image=%s", self.name, item.id, item.image_data is not None)
        return item

    def complete(self, item_id: str) -> TaskItem | None:
        self._state, item = tr.complete_item(self._state, item_id)
        if item is None:
            logger.debug("List %s complete: id=%s is not active", self.name, item_id)
            return None
        self.persist()
        logger.info("List %s completed id=%s", self.name, item_id)
        return item

    def accept_drop(self, dropped: Iterable[TaskItem]) -> None:
        items = list(dropped)
        if not items:
            return
        self._state = tr.accept_drop(self._state, items)
        self.persist()
        logger.info("List %s accepted drop of %d items", self.name, len(items))

    def accept_payload(self, payload: TransferPayload) -> list[TaskItem]:
        """
        Drop target entry point. A foreign or malformed payload is rejected
        (TransferError) and leaves the list unchanged.
        """
        items = decode_items(payload)
        if not items:
            raise TransferError("Drop payload holds no task items")
        self.accept_drop(items)
        return items

    def export(self, item_ids: Iterable[str]) -> TransferPayload:
        """Drag source: payload with the given active items, in list order."""
        wanted = set(item_ids)
        return export_items(it for it in self._state.active if it.id in wanted)

    def remove(self, item_ids: Iterable[str]) -> None:
        new_state = tr.remove_items(self._state, item_ids)
        if new_state is self._state:
            return
        self._state = new_state
        self.persist()

    def restore(self, item_id: str) -> TaskItem | None:
        self._state, item = tr.restore_item(self._state, item_id)
        if item is None:
            return None
        self.persist()
        logger.info("List %s restored id=%s", self.name, item_id)
        return item

    def clear_completed(self) -> int:
        count = len(self._state.completed)
        if not count:
            return 0
        self._state = tr.clear_completed(self._state)
        self.persist()
        logger.info("List %s cleared %d completed items", self.name, count)
        return count


def move_items(source: TaskListManager, target: TaskListManager, item_ids: Iterable[str]) -> list[TaskItem]:
    """
    Cross-list drag-and-drop: export from source, drop on target, then drop
    the ids from the source. Moving within one list only reorders to the tail.
    """
    payload = source.export(item_ids)
    moved = target.accept_payload(payload)
    if target is not source:
        source.remove(it.id for it in moved)
    return moved
