# src/bartasks/core/transitions.py

"""
Pure state transitions of a single task list.

Every function takes a ListState and returns a new one; nothing here touches
storage or the console. Validation failures (blank text, unknown id) return
the input state unchanged.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

from .models import TaskItem


@dataclass(frozen=True, slots=True)
class ListState:
    active: tuple[TaskItem, ...] = ()
    completed: tuple[TaskItem, ...] = ()

    @classmethod
    def of(cls, active: Iterable[TaskItem] = (), completed: Iterable[TaskItem] = ()) -> ListState:
        return cls(active=tuple(active), completed=tuple(completed))

    def find_active(self, item_id: str) -> TaskItem | None:
        return next((it for it in self.active if it.id == item_id), None)

    def find_completed(self, item_id: str) -> TaskItem | None:
        return next((it for it in self.completed if it.id == item_id), None)


def is_blank(text: str | None) -> bool:
    return text is None or text.strip() == ""


def add_item(
    state: ListState,
    text: str | None,
    image_data: bytes | None = None,
    *,
    now: datetime | None = None,
) -> tuple[ListState, TaskItem | None]:
    """
    Append a new item to the active tail.

    Returns (new_state, item); item is None when text is blank.
    """
    if text is None or is_blank(text):
        return state, None
    item = TaskItem.create(text, image_data, now=now)
    return ListState(active=state.active + (item,), completed=state.completed), item


def complete_item(
    state: ListState,
    item_id: str,
    *,
    now: datetime | None = None,
) -> tuple[ListState, TaskItem | None]:
    """
    Move an active item to the completed tail with completed_at stamped.

    An id that is not active (already moved, or never existed) is a no-op.
    """
    item = state.find_active(item_id)
    if item is None:
        return state, None
    done = item.completed(now)
    active = tuple(it for it in state.active if it.id != item_id)
    return ListState(active=active, completed=state.completed + (done,)), done


def accept_drop(state: ListState, dropped: Iterable[TaskItem]) -> ListState:
    """
    Merge a dropped set into the active tail.

    Existing occurrences of the dropped ids are removed first, so reordering
    inside one list never duplicates an item. Dropped items always land active.
    """
    incoming: list[TaskItem] = []
    seen: set[str] = set()
    for it in dropped:
        if it.id in seen:
            continue
        seen.add(it.id)
        incoming.append(it.reactivated())

    if not incoming:
        return state

    active = tuple(it for it in state.active if it.id not in seen)
    completed = tuple(it for it in state.completed if it.id not in seen)
    return ListState(active=active + tuple(incoming), completed=completed)


def restore_item(state: ListState, item_id: str) -> tuple[ListState, TaskItem | None]:
    """Move an archived item back to the active tail with completed_at cleared."""
    item = state.find_completed(item_id)
    if item is None:
        return state, None
    back = item.reactivated()
    completed = tuple(it for it in state.completed if it.id != item_id)
    return ListState(active=state.active + (back,), completed=completed), back


def remove_items(state: ListState, item_ids: Iterable[str]) -> ListState:
    """Drop the given ids from the active sequence (source side of a move)."""
    ids = set(item_ids)
    active = tuple(it for it in state.active if it.id not in ids)
    if len(active) == len(state.active):
        return state
    return ListState(active=active, completed=state.completed)


def clear_completed(state: ListState) -> ListState:
    if not state.completed:
        return state
    return ListState(active=state.active, completed=())
