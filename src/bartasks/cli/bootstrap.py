# src/bartasks/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local data directory exists,
- wires the JSON-file store, the item store and the two list managers into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.models import ListKeys
from ..core.ports import KeyValueStore
from ..core.state import AppState
from ..lists.list_manager import TaskListManager
from ..shell.popover import Popover
from ..storage.item_store import TaskItemStore
from ..storage.kv_store import JsonFileKeyValueStore

logger = logging.getLogger(__name__)

NOW_LIST = "Now"
LATER_LIST = "Later"


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.store_path.parent.mkdir(parents=True, exist_ok=True)


def build_lists(settings, kv: KeyValueStore) -> list[TaskListManager]:
    repo = TaskItemStore(kv)
    return [
        TaskListManager(NOW_LIST, ListKeys.for_list(settings.now_key), repo),
        TaskListManager(LATER_LIST, ListKeys.for_list(settings.later_key), repo),
    ]


def create_initial_state(*, settings=None, kv: KeyValueStore | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings (and the key-value store) injectable makes the app easy to test.
    If settings is None, falls back to get_settings(); if kv is None, the
    JSON-file store at settings.store_path is used.
    """
    if settings is None:
        settings = get_settings()

    if kv is None:
        _ensure_local_dirs(settings)
        kv = JsonFileKeyValueStore(settings.store_path)

    popover = Popover(build_lists(settings, kv))
    if getattr(settings, "start_shown", True):
        popover.show()

    return AppState(settings=settings, popover=popover)
