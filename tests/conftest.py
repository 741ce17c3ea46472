# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from bartasks.cli.bootstrap import create_initial_state
from bartasks.core.models import ListKeys
from bartasks.core.state import AppState
from bartasks.lists.list_manager import TaskListManager
from bartasks.storage.item_store import TaskItemStore

from .fakes import InMemoryKeyValueStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and command handlers.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="BarTasks",
        log_level="WARNING",
        start_shown=True,
        data_dir=tmp_path,
        store_path=tmp_path / "defaults.json",
        now_key="nowItems",
        later_key="laterItems",
    )


@pytest.fixture()
def kv() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture()
def repo(kv: InMemoryKeyValueStore) -> TaskItemStore:
    return TaskItemStore(kv)


@pytest.fixture()
def now_list(repo: TaskItemStore) -> TaskListManager:
    manager = TaskListManager("Now", ListKeys.for_list("nowItems"), repo)
    manager.load()
    return manager


@pytest.fixture()
def later_list(repo: TaskItemStore) -> TaskListManager:
    manager = TaskListManager("Later", ListKeys.for_list("laterItems"), repo)
    manager.load()
    return manager


@pytest.fixture()
def state(settings: SimpleNamespace, kv: InMemoryKeyValueStore) -> AppState:
    """AppState wired with the in-memory store; popover already shown."""
    return create_initial_state(settings=settings, kv=kv)
