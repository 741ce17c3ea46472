# src/bartasks/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the list managers.

The managers depend on Protocols instead of the concrete JSON-file store.
This keeps the process-wide preferences file out of unit tests.
"""

from collections.abc import Sequence
from typing import Protocol

from .models import TaskItem


class KeyValueStore(Protocol):
    """Named string store (preferences-style). Missing keys read as None."""

    def get(self, key: str) -> str | None: ...
    def set(self, key: str, value: str) -> None: ...
    def remove(self, key: str) -> None: ...


class TaskItemRepo(Protocol):
    """
    Best-effort persistence of whole item sequences.

    save() never raises; load() returns [] for missing or corrupt keys.
    """

    def save(self, items: Sequence[TaskItem], key: str) -> None: ...
    def load(self, key: str) -> list[TaskItem]: ...
