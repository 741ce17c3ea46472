# src/bartasks/storage/item_store.py

from __future__ import annotations

import json
import logging
from collections.abc import Sequence

from ..core.models import TaskItem
from ..core.ports import KeyValueStore

logger = logging.getLogger(__name__)


class TaskItemStore:
    """
    Saves and loads whole TaskItem sequences as JSON arrays under a key.

    Both directions are best-effort:
    - save() logs and swallows serialization/write failures
    - load() returns [] for a missing key, non-JSON text or a non-list value;
      individually malformed entries are skipped
    """

    def __init__(self, kv: KeyValueStore) -> None:
        self._kv = kv

    def save(self, items: Sequence[TaskItem], key: str) -> None:
        try:
            payload = json.dumps([it.to_record() for it in items], ensure_ascii=False)
            self._kv.set(key, payload)
        except Exception:
            logger.exception("Failed to save %d items under key=%s; keeping in-memory state.", len(items), key)
            return
        logger.debug("Saved %d items under key=%s", len(items), key)

    def load(self, key: str) -> list[TaskItem]:
        try:
            raw = self._kv.get(key)
        except Exception:
            logger.exception("Failed to read key=%s; treating as empty.", key)
            return []
        if not raw:
            return []

        try:
            data = json.loads(raw)
        except Exception:
            logger.warning("Key=%s does not hold JSON; treating as empty.", key)
            return []
        if not isinstance(data, list):
            logger.warning("Key=%s does not hold a list; treating as empty.", key)
            return []

        out: list[TaskItem] = []
        for rec in data:
            try:
                out.append(TaskItem.from_record(rec))
            except Exception:
                logger.warning("Skipping malformed item under key=%s: %r", key, rec)
        return out
