# src/bartasks/storage/kv_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


class JsonFileKeyValueStore:
    """
    Preferences-style key-value store backed by one JSON object on disk.

    - reads go through an in-memory copy loaded once at construction
    - every set()/remove() rewrites the whole file (tmp file + os.replace)
    - a missing or corrupt file reads as an empty store

    Write errors (OSError, ...) propagate; callers decide whether they are fatal.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path).expanduser()
        self._data: dict[str, str] = self._read_file()
        logger.info("JsonFileKeyValueStore ready path=%s keys=%d", self._path, len(self._data))

    @property
    def path(self) -> Path:
        return self._path

    def _read_file(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text("utf-8"))
        except Exception:
            logger.warning("Store file %s is unreadable; starting empty.", self._path, exc_info=True)
            return {}
        if not isinstance(data, dict):
            logger.warning("Store file %s does not hold an object; starting empty.", self._path)
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _flush(self, data: dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(".tmp")
        try:
            tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), "utf-8")
            os.replace(tmp, self._path)
        except Exception:
            with contextlib.suppress(Exception):
                tmp.unlink(missing_ok=True)
            raise
        with contextlib.suppress(Exception):
            os.chmod(self._path, 0o600)

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        # The in-memory copy only changes once the file holds the new value.
        new = {**self._data, key: value}
        self._flush(new)
        self._data = new
        logger.debug("Store set key=%s bytes=%d", key, len(value))

    def remove(self, key: str) -> None:
        if key not in self._data:
            return
        new = {k: v for k, v in self._data.items() if k != key}
        self._flush(new)
        self._data = new
        logger.debug("Store removed key=%s", key)

    def keys(self) -> list[str]:
        return list(self._data)
