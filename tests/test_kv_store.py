# tests/test_kv_store.py

from __future__ import annotations

import json
from pathlib import Path

import pytest

from bartasks.storage.kv_store import JsonFileKeyValueStore


def test_set_get_remove_persist_across_instances(tmp_path: Path) -> None:
    path = tmp_path / "prefs" / "defaults.json"
    store = JsonFileKeyValueStore(path)

    assert store.get("nowItems") is None
    store.set("nowItems", "[]")
    store.set("laterItems", '[{"id": "1"}]')

    reopened = JsonFileKeyValueStore(path)
    assert reopened.get("nowItems") == "[]"
    assert reopened.get("laterItems") == '[{"id": "1"}]'

    reopened.remove("nowItems")
    reopened.remove("never-set")
    assert JsonFileKeyValueStore(path).keys() == ["laterItems"]


def test_file_is_a_single_json_object(tmp_path: Path) -> None:
    path = tmp_path / "defaults.json"
    JsonFileKeyValueStore(path).set("k", "v")

    assert json.loads(path.read_text("utf-8")) == {"k": "v"}
    assert not path.with_suffix(".tmp").exists()


def test_corrupt_file_reads_as_empty(tmp_path: Path) -> None:
    path = tmp_path / "defaults.json"
    path.write_text("{ not json", "utf-8")

    store = JsonFileKeyValueStore(path)

    assert store.keys() == []
    store.set("k", "v")
    assert JsonFileKeyValueStore(path).get("k") == "v"


def test_non_object_and_non_string_values_are_ignored(tmp_path: Path) -> None:
    path = tmp_path / "defaults.json"
    path.write_text(json.dumps([1, 2, 3]), "utf-8")
    assert JsonFileKeyValueStore(path).keys() == []

    path.write_text(json.dumps({"a": "x", "b": 3}), "utf-8")
    assert JsonFileKeyValueStore(path).keys() == ["a"]


def test_failed_write_leaves_previous_value(tmp_path: Path) -> None:
    path = tmp_path / "defaults.json"
    store = JsonFileKeyValueStore(path)
    store.set("nowItems", "[]")

    # Turn the target into a directory so os.replace fails.
    path.unlink()
    path.mkdir()

    with pytest.raises(OSError):
        store.set("nowItems", '[{"id": "1"}]')
    with pytest.raises(OSError):
        store.remove("nowItems")

    assert store.get("nowItems") == "[]"
    assert not path.with_suffix(".tmp").exists()


def test_unwritable_parent_never_reaches_memory(tmp_path: Path) -> None:
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("x", "utf-8")
    store = JsonFileKeyValueStore(blocker / "defaults.json")

    with pytest.raises(OSError):
        store.set("nowItems", "[]")

    assert store.get("nowItems") is None
    assert store.keys() == []
