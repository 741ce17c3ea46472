# tests/test_transitions.py

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from bartasks.core import transitions as tr
from bartasks.core.models import TaskItem

T0 = datetime(2026, 1, 5, 9, 0, tzinfo=UTC)


def _item(name: str, *, item_id: str | None = None, added: datetime = T0) -> TaskItem:
    item = TaskItem.create(name, now=added)
    if item_id is None:
        return item
    return TaskItem(id=item_id, name=name, added_at=added)


def test_add_appends_to_active_tail() -> None:
    s0 = tr.ListState()
    s1, first = tr.add_item(s0, "Buy milk")
    s2, second = tr.add_item(s1, "Call Bob")

    assert first is not None and second is not None
    assert [it.name for it in s2.active] == ["Buy milk", "Call Bob"]
    assert s2.completed == ()
    assert first.completed_at is None
    assert first.id != second.id


@pytest.mark.parametrize("text", ["", "   ", "\t\n", None])
def test_add_blank_text_is_noop(text) -> None:
    s0, _ = tr.add_item(tr.ListState(), "keep")
    s1, item = tr.add_item(s0, text)

    assert item is None
    assert s1 == s0


def test_add_keeps_image_bytes_as_is() -> None:
    raw = b"\x89PNG\r\n\x1a\nnot-really-a-png"
    s1, item = tr.add_item(tr.ListState(), "with picture", raw)

    assert item is not None
    assert s1.active[0].image_data == raw


def test_complete_moves_item_and_stamps_time() -> None:
    s1, item = tr.add_item(tr.ListState(), "Buy milk", now=T0)
    assert item is not None

    s2, done = tr.complete_item(s1, item.id, now=T0 + timedelta(minutes=5))

    assert done is not None
    assert s2.active == ()
    assert [it.id for it in s2.completed] == [item.id]
    assert s2.completed[0].completed_at == T0 + timedelta(minutes=5)
    assert s2.completed[0].completed_at >= s2.completed[0].added_at


def test_complete_never_stamps_before_added_at() -> None:
    s1, item = tr.add_item(tr.ListState(), "skewed clock", now=T0)
    assert item is not None

    s2, done = tr.complete_item(s1, item.id, now=T0 - timedelta(hours=1))

    assert done is not None
    assert done.completed_at == T0


def test_complete_unknown_id_is_noop() -> None:
    s1, _ = tr.add_item(tr.ListState(), "a")
    s2, done = tr.complete_item(s1, "does-not-exist")

    assert done is None
    assert s2 == s1


def test_complete_twice_is_noop_second_time() -> None:
    s1, item = tr.add_item(tr.ListState(), "a")
    assert item is not None
    s2, _ = tr.complete_item(s1, item.id)
    s3, again = tr.complete_item(s2, item.id)

    assert again is None
    assert s3 == s2
    assert len(s3.completed) == 1


def test_accept_drop_dedupes_and_moves_to_tail() -> None:
    a, b, c = _item("a", item_id="A"), _item("b", item_id="B"), _item("c", item_id="C")
    s0 = tr.ListState.of([a, b, c])

    s1 = tr.accept_drop(s0, [a])

    assert [it.id for it in s1.active] == ["B", "C", "A"]
    assert sum(1 for it in s1.active if it.id == "A") == 1


def test_accept_drop_appends_whole_set_in_payload_order() -> None:
    x = _item("x", item_id="X")
    y, z = _item("y", item_id="Y"), _item("z", item_id="Z")
    s0 = tr.ListState.of([x])

    s1 = tr.accept_drop(s0, [z, y, z])

    assert [it.id for it in s1.active] == ["X", "Z", "Y"]


def test_accept_drop_reactivates_completed_items() -> None:
    done = _item("old", item_id="O").completed(T0 + timedelta(hours=1))
    s0 = tr.ListState.of([], [done])

    s1 = tr.accept_drop(s0, [done])

    assert [it.id for it in s1.active] == ["O"]
    assert s1.active[0].completed_at is None
    assert s1.completed == ()


def test_accept_drop_empty_is_noop() -> None:
    s0 = tr.ListState.of([_item("a")])
    assert tr.accept_drop(s0, []) is s0


def test_restore_moves_back_to_active_tail() -> None:
    s1, item = tr.add_item(tr.ListState(), "a")
    s2, _ = tr.add_item(s1, "b")
    assert item is not None
    s3, _ = tr.complete_item(s2, item.id)

    s4, back = tr.restore_item(s3, item.id)

    assert back is not None
    assert [it.name for it in s4.active] == ["b", "a"]
    assert s4.active[-1].completed_at is None
    assert s4.completed == ()


def test_restore_unknown_id_is_noop() -> None:
    s0 = tr.ListState.of([_item("a")])
    s1, back = tr.restore_item(s0, "nope")
    assert back is None
    assert s1 is s0


def test_remove_items_only_touches_active() -> None:
    a, b = _item("a", item_id="A"), _item("b", item_id="B")
    done = _item("c", item_id="C").completed(T0)
    s0 = tr.ListState.of([a, b], [done])

    s1 = tr.remove_items(s0, ["A", "C", "missing"])

    assert [it.id for it in s1.active] == ["B"]
    assert [it.id for it in s1.completed] == ["C"]


def test_clear_completed() -> None:
    s0 = tr.ListState.of([_item("a")], [_item("b").completed(T0)])
    s1 = tr.clear_completed(s0)

    assert s1.completed == ()
    assert s1.active == s0.active
    assert tr.clear_completed(s1) is s1


def test_item_never_in_both_sequences() -> None:
    s, a = tr.add_item(tr.ListState(), "a")
    s, b = tr.add_item(s, "b")
    assert a is not None and b is not None
    s, _ = tr.complete_item(s, a.id)
    s = tr.accept_drop(s, [s.completed[0]])
    s, _ = tr.complete_item(s, b.id)
    s, _ = tr.restore_item(s, b.id)

    active_ids = {it.id for it in s.active}
    completed_ids = {it.id for it in s.completed}
    assert active_ids.isdisjoint(completed_ids)
    assert all(it.completed_at is None for it in s.active)
    assert all(it.completed_at is not None for it in s.completed)
