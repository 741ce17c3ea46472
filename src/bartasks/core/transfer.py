# src/bartasks/core/transfer.py

"""
Drag-and-drop transfer payload.

A payload is a tagged variant: a content type plus serialized bytes. Drop
targets check the tag with accepts() before decoding, so only payloads
exported by export_items() are routed to a task list.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass
from typing import cast

from .errors import TransferError
from .models import TaskItem

TASK_ITEM_CONTENT_TYPE = "com.bartasks.task-item"


@dataclass(frozen=True, slots=True)
class TransferPayload:
    content_type: str
    data: bytes


def export_items(items: Iterable[TaskItem]) -> TransferPayload:
    records = [it.to_record() for it in items]
    data = json.dumps(records, ensure_ascii=False).encode("utf-8")
    return TransferPayload(content_type=TASK_ITEM_CONTENT_TYPE, data=data)


def accepts(payload: object) -> bool:
    return isinstance(payload, TransferPayload) and payload.content_type == TASK_ITEM_CONTENT_TYPE


def decode_items(payload: object) -> list[TaskItem]:
    """Decode a task-item payload; raises TransferError for anything else."""
    if not accepts(payload):
        kind = getattr(payload, "content_type", type(payload).__name__)
        raise TransferError(f"Unsupported drop payload: {kind}")

    task_payload = cast(TransferPayload, payload)
    try:
        raw = json.loads(task_payload.data.decode("utf-8"))
        if not isinstance(raw, list):
            raise TransferError("Drop payload must be a list of task items")
        return [TaskItem.from_record(rec) for rec in raw]
    except TransferError:
        raise
    except Exception as e:
        raise TransferError(f"Malformed drop payload: {e}") from e
