# src/bartasks/core/models.py

from __future__ import annotations

import base64
import uuid
from dataclasses import dataclass, replace
from datetime import UTC, datetime
from typing import Any

COMPLETED_KEY_SUFFIX = "Deleted"


def utc_now() -> datetime:
    return datetime.now(UTC)


def new_item_id() -> str:
    return uuid.uuid4().hex


def _ts_to_str(ts: datetime | None) -> str | None:
    return ts.isoformat() if ts is not None else None


def _str_to_ts(raw: Any) -> datetime | None:
    if raw is None:
        return None
    ts = datetime.fromisoformat(str(raw).replace("Z", "+00:00"))
    # Naive timestamps are treated as UTC so comparisons never mix kinds.
    return ts if ts.tzinfo is not None else ts.replace(tzinfo=UTC)


@dataclass(frozen=True, slots=True)
class TaskItem:
    """
    One entry of a task list.

    Notes:
    - completed_at is None while the item is active and set exactly once
      when it moves to the completed sequence.
    - image_data is stored as-is (no validation, no resizing).
    """

    id: str
    name: str
    added_at: datetime
    completed_at: datetime | None = None
    image_data: bytes | None = None

    def __post_init__(self) -> None:
        # An empty attachment is no attachment; keeps storage round-trips exact.
        if self.image_data is not None and not self.image_data:
            object.__setattr__(self, "image_data", None)

    @classmethod
    def create(cls, name: str, image_data: bytes | None = None, *, now: datetime | None = None) -> TaskItem:
        return cls(
            id=new_item_id(),
            name=name,
            added_at=now or utc_now(),
            completed_at=None,
            image_data=image_data,
        )

    @property
    def is_completed(self) -> bool:
        return self.completed_at is not None

    def completed(self, now: datetime | None = None) -> TaskItem:
        if self.completed_at is not None:
            return self
        stamp = now or utc_now()
        # Clock skew must not produce an item completed before it was added.
        return replace(self, completed_at=max(stamp, self.added_at))

    def reactivated(self) -> TaskItem:
        if self.completed_at is None:
            return self
        return replace(self, completed_at=None)

    def to_record(self) -> dict[str, Any]:
        """JSON-ready record; the same layout is used by storage and transfer payloads."""
        return {
            "id": self.id,
            "name": self.name,
            "addedAt": _ts_to_str(self.added_at),
            "completedAt": _ts_to_str(self.completed_at),
            "imageData": base64.b64encode(self.image_data).decode("ascii") if self.image_data else None,
        }

    @classmethod
    def from_record(cls, rec: dict[str, Any]) -> TaskItem:
        """Inverse of to_record. Raises ValueError/KeyError/TypeError on malformed input."""
        item_id = rec["id"]
        name = rec["name"]
        if not isinstance(item_id, str) or not item_id:
            raise ValueError("id must be a non-empty string")
        if not isinstance(name, str):
            raise ValueError("name must be a string")

        added_at = _str_to_ts(rec["addedAt"])
        if added_at is None:
            raise ValueError("addedAt is required")

        raw_image = rec.get("imageData")
        image_data = base64.b64decode(raw_image, validate=True) if raw_image else None

        return cls(
            id=item_id,
            name=name,
            added_at=added_at,
            completed_at=_str_to_ts(rec.get("completedAt")),
            image_data=image_data,
        )


@dataclass(frozen=True, slots=True)
class ListKeys:
    """Storage identifier pair of one list."""

    active_key: str
    completed_key: str

    @classmethod
    def for_list(cls, list_key: str) -> ListKeys:
        return cls(active_key=list_key, completed_key=f"{list_key}{COMPLETED_KEY_SUFFIX}")
