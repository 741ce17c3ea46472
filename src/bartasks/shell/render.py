# src/bartasks/shell/render.py

from __future__ import annotations

import re
from collections.abc import Iterable

from ..core.models import TaskItem
from ..lists.list_manager import TaskListManager

URL_REGEX = re.compile(r"https?://[^\s<>\"')\]]+", re.IGNORECASE)

ATTACHMENT_MARK = "\N{PAPERCLIP}"


def find_urls(text: str) -> list[str]:
    # Sentence punctuation right after a link is not part of it.
    return [u.rstrip(".,;:!?") for u in URL_REGEX.findall(text or "")]


def _local_time(item: TaskItem) -> str:
    ts = item.completed_at or item.added_at
    return ts.astimezone().strftime("%Y-%m-%d %H:%M")


def render_item(index: int, item: TaskItem) -> list[str]:
    box = "[x]" if item.is_completed else "[ ]"
    mark = f" {ATTACHMENT_MARK}" if item.image_data else ""
    lines = [f"{index:>3}. {box} {item.name}{mark}  ({_local_time(item)})"]
    for url in find_urls(item.name):
        lines.append(f"       -> {url}")
    return lines


def _render_rows(items: Iterable[TaskItem]) -> list[str]:
    out: list[str] = []
    for i, item in enumerate(items, start=1):
        out.extend(render_item(i, item))
    return out


def render_list(manager: TaskListManager, *, show_completed: bool = True) -> str:
    lines = [f"== {manager.name} ({len(manager.active)}) =="]
    rows = _render_rows(manager.active)
    lines.extend(rows or ["     (empty)"])

    if show_completed and manager.completed:
        lines.append(f"   -- completed ({len(manager.completed)}) --")
        lines.extend(_render_rows(manager.completed))

    return "\n".join(lines)


def render_status_line(app_name: str, lists: Iterable[TaskListManager], *, shown: bool) -> str:
    counts = " | ".join(f"{m.name}: {len(m.active)}" for m in lists)
    state = "open" if shown else "closed"
    return f"[{app_name}] {counts} (popover {state})"
