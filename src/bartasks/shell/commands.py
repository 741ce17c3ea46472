# src/bartasks/shell/commands.py

from __future__ import annotations

import contextlib
import inspect
import logging
from collections.abc import Callable, Sequence
from typing import cast

from ..core.errors import TransferError
from ..core.models import TaskItem
from ..core.state import AppState
from ..lists.list_manager import TaskListManager, move_items
from .image_picker import pick_image
from .render import render_list, render_status_line

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /now, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except Exception:
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


# ---- helpers ----

CLOSED_REPLY = "The popover is closed. Use /show to open it."


def _list_names(state: AppState) -> str:
    return " | ".join(state.lists)


def _resolve_list(state: AppState, name: str | None) -> TaskListManager | None:
    if not name:
        return None
    return state.get_list(name)


def _pick_rows(items: Sequence[TaskItem], raw: Sequence[str]) -> list[TaskItem] | str:
    """Map 1-based row numbers to items; returns an error string on bad input."""
    picked: list[TaskItem] = []
    for token in raw:
        try:
            n = int(token)
        except ValueError:
            return f"Not a row number: {token}"
        if n < 1 or n > len(items):
            return f"No row {n} (list has {len(items)} rows)."
        item = items[n - 1]
        if item not in picked:
            picked.append(item)
    return picked


def _add_to(state: AppState, name: str, args: list[str]) -> str:
    if not state.popover.is_shown:
        return CLOSED_REPLY
    manager = state.get_list(name)
    if manager is None:
        return f"Unknown list: {name}."

    # Same path as typing into the add field and pressing Return.
    manager.pending_text = " ".join(args)
    item = manager.add()
    if item is None:
        return f"Nothing added to {manager.name}."

    mark = " (with image)" if item.image_data else ""
    return f"Added to {manager.name}: {item.name}{mark}"


# ---- handlers ----


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    app_name = str(getattr(state.settings, "app_name", "BarTasks"))
    line = render_status_line(app_name, state.lists.values(), shown=state.popover.is_shown)

    pending = [m.name for m in state.lists.values() if m.pending_image]
    if pending:
        line += f"\n  Image attached for: {', '.join(pending)}"
    return line


def cmd_show(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    if state.popover.is_shown:
        return "The popover is already open."
    state.popover.show()
    return "\n\n".join(render_list(m) for m in state.lists.values())


def cmd_hide(state: AppState, args: list[str]) -> str:
    if not state.popover.is_shown:
        return "The popover is already closed."
    state.popover.close()
    return "Popover closed. Lists saved."


def cmd_toggle(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    if state.popover.is_shown:
        return cmd_hide(state, args)
    return cmd_show(state, args, emit)


def cmd_now(state: AppState, args: list[str]) -> str:
    return _add_to(state, "now", args)


def cmd_later(state: AppState, args: list[str]) -> str:
    return _add_to(state, "later", args)


def cmd_list(state: AppState, args: list[str]) -> str:
    """
    /list          -> all lists
    /list <name>   -> one list
    """
    if not state.popover.is_shown:
        return CLOSED_REPLY
    if not args:
        return "\n\n".join(render_list(m) for m in state.lists.values())

    manager = _resolve_list(state, args[0])
    if manager is None:
        return f"Unknown list: {args[0]}. Lists: {_list_names(state)}."
    return render_list(manager)


def cmd_done(state: AppState, args: list[str]) -> str:
    """/done <list> <n> [<n> ...] -> complete active rows"""
    if not state.popover.is_shown:
        return CLOSED_REPLY
    if len(args) < 2:
        return "Usage: /done <list> <n> [<n> ...]"

    manager = _resolve_list(state, args[0])
    if manager is None:
        return f"Unknown list: {args[0]}. Lists: {_list_names(state)}."

    picked = _pick_rows(manager.active, args[1:])
    if isinstance(picked, str):
        return picked

    names = [it.name for it in picked if manager.complete(it.id) is not None]
    return f"Completed in {manager.name}: {', '.join(names)}"


def cmd_undo(state: AppState, args: list[str]) -> str:
    """/undo <list> <n> -> move a completed row back to active"""
    if not state.popover.is_shown:
        return CLOSED_REPLY
    if len(args) != 2:
        return "Usage: /undo <list> <n>"

    manager = _resolve_list(state, args[0])
    if manager is None:
        return f"Unknown list: {args[0]}. Lists: {_list_names(state)}."

    picked = _pick_rows(manager.completed, args[1:])
    if isinstance(picked, str):
        return picked

    item = manager.restore(picked[0].id)
    if item is None:
        return "Nothing restored."
    return f"Restored in {manager.name}: {item.name}"


def cmd_move(state: AppState, args: list[str]) -> str:
    """/move <list> <n> [<n> ...] <target> -> drag rows onto another list (or to the tail of the same)"""
    if not state.popover.is_shown:
        return CLOSED_REPLY
    if len(args) < 3:
        return "Usage: /move <list> <n> [<n> ...] <target>"

    source = _resolve_list(state, args[0])
    target = _resolve_list(state, args[-1])
    if source is None:
        return f"Unknown list: {args[0]}. Lists: {_list_names(state)}."
    if target is None:
        return f"Unknown list: {args[-1]}. Lists: {_list_names(state)}."

    picked = _pick_rows(source.active, args[1:-1])
    if isinstance(picked, str):
        return picked

    try:
        moved = move_items(source, target, [it.id for it in picked])
    except TransferError as e:
        logger.info("Move rejected: %s", e)
        return f"Move rejected: {e}"

    return f"Moved to {target.name}: {', '.join(it.name for it in moved)}"


def cmd_clear(state: AppState, args: list[str]) -> str:
    """/clear <list> -> drop the completed archive"""
    if not state.popover.is_shown:
        return CLOSED_REPLY
    if len(args) != 1:
        return "Usage: /clear <list>"

    manager = _resolve_list(state, args[0])
    if manager is None:
        return f"Unknown list: {args[0]}. Lists: {_list_names(state)}."

    count = manager.clear_completed()
    return f"Cleared {count} completed items from {manager.name}."


def cmd_attach(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    """/attach <list> <path> -> attach an image to the next item added to <list>"""
    if len(args) < 2:
        return "Usage: /attach <list> <path>"

    manager = _resolve_list(state, args[0])
    if manager is None:
        return f"Unknown list: {args[0]}. Lists: {_list_names(state)}."

    path = " ".join(args[1:])
    if emit:
        with contextlib.suppress(Exception):
            emit(f"Reading {path} ...")

    data = pick_image(path)
    if data is None:
        return f"Could not read an image from {path}."

    manager.pending_image = data
    return f"Image attached ({len(data)} bytes). It will be added with the next {manager.name} item."


def cmd_detach(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return "Usage: /detach <list>"

    manager = _resolve_list(state, args[0])
    if manager is None:
        return f"Unknown list: {args[0]}. Lists: {_list_names(state)}."

    if manager.pending_image is None:
        return f"No image attached for {manager.name}."
    manager.pending_image = None
    return f"Image detached from {manager.name}."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show the status line (counts, popover state).")
registry.register("show", cmd_show, help_text="Open the popover (loads the lists).", aliases=["open"])
registry.register("hide", cmd_hide, help_text="Close the popover (saves the lists).", aliases=["close"])
registry.register("toggle", cmd_toggle, help_text="Open or close the popover.", aliases=["t"])
registry.register("now", cmd_now, help_text="Add an item to Now: /now <text>.", aliases=["n"])
registry.register("later", cmd_later, help_text="Add an item to Later: /later <text>.", aliases=["l"])
registry.register("list", cmd_list, help_text="Show lists: /list [now|later].", aliases=["ls"])
registry.register("done", cmd_done, help_text="Complete rows: /done <list> <n> [<n> ...].", aliases=["d"])
registry.register("undo", cmd_undo, help_text="Restore a completed row: /undo <list> <n>.")
registry.register("move", cmd_move, help_text="Move rows: /move <list> <n> [<n> ...] <target>.", aliases=["mv"])
registry.register("clear", cmd_clear, help_text="Drop completed items: /clear <list>.")
registry.register("attach", cmd_attach, help_text="Attach an image to the next item: /attach <list> <path>.")
registry.register("detach", cmd_detach, help_text="Drop a pending image: /detach <list>.")
