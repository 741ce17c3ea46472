# src/bartasks/shell/console_connector.py

from __future__ import annotations

import logging
from datetime import datetime

from ..core.state import AppState
from .commands import registry as command_registry
from .render import render_status_line

logger = logging.getLogger(__name__)

PROMPT = ">>> "
EXIT_COMMANDS = ("/exit", "/quit")


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def handle_line(state: AppState, line: str) -> str | None:
    """
    One REPL step. Plain text (no leading slash) is added to Now, like typing
    into the add field and pressing Return.
    """
    def emit(text: str) -> None:
        print(f"[{_ts_local()}] {text}", flush=True)

    try:
        reply = command_registry.handle(state, line, emit=emit)
        if reply is None:
            reply = command_registry.handle(state, f"/now {line}", emit=emit)
    except Exception:
        logger.exception("Command handler crashed.")
        reply = "Internal error while handling a command."
    return reply


def run_console_loop(state: AppState) -> None:
    app_name = str(getattr(state.settings, "app_name", "BarTasks"))
    logger.info("Console connector started.")
    _print_ts(render_status_line(app_name, state.lists.values(), shown=state.popover.is_shown))
    _print_ts("Type text to add it to Now. Use /help for commands. Use /exit to quit.\n")

    while True:
        try:
            user_input = input(PROMPT).strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in EXIT_COMMANDS:
            logger.info("Console exit command received.")
            break

        reply = handle_line(state, user_input)
        if reply:
            print(f"[{_ts_local()}] {reply}")

    logger.info("Console connector finished.")
