# src/oracle_focus/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import registry as command_registry
from ..cli.commands import render_focus
from ..core.state import AppState

logger = logging.getLogger(__name__)


def handle_line(state: AppState, line: str, emit=print) -> str | None:
    """
    One console turn: a command, or plain text that lands in the inbox.
    Returns the reply to print (None for blank input).
    """
    line = line.strip()
    if not line:
        return None

    try:
        reply = command_registry.handle(state, line, emit=emit)
    except Exception:
        logger.exception("Command handler crashed.")
        return "Internal error while handling a command."

    if reply is not None:
        return reply

    task = state.task_store.add_task_to_inbox(line)
    if task is None:
        return None
    return f"Added to inbox: {task.priority.glyph} {task.title}"


def run_console_loop(state: AppState) -> None:
    app_name = str(getattr(state.settings, "app_name", "oracle")).upper()
    logger.info("Console connector started.")
    print(f"{app_name} - one thing at a time. Use /help for commands, /exit to quit.\n")
    print(render_focus(state))

    while True:
        try:
            user_input = input("\n> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        reply = handle_line(state, user_input)
        if reply is not None:
            print(reply)

    logger.info("Console connector finished.")
