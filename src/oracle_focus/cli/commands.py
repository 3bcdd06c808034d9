# src/oracle_focus/cli/commands.py

from __future__ import annotations

import asyncio
import contextlib
import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.state import AppState
from ..tasks.task_models import Priority, Task

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /add, ...)."""

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

    def handle(self, state: AppState, line: str, emit: CommandEmitter | None = None) -> str | None:
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
        except (TypeError, ValueError):
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


def format_task(n: int, task: Task) -> str:
    mark = "x" if task.is_completed else " "
    line = f"{n}. [{mark}] {task.priority.glyph} {task.title}"
    if task.due_at is not None:
        line += f" (due {task.due_at.isoformat()})"
    return line


def split_priority(args: list[str]) -> tuple[Priority, str]:
    """`!high Call mom` -> (HIGH, "Call mom"). Raises ValueError on unknown priority."""
    if args and args[0].startswith("!"):
        return Priority.parse(args[0][1:]), " ".join(args[1:])
    return Priority.MEDIUM, " ".join(args)


def _parse_index(raw: str, size: int) -> int | None:
    try:
        n = int(raw)
    except ValueError:
        return None
    if 1 <= n <= size:
        return n - 1
    return None


def render_focus(state: AppState) -> str:
    task = state.focus.task
    if task is None:
        return "Focus zone: nothing to focus on. Add a task with /now or /add."
    lines = [f"FOCUS ZONE: {task.priority.glyph} {task.title}"]
    if task.notes:
        lines.append(f"  {task.notes}")
    for i, step in enumerate(state.focus.steps, start=1):
        lines.append(f"  {i}) {step}")
    if not state.focus.steps:
        lines.append("  Use /steps to let the Oracle find the first steps.")
    if state.focus.error:
        lines.append(f"  [!] {state.focus.error} (/dismiss)")
    return "\n".join(lines)


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_exit(state: AppState, args: list[str]) -> str:
    # The console loop leaves before dispatch; other callers only get a hint.
    return "Type /exit at the console prompt to quit."

def cmd_status(state: AppState, args: list[str]) -> str:
    store = state.task_store
    models = ", ".join(list(getattr(state.settings, "llm_models", []) or []))
    return (
        "Status:\n"
        f"  Tasks: {len(store)} total, {len(store.inbox_tasks())} in inbox, "
        f"{len(store.completed_tasks())} completed\n"
        f"  Oracle: {state.llm.__class__.__name__}\n"
        f"  Models (priority -> fallback): {models}"
    )


def _add(state: AppState, args: list[str], *, focus: bool) -> str:
    try:
        priority, title = split_priority(args)
    except ValueError as e:
        return str(e)

    store = state.task_store
    if focus:
        task = store.add_task_and_focus(title, priority)
    else:
        task = store.add_task_to_inbox(title, priority)
    if task is None:
        return "Nothing added (empty title)."
    where = "focus" if focus else "inbox"
    return f"Added to {where}: {task.priority.glyph} {task.title}"


def cmd_add(state: AppState, args: list[str]) -> str:
    return _add(state, args, focus=False)


def cmd_now(state: AppState, args: list[str]) -> str:
    return _add(state, args, focus=True)


def cmd_inbox(state: AppState, args: list[str]) -> str:
    tasks = state.task_store.inbox_tasks()
    if not tasks:
        return "Inbox is empty."
    return "\n".join(["Inbox:"] + [format_task(i, t) for i, t in enumerate(tasks, start=1)])


def cmd_all(state: AppState, args: list[str]) -> str:
    tasks = state.task_store.tasks()
    if not tasks:
        return "No tasks yet."
    return "\n".join(["All tasks:"] + [format_task(i, t) for i, t in enumerate(tasks, start=1)])


def cmd_completed(state: AppState, args: list[str]) -> str:
    tasks = state.task_store.completed_tasks()
    if not tasks:
        return "Nothing completed yet."
    return "\n".join(["Completed:"] + [format_task(i, t) for i, t in enumerate(tasks, start=1)])


def cmd_focus(state: AppState, args: list[str]) -> str:
    return render_focus(state)


def cmd_done(state: AppState, args: list[str]) -> str:
    """
    /done     -> complete the focus task
    /done N   -> complete inbox task N
    """
    store = state.task_store
    if not args:
        task = store.focus_task()
        if task is None:
            return "Nothing to complete."
    else:
        inbox = store.inbox_tasks()
        idx = _parse_index(args[0], len(inbox))
        if idx is None:
            return f"No inbox task #{args[0]}. Use /inbox to list them."
        task = inbox[idx]

    store.mark_completed(task)
    return f"Completed: {task.title}"


def cmd_toggle(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /toggle N (numbers from /all)."
    tasks = state.task_store.tasks()
    idx = _parse_index(args[0], len(tasks))
    if idx is None:
        return f"No task #{args[0]}. Use /all to list them."
    task = tasks[idx]
    state.task_store.toggle_completed(task)
    return f"{'Completed' if task.is_completed else 'Reopened'}: {task.title}"


def cmd_random(state: AppState, args: list[str]) -> str:
    picked = state.focus.shuffle()
    if picked is None:
        return "Need at least two inbox tasks to shuffle."
    return render_focus(state)


def cmd_steps(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    if state.focus.task is None:
        return "Nothing to focus on."
    if emit:
        with contextlib.suppress(Exception):
            emit("[Oracle] Finding the first steps...")
    asyncio.run(state.focus.find_first_steps())
    return render_focus(state)


def cmd_dismiss(state: AppState, args: list[str]) -> str:
    state.focus.dismiss_error()
    return "Dismissed."


def cmd_folders(state: AppState, args: list[str]) -> str:
    folders = state.folders.folders
    if not folders:
        return "No folders."
    lines = ["Folders:"]
    for i, f in enumerate(folders, start=1):
        lines.append(f"{i}. {f.name} ({f.open_task_count} open)")
        for j, t in enumerate(f.tasks, start=1):
            lines.append(f"     {j}. [{'x' if t.is_done else ' '}] {t.title}")
    return "\n".join(lines)


def cmd_folder(state: AppState, args: list[str]) -> str:
    if len(args) < 2:
        return "Usage: /folder N title"
    idx = _parse_index(args[0], len(state.folders.folders))
    if idx is None:
        return f"No folder #{args[0]}. Use /folders to list them."
    task = state.folders.add_task(" ".join(args[1:]), idx)
    if task is None:
        return "Nothing added (empty title)."
    return f"Added to {state.folders.folders[idx].name}: {task.title}"


def cmd_folder_toggle(state: AppState, args: list[str]) -> str:
    if len(args) < 2:
        return "Usage: /folder-toggle N M"
    idx = _parse_index(args[0], len(state.folders.folders))
    if idx is None:
        return f"No folder #{args[0]}."
    folder = state.folders.folders[idx]
    tidx = _parse_index(args[1], len(folder.tasks))
    if tidx is None:
        return f"No task #{args[1]} in {folder.name}."
    task = folder.tasks[tidx]
    state.folders.toggle_task(task.id, idx)
    return f"{'Done' if task.is_done else 'Open'}: {task.title}"


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show task counts and Oracle configuration.")
registry.register("add", cmd_add, help_text="Add to inbox: /add [!priority] title.")
registry.register("now", cmd_now, help_text="Add and focus: /now [!priority] title.")
registry.register("inbox", cmd_inbox, help_text="List inbox tasks.")
registry.register("all", cmd_all, help_text="List all tasks.")
registry.register("completed", cmd_completed, help_text="List completed tasks.")
registry.register("focus", cmd_focus, help_text="Show the focus zone.")
registry.register("done", cmd_done, help_text="Complete the focus task, or inbox task N: /done [N].")
registry.register("toggle", cmd_toggle, help_text="Toggle completion of task N from /all.")
registry.register("random", cmd_random, help_text="Focus on another random inbox task.")
registry.register("steps", cmd_steps, help_text="Let the Oracle find the first steps.")
registry.register("dismiss", cmd_dismiss, help_text="Dismiss the Oracle error message.")
registry.register("folders", cmd_folders, help_text="List folders and their tasks.")
registry.register("folder", cmd_folder, help_text="Add to a folder: /folder N title.")
registry.register("folder-toggle", cmd_folder_toggle, help_text="Toggle task M in folder N.")
registry.register("exit", cmd_exit, help_text="Quit the console.", aliases=["quit"])
