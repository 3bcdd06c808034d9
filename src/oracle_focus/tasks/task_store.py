# src/oracle_focus/tasks/task_store.py

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date
from enum import StrEnum

from .task_models import Priority, Task, TaskStatus

logger = logging.getLogger(__name__)


class ChangeKind(StrEnum):
    ADDED = "added"
    FOCUSED = "focused"
    COMPLETED = "completed"
    REOPENED = "reopened"
    PROMOTED = "promoted"


@dataclass(slots=True, frozen=True)
class StoreChange:
    """What happened to the store. Delivered to subscribers after the mutation."""

    kind: ChangeKind
    task: Task
    version: int


StoreListener = Callable[[StoreChange], None]


class TaskStore:
    """
    In-memory task store: the single source of truth for all tasks.

    The list keeps insertion order; the inbox and the focus task are derived
    views over it. Invalid input (blank title, unknown task) is a silent no-op,
    never an exception.

    Observers:
    - subscribe(listener) -> unsubscribe callable (push)
    - version counter bumped on every mutation (poll)

    Thread-safety:
    - none; mutate from one thread (the UI/main loop)
    """

    def __init__(self) -> None:
        self._tasks: list[Task] = []
        self._listeners: list[StoreListener] = []
        self._version = 0
        logger.debug("TaskStore ready (empty)")

    # ---- observation ----

    @property
    def version(self) -> int:
        return self._version

    def subscribe(self, listener: StoreListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _publish(self, kind: ChangeKind, task: Task) -> None:
        self._version += 1
        change = StoreChange(kind=kind, task=task, version=self._version)
        for listener in list(self._listeners):
            try:
                listener(change)
            except Exception:
                logger.exception("Store listener failed kind=%s task_id=%s", kind.value, task.id)

    # ---- low-level helpers ----

    def _index_of(self, task: Task | uuid.UUID) -> int | None:
        task_id = task if isinstance(task, uuid.UUID) else task.id
        for i, t in enumerate(self._tasks):
            if t.id == task_id:
                return i
        return None

    @staticmethod
    def _clean_title(title: str | None) -> str | None:
        cleaned = (title or "").strip()
        return cleaned or None

    # ---- queries ----

    def __len__(self) -> int:
        return len(self._tasks)

    def tasks(self) -> list[Task]:
        """Snapshot of the full list, in store order."""
        return list(self._tasks)

    def get(self, task_id: uuid.UUID) -> Task | None:
        idx = self._index_of(task_id)
        return self._tasks[idx] if idx is not None else None

    def inbox_tasks(self) -> list[Task]:
        return [t for t in self._tasks if t.status == TaskStatus.INBOX]

    def completed_tasks(self) -> list[Task]:
        return [t for t in self._tasks if t.status == TaskStatus.COMPLETED]

    def focus_task(self) -> Task | None:
        """The one task to work on now: the first inbox task."""
        for t in self._tasks:
            if t.status == TaskStatus.INBOX:
                return t
        return None

    # ---- mutations ----

    def add_task_to_inbox(
        self,
        title: str,
        priority: Priority = Priority.MEDIUM,
        *,
        notes: str | None = None,
        due_at: date | None = None,
    ) -> Task | None:
        """Append a new inbox task. Blank titles are ignored."""
        cleaned = self._clean_title(title)
        if cleaned is None:
            logger.debug("add_task_to_inbox: blank title ignored")
            return None

        task = Task(title=cleaned, priority=priority, notes=notes, due_at=due_at)
        self._tasks.append(task)
        logger.debug("Task added id=%s priority=%s", task.id, priority.value)
        self._publish(ChangeKind.ADDED, task)
        return task

    def add_task_and_focus(
        self,
        title: str,
        priority: Priority = Priority.MEDIUM,
        *,
        notes: str | None = None,
        due_at: date | None = None,
    ) -> Task | None:
        """Insert a new inbox task at the front so it becomes the focus task."""
        cleaned = self._clean_title(title)
        if cleaned is None:
            logger.debug("add_task_and_focus: blank title ignored")
            return None

        task = Task(title=cleaned, priority=priority, notes=notes, due_at=due_at)
        self._tasks.insert(0, task)
        logger.debug("Task added to focus id=%s priority=%s", task.id, priority.value)
        self._publish(ChangeKind.FOCUSED, task)
        return task

    def mark_completed(self, task: Task | uuid.UUID) -> bool:
        idx = self._index_of(task)
        if idx is None:
            logger.debug("mark_completed: task not in store")
            return False

        found = self._tasks[idx]
        found.status = TaskStatus.COMPLETED
        logger.debug("Task completed id=%s", found.id)
        self._publish(ChangeKind.COMPLETED, found)
        return True

    def toggle_completed(self, task: Task | uuid.UUID) -> bool:
        """completed -> inbox, anything else -> completed."""
        idx = self._index_of(task)
        if idx is None:
            logger.debug("toggle_completed: task not in store")
            return False

        found = self._tasks[idx]
        if found.status == TaskStatus.COMPLETED:
            found.status = TaskStatus.INBOX
            kind = ChangeKind.REOPENED
        else:
            found.status = TaskStatus.COMPLETED
            kind = ChangeKind.COMPLETED
        logger.debug("Task toggled id=%s status=%s", found.id, found.status.value)
        self._publish(kind, found)
        return True

    def promote_to_focus(self, task: Task | uuid.UUID) -> bool:
        """Move an inbox task to the front of the list."""
        idx = self._index_of(task)
        if idx is None:
            return False

        found = self._tasks[idx]
        if found.status != TaskStatus.INBOX:
            return False

        del self._tasks[idx]
        self._tasks.insert(0, found)
        logger.debug("Task promoted to focus id=%s", found.id)
        self._publish(ChangeKind.PROMOTED, found)
        return True
