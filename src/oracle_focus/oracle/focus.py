# src/oracle_focus/oracle/focus.py

from __future__ import annotations

import logging
import random
import uuid

from ..core.ports import StepGenerator
from ..tasks.task_models import Task
from ..tasks.task_store import StoreChange, TaskStore
from .steps import StepGenerationError

logger = logging.getLogger(__name__)


class FocusZone:
    """
    State behind the "focus zone" card: the one task, its starter steps,
    and the last Oracle error (until dismissed).

    Steps and the error belong to a specific task; when the store's focus
    task changes, both are dropped.
    """

    def __init__(self, store: TaskStore, generator: StepGenerator) -> None:
        self._store = store
        self._generator = generator
        self._steps: list[str] = []
        self._steps_for: uuid.UUID | None = None
        self.error: str | None = None
        self._error_for: uuid.UUID | None = None
        self._unsubscribe = store.subscribe(self._on_store_change)

    def close(self) -> None:
        self._unsubscribe()

    @property
    def task(self) -> Task | None:
        return self._store.focus_task()

    @property
    def steps(self) -> list[str]:
        return list(self._steps)

    def _on_store_change(self, change: StoreChange) -> None:
        current = self._store.focus_task()
        current_id = current.id if current is not None else None
        if self._steps_for is not None and self._steps_for != current_id:
            self._steps = []
            self._steps_for = None
        if self.error is not None and self._error_for != current_id:
            self.error = None
            self._error_for = None

    def dismiss_error(self) -> None:
        self.error = None
        self._error_for = None

    async def find_first_steps(self) -> list[str]:
        task = self.task
        if task is None:
            self.error = "Nothing to focus on."
            self._error_for = None
            return []

        try:
            steps = await self._generator.generate_steps(task.title)
        except StepGenerationError as e:
            current = self.task
            if current is not None and current.id == task.id:
                self.error = str(e)
                self._error_for = task.id
            return []

        current = self.task
        if current is None or current.id != task.id:
            logger.debug("Focus changed while generating; dropping steps for task_id=%s", task.id)
            return []

        self._steps = list(steps)
        self._steps_for = task.id
        self.error = None
        self._error_for = None
        return self.steps

    def shuffle(self, rng: random.Random | None = None) -> Task | None:
        """Pick another inbox task at random and make it the focus task."""
        inbox = self._store.inbox_tasks()
        if len(inbox) < 2:
            return None

        picker = rng or random
        choice = picker.choice(inbox[1:])
        self._store.promote_to_focus(choice)
        return choice
