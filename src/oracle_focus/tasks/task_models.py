# src/oracle_focus/tasks/task_models.py

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from enum import StrEnum


class TaskStatus(StrEnum):
    """
    Task lifecycle status.

    Notes:
    - "focus" exists for completeness; the focus task is derived (first inbox task),
      so the store itself never assigns it.
    """

    INBOX = "inbox"
    FOCUS = "focus"
    COMPLETED = "completed"


_PRIORITY_DISPLAY: dict[str, tuple[int, str, str]] = {
    # value -> (rank, glyph, color)
    "chill": (0, "🌙", "#8EC5FC"),
    "low": (1, "🌱", "#7BD389"),
    "medium": (2, "⚡", "#F6C945"),
    "high": (3, "🔥", "#F5914E"),
    "urgent": (4, "🚨", "#E5484D"),
}


class Priority(StrEnum):
    """Display-only priority. Ordered chill < low < medium < high < urgent."""

    CHILL = "chill"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"

    @property
    def rank(self) -> int:
        return _PRIORITY_DISPLAY[self.value][0]

    @property
    def glyph(self) -> str:
        return _PRIORITY_DISPLAY[self.value][1]

    @property
    def color(self) -> str:
        return _PRIORITY_DISPLAY[self.value][2]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Priority):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Priority):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Priority):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Priority):
            return NotImplemented
        return self.rank >= other.rank

    @classmethod
    def parse(cls, raw: str) -> Priority:
        """Accept a value name (any case) or a rank digit."""
        s = (raw or "").strip().lower()
        if s.isdigit():
            for p in cls:
                if p.rank == int(s):
                    return p
        try:
            return cls(s)
        except ValueError:
            pass
        names = ", ".join(p.value for p in cls)
        raise ValueError(f"Unknown priority: {raw!r} (expected one of: {names})")


def _utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass(slots=True, eq=False)
class Task:
    """
    A single task record.

    Identity is the `id` (compared by the store); two tasks with equal titles
    are still different tasks.
    """

    title: str
    priority: Priority = Priority.MEDIUM
    status: TaskStatus = TaskStatus.INBOX
    notes: str | None = None
    due_at: date | None = None
    created_at: datetime = field(default_factory=_utcnow)
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    @property
    def is_completed(self) -> bool:
        return self.status == TaskStatus.COMPLETED
