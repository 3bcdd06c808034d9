# src/oracle_focus/tasks/folders.py

"""
Folders: named buckets of simple to-dos (one per social network by default).

Independent from the TaskStore inbox; a folder owns its own small list.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class FolderTask:
    title: str
    is_done: bool = False
    id: uuid.UUID = field(default_factory=uuid.uuid4)


@dataclass(slots=True)
class Folder:
    name: str
    symbol_name: str
    accent_color: str
    tasks: list[FolderTask] = field(default_factory=list)
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    @property
    def open_task_count(self) -> int:
        return sum(1 for t in self.tasks if not t.is_done)


def default_folders() -> list[Folder]:
    return [
        Folder(name="Instagram", symbol_name="camera.fill", accent_color="purple"),
        Folder(name="X (Twitter)", symbol_name="xmark", accent_color="blue"),
        Folder(name="YouTube", symbol_name="play.rectangle.fill", accent_color="red"),
        Folder(name="Facebook", symbol_name="f.cursive", accent_color="blue"),
        Folder(
            name="Reddit",
            symbol_name="bubble.left.and.bubble.right.fill",
            accent_color="orange",
        ),
        Folder(name="LinkedIn", symbol_name="briefcase.fill", accent_color="cyan"),
    ]


class FolderBoard:
    """Owns all folders. Index-based access mirrors how the UI lists them."""

    def __init__(self, folders: list[Folder] | None = None) -> None:
        self.folders: list[Folder] = list(folders) if folders is not None else []

    @classmethod
    def seeded(cls) -> FolderBoard:
        return cls(default_folders())

    def _folder_at(self, index: int) -> Folder | None:
        if 0 <= index < len(self.folders):
            return self.folders[index]
        return None

    def add_task(self, title: str, folder_index: int) -> FolderTask | None:
        folder = self._folder_at(folder_index)
        cleaned = (title or "").strip()
        if folder is None or not cleaned:
            logger.debug("add_task ignored folder_index=%s", folder_index)
            return None
        task = FolderTask(title=cleaned)
        folder.tasks.append(task)
        return task

    def toggle_task(self, task_id: uuid.UUID, folder_index: int) -> bool:
        folder = self._folder_at(folder_index)
        if folder is None:
            return False
        for t in folder.tasks:
            if t.id == task_id:
                t.is_done = not t.is_done
                return True
        return False
