# src/oracle_focus/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..config import Settings
from ..oracle.focus import FocusZone
from ..tasks.folders import FolderBoard
from ..tasks.task_store import TaskStore
from .ports import LLMClient, StepGenerator


@dataclass
class AppState:
    """Everything a session needs, wired once in bootstrap and passed around explicitly."""

    settings: Settings
    llm: LLMClient
    task_store: TaskStore
    folders: FolderBoard
    step_generator: StepGenerator
    focus: FocusZone
