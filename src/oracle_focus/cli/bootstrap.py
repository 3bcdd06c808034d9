# src/oracle_focus/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- wires concrete implementations into AppState (LLM/store/folders/Oracle).
"""

from __future__ import annotations

import logging

from ..config import Settings, get_settings
from ..core.ports import LLMClient
from ..core.state import AppState
from ..llm.client import OpenRouterLLMClient
from ..llm.offline import OfflineLLMClient
from ..oracle.focus import FocusZone
from ..oracle.steps import OracleStepGenerator
from ..tasks.folders import FolderBoard
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def build_llm_client(settings: Settings) -> LLMClient:
    if settings.offline:
        logger.info("Offline mode forced by settings.")
        return OfflineLLMClient()
    try:
        return OpenRouterLLMClient(settings)
    except RuntimeError as e:
        # Local runs without an API key still get deterministic steps.
        logger.info("LLM not configured (%s); using offline client.", e)
        return OfflineLLMClient()


def create_initial_state(*, settings: Settings | None = None, llm: LLMClient | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings (and the LLM) injectable makes the app easier to test and
    avoids hidden global config reads. If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    settings.data_dir.mkdir(parents=True, exist_ok=True)

    if llm is None:
        llm = build_llm_client(settings)

    store = TaskStore()
    generator = OracleStepGenerator(llm, max_steps=settings.step_count)
    folders = FolderBoard.seeded() if settings.seed_folders else FolderBoard()

    return AppState(
        settings=settings,
        llm=llm,
        task_store=store,
        folders=folders,
        step_generator=generator,
        focus=FocusZone(store, generator),
    )
