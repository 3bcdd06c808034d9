# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from oracle_focus.core.state import AppState
from oracle_focus.oracle.focus import FocusZone
from oracle_focus.oracle.steps import OracleStepGenerator
from oracle_focus.tasks.folders import FolderBoard
from oracle_focus.tasks.task_store import TaskStore

from .fakes import FakeLLMClient


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than reading the environment,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="oracle-test",
        log_level="INFO",
        data_dir=tmp_path / "data",
        step_count=3,
        seed_folders=True,
        offline=True,
        openrouter_api_key=None,
        openrouter_base_url="https://openrouter.ai/api/v1",
        llm_models=["test/model"],
        extra_headers={},
        llm_first_token_timeout=1.0,
        llm_read_timeout=1.0,
        llm_connect_timeout=1.0,
    )


@pytest.fixture()
def llm() -> FakeLLMClient:
    return FakeLLMClient(next_text="- Open the doc\n- Write one line\n- Save it")


@pytest.fixture()
def state(settings: SimpleNamespace, llm: FakeLLMClient) -> AppState:
    """AppState wired with a fake LLM behind the real step generator."""
    store = TaskStore()
    generator = OracleStepGenerator(llm, max_steps=settings.step_count)
    return AppState(
        settings=settings,
        llm=llm,
        task_store=store,
        folders=FolderBoard.seeded(),
        step_generator=generator,
        focus=FocusZone(store, generator),
    )
