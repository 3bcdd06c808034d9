# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from oracle_focus.config import DEFAULT_LLM_MODELS, Settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    import os

    for name in list(os.environ):
        if name.startswith("ORACLE_") or name == "OPENROUTER_API_KEY":
            monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    s = Settings.from_env()
    assert s.app_name == "oracle"
    assert s.log_level == "INFO"
    assert s.data_dir == Path(".local/oracle")
    assert s.step_count == 3
    assert s.seed_folders is True
    assert s.offline is False
    assert s.openrouter_api_key is None
    assert s.llm_models == DEFAULT_LLM_MODELS
    assert s.extra_headers["X-Title"] == "oracle"


def test_env_overrides(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("ORACLE_APP_NAME", "focus")
    monkeypatch.setenv("ORACLE_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("ORACLE_STEP_COUNT", "5")
    monkeypatch.setenv("ORACLE_SEED_FOLDERS", "no")
    monkeypatch.setenv("ORACLE_OFFLINE", "1")
    monkeypatch.setenv("OPENROUTER_API_KEY", "sk-test")
    monkeypatch.setenv("ORACLE_LLM_MODELS", "a/one, b/two  c/three")
    monkeypatch.setenv("ORACLE_LLM_FIRST_TOKEN_TIMEOUT_SECONDS", "30")
    monkeypatch.setenv("ORACLE_LLM_READ_TIMEOUT_SECONDS", "10")

    s = Settings.from_env()

    assert s.app_name == "focus"
    assert s.data_dir == tmp_path
    assert s.step_count == 5
    assert s.seed_folders is False
    assert s.offline is True
    assert s.openrouter_api_key == "sk-test"
    assert s.llm_models == ["a/one", "b/two", "c/three"]
    assert s.llm_read_timeout == 30.0
    assert s.extra_headers["X-Title"] == "focus"


def test_bad_numbers_fall_back(monkeypatch) -> None:
    monkeypatch.setenv("ORACLE_STEP_COUNT", "many")
    monkeypatch.setenv("ORACLE_LLM_CONNECT_TIMEOUT_SECONDS", "soon")
    s = Settings.from_env()
    assert s.step_count == 3
    assert s.llm_connect_timeout == 5.0


def test_step_count_is_at_least_one(monkeypatch) -> None:
    monkeypatch.setenv("ORACLE_STEP_COUNT", "0")
    assert Settings.from_env().step_count == 1
