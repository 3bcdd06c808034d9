# src/oracle_focus/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- No secrets required at import time.
- Settings are injectable; get_settings() is only the default source.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

from dotenv import load_dotenv

ENV_PREFIX = "ORACLE"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _first_env(*names: str, default: str | None = None) -> str | None:
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip() != "":
            return v
    return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_list(name: str, default: List[str]) -> List[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return list(default)
    return [p.strip() for p in raw.replace(",", " ").split() if p.strip()]


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


DEFAULT_LLM_MODELS = [
    "x-ai/grok-4.1-fast:free",
    "qwen/qwen-2.5-72b-instruct:free",
    "deepseek/deepseek-chat-v3-0324:free",
]


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    data_dir: Path

    # ---- Features ----
    step_count: int
    seed_folders: bool
    offline: bool

    # ---- LLM / OpenRouter ----
    openrouter_api_key: Optional[str]
    openrouter_base_url: str
    llm_models: List[str]
    extra_headers: Dict[str, str]

    # ---- LLM timeouts (seconds) ----
    llm_first_token_timeout: float
    llm_read_timeout: float
    llm_connect_timeout: float

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "oracle").strip() or "oracle"
        log_level = _env(_k("LOG_LEVEL"), "INFO")
        data_dir = _env_path(_k("DATA_DIR"), Path(".local/oracle"))

        step_count = max(1, _env_int(_k("STEP_COUNT"), 3))
        seed_folders = _env_bool(_k("SEED_FOLDERS"), True)
        offline = _env_bool(_k("OFFLINE"), False)

        openrouter_api_key = _first_env(_k("OPENROUTER_API_KEY"), "OPENROUTER_API_KEY", default=None)
        openrouter_base_url = _env(_k("OPENROUTER_BASE_URL"), "https://openrouter.ai/api/v1")

        http_referer = _env(_k("HTTP_REFERER"), "https://example.com")
        # Use explicit title header if provided; else fall back to app_name
        title = _env(_k("APP_TITLE"), app_name)
        extra_headers = {
            "HTTP-Referer": http_referer,
            "X-Title": title,
        }

        llm_models = _env_list(_k("LLM_MODELS"), DEFAULT_LLM_MODELS)

        first_token = _env_float(_k("LLM_FIRST_TOKEN_TIMEOUT_SECONDS"), 20.0)
        # keep read >= first_token as a sane baseline
        read_timeout = max(_env_float(_k("LLM_READ_TIMEOUT_SECONDS"), 25.0), first_token)
        connect_timeout = _env_float(_k("LLM_CONNECT_TIMEOUT_SECONDS"), 5.0)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            step_count=step_count,
            seed_folders=seed_folders,
            offline=offline,
            openrouter_api_key=openrouter_api_key,
            openrouter_base_url=openrouter_base_url,
            llm_models=llm_models,
            extra_headers=extra_headers,
            llm_first_token_timeout=first_token,
            llm_read_timeout=read_timeout,
            llm_connect_timeout=connect_timeout,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    """Load settings once per process (reads .env on first call)."""
    global _SETTINGS
    if _SETTINGS is None:
        load_dotenv(override=False)
        _SETTINGS = Settings.from_env()
    return _SETTINGS
