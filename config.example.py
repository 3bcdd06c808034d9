# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Do NOT commit real secrets; keep them in .env (local, gitignored).

This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "ORACLE_APP_NAME": "App display name (default: oracle).",
    "ORACLE_LOG_LEVEL": "Console logging level (default: INFO).",
    "ORACLE_DATA_DIR": "Local data directory, holds oracle.log (default: .local/oracle).",
    # Features
    "ORACLE_STEP_COUNT": "How many first steps the Oracle proposes (default: 3).",
    "ORACLE_SEED_FOLDERS": "Start with the default social folders (true/false).",
    "ORACLE_OFFLINE": "Force the offline step generator (true/false).",
    # LLM / OpenRouter
    "ORACLE_OPENROUTER_API_KEY": "OpenRouter API key (OPENROUTER_API_KEY also accepted).",
    "ORACLE_OPENROUTER_BASE_URL": "OpenRouter base URL (default: https://openrouter.ai/api/v1).",
    "ORACLE_LLM_MODELS": "Comma/space separated list of models to try in order.",
    "ORACLE_HTTP_REFERER": "Optional OpenRouter metadata header.",
    "ORACLE_APP_TITLE": "Optional OpenRouter metadata header title.",
    # Timeouts
    "ORACLE_LLM_FIRST_TOKEN_TIMEOUT_SECONDS": "Give up on a model without a first token (default: 20).",
    "ORACLE_LLM_READ_TIMEOUT_SECONDS": "HTTP read timeout, at least the first-token timeout (default: 25).",
    "ORACLE_LLM_CONNECT_TIMEOUT_SECONDS": "HTTP connect timeout (default: 5).",
}
