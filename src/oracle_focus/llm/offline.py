# src/oracle_focus/llm/offline.py

from __future__ import annotations

from collections.abc import Iterable

from ..core.ports import ChatMessage

STARTER_STEPS = (
    "Open the notes or document you need",
    "Write down the very first thing you would do",
    "Set a 10-minute timer and start on it",
)


class OfflineLLMClient:
    """
    Offline deterministic LLM client used when no external API is configured.

    Behavior:
    - Step prompts -> returns generic starter steps, one per line
    - Anything else -> returns a short offline notice
    """

    def stream_chat(self, messages: list[ChatMessage], system_prompt: str) -> Iterable[str]:
        sp = (system_prompt or "").lower()

        if "first steps" in sp:
            for step in STARTER_STEPS:
                yield f"- {step}\n"
            return

        yield (
            "Offline mode: no external LLM is configured.\n"
            "Set ORACLE_OPENROUTER_API_KEY (and ORACLE_LLM_MODELS) to enable the Oracle."
        )
