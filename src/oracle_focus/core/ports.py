# src/oracle_focus/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations.
This keeps the LLM provider and the step generator swappable and makes testing easier.
"""

from typing import Iterable, Protocol

ChatMessage = dict[str, str]
# OpenAI-style chat messages: {"role": "...", "content": "..."}.


class LLMClient(Protocol):
    """Streaming chat completion client (OpenAI/OpenRouter-compatible)."""
    def stream_chat(self, messages: list[ChatMessage], system_prompt: str) -> Iterable[str]: ...


class StepGenerator(Protocol):
    """
    Given a task title, asynchronously return an ordered list of short steps.

    Failures raise StepGenerationError with a human-readable message.
    """
    async def generate_steps(self, task_title: str) -> list[str]: ...
