# src/oracle_focus/oracle/steps.py

"""
The Oracle: turns a task title into the smallest first steps.

The LLM call is blocking (streaming SDK), so it runs in a worker thread;
callers await generate_steps() from their own event loop and get the result
back on that loop.
"""

from __future__ import annotations

import asyncio
import logging
import re

from ..core.ports import LLMClient
from ..llm.client import friendly_llm_error_message

logger = logging.getLogger(__name__)

_LIST_MARKER = re.compile(r"^\s*(?:[-*•]|\d+[.)])\s*")

SYSTEM_PROMPT_TEMPLATE = (
    "You are the Oracle, a calm productivity helper.\n"
    "The user is stuck on one task. Reply with the {count} smallest, most concrete "
    "first steps to get started on it.\n"
    "Rules:\n"
    "- one step per line, no numbering, no extra text\n"
    "- each step under 12 words, starting with a verb\n"
    "- the first step must take under two minutes"
)


class StepGenerationError(Exception):
    """The Oracle could not produce steps. str(err) is safe to show to the user."""


def parse_steps(text: str, max_steps: int) -> list[str]:
    steps: list[str] = []
    for raw in (text or "").splitlines():
        line = _LIST_MARKER.sub("", raw).strip()
        if not line:
            continue
        steps.append(line)
        if len(steps) >= max_steps:
            break
    return steps


class OracleStepGenerator:
    def __init__(self, llm: LLMClient, *, max_steps: int = 3) -> None:
        self._llm = llm
        self._max_steps = max(1, int(max_steps))

    @property
    def max_steps(self) -> int:
        return self._max_steps

    def _collect(self, task_title: str) -> str:
        system_prompt = SYSTEM_PROMPT_TEMPLATE.format(count=self._max_steps)
        messages = [{"role": "user", "content": f"Task: {task_title}"}]
        return "".join(self._llm.stream_chat(messages, system_prompt))

    async def generate_steps(self, task_title: str) -> list[str]:
        title = (task_title or "").strip()
        if not title:
            raise StepGenerationError("Task title is empty.")

        try:
            text = await asyncio.to_thread(self._collect, title)
        except RuntimeError as e:
            msg = friendly_llm_error_message(e)
            logger.info("Step generation failed: %s", msg)
            raise StepGenerationError(msg) from e

        steps = parse_steps(text, self._max_steps)
        if not steps:
            raise StepGenerationError("The Oracle returned no steps.")

        logger.debug("Generated %d steps for title=%r", len(steps), title)
        return steps
