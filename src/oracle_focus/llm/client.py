# src/oracle_focus/llm/client.py

from __future__ import annotations

import logging
import time
from typing import Any, Dict, Iterable, List, Optional

import httpx
import openai
from openai import OpenAI

from ..config import Settings
from ..core.ports import ChatMessage

logger = logging.getLogger(__name__)

BAD_MODEL_COOLDOWN_SECONDS = 3600.0


def _is_auth_error(exc: Exception) -> bool:
    if isinstance(exc, (openai.AuthenticationError, openai.PermissionDeniedError)):
        return True
    return exc.__class__.__name__ in {"UnauthorizedError"}


def _is_rate_limit_error(exc: Exception) -> bool:
    if isinstance(exc, openai.RateLimitError):
        return True
    return exc.__class__.__name__ in {"TooManyRequestsError"}


def _is_connection_error(exc: Exception) -> bool:
    # APITimeoutError is a subclass of APIConnectionError.
    if isinstance(exc, (openai.APIConnectionError, httpx.TimeoutException, TimeoutError)):
        return True
    return exc.__class__.__name__ in {"Timeout", "ConnectTimeout", "ReadTimeout", "WriteTimeout"}


def _is_not_found_error(exc: Exception) -> bool:
    # OpenAI-compatible providers answer 404 for models they don't serve
    return isinstance(exc, openai.NotFoundError)


def friendly_llm_error_message(err: Exception) -> str:
    msg = str(err).strip() or "LLM error."
    if "LLM API key is not set" in msg:
        return "The Oracle is not configured (missing API key). Set ORACLE_OPENROUTER_API_KEY in .env."
    if "LLM model list is empty" in msg:
        return "The Oracle is not configured (no models). Set ORACLE_LLM_MODELS in .env."
    if "LLM base URL is not set" in msg:
        return "The Oracle is not configured (missing base URL). Set ORACLE_OPENROUTER_BASE_URL in .env."
    return msg


class OpenRouterLLMClient:
    """
    Streaming chat client for an OpenAI-compatible endpoint (OpenRouter by default).

    - Validates configuration eagerly: construction fails without key/base URL/models,
      which lets bootstrap fall back to the offline client.
    - Automatic SDK retries are disabled to allow quick fallback across models.
    - Models that answer 404 are skipped for an hour.
    """

    def __init__(self, settings: Settings) -> None:
        api_key = (settings.openrouter_api_key or "").strip()
        base_url = (settings.openrouter_base_url or "").strip()
        if not api_key:
            raise RuntimeError("LLM API key is not set. Set ORACLE_OPENROUTER_API_KEY in your .env.")
        if not base_url:
            raise RuntimeError("LLM base URL is not set. Set ORACLE_OPENROUTER_BASE_URL in your .env.")

        self._models: List[str] = [m.strip() for m in settings.llm_models if m and m.strip()]
        if not self._models:
            raise RuntimeError("LLM model list is empty. Set ORACLE_LLM_MODELS in your .env.")

        self._headers: Dict[str, str] = dict(settings.extra_headers or {})
        self._first_token_timeout = float(settings.llm_first_token_timeout)
        self._timeout = httpx.Timeout(
            connect=settings.llm_connect_timeout,
            read=settings.llm_read_timeout,
            write=10.0,
            pool=settings.llm_connect_timeout,
        )
        self._bad_models: dict[str, float] = {}  # model -> retry_at (monotonic)
        self._client = OpenAI(
            base_url=base_url,
            api_key=api_key,
            timeout=self._timeout,
            max_retries=0,
        )

    def _create_stream(self, *, model: str, messages: list[ChatMessage]) -> Any:
        return self._client.chat.completions.create(
            model=model,
            stream=True,
            extra_headers=self._headers or None,
            messages=messages,  # type: ignore[arg-type]
            timeout=self._timeout,
        )

    def stream_chat(self, messages: list[ChatMessage], system_prompt: str) -> Iterable[str]:
        """
        Stream the LLM response in text chunks.

        Behavior:
        - Tries models in the configured order.
        - No first content token within the first-token timeout -> next model.
        - 404 (model not available) -> cooldown, next model.
        - Rate limit / network issues -> next model.
        - Auth issues -> fail fast (no retries across models).
        - Failure after content was yielded -> fail (never splice two models' answers).
        """
        last_error: Optional[Exception] = None
        now = time.monotonic()

        for model in self._models:
            retry_at = self._bad_models.get(model)
            if retry_at is not None and retry_at > now:
                continue

            logger.info("LLM: trying model=%s (first_token_timeout=%.1fs)", model, self._first_token_timeout)
            t0 = time.monotonic()
            deadline = t0 + self._first_token_timeout

            stream = None
            used_any = False

            try:
                stream = self._create_stream(
                    model=model,
                    messages=[{"role": "system", "content": system_prompt}, *messages],
                )

                for chunk in stream:
                    if not used_any and time.monotonic() > deadline:
                        last_error = TimeoutError(f"First token timeout on model: {model}")
                        logger.info("LLM: first token timeout on model=%s -> trying next", model)
                        break

                    content = chunk.choices[0].delta.content if chunk.choices else None
                    if content:
                        if not used_any:
                            logger.info("LLM: first token from model=%s (%.2fs)", model, time.monotonic() - t0)
                        used_any = True
                        yield content

                if used_any:
                    logger.debug("LLM: completed with model=%s", model)
                    return

                if last_error is None:
                    last_error = RuntimeError(f"Model returned no content: {model}")

            except Exception as e:
                last_error = e

                if _is_auth_error(e):
                    raise RuntimeError(
                        "LLM authentication failed. Check your API key (ORACLE_OPENROUTER_API_KEY)."
                    ) from e

                # Chunks already handed to the caller can't be taken back.
                if used_any:
                    logger.info("LLM: stream from model=%s broke mid-answer (%s)", model, e.__class__.__name__)
                    raise RuntimeError(f"LLM stream interrupted on model {model}. Try again.") from e

                if _is_not_found_error(e):
                    self._bad_models[model] = time.monotonic() + BAD_MODEL_COOLDOWN_SECONDS
                    logger.info("LLM: model not available (404): %s", model)
                    continue

                if _is_rate_limit_error(e):
                    logger.info("LLM: rate-limited on model=%s, trying next", model)
                    continue

                if _is_connection_error(e):
                    logger.info("LLM: network/timeout error on model=%s, trying next", model)
                    continue

                logger.info("LLM: error on model=%s (%s), trying next", model, e.__class__.__name__)
                continue

            finally:
                if stream is not None:
                    stream.close()

        if last_error is not None:
            if _is_rate_limit_error(last_error):
                raise RuntimeError("LLM is rate-limited. Try again later.") from last_error
            if _is_connection_error(last_error):
                raise RuntimeError("LLM network/timeout error. Try again later or change models.") from last_error
            raise RuntimeError("All LLM models failed.") from last_error

        raise RuntimeError("All LLM models failed.")
