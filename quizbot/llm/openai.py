"""OpenAI implementation of LLMProvider."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from quizbot.config import Settings
from quizbot.llm.base import LLMProvider, post_with_retry
from quizbot.models import LLMResponse

_LOGGER = logging.getLogger(__name__)


class OpenAIProvider(LLMProvider):
    """LLM provider using OpenAI's chat completions endpoint."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    async def generate(self, prompt: str, model: str, temperature: float) -> LLMResponse:
        payload: dict[str, Any] = {
            "model": model,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": temperature,
        }

        timeout = httpx.Timeout(self._settings.request_timeout_seconds)
        async with httpx.AsyncClient(base_url=self._settings.openai_base_url, timeout=timeout) as client:
            data = await post_with_retry(
                client,
                "/chat/completions",
                headers={
                    "Authorization": f"Bearer {self._settings.openai_api_key}",
                    "Content-Type": "application/json",
                },
                payload=payload,
                provider_name="OpenAI",
            )

        choice = data["choices"][0]
        content = choice["message"].get("content") or ""
        _LOGGER.info(
            "OpenAI response: model=%s finish_reason=%r content=%r",
            model,
            choice.get("finish_reason"),
            content[:200],
        )
        return LLMResponse(content=content, raw=data)
