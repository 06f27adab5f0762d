"""Anthropic implementation of LLMProvider."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from quizbot.config import Settings
from quizbot.llm.base import LLMProvider, post_with_retry
from quizbot.models import LLMResponse

_LOGGER = logging.getLogger(__name__)


class AnthropicProvider(LLMProvider):
    """LLM provider using Anthropic's messages endpoint."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    async def generate(self, prompt: str, model: str, temperature: float) -> LLMResponse:
        payload: dict[str, Any] = {
            "model": model,
            "max_tokens": self._settings.anthropic_max_tokens,
            "temperature": temperature,
            "messages": [{"role": "user", "content": prompt}],
        }

        timeout = httpx.Timeout(self._settings.request_timeout_seconds)
        async with httpx.AsyncClient(base_url=self._settings.anthropic_base_url, timeout=timeout) as client:
            data = await post_with_retry(
                client,
                "/messages",
                headers={
                    "x-api-key": self._settings.anthropic_api_key,
                    "anthropic-version": self._settings.anthropic_version,
                    "Content-Type": "application/json",
                },
                payload=payload,
                provider_name="Anthropic",
            )

        # Only text blocks carry the answer; anything else is ignored.
        content = "".join(
            block.get("text", "")
            for block in data.get("content", [])
            if isinstance(block, dict) and block.get("type") == "text"
        )
        _LOGGER.info(
            "Anthropic response: model=%s stop_reason=%r content=%r",
            model,
            data.get("stop_reason"),
            content[:200],
        )
        return LLMResponse(content=content, raw=data)
