"""LLM provider interface."""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Any

import httpx

from quizbot.models import LLMResponse

_LOGGER = logging.getLogger(__name__)

_MAX_RETRIES = 3
_RETRY_BACKOFF_SECONDS = [5, 15, 45]


class LLMProvider(ABC):
    """Abstract model provider used by the quiz orchestrator."""

    @abstractmethod
    async def generate(self, prompt: str, model: str, temperature: float) -> LLMResponse:
        """Generate a model response for a single user prompt."""


async def post_with_retry(
    client: httpx.AsyncClient,
    path: str,
    *,
    headers: dict[str, str],
    payload: dict[str, Any],
    provider_name: str,
) -> dict[str, Any]:
    """POST ``payload`` and return the JSON body, retrying on HTTP 429.

    Raises:
        httpx.HTTPStatusError: for any other error status, or once retries run out.
    """
    for attempt in range(_MAX_RETRIES + 1):
        response = await client.post(path, headers=headers, json=payload)
        if response.status_code == 429 and attempt < _MAX_RETRIES:
            wait = _RETRY_BACKOFF_SECONDS[attempt]
            _LOGGER.warning(
                "%s rate limited (429), retrying in %ds (attempt %d/%d)",
                provider_name,
                wait,
                attempt + 1,
                _MAX_RETRIES,
            )
            await asyncio.sleep(wait)
            continue
        response.raise_for_status()
        break
    return response.json()
