"""Registry of supported models and the provider each one routes to."""

from __future__ import annotations

from enum import Enum
from typing import Mapping


class Provider(str, Enum):
    """Upstream LLM providers."""

    OPENAI = "openai"
    ANTHROPIC = "anthropic"


MODEL_PROVIDERS: dict[str, Provider] = {
    "gpt-4o": Provider.OPENAI,
    "gpt-4o-mini": Provider.OPENAI,
    "gpt-4-turbo": Provider.OPENAI,
    "o1-preview": Provider.OPENAI,
    "claude-3-5-sonnet-latest": Provider.ANTHROPIC,
    "claude-3-5-haiku-latest": Provider.ANTHROPIC,
    "claude-3-opus-latest": Provider.ANTHROPIC,
}

DEFAULT_TEMPERATURE = 0.7

# Reasoning-tier models reject any temperature other than the default of 1.
_FIXED_TEMPERATURE_MODELS: dict[str, float] = {"o1-preview": 1.0}


class ModelRegistry:
    """Fixed lookup table of model names, loaded once and never mutated."""

    def __init__(self, models: Mapping[str, Provider] = MODEL_PROVIDERS) -> None:
        self._models = dict(models)
        self._by_lower = {name.lower(): name for name in self._models}

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._models)

    def resolve(self, token: str) -> str | None:
        """Return the registry spelling of ``token`` or None when unknown.

        Matching is case-insensitive and exact; there is no partial match.
        """
        return self._by_lower.get(token.lower())

    def provider_for(self, name: str) -> Provider:
        return self._models[name]

    def temperature_for(self, name: str) -> float:
        if self.provider_for(name) is Provider.ANTHROPIC:
            return DEFAULT_TEMPERATURE
        return _FIXED_TEMPERATURE_MODELS.get(name, DEFAULT_TEMPERATURE)
