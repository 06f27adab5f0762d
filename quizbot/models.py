"""Core domain models used across layers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True)
class Message:
    """Inbound chat message normalized by the transport adapter."""

    chat_id: int
    text: str | None
    message_id: int | None = None
    sender_id: int | None = None


@dataclass(slots=True)
class LLMResponse:
    """Result from an LLM generation request."""

    content: str
    raw: dict[str, Any] | None = field(default=None, repr=False)
