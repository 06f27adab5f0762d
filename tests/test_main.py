from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest
from telegram import Update
from telegram.ext import MessageHandler

from quizbot.config import Settings
from quizbot.llm.anthropic import AnthropicProvider
from quizbot.llm.openai import OpenAIProvider
from quizbot.main import build_application, build_orchestrator, make_update_callback, register_handlers
from quizbot.models import Message
from quizbot.orchestrator import QuizOrchestrator
from quizbot.registry import Provider


def _settings() -> Settings:
    return Settings(_env_file=None, TELEGRAM_BOT_TOKEN="123:abc")


def _update(text: str, key: str = "message") -> Update:
    return Update.de_json(
        {
            "update_id": 1,
            key: {
                "message_id": 2,
                "date": 1700000000,
                "chat": {"id": 5, "type": "group"},
                "text": text,
            },
        },
        None,
    )


def test_settings_defaults(monkeypatch):
    for name in ("WEBHOOK_URL", "PORT", "OPENAI_API_KEY", "ANTHROPIC_API_KEY"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "bot-token")

    settings = Settings(_env_file=None)

    assert settings.telegram_bot_token == "bot-token"
    assert settings.port == 5000
    assert settings.webhook_url is None
    assert settings.openai_api_key == ""


def test_build_orchestrator_wires_both_providers():
    orchestrator = build_orchestrator(_settings(), MagicMock())

    assert isinstance(orchestrator, QuizOrchestrator)
    assert isinstance(orchestrator._providers[Provider.OPENAI], OpenAIProvider)
    assert isinstance(orchestrator._providers[Provider.ANTHROPIC], AnthropicProvider)


def test_build_application_uses_token():
    application = build_application(_settings())

    assert application.bot.token == "123:abc"


def test_register_handlers_adds_message_handler():
    application = MagicMock()

    register_handlers(application, MagicMock())

    [handler] = application.add_handler.call_args.args
    assert isinstance(handler, MessageHandler)


@pytest.mark.asyncio
async def test_update_callback_forwards_message():
    orchestrator = MagicMock()
    orchestrator.handle_message = AsyncMock()

    await make_update_callback(orchestrator)(_update("/make_mcq gpt-4o text"), MagicMock())

    orchestrator.handle_message.assert_awaited_once_with(
        Message(chat_id=5, text="/make_mcq gpt-4o text", message_id=2, sender_id=None)
    )


@pytest.mark.asyncio
async def test_update_callback_forwards_edited_message():
    orchestrator = MagicMock()
    orchestrator.handle_message = AsyncMock()

    await make_update_callback(orchestrator)(_update("hello", key="edited_message"), MagicMock())

    assert orchestrator.handle_message.await_args.args[0].text == "hello"


@pytest.mark.asyncio
async def test_update_callback_ignores_updates_without_message():
    orchestrator = MagicMock()
    orchestrator.handle_message = AsyncMock()

    await make_update_callback(orchestrator)(Update(update_id=9), MagicMock())

    orchestrator.handle_message.assert_not_awaited()
