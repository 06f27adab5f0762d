from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

from fastapi.testclient import TestClient
from telegram import Bot

from quizbot.models import Message
from quizbot.telegram_adapter import TelegramAdapter
from quizbot.webhook import WEBHOOK_PATH, create_app


def _adapter() -> TelegramAdapter:
    adapter = TelegramAdapter(Bot("123:abc"))
    adapter.initialize = AsyncMock()
    adapter.shutdown = AsyncMock()
    adapter.set_webhook = AsyncMock()
    return adapter


def _app(webhook_url: str | None = None):
    orchestrator = MagicMock()
    orchestrator.handle_message = AsyncMock()
    adapter = _adapter()
    return create_app(orchestrator, adapter, webhook_url=webhook_url), orchestrator, adapter


def _payload(key: str = "message") -> dict:
    return {
        "update_id": 1,
        key: {
            "message_id": 2,
            "date": 1700000000,
            "chat": {"id": 5, "type": "private"},
            "text": "hello",
        },
    }


def test_index_and_healthz():
    app, _, _ = _app()
    with TestClient(app) as client:
        assert client.get("/").text == "Hello World"
        assert client.get("/healthz").json() == {"ok": True}


def test_update_forwarded_to_orchestrator():
    app, orchestrator, _ = _app()

    with TestClient(app) as client:
        response = client.post(WEBHOOK_PATH, json=_payload())

    assert response.status_code == 200
    orchestrator.handle_message.assert_awaited_once_with(
        Message(chat_id=5, text="hello", message_id=2, sender_id=None)
    )


def test_edited_message_forwarded():
    app, orchestrator, _ = _app()

    with TestClient(app) as client:
        client.post(WEBHOOK_PATH, json=_payload("edited_message"))

    orchestrator.handle_message.assert_awaited_once()


def test_update_without_message_acknowledged():
    app, orchestrator, _ = _app()

    with TestClient(app) as client:
        response = client.post(WEBHOOK_PATH, json={"update_id": 1})

    assert response.status_code == 200
    orchestrator.handle_message.assert_not_awaited()


def test_malformed_update_acknowledged():
    app, orchestrator, _ = _app()

    with TestClient(app) as client:
        response = client.post(WEBHOOK_PATH, json={"message": {"text": "no update id"}})

    assert response.status_code == 200
    orchestrator.handle_message.assert_not_awaited()


def test_non_json_body_acknowledged():
    app, orchestrator, _ = _app()

    with TestClient(app) as client:
        response = client.post(WEBHOOK_PATH, content=b"not json", headers={"Content-Type": "application/json"})

    assert response.status_code == 200
    orchestrator.handle_message.assert_not_awaited()


def test_webhook_registered_on_startup():
    app, _, adapter = _app("https://bot.example.com/telegram-webhook")

    with TestClient(app):
        pass

    adapter.initialize.assert_awaited_once()
    adapter.set_webhook.assert_awaited_once_with("https://bot.example.com/telegram-webhook")
    adapter.shutdown.assert_awaited_once()


def test_no_registration_without_url():
    app, _, adapter = _app()

    with TestClient(app):
        pass

    adapter.set_webhook.assert_not_awaited()
