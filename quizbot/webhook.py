"""FastAPI webhook endpoint receiving Telegram updates."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any, AsyncIterator

from fastapi import BackgroundTasks, FastAPI, Request
from fastapi.responses import PlainTextResponse

if TYPE_CHECKING:
    from quizbot.orchestrator import QuizOrchestrator
    from quizbot.telegram_adapter import TelegramAdapter

LOGGER = logging.getLogger(__name__)

WEBHOOK_PATH = "/telegram-webhook"


def create_app(
    orchestrator: QuizOrchestrator,
    adapter: TelegramAdapter,
    webhook_url: str | None = None,
) -> FastAPI:
    """Build the webhook app; registers ``webhook_url`` with Telegram on startup."""

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        await adapter.initialize()
        if webhook_url:
            await adapter.set_webhook(webhook_url)
        try:
            yield
        finally:
            await adapter.shutdown()

    app = FastAPI(title="quizbot", lifespan=lifespan)

    @app.get("/", response_class=PlainTextResponse)
    def index() -> str:
        return "Hello World"

    @app.get("/healthz")
    def healthz() -> dict[str, bool]:
        return {"ok": True}

    @app.post(WEBHOOK_PATH)
    async def telegram_webhook(request: Request, background_tasks: BackgroundTasks) -> dict[str, bool]:
        # Always acknowledge so Telegram does not redeliver the update.
        try:
            payload: Any = await request.json()
        except ValueError:
            LOGGER.warning("Ignoring webhook call with a non-JSON body")
            return {"ok": True}

        message = adapter.parse_update(payload) if isinstance(payload, dict) else None
        if message is not None:
            background_tasks.add_task(orchestrator.handle_message, message)
        return {"ok": True}

    return app
