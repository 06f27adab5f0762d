"""Application entrypoint."""

from __future__ import annotations

import logging
from typing import Awaitable, Callable

import uvicorn
from telegram import Update
from telegram.ext import Application, ApplicationBuilder, ContextTypes, MessageHandler, filters

from quizbot.config import Settings, load_settings
from quizbot.llm.anthropic import AnthropicProvider
from quizbot.llm.openai import OpenAIProvider
from quizbot.orchestrator import QuizOrchestrator
from quizbot.registry import ModelRegistry, Provider
from quizbot.telegram_adapter import TelegramAdapter, to_message
from quizbot.webhook import create_app

LOGGER = logging.getLogger(__name__)

UpdateCallback = Callable[[Update, ContextTypes.DEFAULT_TYPE], Awaitable[None]]


def build_application(settings: Settings) -> Application:
    """Telegram application; updates are handled concurrently so runs can interleave."""

    return (
        ApplicationBuilder()
        .token(settings.telegram_bot_token)
        .base_url(f"{settings.telegram_api_base_url.rstrip('/')}/bot")
        .read_timeout(settings.request_timeout_seconds)
        .write_timeout(settings.request_timeout_seconds)
        .concurrent_updates(True)
        .build()
    )


def build_orchestrator(settings: Settings, adapter: TelegramAdapter) -> QuizOrchestrator:
    """Wire the LLM providers and transport into an orchestrator."""

    return QuizOrchestrator(
        transport=adapter,
        providers={
            Provider.OPENAI: OpenAIProvider(settings),
            Provider.ANTHROPIC: AnthropicProvider(settings),
        },
        registry=ModelRegistry(),
    )


def make_update_callback(orchestrator: QuizOrchestrator) -> UpdateCallback:
    async def on_message(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        message = to_message(update)
        if message is not None:
            await orchestrator.handle_message(message)

    return on_message


def register_handlers(application: Application, orchestrator: QuizOrchestrator) -> None:
    application.add_handler(MessageHandler(filters.UpdateType.MESSAGES, make_update_callback(orchestrator)))


def main() -> None:
    """Start the bot in webhook mode when WEBHOOK_URL is set, else long polling."""

    settings = load_settings()
    logging.basicConfig(level=settings.log_level.upper())

    application = build_application(settings)
    adapter = TelegramAdapter(application.bot)
    orchestrator = build_orchestrator(settings, adapter)

    if settings.webhook_url:
        app = create_app(orchestrator, adapter, webhook_url=settings.webhook_url)
        LOGGER.info("Server is running on port %d", settings.port)
        uvicorn.run(app, host=settings.host, port=settings.port)
    else:
        register_handlers(application, orchestrator)
        LOGGER.info("Polling Telegram for updates")
        application.run_polling(
            timeout=settings.telegram_poll_timeout_seconds,
            allowed_updates=[Update.MESSAGE, Update.EDITED_MESSAGE],
        )
        LOGGER.info("Quiz bot shutdown complete")


if __name__ == "__main__":
    main()
