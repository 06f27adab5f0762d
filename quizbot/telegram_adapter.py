"""Telegram adapter built on python-telegram-bot."""

from __future__ import annotations

import logging
from typing import Any, Sequence

from telegram import Bot, Poll, Update
from telegram.error import TelegramError

from quizbot.errors import ChannelRejectionError
from quizbot.models import Message

LOGGER = logging.getLogger(__name__)


class TelegramAPIError(ChannelRejectionError):
    """Telegram rejected a Bot API request."""

    def __init__(self, method: str, description: str) -> None:
        super().__init__(f"{method} failed: {description}")
        self.method = method
        self.description = description


class TelegramAdapter:
    """Thin wrapper around ``telegram.Bot`` exposing the calls the bot needs."""

    def __init__(self, bot: Bot) -> None:
        self._bot = bot

    @property
    def bot(self) -> Bot:
        return self._bot

    async def initialize(self) -> None:
        await self._bot.initialize()

    async def shutdown(self) -> None:
        await self._bot.shutdown()

    async def send_message(self, chat_id: int, text: str) -> None:
        """Send a plain text message to a chat."""

        try:
            await self._bot.send_message(chat_id=chat_id, text=text)
        except TelegramError as exc:
            raise TelegramAPIError("sendMessage", exc.message) from exc

    async def send_poll(
        self,
        chat_id: int,
        question: str,
        options: Sequence[str],
        *,
        correct_option_id: int,
        explanation: str | None = None,
        is_anonymous: bool = False,
    ) -> None:
        """Send a quiz poll; Telegram reveals the correct option after a vote."""

        try:
            await self._bot.send_poll(
                chat_id=chat_id,
                question=question,
                options=list(options),
                type=Poll.QUIZ,
                correct_option_id=correct_option_id,
                explanation=explanation,
                is_anonymous=is_anonymous,
            )
        except TelegramError as exc:
            raise TelegramAPIError("sendPoll", exc.message) from exc

    async def set_webhook(self, url: str) -> None:
        try:
            await self._bot.set_webhook(url=url, allowed_updates=[Update.MESSAGE, Update.EDITED_MESSAGE])
        except TelegramError as exc:
            raise TelegramAPIError("setWebhook", exc.message) from exc
        LOGGER.info("Telegram bot webhook set to: %s", url)

    def parse_update(self, payload: dict[str, Any]) -> Message | None:
        """Decode a webhook payload into a Message, or None if it carries none."""

        try:
            update = Update.de_json(payload, self._bot)
        except (KeyError, TypeError, ValueError) as exc:
            LOGGER.warning("Ignoring undecodable Telegram update: %s", exc)
            return None
        if update is None:
            return None
        return to_message(update)


def to_message(update: Update) -> Message | None:
    """Normalize a new or edited message update into a Message."""

    message = update.message or update.edited_message
    if message is None:
        return None
    return Message(
        chat_id=message.chat.id,
        text=message.text,
        message_id=message.message_id,
        sender_id=message.from_user.id if message.from_user else None,
    )
