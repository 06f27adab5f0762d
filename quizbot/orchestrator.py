"""Per-message quiz generation pipeline."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Mapping

from quizbot.commands import Command, help_text, parse_command
from quizbot.dispatch import PollDispatcher
from quizbot.errors import ExtractionError, UserInputError
from quizbot.extraction import extract_records
from quizbot.models import Message
from quizbot.prompts import build_quiz_prompt
from quizbot.questions import validate_records
from quizbot.registry import ModelRegistry, Provider

if TYPE_CHECKING:
    from quizbot.llm.base import LLMProvider
    from quizbot.telegram_adapter import TelegramAdapter

LOGGER = logging.getLogger(__name__)

MISSING_CONTENT_REPLY = "Please provide the content to generate MCQ questions from."
MISSING_MODEL_REPLY = "Please provide the model name to generate MCQ questions from."
INVALID_MODEL_REPLY = "Please provide a valid model name to generate MCQ questions from."
GENERATION_ERROR_REPLY = "Oops, something went wrong while generating MCQs."
INVALID_JSON_REPLY = "Sorry, the AI returned invalid JSON. Please try again."


def summary_text(count: int) -> str:
    return f"Done! I have created {count} MCQ question polls."


class QuizOrchestrator:
    """Runs parse, generate, extract, validate and dispatch for one message.

    Holds no per-message state, so concurrent messages never interfere.
    """

    def __init__(
        self,
        transport: TelegramAdapter,
        providers: Mapping[Provider, LLMProvider],
        registry: ModelRegistry | None = None,
        dispatcher: PollDispatcher | None = None,
    ) -> None:
        self._transport = transport
        self._providers = dict(providers)
        self._registry = registry or ModelRegistry()
        self._dispatcher = dispatcher or PollDispatcher(transport)

    async def handle_message(self, message: Message) -> None:
        """Handle one inbound message. Never raises."""

        try:
            await self._process(message)
        except Exception:  # noqa: BLE001
            LOGGER.exception("Error processing message from chat %s", message.chat_id)

    async def _process(self, message: Message) -> None:
        if not message.text:
            return
        chat_id = message.chat_id

        command = parse_command(message.text)
        if command is None:
            await self._transport.send_message(chat_id, help_text(self._registry.names))
            return

        try:
            model = self._resolve_model(command)
        except UserInputError as exc:
            await self._transport.send_message(chat_id, str(exc))
            return

        prompt = build_quiz_prompt(command.content)
        provider = self._registry.provider_for(model)
        temperature = self._registry.temperature_for(model)
        LOGGER.info(
            "Generating MCQs: chat=%s model=%s provider=%s content_chars=%d",
            chat_id,
            model,
            provider.value,
            len(command.content),
        )

        try:
            response = await self._providers[provider].generate(prompt, model=model, temperature=temperature)
        except Exception:  # noqa: BLE001
            LOGGER.exception("Error creating MCQ via %s", model)
            await self._transport.send_message(chat_id, GENERATION_ERROR_REPLY)
            return

        try:
            records = extract_records(response.content)
        except ExtractionError as exc:
            LOGGER.warning("Failed to parse JSON from %s (%s): %r", model, exc, response.content[:500])
            await self._transport.send_message(chat_id, INVALID_JSON_REPLY)
            return

        questions = validate_records(records)
        LOGGER.info("Extracted %d records, %d valid questions", len(records), len(questions))

        outcomes = await self._dispatcher.dispatch(chat_id, questions)
        failed = sum(1 for outcome in outcomes if not outcome.ok)
        if failed:
            LOGGER.warning("%d of %d polls failed for chat %s", failed, len(outcomes), chat_id)

        # Counts attempted sends, so failed polls are included.
        await self._transport.send_message(chat_id, summary_text(len(outcomes)))

    def _resolve_model(self, command: Command) -> str:
        """Return the registry model for a command, checked before any LLM call."""

        if command.missing_content:
            raise UserInputError(MISSING_CONTENT_REPLY)
        if command.missing_model:
            raise UserInputError(MISSING_MODEL_REPLY)
        model = self._registry.resolve(command.model_token)
        if model is None:
            supported = ", ".join(self._registry.names)
            raise UserInputError(f"{INVALID_MODEL_REPLY}\nSupported models are: {supported}")
        return model
