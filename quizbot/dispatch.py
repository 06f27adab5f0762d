"""Sequential quiz poll dispatch."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Sequence

from quizbot.questions import QuestionEntity

if TYPE_CHECKING:
    from quizbot.telegram_adapter import TelegramAdapter

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class DispatchOutcome:
    """Result of one poll send attempt."""

    question: QuestionEntity
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class PollDispatcher:
    """Sends questions as quiz polls, one at a time and in order.

    A failed send is reported to the chat and never stops the rest of the
    batch. Polls already sent are not rolled back.
    """

    def __init__(self, transport: TelegramAdapter) -> None:
        self._transport = transport

    async def dispatch(self, chat_id: int, questions: Sequence[QuestionEntity]) -> list[DispatchOutcome]:
        outcomes: list[DispatchOutcome] = []
        for index, question in enumerate(questions):
            try:
                await self._transport.send_poll(
                    chat_id,
                    question.question_text,
                    question.options,
                    correct_option_id=question.correct_option_index,
                    explanation=question.explanation,
                    is_anonymous=False,
                )
            except Exception as exc:  # noqa: BLE001
                LOGGER.warning("Error sending poll %d to chat %s: %s", index, chat_id, exc)
                outcomes.append(DispatchOutcome(question=question, error=str(exc)))
                await self._report_failure(chat_id, exc)
                continue
            outcomes.append(DispatchOutcome(question=question))
        return outcomes

    async def _report_failure(self, chat_id: int, exc: Exception) -> None:
        try:
            await self._transport.send_message(
                chat_id,
                f"Oops, something went wrong while sending the poll: {exc}",
            )
        except Exception:  # noqa: BLE001
            LOGGER.exception("Could not report poll failure to chat %s", chat_id)
