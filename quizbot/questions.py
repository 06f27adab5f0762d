"""Validation and normalization of extracted question records."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable

from pydantic import BaseModel, ConfigDict, Field, ValidationError

LOGGER = logging.getLogger(__name__)

# Telegram poll limits.
MAX_QUESTION_LENGTH = 200
MAX_OPTION_LENGTH = 100


class RawQuestionRecord(BaseModel):
    """Shape one LLM-produced record must have before it becomes a question."""

    model_config = ConfigDict(strict=True, extra="ignore", populate_by_name=True)

    question: str = Field(min_length=1)
    options: list[str]
    correct_option_index: int = Field(alias="correctOptionIndex")
    explanation: str | None = None


@dataclass(frozen=True, slots=True)
class QuestionEntity:
    """A quiz question whose text fields fit the poll limits."""

    question_text: str
    options: tuple[str, ...]
    correct_option_index: int
    explanation: str | None = None


def validate_record(raw: Any) -> QuestionEntity | None:
    """Return a QuestionEntity for a well-formed record, else None.

    Text is truncated rather than rejected. The option count and the range
    of the correct index are not checked here; Telegram rejects those at
    send time.
    """
    if not isinstance(raw, dict):
        return None
    try:
        record = RawQuestionRecord.model_validate(raw)
    except ValidationError as exc:
        LOGGER.debug("Dropping malformed question record: %s", exc)
        return None
    return QuestionEntity(
        question_text=record.question[:MAX_QUESTION_LENGTH],
        options=tuple(option[:MAX_OPTION_LENGTH] for option in record.options),
        correct_option_index=record.correct_option_index,
        explanation=record.explanation,
    )


def validate_records(records: Iterable[Any]) -> list[QuestionEntity]:
    """Keep the well-formed records, in their original order."""

    questions: list[QuestionEntity] = []
    for raw in records:
        question = validate_record(raw)
        if question is not None:
            questions.append(question)
    return questions
