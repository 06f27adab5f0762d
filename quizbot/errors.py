"""Error taxonomy for the quiz generation pipeline."""

from __future__ import annotations


class QuizBotError(Exception):
    """Base class for errors raised by quizbot."""


class UserInputError(QuizBotError):
    """The inbound command was malformed or named an unknown model."""


class UpstreamGenerationError(QuizBotError):
    """The LLM call failed or its output could not be used."""


class ExtractionError(UpstreamGenerationError):
    """No JSON array could be recovered from the LLM response text."""


class ChannelRejectionError(QuizBotError):
    """The chat transport rejected a request."""
