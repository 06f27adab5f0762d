"""Recover a JSON array from free-form LLM output."""

from __future__ import annotations

import json

from quizbot.errors import ExtractionError


def extract_records(text: str) -> list[object]:
    """Return the outermost JSON array found in ``text``.

    Models often wrap the array in prose or markdown fences, so the slice
    from the first ``[`` to the last ``]`` is parsed rather than the whole
    text.

    Raises:
        ExtractionError: if no bracketed span exists or it is not valid JSON.
    """
    start = text.find("[")
    end = text.rfind("]")
    if start == -1 or end == -1 or start > end:
        raise ExtractionError("no JSON array found in response")
    try:
        parsed = json.loads(text[start : end + 1])
    except json.JSONDecodeError as exc:
        raise ExtractionError(f"invalid JSON in response: {exc}") from exc
    if not isinstance(parsed, list):
        raise ExtractionError("response JSON is not an array")
    return parsed
