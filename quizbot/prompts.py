"""Prompt template for quiz generation."""

from __future__ import annotations

_QUIZ_PROMPT = """
You are a test question generator.
Given the following content, create multiple-choice questions in JSON format.
Each question should have:
  - question: The question text
  - options: An array of possible answers
  - correctOptionIndex: The index (0-based) of the correct answer in the options array
  - explanation: Explanation of the correct answer
Content:
{content}

Return ONLY valid JSON; do not include additional text.
Example of the JSON structure:
[
  {{
    "question": "Sample question?",
    "options": ["Option A", "Option B", "Option C", "Option D"],
    "correctOptionIndex": 2,
    "explanation": "Explanation of the correct answer"
  }},
  ...
]
"""


def build_quiz_prompt(content: str) -> str:
    """Render the generation prompt around the user's source content."""

    return _QUIZ_PROMPT.format(content=content)
