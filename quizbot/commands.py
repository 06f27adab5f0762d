"""Parsing of the /make_mcq command.

Any text whose first token is not the trigger is not a command and gets
the help reply instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

TRIGGER = "/make_mcq"


@dataclass(frozen=True, slots=True)
class Command:
    """A parsed ``/make_mcq <model> <content...>`` message.

    ``keyword`` is the trigger, optionally addressed to a bot as
    ``/make_mcq@BotName`` the way Telegram group chats send commands.
    """

    keyword: str
    model_token: str
    content: str

    @property
    def missing_content(self) -> bool:
        return not self.content

    @property
    def missing_model(self) -> bool:
        return not self.model_token


def is_trigger(token: str) -> bool:
    return token == TRIGGER or token.startswith(f"{TRIGGER}@")


def parse_command(text: str) -> Command | None:
    """Split a trigger message into (keyword, model token, content).

    Returns:
        A Command, or None if the first token is not the trigger. Tokens
        are split on single spaces; everything after the model token is
        rejoined with single spaces to form the content.
    """
    keyword, *rest = text.split(" ")
    if not is_trigger(keyword):
        return None
    model_token = rest[0] if rest else ""
    content = " ".join(rest[1:])
    return Command(keyword=keyword, model_token=model_token, content=content)


def help_text(model_names: Iterable[str]) -> str:
    return (
        f"Hello! Use {TRIGGER} <model> <prompt> to generate MCQs, supported models are: \n\n "
        + ", ".join(model_names)
    )
