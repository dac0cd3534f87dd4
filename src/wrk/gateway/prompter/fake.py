"""Fake Prompter implementation for testing.

FakePrompter answers questions from pre-configured queues and records every
question asked, enabling fast and deterministic tests.
"""

from collections.abc import Sequence
from typing import TypeVar

from wrk.gateway.prompter.abc import Choice, Prompter, TextValidator

T = TypeVar("T")


class FakePrompter(Prompter):
    """In-memory fake implementation that replays scripted answers.

    This class has NO public setup methods. All state is provided via constructor.
    Asking a question with no scripted answer left raises AssertionError.
    """

    def __init__(
        self,
        *,
        text_answers: Sequence[str] = (),
        confirm_answers: Sequence[bool] = (),
        choice_indexes: Sequence[int] = (),
    ) -> None:
        """Create FakePrompter with scripted answers.

        Args:
            text_answers: Answers for ask_text, in order. Must pass validation.
            confirm_answers: Answers for ask_confirm, in order
            choice_indexes: Zero-based indexes picked by ask_choice, in order
        """
        self._text_answers = list(text_answers)
        self._confirm_answers = list(confirm_answers)
        self._choice_indexes = list(choice_indexes)
        self._asked: list[str] = []
        self._offered_choices: list[list[str]] = []

    @property
    def asked(self) -> list[str]:
        """Messages of every question asked, in order.

        This property is for test assertions only.
        """
        return list(self._asked)

    @property
    def offered_choices(self) -> list[list[str]]:
        """Labels offered by each ask_choice call.

        This property is for test assertions only.
        """
        return [list(labels) for labels in self._offered_choices]

    def ask_text(
        self,
        message: str,
        *,
        default: str | None,
        validate: TextValidator | None,
    ) -> str:
        self._asked.append(message)
        assert self._text_answers, f"Unexpected text prompt: {message}"
        answer = self._text_answers.pop(0)
        if validate is not None:
            error = validate(answer)
            assert error is None, f"Scripted answer {answer!r} rejected: {error}"
        return answer

    def ask_confirm(self, message: str, *, default: bool) -> bool:
        self._asked.append(message)
        assert self._confirm_answers, f"Unexpected confirm prompt: {message}"
        return self._confirm_answers.pop(0)

    def ask_choice(self, message: str, choices: Sequence[Choice[T]]) -> T:
        self._asked.append(message)
        self._offered_choices.append([choice.label for choice in choices])
        assert self._choice_indexes, f"Unexpected choice prompt: {message}"
        return choices[self._choice_indexes.pop(0)].value
