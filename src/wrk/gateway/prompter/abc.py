"""Interactive prompt abstraction for testing.

This module provides an ABC for the questions wrk asks (text input,
yes/no confirmation, picking from a list) so commands can be exercised
without a terminal.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

# Returns an error message for invalid input, None when the input is valid
TextValidator = Callable[[str], str | None]


@dataclass(frozen=True)
class Choice(Generic[T]):
    """A selectable menu entry."""

    label: str
    value: T


class Prompter(ABC):
    """Abstract prompt provider for dependency injection."""

    @abstractmethod
    def ask_text(
        self,
        message: str,
        *,
        default: str | None,
        validate: TextValidator | None,
    ) -> str:
        """Ask for a line of text, repeating until validate accepts it.

        Args:
            message: Question shown to the user
            default: Value used when the user just presses enter
            validate: Optional check returning an error message or None

        Returns:
            The entered text, as typed
        """
        ...

    @abstractmethod
    def ask_confirm(self, message: str, *, default: bool) -> bool:
        """Ask a yes/no question.

        Args:
            message: Question shown to the user
            default: Answer used when the user just presses enter

        Returns:
            True if the user confirmed
        """
        ...

    @abstractmethod
    def ask_choice(self, message: str, choices: Sequence[Choice[T]]) -> T:
        """Let the user pick one entry from a non-empty list.

        Args:
            message: Prompt shown above the menu
            choices: Entries to pick from, in display order

        Returns:
            The value of the selected entry
        """
        ...


def require_non_empty(field_name: str) -> TextValidator:
    """Build a validator rejecting blank input."""

    def validate(value: str) -> str | None:
        if not value.strip():
            return f"{field_name} cannot be empty"
        return None

    return validate
