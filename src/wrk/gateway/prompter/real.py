"""Real Prompter implementation using click prompts and a rich menu."""

import sys
from collections.abc import Sequence
from typing import TypeVar

import click
from rich.console import Console
from rich.table import Table

from wrk.gateway.prompter.abc import Choice, Prompter, TextValidator

T = TypeVar("T")


class RealPrompter(Prompter):
    """Production implementation prompting on stderr.

    stdout is left untouched so that output meant for capture stays clean.
    """

    def ask_text(
        self,
        message: str,
        *,
        default: str | None,
        validate: TextValidator | None,
    ) -> str:
        def value_proc(value: str) -> str:
            if validate is not None:
                error = validate(value)
                if error is not None:
                    raise click.BadParameter(error)
            return value

        sys.stderr.flush()
        return click.prompt(message, default=default, value_proc=value_proc, err=True)

    def ask_confirm(self, message: str, *, default: bool) -> bool:
        sys.stderr.flush()
        return click.confirm(message, default=default, err=True)

    def ask_choice(self, message: str, choices: Sequence[Choice[T]]) -> T:
        console = Console(stderr=True)

        table = Table(show_header=False, box=None)
        table.add_column("#", style="dim", no_wrap=True)
        table.add_column("choice", style="cyan")
        for i, choice in enumerate(choices, 1):
            table.add_row(str(i), choice.label)

        console.print(message)
        console.print(table)

        selection = click.prompt(
            "Enter number",
            type=click.IntRange(1, len(choices)),
            default=1,
            err=True,
        )
        return choices[selection - 1].value
