"""User-facing CLI errors.

Every error a command can report is a WrkError. Click's standalone mode
catches them, calls show() and exits with exit_code, so handlers simply
raise and never call sys.exit themselves.
"""

from typing import IO

import click


class WrkError(click.ClickException):
    """Base class for errors reported as a single line with exit code 1."""

    exit_code = 1

    def show(self, file: IO[str] | None = None) -> None:
        click.echo(click.style("Error: ", fg="red") + self.format_message(), file=file, err=True)


class UsageError(WrkError):
    """Malformed invocation: a missing positional or a flag without its value."""


class NotFoundError(WrkError):
    """A workspace, project, config key or IDE executable does not exist."""


class ConflictError(WrkError):
    """The target of a create already exists."""
