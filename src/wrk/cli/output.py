"""Output helpers that separate user-facing messages from capturable data.

user_output goes to stderr so that commands like `wrk cd` can be wrapped in
shell substitution. machine_output goes to stdout.
"""

import click


def user_output(message: str = "") -> None:
    """Write a human-facing message to stderr."""
    click.echo(message, err=True)


def machine_output(message: str = "") -> None:
    """Write data meant for capture (paths, JSON, config values) to stdout."""
    click.echo(message)

