"""Create a project in a workspace: `wrk create <workspace> [project]`."""

from wrk.cli.commands.project_helpers import create_project
from wrk.cli.errors import UsageError
from wrk.cli.parsing import Command
from wrk.core.config import WrkConfig
from wrk.core.context import WrkContext


def run_create(ctx: WrkContext, config: WrkConfig, command: Command) -> None:
    if command.workspace_name is None:
        raise UsageError("Usage: wrk create <workspace> [project]")
    create_project(
        ctx,
        config,
        command.workspace_name,
        command.project_name,
        ide_override=command.flags.ide,
        dry_run=command.flags.dry_run,
    )
