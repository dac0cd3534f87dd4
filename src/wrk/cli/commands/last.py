"""Reopen the most recently opened project."""

from pathlib import Path

from wrk.cli.commands.project_helpers import open_project
from wrk.cli.output import user_output
from wrk.cli.parsing import Command
from wrk.core.config import WrkConfig
from wrk.core.context import WrkContext


def run_last(ctx: WrkContext, config: WrkConfig, command: Command) -> None:
    if config.last_project_path is None:
        user_output("No last project found. Use 'wrk <workspace>' to open a project.")
        return

    project_path = Path(config.last_project_path)
    if not project_path.is_dir():
        user_output("Last project no longer exists. Use 'wrk <workspace>' to open a project.")
        return

    user_output(f"Opening last project: {project_path}")
    open_project(
        ctx,
        config,
        project_path,
        ide_override=command.flags.ide,
        dry_run=command.flags.dry_run,
    )
