"""Print a project's path for shell capture: `cd "$(wrk cd <workspace> <project>)"`."""

from wrk.cli.commands.project_helpers import ensure_workspace_exists
from wrk.cli.errors import NotFoundError, UsageError
from wrk.cli.output import machine_output, user_output
from wrk.cli.parsing import Command
from wrk.core.config import WrkConfig
from wrk.core.context import WrkContext


def run_cd(ctx: WrkContext, config: WrkConfig, command: Command) -> None:
    """Print the absolute project path and nothing else on stdout."""
    if command.workspace_name is None or command.project_name is None:
        raise UsageError("Usage: wrk cd <workspace> <project>")

    workspace_dir = ensure_workspace_exists(
        ctx, config, command.workspace_name, dry_run=command.flags.dry_run
    )
    if workspace_dir is None:
        return

    project_path = workspace_dir / command.project_name
    if not project_path.is_dir():
        raise NotFoundError(
            f"Project '{command.project_name}' not found in {command.workspace_name}"
        )

    if command.flags.dry_run:
        user_output(f"[DRY RUN] Would change directory to {project_path}")
        return

    machine_output(str(project_path))
