"""Open a project from a workspace: `wrk <workspace>`."""

from wrk.cli.commands.project_helpers import create_project, ensure_workspace_exists, open_project
from wrk.cli.errors import NotFoundError, UsageError
from wrk.cli.parsing import Command
from wrk.core.catalog import list_projects
from wrk.core.config import WrkConfig
from wrk.core.context import WrkContext
from wrk.core.display_utils import format_time_ago
from wrk.gateway.prompter.abc import Choice


def run_workspace(ctx: WrkContext, config: WrkConfig, command: Command) -> None:
    """Pick a project in the workspace and open it.

    With --project the project is looked up by exact name instead of
    showing the menu. An empty workspace offers to create a project.
    """
    if command.workspace_name is None:
        raise UsageError("Usage: wrk <workspace> [--project <name>]")
    workspace_name = command.workspace_name
    flags = command.flags

    workspace_dir = ensure_workspace_exists(ctx, config, workspace_name, dry_run=flags.dry_run)
    if workspace_dir is None:
        return

    projects = list_projects(workspace_dir)

    if not projects:
        if ctx.prompter.ask_confirm(
            f"No projects found in {workspace_name}. Create a new project?", default=True
        ):
            create_project(
                ctx,
                config,
                workspace_name,
                None,
                ide_override=flags.ide,
                dry_run=flags.dry_run,
            )
        return

    if flags.project is not None:
        matches = [project for project in projects if project.name == flags.project]
        if not matches:
            available = ", ".join(project.name for project in projects)
            raise NotFoundError(
                f"Project '{flags.project}' not found in {workspace_name}. "
                f"Available projects: {available}"
            )
        selected = matches[0].path
    else:
        now = ctx.time.now()
        choices = [
            Choice(
                label=f"{project.name} ({format_time_ago(project.last_accessed, now=now)})",
                value=project.path,
            )
            for project in projects
        ]
        selected = ctx.prompter.ask_choice("Select a project:", choices)

    open_project(ctx, config, selected, ide_override=flags.ide, dry_run=flags.dry_run)
