"""List workspaces, or the projects in one workspace."""

import json

from wrk.cli.errors import NotFoundError
from wrk.cli.output import machine_output
from wrk.cli.parsing import Command
from wrk.core.catalog import (
    count_projects,
    list_projects,
    list_workspaces,
    workspace_path,
    workspace_root,
)
from wrk.core.config import WrkConfig
from wrk.core.context import WrkContext
from wrk.core.display_utils import format_time_ago


def _list_all_workspaces(ctx: WrkContext, config: WrkConfig) -> None:
    names = list_workspaces(config.workspace, home=ctx.home)

    if not names:
        machine_output("No workspaces found.")
        machine_output(f"Workspace directory: {workspace_root(config.workspace, home=ctx.home)}")
        return

    counts = count_projects(workspace_path(config.workspace, name, home=ctx.home) for name in names)

    machine_output("Available workspaces:")
    for name, count in zip(names, counts, strict=True):
        machine_output(f"  {name} ({count} projects)")


def _list_workspace_projects(
    ctx: WrkContext,
    config: WrkConfig,
    workspace_name: str,
    *,
    as_json: bool,
) -> None:
    workspace_dir = workspace_path(config.workspace, workspace_name, home=ctx.home)
    if not workspace_dir.is_dir():
        raise NotFoundError(f"Workspace '{workspace_name}' not found at {workspace_dir}")

    projects = list_projects(workspace_dir)

    if as_json:
        payload = {
            "workspace": workspace_name,
            "projects": [
                {
                    "name": project.name,
                    "path": str(project.path),
                    "lastAccessed": project.last_accessed.isoformat(),
                }
                for project in projects
            ],
        }
        machine_output(json.dumps(payload, indent=2))
        return

    if not projects:
        machine_output(f"No projects found in {workspace_name}.")
        return

    now = ctx.time.now()
    machine_output(f"Projects in {workspace_name}:")
    for project in projects:
        machine_output(f"  {project.name} ({format_time_ago(project.last_accessed, now=now)})")


def run_list(ctx: WrkContext, config: WrkConfig, command: Command) -> None:
    if command.workspace_name is None:
        _list_all_workspaces(ctx, config)
        return
    _list_workspace_projects(ctx, config, command.workspace_name, as_json=command.flags.json)
