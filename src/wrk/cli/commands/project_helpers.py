"""Operations shared by the commands that open or create projects."""

import logging
from dataclasses import replace
from pathlib import Path

from wrk.cli.errors import ConflictError, NotFoundError, WrkError
from wrk.cli.output import user_output
from wrk.cli.setup import save_config
from wrk.core.catalog import workspace_path
from wrk.core.config import WrkConfig
from wrk.core.context import WrkContext
from wrk.gateway.prompter.abc import require_non_empty

logger = logging.getLogger(__name__)


def _make_directory(path: Path) -> None:
    try:
        path.mkdir(parents=True)
    except OSError as e:
        raise WrkError(f"Could not create {path}: {e}") from e


def ensure_workspace_exists(
    ctx: WrkContext,
    config: WrkConfig,
    workspace_name: str,
    *,
    dry_run: bool,
) -> Path | None:
    """Return the workspace directory, offering to create it when missing.

    Returns:
        The workspace directory, or None if the user declined to create it.
        In dry-run mode a missing workspace is reported, not created.
    """
    path = workspace_path(config.workspace, workspace_name, home=ctx.home)
    if path.is_dir():
        return path
    if path.exists():
        raise ConflictError(f"{path} exists and is not a directory")

    if dry_run:
        user_output(f"[DRY RUN] Would create workspace '{workspace_name}' at {path}")
        return path

    if not ctx.prompter.ask_confirm(
        f"Workspace '{workspace_name}' not found. Create it?", default=True
    ):
        return None

    _make_directory(path)
    user_output(f"Created workspace '{workspace_name}' at {path}")
    return path


def prompt_for_project_name(ctx: WrkContext, workspace_name: str) -> str:
    name = ctx.prompter.ask_text(
        f"Enter project name for {workspace_name}:",
        default=None,
        validate=require_non_empty("Project name"),
    )
    return name.strip()


def resolve_ide(ctx: WrkContext, ide: str) -> Path:
    """Find the editor executable or fail with a hint on how to fix it."""
    executable = ctx.ide_launcher.resolve(ide)
    if executable is None:
        raise NotFoundError(
            f"IDE command '{ide}' not found. Set it with: wrk config --set ide=<command>"
        )
    return executable


def launch_ide(ctx: WrkContext, ide: str, target: Path) -> None:
    """Run the editor on target and propagate a nonzero exit code."""
    executable = resolve_ide(ctx, ide)
    try:
        exit_code = ctx.ide_launcher.launch(executable, target)
    except OSError as e:
        raise WrkError(f"Error opening {target} with {ide}: {e}") from e
    if exit_code != 0:
        logger.debug("%s exited with code %d", ide, exit_code)
        raise SystemExit(exit_code)


def open_project(
    ctx: WrkContext,
    config: WrkConfig,
    project_path: Path,
    *,
    ide_override: str | None,
    dry_run: bool,
) -> None:
    """Open a project directory in the editor.

    The path is recorded as the last project before the editor starts, so
    `wrk` with no arguments reopens it even if the launch fails.
    """
    if not project_path.is_dir():
        raise NotFoundError(f"Project not found at {project_path}")

    ide = ide_override or config.ide

    if dry_run:
        user_output(f"[DRY RUN] Would open {project_path}")
        user_output(f"[DRY RUN] IDE command: {ide} {project_path}")
        return

    save_config(ctx, replace(config, last_project_path=str(project_path)))
    launch_ide(ctx, ide, project_path)


def create_project(
    ctx: WrkContext,
    config: WrkConfig,
    workspace_name: str,
    project_name: str | None,
    *,
    ide_override: str | None,
    dry_run: bool,
) -> None:
    """Create a project in a workspace and open it.

    Prompts for the project name when none is given.
    """
    workspace_dir = ensure_workspace_exists(ctx, config, workspace_name, dry_run=dry_run)
    if workspace_dir is None:
        return

    if project_name is None:
        project_name = prompt_for_project_name(ctx, workspace_name)

    project_path = workspace_dir / project_name
    if project_path.exists():
        raise ConflictError(f"Project '{project_name}' already exists in {workspace_name}")

    if dry_run:
        user_output(f"[DRY RUN] Would create project '{project_name}' at {project_path}")
        return

    _make_directory(project_path)
    user_output(f"Created project '{project_name}' at {project_path}")
    open_project(ctx, config, project_path, ide_override=ide_override, dry_run=False)
