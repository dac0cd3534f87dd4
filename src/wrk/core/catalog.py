"""Workspace and project discovery on the filesystem.

All listing here is best effort: unreadable directories produce empty
results and entries that cannot be stat'ed are skipped.
"""

import logging
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path

from wrk.core.paths import expand_home

logger = logging.getLogger(__name__)

WORKSPACE_SUFFIX = "-work"

# Upper bound on concurrent stat calls
MAX_STAT_WORKERS = 16


@dataclass(frozen=True)
class ProjectInfo:
    """A project directory inside a workspace."""

    name: str
    path: Path
    last_accessed: datetime


def workspace_root(root: str, *, home: Path) -> Path:
    """Expand and resolve the configured workspace root."""
    return Path(expand_home(root, home=home)).resolve()


def workspace_path(root: str, name: str, *, home: Path) -> Path:
    """Directory backing the workspace called name."""
    return workspace_root(root, home=home) / f"{name}{WORKSPACE_SUFFIX}"


def _child_dirs(directory: Path) -> list[Path]:
    try:
        return [entry for entry in directory.iterdir() if entry.is_dir()]
    except OSError as e:
        logger.debug("Cannot read %s: %s", directory, e)
        return []


def list_workspaces(root: str, *, home: Path) -> list[str]:
    """List workspace names under the configured root, sorted by name.

    A workspace is any directory whose name ends with "-work"; the returned
    name has that suffix removed.
    """
    names = [
        entry.name.removesuffix(WORKSPACE_SUFFIX)
        for entry in _child_dirs(workspace_root(root, home=home))
        if entry.name.endswith(WORKSPACE_SUFFIX)
    ]
    return sorted(names)


def _stat_project(path: Path) -> ProjectInfo | None:
    try:
        mtime = path.stat().st_mtime
    except OSError as e:
        logger.debug("Skipping %s: %s", path, e)
        return None
    return ProjectInfo(
        name=path.name,
        path=path,
        last_accessed=datetime.fromtimestamp(mtime, tz=UTC),
    )


def list_projects(workspace_dir: Path) -> list[ProjectInfo]:
    """List projects in a workspace directory, most recently modified first.

    Returns an empty list when the workspace directory does not exist.
    """
    candidates = _child_dirs(workspace_dir)
    if not candidates:
        return []

    workers = min(MAX_STAT_WORKERS, len(candidates))
    with ThreadPoolExecutor(max_workers=workers) as executor:
        results = list(executor.map(_stat_project, candidates))

    projects = [project for project in results if project is not None]
    projects.sort(key=lambda project: project.last_accessed, reverse=True)
    return projects


def count_projects(workspace_dirs: Iterable[Path]) -> list[int]:
    """Count projects in each workspace directory, preserving input order."""
    dirs = list(workspace_dirs)
    if not dirs:
        return []

    workers = min(MAX_STAT_WORKERS, len(dirs))
    with ThreadPoolExecutor(max_workers=workers) as executor:
        return list(executor.map(lambda directory: len(list_projects(directory)), dirs))
