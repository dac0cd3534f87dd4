"""Tests for running wrk with no arguments."""

from pathlib import Path

from click.testing import CliRunner

from wrk.cli.cli import cli
from wrk.core.config import WrkConfig
from tests.test_utils.cli_helpers import assert_cli_success
from tests.test_utils.context_builders import build_test_context, make_project, make_workspace_root


def test_reopens_last_project(tmp_path: Path) -> None:
    root = make_workspace_root(tmp_path)
    project = make_project(root, "client", "myapp")

    ctx = build_test_context(
        tmp_path, config=WrkConfig(workspace=str(root), last_project_path=str(project))
    )
    result = CliRunner().invoke(cli, [], obj=ctx)

    assert_cli_success(result, f"Opening last project: {project}")
    assert [call.target for call in ctx.ide_launcher.launch_calls] == [project]


def test_without_last_project_shows_guidance(tmp_path: Path) -> None:
    ctx = build_test_context(tmp_path, config=WrkConfig(workspace=str(tmp_path)))
    result = CliRunner().invoke(cli, [], obj=ctx)

    assert_cli_success(result, "No last project found. Use 'wrk <workspace>' to open a project.")
    assert ctx.ide_launcher.launch_calls == []


def test_deleted_last_project_shows_guidance(tmp_path: Path) -> None:
    ctx = build_test_context(
        tmp_path,
        config=WrkConfig(workspace=str(tmp_path), last_project_path=str(tmp_path / "gone")),
    )
    result = CliRunner().invoke(cli, [], obj=ctx)

    assert_cli_success(result, "Last project no longer exists.")
    assert ctx.ide_launcher.launch_calls == []
    assert ctx.config_store.saved_configs == []
