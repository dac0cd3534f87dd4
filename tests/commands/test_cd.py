"""Tests for wrk cd."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from wrk.cli.cli import cli
from wrk.cli.commands.cd import run_cd
from wrk.cli.errors import UsageError
from wrk.cli.parsing import Command
from wrk.core.config import WrkConfig
from wrk.gateway.prompter.fake import FakePrompter
from tests.test_utils.cli_helpers import assert_cli_error, assert_cli_success
from tests.test_utils.context_builders import build_test_context, make_project, make_workspace_root


def test_cd_prints_only_the_project_path(tmp_path: Path) -> None:
    root = make_workspace_root(tmp_path)
    project = make_project(root, "client", "myapp")

    ctx = build_test_context(tmp_path, config=WrkConfig(workspace=str(root)))
    result = CliRunner().invoke(cli, ["cd", "client", "myapp"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert result.output == f"{project.resolve()}\n"


def test_cd_has_no_side_effects(tmp_path: Path) -> None:
    root = make_workspace_root(tmp_path)
    make_project(root, "client", "myapp")

    ctx = build_test_context(tmp_path, config=WrkConfig(workspace=str(root)))
    CliRunner().invoke(cli, ["cd", "client", "myapp"], obj=ctx)

    assert ctx.config_store.saved_configs == []
    assert ctx.ide_launcher.launch_calls == []


def test_cd_dry_run_reports_instead(tmp_path: Path) -> None:
    root = make_workspace_root(tmp_path)
    project = make_project(root, "client", "myapp")

    ctx = build_test_context(tmp_path, config=WrkConfig(workspace=str(root)))
    result = CliRunner().invoke(cli, ["cd", "client", "myapp", "--dry-run"], obj=ctx)

    assert_cli_success(result, f"[DRY RUN] Would change directory to {project.resolve()}")


def test_cd_missing_project_fails(tmp_path: Path) -> None:
    root = make_workspace_root(tmp_path)
    make_project(root, "client", "myapp")

    ctx = build_test_context(tmp_path, config=WrkConfig(workspace=str(root)))
    result = CliRunner().invoke(cli, ["cd", "client", "other"], obj=ctx)

    assert_cli_error(result, 1, "Project 'other' not found in client")


def test_cd_declining_workspace_creation_exits_cleanly(tmp_path: Path) -> None:
    root = make_workspace_root(tmp_path)

    ctx = build_test_context(
        tmp_path,
        config=WrkConfig(workspace=str(root)),
        prompter=FakePrompter(confirm_answers=[False]),
    )
    result = CliRunner().invoke(cli, ["cd", "client", "myapp"], obj=ctx)

    assert_cli_success(result)
    assert not (root / "client-work").exists()


def test_cd_requires_both_names(tmp_path: Path) -> None:
    ctx = build_test_context(tmp_path, config=WrkConfig(workspace=str(tmp_path)))
    result = CliRunner().invoke(cli, ["cd", "client"], obj=ctx)

    assert_cli_error(result, 1, "Usage: wrk cd <workspace> <project>")


def test_run_cd_rejects_command_without_names(tmp_path: Path) -> None:
    ctx = build_test_context(tmp_path)

    with pytest.raises(UsageError, match="Usage: wrk cd <workspace> <project>"):
        run_cd(
            ctx,
            WrkConfig(workspace=str(tmp_path)),
            Command(kind="cd", workspace_name="client"),
        )
