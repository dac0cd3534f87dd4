"""Tests for FakeIdeLauncher implementation."""

from pathlib import Path

from wrk.gateway.ide_launcher.fake import FakeIdeLauncher, LaunchCall


def test_resolves_configured_executables_only() -> None:
    launcher = FakeIdeLauncher(executables={"code": Path("/opt/code")})

    assert launcher.resolve("code") == Path("/opt/code")
    assert launcher.resolve("cursor") is None


def test_default_resolves_cursor() -> None:
    assert FakeIdeLauncher().resolve("cursor") == Path("/usr/bin/cursor")


def test_launch_tracks_calls_and_returns_exit_code() -> None:
    launcher = FakeIdeLauncher(exit_code=2)

    assert launcher.launch(Path("/usr/bin/cursor"), Path("/w/a-work/b")) == 2
    assert launcher.launch_calls == [
        LaunchCall(executable=Path("/usr/bin/cursor"), target=Path("/w/a-work/b"))
    ]
