"""Application context with dependency injection."""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from wrk.core.config import resolve_config_path
from wrk.gateway.config_store.abc import ConfigStore
from wrk.gateway.config_store.real import RealConfigStore
from wrk.gateway.ide_launcher.abc import IdeLauncher
from wrk.gateway.ide_launcher.real import RealIdeLauncher
from wrk.gateway.prompter.abc import Prompter
from wrk.gateway.prompter.real import RealPrompter
from wrk.gateway.time.abc import Time
from wrk.gateway.time.real import RealTime


@dataclass(frozen=True)
class WrkContext:
    """Immutable context holding all dependencies for wrk operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.

    The loaded config is deliberately not part of the context: it is loaded
    per command and passed explicitly to the handler that needs it.
    """

    config_store: ConfigStore
    prompter: Prompter
    ide_launcher: IdeLauncher
    time: Time
    home: Path
    environ: Mapping[str, str]

    @staticmethod
    def for_test(
        *,
        home: Path,
        config_store: ConfigStore | None = None,
        prompter: Prompter | None = None,
        ide_launcher: IdeLauncher | None = None,
        time: Time | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> "WrkContext":
        """Create a context wired to fakes, overriding only what a test needs.

        Args:
            home: Home directory used for `~` expansion
            config_store: Defaults to FakeConfigStore with no config
            prompter: Defaults to FakePrompter with no scripted answers
            ide_launcher: Defaults to FakeIdeLauncher resolving "cursor"
            time: Defaults to FakeTime
            environ: Defaults to an empty environment

        Example:
            >>> ctx = WrkContext.for_test(home=tmp_path, config_store=store)
            >>> result = runner.invoke(cli, ["list"], obj=ctx)
        """
        from wrk.gateway.config_store.fake import FakeConfigStore
        from wrk.gateway.ide_launcher.fake import FakeIdeLauncher
        from wrk.gateway.prompter.fake import FakePrompter
        from wrk.gateway.time.fake import FakeTime

        return WrkContext(
            config_store=config_store if config_store is not None else FakeConfigStore(config=None),
            prompter=prompter if prompter is not None else FakePrompter(),
            ide_launcher=ide_launcher if ide_launcher is not None else FakeIdeLauncher(),
            time=time if time is not None else FakeTime(),
            home=home,
            environ=environ if environ is not None else {},
        )


def create_context() -> WrkContext:
    """Create production context with real implementations.

    Called once at CLI entry point. Reads the process environment and home
    directory at call time so tests can monkeypatch them.
    """
    home = Path.home()
    environ = dict(os.environ)
    config_path = resolve_config_path(environ, home=home)
    return WrkContext(
        config_store=RealConfigStore(config_path),
        prompter=RealPrompter(),
        ide_launcher=RealIdeLauncher(home=home),
        time=RealTime(),
        home=home,
        environ=environ,
    )
