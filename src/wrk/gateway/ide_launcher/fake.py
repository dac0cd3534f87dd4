"""Fake IdeLauncher implementation for testing.

FakeIdeLauncher resolves commands from a configured table and records
launches instead of spawning processes.
"""

from dataclasses import dataclass
from pathlib import Path

from wrk.gateway.ide_launcher.abc import IdeLauncher


@dataclass(frozen=True)
class LaunchCall:
    """Record of an editor launch for test assertions."""

    executable: Path
    target: Path


class FakeIdeLauncher(IdeLauncher):
    """In-memory fake implementation that tracks launch calls.

    This class has NO public setup methods. All state is provided via constructor.
    """

    def __init__(
        self,
        *,
        executables: dict[str, Path] | None = None,
        exit_code: int = 0,
    ) -> None:
        """Create FakeIdeLauncher.

        Args:
            executables: IDE command -> executable path for every command that
                resolves. Defaults to {"cursor": Path("/usr/bin/cursor")}.
            exit_code: Exit code returned by every launch
        """
        self._executables = (
            executables if executables is not None else {"cursor": Path("/usr/bin/cursor")}
        )
        self._exit_code = exit_code
        self._launch_calls: list[LaunchCall] = []

    @property
    def launch_calls(self) -> list[LaunchCall]:
        """Get the list of launches that were made.

        Returns a copy of the list to prevent external mutation.

        This property is for test assertions only.
        """
        return list(self._launch_calls)

    def resolve(self, ide: str) -> Path | None:
        return self._executables.get(ide)

    def launch(self, executable: Path, target: Path) -> int:
        self._launch_calls.append(LaunchCall(executable=executable, target=target))
        return self._exit_code
