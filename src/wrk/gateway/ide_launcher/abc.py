"""IDE launcher abstraction for testing.

This module provides an ABC for locating and running the configured editor
so commands can be tested without spawning processes.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class IdeLauncher(ABC):
    """Abstract editor launcher for dependency injection."""

    @abstractmethod
    def resolve(self, ide: str) -> Path | None:
        """Find the executable for an IDE command.

        Args:
            ide: Command name (looked up on PATH) or a filesystem path,
                possibly starting with `~`

        Returns:
            Path to the executable, or None if it cannot be found
        """
        ...

    @abstractmethod
    def launch(self, executable: Path, target: Path) -> int:
        """Run the editor on target, inheriting the terminal's stdio.

        Args:
            executable: Path returned by resolve()
            target: Directory or file to open

        Returns:
            The editor's exit code
        """
        ...
