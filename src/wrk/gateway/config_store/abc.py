"""Config persistence abstraction for testing.

This module provides an ABC for reading and writing the wrk config file so
commands can be tested without touching the user's real configuration.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from wrk.core.config import WrkConfig


class ConfigStore(ABC):
    """Abstract config storage for dependency injection."""

    @abstractmethod
    def path(self) -> Path:
        """Return the location of the config file."""
        ...

    @abstractmethod
    def exists(self) -> bool:
        """Check if the config file exists."""
        ...

    @abstractmethod
    def load(self) -> WrkConfig | None:
        """Load the config.

        Returns:
            The stored config, or None when it is missing or unreadable
        """
        ...

    @abstractmethod
    def save(self, config: WrkConfig) -> None:
        """Write the full config, replacing any previous contents.

        Args:
            config: Config to persist
        """
        ...
