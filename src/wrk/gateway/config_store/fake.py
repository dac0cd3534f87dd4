"""Fake ConfigStore implementation for testing.

FakeConfigStore keeps the config in memory and records every save,
enabling fast and deterministic tests.
"""

from pathlib import Path

from wrk.core.config import WrkConfig
from wrk.gateway.config_store.abc import ConfigStore


class FakeConfigStore(ConfigStore):
    """In-memory fake implementation that tracks mutations.

    This class has NO public setup methods. All state is provided via constructor.
    """

    def __init__(
        self,
        *,
        config: WrkConfig | None,
        config_path: Path | None = None,
    ) -> None:
        """Create FakeConfigStore with optional initial state.

        Args:
            config: Initial config (None = no config file exists)
            config_path: Reported config location (defaults to /fake/wrk/config.json)
        """
        self._config = config
        self._config_path = config_path if config_path is not None else Path("/fake/wrk/config.json")
        self._saved_configs: list[WrkConfig] = []

    @property
    def saved_configs(self) -> list[WrkConfig]:
        """Get list of configs that were saved.

        Returns a copy to prevent external mutation.
        This property is for test assertions only.
        """
        return list(self._saved_configs)

    @property
    def current_config(self) -> WrkConfig | None:
        """Get current config state.

        This property is for test assertions only.
        """
        return self._config

    def path(self) -> Path:
        return self._config_path

    def exists(self) -> bool:
        return self._config is not None

    def load(self) -> WrkConfig | None:
        return self._config

    def save(self, config: WrkConfig) -> None:
        self._config = config
        self._saved_configs.append(config)
