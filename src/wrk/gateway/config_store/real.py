"""Real ConfigStore implementation backed by a JSON file."""

import json
import logging
from pathlib import Path

from wrk.core.config import WrkConfig
from wrk.gateway.config_store.abc import ConfigStore

logger = logging.getLogger(__name__)


class RealConfigStore(ConfigStore):
    """Production implementation that reads and writes a JSON config file."""

    def __init__(self, config_path: Path) -> None:
        self._config_path = config_path

    def path(self) -> Path:
        return self._config_path

    def exists(self) -> bool:
        return self._config_path.is_file()

    def load(self) -> WrkConfig | None:
        """Load the config file.

        Missing files return None. Malformed JSON, invalid fields and read
        errors are logged and also return None so the caller can fall back
        to first-run setup.
        """
        if not self._config_path.exists():
            return None

        try:
            data = json.loads(self._config_path.read_text(encoding="utf-8"))
            return WrkConfig.from_json_dict(data)
        except (OSError, ValueError) as e:
            logger.warning("Could not load config from %s: %s", self._config_path, e)
            return None

    def save(self, config: WrkConfig) -> None:
        """Write the config as 2-space indented JSON.

        Raises:
            OSError: If the directory or file cannot be written
        """
        self._config_path.parent.mkdir(parents=True, exist_ok=True)
        content = json.dumps(config.to_json_dict(), indent=2) + "\n"
        self._config_path.write_text(content, encoding="utf-8")
