"""Configuration model, on-disk location and the editable key table."""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_IDE = "cursor"
CONFIG_DIR_NAME = "wrk"
CONFIG_FILE_NAME = "config.json"


@dataclass(frozen=True)
class WrkConfig:
    """Persisted user configuration.

    workspace may still contain a leading `~`; it is expanded at use sites.
    """

    workspace: str
    ide: str = DEFAULT_IDE
    last_project_path: str | None = None

    def to_json_dict(self) -> dict[str, str]:
        data = {"workspace": self.workspace, "ide": self.ide}
        if self.last_project_path is not None:
            data["lastProjectPath"] = self.last_project_path
        return data

    @staticmethod
    def from_json_dict(data: Any) -> "WrkConfig":
        """Build a config from decoded JSON.

        Raises:
            ValueError: If the data is not an object or a required field is
                missing, empty or not a string
        """
        if not isinstance(data, dict):
            raise ValueError("Config must be a JSON object")

        workspace = data.get("workspace")
        if not isinstance(workspace, str) or not workspace.strip():
            raise ValueError("Missing 'workspace' in config")

        ide = data.get("ide", DEFAULT_IDE)
        if not isinstance(ide, str) or not ide.strip():
            raise ValueError("Missing 'ide' in config")

        last_project_path = data.get("lastProjectPath")
        if last_project_path is not None and not isinstance(last_project_path, str):
            raise ValueError("'lastProjectPath' must be a string")

        return WrkConfig(
            workspace=workspace.strip(),
            ide=ide.strip(),
            last_project_path=last_project_path or None,
        )


def resolve_config_path(environ: Mapping[str, str], *, home: Path) -> Path:
    """Locate the config file.

    Precedence: $WRK_CONFIG_HOME, then $XDG_CONFIG_HOME, then ~/.config.
    Empty variables are treated as unset.
    """
    config_home = environ.get("WRK_CONFIG_HOME") or environ.get("XDG_CONFIG_HOME")
    base = Path(config_home) if config_home else home / ".config"
    path = (base / CONFIG_DIR_NAME / CONFIG_FILE_NAME).resolve()
    logger.debug("Resolved config path: %s", path)
    return path


@dataclass(frozen=True)
class ConfigField:
    """A user-editable config key."""

    name: str
    description: str
    get: Callable[[WrkConfig], str]
    set: Callable[[WrkConfig, str], WrkConfig]


CONFIG_FIELDS: dict[str, ConfigField] = {
    "workspace": ConfigField(
        name="workspace",
        description="Directory containing the <name>-work workspace folders",
        get=lambda config: config.workspace,
        set=lambda config, value: replace(config, workspace=value),
    ),
    "ide": ConfigField(
        name="ide",
        description="Editor command or path used to open projects",
        get=lambda config: config.ide,
        set=lambda config, value: replace(config, ide=value),
    ),
}


def valid_config_keys() -> str:
    return ", ".join(CONFIG_FIELDS)
