"""Read, change or edit the configuration: `wrk config [--get|--set|--edit]`."""

from wrk.cli.commands.project_helpers import launch_ide
from wrk.cli.errors import NotFoundError, UsageError
from wrk.cli.output import machine_output, user_output
from wrk.cli.parsing import Command
from wrk.cli.setup import save_config
from wrk.core.config import CONFIG_FIELDS, ConfigField, WrkConfig, valid_config_keys
from wrk.core.context import WrkContext


def _lookup_field(key: str) -> ConfigField:
    field = CONFIG_FIELDS.get(key)
    if field is None:
        raise NotFoundError(f"Unknown config key: {key}. Valid keys: {valid_config_keys()}")
    return field


def _config_get(config: WrkConfig, key: str) -> None:
    machine_output(_lookup_field(key).get(config))


def _config_set(ctx: WrkContext, config: WrkConfig, assignment: str) -> None:
    """Apply a `key=value` assignment; the value may itself contain '='."""
    key, _, raw_value = assignment.partition("=")
    field = _lookup_field(key.strip())

    value = raw_value.strip()
    if not value:
        raise UsageError(f"Value for '{field.name}' cannot be empty")

    save_config(ctx, field.set(config, value))
    user_output(f"Set {field.name}={value}")


def _config_edit(ctx: WrkContext, config: WrkConfig, ide_override: str | None) -> None:
    if not ctx.config_store.exists():
        user_output("Config file does not exist. Run wrk to create it.")
        return
    launch_ide(ctx, ide_override or config.ide, ctx.config_store.path())


def run_config(ctx: WrkContext, config: WrkConfig, command: Command) -> None:
    flags = command.flags
    if flags.get is not None:
        _config_get(config, flags.get)
    elif flags.set is not None:
        _config_set(ctx, config, flags.set)
    else:
        _config_edit(ctx, config, flags.ide)
