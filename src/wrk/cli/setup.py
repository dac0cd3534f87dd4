"""First-run setup and config loading for commands that need a config."""

from wrk.cli.errors import WrkError
from wrk.cli.output import user_output
from wrk.core.config import DEFAULT_IDE, WrkConfig
from wrk.core.context import WrkContext
from wrk.gateway.prompter.abc import require_non_empty


def save_config(ctx: WrkContext, config: WrkConfig) -> None:
    """Persist config, reporting write failures as a WrkError."""
    try:
        ctx.config_store.save(config)
    except OSError as e:
        raise WrkError(f"Could not write config to {ctx.config_store.path()}: {e}") from e


def run_first_run_setup(ctx: WrkContext) -> WrkConfig:
    """Ask for the workspace root and IDE, then save a new config."""
    user_output("Welcome to wrk! Let's set up your configuration.")

    default_workspace = ctx.environ.get("WORKSPACE") or str(ctx.home / "workspace")
    workspace = ctx.prompter.ask_text(
        "Enter your workspace directory path:",
        default=default_workspace,
        validate=require_non_empty("Workspace path"),
    )
    ide = ctx.prompter.ask_text(
        "Enter your preferred IDE command:",
        default=DEFAULT_IDE,
        validate=require_non_empty("IDE command"),
    )

    config = WrkConfig(workspace=workspace.strip(), ide=ide.strip())
    save_config(ctx, config)

    user_output(f"Created config at {ctx.config_store.path()}")
    user_output(f"Workspace set to: {config.workspace}")
    user_output(f"IDE set to: {config.ide}")
    return config


def load_or_create_config(ctx: WrkContext) -> WrkConfig:
    """Load the config, running first-run setup when none is readable."""
    config = ctx.config_store.load()
    if config is not None:
        return config
    return run_first_run_setup(ctx)
