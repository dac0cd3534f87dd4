import logging
from collections.abc import Callable

import click

from wrk.cli.commands.cd import run_cd
from wrk.cli.commands.config import run_config
from wrk.cli.commands.create import run_create
from wrk.cli.commands.info import show_config_path, show_help, show_version
from wrk.cli.commands.last import run_last
from wrk.cli.commands.list_cmd import run_list
from wrk.cli.commands.workspace import run_workspace
from wrk.cli.parsing import Command, CommandKind, parse_command
from wrk.cli.setup import load_or_create_config
from wrk.core.config import WrkConfig
from wrk.core.context import WrkContext, create_context

logger = logging.getLogger(__name__)

CommandHandler = Callable[[WrkContext, WrkConfig, Command], None]

# Commands that need a loaded config; the rest never touch it
CONFIG_HANDLERS: dict[CommandKind, CommandHandler] = {
    "last": run_last,
    "workspace": run_workspace,
    "create": run_create,
    "cd": run_cd,
    "list": run_list,
    "config": run_config,
}

# Our own parser handles every token, including -h/--help and unknown flags
CONTEXT_SETTINGS = dict(
    help_option_names=[],
    ignore_unknown_options=True,
    allow_interspersed_args=False,
)


def dispatch(ctx: WrkContext, command: Command) -> None:
    """Run a parsed command against the given context."""
    if command.kind == "help":
        show_help()
        return
    if command.kind == "version":
        show_version()
        return
    if command.kind == "config-path":
        show_config_path(ctx)
        return

    config = load_or_create_config(ctx)
    CONFIG_HANDLERS[command.kind](ctx, config, command)


@click.command("wrk", context_settings=CONTEXT_SETTINGS)
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(ctx: click.Context, debug: bool, args: tuple[str, ...]) -> None:
    """Open workspace projects in your IDE. Run `wrk --help` for usage."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context()

    command = parse_command(args)
    logger.debug("Parsed command: %s", command)
    dispatch(ctx.obj, command)
