"""Commands that print information without loading the config."""

from importlib.metadata import version

from wrk.cli.output import machine_output
from wrk.core.context import WrkContext

HELP_TEXT = """\
wrk - A minimal CLI for quickly opening projects in your IDE

USAGE:
    wrk [COMMAND] [ARGUMENTS] [OPTIONS]

COMMANDS:
    (no command)                   Open the last project you worked on
    <workspace>                    Pick a project from the workspace and open it
    create <workspace> [project]   Create a project (prompts for a name if omitted)
    cd <workspace> <project>       Print a project's path
    list [workspace]               List workspaces, or the projects in one
    config --get <key>             Print a config value (workspace, ide)
    config --set <key>=<value>     Change a config value
    config [--edit]                Open the configuration file in your IDE

OPTIONS:
    -p, --project <name>   Open this project instead of showing the menu
    -i, --ide <command>    Use this IDE command for this run
    --dry-run              Show what would happen without doing it
    --json                 Print `list <workspace>` output as JSON
    --config-path          Print the configuration file path
    --debug                Enable debug logging (must come first)
    -v, --version          Show the version
    -h, --help             Show this help message

EXAMPLES:
    wrk                        # Open last project
    wrk client                 # Open a project from 'client' workspace
    wrk client -p myapp        # Open 'myapp' from 'client' workspace
    wrk create client myapp    # Create and open 'myapp' in 'client'
    cd "$(wrk cd client myapp)"
    wrk list client --json     # List projects in 'client' as JSON
    wrk config --set ide=code  # Use VS Code"""


def show_help() -> None:
    machine_output(HELP_TEXT)


def show_version() -> None:
    machine_output(f"wrk {version('wrk')}")


def show_config_path(ctx: WrkContext) -> None:
    machine_output(str(ctx.config_store.path()))
