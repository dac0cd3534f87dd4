"""Turn the raw argument list into a Command.

wrk does its own argument resolution instead of using click subcommands
because any token that is not a reserved verb names a workspace:
`wrk client` opens the "client" workspace.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from typing import Literal

from wrk.cli.errors import UsageError

CommandKind = Literal[
    "help",
    "version",
    "config-path",
    "config",
    "list",
    "create",
    "cd",
    "workspace",
    "last",
]

PROJECT_FLAGS = ("--project", "-p")
IDE_FLAGS = ("--ide", "-i")


@dataclass(frozen=True)
class CommandFlags:
    project: str | None = None
    json: bool = False
    dry_run: bool = False
    ide: str | None = None
    get: str | None = None
    set: str | None = None
    edit: bool = False


@dataclass(frozen=True)
class Command:
    kind: CommandKind
    workspace_name: str | None = None
    project_name: str | None = None
    flags: CommandFlags = field(default_factory=CommandFlags)


@dataclass(frozen=True)
class _Scanned:
    workspace_name: str | None
    project_name: str | None
    flags: CommandFlags


def _scan(tokens: Sequence[str]) -> _Scanned:
    """Collect flags and up to two positionals, left to right.

    Unrecognized tokens, including unknown flags, fill the positional slots.
    """
    workspace_name: str | None = None
    project_name: str | None = None
    project: str | None = None
    ide: str | None = None
    json = False
    dry_run = False

    i = 0
    while i < len(tokens):
        token = tokens[i]
        if token == "--json":
            json = True
        elif token == "--dry-run":
            dry_run = True
        elif token in PROJECT_FLAGS:
            if i + 1 >= len(tokens):
                raise UsageError("--project/-p requires a project name")
            i += 1
            project = tokens[i]
        elif token in IDE_FLAGS:
            if i + 1 >= len(tokens):
                raise UsageError("--ide/-i requires an IDE command")
            i += 1
            ide = tokens[i]
        elif workspace_name is None:
            workspace_name = token
        elif project_name is None:
            project_name = token
        i += 1

    return _Scanned(
        workspace_name=workspace_name,
        project_name=project_name,
        flags=CommandFlags(project=project, json=json, dry_run=dry_run, ide=ide),
    )


def _parse_config(args: Sequence[str], flags: CommandFlags) -> Command:
    sub_flag = args[1] if len(args) > 1 else None
    value = args[2] if len(args) > 2 else None

    if sub_flag == "--get":
        if value is None:
            raise UsageError("Usage: wrk config --get <key>")
        return Command(kind="config", flags=replace(flags, get=value))
    if sub_flag == "--set":
        if value is None:
            raise UsageError("Usage: wrk config --set <key>=<value>")
        return Command(kind="config", flags=replace(flags, set=value))
    if sub_flag == "--edit":
        return Command(kind="config", flags=replace(flags, edit=True))
    return Command(kind="config", flags=flags)


def parse_command(args: Sequence[str]) -> Command:
    """Resolve raw CLI arguments (without the program name) into a Command.

    Raises:
        UsageError: If a required positional or a flag value is missing
    """
    if not args:
        return Command(kind="last")

    token = args[0]
    if token in ("--help", "-h"):
        return Command(kind="help")
    if token in ("--version", "-v"):
        return Command(kind="version")
    if token == "--config-path":
        return Command(kind="config-path")

    scanned = _scan(args[1:])

    if token == "config":
        return _parse_config(args, scanned.flags)

    if token == "list":
        return Command(kind="list", workspace_name=scanned.workspace_name, flags=scanned.flags)

    if token == "create":
        if scanned.workspace_name is None:
            raise UsageError("Usage: wrk create <workspace> [project]")
        return Command(
            kind="create",
            workspace_name=scanned.workspace_name,
            project_name=scanned.project_name,
            flags=scanned.flags,
        )

    if token == "cd":
        if scanned.workspace_name is None or scanned.project_name is None:
            raise UsageError("Usage: wrk cd <workspace> <project>")
        return Command(
            kind="cd",
            workspace_name=scanned.workspace_name,
            project_name=scanned.project_name,
            flags=scanned.flags,
        )

    return Command(kind="workspace", workspace_name=token, flags=scanned.flags)
