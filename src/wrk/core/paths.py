"""Home directory expansion for configured paths."""

from pathlib import Path


def expand_home(path: str, *, home: Path) -> str:
    """Replace a leading `~` path component with the home directory.

    Only `~` and `~/...` are expanded. `~user` forms and paths without a
    leading marker are returned unchanged.

    Examples:
        >>> expand_home("~/code", home=Path("/home/alice"))
        '/home/alice/code'
        >>> expand_home("/srv/code", home=Path("/home/alice"))
        '/srv/code'
    """
    if path == "~":
        return str(home)
    if path.startswith("~/"):
        return str(home / path[2:])
    return path
