"""Real IdeLauncher implementation using PATH lookup and subprocess."""

import logging
import os
import shutil
import subprocess
from pathlib import Path

from wrk.core.paths import expand_home
from wrk.gateway.ide_launcher.abc import IdeLauncher

logger = logging.getLogger(__name__)


class RealIdeLauncher(IdeLauncher):
    """Production implementation that spawns the editor as a child process."""

    def __init__(self, *, home: Path) -> None:
        self._home = home

    def resolve(self, ide: str) -> Path | None:
        """Look the command up on PATH, then as a literal path."""
        found = shutil.which(ide)
        if found is not None:
            logger.debug("Resolved IDE %r on PATH: %s", ide, found)
            return Path(found)

        candidate = Path(expand_home(ide, home=self._home))
        if candidate.is_file() and os.access(candidate, os.X_OK):
            logger.debug("Resolved IDE %r as path: %s", ide, candidate)
            return candidate

        logger.debug("IDE %r not found", ide)
        return None

    def launch(self, executable: Path, target: Path) -> int:
        cmd = [str(executable), str(target)]
        logger.debug("Running: %s", " ".join(cmd))
        return subprocess.run(cmd, check=False).returncode
