"""Application launch component."""

from __future__ import annotations

import logging
from pathlib import Path

from provisioner.steps import InstallationResult
from provisioner.utils import ProcessRunner

logger = logging.getLogger(__name__)


class Launcher:
    """Starts the installed application in the background."""

    def __init__(self: Launcher, executable: Path, runner: ProcessRunner) -> None:
        self.executable = executable
        self.runner = runner

    def launch(self) -> InstallationResult:
        """Launch the application if its executable is present."""
        if not self.executable.exists():
            return InstallationResult(
                success=False, message=f"Not launching, {self.executable} not found"
            )

        self.runner.launch([str(self.executable)])
        logger.info("Launched %s", self.executable)
        return InstallationResult(success=True, message=f"Launched {self.executable.name}")
