"""Provisioner utility functions."""

from __future__ import annotations

import ctypes
import logging
import platform
import shutil
import subprocess  # noqa S404
from pathlib import Path

logger = logging.getLogger(__name__)


class SystemCheck:
    """System checking utilities."""

    def is_windows(self) -> bool:
        """Check if running on Windows."""
        return platform.system() == "Windows"

    def is_elevated(self) -> bool:
        """Check if the process runs with administrator rights."""
        if not self.is_windows():
            return False
        try:
            return bool(ctypes.windll.shell32.IsUserAnAdmin())
        except (AttributeError, OSError):
            return False

    def command_exists(self, command: str) -> bool:
        """Check if a command exists in PATH."""
        return self.get_command_path(command) is not None

    def get_command_path(self, command: str) -> str | None:
        """Get the full path to a command, honouring the in-process PATH."""
        return shutil.which(command)


class ProcessRunner:
    """Utility for running subprocess commands."""

    def run(
        self,
        cmd: list[str],
        cwd: str | None = None,
        capture_output: bool = False,
        check: bool = True,
        **kwargs,
    ) -> subprocess.CompletedProcess:
        """Run a subprocess command with standard options."""
        logger.debug("Running %s", " ".join(cmd))
        return subprocess.run(  # noqa: S603
            cmd,
            cwd=cwd,
            capture_output=capture_output,
            check=check,
            **kwargs,
        )

    def launch(self, cmd: list[str]) -> subprocess.Popen:
        """Start a program in the background and return immediately."""
        creationflags = 0
        if platform.system() == "Windows":
            creationflags = subprocess.DETACHED_PROCESS | subprocess.CREATE_NEW_PROCESS_GROUP
        return subprocess.Popen(  # noqa: S603
            cmd,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            creationflags=creationflags,
        )


class FileUtils:
    """File system utilities."""

    @staticmethod
    def remove_file(path: Path) -> None:
        """Delete a file if it exists."""
        path.unlink(missing_ok=True)

    @staticmethod
    def replace_file(source: Path, destination: Path) -> Path:
        """Move a file into place, overwriting whatever is there."""
        destination.parent.mkdir(parents=True, exist_ok=True)
        if destination.exists():
            destination.unlink()
        shutil.move(str(source), str(destination))
        return destination

    @staticmethod
    def copy_file(source: Path, destination: Path) -> Path:
        """Copy a file into place, overwriting whatever is there."""
        destination.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(source, destination)
        return destination
