"""Chocolatey package manager component."""

from __future__ import annotations

import logging
import subprocess  # noqa S404

from config.dependencies import PackageManagerConfig
from provisioner.errors import StepFailedError
from provisioner.services import shell_service
from provisioner.steps import EnvironmentChange, InstallationResult
from provisioner.utils import ProcessRunner, SystemCheck

logger = logging.getLogger(__name__)


class PackageManager:
    """Bootstraps Chocolatey and installs packages through it."""

    def __init__(
        self: PackageManager,
        config: PackageManagerConfig,
        system: SystemCheck,
        runner: ProcessRunner,
    ) -> None:
        self.config = config
        self.system = system
        self.runner = runner

    def is_installed(self) -> bool:
        """Check if Chocolatey is installed."""
        return self.system.command_exists(self.config.command) or self.config.executable.exists()

    def bootstrap(self) -> InstallationResult:
        """Install Chocolatey with its remote bootstrap script."""
        logger.info("Bootstrapping Chocolatey from %s", self.config.bootstrap_url)
        script = shell_service.bootstrap_script(self.config.bootstrap_url)
        try:
            shell_service.run_powershell(self.runner, script)
        except subprocess.CalledProcessError as e:
            return InstallationResult(
                success=False, message=f"Chocolatey bootstrap failed: {e}"
            )

        if not self.is_installed():
            return InstallationResult(
                success=False,
                message=f"Chocolatey still missing after bootstrap ({self.config.executable})",
            )

        return InstallationResult(
            success=True,
            message="Chocolatey installed",
            environment=[EnvironmentChange.append_path(str(self.config.bin_dir))],
        )

    def executable(self) -> str:
        """The choco command to invoke, preferring PATH over the known location."""
        return self.system.get_command_path(self.config.command) or str(self.config.executable)

    def install(self, package: str, package_parameters: str | None = None) -> None:
        """Install a package silently."""
        if not self.is_installed():
            raise StepFailedError(package, "Chocolatey is not installed")
        cmd = [self.executable(), "install", package, "-y", "--no-progress"]
        if package_parameters:
            cmd.extend(["--package-parameters", package_parameters])
        logger.info("Installing %s with Chocolatey", package)
        self.runner.run(cmd)
