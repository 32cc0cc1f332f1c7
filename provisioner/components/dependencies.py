"""Dependency installation component."""

from __future__ import annotations

import logging
from pathlib import Path

from config.dependencies import BrowserConfig, BuildToolsConfig, GitConfig, ToolchainConfig
from provisioner.components.package_manager import PackageManager
from provisioner.services.download_service import Downloader
from provisioner.steps import EnvironmentChange, InstallationResult
from provisioner.utils import FileUtils, ProcessRunner, SystemCheck

logger = logging.getLogger(__name__)


class DependencyInstaller:
    """Manages the installation of the tools the applications depend on."""

    def __init__(
        self: DependencyInstaller,
        package_manager: PackageManager,
        system: SystemCheck,
        runner: ProcessRunner,
        downloader: Downloader,
        cargo_bin_dir: Path,
        temp_dir: Path,
    ) -> None:
        """Initialize the dependency installer."""
        self.package_manager = package_manager
        self.system = system
        self.runner = runner
        self.downloader = downloader
        self.cargo_bin_dir = cargo_bin_dir
        self.temp_dir = temp_dir

    # ============= Git =============

    def check_git(self, config: GitConfig) -> bool:
        """Check if git is installed."""
        return self.system.command_exists(config.command)

    def install_git(self, config: GitConfig) -> InstallationResult:
        """Install git using Chocolatey."""
        self.package_manager.install(config.package)
        return InstallationResult(
            success=True,
            message="Git installed",
            environment=[EnvironmentChange.append_path(str(config.bin_dir))],
        )

    # ============= Rust toolchain =============

    @property
    def rustup_path(self) -> Path:
        """Marker whose existence means the toolchain is installed."""
        return self.cargo_bin_dir / "rustup.exe"

    def check_toolchain(self) -> bool:
        """Check if rustup is installed."""
        return self.rustup_path.exists() or self.system.command_exists("rustup")

    def install_toolchain(self, config: ToolchainConfig) -> InstallationResult:
        """Install rustup with its bootstrap binary in silent mode."""
        installer = self.temp_dir / "rustup-init.exe"
        self.downloader.download_file(config.installer_url, installer)
        try:
            self.runner.run([str(installer), *config.installer_args])
        finally:
            FileUtils.remove_file(installer)

        change = EnvironmentChange.append_path(str(self.cargo_bin_dir), persist=True)
        if not self.check_toolchain():
            return InstallationResult(
                success=False,
                message=f"rustup not found after install ({self.rustup_path})",
                environment=[change],
            )
        return InstallationResult(success=True, message="Rust toolchain installed", environment=[change])

    def _tool(self, name: str) -> str:
        """Resolve a toolchain binary, preferring the cargo bin directory."""
        candidate = self.cargo_bin_dir / f"{name}.exe"
        if candidate.exists():
            return str(candidate)
        return name

    def configure_toolchain(self, config: ToolchainConfig) -> InstallationResult:
        """Set the default toolchain target. Safe to repeat."""
        self.runner.run([self._tool("rustup"), "default", config.default_target])
        return InstallationResult(
            success=True, message=f"Default toolchain set to {config.default_target}"
        )

    def cargo(self) -> str:
        """The cargo binary to build with."""
        return self._tool("cargo")

    # ============= Build tools =============

    def check_build_tools(self, config: BuildToolsConfig) -> bool:
        """Check if the required build tools component is installed."""
        if not config.vswhere.exists():
            return False
        result = self.runner.run(
            [
                str(config.vswhere),
                "-products",
                "*",
                "-requires",
                config.required_component,
                "-property",
                "installationPath",
            ],
            capture_output=True,
            check=False,
            text=True,
        )
        return result.returncode == 0 and bool(result.stdout.strip())

    def install_build_tools(self, config: BuildToolsConfig) -> InstallationResult:
        """Install the build tools unless they cannot be verified."""
        if not config.vswhere.exists():
            return InstallationResult(
                success=False,
                message=f"vswhere not found at {config.vswhere}; build tools not verified",
            )
        self.package_manager.install(config.package, config.package_parameters)
        return InstallationResult(success=True, message="Build tools installed")

    # ============= Browser =============

    def check_browser(self, config: BrowserConfig) -> bool:
        """Check if the browser is on PATH."""
        return self.system.command_exists(config.command)

    def install_browser(self, config: BrowserConfig) -> InstallationResult:
        """Install the browser using Chocolatey."""
        self.package_manager.install(config.package)
        return InstallationResult(success=True, message=f"{config.package} installed")
