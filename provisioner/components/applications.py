"""Desktop application installation component."""

from __future__ import annotations

import logging
import subprocess  # noqa S404
from collections.abc import Callable
from pathlib import Path

import requests

from config import PathsConfig
from config.applications import ApplicationConfig
from provisioner.services.download_service import Downloader
from provisioner.steps import InstallationResult
from provisioner.utils import FileUtils, ProcessRunner

logger = logging.getLogger(__name__)

MSIEXEC = "msiexec.exe"


class ApplicationInstaller:
    """Installs one desktop application from its MSI package.

    Applications with a ``source_build`` fall back to compiling from their
    repository when the package install does not produce the executable.
    """

    def __init__(
        self: ApplicationInstaller,
        app: ApplicationConfig,
        paths: PathsConfig,
        runner: ProcessRunner,
        downloader: Downloader,
        git_command: str = "git",
        cargo_command: Callable[[], str] = lambda: "cargo",
    ) -> None:
        self.app = app
        self.runner = runner
        self.downloader = downloader
        self.git_command = git_command
        self.cargo_command = cargo_command
        self.target_dir = paths.app_dir(app)
        self.executable = paths.app_executable(app)
        self.temp_dir = paths.temp_dir

    @property
    def package_path(self) -> Path:
        """Where the MSI is downloaded to."""
        return self.temp_dir / self.app.package_file_name

    @property
    def log_path(self) -> Path:
        """Verbose msiexec log for the install."""
        return self.temp_dir / f"{self.app.name}-install.log"

    @property
    def source_dir(self) -> Path:
        """Checkout used by the source fallback."""
        return self.temp_dir / f"{self.app.name}-src"

    def is_installed(self) -> bool:
        """Check if the application's executable is in place."""
        return self.executable.exists()

    def install(self) -> InstallationResult:
        """Install from the MSI package, falling back to a source build."""
        msi_error = None
        try:
            self._install_package()
        except (subprocess.CalledProcessError, requests.RequestException, OSError) as e:
            msi_error = str(e)
            logger.warning("MSI install of %s failed: %s", self.app.name, e)
        finally:
            FileUtils.remove_file(self.package_path)

        if self.is_installed():
            return InstallationResult(
                success=True,
                message=f"{self.app.name} {self.app.version} installed to {self.target_dir}",
            )

        reason = msi_error or f"{self.executable} missing after install"
        if self.app.source_build is None:
            return InstallationResult(
                success=False,
                message=f"{self.app.name} MSI install failed: {reason}",
                details={"log": str(self.log_path)},
            )

        logger.warning("Falling back to building %s from source", self.app.name)
        return self.build_from_source()

    def _install_package(self) -> None:
        self.downloader.download_file(self.app.download_url, self.package_path)
        self.runner.run(
            [
                MSIEXEC,
                "/i",
                str(self.package_path),
                "/qn",
                "/norestart",
                f"{self.app.install_dir_property}={self.target_dir}",
                "/l*v",
                str(self.log_path),
            ]
        )

    def build_from_source(self) -> InstallationResult:
        """Clone the repository, build a release binary and copy it into place."""
        build = self.app.source_build
        if build is None:
            return InstallationResult(
                success=False, message=f"{self.app.name} has no source build configured"
            )

        try:
            if (self.source_dir / ".git").exists():
                logger.info("Reusing existing checkout at %s", self.source_dir)
            else:
                self.runner.run(
                    [self.git_command, "clone", "--depth", "1", build.repository, str(self.source_dir)]
                )

            cmd = [self.cargo_command(), "build", "--release"]
            if build.package:
                cmd.extend(["--package", build.package])
            self.runner.run(cmd, cwd=str(self.source_dir))
        except subprocess.CalledProcessError as e:
            return InstallationResult(
                success=False, message=f"Source build of {self.app.name} failed: {e}"
            )

        binary = self.source_dir / "target" / "release" / build.binary
        if not binary.exists():
            return InstallationResult(
                success=False,
                message=f"Source build of {self.app.name} produced no {build.binary}",
            )

        FileUtils.copy_file(binary, self.executable)
        if not self.is_installed():
            return InstallationResult(
                success=False, message=f"Could not place {build.binary} at {self.executable}"
            )

        return InstallationResult(
            success=True,
            message=f"{self.app.name} built from source and installed to {self.executable}",
        )
