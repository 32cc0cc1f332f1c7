"""Assembles the ordered provisioning step list."""

from __future__ import annotations

from dataclasses import dataclass, field

from config import Config
from provisioner.components.applications import ApplicationInstaller
from provisioner.components.dependencies import DependencyInstaller
from provisioner.components.environment import SessionEnvironment
from provisioner.components.launcher import Launcher
from provisioner.components.package_manager import PackageManager
from provisioner.components.privileges import PrivilegeCheck
from provisioner.components.theme import ThemeProvisioner
from provisioner.services import directory_service
from provisioner.services.download_service import Downloader
from provisioner.services.environment_service import (
    EnvironmentService,
    default_user_environment,
)
from provisioner.steps import InstallationResult, Severity, Step
from provisioner.utils import ProcessRunner, SystemCheck


@dataclass
class Services:
    """Collaborators every component talks to the outside world through."""

    system: SystemCheck = field(default_factory=SystemCheck)
    runner: ProcessRunner = field(default_factory=ProcessRunner)
    downloader: Downloader = field(default_factory=Downloader)
    environment: EnvironmentService = field(
        default_factory=lambda: EnvironmentService(user_store=default_user_environment())
    )


def build_pipeline(config: Config, services: Services) -> list[Step]:
    """Build the provisioning steps in execution order."""
    system, runner, downloader = services.system, services.runner, services.downloader
    paths = config.paths

    privileges = PrivilegeCheck(system)
    session = SessionEnvironment()
    package_manager = PackageManager(config.package_manager, system, runner)
    dependencies = DependencyInstaller(
        package_manager,
        system,
        runner,
        downloader,
        cargo_bin_dir=paths.cargo_bin_dir,
        temp_dir=paths.temp_dir,
    )
    primary = ApplicationInstaller(
        config.primary,
        paths,
        runner,
        downloader,
        git_command=config.git.command,
        cargo_command=dependencies.cargo,
    )
    secondary = ApplicationInstaller(config.secondary, paths, runner, downloader)
    theme = ThemeProvisioner(config.theme, runner, git_command=config.git.command)
    launcher = Launcher(paths.app_executable(config.primary), runner)

    def create_directories() -> InstallationResult:
        directory_service.create_scratch_directory(paths.temp_dir)
        created = directory_service.create_installation_directories(
            paths.install_root, [paths.app_dir(config.primary), paths.app_dir(config.secondary)]
        )
        return InstallationResult(
            success=True,
            message=f"Install root ready at {paths.install_root}",
            details={"created": [str(path) for path in created]},
        )

    return [
        Step(
            name="check-privileges",
            description="Verify the process is elevated",
            action=privileges.check,
            severity=Severity.FATAL,
        ),
        Step(
            name="prepare-environment",
            description="Set execution policy and TLS for child installers",
            action=session.prepare,
        ),
        Step(
            name="install-package-manager",
            description="Install Chocolatey from its bootstrap script",
            action=package_manager.bootstrap,
            is_satisfied=package_manager.is_installed,
            severity=Severity.FATAL,
        ),
        Step(
            name="install-git",
            description="Install Git with Chocolatey",
            action=lambda: dependencies.install_git(config.git),
            is_satisfied=lambda: dependencies.check_git(config.git),
        ),
        Step(
            name="install-toolchain",
            description="Install the Rust toolchain with rustup-init",
            action=lambda: dependencies.install_toolchain(config.toolchain),
            is_satisfied=dependencies.check_toolchain,
        ),
        Step(
            name="configure-toolchain",
            description=f"Set the default toolchain to {config.toolchain.default_target}",
            action=lambda: dependencies.configure_toolchain(config.toolchain),
        ),
        Step(
            name="install-build-tools",
            description="Install Visual Studio Build Tools with Chocolatey",
            action=lambda: dependencies.install_build_tools(config.build_tools),
            is_satisfied=lambda: dependencies.check_build_tools(config.build_tools),
        ),
        Step(
            name="install-browser",
            description=f"Install {config.browser.package} with Chocolatey",
            action=lambda: dependencies.install_browser(config.browser),
            is_satisfied=lambda: dependencies.check_browser(config.browser),
        ),
        Step(
            name="create-directories",
            description=f"Create {paths.install_root} and application directories",
            action=create_directories,
        ),
        Step(
            name=f"install-{config.primary.name}",
            description=f"Install {config.primary.name} {config.primary.version}",
            action=primary.install,
            is_satisfied=primary.is_installed,
            severity=Severity.FATAL,
        ),
        Step(
            name=f"install-{config.secondary.name}",
            description=f"Install {config.secondary.name} {config.secondary.version}",
            action=secondary.install,
            is_satisfied=secondary.is_installed,
        ),
        Step(
            name="clone-theme",
            description=f"Clone {config.theme.repository}",
            action=theme.clone,
            is_satisfied=theme.is_cloned,
        ),
        Step(
            name="apply-theme-settings",
            description=f"Move {config.theme.settings_source} to {config.theme.settings_destination}",
            action=theme.apply_settings,
            is_satisfied=theme.is_applied,
        ),
        Step(
            name=f"launch-{config.primary.name}",
            description=f"Start {config.primary.name}",
            action=launcher.launch,
        ),
    ]
