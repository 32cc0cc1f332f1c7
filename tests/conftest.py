"""Pytest configuration for the test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from config import Config, PathsConfig
from config.dependencies import BuildToolsConfig, GitConfig, PackageManagerConfig
from config.theme import ThemeConfig
from provisioner.pipeline import Services
from provisioner.services.environment_service import EnvironmentService
from tests.helpers import (
    FakeDownloader,
    FakeProcessRunner,
    FakeSystem,
    FakeUserEnvironment,
    touch,
)


@pytest.fixture
def config(tmp_path: Path) -> Config:
    """Configuration with every path inside the test's temporary directory."""
    return Config(
        paths=PathsConfig(
            install_root=tmp_path / "Program Files" / "tilewm",
            cargo_bin_dir=tmp_path / "cargo" / "bin",
            temp_dir=tmp_path / "temp",
        ),
        package_manager=PackageManagerConfig(bin_dir=tmp_path / "chocolatey" / "bin"),
        git=GitConfig(bin_dir=tmp_path / "Git" / "cmd"),
        build_tools=BuildToolsConfig(vswhere=tmp_path / "Installer" / "vswhere.exe"),
        theme=ThemeConfig(
            clone_dir=tmp_path / "config" / "tilewm-theme",
            settings_destination=tmp_path / "home" / "komorebi.json",
        ),
    )


@pytest.fixture
def system() -> FakeSystem:
    return FakeSystem()


@pytest.fixture
def runner() -> FakeProcessRunner:
    return FakeProcessRunner()


@pytest.fixture
def downloader() -> FakeDownloader:
    return FakeDownloader()


@pytest.fixture
def user_environment() -> FakeUserEnvironment:
    return FakeUserEnvironment({"PATH": r"C:\Users\me\bin"})


@pytest.fixture
def environ() -> dict[str, str]:
    return {"PATH": r"C:\Windows\system32"}


@pytest.fixture
def services(system, runner, downloader, environ, user_environment) -> Services:
    """Services wired to the fakes."""
    return Services(
        system=system,
        runner=runner,
        downloader=downloader,
        environment=EnvironmentService(environ=environ, user_store=user_environment),
    )


@pytest.fixture
def fresh_host(config: Config, system: FakeSystem, runner: FakeProcessRunner, tmp_path: Path):
    """A host with nothing installed, where every installer works."""
    build_tools_dir = tmp_path / "BuildTools"
    touch(config.build_tools.vswhere)

    def bootstrap_choco(cmd, cwd):
        touch(config.package_manager.executable)

    def install_git(cmd, cwd):
        system.commands["git"] = str(config.git.bin_dir / "git.exe")

    def install_rust(cmd, cwd):
        touch(config.paths.cargo_bin_dir / "rustup.exe")
        touch(config.paths.cargo_bin_dir / "cargo.exe")

    def vswhere(cmd, cwd):
        return str(build_tools_dir) if build_tools_dir.exists() else ""

    def install_build_tools(cmd, cwd):
        build_tools_dir.mkdir(parents=True, exist_ok=True)

    def install_browser(cmd, cwd):
        system.commands["firefox"] = r"C:\Program Files\Mozilla Firefox\firefox.exe"

    def msi_installer(app):
        def effect(cmd, cwd):
            touch(config.paths.app_executable(app))

        return effect

    def clone_theme(cmd, cwd):
        touch(config.theme.settings_source_path, '{"theme": "fresh"}')

    runner.when("install.ps1", effect=bootstrap_choco)
    runner.when(" install git", effect=install_git)
    runner.when("rustup-init.exe", effect=install_rust)
    runner.when("vswhere.exe", effect=vswhere)
    runner.when(f"install {config.build_tools.package}", effect=install_build_tools)
    runner.when(f"install {config.browser.package}", effect=install_browser)
    runner.when(config.primary.package_file_name, effect=msi_installer(config.primary))
    runner.when(config.secondary.package_file_name, effect=msi_installer(config.secondary))
    runner.when(f"clone {config.theme.repository}", effect=clone_theme)
    return runner
