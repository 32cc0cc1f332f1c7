"""Tests for configuration loading."""

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from config import Config, PathsConfig
from config.applications import default_primary, default_secondary
from config.dependencies import BuildToolsConfig
from config.project import get_project
from config.runtime import RuntimeConfig


def test_download_url_includes_version():
    app = default_secondary()

    assert app.download_url == (
        "https://github.com/amnweb/yasb/releases/download/v1.5.6/yasb-1.5.6-win64.msi"
    )
    assert app.package_file_name == "yasb-1.5.6.msi"


def test_only_primary_has_source_fallback():
    assert default_primary().source_build is not None
    assert default_secondary().source_build is None


def test_app_paths_live_under_install_root(tmp_path):
    paths = PathsConfig(install_root=tmp_path / "tilewm")

    assert paths.app_dir(default_primary()) == tmp_path / "tilewm" / "komorebi"
    assert paths.app_executable(default_primary()) == Path(
        tmp_path / "tilewm" / "komorebi" / "bin" / "komorebi.exe"
    )


def test_build_tools_package_parameters():
    config = BuildToolsConfig(features=["Workload.A", "Component.B"])

    assert config.package_parameters == (
        "--add Workload.A --add Component.B --includeRecommended --passive --norestart"
    )


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("TILEWM_BROWSER__PACKAGE", "googlechrome")
    monkeypatch.setenv("TILEWM_BROWSER__COMMAND", "chrome")

    config = Config()

    assert config.browser.package == "googlechrome"
    assert config.browser.command == "chrome"


def test_log_file_is_in_temp_dir(tmp_path):
    config = Config(paths=PathsConfig(temp_dir=tmp_path))

    assert config.log_file == tmp_path / "tilewm-setup.log"


def test_console_level_follows_log_level():
    runtime = RuntimeConfig(DEBUG=False, LOG_LEVEL="error")

    assert runtime.console_level() == logging.ERROR
    assert runtime.console_level(verbose=True) == logging.DEBUG
    assert runtime.file_level() == logging.INFO


def test_debug_forces_debug_levels():
    runtime = RuntimeConfig(DEBUG=True, LOG_LEVEL="WARNING")

    assert runtime.console_level() == logging.DEBUG
    assert runtime.file_level() == logging.DEBUG


def test_project_metadata_comes_from_pyproject():
    project = get_project()

    assert project.name == "tilewm-setup"
    assert project.version == "0.3.0"


def test_unknown_log_level_is_rejected_at_load(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "bogus")

    with pytest.raises(ValidationError):
        RuntimeConfig()


def test_log_level_from_environment_is_case_insensitive(monkeypatch):
    monkeypatch.delenv("DEBUG", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "info")

    assert RuntimeConfig().console_level() == logging.INFO
