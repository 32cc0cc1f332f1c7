"""Configuration module - orchestrates all configuration components."""

import logging
from functools import cache
from pathlib import Path

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from config.applications import ApplicationConfig, default_primary, default_secondary
from config.dependencies import (
    BrowserConfig,
    BuildToolsConfig,
    GitConfig,
    PackageManagerConfig,
    ToolchainConfig,
)
from config.paths import get_cargo_bin_dir, get_install_root, get_project_root, get_temp_dir
from config.runtime import RuntimeConfig
from config.theme import ThemeConfig

logger = logging.getLogger(__name__)


class PathsConfig(BaseModel):
    """Filesystem locations shared across steps."""

    install_root: Path = Field(default_factory=get_install_root)
    cargo_bin_dir: Path = Field(default_factory=get_cargo_bin_dir)
    temp_dir: Path = Field(default_factory=get_temp_dir)

    def app_dir(self, app: ApplicationConfig) -> Path:
        """Target directory for an application under the shared root."""
        return self.install_root / app.install_dir_name

    def app_executable(self, app: ApplicationConfig) -> Path:
        """Installed executable whose existence marks the application as installed."""
        return self.app_dir(app) / app.executable


class Config(BaseSettings):
    """Main configuration container that orchestrates all config components."""

    # Runtime configurations
    runtime: RuntimeConfig = Field(default_factory=RuntimeConfig)

    # Filesystem layout
    paths: PathsConfig = Field(default_factory=PathsConfig)

    # Host dependencies, in install order
    package_manager: PackageManagerConfig = Field(default_factory=PackageManagerConfig)
    git: GitConfig = Field(default_factory=GitConfig)
    toolchain: ToolchainConfig = Field(default_factory=ToolchainConfig)
    build_tools: BuildToolsConfig = Field(default_factory=BuildToolsConfig)
    browser: BrowserConfig = Field(default_factory=BrowserConfig)

    # Desktop applications
    primary: ApplicationConfig = Field(default_factory=default_primary)
    secondary: ApplicationConfig = Field(default_factory=default_secondary)

    # Theme
    theme: ThemeConfig = Field(default_factory=ThemeConfig)

    model_config = SettingsConfigDict(
        env_prefix="TILEWM_",
        env_nested_delimiter="__",
        env_file=get_project_root() / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def log_file(self) -> Path:
        """Run log written next to the downloaded packages."""
        return self.paths.temp_dir / self.runtime.log_file_name


@cache
def get_config() -> Config:
    """Get the cached configuration instance."""
    config = Config()
    logger.debug("Loaded configuration (install root: %s)", config.paths.install_root)
    return config


__all__ = ["Config", "PathsConfig", "get_config"]
