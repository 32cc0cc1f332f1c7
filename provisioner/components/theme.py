"""Theme provisioning component."""

from __future__ import annotations

import logging

from config.theme import ThemeConfig
from provisioner.steps import InstallationResult
from provisioner.utils import FileUtils, ProcessRunner

logger = logging.getLogger(__name__)


class ThemeProvisioner:
    """Clones the themed configuration and moves its settings file into place."""

    def __init__(
        self: ThemeProvisioner,
        config: ThemeConfig,
        runner: ProcessRunner,
        git_command: str = "git",
    ) -> None:
        self.config = config
        self.runner = runner
        self.git_command = git_command

    def is_cloned(self) -> bool:
        """Check if the theme repository is already present."""
        return self.config.clone_dir.exists()

    def clone(self) -> InstallationResult:
        """Clone the theme repository."""
        self.config.clone_dir.parent.mkdir(parents=True, exist_ok=True)
        self.runner.run(
            [self.git_command, "clone", self.config.repository, str(self.config.clone_dir)]
        )
        return InstallationResult(
            success=True, message=f"Theme cloned to {self.config.clone_dir}"
        )

    def is_applied(self) -> bool:
        """Settings already relocated: source gone, destination present."""
        return (
            not self.config.settings_source_path.exists()
            and self.config.settings_destination.exists()
        )

    def apply_settings(self) -> InstallationResult:
        """Move the settings file to its destination, overwriting any existing file."""
        source = self.config.settings_source_path
        if not source.exists():
            return InstallationResult(
                success=False, message=f"Theme settings file not found: {source}"
            )

        destination = self.config.settings_destination
        if destination.exists():
            logger.info("Overwriting existing settings at %s", destination)
        FileUtils.replace_file(source, destination)
        return InstallationResult(success=True, message=f"Theme settings written to {destination}")
