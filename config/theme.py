"""Theme configuration settings."""

from pathlib import Path

from pydantic import BaseModel, Field

from config.paths import get_user_config_dir


class ThemeConfig(BaseModel):
    """Themed configuration repository and the settings file it provides."""

    repository: str = "https://github.com/tilewm/komorebi-theme.git"
    clone_dir: Path = Field(default_factory=lambda: get_user_config_dir() / "tilewm-theme")
    settings_source: str = "komorebi.json"
    settings_destination: Path = Field(default_factory=lambda: Path.home() / "komorebi.json")

    @property
    def settings_source_path(self) -> Path:
        """Settings file inside the cloned repository."""
        return self.clone_dir / self.settings_source
