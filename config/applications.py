"""Configuration for the two desktop applications."""

from pydantic import BaseModel


class SourceBuildConfig(BaseModel):
    """Where and how to build an application from source."""

    repository: str
    binary: str
    package: str | None = None


class ApplicationConfig(BaseModel):
    """A desktop application installed from an MSI package."""

    name: str
    version: str
    msi_url: str
    install_dir_name: str
    executable: str
    install_dir_property: str = "INSTALLDIR"
    source_build: SourceBuildConfig | None = None

    @property
    def download_url(self) -> str:
        """MSI URL with the pinned version filled in."""
        return self.msi_url.format(version=self.version)

    @property
    def package_file_name(self) -> str:
        """File name used for the downloaded package."""
        return f"{self.name}-{self.version}.msi"


def default_primary() -> ApplicationConfig:
    """The tiling window manager, launched at the end of the run."""
    return ApplicationConfig(
        name="komorebi",
        version="0.1.28",
        msi_url="https://github.com/LGUG2Z/komorebi/releases/download/v{version}/komorebi-{version}-x86_64.msi",
        install_dir_name="komorebi",
        executable="bin/komorebi.exe",
        source_build=SourceBuildConfig(
            repository="https://github.com/LGUG2Z/komorebi.git",
            package="komorebi",
            binary="komorebi.exe",
        ),
    )


def default_secondary() -> ApplicationConfig:
    """The status bar."""
    return ApplicationConfig(
        name="yasb",
        version="1.5.6",
        msi_url="https://github.com/amnweb/yasb/releases/download/v{version}/yasb-{version}-win64.msi",
        install_dir_name="yasb",
        executable="yasb.exe",
    )
