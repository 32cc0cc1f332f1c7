"""Configuration for the host dependencies installed before the applications."""

from pathlib import Path

from pydantic import BaseModel, Field

from config.paths import get_program_data_dir, get_program_files_dir, get_program_files_x86_dir


class PackageManagerConfig(BaseModel):
    """Chocolatey bootstrap settings."""

    bootstrap_url: str = "https://community.chocolatey.org/install.ps1"
    command: str = "choco"
    bin_dir: Path = Field(default_factory=lambda: get_program_data_dir() / "chocolatey" / "bin")

    @property
    def executable(self) -> Path:
        """Marker whose existence means Chocolatey is installed."""
        return self.bin_dir / "choco.exe"


class GitConfig(BaseModel):
    """Version-control tool settings."""

    command: str = "git"
    package: str = "git"
    bin_dir: Path = Field(default_factory=lambda: get_program_files_dir() / "Git" / "cmd")


class ToolchainConfig(BaseModel):
    """Rust toolchain settings."""

    installer_url: str = (
        "https://static.rust-lang.org/rustup/dist/x86_64-pc-windows-msvc/rustup-init.exe"
    )
    installer_args: list[str] = Field(default_factory=lambda: ["-y"])
    default_target: str = "stable-x86_64-pc-windows-msvc"


class BuildToolsConfig(BaseModel):
    """Visual Studio Build Tools settings."""

    package: str = "visualstudio2022buildtools"
    required_component: str = "Microsoft.VisualStudio.Component.VC.Tools.x86.x64"
    features: list[str] = Field(
        default_factory=lambda: [
            "Microsoft.VisualStudio.Workload.VCTools",
            "Microsoft.VisualStudio.Component.VC.Tools.x86.x64",
            "Microsoft.VisualStudio.Component.Windows11SDK.22621",
        ]
    )
    vswhere: Path = Field(
        default_factory=lambda: get_program_files_x86_dir()
        / "Microsoft Visual Studio"
        / "Installer"
        / "vswhere.exe"
    )

    @property
    def package_parameters(self) -> str:
        """Feature flags handed to the Build Tools bootstrapper."""
        flags = [f"--add {feature}" for feature in self.features]
        return " ".join([*flags, "--includeRecommended", "--passive", "--norestart"])


class BrowserConfig(BaseModel):
    """Browser settings."""

    command: str = "firefox"
    package: str = "firefox"
