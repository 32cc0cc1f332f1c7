"""
Centralized path management for the provisioner.

Every location the pipeline touches is derived here so the rest of the code
never reads environment variables for paths directly.
"""

import os
import tempfile
from pathlib import Path

APP_NAME = "tilewm-setup"


def get_program_files_dir() -> Path:
    """Get the 64-bit Program Files directory."""
    return Path(os.environ.get("ProgramFiles", r"C:\Program Files"))


def get_program_files_x86_dir() -> Path:
    """Get the 32-bit Program Files directory (where vswhere lives)."""
    return Path(os.environ.get("ProgramFiles(x86)", r"C:\Program Files (x86)"))


def get_program_data_dir() -> Path:
    """Get the machine-wide ProgramData directory."""
    return Path(os.environ.get("ProgramData", r"C:\ProgramData"))


def get_install_root() -> Path:
    """Get the shared installation root for the desktop applications."""
    return get_program_files_dir() / "tilewm"


def get_cargo_bin_dir() -> Path:
    """Get the per-user Rust toolchain binary directory."""
    cargo_home = os.environ.get("CARGO_HOME")
    if cargo_home:
        return Path(cargo_home) / "bin"
    return Path.home() / ".cargo" / "bin"


def get_temp_dir() -> Path:
    """Get the scratch directory for downloaded packages and logs."""
    return Path(tempfile.gettempdir()) / APP_NAME


def get_user_config_dir() -> Path:
    """Get the per-user configuration directory."""
    return Path.home() / ".config"


def get_project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent


__all__ = [
    "APP_NAME",
    "get_cargo_bin_dir",
    "get_install_root",
    "get_program_data_dir",
    "get_program_files_dir",
    "get_program_files_x86_dir",
    "get_project_root",
    "get_temp_dir",
    "get_user_config_dir",
]
