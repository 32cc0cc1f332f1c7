"""Directory management service."""

import os
from pathlib import Path


def create_installation_directories(install_root: Path, app_dirs: list[Path]) -> list[Path]:
    """Create the shared install root and each application's target directory."""
    created = []
    for directory in [install_root, *app_dirs]:
        if not directory.exists():
            directory.mkdir(parents=True, exist_ok=True)
            created.append(directory)

    # Check if we have write permissions
    if not os.access(install_root, os.W_OK):
        raise PermissionError(f"No write permission to: {install_root}")

    return created


def create_scratch_directory(temp_dir: Path) -> Path:
    """Create the directory used for downloads and logs."""
    temp_dir.mkdir(parents=True, exist_ok=True)
    return temp_dir
