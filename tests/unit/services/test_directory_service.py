"""Tests for directory creation."""

from provisioner.services.directory_service import (
    create_installation_directories,
    create_scratch_directory,
)


def test_creates_root_and_app_dirs(tmp_path):
    root = tmp_path / "Program Files" / "tilewm"
    apps = [root / "komorebi", root / "yasb"]

    created = create_installation_directories(root, apps)

    assert created == [root, *apps]
    assert all(directory.is_dir() for directory in created)


def test_existing_directories_are_not_reported(tmp_path):
    root = tmp_path / "tilewm"
    (root / "komorebi").mkdir(parents=True)

    created = create_installation_directories(root, [root / "komorebi", root / "yasb"])

    assert created == [root / "yasb"]


def test_scratch_directory(tmp_path):
    temp_dir = create_scratch_directory(tmp_path / "temp" / "tilewm-setup")

    assert temp_dir.is_dir()
