"""Project name and version, for --version and the log header."""

import tomllib
from dataclasses import dataclass
from functools import cache
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

DISTRIBUTION = "tilewm-setup"


@dataclass
class Project:
    """Container for project metadata."""

    name: str
    version: str


def _from_pyproject(pyproject_path: Path) -> Project:
    with pyproject_path.open("rb") as f:
        project_data = tomllib.load(f).get("project", {})
    return Project(
        name=project_data.get("name", DISTRIBUTION),
        version=project_data.get("version", "0.0.0"),
    )


def _from_distribution() -> Project:
    try:
        return Project(name=DISTRIBUTION, version=version(DISTRIBUTION))
    except PackageNotFoundError:
        return Project(name=DISTRIBUTION, version="0.0.0")


@cache
def get_project() -> Project:
    """Read metadata from the source checkout, or from the installed distribution."""
    pyproject_path = Path(__file__).parent.parent / "pyproject.toml"
    if pyproject_path.exists():
        return _from_pyproject(pyproject_path)
    return _from_distribution()
