"""
Provides access to project metadata from pyproject.toml.
"""

import tomllib
from dataclasses import dataclass
from functools import cache
from importlib import metadata
from pathlib import Path

DISTRIBUTION_NAME = "es-connector-config"


@dataclass
class Project:
    """Container for project metadata."""

    name: str
    version: str


def get_project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).resolve().parent.parent.parent


@cache
def get_project() -> Project:
    """
    Get project metadata by parsing pyproject.toml.
    Falls back to the installed distribution metadata when the
    source tree is not available. The result is cached.
    """
    pyproject_path = get_project_root() / "pyproject.toml"
    if pyproject_path.exists():
        with pyproject_path.open("rb") as f:
            data = tomllib.load(f)

        project_data = data.get("project", {})
        return Project(
            name=project_data.get("name", DISTRIBUTION_NAME),
            version=project_data.get("version", "0.0.0"),
        )

    try:
        version = metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        version = "0.0.0"
    return Project(name=DISTRIBUTION_NAME, version=version)
