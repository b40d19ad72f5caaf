# SPDX-License-Identifier: MIT
"""Project version configuration loading from pyproject.toml."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


@dataclass
class ProjectConfig:
    """Version settings loaded from pyproject.toml.

    Attributes:
        project_dir: Directory containing pyproject.toml
        name: Package name from [project].name
        version: Package version from [project].version
        allow_local: Whether a local version label (``+abc``) is accepted
        minimum_version: Lowest version the project version may declare
    """

    project_dir: Path
    name: str = ""
    version: str = ""
    allow_local: bool = True
    minimum_version: Optional[str] = None

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "ProjectConfig":
        """Load configuration from pyproject.toml.

        Raises:
            ConfigError: If the file is invalid
            FileNotFoundError: If pyproject.toml doesn't exist
        """
        project_path = Path(project_dir)
        pyproject_path = project_path / "pyproject.toml"

        if not pyproject_path.exists():
            raise FileNotFoundError(f"pyproject.toml not found in {project_path}")

        try:
            with open(pyproject_path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax: {e}") from e

        return cls.from_pyproject_dict(pyproject, project_path)

    @classmethod
    def from_pyproject_dict(
        cls,
        pyproject: dict[str, Any],
        project_dir: Path,
    ) -> "ProjectConfig":
        """Create ProjectConfig from a parsed pyproject.toml dictionary."""
        project = pyproject.get("project", {})
        tool_pyver = pyproject.get("tool", {}).get("pyver", {})

        version = project.get("version", "")
        if not isinstance(version, str):
            raise ConfigError("[project].version must be a string")

        allow_local = tool_pyver.get("allow-local", True)
        if not isinstance(allow_local, bool):
            raise ConfigError("[tool.pyver].allow-local must be a boolean")

        minimum_version = tool_pyver.get("minimum-version")
        if minimum_version is not None and not isinstance(minimum_version, str):
            raise ConfigError("[tool.pyver].minimum-version must be a string")

        return cls(
            project_dir=project_dir,
            name=project.get("name", ""),
            version=version,
            allow_local=allow_local,
            minimum_version=minimum_version,
        )


def find_project_root(start: Optional[Path] = None) -> Optional[Path]:
    """Find the nearest directory at or above ``start`` holding pyproject.toml."""
    current = (start or Path.cwd()).resolve()

    for directory in [current, *current.parents]:
        if (directory / "pyproject.toml").exists():
            return directory

    return None
