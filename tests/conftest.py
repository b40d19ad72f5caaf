# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for pyver tests."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def make_project(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory writing a pyproject.toml into a temporary project."""

    def _make(version: str = "1.2.3", tool_pyver: str = "") -> Path:
        project_dir = tmp_path / "test_project"
        project_dir.mkdir(exist_ok=True)
        content = f"""[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "test-package"
version = "{version}"
"""
        if tool_pyver:
            content += f"\n[tool.pyver]\n{tool_pyver}\n"
        (project_dir / "pyproject.toml").write_text(content)
        return project_dir

    return _make
