# SPDX-License-Identifier: MIT
"""Validate the version declared in a project's pyproject.toml."""

from __future__ import annotations

from pathlib import Path

import click

from ...errors import InvalidVersionError
from ...version import parse_version
from ..config import ConfigError, ProjectConfig, find_project_root
from ..main import echo_error, echo_info, echo_success, pass_context, Context
from .check import describe


@click.command()
@pass_context
def project(ctx: Context) -> None:
    """Validate [project].version against [tool.pyver] settings.

    \b
    Settings:
        [tool.pyver]
        allow-local = false          # reject versions such as 1.0+abc
        minimum-version = "1.0"      # reject versions below 1.0
    """
    project_dir = ctx.project_dir or find_project_root()
    if project_dir is None:
        echo_error("No pyproject.toml found in current directory or its parents")
        raise SystemExit(1)

    try:
        config = ProjectConfig.from_pyproject(project_dir)
    except (ConfigError, FileNotFoundError) as e:
        echo_error(str(e))
        raise SystemExit(1)

    if not config.version:
        echo_error("Missing required field: [project].version")
        raise SystemExit(1)

    echo_info(f"Validating: {Path(project_dir) / 'pyproject.toml'}")

    errors: list[str] = []
    try:
        version = parse_version(config.version)
    except InvalidVersionError as e:
        echo_error(str(e))
        raise SystemExit(1)

    if version.local is not None and not config.allow_local:
        errors.append(f"Local version label '+{version.local}' is not allowed")

    if config.minimum_version is not None:
        try:
            minimum = parse_version(config.minimum_version)
        except InvalidVersionError as e:
            errors.append(f"minimum-version: {e}")
        else:
            if version < minimum:
                errors.append(
                    f"Version '{version}' is lower than minimum-version '{minimum}'"
                )

    if ctx.verbose:
        for line in describe(version):
            echo_info(line)

    if errors:
        for error in errors:
            echo_error(error)
        raise SystemExit(1)

    echo_success(f"{config.name or 'project'} {version}: ok")
