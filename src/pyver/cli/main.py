# SPDX-License-Identifier: MIT
"""CLI entry point for the pyver command."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import click

from .. import __version__
from ..errors import InvalidVersionError
from .config import ConfigError


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.verbose: bool = False
        self.project_dir: Optional[Path] = None


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


@click.group()
@click.version_option(version=__version__, prog_name="pyver")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Change to directory before running command.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path]) -> None:
    """PEP 440 version checking and ordering.

    \b
    Examples:
        pyver check 1.0a1 2!1.0.post3
        pyver compare 1.0rc1 1.0
        pyver sort 1.0 1.0.dev1 1.0b2
        pyver project
    """
    ctx.verbose = verbose
    ctx.project_dir = directory


# Import and register commands
from .commands import check, compare, project

cli.add_command(check.check)
cli.add_command(compare.compare)
cli.add_command(compare.sort)
cli.add_command(project.project)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except (ConfigError, InvalidVersionError) as e:
        echo_error(str(e))
        sys.exit(1)
    except FileNotFoundError as e:
        echo_error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
