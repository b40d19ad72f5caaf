# SPDX-License-Identifier: MIT
"""Compare and sort version strings."""

from __future__ import annotations

import click

from ...compare import compare_versions
from ...errors import InvalidVersionError
from ...version import parse_version
from ..main import echo_error, echo_info

_OPERATORS = {-1: "<", 0: "==", 1: ">"}


@click.command()
@click.argument("version1")
@click.argument("version2")
def compare(version1: str, version2: str) -> None:
    """Compare two versions and print their relation.

    \b
    Examples:
        pyver compare 1.0rc1 1.0       # 1.0rc1 < 1.0
        pyver compare 1.0c 1.0rc       # 1.0c == 1.0rc
    """
    try:
        result = compare_versions(version1, version2)
    except InvalidVersionError as e:
        echo_error(str(e))
        raise SystemExit(1)

    echo_info(f"{version1} {_OPERATORS[result]} {version2}")


@click.command()
@click.argument("versions", nargs=-1, required=True)
@click.option(
    "--reverse",
    "-r",
    is_flag=True,
    help="Print the newest version first.",
)
def sort(versions: tuple[str, ...], reverse: bool) -> None:
    """Print versions in ascending order, one per line.

    Versions that compare equal keep their input order.
    """
    try:
        parsed = [parse_version(v) for v in versions]
    except InvalidVersionError as e:
        echo_error(str(e))
        raise SystemExit(1)

    for version in sorted(parsed, reverse=reverse):
        echo_info(str(version))
