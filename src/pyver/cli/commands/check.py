# SPDX-License-Identifier: MIT
"""Check version strings against the PEP 440 grammar."""

from __future__ import annotations

import click

from ...errors import InvalidVersionError
from ...version import PackageVersion, parse_version
from ..main import echo_error, echo_info, echo_success, pass_context, Context


def describe(version: PackageVersion) -> list[str]:
    """Return one line per populated segment of a version."""
    lines = [f"  release: {version.release}"]
    if version.epoch is not None:
        lines.append(f"  epoch:   {version.epoch}")
    if version.pre is not None:
        lines.append(f"  pre:     {version.pre}")
    if version.post is not None:
        lines.append(f"  post:    {version.post}")
    if version.dev is not None:
        lines.append(f"  dev:     {version.dev}")
    if version.local is not None:
        lines.append(f"  local:   {version.local}")
    return lines


@click.command()
@click.argument("versions", nargs=-1, required=True)
@pass_context
def check(ctx: Context, versions: tuple[str, ...]) -> None:
    """Validate one or more version strings.

    \b
    Examples:
        pyver check 1.0
        pyver -v check 1!2.0rc1.post3+local.7
    """
    failures = 0

    for raw in versions:
        try:
            version = parse_version(raw)
        except InvalidVersionError as e:
            echo_error(str(e))
            failures += 1
            continue

        echo_success(f"{raw}: ok")
        if ctx.verbose:
            for line in describe(version):
                echo_info(line)

    if failures:
        echo_error(f"{failures} of {len(versions)} versions are invalid")
        raise SystemExit(1)
