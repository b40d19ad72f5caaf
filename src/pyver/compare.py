# SPDX-License-Identifier: MIT
"""Version comparison helpers accepting strings or parsed versions.

Ordering: epoch, then release, then dev-only < pre-release < release < post-release.
Local version labels are ignored in comparisons.
"""

from __future__ import annotations

from typing import Any, Iterable, Union

from .version import PackageVersion, parse_version

VersionLike = Union[str, PackageVersion]


def _coerce(version: VersionLike) -> PackageVersion:
    return parse_version(version) if isinstance(version, str) else version


def compare_versions(version1: VersionLike, version2: VersionLike) -> int:
    """Compare two versions.

    Args:
        version1: First version (string or PackageVersion)
        version2: Second version (string or PackageVersion)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0", "2.0")
        -1
        >>> compare_versions("1.0c", "1.0rc")
        0
        >>> compare_versions("1!1.0", "2.0")
        1
    """
    v1 = _coerce(version1)
    v2 = _coerce(version2)

    if v1 == v2:
        return 0
    return -1 if v1 < v2 else 1


def version_key(version: VersionLike) -> tuple[Any, ...]:
    """Return a sort key for a version, suitable for sorting.

    Examples:
        >>> sorted(["1.0", "1.0.dev1", "1.0rc1", "1.0.post1"], key=version_key)
        ['1.0.dev1', '1.0rc1', '1.0', '1.0.post1']
    """
    return _coerce(version).sort_key()


def max_version(versions: Iterable[VersionLike]) -> PackageVersion:
    """Return the greatest version in an iterable.

    Raises:
        ValueError: If ``versions`` is empty
        InvalidVersionError: If any version string is invalid
    """
    parsed = [_coerce(v) for v in versions]
    if not parsed:
        raise ValueError("max_version() arg is an empty iterable")
    return max(parsed)
