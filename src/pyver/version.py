# SPDX-License-Identifier: MIT
"""Composite PEP 440 version and the parser that builds it."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
from typing import Any, Optional

from .errors import GrammarMismatchError, NumericOverflowError
from .segments import (
    POST_KEYWORDS,
    DevHead,
    PostHead,
    PostHeader,
    PreHeader,
    ReleaseHeader,
)
from .validator import CaptureSet, validate_version

# Largest value accepted for any numeric field (unsigned 32-bit)
MAX_COMPONENT = 2**32 - 1


@total_ordering
@dataclass(frozen=True, eq=False)
class PackageVersion:
    """A parsed PEP 440 version.

    Equality, ordering and hashing use only ``(epoch, release, pre, post,
    dev)`` with a missing epoch treated as 0. ``original`` keeps the input
    for display and ``local`` has no defined order, so neither takes part.

    Attributes:
        original: The string the version was parsed from
        release: Major and minor release numbers
        epoch: Optional version epoch (``1!``)
        pre: Optional pre-release segment
        post: Optional post-release segment
        dev: Optional developmental release segment
        local: Optional local version label, stored verbatim

    Examples:
        >>> PackageVersion.parse("v1.0a2.dev456") < PackageVersion.parse("v1.1a2.dev457")
        True
        >>> str(PackageVersion.parse("1.0-RC1"))
        '1.0-RC1'
    """

    original: str
    release: ReleaseHeader
    epoch: Optional[int] = None
    pre: Optional[PreHeader] = None
    post: Optional[PostHeader] = None
    dev: Optional[DevHead] = None
    local: Optional[str] = None

    @classmethod
    def parse(cls, version_string: str) -> PackageVersion:
        """Alternate constructor, see :func:`parse_version`."""
        return parse_version(version_string)

    def __str__(self) -> str:
        return self.original

    @property
    def is_prerelease(self) -> bool:
        """Return True for pre-releases and developmental releases."""
        return self.pre is not None or self.dev is not None

    @property
    def is_postrelease(self) -> bool:
        return self.post is not None

    @property
    def is_devrelease(self) -> bool:
        return self.dev is not None

    def _identity(self) -> tuple[Any, ...]:
        return (
            self.epoch if self.epoch is not None else 0,
            self.release,
            self.pre,
            self.post,
            self.dev,
        )

    def sort_key(self) -> tuple[Any, ...]:
        """Return a tuple ordering versions by epoch, release, pre, post, dev.

        A final release sorts after its pre-releases, a dev-only release
        sorts before them, post-releases sort after the plain release and
        dev releases sort before the release they lead up to.
        """
        epoch, release, pre, post, dev = self._identity()

        if pre is None and post is None and dev is not None:
            pre_key: tuple[Any, ...] = (-1,)
        elif pre is None:
            pre_key = (1,)
        else:
            pre_key = (0, pre.sort_key())

        post_key = (0,) if post is None else (1, post.sort_key())
        dev_key = (1,) if dev is None else (0, dev.sort_key())

        return (epoch, (release.major, release.minor), pre_key, post_key, dev_key)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PackageVersion):
            return NotImplemented
        return self._identity() == other._identity()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PackageVersion):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __hash__(self) -> int:
        return hash(self._identity())


def _to_int(version_string: str, field: str, digits: str) -> int:
    value = int(digits)
    if value > MAX_COMPONENT:
        raise NumericOverflowError(version_string, field)
    return value


def _optional_int(version_string: str, field: str, digits: Optional[str]) -> Optional[int]:
    if digits is None:
        return None
    return _to_int(version_string, field, digits)


def _build_release(version_string: str, release: Optional[str]) -> ReleaseHeader:
    if release is None:
        raise GrammarMismatchError(version_string)
    parts = release.split(".")
    major = _to_int(version_string, "major", parts[0])
    minor = _to_int(version_string, "minor", parts[1]) if len(parts) > 1 else 0
    return ReleaseHeader(major, minor)


def _build_pre(version_string: str, groups: CaptureSet) -> Optional[PreHeader]:
    if groups["pre"] is None:
        return None
    num = _optional_int(version_string, "pre", groups["pre_n"])
    return PreHeader.from_keyword(groups["pre_l"], num)


def _build_post(version_string: str, groups: CaptureSet) -> Optional[PostHeader]:
    if groups["post"] is None:
        return None
    # The bare "-N" form and the keyword form are alternatives; at most one matched
    digits = groups["post_n1"] if groups["post_n1"] is not None else groups["post_n2"]
    keyword = groups["post_l"]
    head: Optional[PostHead] = POST_KEYWORDS[keyword.lower()] if keyword else None
    return PostHeader(head=head, num=_optional_int(version_string, "post", digits))


def _build_dev(version_string: str, groups: CaptureSet) -> Optional[DevHead]:
    if groups["dev"] is None:
        return None
    return DevHead(_optional_int(version_string, "dev", groups["dev_n"]))


def parse_version(version_string: str) -> PackageVersion:
    """Parse a PEP 440 version string into a PackageVersion.

    Args:
        version_string: A version such as ``1.0``, ``v1!2.0rc1.post2.dev3+local``

    Returns:
        A PackageVersion whose ``original`` is ``version_string`` unchanged

    Raises:
        GrammarMismatchError: If the string does not match the grammar
        NumericOverflowError: If a numeric field exceeds ``MAX_COMPONENT``

    Examples:
        >>> parse_version("1.0a1") == parse_version("1.0alpha1")
        True
        >>> parse_version("2013.10").release
        ReleaseHeader(major=2013, minor=10)
    """
    groups = validate_version(version_string)

    epoch = _optional_int(version_string, "epoch", groups["epoch"])

    return PackageVersion(
        original=version_string,
        release=_build_release(version_string, groups["release"]),
        epoch=epoch,
        pre=_build_pre(version_string, groups),
        post=_build_post(version_string, groups),
        dev=_build_dev(version_string, groups),
        local=groups["local"],
    )
