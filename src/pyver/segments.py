# SPDX-License-Identifier: MIT
"""Typed segments of a PEP 440 version.

Each segment orders itself independently of the others:

- ``ReleaseHeader`` compares ``(major, minor)``
- ``PreHeader`` compares tag rank first (beta < alpha < preview < rc),
  then the optional number
- ``PostHeader`` and ``DevHead`` compare only their optional number

For every optional number a missing value sorts below any present value,
including 0.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from functools import total_ordering
from typing import Optional


def _number_key(num: Optional[int]) -> tuple[int, int]:
    """Sort key for an optional segment number: missing < 0 < 1 < ..."""
    if num is None:
        return (0, 0)
    return (1, num)


@dataclass(frozen=True, slots=True, order=True)
class ReleaseHeader:
    """Release numbers.

    Attributes:
        major: Major release (breaking changes)
        minor: Minor release (new functionality)
    """

    major: int
    minor: int = 0

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}"


class PreTag(Enum):
    """Pre-release kind after synonym folding."""

    BETA = "beta"
    ALPHA = "alpha"
    PREVIEW = "preview"
    RELEASE_CANDIDATE = "rc"


# Fixed ranking, independent of declaration order
PRE_TAG_RANK = {
    PreTag.BETA: 0,
    PreTag.ALPHA: 1,
    PreTag.PREVIEW: 2,
    PreTag.RELEASE_CANDIDATE: 3,
}

# Lowercase keyword -> tag
PRE_KEYWORDS = {
    "alpha": PreTag.ALPHA,
    "a": PreTag.ALPHA,
    "beta": PreTag.BETA,
    "b": PreTag.BETA,
    "preview": PreTag.PREVIEW,
    "pre": PreTag.PREVIEW,
    "rc": PreTag.RELEASE_CANDIDATE,
    "c": PreTag.RELEASE_CANDIDATE,
}


@total_ordering
@dataclass(frozen=True, slots=True)
class PreHeader:
    """Pre-release identifier, e.g. ``1.0b1``, ``1.0-rc-4`` or ``1.1pre``.

    ``1.0alpha2`` and ``1.0a2`` are represented the same way.
    """

    tag: PreTag
    num: Optional[int] = None

    @classmethod
    def from_keyword(cls, keyword: str, num: Optional[int] = None) -> PreHeader:
        """Build a PreHeader from a grammar keyword such as ``"a"`` or ``"RC"``.

        Raises:
            KeyError: If the keyword is not a pre-release keyword
        """
        return cls(PRE_KEYWORDS[keyword.lower()], num)

    @classmethod
    def alpha(cls, num: Optional[int] = None) -> PreHeader:
        return cls(PreTag.ALPHA, num)

    @classmethod
    def beta(cls, num: Optional[int] = None) -> PreHeader:
        return cls(PreTag.BETA, num)

    @classmethod
    def preview(cls, num: Optional[int] = None) -> PreHeader:
        return cls(PreTag.PREVIEW, num)

    @classmethod
    def release_candidate(cls, num: Optional[int] = None) -> PreHeader:
        return cls(PreTag.RELEASE_CANDIDATE, num)

    @property
    def rank(self) -> int:
        return PRE_TAG_RANK[self.tag]

    def sort_key(self) -> tuple[int, tuple[int, int]]:
        return (self.rank, _number_key(self.num))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PreHeader):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __str__(self) -> str:
        if self.num is None:
            return self.tag.value
        return f"{self.tag.value}{self.num}"


class PostHead(Enum):
    """Post-release keyword. ``r`` and ``rev`` both fold to REV."""

    POST = "post"
    REV = "rev"


POST_KEYWORDS = {
    "post": PostHead.POST,
    "rev": PostHead.REV,
    "r": PostHead.REV,
}


@total_ordering
@dataclass(frozen=True, slots=True)
class PostHeader:
    """Post-release identifier, e.g. ``1.0-9``, ``1.0.post2`` or ``1.0rev``.

    The head is informational: ``post1``, ``rev1`` and ``-1`` are equal.
    """

    head: Optional[PostHead] = field(default=None, compare=False)
    num: Optional[int] = None

    def sort_key(self) -> tuple[int, int]:
        return _number_key(self.num)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PostHeader):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __str__(self) -> str:
        if self.head is None and self.num is not None:
            return f"-{self.num}"
        head = "post" if self.head is None else self.head.value
        if self.num is None:
            return head
        return f"{head}{self.num}"


@total_ordering
@dataclass(frozen=True, slots=True)
class DevHead:
    """Developmental release identifier, e.g. ``1.0.dev4``."""

    num: Optional[int] = None

    def sort_key(self) -> tuple[int, int]:
        return _number_key(self.num)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DevHead):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __str__(self) -> str:
        if self.num is None:
            return "dev"
        return f"dev{self.num}"
