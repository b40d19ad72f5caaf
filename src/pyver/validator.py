# SPDX-License-Identifier: MIT
"""PEP 440 grammar validation.

The grammar follows the regular expression from PEP 440 appendix B
(https://peps.python.org/pep-0440/#appendix-b-parsing-version-strings-with-regular-expressions)
with an optional leading ``v`` and case-insensitive keywords.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Optional

from .errors import GrammarMismatchError

# Named groups:
# epoch, release, pre, pre_l, pre_n, post, post_n1, post_l, post_n2,
# dev, dev_l, dev_n, local
VERSION_PATTERN = r"""
    v?
    (?:(?P<epoch>[0-9]+)!)?                           # 1!1.0
    (?P<release>[0-9]+(?:\.[0-9]+)*)                  # 1.0, 2013.10, 1.0.15
    (?P<pre>                                          # 1.0.preview-2, 1.0rc2
        [-_.]?
        (?P<pre_l>preview|alpha|beta|pre|rc|a|b|c)
        [-_.]?
        (?P<pre_n>[0-9]+)?
    )?
    (?P<post>                                         # 1.0-9, 1.0.post.2
        -(?P<post_n1>[0-9]+)
        |
        [-_.]?
        (?P<post_l>post|rev|r)
        [-_.]?
        (?P<post_n2>[0-9]+)?
    )?
    (?P<dev>                                          # 1.0-dev3, 1.0_dev_9
        [-_.]?
        (?P<dev_l>dev)
        [-_.]?
        (?P<dev_n>[0-9]+)?
    )?
    (?:\+(?P<local>[a-z0-9]+(?:[-_.][a-z0-9]+)*))?    # 1.0+abc.5
"""

CaptureSet = dict[str, Optional[str]]


@lru_cache(maxsize=None)
def version_regex() -> re.Pattern[str]:
    """Return the compiled grammar, compiling it on first use."""
    return re.compile(VERSION_PATTERN, re.VERBOSE | re.IGNORECASE | re.ASCII)


def validate_version(version_string: str) -> CaptureSet:
    """Check a version string against the grammar and return its named groups.

    Args:
        version_string: The string to validate. It must match in its entirety;
            surrounding whitespace is not stripped.

    Returns:
        A mapping of every named group to its captured text, or None for
        groups that did not participate in the match

    Raises:
        GrammarMismatchError: If the string does not match the grammar

    Examples:
        >>> validate_version("1.0a2")["pre_l"]
        'a'
        >>> validate_version("1!2.0")["epoch"]
        '1'
    """
    if not isinstance(version_string, str):
        raise GrammarMismatchError(
            str(version_string),
            f"Version must be a string, got {type(version_string).__name__}",
        )

    match = version_regex().fullmatch(version_string)
    if match is None:
        raise GrammarMismatchError(version_string)
    return match.groupdict()


def is_valid_version(version_string: str) -> bool:
    """Check if a string is a valid PEP 440 version.

    Examples:
        >>> is_valid_version("1.0.post456.dev34")
        True
        >>> is_valid_version("not a version")
        False
    """
    if not isinstance(version_string, str):
        return False
    return version_regex().fullmatch(version_string) is not None
