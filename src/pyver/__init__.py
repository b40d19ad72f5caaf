# SPDX-License-Identifier: MIT
"""PEP 440 version parsing and ordering.

This package parses version strings following the PEP 440 grammar into typed
segments and orders them so callers can tell whether one version supersedes
another, or whether two strings denote the same release.

Example:
    >>> from pyver import parse_version, compare_versions, is_valid_version
    >>>
    >>> version = parse_version("v1!1.0rc2.post3.dev4+ubuntu.1")
    >>> version.epoch
    1
    >>> version.local
    'ubuntu.1'
    >>>
    >>> is_valid_version("1.0")
    True
    >>>
    >>> compare_versions("1.0a1", "1.0alpha1")
    0
"""

__version__ = "1.0.0"

from .errors import (
    InvalidVersionError,
    GrammarMismatchError,
    NumericOverflowError,
)
from .segments import (
    ReleaseHeader,
    PreTag,
    PreHeader,
    PostHead,
    PostHeader,
    DevHead,
)
from .validator import (
    VERSION_PATTERN,
    CaptureSet,
    validate_version,
    is_valid_version,
)
from .version import (
    MAX_COMPONENT,
    PackageVersion,
    parse_version,
)
from .compare import (
    compare_versions,
    version_key,
    max_version,
)

__all__ = [
    # Errors
    "InvalidVersionError",
    "GrammarMismatchError",
    "NumericOverflowError",
    # Segments
    "ReleaseHeader",
    "PreTag",
    "PreHeader",
    "PostHead",
    "PostHeader",
    "DevHead",
    # Grammar
    "VERSION_PATTERN",
    "CaptureSet",
    "validate_version",
    "is_valid_version",
    # Version parsing
    "MAX_COMPONENT",
    "PackageVersion",
    "parse_version",
    # Version comparison
    "compare_versions",
    "version_key",
    "max_version",
]
