# SPDX-License-Identifier: MIT
"""Exceptions raised while parsing version strings."""

from __future__ import annotations


class InvalidVersionError(ValueError):
    """Raised when a string is not a valid PEP 440 version."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid version: {version}"
        super().__init__(self.message)


class GrammarMismatchError(InvalidVersionError):
    """Raised when a string does not match the version grammar."""

    def __init__(self, version: str, message: str = ""):
        super().__init__(version, message or f"Failed to decode version {version!r}")


class NumericOverflowError(InvalidVersionError):
    """Raised when a numeric field does not fit in an unsigned 32-bit integer."""

    def __init__(self, version: str, field: str, message: str = ""):
        self.field = field
        super().__init__(
            version,
            message or f"Numeric field {field!r} out of range in version {version!r}",
        )
