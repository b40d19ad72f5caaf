# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from . import check, compare, project

__all__ = ["check", "compare", "project"]
