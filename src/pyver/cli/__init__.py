# SPDX-License-Identifier: MIT
"""Command-line interface for pyver."""

from .main import cli, main

__all__ = ["cli", "main"]
