# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from . import toolchain, version

__all__ = ["toolchain", "version"]
