# SPDX-License-Identifier: MIT
"""Command line front end for version and toolchain utilities."""

__version__ = "0.1.0"
