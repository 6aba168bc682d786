# SPDX-License-Identifier: MIT
"""Semantic version parsing and comparison.

This package provides an immutable Version value type that parses
MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD] strings and orders them following
SemVer 2.0.0 precedence.

Example:
    >>> from pm_version import Version, parse_version, compare_versions
    >>>
    >>> version = parse_version("1.2.3-alpha.1+build.456")
    >>> version.prerelease_identifiers
    ('alpha', '1')
    >>> str(version.successor())
    '1.2.4-alpha.1+build.456'
    >>>
    >>> parse_version("1.0.0-beta.2") < parse_version("1.0.0-beta.11")
    True
    >>> compare_versions("1.0.0", "2.0.0")
    -1
"""

__version__ = "0.1.0"

from .identifiers import (
    NumericIdentifier,
    PrereleaseIdentifier,
    TextualIdentifier,
    classify,
    compare_prerelease,
)
from .version import (
    MalformedVersionError,
    Version,
    format_version,
    is_valid_version,
    parse_version,
    try_parse_version,
)
from .compare import (
    compare_versions,
    version_key,
)

__all__ = [
    # Value type
    "Version",
    "MalformedVersionError",
    # Parsing and formatting
    "parse_version",
    "try_parse_version",
    "is_valid_version",
    "format_version",
    # Pre-release identifiers
    "NumericIdentifier",
    "TextualIdentifier",
    "PrereleaseIdentifier",
    "classify",
    "compare_prerelease",
    # Version comparison
    "compare_versions",
    "version_key",
]
