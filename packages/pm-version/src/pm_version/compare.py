# SPDX-License-Identifier: MIT
"""Version comparison following SemVer 2.0.0 precedence.

Numeric pre-release identifiers compare by value and always precede
alphanumeric ones, which compare lexically.
Build metadata is ignored in comparisons per SemVer spec.
"""

from __future__ import annotations

from typing import Union

from .identifiers import prerelease_key
from .version import Version, parse_version


def _coerce(version: Union[str, Version]) -> Version:
    return parse_version(version) if isinstance(version, str) else version


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two semantic versions by precedence.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 and version2 have equal precedence
        1 if version1 > version2

    Raises:
        MalformedVersionError: If either version string is malformed

    Note:
        A result of 0 does not imply ``==``: build metadata is ignored here
        but still takes part in Version equality.

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0-1", "1.0.0-alpha")
        -1
        >>> compare_versions("1.0.0+build1", "1.0.0+build2")
        0
    """
    v1 = _coerce(version1)
    v2 = _coerce(version2)

    if v1 < v2:
        return -1
    if v2 < v1:
        return 1
    return 0


def version_key(version: Union[str, Version]) -> tuple:
    """Return a sort key for a version, suitable for sorting.

    Args:
        version: Version string or Version object

    Returns:
        A tuple whose ordering agrees with Version precedence

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    v = _coerce(version)
    return (v.major, v.minor, v.patch, prerelease_key(v.prerelease_identifiers))
