# SPDX-License-Identifier: MIT
"""Semantic version value type.

Supports MAJOR.MINOR.PATCH format with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -beta.11, -rc.1, -0.3.7
- Build metadata: +build, +build.123, +20240101

Equality and ordering deliberately disagree on build metadata: two versions
that differ only in build metadata have equal precedence (neither is ``<``
the other) but are not ``==``.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Optional

from .identifiers import NUMERIC_PATTERN, compare_prerelease


class MalformedVersionError(ValueError):
    """Raised when a string does not contain a MAJOR.MINOR.PATCH triple."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Malformed version string: {version!r}"
        super().__init__(self.message)


@dataclass(frozen=True, slots=True)
class Version:
    """An immutable semantic version.

    Negative numeric components are clamped to 0 on construction.

    Attributes:
        major: Major version number
        minor: Minor version number
        patch: Patch version number
        prerelease_identifiers: Ordered pre-release identifiers (e.g. ("rc", "1"));
            empty for a release
        build_metadata_identifier: Build metadata (e.g. "build.5"), ignored by ordering

    Note:
        ``==`` compares every field, build metadata included, while ``<``,
        ``<=``, ``>`` and ``>=`` follow SemVer precedence and ignore build
        metadata. ``Version(1, 0, 0, build_metadata_identifier="a")`` and
        ``Version(1, 0, 0, build_metadata_identifier="b")`` are therefore
        neither ``<`` nor ``==`` each other, while ``<=`` holds both ways.
    """

    major: int
    minor: int
    patch: int
    prerelease_identifiers: tuple[str, ...] = ()
    build_metadata_identifier: Optional[str] = None

    def __post_init__(self) -> None:
        if isinstance(self.prerelease_identifiers, str):
            raise TypeError(
                "prerelease_identifiers must be a sequence of strings, not a single string"
            )
        object.__setattr__(self, "major", max(self.major, 0))
        object.__setattr__(self, "minor", max(self.minor, 0))
        object.__setattr__(self, "patch", max(self.patch, 0))
        object.__setattr__(self, "prerelease_identifiers", tuple(self.prerelease_identifiers))

    @classmethod
    def parse(cls, version_string: str) -> "Version":
        """Parse a version string. See :func:`parse_version`."""
        return parse_version(version_string)

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease_identifiers:
            version += "-" + ".".join(self.prerelease_identifiers)
        if self.build_metadata_identifier is not None:
            version += f"+{self.build_metadata_identifier}"
        return version

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease_identifiers)

    @property
    def prerelease(self) -> Optional[str]:
        """Return the pre-release identifiers joined by dots, or None."""
        if not self.prerelease_identifiers:
            return None
        return ".".join(self.prerelease_identifiers)

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    # Precedence

    def _precedence(self, other: "Version") -> int:
        own = (self.major, self.minor, self.patch)
        theirs = (other.major, other.minor, other.patch)
        if own != theirs:
            return -1 if own < theirs else 1
        return compare_prerelease(self.prerelease_identifiers, other.prerelease_identifiers)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._precedence(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._precedence(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._precedence(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._precedence(other) >= 0

    # Adjacency

    def successor(self) -> "Version":
        """Return the version with the next patch number.

        This is a stepping helper, not a release bump: pre-release and build
        metadata are carried over unchanged.
        """
        return self._stepped(self.major, self.minor, self.patch + 1)

    def predecessor(self) -> "Version":
        """Return the version with the previous patch number.

        At patch 0 the minor number rolls down and the patch becomes
        ``sys.maxsize``; at minor 0 as well the major number rolls down too.
        The predecessor of ``0.0.0`` has ``major == -1``, the only way to
        obtain a negative component.
        """
        if self.patch > 0:
            return self._stepped(self.major, self.minor, self.patch - 1)
        if self.minor > 0:
            return self._stepped(self.major, self.minor - 1, sys.maxsize)
        return self._stepped(self.major - 1, sys.maxsize, sys.maxsize)

    def _stepped(self, major: int, minor: int, patch: int) -> "Version":
        # Bypasses __post_init__ so the 0.0.0 underflow stays observable
        version = object.__new__(Version)
        object.__setattr__(version, "major", major)
        object.__setattr__(version, "minor", minor)
        object.__setattr__(version, "patch", patch)
        object.__setattr__(version, "prerelease_identifiers", self.prerelease_identifiers)
        object.__setattr__(version, "build_metadata_identifier", self.build_metadata_identifier)
        return version


def _required_fields(required: str) -> Optional[tuple[int, int, int]]:
    fields = required.split(".", 2)
    if len(fields) != 3:
        return None
    if not all(NUMERIC_PATTERN.fullmatch(field) for field in fields):
        return None
    try:
        major, minor, patch = (int(field) for field in fields)
    except ValueError:
        # Longer than the interpreter's int conversion limit
        return None
    return major, minor, patch


def parse_version(version_string: str) -> Version:
    """Parse a version string into a Version object.

    The MAJOR.MINOR.PATCH triple is mandatory. Pre-release identifiers are
    split on dots and kept verbatim, including empty identifiers and leading
    zeros: ``"1.2.3-"`` parses with a single empty identifier. A ``-`` that
    appears after the ``+`` belongs to the build metadata.

    Args:
        version_string: A string of the form MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]

    Returns:
        A Version object with parsed components

    Raises:
        MalformedVersionError: If the MAJOR.MINOR.PATCH triple is missing,
            incomplete or not made of non-negative integers

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3, prerelease_identifiers=(), build_metadata_identifier=None)

        >>> parse_version("2.0.0-rc.1+build.456")
        Version(major=2, minor=0, patch=0, prerelease_identifiers=('rc', '1'), build_metadata_identifier='build.456')
    """
    if not isinstance(version_string, str):
        raise MalformedVersionError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    metadata_start = version_string.find("+")
    prerelease_start = version_string.find("-")
    if metadata_start != -1 and prerelease_start > metadata_start:
        prerelease_start = -1

    if prerelease_start != -1:
        required_end = prerelease_start
    elif metadata_start != -1:
        required_end = metadata_start
    else:
        required_end = len(version_string)

    numbers = _required_fields(version_string[:required_end])
    if numbers is None:
        raise MalformedVersionError(version_string)

    prerelease_identifiers: tuple[str, ...] = ()
    if prerelease_start != -1:
        prerelease_end = metadata_start if metadata_start != -1 else len(version_string)
        prerelease_identifiers = tuple(
            version_string[prerelease_start + 1 : prerelease_end].split(".")
        )

    build_metadata_identifier = None
    if metadata_start != -1:
        build_metadata_identifier = version_string[metadata_start + 1 :] or None

    major, minor, patch = numbers
    return Version(
        major=major,
        minor=minor,
        patch=patch,
        prerelease_identifiers=prerelease_identifiers,
        build_metadata_identifier=build_metadata_identifier,
    )


def try_parse_version(version_string: str) -> Optional[Version]:
    """Parse a version string, returning None instead of raising.

    Examples:
        >>> try_parse_version("1.2") is None
        True
    """
    try:
        return parse_version(version_string)
    except MalformedVersionError:
        return None


def is_valid_version(version_string: str) -> bool:
    """Check if a string parses as a version.

    Examples:
        >>> is_valid_version("1.0.0-alpha")
        True
        >>> is_valid_version("1.2.x")
        False
    """
    return try_parse_version(version_string) is not None


def format_version(version: Version) -> str:
    """Render a version in canonical form; the inverse of :func:`parse_version`."""
    return str(version)

