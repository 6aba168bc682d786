# SPDX-License-Identifier: MIT
"""Typed prerelease identifiers and their SemVer precedence.

A prerelease identifier is stored on a Version as plain text. When two
identifiers have to be ordered, each one is classified exactly once into a
``NumericIdentifier`` (ASCII digits only) or a ``TextualIdentifier``
(anything else, including the empty string).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Sequence, Union

# Entirely ASCII digits; ``str.isdigit`` would also accept e.g. superscripts
NUMERIC_PATTERN = re.compile(r"[0-9]+")


@dataclass(frozen=True, slots=True)
class NumericIdentifier:
    """A prerelease identifier made only of digits, compared by value.

    Holds the digits without leading zeros. Ordering uses (length, digits),
    which matches integer order for any number of digits.
    """

    digits: str

    def magnitude(self) -> tuple[int, str]:
        return (len(self.digits), self.digits)

    def sort_key(self) -> tuple[int, tuple[int, str], str]:
        return (0, self.magnitude(), "")


@dataclass(frozen=True, slots=True)
class TextualIdentifier:
    """A prerelease identifier compared lexically by code point."""

    text: str

    def sort_key(self) -> tuple[int, tuple[int, str], str]:
        return (1, (0, ""), self.text)


PrereleaseIdentifier = Union[NumericIdentifier, TextualIdentifier]


def is_numeric(identifier: str) -> bool:
    """Return True if the identifier is a non-negative integer literal."""
    return NUMERIC_PATTERN.fullmatch(identifier) is not None


def classify(identifier: str) -> PrereleaseIdentifier:
    """Classify a raw identifier into its numeric or textual variant.

    Examples:
        >>> classify("11")
        NumericIdentifier(digits='11')
        >>> classify("beta")
        TextualIdentifier(text='beta')
    """
    if is_numeric(identifier):
        return NumericIdentifier(identifier.lstrip("0") or "0")
    return TextualIdentifier(identifier)


def compare_identifiers(left: PrereleaseIdentifier, right: PrereleaseIdentifier) -> int:
    """Compare two classified identifiers.

    Returns:
        -1, 0 or 1. Numeric identifiers always precede textual ones.
    """
    if isinstance(left, NumericIdentifier) and isinstance(right, NumericIdentifier):
        return (left.magnitude() > right.magnitude()) - (left.magnitude() < right.magnitude())
    if isinstance(left, TextualIdentifier) and isinstance(right, TextualIdentifier):
        return (left.text > right.text) - (left.text < right.text)
    if isinstance(left, NumericIdentifier):
        return -1
    return 1


def compare_prerelease(left: Sequence[str], right: Sequence[str]) -> int:
    """Compare two prerelease identifier sequences by SemVer precedence.

    An empty sequence means "release" and has higher precedence than any
    prerelease. Otherwise identifiers are compared position by position and
    the first decisive position wins; with an identical common prefix the
    shorter sequence comes first.

    Returns:
        -1 if left < right, 0 if they have equal precedence, 1 otherwise
    """
    if not left and not right:
        return 0
    if not left:
        return 1  # Release > prerelease
    if not right:
        return -1

    for left_identifier, right_identifier in zip(left, right):
        if left_identifier == right_identifier:
            continue
        result = compare_identifiers(classify(left_identifier), classify(right_identifier))
        if result:
            return result

    return (len(left) > len(right)) - (len(left) < len(right))


def prerelease_key(identifiers: Sequence[str]) -> tuple:
    """Return a sort key for a prerelease sequence that agrees with
    :func:`compare_prerelease`.
    """
    if not identifiers:
        return (1,)
    return (0, tuple(classify(identifier).sort_key() for identifier in identifiers))
