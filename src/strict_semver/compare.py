# SPDX-License-Identifier: MIT
"""Version comparison helpers accepting version strings or Version objects.

Ordering follows :func:`strict_semver.precedence.compare_precedence`;
build metadata is ignored.
"""

from __future__ import annotations

from typing import Iterable, Union

from .identifiers import is_numeric_identifier
from .precedence import compare_precedence
from .semver import Version, parse_version

VersionLike = Union[str, Version]


def _coerce(version: VersionLike) -> Version:
    return parse_version(version) if isinstance(version, str) else version


def compare_versions(version1: VersionLike, version2: VersionLike) -> int:
    """Compare two semantic versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid
        NumberFormatError: If a numeric component of either string is malformed

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0-alpha.1", "1.0.0-alpha.a")
        -1
        >>> compare_versions("1.0.0+build1", "1.0.0+build2")
        0
    """
    return compare_precedence(_coerce(version1), _coerce(version2))


def version_key(version: VersionLike) -> tuple:
    """Return a sort key for a version, suitable for sorting.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    v = _coerce(version)

    # No pre-release becomes (1,) to sort after every pre-release.
    # Pre-releases sort by identifier count, then identifier by identifier;
    # numeric identifiers are tagged 0 so they sort before alphanumeric ones.
    if not v.release:
        release_key: tuple = (1,)
    else:
        parts = []
        for part in v.release_identifiers:
            if is_numeric_identifier(part):
                parts.append((0, int(part)))
            else:
                parts.append((1, part))
        release_key = (0, len(parts), tuple(parts))

    return (v.major, v.minor, v.patch, release_key)


def sort_versions(versions: Iterable[VersionLike], reverse: bool = False) -> list[Version]:
    """Parse and sort versions by precedence.

    The sort is stable: versions differing only in build metadata keep
    their input order.
    """
    return sorted((_coerce(v) for v in versions), reverse=reverse)


def max_version(versions: Iterable[VersionLike]) -> Version:
    """Return the version with the highest precedence.

    Raises:
        ValueError: If ``versions`` is empty
    """
    parsed = [_coerce(v) for v in versions]
    if not parsed:
        raise ValueError("max_version() requires at least one version")
    return max(parsed)
