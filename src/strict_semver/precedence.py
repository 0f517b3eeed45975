# SPDX-License-Identifier: MIT
"""Version precedence and compatibility rules.

Build metadata never participates in precedence or compatibility.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .identifiers import is_numeric_identifier

if TYPE_CHECKING:
    from .semver import Version


def _sign(a, b) -> int:
    if a == b:
        return 0
    return -1 if a < b else 1


def _compare_identifier(p1: str, p2: str) -> int:
    """Compare two pre-release identifiers at the same position."""
    is_num1 = is_numeric_identifier(p1)
    is_num2 = is_numeric_identifier(p2)

    if is_num1 and is_num2:
        return _sign(int(p1), int(p2))
    if is_num1:
        # Numeric < alphanumeric per SemVer
        return -1
    if is_num2:
        return 1
    return _sign(p1, p2)


def compare_release(release1: str, release2: str) -> int:
    """Compare two pre-release strings.

    Returns:
        -1 if release1 < release2
        0 if release1 == release2
        1 if release1 > release2

    An empty string means no pre-release, which has higher precedence
    than any pre-release (1.0.0 > 1.0.0-alpha). A pre-release with more
    identifiers has higher precedence (alpha.1 > alpha, alpha.1.2 > beta.1);
    pre-releases of equal length are decided by their first differing
    identifier.
    """
    if not release1 and not release2:
        return 0
    if not release1:
        return 1
    if not release2:
        return -1

    parts1 = release1.split(".")
    parts2 = release2.split(".")

    if len(parts1) != len(parts2):
        return _sign(len(parts1), len(parts2))

    for p1, p2 in zip(parts1, parts2):
        result = _compare_identifier(p1, p2)
        if result != 0:
            return result
    return 0


def compare_precedence(v1: Version, v2: Version) -> int:
    """Compare two versions by SemVer precedence.

    Returns:
        -1, 0 or 1. Zero exactly when ``v1 == v2``.

    Examples:
        >>> from strict_semver import Version
        >>> compare_precedence(Version.of(1, 0, 0, "alpha.1"), Version.of(1, 0, 0, "alpha.a"))
        -1
        >>> compare_precedence(Version.of(3, 2, 0, "", "meta"), Version.of(3, 2, 0))
        0
    """
    for attr in ("major", "minor", "patch"):
        result = _sign(getattr(v1, attr), getattr(v2, attr))
        if result != 0:
            return result

    return compare_release(v1.release, v2.release)


def is_compatible(v1: Version, v2: Version) -> bool:
    """Return True if ``v2`` can stand in for ``v1`` under SemVer API rules.

    Versions are compatible when their pre-releases and majors match.
    Below 1.0.0 the minor version is a breaking boundary too. Patch and
    build metadata are ignored.

    Examples:
        >>> from strict_semver import Version
        >>> is_compatible(Version.of(2, 1, 2), Version.of(2, 0, 3))
        True
        >>> is_compatible(Version.of(0, 1, 2), Version.of(0, 2, 3))
        False
    """
    if v1.release != v2.release or v1.major != v2.major:
        return False
    if v1.major == 0:
        return v1.minor == v2.minor
    return True
