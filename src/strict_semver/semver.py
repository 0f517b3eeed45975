# SPDX-License-Identifier: MIT
"""Semantic version value type and parser.

Supports MAJOR.MINOR.PATCH format with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -beta-release, -0.3.7
- Build metadata: +build, +build.123, +20240101
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import total_ordering

from .errors import InvalidVersionError, NumberFormatError
from .guards import non_negative, non_null
from .identifiers import split_identifiers
from .precedence import compare_precedence, is_compatible

# Semantic versioning regex pattern (SemVer 2.0.0 compliant, numeric build
# identifiers without leading zeros)
# https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
_IDENTIFIER = r"(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
SEMVER_PATTERN = re.compile(
    r"^(?P<major>0|[1-9]\d*)"
    r"\.(?P<minor>0|[1-9]\d*)"
    r"\.(?P<patch>0|[1-9]\d*)"
    rf"(?:-(?P<prerelease>{_IDENTIFIER}(?:\.{_IDENTIFIER})*))?"
    rf"(?:\+(?P<buildmetadata>{_IDENTIFIER}(?:\.{_IDENTIFIER})*))?$",
    re.ASCII,
)

# Splits the core from the optional "-release" and "+metadata" segments.
# Always matches; the pieces are checked individually.
_SEGMENTS = re.compile(
    r"(?P<core>[^-+]*)(?:-(?P<release>[^+]*))?(?:\+(?P<metadata>.*))?", re.DOTALL
)
_NUMBER = re.compile(r"0|[1-9][0-9]*")
_DIGITS = re.compile(r"[0-9]+")
_ALPHANUMERIC = re.compile(r"[0-9A-Za-z]+")


@total_ordering
@dataclass(frozen=True, slots=True)
class Version:
    """Represents a validated semantic version.

    Equality, hashing and ordering ignore ``metadata``. Ordering follows
    SemVer precedence (see :func:`strict_semver.precedence.compare_precedence`).

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        release: Pre-release identifiers (e.g., "alpha.1"), "" if absent
        metadata: Build metadata identifiers (e.g., "build.123"), "" if absent

    Raises:
        InvalidVersionError: On a negative or non-integer number, or an
            illegal identifier
        NullReferenceError: If release or metadata is None
    """

    major: int
    minor: int
    patch: int
    release: str = ""
    metadata: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        non_negative(self.major, "major")
        non_negative(self.minor, "minor")
        non_negative(self.patch, "patch")
        for name in ("release", "metadata"):
            value = non_null(getattr(self, name), name)
            if not isinstance(value, str):
                raise InvalidVersionError(
                    value, f"{name} must be a string, got {type(value).__name__}"
                )
            split_identifiers(value, name)

    @classmethod
    def of(
        cls, major: int, minor: int, patch: int, release: str = "", metadata: str = ""
    ) -> Version:
        """Create a version from its fields."""
        return cls(major, minor, patch, release, metadata)

    @classmethod
    def parse(cls, version_string: str) -> Version:
        """Parse a version string. See :func:`parse_version`."""
        return parse_version(version_string)

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.release:
            version += f"-{self.release}"
        if self.metadata:
            version += f"+{self.metadata}"
        return version

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_precedence(self, other) < 0

    def compare_to(self, other: Version) -> int:
        """Return -1, 0 or 1 as this version precedes, equals or follows ``other``."""
        return compare_precedence(self, other)

    def is_compatible(self, other: Version) -> bool:
        """Return True if ``other`` is API-compatible with this version."""
        return is_compatible(self, other)

    @property
    def release_identifiers(self) -> tuple[str, ...]:
        return split_identifiers(self.release, "release")

    @property
    def metadata_identifiers(self) -> tuple[str, ...]:
        return split_identifiers(self.metadata, "metadata")

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.release)

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"


def format_version(version: Version) -> str:
    """Render a version in canonical form, e.g. ``"2.1.5-alpha+M450"``."""
    return str(version)


def _parse_number(component: str, name: str, version_string: str) -> int:
    if _DIGITS.fullmatch(component):
        if not _NUMBER.fullmatch(component):
            raise InvalidVersionError(
                version_string, f"{name} version {component!r} has a leading zero"
            )
        return int(component)
    if _ALPHANUMERIC.fullmatch(component):
        raise NumberFormatError(
            version_string, f"{name} version {component!r} is not a number"
        )
    raise InvalidVersionError(version_string)


def _parse(version_string: str) -> Version:
    segments = _SEGMENTS.fullmatch(version_string)
    if segments is None:
        raise InvalidVersionError(version_string)

    components = segments.group("core").split(".")
    if len(components) != 3:
        raise InvalidVersionError(
            version_string, f"Expected MAJOR.MINOR.PATCH in {version_string!r}"
        )
    major, minor, patch = (
        _parse_number(component, name, version_string)
        for component, name in zip(components, ("major", "minor", "patch"))
    )

    release = segments.group("release")
    metadata = segments.group("metadata")
    if release == "":
        raise InvalidVersionError(version_string, "Pre-release after '-' cannot be empty")
    if metadata == "":
        raise InvalidVersionError(version_string, "Build metadata after '+' cannot be empty")

    return Version(major, minor, patch, release or "", metadata or "")


def parse_version(version_string: str) -> Version:
    """Parse a semantic version string into a Version object.

    Args:
        version_string: A string following semantic versioning format
            (MAJOR.MINOR.PATCH[-prerelease][+build]). Surrounding whitespace
            is not stripped.

    Returns:
        A Version object with parsed components

    Raises:
        NullReferenceError: If version_string is None
        NumberFormatError: If a numeric component contains letters
        InvalidVersionError: If the string does not follow semantic versioning

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3, release='', metadata='')

        >>> parse_version("2.0.0-rc.1+build.456")
        Version(major=2, minor=0, patch=0, release='rc.1', metadata='build.456')
    """
    non_null(version_string, "version_string")
    if not isinstance(version_string, str):
        raise InvalidVersionError(
            version_string,
            f"Version must be a string, got {type(version_string).__name__}",
        )

    return _parse(version_string)


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is a valid semantic version.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver("1.0.0-beta.002")
        False
    """
    if not isinstance(version_string, str):
        return False
    return SEMVER_PATTERN.fullmatch(version_string) is not None
