# SPDX-License-Identifier: MIT
"""Strict SemVer 2.0.0 versions: parsing, validation, precedence and compatibility.

Example:
    >>> from strict_semver import Version, parse_version, compare_versions
    >>>
    >>> version = parse_version("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.release
    'alpha.1'
    >>>
    >>> Version.of(2, 1, 2).is_compatible(Version.of(2, 0, 3))
    True
    >>>
    >>> compare_versions("1.0.0", "2.0.0")
    -1
"""

__version__ = "0.1.0"

from .errors import (
    ErrorKind,
    InvalidVersionError,
    NullReferenceError,
    NumberFormatError,
    SemverError,
)
from .guards import (
    non_negative,
    non_null,
)
from .identifiers import (
    is_valid_identifier,
)
from .precedence import (
    compare_precedence,
    compare_release,
    is_compatible,
)
from .semver import (
    SEMVER_PATTERN,
    Version,
    format_version,
    is_valid_semver,
    parse_version,
)
from .compare import (
    compare_versions,
    max_version,
    sort_versions,
    version_key,
)

__all__ = [
    # Errors
    "ErrorKind",
    "SemverError",
    "NullReferenceError",
    "InvalidVersionError",
    "NumberFormatError",
    # Guards
    "non_null",
    "non_negative",
    # Identifiers
    "is_valid_identifier",
    # Version parsing
    "Version",
    "parse_version",
    "format_version",
    "is_valid_semver",
    "SEMVER_PATTERN",
    # Precedence and compatibility
    "compare_precedence",
    "compare_release",
    "is_compatible",
    # Version comparison
    "compare_versions",
    "version_key",
    "sort_versions",
    "max_version",
]
