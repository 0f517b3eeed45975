# SPDX-License-Identifier: MIT
"""Exception classes for version construction and parsing."""

from __future__ import annotations

from typing import Any


class ErrorKind:
    """Error kinds carried by every :class:`SemverError`."""

    NULL_REFERENCE = "NULL_REFERENCE"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    NUMBER_FORMAT = "NUMBER_FORMAT"


class SemverError(Exception):
    """Base class for all version errors.

    Attributes:
        value: The offending input value
        message: Human-readable error message
        kind: One of the :class:`ErrorKind` constants
    """

    kind = ErrorKind.INVALID_ARGUMENT

    def __init__(self, value: Any, message: str = ""):
        self.value = value
        self.message = message or f"Invalid semantic version: {value!r}"
        super().__init__(self.message)


class NullReferenceError(SemverError, TypeError):
    """Raised when a required argument is None."""

    kind = ErrorKind.NULL_REFERENCE

    def __init__(self, name: str, message: str = ""):
        self.name = name
        super().__init__(None, message or f"{name} must not be None")


class InvalidVersionError(SemverError, ValueError):
    """Raised when a version, field or identifier is malformed."""

    kind = ErrorKind.INVALID_ARGUMENT


class NumberFormatError(SemverError, ValueError):
    """Raised when a numeric version component contains non-digit characters.

    Not a subclass of :class:`InvalidVersionError`, so callers can tell a
    malformed number apart from a malformed version string.
    """

    kind = ErrorKind.NUMBER_FORMAT
