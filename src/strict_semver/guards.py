# SPDX-License-Identifier: MIT
"""Argument guards shared by the version constructor."""

from __future__ import annotations

from typing import TypeVar

from .errors import InvalidVersionError, NullReferenceError

T = TypeVar("T")


def non_null(value: T | None, name: str = "value") -> T:
    """Return ``value`` unchanged, raising NullReferenceError if it is None."""
    if value is None:
        raise NullReferenceError(name)
    return value


def non_negative(value: int, name: str = "value") -> int:
    """Return ``value`` unchanged if it is a non-negative integer.

    Raises:
        NullReferenceError: If value is None
        InvalidVersionError: If value is not an int (bools included) or is negative
    """
    non_null(value, name)
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidVersionError(
            value, f"{name} must be an integer, got {type(value).__name__}"
        )
    if value < 0:
        raise InvalidVersionError(value, f"{name} must be non-negative, got {value}")
    return value
