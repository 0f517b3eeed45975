# SPDX-License-Identifier: MIT
"""Validation of dot-separated pre-release and build metadata identifiers.

An identifier is a non-empty run of ASCII alphanumerics and hyphens.
Purely numeric identifiers may not carry a leading zero unless the whole
identifier is ``"0"``.
"""

from __future__ import annotations

import re

from .errors import InvalidVersionError

_IDENTIFIER_PATTERN = re.compile(r"[0-9A-Za-z-]+")
_NUMERIC_PATTERN = re.compile(r"[0-9]+")


def is_numeric_identifier(token: str) -> bool:
    """Return True if ``token`` consists solely of ASCII digits."""
    return _NUMERIC_PATTERN.fullmatch(token) is not None


def is_valid_identifier(token: str) -> bool:
    """Check a single identifier against the release/metadata grammar.

    Examples:
        >>> is_valid_identifier("alpha")
        True
        >>> is_valid_identifier("0")
        True
        >>> is_valid_identifier("002")
        False
        >>> is_valid_identifier("")
        False
    """
    if _IDENTIFIER_PATTERN.fullmatch(token) is None:
        return False
    if len(token) > 1 and token[0] == "0":
        return not is_numeric_identifier(token)
    return True


def split_identifiers(text: str, field_name: str) -> tuple[str, ...]:
    """Split a dot-separated identifier list, validating every token.

    An empty string means the field is absent and yields an empty tuple.

    Raises:
        InvalidVersionError: If any token is empty, contains a character
            outside ``[0-9A-Za-z-]``, or is numeric with a leading zero
    """
    if not text:
        return ()
    tokens = tuple(text.split("."))
    for token in tokens:
        if not is_valid_identifier(token):
            raise InvalidVersionError(
                text, f"Invalid {field_name} identifier {token!r} in {text!r}"
            )
    return tokens
