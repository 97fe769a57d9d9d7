"""Errors raised when error declarations are configured incorrectly."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum


class ErrorKind(Enum):
    """The kinds of declaration mistakes, each with its message template."""

    INVALID_IDENT = "Expected valid identifier"
    DUPLICATE_IDENT = "Duplicated identifier, an identifier can't appear twice"
    DUPLICATE_ATTR = "Duplicated attribute, an attribute can't appear twice"
    INVALID_KEY = "The provided key is invalid, expected any of: {expected}"
    INVALID_VALUE = "The provided value is invalid, expected any of: {expected}"
    INVALID_EXPECTED_ENUM = "This attribute can only be used in enums"
    INVALID_HTTP_CODE = "This HTTP status code is not supported"


class FailwrapError(Exception):
    """Raised when an error declaration or its options are invalid."""

    def __init__(self, kind: ErrorKind, expected: Iterable[str] = ()) -> None:
        self.kind = kind
        self.expected = tuple(expected)
        super().__init__(kind.value.format(expected=", ".join(self.expected)))