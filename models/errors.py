"""
Error taxonomy shared by the repositories and the validation layer.

Every failure carries a ``kind`` plus a human readable message. The HTTP
boundary (api/errors.py) turns the kind into a status code through a fixed
table, so nothing below the boundary knows about HTTP.
"""
from __future__ import annotations

import enum


class ErrorKind(enum.Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INTERNAL = "internal"


class LibraryError(Exception):
    """Base failure: a kind, a message and optional structured context."""

    kind = ErrorKind.INTERNAL

    def __init__(self, message: str, **context):
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        return self.message


class InvalidPayload(LibraryError):
    kind = ErrorKind.VALIDATION


class InvalidAuthorRef(LibraryError):
    kind = ErrorKind.VALIDATION


class NotFound(LibraryError):
    kind = ErrorKind.NOT_FOUND


class DuplicateName(LibraryError):
    kind = ErrorKind.CONFLICT


class DuplicateBook(LibraryError):
    kind = ErrorKind.CONFLICT
