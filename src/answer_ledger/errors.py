"""Domain errors raised by the answer and event services."""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    """Categories the transport layer maps to status codes."""

    NOT_FOUND = "not_found"
    DUPLICATE_KEY = "duplicate_key"
    VALIDATION = "validation"
    INTERNAL = "internal"


class AnswerLedgerError(Exception):
    """Base class for every categorized error surfaced by the core."""

    kind: ErrorKind = ErrorKind.INTERNAL
    default_message = "internal error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class AnswerNotFoundError(AnswerLedgerError):
    kind = ErrorKind.NOT_FOUND
    default_message = "answer not found"


class DuplicateKeyError(AnswerLedgerError):
    kind = ErrorKind.DUPLICATE_KEY
    default_message = "an answer with this key already exists"


class InvalidAnswerError(AnswerLedgerError):
    kind = ErrorKind.VALIDATION
    default_message = "key and value are required"


class StoreError(AnswerLedgerError):
    """Unexpected persistence failure (connection, serialization, throttling)."""

    kind = ErrorKind.INTERNAL
    default_message = "storage operation failed"
