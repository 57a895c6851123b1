from __future__ import annotations


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidTimeFormat(ValidationError):
    """Raised when a HH:MM[:SS] string cannot be parsed."""

    def __init__(self, value: object):
        super().__init__(f"Invalid time value: {value!r} (expected HH:MM or HH:MM:SS)")
        self.value = value


class ProcessingError(DomainError):
    """Raised when a batch attendance run fails part-way.

    Records upserted before the failure are kept; `processed_count` says how many.
    """

    def __init__(self, message: str, *, processed_count: int = 0):
        super().__init__(message)
        self.processed_count = int(processed_count)


class ProcessingCancelled(ProcessingError):
    """Raised when the caller's cancellation hook stops a batch run."""
