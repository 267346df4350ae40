"""Domain errors raised by the candidate intake workflow."""

from __future__ import annotations


class CandidateError(Exception):
    """Base class for candidate intake failures."""


class ValidationError(CandidateError, ValueError):
    """Raised when a submission violates a field constraint."""

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field


class DuplicateEmailError(CandidateError):
    """Raised when a candidate with the same email is already stored."""

    MESSAGE = "The email already exists in the database"

    def __init__(self, email: str | None = None) -> None:
        super().__init__(self.MESSAGE)
        self.email = email


class UniqueViolation(CandidateError):
    """Storage-level uniqueness constraint failure."""

    code = "unique_violation"

    def __init__(self, field: str, value: object) -> None:
        super().__init__(f"Unique constraint failed on the fields: ({field})")
        self.field = field
        self.value = value


__all__ = [
    "CandidateError",
    "ValidationError",
    "DuplicateEmailError",
    "UniqueViolation",
]
