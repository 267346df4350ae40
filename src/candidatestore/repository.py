"""Candidate repository contract and the in-memory reference store."""

from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable

import structlog

from .errors import UniqueViolation
from .schemas import StoredCandidate


@runtime_checkable
class CandidateRepository(Protocol):
    """Persistence capabilities the candidate service depends on.

    ``insert`` must raise :class:`UniqueViolation` when the email is already
    stored, so that a real backend's constraint error can be translated by the
    service.
    """

    def insert(self, fields: Mapping[str, Any]) -> StoredCandidate:
        """Store a new candidate and return it with its assigned id."""

    def find_by_email(self, email: str) -> StoredCandidate | None:
        """Return the candidate stored under ``email``, if any."""

    def find_by_id(self, candidate_id: int) -> StoredCandidate | None:
        """Return the candidate with ``candidate_id``, if any."""


class InMemoryCandidateRepository:
    """Ordered in-memory store with auto-incrementing ids.

    Not thread-safe.
    """

    def __init__(self, *, start_id: int = 1) -> None:
        self._start_id = start_id
        self._candidates: list[StoredCandidate] = []
        self._next_id = start_id
        self._logger = structlog.get_logger(__name__)

    def insert(self, fields: Mapping[str, Any]) -> StoredCandidate:
        email = fields.get("email")
        if any(candidate.email == email for candidate in self._candidates):
            raise UniqueViolation("email", email)

        candidate = StoredCandidate.model_validate({**fields, "id": self._next_id})
        self._next_id += 1
        self._candidates.append(candidate)
        self._logger.debug("repository.insert", candidate_id=candidate.id)
        return candidate.model_copy(deep=True)

    def find_by_email(self, email: str) -> StoredCandidate | None:
        for candidate in self._candidates:
            if candidate.email == email:
                return candidate.model_copy(deep=True)
        return None

    def find_by_id(self, candidate_id: int) -> StoredCandidate | None:
        for candidate in self._candidates:
            if candidate.id == candidate_id:
                return candidate.model_copy(deep=True)
        return None

    def find_all(self) -> list[StoredCandidate]:
        return [candidate.model_copy(deep=True) for candidate in self._candidates]

    def clear(self) -> None:
        self._candidates = []
        self._next_id = self._start_id

    def __len__(self) -> int:
        return len(self._candidates)


__all__ = ["CandidateRepository", "InMemoryCandidateRepository"]
