"""Candidate insertion workflow."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import structlog

from ..errors import DuplicateEmailError, UniqueViolation, ValidationError
from ..repository import CandidateRepository
from ..schemas import CandidateSubmission, StoredCandidate
from .validator import coerce_submission, validate_candidate_data


class CandidateService:
    """Validate submissions and store them through an injected repository."""

    def __init__(self, repository: CandidateRepository) -> None:
        self._repository = repository
        self._logger = structlog.get_logger(__name__)

    @property
    def repository(self) -> CandidateRepository:
        return self._repository

    def add_candidate(
        self, data: CandidateSubmission | Mapping[str, Any]
    ) -> StoredCandidate:
        """Insert a new candidate.

        Raises:
            ValidationError: a field violates its constraint. Fields are checked
                in order (first name, last name, email, phone, address) and only
                the first failure is reported.
            DuplicateEmailError: a candidate with the same email already exists,
                either found up front or reported by the repository on insert.
        """
        try:
            validate_candidate_data(data)
            submission = coerce_submission(data)
        except ValidationError as exc:
            self._logger.info("candidate.rejected", field=exc.field, reason=str(exc))
            raise

        if self._repository.find_by_email(submission.email) is not None:
            self._logger.info("candidate.duplicate", stage="lookup")
            raise DuplicateEmailError(submission.email)

        try:
            stored = self._repository.insert(submission.to_insert_fields())
        except UniqueViolation as exc:
            self._logger.info("candidate.duplicate", stage="insert", code=exc.code)
            raise DuplicateEmailError(submission.email) from exc

        self._logger.info("candidate.created", candidate_id=stored.id)
        return stored
