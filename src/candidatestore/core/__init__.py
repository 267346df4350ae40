"""Candidate validation and insertion core."""

from __future__ import annotations

from .service import CandidateService
from .validator import coerce_submission, validate_candidate_data

__all__ = [
    "CandidateService",
    "coerce_submission",
    "validate_candidate_data",
]
