"""Pydantic schema definitions for candidate intake."""

from __future__ import annotations

from .candidate import (
    CandidateSubmission,
    EducationEntry,
    ResumeReference,
    StoredCandidate,
    WorkExperienceEntry,
)
from .config import AppConfig

__all__ = [
    "AppConfig",
    "CandidateSubmission",
    "EducationEntry",
    "ResumeReference",
    "StoredCandidate",
    "WorkExperienceEntry",
]
