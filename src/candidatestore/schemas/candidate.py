"""Candidate submission and stored record models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class EducationEntry(BaseModel):
    """Education history entry attached to a submission; stored as given."""

    institution: Any = None
    title: Any = None
    start_date: Any = Field(default=None, alias="startDate")
    end_date: Any = Field(default=None, alias="endDate")

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class WorkExperienceEntry(BaseModel):
    """Employment history entry attached to a submission; stored as given."""

    company: Any = None
    position: Any = None
    description: Any = None
    start_date: Any = Field(default=None, alias="startDate")
    end_date: Any = Field(default=None, alias="endDate")

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class ResumeReference(BaseModel):
    """Pointer to an already uploaded resume file."""

    file_path: Any = Field(default=None, alias="filePath")
    file_type: Any = Field(default=None, alias="fileType")

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class CandidateSubmission(BaseModel):
    """Unvalidated candidate data supplied by a caller.

    Required fields default to None so that the validator, not the model,
    reports the first violated constraint.
    """

    first_name: str | None = Field(default=None, alias="firstName")
    last_name: str | None = Field(default=None, alias="lastName")
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    educations: list[EducationEntry] | None = None
    work_experiences: list[WorkExperienceEntry] | None = Field(
        default=None, alias="workExperiences"
    )
    cv: ResumeReference | None = None

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    def to_insert_fields(self) -> dict[str, Any]:
        """Return normalized repository insert fields."""
        return {
            "first_name": self.first_name,
            "last_name": self.last_name,
            "email": self.email,
            "phone": self.phone,
            "address": self.address,
            "educations": list(self.educations or []),
            "work_experiences": list(self.work_experiences or []),
            "resumes": [self.cv] if self.cv else [],
        }


class StoredCandidate(BaseModel):
    """Candidate record held by a repository."""

    id: int
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    email: str
    phone: str | None = None
    address: str | None = None
    educations: list[EducationEntry] = Field(default_factory=list)
    work_experiences: list[WorkExperienceEntry] = Field(
        default_factory=list, alias="workExperiences"
    )
    resumes: list[ResumeReference] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid", populate_by_name=True)
