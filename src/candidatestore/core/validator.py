"""Field validation for candidate submissions."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

import pydantic

from ..errors import ValidationError
from ..schemas import CandidateSubmission

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100
ADDRESS_MAX_LENGTH = 100

NAME_PATTERN = re.compile(r"[a-zA-ZñÑáéíóúÁÉÍÓÚ ]+")
EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
# Spanish national format: mobile prefixes 6 and 7, landlines 9.
PHONE_PATTERN = re.compile(r"(6|7|9)[0-9]{8}")

_ALIASES: dict[str, str] = {
    "firstName": "first_name",
    "lastName": "last_name",
    "workExperiences": "work_experiences",
}


def validate_candidate_data(data: CandidateSubmission | Mapping[str, Any]) -> None:
    """Raise ValidationError for the first violated constraint.

    Fields are checked in order (first name, last name, email, phone,
    address); a value of the wrong type fails its own field's check, so a
    later field never reports before an earlier one.
    """
    fields = _raw_fields(data)
    _validate_name(fields.get("first_name"), field="first_name")
    _validate_name(fields.get("last_name"), field="last_name")
    _validate_email(fields.get("email"))
    _validate_phone(fields.get("phone"))
    _validate_address(fields.get("address"))


def coerce_submission(data: CandidateSubmission | Mapping[str, Any]) -> CandidateSubmission:
    """Build a submission model from data that passed validation."""
    if isinstance(data, CandidateSubmission):
        return data
    if not isinstance(data, Mapping):
        raise ValidationError("Invalid candidate data")
    try:
        return CandidateSubmission.model_validate(dict(data))
    except pydantic.ValidationError as exc:
        # Sub-record containers of the wrong shape, e.g. a string for educations.
        raise ValidationError("Invalid candidate data") from exc


def _raw_fields(data: CandidateSubmission | Mapping[str, Any]) -> dict[str, Any]:
    if isinstance(data, CandidateSubmission):
        return data.model_dump()
    if not isinstance(data, Mapping):
        raise ValidationError("Invalid candidate data")
    fields = {key: value for key, value in data.items() if key not in _ALIASES}
    for alias, name in _ALIASES.items():
        if alias in data:
            fields[name] = data[alias]
    return fields


def _is_absent(value: Any) -> bool:
    return value is None or value == ""


def _validate_name(name: Any, *, field: str) -> None:
    if (
        not isinstance(name, str)
        or len(name) < NAME_MIN_LENGTH
        or len(name) > NAME_MAX_LENGTH
        or not NAME_PATTERN.fullmatch(name)
    ):
        raise ValidationError("Invalid name", field=field)


def _validate_email(email: Any) -> None:
    if not isinstance(email, str) or not EMAIL_PATTERN.fullmatch(email):
        raise ValidationError("Invalid email", field="email")


def _validate_phone(phone: Any) -> None:
    if _is_absent(phone):
        return
    if not isinstance(phone, str) or not PHONE_PATTERN.fullmatch(phone):
        raise ValidationError("Invalid phone", field="phone")


def _validate_address(address: Any) -> None:
    if _is_absent(address):
        return
    if not isinstance(address, str) or len(address) > ADDRESS_MAX_LENGTH:
        raise ValidationError("Invalid address", field="address")
