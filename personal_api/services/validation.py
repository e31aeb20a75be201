# personal_api/services/validation.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

from email_validator import EmailNotValidError, validate_email

from personal_api.schemas import ContactIn

# wire field name -> (attribute, min, max); bounds inclusive, counted in code points
LENGTH_LIMITS: dict[str, tuple[str, int, int]] = {
    "firstName": ("first_name", 1, 100),
    "lastName": ("last_name", 1, 100),
    "phoneNumber": ("phone_number", 10, 20),
    "message": ("message", 1, 1000),
}


@dataclass(frozen=True)
class Valid:
    submission: ContactIn


@dataclass(frozen=True)
class Invalid:
    # {"firstName": [{"code": "length", "message": ..., "params": {...}}], ...}
    errors: dict[str, list[dict[str, Any]]] = field(default_factory=dict)


ValidationResult = Union[Valid, Invalid]


def _is_email(value: str) -> bool:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def validate_contact(submission: ContactIn) -> ValidationResult:
    errors: dict[str, list[dict[str, Any]]] = {}

    if not _is_email(submission.email):
        errors.setdefault("email", []).append({
            "code": "email",
            "message": "Invalid email address",
            "params": {"value": submission.email},
        })

    for wire_name, (attr, lo, hi) in LENGTH_LIMITS.items():
        value = getattr(submission, attr)
        if not lo <= len(value) <= hi:
            errors.setdefault(wire_name, []).append({
                "code": "length",
                "message": f"Length must be between {lo} and {hi} characters",
                "params": {"min": lo, "max": hi, "value": value},
            })

    if errors:
        return Invalid(errors=errors)
    return Valid(submission=submission)
