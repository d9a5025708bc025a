"""Validation of signup and admin-access request forms.

Same contract as event validation: every rule runs, errors come back as a
field -> message mapping, nothing raises.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Self

from events.domain import ValidationResult

EMAIL_PATTERN = re.compile(r"^[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}$", re.IGNORECASE)
PASSWORD_PATTERN = re.compile(r"^(?=.*[A-Za-z])(?=.*\d)[A-Za-z\d]{6,}$")
MIN_PASSWORD_LENGTH = 6

PREFERENCES = (
    "conference",
    "workshop",
    "technology",
    "artificial-intelligence",
    "blockchain",
)


def _text(value: Any) -> str:
    return "" if value is None else str(value).strip()


@dataclass(frozen=True)
class SignupPayload:
    email: str = ""
    username: str = ""
    password: str = ""
    first_name: str = ""
    last_name: str = ""
    phone_number: str = ""
    company: str = ""
    job_title: str = ""
    bio: str = ""
    preferences: tuple[str, ...] = field(default=())

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Self:
        if not isinstance(data, Mapping):
            data = {}
        profile = data.get("profile")
        if not isinstance(profile, Mapping):
            profile = {}
        preferences = data.get("preferences") or ()
        if isinstance(preferences, str):
            preferences = (preferences,)
        return cls(
            email=_text(data.get("email")),
            username=_text(data.get("username")),
            # Passwords are taken verbatim.
            password="" if data.get("password") is None else str(data.get("password")),
            first_name=_text(profile.get("firstName")),
            last_name=_text(profile.get("lastName")),
            phone_number=_text(profile.get("phoneNumber")),
            company=_text(profile.get("company")),
            job_title=_text(profile.get("jobTitle")),
            bio=_text(profile.get("bio")),
            preferences=tuple(str(p) for p in preferences),
        )


@dataclass(frozen=True)
class AdminRequestPayload:
    reason: str = ""
    experience: str = ""
    references: str = ""
    additional_info: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Self:
        if not isinstance(data, Mapping):
            data = {}
        return cls(
            reason=_text(data.get("reason")),
            experience=_text(data.get("experience")),
            references=_text(data.get("references")),
            additional_info=_text(data.get("additionalInfo")),
        )


def validate_signup(payload: SignupPayload) -> ValidationResult:
    errors: dict[str, str] = {}

    if not payload.email:
        errors["email"] = "Email is required"
    elif not EMAIL_PATTERN.match(payload.email):
        errors["email"] = "Invalid email address"

    if not payload.username:
        errors["username"] = "Username is required"

    if not payload.password:
        errors["password"] = "Password is required"
    elif len(payload.password) < MIN_PASSWORD_LENGTH:
        errors["password"] = "Password must be at least 6 characters"
    elif not PASSWORD_PATTERN.match(payload.password):
        errors["password"] = "Password must contain at least one letter and one number"

    if not payload.first_name:
        errors["profile.firstName"] = "First name is required"
    if not payload.last_name:
        errors["profile.lastName"] = "Last name is required"

    if any(preference not in PREFERENCES for preference in payload.preferences):
        errors["preferences"] = "Invalid preference"

    return ValidationResult(errors=errors)


def validate_admin_request(payload: AdminRequestPayload) -> ValidationResult:
    errors: dict[str, str] = {}
    if not payload.reason:
        errors["reason"] = "Please provide a reason for your request"
    if not payload.experience:
        errors["experience"] = "Please provide your relevant experience"
    return ValidationResult(errors=errors)
