"""Field-level validation of event payloads.

Every rule runs on every call so that all problems surface together. Nothing
here raises; callers decide what to do with an invalid result.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from urllib.parse import urlparse

from events.domain.payload import EventPayload
from events.domain.value_objects import Category

# Column limits of the events table.
MAX_INTEGER = 2_147_483_647
MAX_TICKET_PRICE = Decimal("100000000")


@dataclass(frozen=True)
class ValidationResult:
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def _blank(value: str | None) -> bool:
    return value is None or value.strip() == ""


def _is_url(value: str) -> bool:
    parsed = urlparse(value)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def validate_event(payload: EventPayload) -> ValidationResult:
    errors: dict[str, str] = {}
    invalid = payload.invalid_fields

    if _blank(payload.name):
        errors["name"] = "Name is required"
    if _blank(payload.description):
        errors["description"] = "Description is required"
    if _blank(payload.location):
        errors["location"] = "Location is required"

    if "startDateTime" in invalid:
        errors["startDateTime"] = "Invalid date"
    elif payload.start_at is None:
        errors["startDateTime"] = "Start date is required"

    if "endDateTime" in invalid:
        errors["endDateTime"] = "Invalid date"
    elif payload.end_at is None:
        errors["endDateTime"] = "End date is required"
    elif payload.start_at is not None and payload.end_at <= payload.start_at:
        errors["endDateTime"] = "End date must be after start date"

    if _blank(payload.category):
        errors["category"] = "Category is required"
    elif payload.category not in Category.values():
        errors["category"] = "Invalid category selected"

    if "capacity" in invalid:
        errors["capacity"] = "Capacity must be a whole number"
    elif payload.capacity is None:
        errors["capacity"] = "Capacity is required"
    elif payload.capacity < 1:
        errors["capacity"] = "Capacity must be at least 1"
    elif payload.capacity > MAX_INTEGER:
        errors["capacity"] = "Capacity is too large"

    if "ticketPrice" in invalid:
        errors["ticketPrice"] = "Ticket price must be a number"
    elif payload.ticket_price is not None:
        if payload.ticket_price < 0:
            errors["ticketPrice"] = "Ticket price cannot be negative"
        elif payload.ticket_price >= MAX_TICKET_PRICE:
            errors["ticketPrice"] = "Ticket price is too large"
        elif payload.ticket_price.normalize().as_tuple().exponent < -2:
            errors["ticketPrice"] = "Ticket price can have at most 2 decimal places"

    if "registrationDeadline" in invalid:
        errors["registrationDeadline"] = "Invalid date"
    elif (
        payload.registration_deadline is not None
        and payload.start_at is not None
        and payload.registration_deadline >= payload.start_at
    ):
        errors["registrationDeadline"] = (
            "Registration deadline must be before event start date"
        )

    if "maxTicketsPerUser" in invalid:
        errors["maxTicketsPerUser"] = "Max tickets per user must be a whole number"
    elif payload.max_tickets_per_user is not None:
        if payload.max_tickets_per_user < 1:
            errors["maxTicketsPerUser"] = "Max tickets per user must be at least 1"
        elif payload.max_tickets_per_user > MAX_INTEGER:
            errors["maxTicketsPerUser"] = "Max tickets per user is too large"

    if payload.image_url is not None and not _is_url(payload.image_url):
        errors["imageUrl"] = "Must be a valid URL"

    if "venue.coordinates" in invalid:
        errors["venue.coordinates"] = "Coordinates must be numbers"

    return ValidationResult(errors=errors)
