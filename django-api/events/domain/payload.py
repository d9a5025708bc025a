"""Candidate event data as submitted by a client, prior to validation.

Raw request bodies carry empty strings for untouched inputs, numbers as
strings and tags as a comma-delimited string. ``EventPayload.from_mapping``
normalises all of that once; afterwards every optional field is either a
typed value or ``None``. Values that were supplied but could not be parsed
are recorded in ``invalid_fields`` so the validator can report them.
"""

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Any, Self

from events.domain.value_objects import Coordinates, Venue


def parse_tags(raw: str | Iterable[str] | None) -> tuple[str, ...]:
    """Split a delimited tag string (or list) into trimmed, non-empty tags."""
    if raw is None:
        return ()
    if isinstance(raw, str):
        parts = raw.split(",")
    else:
        parts = [str(part) for part in raw]
    return tuple(tag.strip() for tag in parts if tag and tag.strip())


def parse_datetime(value: Any) -> datetime | None:
    """Parse an ISO 8601 timestamp into UTC; naive values are taken as UTC.

    Raises ValueError for anything that is present but not a timestamp.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        parsed = datetime.fromisoformat(value.strip())
    else:
        raise ValueError(f"Not a timestamp: {value!r}")
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def parse_int(value: Any) -> int | None:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    number = parse_decimal(value)
    if number is None:
        return None
    if number != number.to_integral_value():
        raise ValueError(f"Not a whole number: {value!r}")
    return int(number)


def parse_decimal(value: Any) -> Decimal | None:
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise ValueError("Booleans are not numbers")
    try:
        number = Decimal(str(value).strip())
    except InvalidOperation as exc:
        raise ValueError(f"Not a number: {value!r}") from exc
    if not number.is_finite():
        raise ValueError(f"Not a finite number: {value!r}")
    return number


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "on", "yes")
    return bool(value)


@dataclass(frozen=True)
class EventPayload:
    """Event data submitted for creation or update."""

    name: str = ""
    description: str = ""
    location: str = ""
    start_at: datetime | None = None
    end_at: datetime | None = None
    category: str | None = None
    capacity: int | None = None
    ticket_price: Decimal | None = None
    venue: Venue | None = None
    tags: tuple[str, ...] = ()
    image_url: str | None = None
    is_private: bool = False
    max_tickets_per_user: int | None = None
    registration_deadline: datetime | None = None
    cancellation_policy: str = ""
    invalid_fields: frozenset[str] = field(default=frozenset())

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Self:
        """Build a payload from a camelCase request body."""
        if not isinstance(data, Mapping):
            data = {}
        invalid: set[str] = set()

        def convert(key: str, parser):
            try:
                return parser(data.get(key))
            except (ValueError, TypeError):
                invalid.add(key)
                return None

        venue, venue_ok = _venue_from_mapping(data.get("venue"))
        if not venue_ok:
            invalid.add("venue.coordinates")

        return cls(
            name=_text(data.get("name")),
            description=_text(data.get("description")),
            location=_text(data.get("location")),
            start_at=convert("startDateTime", parse_datetime),
            end_at=convert("endDateTime", parse_datetime),
            category=_text(data.get("category")) or None,
            capacity=convert("capacity", parse_int),
            ticket_price=convert("ticketPrice", parse_decimal),
            venue=venue,
            tags=parse_tags(data.get("tags")),
            image_url=_text(data.get("imageUrl")).strip() or None,
            is_private=_flag(data.get("isPrivate")),
            max_tickets_per_user=convert("maxTicketsPerUser", parse_int),
            registration_deadline=convert("registrationDeadline", parse_datetime),
            cancellation_policy=_text(data.get("cancellationPolicy")),
            invalid_fields=frozenset(invalid),
        )


def _venue_from_mapping(raw: Any) -> tuple[Venue | None, bool]:
    if not isinstance(raw, Mapping):
        return None, True
    coordinates = raw.get("coordinates") or {}
    try:
        latitude = float(coordinates.get("latitude") or 0)
        longitude = float(coordinates.get("longitude") or 0)
        ok = math.isfinite(latitude) and math.isfinite(longitude)
    except (TypeError, ValueError, AttributeError):
        ok = False
    if not ok:
        latitude = longitude = 0.0
    venue = Venue(
        name=_text(raw.get("name")).strip(),
        address=_text(raw.get("address")).strip(),
        city=_text(raw.get("city")).strip(),
        state=_text(raw.get("state")).strip(),
        zip_code=_text(raw.get("zipCode")).strip(),
        coordinates=Coordinates(latitude=latitude, longitude=longitude),
    )
    return venue, ok
