from events.domain.filtering import FilterCriteria, extract_categories, filter_events
from events.domain.models import Attendee, Event
from events.domain.payload import EventPayload, parse_tags
from events.domain.validation import ValidationResult, validate_event
from events.domain.value_objects import (
    UNCATEGORIZED,
    Capacity,
    Category,
    Coordinates,
    EventId,
    Money,
    Venue,
)

__all__ = [
    "Event",
    "Attendee",
    "EventPayload",
    "FilterCriteria",
    "ValidationResult",
    "EventId",
    "Money",
    "Capacity",
    "Category",
    "Coordinates",
    "Venue",
    "UNCATEGORIZED",
    "filter_events",
    "extract_categories",
    "parse_tags",
    "validate_event",
]
