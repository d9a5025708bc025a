"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime

from events.domain.value_objects import Capacity, EventId, Money, Venue


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    name: str
    description: str
    location: str
    start_at: datetime
    end_at: datetime
    category: str | None
    capacity: Capacity
    ticket_price: Money
    venue: Venue | None = None
    attendees: tuple[int, ...] = ()
    tags: tuple[str, ...] = ()
    image_url: str | None = None
    is_private: bool = False
    max_tickets_per_user: int = 1
    registration_deadline: datetime | None = None
    cancellation_policy: str = ""
    organizer_id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def seats_left(self) -> int:
        return max(self.capacity.value - len(self.attendees), 0)

    @property
    def is_full(self) -> bool:
        return self.seats_left == 0

    def is_attending(self, user_id: int) -> bool:
        return user_id in self.attendees

    def registration_open(self, now: datetime) -> bool:
        """Registration closes at the deadline, or at the start when none is set."""
        closes_at = self.registration_deadline or self.start_at
        return now < closes_at


@dataclass(frozen=True)
class Attendee:
    """A user holding a seat at an event."""

    user_id: int
    username: str
    email: str
    rsvp_at: datetime
