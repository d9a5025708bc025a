"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. Write methods receive
payloads that have already been validated.
"""

from abc import ABC, abstractmethod

from events.domain import Attendee, Event, EventId, EventPayload


class StoreError(Exception):
    """Raised by a store when the backing database rejects an operation."""


class MissingEventError(StoreError):
    """The event was removed before the write could be applied."""


class NoSeatsLeftError(StoreError):
    """Every seat was taken by the time the RSVP was written."""


class DuplicateAttendeeError(StoreError):
    """The user already holds a seat at the event."""


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events ordered by start time ascending."""
        ...

    @abstractmethod
    def list_events_for_user(self, user_id: int) -> list[Event]:
        """Return the events a user has RSVP'd to, ordered by start time."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def event_exists(self, event_id: EventId) -> bool:
        """Check if an event exists."""
        ...

    @abstractmethod
    def create_event(self, payload: EventPayload, organizer_id: int | None) -> Event:
        """Persist a new event and return it."""
        ...

    @abstractmethod
    def update_event(self, event_id: EventId, payload: EventPayload) -> Event | None:
        """Overwrite an event's fields, keeping its attendees. None if not found."""
        ...

    @abstractmethod
    def delete_event(self, event_id: EventId) -> bool:
        """Delete an event. Returns False if it did not exist."""
        ...

    @abstractmethod
    def add_attendee(self, event_id: EventId, user_id: int) -> Event:
        """Reserve a seat for a user and return the updated event.

        Capacity and uniqueness are re-checked atomically with the write.

        Raises:
            MissingEventError: If the event no longer exists.
            NoSeatsLeftError: If the event is full.
            DuplicateAttendeeError: If the user already holds a seat.
        """
        ...

    @abstractmethod
    def remove_attendee(self, event_id: EventId, user_id: int) -> Event:
        """Release a user's seat and return the updated event."""
        ...

    @abstractmethod
    def list_attendees(self, event_id: EventId) -> list[Attendee]:
        """Return the attendees of an event in RSVP order."""
        ...
