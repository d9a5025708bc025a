"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from collections.abc import Callable
from datetime import datetime, timezone

from events.domain import (
    Attendee,
    Event,
    EventId,
    EventPayload,
    FilterCriteria,
    extract_categories,
    filter_events,
    validate_event,
)
from events.domain.errors import (
    AlreadyAttendingError,
    EventFullError,
    EventNotFoundError,
    InvalidEventIdError,
    NotAttendingError,
    RegistrationClosedError,
    UpstreamError,
    ValidationError,
)
from events.stores.interfaces import (
    DuplicateAttendeeError,
    EventStore,
    MissingEventError,
    NoSeatsLeftError,
    StoreError,
)

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class EventService:
    """Service for event catalog, administration and RSVP operations."""

    def __init__(
        self, store: EventStore, clock: Callable[[], datetime] = _utcnow
    ) -> None:
        self._store = store
        self._clock = clock

    def _parse_id(self, event_id: str) -> EventId:
        try:
            return EventId.from_string(event_id)
        except (ValueError, TypeError, AttributeError):
            raise InvalidEventIdError() from None

    def _require(self, event_id: str) -> tuple[EventId, Event]:
        parsed = self._parse_id(event_id)
        event = self._store.get_event(parsed)
        if event is None:
            raise EventNotFoundError(event_id)
        return parsed, event

    def list_events(self, criteria: FilterCriteria | None = None) -> list[Event]:
        """Return all events, narrowed by criteria when given."""
        events = self._store.list_events()
        if criteria is None:
            return events
        return filter_events(events, criteria)

    def list_categories(self) -> list[str]:
        return extract_categories(self._store.list_events())

    def list_events_for_user(self, user_id: int) -> list[Event]:
        return self._store.list_events_for_user(user_id)

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        return self._require(event_id)[1]

    def create_event(self, payload: EventPayload, organizer_id: int | None) -> Event:
        """Validate and persist a new event.

        Raises:
            ValidationError: If the payload fails validation.
            UpstreamError: If the store could not save the event.
        """
        result = validate_event(payload)
        if not result.is_valid:
            raise ValidationError(result.errors)
        try:
            event = self._store.create_event(payload, organizer_id)
        except StoreError:
            logger.exception("Failed to create event %r", payload.name)
            raise UpstreamError(payload) from None
        logger.info("Created event %s (%s)", event.id, event.name)
        return event

    def update_event(self, event_id: str, payload: EventPayload) -> Event:
        """Validate and overwrite an existing event; attendees are kept.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
            ValidationError: If the payload fails validation.
            UpstreamError: If the store could not save the event.
        """
        parsed, current = self._require(event_id)
        result = validate_event(payload)
        errors = dict(result.errors)
        if not errors and payload.capacity < len(current.attendees):
            errors["capacity"] = (
                f"Capacity cannot be below the {len(current.attendees)} current attendees"
            )
        if errors:
            raise ValidationError(errors)
        try:
            event = self._store.update_event(parsed, payload)
        except StoreError:
            logger.exception("Failed to update event %s", event_id)
            raise UpstreamError(payload) from None
        if event is None:
            raise EventNotFoundError(event_id)
        logger.info("Updated event %s", event_id)
        return event

    def delete_event(self, event_id: str) -> None:
        parsed = self._parse_id(event_id)
        try:
            deleted = self._store.delete_event(parsed)
        except StoreError:
            logger.exception("Failed to delete event %s", event_id)
            raise UpstreamError() from None
        if not deleted:
            raise EventNotFoundError(event_id)
        logger.info("Deleted event %s", event_id)

    def rsvp(self, event_id: str, user_id: int) -> Event:
        """Reserve a seat for a user.

        Raises:
            AlreadyAttendingError: If the user already holds a seat.
            RegistrationClosedError: If the registration deadline has passed.
            EventFullError: If no seats are left.
            UpstreamError: If the store could not record the seat.
        """
        parsed, event = self._require(event_id)
        if event.is_attending(user_id):
            raise AlreadyAttendingError(event_id)
        if not event.registration_open(self._clock()):
            raise RegistrationClosedError(event_id)
        if event.is_full:
            raise EventFullError(event_id)
        try:
            event = self._store.add_attendee(parsed, user_id)
        except DuplicateAttendeeError:
            raise AlreadyAttendingError(event_id) from None
        except NoSeatsLeftError:
            raise EventFullError(event_id) from None
        except MissingEventError:
            raise EventNotFoundError(event_id) from None
        except StoreError:
            logger.exception("Failed to record RSVP of user %s to %s", user_id, event_id)
            raise UpstreamError() from None
        logger.info("User %s RSVP'd to event %s", user_id, event_id)
        return event

    def cancel_rsvp(self, event_id: str, user_id: int) -> Event:
        parsed, event = self._require(event_id)
        if not event.is_attending(user_id):
            raise NotAttendingError(event_id)
        try:
            event = self._store.remove_attendee(parsed, user_id)
        except StoreError:
            logger.exception("Failed to cancel RSVP of user %s to %s", user_id, event_id)
            raise UpstreamError() from None
        logger.info("User %s cancelled RSVP to event %s", user_id, event_id)
        return event

    def list_attendees(self, event_id: str) -> list[Attendee]:
        parsed, _ = self._require(event_id)
        return self._store.list_attendees(parsed)
