"""In-memory EventStore, used where a database is not wanted (unit tests)."""

import uuid
from dataclasses import replace
from datetime import datetime, timezone
from decimal import Decimal

from events.domain import Attendee, Capacity, Event, EventId, EventPayload, Money
from events.stores.interfaces import (
    DuplicateAttendeeError,
    EventStore,
    MissingEventError,
    NoSeatsLeftError,
    StoreError,
)


def _utc(value: datetime | None) -> datetime | None:
    return value.astimezone(timezone.utc) if value is not None else None


class InMemoryEventStore(EventStore):
    def __init__(self, events: list[Event] | None = None) -> None:
        self._events: dict[EventId, Event] = {event.id: event for event in events or []}
        self._rsvp_times: dict[tuple[EventId, int], datetime] = {}
        self.fail_writes = False

    def _check_writable(self) -> None:
        if self.fail_writes:
            raise StoreError("Store is read-only")

    def _ordered(self, events) -> list[Event]:
        return sorted(events, key=lambda event: event.start_at)

    def list_events(self) -> list[Event]:
        return self._ordered(self._events.values())

    def list_events_for_user(self, user_id: int) -> list[Event]:
        return self._ordered(e for e in self._events.values() if e.is_attending(user_id))

    def get_event(self, event_id: EventId) -> Event | None:
        return self._events.get(event_id)

    def event_exists(self, event_id: EventId) -> bool:
        return event_id in self._events

    def _build(self, event_id: EventId, payload: EventPayload, **extra) -> Event:
        return Event(
            id=event_id,
            name=payload.name.strip(),
            description=payload.description.strip(),
            location=payload.location.strip(),
            start_at=_utc(payload.start_at),
            end_at=_utc(payload.end_at),
            category=payload.category,
            capacity=Capacity(value=payload.capacity),
            ticket_price=Money(amount=payload.ticket_price or Decimal("0")),
            venue=payload.venue,
            tags=payload.tags,
            image_url=payload.image_url,
            is_private=payload.is_private,
            max_tickets_per_user=payload.max_tickets_per_user or 1,
            registration_deadline=_utc(payload.registration_deadline),
            cancellation_policy=payload.cancellation_policy,
            **extra,
        )

    def create_event(self, payload: EventPayload, organizer_id: int | None) -> Event:
        self._check_writable()
        now = datetime.now(timezone.utc)
        event = self._build(
            EventId(value=uuid.uuid4()),
            payload,
            organizer_id=organizer_id,
            created_at=now,
            updated_at=now,
        )
        self._events[event.id] = event
        return event

    def update_event(self, event_id: EventId, payload: EventPayload) -> Event | None:
        self._check_writable()
        current = self._events.get(event_id)
        if current is None:
            return None
        event = self._build(
            event_id,
            payload,
            attendees=current.attendees,
            organizer_id=current.organizer_id,
            created_at=current.created_at,
            updated_at=datetime.now(timezone.utc),
        )
        self._events[event_id] = event
        return event

    def delete_event(self, event_id: EventId) -> bool:
        self._check_writable()
        return self._events.pop(event_id, None) is not None

    def add_attendee(self, event_id: EventId, user_id: int) -> Event:
        self._check_writable()
        event = self._events.get(event_id)
        if event is None:
            raise MissingEventError(str(event_id))
        if event.is_attending(user_id):
            raise DuplicateAttendeeError(str(event_id))
        if event.is_full:
            raise NoSeatsLeftError(str(event_id))
        event = replace(event, attendees=event.attendees + (user_id,))
        self._events[event_id] = event
        self._rsvp_times[(event_id, user_id)] = datetime.now(timezone.utc)
        return event

    def remove_attendee(self, event_id: EventId, user_id: int) -> Event:
        self._check_writable()
        event = self._events[event_id]
        attendees = tuple(uid for uid in event.attendees if uid != user_id)
        event = replace(event, attendees=attendees)
        self._events[event_id] = event
        self._rsvp_times.pop((event_id, user_id), None)
        return event

    def list_attendees(self, event_id: EventId) -> list[Attendee]:
        event = self._events[event_id]
        return [
            Attendee(
                user_id=user_id,
                username=f"user{user_id}",
                email="",
                rsvp_at=self._rsvp_times.get((event_id, user_id), event.created_at),
            )
            for user_id in event.attendees
        ]
