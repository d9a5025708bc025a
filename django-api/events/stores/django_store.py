"""Django ORM implementation of the EventStore."""

from decimal import Decimal
from typing import Any

from django.db import DatabaseError, IntegrityError, transaction

from events import models as orm
from events.domain import (
    Attendee,
    Capacity,
    Coordinates,
    Event,
    EventId,
    EventPayload,
    Money,
    Venue,
)
from events.stores.interfaces import (
    DuplicateAttendeeError,
    EventStore,
    MissingEventError,
    NoSeatsLeftError,
    StoreError,
)


def venue_to_document(venue: Venue | None) -> dict[str, Any] | None:
    if venue is None:
        return None
    return {
        "name": venue.name,
        "address": venue.address,
        "city": venue.city,
        "state": venue.state,
        "zipCode": venue.zip_code,
        "coordinates": {
            "latitude": venue.coordinates.latitude,
            "longitude": venue.coordinates.longitude,
        },
    }


def venue_from_document(document: dict[str, Any] | None) -> Venue | None:
    if not document:
        return None
    coordinates = document.get("coordinates") or {}
    return Venue(
        name=document.get("name", ""),
        address=document.get("address", ""),
        city=document.get("city", ""),
        state=document.get("state", ""),
        zip_code=document.get("zipCode", ""),
        coordinates=Coordinates(
            latitude=float(coordinates.get("latitude", 0)),
            longitude=float(coordinates.get("longitude", 0)),
        ),
    )


def to_domain(record: orm.Event) -> Event:
    """Convert an ORM event (with prefetched rsvps) into a domain Event."""
    return Event(
        id=EventId(value=record.id),
        name=record.name,
        description=record.description,
        location=record.location,
        start_at=record.start_at,
        end_at=record.end_at,
        category=record.category or None,
        capacity=Capacity(value=record.capacity),
        ticket_price=Money(amount=Decimal(record.ticket_price)),
        venue=venue_from_document(record.venue),
        attendees=tuple(rsvp.user_id for rsvp in record.rsvps.all()),
        tags=tuple(record.tags or ()),
        image_url=record.image_url or None,
        is_private=record.is_private,
        max_tickets_per_user=record.max_tickets_per_user,
        registration_deadline=record.registration_deadline,
        cancellation_policy=record.cancellation_policy,
        organizer_id=record.organizer_id,
        created_at=record.created_at,
        updated_at=record.updated_at,
    )


def _apply_payload(record: orm.Event, payload: EventPayload) -> None:
    record.name = payload.name.strip()
    record.description = payload.description.strip()
    record.location = payload.location.strip()
    record.venue = venue_to_document(payload.venue)
    record.start_at = payload.start_at
    record.end_at = payload.end_at
    record.category = payload.category or ""
    record.capacity = payload.capacity
    record.ticket_price = payload.ticket_price or Decimal("0")
    record.tags = list(payload.tags)
    record.image_url = payload.image_url
    record.is_private = payload.is_private
    record.max_tickets_per_user = payload.max_tickets_per_user or 1
    record.registration_deadline = payload.registration_deadline
    record.cancellation_policy = payload.cancellation_policy


class DjangoEventStore(EventStore):
    """SQL-backed event store using Django ORM."""

    def _queryset(self):
        return orm.Event.objects.prefetch_related("rsvps")

    def _reload(self, event_id: EventId) -> Event:
        return to_domain(self._queryset().get(pk=event_id.value))

    def list_events(self) -> list[Event]:
        return [to_domain(record) for record in self._queryset()]

    def list_events_for_user(self, user_id: int) -> list[Event]:
        records = self._queryset().filter(rsvps__user_id=user_id).distinct()
        return [to_domain(record) for record in records]

    def get_event(self, event_id: EventId) -> Event | None:
        record = self._queryset().filter(pk=event_id.value).first()
        return to_domain(record) if record is not None else None

    def event_exists(self, event_id: EventId) -> bool:
        return orm.Event.objects.filter(pk=event_id.value).exists()

    def create_event(self, payload: EventPayload, organizer_id: int | None) -> Event:
        record = orm.Event(organizer_id=organizer_id)
        _apply_payload(record, payload)
        try:
            record.save()
        except DatabaseError as exc:
            raise StoreError("Failed to create event") from exc
        return self._reload(EventId(value=record.id))

    def update_event(self, event_id: EventId, payload: EventPayload) -> Event | None:
        record = orm.Event.objects.filter(pk=event_id.value).first()
        if record is None:
            return None
        _apply_payload(record, payload)
        try:
            record.save()
        except DatabaseError as exc:
            raise StoreError("Failed to update event") from exc
        return self._reload(event_id)

    def delete_event(self, event_id: EventId) -> bool:
        record = orm.Event.objects.filter(pk=event_id.value).first()
        if record is None:
            return False
        try:
            record.delete()
        except DatabaseError as exc:
            raise StoreError("Failed to delete event") from exc
        return True

    def add_attendee(self, event_id: EventId, user_id: int) -> Event:
        try:
            with transaction.atomic():
                record = (
                    orm.Event.objects.select_for_update()
                    .filter(pk=event_id.value)
                    .first()
                )
                if record is None:
                    raise MissingEventError(str(event_id))
                rsvps = orm.Rsvp.objects.filter(event_id=event_id.value)
                if rsvps.filter(user_id=user_id).exists():
                    raise DuplicateAttendeeError(str(event_id))
                if rsvps.count() >= record.capacity:
                    raise NoSeatsLeftError(str(event_id))
                orm.Rsvp.objects.create(event_id=event_id.value, user_id=user_id)
        except IntegrityError as exc:
            # A concurrent request for the same user won the unique constraint.
            raise DuplicateAttendeeError(str(event_id)) from exc
        except DatabaseError as exc:
            raise StoreError("Failed to record RSVP") from exc
        return self._reload(event_id)

    def remove_attendee(self, event_id: EventId, user_id: int) -> Event:
        orm.Rsvp.objects.filter(event_id=event_id.value, user_id=user_id).delete()
        return self._reload(event_id)

    def list_attendees(self, event_id: EventId) -> list[Attendee]:
        rsvps = orm.Rsvp.objects.filter(event_id=event_id.value).select_related("user")
        return [
            Attendee(
                user_id=rsvp.user_id,
                username=rsvp.user.get_username(),
                email=rsvp.user.email,
                rsvp_at=rsvp.created_at,
            )
            for rsvp in rsvps
        ]
