"""Unit tests for domain primitives.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

import uuid
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from events.domain import Capacity, Category, EventId, EventPayload, Money, parse_tags


class TestMoney:
    """Tests for Money value object."""

    def test_money_accepts_positive_amount(self):
        """Money can be created with positive amount."""
        assert Money(amount=Decimal("12.50")).amount == Decimal("12.50")

    def test_money_accepts_zero(self):
        """Money can be created with zero."""
        assert Money(amount=Decimal("0")).amount == 0

    def test_money_rejects_negative_amount(self):
        """Money raises ValueError for negative amount."""
        with pytest.raises(ValueError):
            Money(amount=Decimal("-0.01"))

    def test_money_str_format(self):
        """Money string representation is formatted to 2 decimal places."""
        assert str(Money(amount=Decimal("7.5"))) == "7.50"


class TestCapacity:
    """Tests for Capacity value object."""

    def test_capacity_accepts_positive_value(self):
        """Capacity can be created with positive value."""
        assert Capacity(value=10).value == 10

    def test_capacity_accepts_one(self):
        assert Capacity(value=1).value == 1

    def test_capacity_rejects_zero(self):
        """An event must offer at least one seat."""
        with pytest.raises(ValueError):
            Capacity(value=0)


class TestEventId:
    """Tests for EventId value object."""

    def test_from_string_valid_uuid(self):
        """EventId.from_string parses valid UUID."""
        value = uuid.uuid4()
        assert EventId.from_string(str(value)).value == value

    def test_from_string_invalid_uuid(self):
        """EventId.from_string raises ValueError for invalid UUID."""
        with pytest.raises(ValueError):
            EventId.from_string("not-a-uuid")


class TestEvent:
    def test_seats_left_counts_attendees(self, make_event):
        event = make_event(capacity=Capacity(value=3), attendees=(1, 2))
        assert event.seats_left == 1
        assert not event.is_full

    def test_full_event(self, make_event):
        event = make_event(capacity=Capacity(value=2), attendees=(1, 2))
        assert event.seats_left == 0
        assert event.is_full

    def test_registration_closes_at_deadline(self, make_event):
        start = datetime(2030, 1, 10, tzinfo=timezone.utc)
        deadline = start - timedelta(days=1)
        event = make_event(start_at=start, registration_deadline=deadline)
        assert event.registration_open(deadline - timedelta(seconds=1))
        assert not event.registration_open(deadline)

    def test_registration_closes_at_start_without_deadline(self, make_event):
        start = datetime(2030, 1, 10, tzinfo=timezone.utc)
        event = make_event(start_at=start, end_at=start + timedelta(hours=1))
        assert event.registration_open(start - timedelta(minutes=1))
        assert not event.registration_open(start)


class TestParseTags:
    def test_splits_trims_and_drops_empties(self):
        assert parse_tags(" blockchain, web3 ,, ethereum , ") == (
            "blockchain",
            "web3",
            "ethereum",
        )

    def test_accepts_list(self):
        assert parse_tags(["a ", "", " b"]) == ("a", "b")

    def test_none_is_empty(self):
        assert parse_tags(None) == ()


class TestEventPayload:
    def test_blank_optionals_become_none(self):
        payload = EventPayload.from_mapping(
            {"ticketPrice": "", "registrationDeadline": "", "imageUrl": "  ", "capacity": ""}
        )
        assert payload.ticket_price is None
        assert payload.registration_deadline is None
        assert payload.image_url is None
        assert payload.capacity is None
        assert payload.invalid_fields == frozenset()

    def test_naive_timestamps_are_utc(self):
        payload = EventPayload.from_mapping({"startDateTime": "2025-01-02T10:00"})
        assert payload.start_at == datetime(2025, 1, 2, 10, 0, tzinfo=timezone.utc)

    def test_offset_timestamps_are_converted_to_utc(self):
        payload = EventPayload.from_mapping({"startDateTime": "2030-03-01T23:30:00-02:00"})
        assert payload.start_at == datetime(2030, 3, 2, 1, 30, tzinfo=timezone.utc)
        assert payload.start_at.utcoffset() == timedelta(0)

    def test_numbers_from_strings(self):
        payload = EventPayload.from_mapping(
            {"capacity": "25", "ticketPrice": "9.99", "maxTicketsPerUser": 2}
        )
        assert payload.capacity == 25
        assert payload.ticket_price == Decimal("9.99")
        assert payload.max_tickets_per_user == 2

    def test_unparseable_values_are_recorded(self):
        payload = EventPayload.from_mapping(
            {
                "capacity": "2.5",
                "ticketPrice": "free",
                "startDateTime": "tomorrow",
                "venue": {"coordinates": {"latitude": "north"}},
            }
        )
        assert payload.invalid_fields == {
            "capacity",
            "ticketPrice",
            "startDateTime",
            "venue.coordinates",
        }

    def test_venue_is_parsed(self):
        payload = EventPayload.from_mapping(
            {"venue": {"name": " Hall ", "zipCode": "0150", "coordinates": {"latitude": "59.9"}}}
        )
        assert payload.venue.name == "Hall"
        assert payload.venue.zip_code == "0150"
        assert payload.venue.coordinates.latitude == pytest.approx(59.9)
        assert payload.venue.coordinates.longitude == 0.0

    def test_non_mapping_body_is_empty_payload(self):
        assert EventPayload.from_mapping(["name"]) == EventPayload()


def test_category_values():
    assert Category.values() == (
        "conference",
        "workshop",
        "seminar",
        "networking",
        "social",
        "other",
    )
