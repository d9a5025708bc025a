"""Pytest configuration and shared fixtures."""

import uuid
from datetime import datetime, timezone
from decimal import Decimal

import pytest
from rest_framework.test import APIClient

from events.domain import Capacity, Event, EventId, Money


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def user(django_user_model):
    return django_user_model.objects.create_user(
        username="attendee", email="attendee@example.com", password="secret123"
    )


@pytest.fixture
def admin_user(django_user_model):
    return django_user_model.objects.create_user(
        username="organizer",
        email="organizer@example.com",
        password="secret123",
        is_staff=True,
    )


@pytest.fixture
def user_client(api_client: APIClient, user) -> APIClient:
    api_client.force_authenticate(user=user)
    return api_client


@pytest.fixture
def admin_client(api_client: APIClient, admin_user) -> APIClient:
    api_client.force_authenticate(user=admin_user)
    return api_client


@pytest.fixture
def make_event():
    """Factory for domain events with sensible defaults."""

    def _make(**overrides) -> Event:
        fields = {
            "id": EventId(value=uuid.uuid4()),
            "name": "PyCon Meetup",
            "description": "Talks about Python",
            "location": "Oslo",
            "start_at": datetime(2030, 5, 1, 18, 0, tzinfo=timezone.utc),
            "end_at": datetime(2030, 5, 1, 21, 0, tzinfo=timezone.utc),
            "category": "conference",
            "capacity": Capacity(value=50),
            "ticket_price": Money(amount=Decimal("0")),
        }
        fields.update(overrides)
        return Event(**fields)

    return _make


@pytest.fixture
def event_body():
    """A complete, internally consistent create/update request body."""
    return {
        "name": "Django Workshop",
        "description": "Hands-on introduction to Django",
        "startDateTime": "2030-06-01T09:00:00Z",
        "endDateTime": "2030-06-01T17:00:00Z",
        "location": "Bergen",
        "venue": {
            "name": "Main Hall",
            "address": "1 Harbour Street",
            "city": "Bergen",
            "state": "Vestland",
            "zipCode": "5003",
            "coordinates": {"latitude": 60.39, "longitude": 5.32},
        },
        "category": "workshop",
        "capacity": 2,
        "ticketPrice": "15.50",
        "tags": "python, django, ,web",
        "imageUrl": "https://example.com/workshop.png",
        "isPrivate": False,
        "maxTicketsPerUser": 1,
        "registrationDeadline": "2030-05-31T23:59:00Z",
        "cancellationPolicy": "Full refund up to a week before",
    }
