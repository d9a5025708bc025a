"""Tests for cache behavior.

Run with: pytest tests/test_cache.py -v
"""

from datetime import datetime, timezone

import pytest
from django.core.cache import cache

from events.cache import CATEGORY_LIST_KEY, EVENT_LIST_KEY, event_detail_key
from events.models import Event, Rsvp


@pytest.fixture
def event():
    return Event.objects.create(
        name="Cached",
        description="Lives in the cache",
        location="Oslo",
        start_at=datetime(2030, 5, 1, 18, 0, tzinfo=timezone.utc),
        end_at=datetime(2030, 5, 1, 21, 0, tzinfo=timezone.utc),
        category="social",
        capacity=5,
    )


@pytest.mark.django_db
class TestCachedResponses:
    def test_list_is_cached(self, user_client, event):
        user_client.get("/api/events")
        assert cache.get(EVENT_LIST_KEY)[0]["name"] == "Cached"

    def test_filtered_list_is_not_cached(self, user_client, event):
        user_client.get("/api/events", {"q": "cached"})
        assert cache.get(EVENT_LIST_KEY) is None

    def test_list_cached_response(self, user_client, event):
        """Given cached data, returns from cache."""
        cache.set(EVENT_LIST_KEY, [{"name": "From cache"}])
        assert user_client.get("/api/events").json() == [{"name": "From cache"}]

    def test_detail_is_cached(self, user_client, event):
        user_client.get(f"/api/events/{event.id}")
        assert cache.get(event_detail_key(event.id))["id"] == str(event.id)


@pytest.mark.django_db
class TestCacheInvalidation:
    """Tests for cache invalidation on model changes."""

    def test_event_save_invalidates_list_cache(self, event):
        """Saving an event invalidates the events:list cache key."""
        cache.set(EVENT_LIST_KEY, ["stale"])
        cache.set(CATEGORY_LIST_KEY, ["stale"])
        event.save()
        assert cache.get(EVENT_LIST_KEY) is None
        assert cache.get(CATEGORY_LIST_KEY) is None

    def test_event_save_invalidates_detail_cache(self, event):
        """Saving an event invalidates the events:{id} cache key."""
        cache.set(event_detail_key(event.id), {"stale": True})
        event.save()
        assert cache.get(event_detail_key(event.id)) is None

    def test_event_delete_invalidates_detail_cache(self, event):
        key = event_detail_key(event.id)
        cache.set(key, {"stale": True})
        event.delete()
        assert cache.get(key) is None

    def test_rsvp_invalidates_event_caches(self, event, user):
        """Seat counts are part of the cached documents."""
        cache.set(EVENT_LIST_KEY, ["stale"])
        cache.set(event_detail_key(event.id), {"stale": True})
        Rsvp.objects.create(event=event, user=user)
        assert cache.get(EVENT_LIST_KEY) is None
        assert cache.get(event_detail_key(event.id)) is None
