"""Cache keys for serialized event responses and their invalidation."""

from django.conf import settings
from django.core.cache import cache

EVENT_LIST_KEY = "events:list"
CATEGORY_LIST_KEY = "events:categories"


def event_detail_key(event_id) -> str:
    return f"events:{event_id}"


def cache_timeout() -> int:
    return getattr(settings, "EVENTS_CACHE_TIMEOUT", 60)


def invalidate_event(event_id) -> None:
    """Drop every cached response that may include the given event."""
    cache.delete_many([EVENT_LIST_KEY, CATEGORY_LIST_KEY, event_detail_key(event_id)])
