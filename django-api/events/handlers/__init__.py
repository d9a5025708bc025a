from events.handlers.views import (
    AttendeeListView,
    EventCategoryListView,
    EventDetailView,
    EventListView,
    EventRsvpView,
    MyEventListView,
)

__all__ = [
    "AttendeeListView",
    "EventCategoryListView",
    "EventDetailView",
    "EventListView",
    "EventRsvpView",
    "MyEventListView",
]
