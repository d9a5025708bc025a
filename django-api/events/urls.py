from django.urls import path

from events.handlers import (
    AttendeeListView,
    EventCategoryListView,
    EventDetailView,
    EventListView,
    EventRsvpView,
    MyEventListView,
)

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/categories", EventCategoryListView.as_view(), name="event-categories"),
    path("events/mine", MyEventListView.as_view(), name="my-events"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path("events/<str:event_id>/rsvp", EventRsvpView.as_view(), name="event-rsvp"),
    path(
        "events/<str:event_id>/attendees",
        AttendeeListView.as_view(),
        name="event-attendees",
    ),
]
