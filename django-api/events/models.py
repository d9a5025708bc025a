"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models

from events.domain.value_objects import Category


class Event(models.Model):
    """Persistence model for events."""

    CATEGORY_CHOICES = [(value, value.title()) for value in Category.values()]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    description = models.TextField()
    location = models.CharField(max_length=255)
    venue = models.JSONField(blank=True, null=True)
    start_at = models.DateTimeField()
    end_at = models.DateTimeField()
    category = models.CharField(max_length=32, choices=CATEGORY_CHOICES, blank=True)
    capacity = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    ticket_price = models.DecimalField(
        max_digits=10, decimal_places=2, default=0, validators=[MinValueValidator(0)]
    )
    tags = models.JSONField(default=list, blank=True)
    image_url = models.URLField(max_length=500, blank=True, null=True)
    is_private = models.BooleanField(default=False)
    max_tickets_per_user = models.PositiveIntegerField(default=1)
    registration_deadline = models.DateTimeField(blank=True, null=True)
    cancellation_policy = models.TextField(blank=True)
    organizer = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="organized_events",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["start_at"]
        indexes = [
            models.Index(fields=["start_at"], name="events_event_start_at_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(end_at__gt=models.F("start_at")),
                name="event_ends_after_start",
            ),
            models.CheckConstraint(
                condition=models.Q(registration_deadline__isnull=True)
                | models.Q(registration_deadline__lt=models.F("start_at")),
                name="event_deadline_before_start",
            ),
            models.CheckConstraint(
                condition=models.Q(ticket_price__gte=0),
                name="event_ticket_price_not_negative",
            ),
            models.CheckConstraint(
                condition=models.Q(capacity__gte=1),
                name="event_capacity_at_least_one",
            ),
        ]

    def __str__(self) -> str:
        return self.name


class Rsvp(models.Model):
    """A user's reserved seat at an event."""

    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="rsvps")
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="rsvps"
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["created_at"]
        constraints = [
            models.UniqueConstraint(fields=["event", "user"], name="unique_rsvp_per_user"),
        ]

    def __str__(self) -> str:
        return f"{self.user} - {self.event.name}"
