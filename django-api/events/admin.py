from django import forms
from django.contrib import admin

from events.domain import EventPayload, validate_event
from events.models import Event, Rsvp
from events.stores.django_store import venue_from_document

# Validator error keys mapped to the model fields they belong to.
FORM_FIELDS = {
    "name": "name",
    "description": "description",
    "location": "location",
    "startDateTime": "start_at",
    "endDateTime": "end_at",
    "category": "category",
    "capacity": "capacity",
    "ticketPrice": "ticket_price",
    "registrationDeadline": "registration_deadline",
    "maxTicketsPerUser": "max_tickets_per_user",
    "imageUrl": "image_url",
    "venue.coordinates": "venue",
}


class EventAdminForm(forms.ModelForm):
    """Runs the same rules as the API before an admin save."""

    class Meta:
        model = Event
        fields = "__all__"

    def clean(self):
        cleaned = super().clean()
        try:
            venue = venue_from_document(cleaned.get("venue"))
        except (TypeError, ValueError, AttributeError):
            self.add_error("venue", "Coordinates must be numbers")
            venue = None
        payload = EventPayload(
            name=cleaned.get("name") or "",
            description=cleaned.get("description") or "",
            location=cleaned.get("location") or "",
            start_at=cleaned.get("start_at"),
            end_at=cleaned.get("end_at"),
            category=cleaned.get("category") or None,
            capacity=cleaned.get("capacity"),
            ticket_price=cleaned.get("ticket_price"),
            venue=venue,
            image_url=cleaned.get("image_url") or None,
            is_private=bool(cleaned.get("is_private")),
            max_tickets_per_user=cleaned.get("max_tickets_per_user"),
            registration_deadline=cleaned.get("registration_deadline"),
            cancellation_policy=cleaned.get("cancellation_policy") or "",
        )
        for key, message in validate_event(payload).errors.items():
            field = FORM_FIELDS.get(key)
            # Fields that already failed their own checks keep that error.
            if field in self.errors:
                continue
            self.add_error(field, message)
        return cleaned


class RsvpInline(admin.TabularInline):
    model = Rsvp
    extra = 0
    readonly_fields = ["created_at"]


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    form = EventAdminForm
    list_display = ["name", "category", "location", "start_at", "capacity"]
    list_filter = ["category", "is_private"]
    search_fields = ["name", "description", "location"]
    inlines = [RsvpInline]


@admin.register(Rsvp)
class RsvpAdmin(admin.ModelAdmin):
    list_display = ["event", "user", "created_at"]
    list_filter = ["event"]
