"""Serializers for transforming domain models to API responses.

Output keys are camelCase to match the event document shape the client
consumes.
"""

from rest_framework import serializers

from events.domain import FilterCriteria


class CoordinatesSerializer(serializers.Serializer):
    latitude = serializers.FloatField()
    longitude = serializers.FloatField()


class VenueSerializer(serializers.Serializer):
    name = serializers.CharField()
    address = serializers.CharField()
    city = serializers.CharField()
    state = serializers.CharField()
    zipCode = serializers.CharField(source="zip_code")
    coordinates = CoordinatesSerializer()


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.UUIDField(source="id.value")
    name = serializers.CharField()
    description = serializers.CharField()
    location = serializers.CharField()
    venue = VenueSerializer(allow_null=True)
    startDateTime = serializers.DateTimeField(source="start_at")
    endDateTime = serializers.DateTimeField(source="end_at")
    category = serializers.CharField(allow_null=True)
    capacity = serializers.IntegerField(source="capacity.value")
    attendees = serializers.ListField(child=serializers.IntegerField())
    seatsLeft = serializers.IntegerField(source="seats_left")
    ticketPrice = serializers.DecimalField(
        source="ticket_price.amount",
        max_digits=10,
        decimal_places=2,
        coerce_to_string=False,
    )
    tags = serializers.ListField(child=serializers.CharField())
    imageUrl = serializers.CharField(source="image_url", allow_null=True)
    isPrivate = serializers.BooleanField(source="is_private")
    maxTicketsPerUser = serializers.IntegerField(source="max_tickets_per_user")
    registrationDeadline = serializers.DateTimeField(
        source="registration_deadline", allow_null=True
    )
    cancellationPolicy = serializers.CharField(source="cancellation_policy")
    organizer = serializers.IntegerField(source="organizer_id", allow_null=True)
    createdAt = serializers.DateTimeField(source="created_at", allow_null=True)
    updatedAt = serializers.DateTimeField(source="updated_at", allow_null=True)


class AttendeeSerializer(serializers.Serializer):
    """Serializer for Attendee domain model."""

    userId = serializers.IntegerField(source="user_id")
    username = serializers.CharField()
    email = serializers.CharField()
    rsvpAt = serializers.DateTimeField(source="rsvp_at", allow_null=True)


class FilterCriteriaSerializer(serializers.Serializer):
    """Parses list query parameters into FilterCriteria."""

    q = serializers.CharField(required=False, allow_blank=True, default="", trim_whitespace=True)
    date = serializers.DateField(required=False, allow_null=True, default=None)
    category = serializers.ListField(
        child=serializers.CharField(), required=False, default=list
    )

    @classmethod
    def from_query_params(cls, query_params) -> "FilterCriteriaSerializer":
        categories: list[str] = []
        for raw in query_params.getlist("category"):
            categories.extend(part.strip() for part in raw.split(",") if part.strip())
        data = {"q": query_params.get("q", ""), "category": categories}
        if query_params.get("date"):
            data["date"] = query_params["date"]
        return cls(data=data)

    def to_criteria(self) -> FilterCriteria:
        return FilterCriteria(
            search_text=self.validated_data["q"],
            selected_date=self.validated_data["date"],
            selected_categories=frozenset(self.validated_data["category"]),
        )
