"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from django.core.cache import cache
from rest_framework import status
from rest_framework.permissions import SAFE_METHODS, BasePermission, IsAdminUser, IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.cache import (
    CATEGORY_LIST_KEY,
    EVENT_LIST_KEY,
    cache_timeout,
    event_detail_key,
)
from events.domain import EventId, EventPayload
from events.domain.errors import (
    DomainError,
    ErrorCode,
    InvalidEventIdError,
    ValidationError,
)
from events.handlers.serializers import (
    AttendeeSerializer,
    EventSerializer,
    FilterCriteriaSerializer,
)
from events.services import EventService
from events.stores.django_store import DjangoEventStore

ERROR_STATUS = {
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_EVENT_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.UPSTREAM_UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorCode.EVENT_FULL: status.HTTP_409_CONFLICT,
    ErrorCode.REGISTRATION_CLOSED: status.HTTP_409_CONFLICT,
    ErrorCode.ALREADY_ATTENDING: status.HTTP_409_CONFLICT,
    ErrorCode.NOT_ATTENDING: status.HTTP_409_CONFLICT,
}


def get_event_service() -> EventService:
    return EventService(DjangoEventStore())


def error_response(error: DomainError) -> Response:
    body = {"code": error.code.value, "message": error.message}
    if isinstance(error, ValidationError):
        body["errors"] = error.errors
    return Response(body, status=ERROR_STATUS.get(error.code, status.HTTP_400_BAD_REQUEST))


class IsAdminOrReadOnly(BasePermission):
    """Any signed-in user may read; only staff may write."""

    def has_permission(self, request, view) -> bool:
        if not (request.user and request.user.is_authenticated):
            return False
        return request.method in SAFE_METHODS or request.user.is_staff


class EventListView(APIView):
    """Handler for GET/POST /api/events"""

    permission_classes = [IsAdminOrReadOnly]

    def get(self, request: Request) -> Response:
        criteria_serializer = FilterCriteriaSerializer.from_query_params(request.query_params)
        if not criteria_serializer.is_valid():
            return Response(
                {
                    "code": ErrorCode.VALIDATION_FAILED.value,
                    "message": "Invalid filter",
                    "errors": criteria_serializer.errors,
                },
                status=status.HTTP_400_BAD_REQUEST,
            )
        criteria = criteria_serializer.to_criteria()

        if criteria.is_empty:
            data = cache.get(EVENT_LIST_KEY)
            if data is None:
                events = get_event_service().list_events()
                data = EventSerializer(events, many=True).data
                cache.set(EVENT_LIST_KEY, data, cache_timeout())
            return Response(data)

        events = get_event_service().list_events(criteria)
        return Response(EventSerializer(events, many=True).data)

    def post(self, request: Request) -> Response:
        payload = EventPayload.from_mapping(request.data)
        try:
            event = get_event_service().create_event(payload, organizer_id=request.user.pk)
        except DomainError as error:
            return error_response(error)
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)


class EventCategoryListView(APIView):
    """Handler for GET /api/events/categories"""

    permission_classes = [IsAuthenticated]

    def get(self, request: Request) -> Response:
        categories = cache.get(CATEGORY_LIST_KEY)
        if categories is None:
            categories = get_event_service().list_categories()
            cache.set(CATEGORY_LIST_KEY, categories, cache_timeout())
        return Response(categories)


class MyEventListView(APIView):
    """Handler for GET /api/events/mine"""

    permission_classes = [IsAuthenticated]

    def get(self, request: Request) -> Response:
        events = get_event_service().list_events_for_user(request.user.pk)
        return Response(EventSerializer(events, many=True).data)


class EventDetailView(APIView):
    """Handler for GET/PUT/DELETE /api/events/{event_id}"""

    permission_classes = [IsAdminOrReadOnly]

    def get(self, request: Request, event_id: str) -> Response:
        try:
            key = event_detail_key(EventId.from_string(event_id))
        except ValueError:
            return error_response(InvalidEventIdError())
        data = cache.get(key)
        if data is None:
            try:
                event = get_event_service().get_event(event_id)
            except DomainError as error:
                return error_response(error)
            data = EventSerializer(event).data
            cache.set(key, data, cache_timeout())
        return Response(data)

    def put(self, request: Request, event_id: str) -> Response:
        payload = EventPayload.from_mapping(request.data)
        try:
            event = get_event_service().update_event(event_id, payload)
        except DomainError as error:
            return error_response(error)
        return Response(EventSerializer(event).data)

    def delete(self, request: Request, event_id: str) -> Response:
        try:
            get_event_service().delete_event(event_id)
        except DomainError as error:
            return error_response(error)
        return Response(status=status.HTTP_204_NO_CONTENT)


class EventRsvpView(APIView):
    """Handler for POST/DELETE /api/events/{event_id}/rsvp"""

    permission_classes = [IsAuthenticated]

    def post(self, request: Request, event_id: str) -> Response:
        try:
            event = get_event_service().rsvp(event_id, request.user.pk)
        except DomainError as error:
            return error_response(error)
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)

    def delete(self, request: Request, event_id: str) -> Response:
        try:
            get_event_service().cancel_rsvp(event_id, request.user.pk)
        except DomainError as error:
            return error_response(error)
        return Response(status=status.HTTP_204_NO_CONTENT)


class AttendeeListView(APIView):
    """Handler for GET /api/events/{event_id}/attendees"""

    permission_classes = [IsAdminUser]

    def get(self, request: Request, event_id: str) -> Response:
        try:
            attendees = get_event_service().list_attendees(event_id)
        except DomainError as error:
            return error_response(error)
        return Response(AttendeeSerializer(attendees, many=True).data)
