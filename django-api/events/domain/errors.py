"""Domain error codes for the events module."""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    VALIDATION_FAILED = "VALIDATION_FAILED"
    UPSTREAM_UNAVAILABLE = "UPSTREAM_UNAVAILABLE"
    EVENT_FULL = "EVENT_FULL"
    REGISTRATION_CLOSED = "REGISTRATION_CLOSED"
    ALREADY_ATTENDING = "ALREADY_ATTENDING"
    NOT_ATTENDING = "NOT_ATTENDING"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id


class InvalidEventIdError(DomainError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
        )


class ValidationError(DomainError):
    """Raised when submitted data fails field-level validation.

    ``errors`` maps each offending field to a message meant to be shown
    next to that input.
    """

    def __init__(self, errors: Mapping[str, str]) -> None:
        super().__init__(
            code=ErrorCode.VALIDATION_FAILED,
            message="Please correct the highlighted fields",
        )
        self.errors = dict(errors)


class UpstreamError(DomainError):
    """Raised when the backing store rejects or cannot take a write.

    The submitted payload is kept so the caller can offer a retry.
    """

    def __init__(self, payload: Any = None) -> None:
        super().__init__(
            code=ErrorCode.UPSTREAM_UNAVAILABLE,
            message="The event could not be saved, please try again",
        )
        self.payload = payload


class EventFullError(DomainError):
    """Raised when an RSVP is attempted on an event with no seats left."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_FULL,
            message="Event is full",
        )
        self.event_id = event_id


class RegistrationClosedError(DomainError):
    """Raised when an RSVP arrives after the registration deadline."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.REGISTRATION_CLOSED,
            message="Registration for this event is closed",
        )
        self.event_id = event_id


class AlreadyAttendingError(DomainError):
    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.ALREADY_ATTENDING,
            message="You have already RSVP'd to this event",
        )
        self.event_id = event_id


class NotAttendingError(DomainError):
    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.NOT_ATTENDING,
            message="You have not RSVP'd to this event",
        )
        self.event_id = event_id
