from events.stores.interfaces import (
    DuplicateAttendeeError,
    EventStore,
    MissingEventError,
    NoSeatsLeftError,
    StoreError,
)

__all__ = [
    "DuplicateAttendeeError",
    "EventStore",
    "MissingEventError",
    "NoSeatsLeftError",
    "StoreError",
]
