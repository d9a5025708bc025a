"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Self
from uuid import UUID


UNCATEGORIZED = "Uncategorized"


class Category(Enum):
    """Fixed set of event categories."""

    CONFERENCE = "conference"
    WORKSHOP = "workshop"
    SEMINAR = "seminar"
    NETWORKING = "networking"
    SOCIAL = "social"
    OTHER = "other"

    @classmethod
    def values(cls) -> tuple[str, ...]:
        return tuple(member.value for member in cls)


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Money:
    """Price representation with validation."""

    amount: Decimal

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    def __str__(self) -> str:
        return f"{self.amount:.2f}"


@dataclass(frozen=True)
class Capacity:
    """Number of seats an event offers; at least one."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 1:
            raise ValueError("Capacity must be at least 1")


@dataclass(frozen=True)
class Coordinates:
    latitude: float = 0.0
    longitude: float = 0.0


@dataclass(frozen=True)
class Venue:
    """Structured venue details; every part is optional free text."""

    name: str = ""
    address: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""
    coordinates: Coordinates = Coordinates()

    @property
    def is_blank(self) -> bool:
        return not any((self.name, self.address, self.city, self.state, self.zip_code))
