"""Narrowing an event list by search text, calendar day and category.

A full linear scan per call; event lists are page-sized.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from datetime import date

from events.domain.models import Event
from events.domain.value_objects import UNCATEGORIZED


@dataclass(frozen=True)
class FilterCriteria:
    """The active set of user-chosen filters."""

    search_text: str = ""
    selected_date: date | None = None
    selected_categories: frozenset[str] = field(default=frozenset())

    @property
    def is_empty(self) -> bool:
        return (
            not self.search_text
            and self.selected_date is None
            and not self.selected_categories
        )


def category_label(event: Event) -> str:
    """Category shown for an event; events without one are Uncategorized."""
    return event.category or UNCATEGORIZED


def extract_categories(events: Iterable[Event]) -> list[str]:
    """Unique category labels in first-seen order."""
    return list(dict.fromkeys(category_label(event) for event in events))


def matches_text(event: Event, search_text: str) -> bool:
    if not search_text:
        return True
    needle = search_text.casefold()
    return any(
        needle in (value or "").casefold()
        for value in (event.name, event.description, event.location)
    )


def matches_date(event: Event, selected_date: date | None) -> bool:
    if selected_date is None:
        return True
    return event.start_at.date() == selected_date


def matches_category(event: Event, selected_categories: frozenset[str]) -> bool:
    if not selected_categories:
        return True
    return category_label(event) in selected_categories


def matches(event: Event, criteria: FilterCriteria) -> bool:
    return (
        matches_text(event, criteria.search_text)
        and matches_date(event, criteria.selected_date)
        and matches_category(event, criteria.selected_categories)
    )


def filter_events(events: Sequence[Event], criteria: FilterCriteria) -> list[Event]:
    """Return the events matching every active criterion, in input order."""
    if criteria.is_empty:
        return list(events)
    return [event for event in events if matches(event, criteria)]
