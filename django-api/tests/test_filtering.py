"""Unit tests for event list filtering.

Run with: pytest tests/test_filtering.py -v
"""

from datetime import date, datetime, timezone

import pytest

from events.domain import UNCATEGORIZED, FilterCriteria, extract_categories, filter_events


@pytest.fixture
def events(make_event):
    return [
        make_event(
            name="Intro to Rust",
            description="Systems programming workshop",
            location="Oslo",
            category="workshop",
            start_at=datetime(2030, 3, 1, 9, 0, tzinfo=timezone.utc),
            end_at=datetime(2030, 3, 1, 12, 0, tzinfo=timezone.utc),
        ),
        make_event(
            name="Summer Party",
            description="Drinks on the roof",
            location="Trondheim",
            category="social",
            start_at=datetime(2030, 3, 1, 23, 30, tzinfo=timezone.utc),
            end_at=datetime(2030, 3, 2, 2, 0, tzinfo=timezone.utc),
        ),
        make_event(
            name="ML Seminar",
            description="Deep learning at scale",
            location="Bergen",
            category=None,
            start_at=datetime(2030, 3, 5, 14, 0, tzinfo=timezone.utc),
            end_at=datetime(2030, 3, 5, 16, 0, tzinfo=timezone.utc),
        ),
    ]


class TestFilterEvents:
    def test_empty_criteria_returns_input_in_order(self, events):
        result = filter_events(events, FilterCriteria())
        assert result == events
        assert result is not events

    def test_does_not_mutate_input(self, events):
        original = list(events)
        filter_events(events, FilterCriteria(search_text="party"))
        assert events == original

    @pytest.mark.parametrize(
        "search_text, expected",
        [
            ("RUST", ["Intro to Rust"]),
            ("roof", ["Summer Party"]),
            ("bergen", ["ML Seminar"]),
            ("e", ["Intro to Rust", "Summer Party", "ML Seminar"]),
            ("nothing matches", []),
        ],
    )
    def test_text_matches_name_description_or_location(self, events, search_text, expected):
        result = filter_events(events, FilterCriteria(search_text=search_text))
        assert [event.name for event in result] == expected

    def test_date_ignores_time_of_day(self, events):
        result = filter_events(events, FilterCriteria(selected_date=date(2030, 3, 1)))
        assert [event.name for event in result] == ["Intro to Rust", "Summer Party"]

    def test_category_subset_match(self, make_event):
        workshop = make_event(category="workshop")
        social = make_event(category="social")
        result = filter_events(
            [workshop, social], FilterCriteria(selected_categories=frozenset({"workshop"}))
        )
        assert result == [workshop]

    def test_uncategorized_excluded_from_category_filter(self, events):
        criteria = FilterCriteria(selected_categories=frozenset({"workshop", "social"}))
        names = [event.name for event in filter_events(events, criteria)]
        assert "ML Seminar" not in names

    def test_uncategorized_matched_when_selected(self, events):
        criteria = FilterCriteria(selected_categories=frozenset({UNCATEGORIZED}))
        assert [event.name for event in filter_events(events, criteria)] == ["ML Seminar"]

    def test_all_criteria_must_hold(self, events):
        criteria = FilterCriteria(
            search_text="o",
            selected_date=date(2030, 3, 1),
            selected_categories=frozenset({"social"}),
        )
        assert [event.name for event in filter_events(events, criteria)] == ["Summer Party"]

    @pytest.mark.parametrize(
        "criteria",
        [
            FilterCriteria(),
            FilterCriteria(search_text="s"),
            FilterCriteria(selected_date=date(2030, 3, 1)),
            FilterCriteria(selected_categories=frozenset({"workshop", UNCATEGORIZED})),
        ],
    )
    def test_idempotent(self, events, criteria):
        once = filter_events(events, criteria)
        assert filter_events(once, criteria) == once


class TestFilterCriteria:
    def test_default_is_empty(self):
        assert FilterCriteria().is_empty

    def test_any_criterion_makes_it_active(self):
        assert not FilterCriteria(search_text="x").is_empty
        assert not FilterCriteria(selected_date=date(2030, 1, 1)).is_empty
        assert not FilterCriteria(selected_categories=frozenset({"social"})).is_empty


def test_extract_categories_first_seen_with_fallback(events, make_event):
    events.append(make_event(category="workshop"))
    assert extract_categories(events) == ["workshop", "social", UNCATEGORIZED]
