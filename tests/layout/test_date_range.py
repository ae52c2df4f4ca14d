"""Tests for visible range resolution"""
from datetime import date

from timeline.layout.bars import visual_duration_days
from timeline.layout.date_range import resolve_range
from timeline.layout.dates import parse_day


def test_empty_items_use_window_around_current_month(today):
    date_range = resolve_range([], today=today)

    assert date_range.min == date(2023, 7, 1)
    assert date_range.max == date(2024, 7, 31)


def test_empty_window_crosses_year_end():
    date_range = resolve_range([], today=date(2024, 3, 15))

    assert date_range.min == date(2023, 9, 1)
    assert date_range.max == date(2024, 9, 30)


def test_closed_item_is_padded(make_item):
    items = [make_item("2024-03-10", "2024-05-20")]

    date_range = resolve_range(items, today=date(2024, 6, 1))

    assert date_range.min == date(2024, 2, 1)
    assert date_range.max == date(2024, 7, 31)


def test_ongoing_item_extends_to_today(make_item, today):
    date_range = resolve_range([make_item("2024-01-10")], today=today)

    assert date_range.min == date(2023, 12, 1)
    assert date_range.max == date(2024, 3, 31)


def test_unparseable_dates_are_skipped(make_item, today):
    items = [
        make_item("garbage", "2024-02-01"),
        make_item("2024-01-05"),
    ]

    date_range = resolve_range(items, today=today)

    assert date_range.min == date(2023, 12, 1)
    assert date_range.max == date(2024, 4, 30)


def test_only_unparseable_dates_fall_back_to_default(make_item, today):
    date_range = resolve_range([make_item("x", "y")], today=today)

    assert date_range == resolve_range([], today=today)


def test_future_ongoing_item_keeps_min_before_max(make_item, today):
    items = [make_item("2025-06-01")]

    date_range = resolve_range(items, today=today)

    assert date_range.min == date(2023, 12, 1)
    assert date_range.max == date(2025, 8, 31)


def test_items_always_lie_inside_range(make_item, today):
    item_sets = [
        [make_item("2020-01-01", "2020-01-01")],
        [make_item("2024-01-20")],
        [make_item("2019-05-05", "2023-11-11"), make_item("2022-02-28")],
        [make_item("2024-03-01", "2024-02-01")],
        [make_item("2026-01-01"), make_item("2010-07-31", "2011-01-01", group="Travel")],
    ]
    for items in item_sets:
        date_range = resolve_range(items, today=today)
        assert date_range.min <= date_range.max
        for item in items:
            start = parse_day(item.start_date)
            end = today if item.end_date is None else parse_day(item.end_date)
            assert date_range.min <= start <= date_range.max
            assert date_range.min <= end <= date_range.max
        assert all(visual_duration_days(item, today) >= 0 for item in items)
