"""Tests for the today marker and scroll helpers"""
from datetime import date

import pytest

from timeline.layout.engine import build_layout
from timeline.layout.scroll import drag_scroll_left, scroll_to_today
from timeline.layout.today import today_marker
from timeline.markup import _SCRIPT
from timeline.models import DateRange, TodayMarker

RANGE = DateRange(date(2023, 12, 1), date(2024, 3, 31))


def test_marker_offset_uses_average_month(today):
    marker = today_marker(RANGE, today=today)

    assert marker.visible is True
    assert marker.left_px == pytest.approx(50 / 30.4375 * 90)


def test_marker_hidden_outside_range():
    assert today_marker(RANGE, today=date(2023, 11, 30)) == TodayMarker(visible=False)
    assert today_marker(RANGE, today=date(2024, 4, 1)) == TodayMarker(visible=False)


def test_marker_on_range_bounds():
    assert today_marker(RANGE, today=RANGE.min).left_px == 0
    assert today_marker(RANGE, today=RANGE.max).visible is True


def test_marker_stays_inside_timeline(make_item):
    item_sets = [
        [],
        [make_item("2024-01-10")],
        [make_item("2015-01-01", "2015-01-02")],
        [make_item("2020-02-29", "2024-02-29"), make_item("2023-07-04", group="Travel")],
        [make_item("2023-08-15", "2025-06-10")],
    ]
    for current in [date(2024, 1, 20), date(2024, 2, 29), date(2024, 12, 31), date(2025, 8, 31)]:
        for items in item_sets:
            layout = build_layout(items, today=current)
            marker = layout.today_marker
            if marker.visible:
                assert 0 <= marker.left_px <= layout.total_width


def test_scroll_to_today_centres_marker():
    assert scroll_to_today(TodayMarker(visible=True, left_px=600), 800) == 200
    assert scroll_to_today(TodayMarker(visible=True, left_px=100), 800) == 0


def test_scroll_to_today_ignores_hidden_marker():
    assert scroll_to_today(TodayMarker(visible=False), 800) is None
    assert scroll_to_today(None, 800) is None


def test_drag_scroll_moves_against_pointer():
    assert drag_scroll_left(300, 100, 140) == 240
    assert drag_scroll_left(300, 100, 60) == 360
    assert drag_scroll_left(300, 100, 140, speed=1) == 260


def test_marker_clamped_to_grid_width_on_last_day(make_item):
    # Jul 2023 .. Aug 2025 spans 26 months and 792 days
    layout = build_layout([make_item("2023-08-15", "2025-06-10")], today=date(2025, 8, 31))

    assert layout.date_range == DateRange(date(2023, 7, 1), date(2025, 8, 31))
    assert layout.total_width == 26 * 90
    assert layout.today_marker.visible is True
    assert layout.today_marker.left_px == layout.total_width


def test_marker_without_total_width_is_unclamped():
    marker = today_marker(DateRange(date(2023, 7, 1), date(2025, 8, 31)), today=date(2025, 8, 31))

    assert marker.left_px == pytest.approx(792 / 30.4375 * 90)


def test_chart_script_drags_with_same_formula():
    assert "startScroll - (x - startX) * config.dragSpeed" in _SCRIPT
    assert drag_scroll_left(0, 0, -10) == 15
