"""End-to-end tests for a full layout pass"""
import pytest

from timeline.constants import AVG_DAYS_PER_MONTH, MONTH_WIDTH_PX, ROW_HEIGHT_PX
from timeline.layout.engine import build_layout


def test_ongoing_item_end_to_end(make_item, today):
    layout = build_layout([make_item("2024-01-10", group="Careers", name="Job")], today=today)

    row = layout.buckets[0].rows[0]
    assert row.bar.visual_days == 11
    assert row.bar.width_px == pytest.approx(11 * MONTH_WIDTH_PX / AVG_DAYS_PER_MONTH)
    assert row.days == 11
    assert row.duration_label == "11 days"
    assert row.period_label == "10.01.24 — present"
    assert layout.today == today


def test_layout_is_idempotent(make_item, today):
    items = [
        make_item("2024-01-10", group="Careers"),
        make_item("2023-05-01", "2023-05-01", group="Travel"),
        make_item("2022-09-01", "2023-06-30", group="Education"),
        make_item("2024-02-10", "2024-02-01", group="Travel"),
    ]

    first = build_layout(items, today=today, collapsed={"Education": True})
    second = build_layout(items, today=today, collapsed={"Education": True})

    assert first == second
    assert repr(first) == repr(second)


def test_collapsed_groups_hide_rows_but_keep_headers(make_item, today):
    items = [
        make_item("2024-01-01", group="A"),
        make_item("2024-01-05", group="A"),
        make_item("2023-12-01", group="B"),
    ]
    collapsed = {"A": True}

    layout = build_layout(items, today=today, collapsed=collapsed)

    bucket_a, bucket_b = layout.buckets
    assert bucket_a.collapsed is True
    assert bucket_a.item_count == 2
    assert bucket_a.rows == ()
    assert len(bucket_b.rows) == 1
    assert layout.row_count == 3
    assert layout.body_height == 3 * ROW_HEIGHT_PX
    assert collapsed == {"A": True}


def test_suppressed_bars_still_produce_rows(make_item, today):
    layout = build_layout([make_item("2024-02-10", "2024-02-01")], today=today)

    row = layout.buckets[0].rows[0]
    assert row.bar is None
    assert row.days == 10


def test_empty_items_produce_default_window(today):
    layout = build_layout([], today=today)

    assert layout.buckets == ()
    assert layout.row_count == 0
    assert layout.body_height == 0
    assert layout.grid.month_count == 13
    assert layout.today_marker.visible is True
    assert layout.total_width == layout.grid.total_width
    assert layout.grid_line_count == 13


def test_custom_month_width_scales_geometry(make_item, today):
    items = [make_item("2024-01-10")]

    narrow = build_layout(items, today=today)
    wide = build_layout(items, today=today, month_width=2 * MONTH_WIDTH_PX)

    assert wide.total_width == 2 * narrow.total_width
    narrow_bar = narrow.buckets[0].rows[0].bar
    wide_bar = wide.buckets[0].rows[0].bar
    assert wide_bar.width_px == pytest.approx(2 * narrow_bar.width_px)
