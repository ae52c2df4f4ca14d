"""Tests for the items summary table"""
from timeline.table import TABLE_COLUMNS, build_items_frame, group_totals


def test_frame_rows_follow_group_order(make_item, today):
    items = [
        make_item("2024-01-10", group="Travel", name="Trip"),
        make_item("2023-01-01", "2023-01-30", group="Careers", name="Internship"),
    ]

    frame = build_items_frame(items, today=today)

    assert list(frame.columns) == TABLE_COLUMNS
    assert list(frame["Group"]) == ["Careers", "Travel"]
    assert list(frame["Days"]) == [30, 11]
    assert list(frame["Duration"]) == ["1 months", "11 days"]
    assert list(frame["Status"]) == ["closed", "ongoing"]


def test_group_totals(make_item, today):
    items = [
        make_item("2024-01-10", group="Travel"),
        make_item("2024-01-01", "2024-01-05", group="Travel"),
        make_item("2023-01-01", "2023-01-30", group="Careers"),
    ]

    totals = group_totals(build_items_frame(items, today=today))

    assert list(totals["Group"]) == ["Careers", "Travel"]
    assert list(totals["Items"]) == [1, 2]
    assert list(totals["Days"]) == [30, 16]


def test_empty_frame(today):
    frame = build_items_frame([], today=today)

    assert frame.empty
    assert list(frame.columns) == TABLE_COLUMNS
    assert group_totals(frame).empty
