"""Tests for grouping, ordering and collapsed state"""
from timeline.layout.groups import group_items, is_collapsed, toggle_group, visible_items


def test_groups_sorted_by_name_and_items_by_start(make_item):
    items = [
        make_item("2024-02-01", group="B"),
        make_item("2024-03-01", group="A"),
        make_item("2024-01-01", group="A"),
    ]

    buckets = group_items(items)

    assert [bucket.group_name for bucket in buckets] == ["A", "B"]
    assert [item.start_date for item in buckets[0].items] == ["2024-01-01", "2024-03-01"]


def test_equal_start_dates_keep_input_order(make_item):
    first = make_item("2024-01-01", name="first")
    second = make_item("2024-01-01", name="second")

    buckets = group_items([first, second])

    assert buckets[0].items == (first, second)


def test_unparseable_start_sorts_last(make_item):
    broken = make_item("not-a-date", name="broken")
    valid = make_item("2024-01-01", name="valid")

    buckets = group_items([broken, valid])

    assert [item.name for item in buckets[0].items] == ["valid", "broken"]


def test_toggle_group_flips_state():
    collapsed = {}

    assert toggle_group(collapsed, "Travel") is True
    assert collapsed == {"Travel": True}
    assert toggle_group(collapsed, "Travel") is False
    assert collapsed == {"Travel": False}


def test_absent_group_is_expanded():
    assert is_collapsed({}, "Travel") is False
    assert is_collapsed(None, "Travel") is False


def test_visible_items_respects_collapsed_map(make_item):
    bucket = group_items([make_item("2024-01-01", group="Travel")])[0]

    assert visible_items(bucket, {}) == bucket.items
    assert visible_items(bucket, {"Travel": True}) == ()
