from __future__ import annotations

from datetime import date

from timeline.layout.dates import parse_day
from timeline.models import GroupBucket


def _start_key(item):
    start = parse_day(item.start_date)
    # Unparseable starts sort after every valid date.
    return (start is None, start or date.min)


def group_items(items):
    """Buckets ordered by group name, items in each by start date.

    Sorting is stable, so items sharing a start date keep their input order.
    """
    grouped = {}
    for item in sorted(items, key=_start_key):
        grouped.setdefault(item.group, []).append(item)
    return [
        GroupBucket(group_name=name, items=tuple(grouped[name]))
        for name in sorted(grouped)
    ]


def is_collapsed(collapsed, group_name) -> bool:
    if not collapsed:
        return False
    return bool(collapsed.get(group_name, False))


def toggle_group(collapsed, group_name) -> bool:
    """Flip `group_name` in the caller-owned map and return its new state."""
    value = not is_collapsed(collapsed, group_name)
    collapsed[group_name] = value
    return value


def visible_items(bucket, collapsed):
    if is_collapsed(collapsed, bucket.group_name):
        return ()
    return bucket.items
