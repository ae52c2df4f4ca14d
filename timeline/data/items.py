from __future__ import annotations

from timeline.layout.dates import parse_day
from timeline.models import TimelineItem


def item_from_wire(record: dict) -> TimelineItem:
    return TimelineItem(
        id=record.get("id"),
        group=str(record.get("group") or ""),
        name=str(record.get("name") or ""),
        start_date=record.get("start_date"),
        end_date=record.get("end_date") or None,
    )


def items_from_wire(records) -> list[TimelineItem]:
    return [item_from_wire(record) for record in records or []]


def _iso(value):
    if value is None or value == "":
        return None
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return str(value)


def new_item_payload(group, name, start_date, end_date=None) -> dict:
    return {
        "group": group,
        "name": name,
        "start_date": _iso(start_date),
        "end_date": _iso(end_date),
    }


def validate_new_item(name, group, start_date, end_date=None):
    if not (name or "").strip() or not (group or "").strip() or not start_date:
        return "Please fill in the name, group and start date."
    start = parse_day(start_date)
    if start is None:
        return "Start date is not a valid date."
    if end_date:
        end = parse_day(end_date)
        if end is None:
            return "End date is not a valid date."
        if end < start:
            return "End date cannot be earlier than the start date."
    return None
