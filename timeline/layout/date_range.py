from __future__ import annotations

import logging
from datetime import date

from timeline.constants import (
    DEFAULT_WINDOW_MONTHS,
    RANGE_PAD_MONTHS_AFTER,
    RANGE_PAD_MONTHS_BEFORE,
)
from timeline.layout.dates import add_months, month_last_day, parse_day
from timeline.models import DateRange

logger = logging.getLogger(__name__)


def default_range(today: date) -> DateRange:
    return DateRange(
        min=add_months(today, -DEFAULT_WINDOW_MONTHS),
        max=month_last_day(add_months(today, DEFAULT_WINDOW_MONTHS)),
    )


def _item_bounds(items, today):
    for item in items:
        start = parse_day(item.start_date)
        if start is None:
            logger.debug("Skipping unparseable start date for item %s: %r", item.id, item.start_date)
        else:
            yield start
        if item.end_date is None:
            yield today
            continue
        end = parse_day(item.end_date)
        if end is None:
            logger.debug("Skipping unparseable end date for item %s: %r", item.id, item.end_date)
            continue
        yield end


def resolve_range(items, today=None) -> DateRange:
    """Visible date window for a set of items.

    The data extent is padded to the first of the month before the earliest
    day and to the last day of the month two months after the latest one.
    Ongoing items extend to `today`. An empty set yields a window of six
    months either side of the current month.
    """
    today = today or date.today()
    if not items:
        return default_range(today)

    bounds = list(_item_bounds(items, today))
    if not bounds:
        return default_range(today)

    # starts and resolved ends feed both bounds so every drawn day stays inside the window
    earliest = min(bounds)
    latest = max(bounds)
    min_date = add_months(earliest, -RANGE_PAD_MONTHS_BEFORE)
    max_date = month_last_day(add_months(latest, RANGE_PAD_MONTHS_AFTER))
    return DateRange(min=min_date, max=max_date)
