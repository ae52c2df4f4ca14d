from __future__ import annotations

import logging
from datetime import date

from timeline.constants import (
    AVG_DAYS_PER_MONTH,
    BAR_RIGHT_MARGIN_PX,
    MIN_BAR_WIDTH_PX,
    MONTH_WIDTH_PX,
    SINGLE_DAY_BAR_WIDTH_PX,
    SINGLE_DAY_CENTER_ADJUST_PX,
)
from timeline.layout.dates import parse_day
from timeline.models import Bar

logger = logging.getLogger(__name__)


def pixels_per_day(month_width=MONTH_WIDTH_PX) -> float:
    return month_width / AVG_DAYS_PER_MONTH


def visual_duration_days(item, today=None) -> int:
    """Inclusive number of days used to size the item's bar.

    Ongoing items run to `today`; an ongoing item that has not started yet,
    an inverted interval and an unparseable date all give 0.
    """
    start = parse_day(item.start_date)
    if start is None:
        return 0
    if item.end_date is None:
        end = today or date.today()
    else:
        end = parse_day(item.end_date)
        if end is None:
            return 0
    delta = (end - start).days
    if delta < 0:
        return 0
    return delta + 1


def position_bar(item, date_range, total_width, today=None, month_width=MONTH_WIDTH_PX):
    """Pixel geometry of an item's bar, or None when there is nothing to draw."""
    start = parse_day(item.start_date)
    if start is None:
        logger.debug("No bar for item %s: unparseable start %r", item.id, item.start_date)
        return None

    per_day = pixels_per_day(month_width)
    offset_days = max(0, (start - date_range.min).days)
    left_px = offset_days * per_day

    visual_days = visual_duration_days(item, today)
    width_px = visual_days * per_day
    single_day = visual_days == 1
    if single_day:
        width_px = SINGLE_DAY_BAR_WIDTH_PX
        left_px = left_px - width_px / 2 + SINGLE_DAY_CENTER_ADJUST_PX

    drawn_width = min(width_px, total_width - left_px - BAR_RIGHT_MARGIN_PX)
    if drawn_width <= MIN_BAR_WIDTH_PX:
        return None

    return Bar(
        item_id=item.id,
        left_px=left_px,
        width_px=drawn_width,
        visual_days=visual_days,
        is_ongoing=item.is_ongoing,
        is_single_day=single_day,
    )
