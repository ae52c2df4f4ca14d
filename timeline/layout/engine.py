from __future__ import annotations

import logging
from datetime import date

from timeline.constants import MONTH_WIDTH_PX, ROW_HEIGHT_PX
from timeline.layout.bars import position_bar
from timeline.layout.date_range import resolve_range
from timeline.layout.dates import days_between, format_period, humanize_duration
from timeline.layout.grid import build_grid
from timeline.layout.groups import group_items, is_collapsed, visible_items
from timeline.layout.today import today_marker
from timeline.models import BucketLayout, Row, TimelineLayout

logger = logging.getLogger(__name__)


def build_row(item, date_range, total_width, today, month_width=MONTH_WIDTH_PX) -> Row:
    days = days_between(item.start_date, item.end_date, today=today)
    return Row(
        item=item,
        bar=position_bar(item, date_range, total_width, today=today, month_width=month_width),
        days=days,
        period_label=format_period(item.start_date, item.end_date),
        duration_label=humanize_duration(days),
    )


def build_layout(items, today=None, collapsed=None, month_width=MONTH_WIDTH_PX, row_height=ROW_HEIGHT_PX):
    """Run a full layout pass over `items`.

    Everything is derived from the item snapshot, `today` and the collapsed
    map; nothing is cached between calls. `collapsed` is read, never written.
    """
    today = today or date.today()
    snapshot = tuple(items or ())

    date_range = resolve_range(snapshot, today=today)
    grid = build_grid(date_range, month_width=month_width)
    marker = today_marker(date_range, today=today, month_width=month_width, total_width=grid.total_width)

    buckets = []
    row_count = 0
    for bucket in group_items(snapshot):
        rows = tuple(
            build_row(item, date_range, grid.total_width, today, month_width=month_width)
            for item in visible_items(bucket, collapsed)
        )
        buckets.append(
            BucketLayout(
                group_name=bucket.group_name,
                collapsed=is_collapsed(collapsed, bucket.group_name),
                item_count=len(bucket.items),
                rows=rows,
            )
        )
        row_count += 1 + len(rows)

    logger.debug(
        "Layout pass: %d items, %d groups, range %s..%s, width %s",
        len(snapshot),
        len(buckets),
        date_range.min.isoformat(),
        date_range.max.isoformat(),
        grid.total_width,
    )
    return TimelineLayout(
        date_range=date_range,
        grid=grid,
        buckets=tuple(buckets),
        today_marker=marker,
        total_width=grid.total_width,
        grid_line_count=grid.grid_line_count,
        row_count=row_count,
        body_height=row_count * row_height,
        today=today,
    )
