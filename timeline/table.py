from __future__ import annotations

import pandas as pd

from timeline.layout.dates import days_between, format_period, humanize_duration
from timeline.layout.groups import group_items

TABLE_COLUMNS = ["Group", "Name", "Period", "Days", "Duration", "Status"]


def build_items_frame(items, today=None) -> pd.DataFrame:
    rows = []
    for bucket in group_items(items):
        for item in bucket.items:
            days = days_between(item.start_date, item.end_date, today=today)
            rows.append(
                {
                    "Group": bucket.group_name,
                    "Name": item.name,
                    "Period": format_period(item.start_date, item.end_date),
                    "Days": days,
                    "Duration": humanize_duration(days),
                    "Status": "ongoing" if item.is_ongoing else "closed",
                }
            )
    return pd.DataFrame(rows, columns=TABLE_COLUMNS)


def group_totals(frame: pd.DataFrame) -> pd.DataFrame:
    if frame.empty:
        return pd.DataFrame(columns=["Group", "Items", "Days"])
    totals = (
        frame.groupby("Group", sort=True)
        .agg(Items=("Name", "count"), Days=("Days", "sum"))
        .reset_index()
    )
    return totals
