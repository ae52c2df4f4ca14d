from __future__ import annotations

from datetime import date

from timeline.constants import AVG_DAYS_PER_MONTH, MONTH_WIDTH_PX
from timeline.models import TodayMarker


def today_marker(date_range, today=None, month_width=MONTH_WIDTH_PX, total_width=None) -> TodayMarker:
    today = today or date.today()
    if today < date_range.min or today > date_range.max:
        return TodayMarker(visible=False)
    offset_days = max(0, (today - date_range.min).days)
    left_px = (offset_days / AVG_DAYS_PER_MONTH) * month_width
    # 31-day months push the average-month offset past the drawn grid
    if total_width is not None:
        left_px = min(left_px, total_width)
    return TodayMarker(visible=True, left_px=left_px)
