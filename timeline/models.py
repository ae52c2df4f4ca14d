from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Tuple, Union

DayValue = Union[str, date, None]


@dataclass(frozen=True)
class TimelineItem:
    id: int
    group: str
    name: str
    start_date: DayValue
    end_date: DayValue = None

    @property
    def is_ongoing(self) -> bool:
        return self.end_date is None


@dataclass(frozen=True)
class DateRange:
    min: date
    max: date


@dataclass(frozen=True)
class MonthCell:
    year: int
    month_index: int


@dataclass(frozen=True)
class YearGroup:
    year: int
    months: Tuple[MonthCell, ...]

    def width(self, month_width: float) -> float:
        return len(self.months) * month_width


@dataclass(frozen=True)
class Grid:
    year_groups: Tuple[YearGroup, ...]
    month_count: int
    total_width: float
    grid_line_count: int


@dataclass(frozen=True)
class GroupBucket:
    group_name: str
    items: Tuple[TimelineItem, ...]


@dataclass(frozen=True)
class Bar:
    item_id: int
    left_px: float
    width_px: float
    visual_days: int
    is_ongoing: bool
    is_single_day: bool

    @property
    def category(self) -> Tuple[str, str]:
        return (
            "ongoing" if self.is_ongoing else "closed",
            "single" if self.is_single_day else "multi",
        )


@dataclass(frozen=True)
class TodayMarker:
    visible: bool
    left_px: Optional[float] = None


@dataclass(frozen=True)
class Row:
    item: TimelineItem
    bar: Optional[Bar]
    days: int
    period_label: str
    duration_label: str


@dataclass(frozen=True)
class BucketLayout:
    group_name: str
    collapsed: bool
    item_count: int
    rows: Tuple[Row, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class TimelineLayout:
    date_range: DateRange
    grid: Grid
    buckets: Tuple[BucketLayout, ...]
    today_marker: TodayMarker
    total_width: float
    grid_line_count: int
    row_count: int
    body_height: int
    today: date
