from __future__ import annotations

import calendar as _calendar
from datetime import date, datetime

from timeline.constants import ONGOING_LABEL


def parse_day(value):
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    raw = value.strip()[:10]
    try:
        return date.fromisoformat(raw)
    except ValueError:
        return None


def add_months(day: date, months: int) -> date:
    """First day of the month `months` away from `day`'s month."""
    index = day.year * 12 + (day.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)


def month_last_day(day: date) -> date:
    days = _calendar.monthrange(day.year, day.month)[1]
    return day.replace(day=days)


def months_spanned(start: date, end: date) -> int:
    return (end.year - start.year) * 12 + end.month - start.month + 1


def days_between(first, second=None, today=None) -> int:
    """Inclusive day count between two calendar days.

    `second` defaults to today. Returns 0 when either side cannot be parsed.
    """
    start = parse_day(first)
    if second is None:
        end = today or date.today()
    else:
        end = parse_day(second)
    if start is None or end is None:
        return 0
    return abs((end - start).days) + 1


def humanize_duration(days: int) -> str:
    if days < 30:
        return f"{days} days"
    if days < 365:
        months = days // 30
        remaining_days = days % 30
        if remaining_days > 0:
            return f"{months} months, {remaining_days} days"
        return f"{months} months"
    years = days // 365
    remaining_months = (days % 365) // 30
    if remaining_months > 0:
        return f"{years} years, {remaining_months} months"
    return f"{years} years"


def format_day(value) -> str:
    day = parse_day(value)
    if day is None:
        return ""
    return f"{day.day:02d}.{day.month:02d}.{day.year % 100:02d}"


def format_period(start, end) -> str:
    end_label = ONGOING_LABEL if end is None else format_day(end)
    return f"{format_day(start)} — {end_label}"
