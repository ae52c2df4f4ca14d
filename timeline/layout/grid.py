from __future__ import annotations

from timeline.constants import MIN_VISIBLE_MONTHS, MONTH_WIDTH_PX
from timeline.layout.dates import add_months, months_spanned
from timeline.models import Grid, MonthCell, YearGroup


def iter_months(date_range):
    current = date_range.min.replace(day=1)
    last = (date_range.max.year, date_range.max.month)
    while (current.year, current.month) <= last:
        yield MonthCell(year=current.year, month_index=current.month - 1)
        current = add_months(current, 1)


def build_grid(date_range, month_width=MONTH_WIDTH_PX) -> Grid:
    """Year/month header cells covering `date_range`, plus background width.

    A range shorter than a year still gets a full year of background so
    sparse timelines keep their grid lines; the header cells are unchanged.
    """
    year_groups = []
    current_year = None
    current_months = []
    month_count = 0
    for cell in iter_months(date_range):
        if cell.year != current_year:
            if current_months:
                year_groups.append(YearGroup(year=current_year, months=tuple(current_months)))
            current_year = cell.year
            current_months = []
        current_months.append(cell)
        month_count += 1
    if current_months:
        year_groups.append(YearGroup(year=current_year, months=tuple(current_months)))

    total_width = month_count * month_width
    if total_width < MIN_VISIBLE_MONTHS * month_width:
        months_in_range = months_spanned(date_range.min, date_range.max)
        total_width = max(months_in_range, MIN_VISIBLE_MONTHS) * month_width
    grid_line_count = max(1, int(total_width // month_width))

    return Grid(
        year_groups=tuple(year_groups),
        month_count=month_count,
        total_width=total_width,
        grid_line_count=grid_line_count,
    )
