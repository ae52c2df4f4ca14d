from __future__ import annotations

import html
import json

from timeline.constants import (
    BAR_COLORS,
    DRAG_SCROLL_SPEED,
    MONTH_NAMES_SHORT,
    MONTH_WIDTH_PX,
    ROW_HEIGHT_PX,
    SINGLE_DAY_GLOW,
)
from timeline.layout.scroll import scroll_to_today
from timeline.theme import chart_css

SIDEBAR_WIDTH_PX = 420


def _px(value) -> str:
    return f"{round(float(value), 3)}px"


def _grid_lines_html(count, month_width):
    cell = f"<div class='grid-line' style='width:{_px(month_width)}'></div>"
    return f"<div class='grid-lines'>{cell * count}</div>"


def build_header_html(grid, month_width=MONTH_WIDTH_PX) -> str:
    blocks = []
    for year_group in grid.year_groups:
        months = "".join(
            (
                f"<div class='timeline-month' style='width:{_px(month_width)}'>"
                f"{MONTH_NAMES_SHORT[cell.month_index]}</div>"
            )
            for cell in year_group.months
        )
        blocks.append(
            (
                f"<div class='year-block' style='width:{_px(year_group.width(month_width))}'>"
                f"<div class='year-label'>{year_group.year}</div>"
                f"<div class='month-row'>{months}</div>"
                "</div>"
            )
        )
    return f"<div class='timeline-header' style='width:{_px(grid.total_width)}'>{''.join(blocks)}</div>"


def bar_style(bar) -> str:
    colors = BAR_COLORS[bar.category]
    parts = [
        f"left:{_px(bar.left_px)}",
        f"width:{_px(bar.width_px)}",
        f"background:linear-gradient(to right, {colors['from']}, {colors['to']})",
    ]
    if bar.is_single_day:
        parts.append(f"box-shadow:{SINGLE_DAY_GLOW}")
    return ";".join(parts)


def build_bar_html(row) -> str:
    bar = row.bar
    if bar is None:
        return ""
    colors = BAR_COLORS[bar.category]
    title = html.escape(f"{row.item.name} • {row.period_label} • {row.duration_label}", quote=True)
    return (
        f"<div class='timeline-bar' data-item-id='{bar.item_id}' title='{title}' "
        f"data-hover-bg='linear-gradient(to right, {colors['from']}, {colors['hover']})' style='{bar_style(bar)}'></div>"
    )


def build_sidebar_html(layout) -> str:
    parts = [
        "<div class='sidebar-header'>"
        "<span class='col-name'>Name</span>"
        "<span class='col-period'>Period</span>"
        "<span class='col-days'>Days</span>"
        "</div>"
    ]
    for bucket in layout.buckets:
        indicator = "►" if bucket.collapsed else "▼"
        parts.append(
            (
                "<div class='sidebar-group'>"
                f"<span>{html.escape(bucket.group_name)} ({bucket.item_count})</span>"
                f"<span>{indicator}</span>"
                "</div>"
            )
        )
        for row in bucket.rows:
            parts.append(
                (
                    "<div class='sidebar-row'>"
                    f"<span class='col-name'><span class='bullet'>•</span>{html.escape(row.item.name)}</span>"
                    f"<span class='col-period'>{html.escape(row.period_label)}</span>"
                    f"<span class='col-days'>{html.escape(row.duration_label)}</span>"
                    "</div>"
                )
            )
    return f"<div class='timeline-sidebar'>{''.join(parts)}</div>"


def build_body_html(layout, month_width=MONTH_WIDTH_PX, row_height=ROW_HEIGHT_PX) -> str:
    grid_lines = _grid_lines_html(layout.grid_line_count, month_width)
    row_style = f"height:{row_height}px;width:{_px(layout.total_width)}"
    parts = []
    marker = layout.today_marker
    if marker.visible:
        parts.append(f"<div class='today-line' id='today-line' style='left:{_px(marker.left_px)}'></div>")
    for bucket in layout.buckets:
        parts.append(f"<div class='timeline-row group-row' style='{row_style}'>{grid_lines}</div>")
        for row in bucket.rows:
            parts.append(f"<div class='timeline-row' style='{row_style}'>{grid_lines}{build_bar_html(row)}</div>")
    return f"<div class='timeline-body' style='width:{_px(layout.total_width)}'>{''.join(parts)}</div>"


_SCRIPT = """
<script>
(function () {
  const main = document.getElementById("timeline-main");
  if (!main) return;
  const config = JSON.parse(main.dataset.config);
  if (config.initialScroll !== null) {
    main.scrollLeft = config.initialScroll;
  }
  let dragging = false;
  let startX = 0;
  let startScroll = 0;
  main.addEventListener("mousedown", (e) => {
    if (e.button !== 0) return;
    dragging = true;
    startX = e.pageX - main.offsetLeft;
    startScroll = main.scrollLeft;
    main.classList.add("dragging");
    e.preventDefault();
  });
  main.addEventListener("mousemove", (e) => {
    if (!dragging) return;
    e.preventDefault();
    const x = e.pageX - main.offsetLeft;
    main.scrollLeft = startScroll - (x - startX) * config.dragSpeed;
  });
  const stop = () => { dragging = false; main.classList.remove("dragging"); };
  main.addEventListener("mouseup", stop);
  main.addEventListener("mouseleave", stop);
  document.querySelectorAll(".timeline-bar").forEach((bar) => {
    const base = bar.style.background;
    bar.addEventListener("mouseover", () => {
      bar.style.background = bar.dataset.hoverBg;
    });
    bar.addEventListener("mouseout", () => { bar.style.background = base; });
  });
})();
</script>
"""


def build_timeline_html(
    layout,
    theme,
    viewport_width,
    month_width=MONTH_WIDTH_PX,
    row_height=ROW_HEIGHT_PX,
    nonce=0,
) -> str:
    """Self-contained HTML document for the chart component."""
    config = {
        "initialScroll": scroll_to_today(layout.today_marker, viewport_width),
        "dragSpeed": DRAG_SCROLL_SPEED,
        "nonce": nonce,
    }
    return (
        "<html><head><meta charset='utf-8'>"
        f"<style>{chart_css(theme, row_height, SIDEBAR_WIDTH_PX)}</style>"
        "</head><body>"
        "<div class='timeline-wrapper'>"
        f"{build_sidebar_html(layout)}"
        f"<div class='timeline-main' id='timeline-main' data-config='{html.escape(json.dumps(config), quote=True)}'>"
        f"{build_header_html(layout.grid, month_width)}"
        f"{build_body_html(layout, month_width, row_height)}"
        "</div>"
        "</div>"
        f"{_SCRIPT}"
        "</body></html>"
    )


def chart_height(layout, row_height=ROW_HEIGHT_PX) -> int:
    # header row, body rows and room for a horizontal scrollbar
    return row_height + layout.body_height + 24
