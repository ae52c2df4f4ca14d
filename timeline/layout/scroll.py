"""Scroll offsets for the chart viewport.

The chart script in `timeline.markup` applies `drag_scroll_left` in the
browser with the same speed constant, passed through its data-config.
"""
from __future__ import annotations

from timeline.constants import DRAG_SCROLL_SPEED


def scroll_to_today(marker, container_width):
    """Scroll offset that puts the today line near the middle of the viewport."""
    if marker is None or not marker.visible:
        return None
    return max(0.0, marker.left_px - container_width / 2)


def drag_scroll_left(start_scroll_left, drag_start_x, current_x, speed=DRAG_SCROLL_SPEED):
    walk = (current_x - drag_start_x) * speed
    return start_scroll_left - walk
