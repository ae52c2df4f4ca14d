import logging
from datetime import date

import requests
import streamlit as st
import streamlit.components.v1 as components

from timeline.constants import (
    CHART_VIEWPORT_WIDTH_PX,
    DEFAULT_GROUP,
    GROUP_OPTIONS,
    MONTH_WIDTH_PX,
    ROW_HEIGHT_PX,
)
from timeline.data import api_client
from timeline.data.items import validate_new_item
from timeline.layout.engine import build_layout
from timeline.layout.groups import group_items, is_collapsed, toggle_group
from timeline.markup import build_timeline_html, chart_height
from timeline.state import session_slices
from timeline.table import build_items_frame, group_totals

logger = logging.getLogger(__name__)

SLICE = "timeline"


def _load_items(force=False):
    items = session_slices.get_value(SLICE, "items")
    if items is not None and not force:
        return items
    try:
        fetched = api_client.fetch_items()
    except (api_client.ApiError, requests.RequestException) as exc:
        logger.warning("Failed to fetch timeline items: %s", exc)
        st.error(f"Could not load timeline items: {exc}")
        # keep the last list that loaded successfully
        return items or []
    session_slices.set_value(SLICE, "items", fetched)
    return fetched


def _render_add_form(items):
    with st.form("timeline.add_form", clear_on_submit=True):
        st.markdown("<div class='small-label'>Add item</div>", unsafe_allow_html=True)
        cols = st.columns([2.2, 1.2, 1, 1, 0.8])
        with cols[0]:
            name = st.text_input("Name", placeholder="Role, trip, project…")
        with cols[1]:
            group = st.selectbox("Group", GROUP_OPTIONS, index=GROUP_OPTIONS.index(DEFAULT_GROUP))
        with cols[2]:
            start_date = st.date_input("Start date", value=None, format="DD.MM.YYYY")
        with cols[3]:
            end_date = st.date_input("End date (empty = present)", value=None, format="DD.MM.YYYY")
        with cols[4]:
            st.markdown("<div style='height:28px;'></div>", unsafe_allow_html=True)
            submitted = st.form_submit_button("Add", use_container_width=True)

    if not submitted:
        return items
    error = validate_new_item(name, group, start_date, end_date)
    if error:
        st.warning(error)
        return items
    try:
        created = api_client.create_item(group, name.strip(), start_date, end_date)
    except (api_client.ApiError, requests.RequestException) as exc:
        logger.exception("Failed to add timeline item")
        st.error(f"Could not add the item: {exc}")
        return items
    items = list(items) + [created]
    session_slices.set_value(SLICE, "items", items)
    st.success(f"Added “{created.name}”.")
    return items


def _render_group_toggles(items, collapsed):
    buckets = group_items(items)
    if not buckets:
        return
    cols = st.columns(min(len(buckets), 6))
    for idx, bucket in enumerate(buckets):
        indicator = "►" if is_collapsed(collapsed, bucket.group_name) else "▼"
        with cols[idx % len(cols)]:
            if st.button(
                f"{indicator} {bucket.group_name}",
                key=f"timeline.toggle.{bucket.group_name}",
                use_container_width=True,
            ):
                toggle_group(collapsed, bucket.group_name)
                st.rerun()


def _render_items_table(items, today):
    frame = build_items_frame(items, today=today)
    with st.expander("Items table", expanded=False):
        if frame.empty:
            st.caption("Nothing to show yet.")
            return
        st.dataframe(frame, hide_index=True, use_container_width=True)
        st.dataframe(group_totals(frame), hide_index=True, use_container_width=True)
        st.download_button(
            "Download CSV",
            frame.to_csv(index=False).encode("utf-8"),
            file_name=f"timeline-{today.isoformat()}.csv",
            mime="text/csv",
        )


def render_timeline_tab(ctx):
    today = ctx.get("today") or date.today()
    theme = ctx["theme"]

    st.markdown("<div class='section-title'>Timeline</div>", unsafe_allow_html=True)

    controls = st.columns([1, 1, 6])
    with controls[1]:
        refresh = st.button("Refresh", key="timeline.refresh", use_container_width=True)
    items = _load_items(force=refresh)

    with controls[0]:
        if st.button("Today", key="timeline.today", use_container_width=True):
            nonce = int(session_slices.get_value(SLICE, "scroll_nonce", 0) or 0)
            session_slices.set_value(SLICE, "scroll_nonce", nonce + 1)

    items = _render_add_form(items)

    collapsed = session_slices.collapsed_groups(SLICE)
    _render_group_toggles(items, collapsed)

    layout = build_layout(items, today=today, collapsed=collapsed)
    if not items:
        st.caption("No items yet. Add one above to start your timeline.")
    components.html(
        build_timeline_html(
            layout,
            theme,
            viewport_width=CHART_VIEWPORT_WIDTH_PX,
            month_width=MONTH_WIDTH_PX,
            row_height=ROW_HEIGHT_PX,
            nonce=session_slices.get_value(SLICE, "scroll_nonce", 0),
        ),
        height=chart_height(layout, ROW_HEIGHT_PX),
        scrolling=False,
    )

    _render_items_table(items, today)
