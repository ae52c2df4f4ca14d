import os
from datetime import date

import streamlit as st

from timeline.data import api_client
from timeline.logging_config import configure_logging
from timeline.tabs.timeline_tab import render_timeline_tab
from timeline.theme import inject_theme_css

ENV_FALLBACK_KEYS = {
    ("app", "TIMELINE_API_URL"): "TIMELINE_API_URL",
    ("TIMELINE_API_URL",): "TIMELINE_API_URL",
}


def get_secret(path, default=None):
    env_key = ENV_FALLBACK_KEYS.get(tuple(path))
    if env_key:
        env_value = os.getenv(env_key)
        if env_value:
            return env_value
    current = st.secrets
    for key in path:
        try:
            if key not in current:
                return default
            current = current[key]
        except Exception:
            return default
    return current


configure_logging()
st.set_page_config(page_title="My Timeline", layout="wide")
api_client.configure(get_secret)

THEME_INFO = inject_theme_css()

title_cols = st.columns([0.94, 0.06])
with title_cols[0]:
    st.markdown("<div class='page-title'>My Timeline</div>", unsafe_allow_html=True)
with title_cols[1]:
    if st.button(THEME_INFO["toggle_icon"], key="toggle_theme_mode", help=THEME_INFO["toggle_help"]):
        st.session_state["ui_theme"] = "light" if THEME_INFO["name"] == "dark" else "dark"
        st.rerun()

render_timeline_tab(
    {
        "today": date.today(),
        "theme": THEME_INFO["theme"],
    }
)
