import streamlit as st

THEME_PRESETS = {
    "dark": {
        "bg_main": "#1c2834",
        "bg_panel": "#22313f",
        "bg_header_from": "#34495e",
        "bg_header_to": "#2c3e50",
        "bg_group": "#2c3e50",
        "bg_row": "#22313f",
        "bg_row_alt": "#263646",
        "border": "#4a637a",
        "border_soft": "#3d5166",
        "text_main": "#ecf0f1",
        "text_soft": "#bdc3c7",
        "text_muted": "#95a5a6",
        "today_line": "#e74c3c",
        "button": "#34495e",
        "button_hover": "#3d5a73",
    },
    "light": {
        "bg_main": "#f4f6f8",
        "bg_panel": "#ffffff",
        "bg_header_from": "#dfe6ec",
        "bg_header_to": "#cfd9e2",
        "bg_group": "#e3e9ef",
        "bg_row": "#ffffff",
        "bg_row_alt": "#f7f9fb",
        "border": "#b8c4cf",
        "border_soft": "#d5dde4",
        "text_main": "#1f2d3a",
        "text_soft": "#4b5b6a",
        "text_muted": "#7a8794",
        "today_line": "#c0392b",
        "button": "#dfe6ec",
        "button_hover": "#cfd9e2",
    },
}


def ensure_theme_state():
    if "ui_theme" not in st.session_state:
        st.session_state["ui_theme"] = "dark"
    if st.session_state["ui_theme"] not in THEME_PRESETS:
        st.session_state["ui_theme"] = "dark"
    return st.session_state["ui_theme"]


def get_active_theme():
    name = ensure_theme_state()
    return name, THEME_PRESETS[name]


def theme_vars_css(theme: dict) -> str:
    lines = [f"    --{key.replace('_', '-')}: {value};" for key, value in theme.items()]
    return ":root {\n" + "\n".join(lines) + "\n}\n"


def inject_theme_css() -> dict:
    active_name, active_theme = get_active_theme()
    st.markdown(
        "<style>\n"
        + theme_vars_css(active_theme)
        + """
.stApp {
    background: var(--bg-main);
    color: var(--text-main);
}
.page-title {
    font-size: 30px;
    font-weight: 700;
    color: var(--text-main);
    margin-bottom: 6px;
}
.section-title {
    font-size: 18px;
    font-weight: 600;
    color: var(--text-main);
    margin: 12px 0 6px 0;
}
.small-label {
    font-size: 12px;
    letter-spacing: 0.04em;
    text-transform: uppercase;
    color: var(--text-soft);
}
div.stButton > button {
    background: var(--button);
    color: var(--text-main);
    border: 1px solid var(--border);
}
div.stButton > button:hover {
    background: var(--button-hover);
    border-color: var(--border);
}
</style>
""",
        unsafe_allow_html=True,
    )
    return {
        "name": active_name,
        "theme": active_theme,
        "toggle_icon": "☀️" if active_name == "dark" else "🌙",
        "toggle_help": "Switch to light mode" if active_name == "dark" else "Switch to dark mode",
    }


def chart_css(theme: dict, row_height: int, sidebar_width: int) -> str:
    return (
        theme_vars_css(theme)
        + f"""
* {{ box-sizing: border-box; }}
body {{
    margin: 0;
    font-family: "IBM Plex Sans", -apple-system, "Segoe UI", sans-serif;
    background: var(--bg-main);
    color: var(--text-main);
}}
.timeline-wrapper {{
    display: flex;
    border: 1px solid var(--border);
    border-radius: 8px;
    overflow: hidden;
    background: var(--bg-panel);
}}
.timeline-sidebar {{
    flex: 0 0 {sidebar_width}px;
    border-right: 1px solid var(--border);
    background: var(--bg-panel);
}}
.sidebar-header, .sidebar-row, .sidebar-group {{
    display: flex;
    align-items: center;
    height: {row_height}px;
    border-bottom: 1px solid var(--border-soft);
    padding: 0 10px;
    font-size: 13px;
}}
.sidebar-header {{
    font-weight: 700;
    color: var(--text-soft);
    background: linear-gradient(to bottom, var(--bg-header-from), var(--bg-header-to));
}}
.sidebar-group {{
    font-weight: 700;
    background: var(--bg-group);
    justify-content: space-between;
}}
.sidebar-row:nth-child(even) {{ background: var(--bg-row-alt); }}
.col-name {{ flex: 1 1 auto; overflow: hidden; text-overflow: ellipsis; white-space: nowrap; }}
.col-period {{ flex: 0 0 130px; color: var(--text-soft); font-size: 12px; }}
.col-days {{ flex: 0 0 92px; color: var(--text-muted); font-size: 12px; text-align: right; }}
.bullet {{ color: var(--text-muted); margin-right: 4px; }}
.timeline-main {{
    flex: 1 1 auto;
    overflow-x: auto;
    overflow-y: hidden;
    cursor: grab;
    user-select: none;
}}
.timeline-main.dragging {{ cursor: grabbing; }}
.timeline-header {{ display: flex; height: {row_height}px; }}
.year-block {{ display: flex; flex-direction: column; flex-shrink: 0; }}
.year-label {{
    height: 28px;
    display: flex;
    align-items: center;
    justify-content: center;
    font-weight: 700;
    border-bottom: 1px solid var(--border);
    border-right: 1px solid var(--border);
    background: linear-gradient(to bottom, var(--bg-header-from), var(--bg-header-to));
}}
.month-row {{ display: flex; height: {row_height - 28}px; }}
.timeline-month {{
    flex-shrink: 0;
    display: flex;
    align-items: center;
    justify-content: center;
    border-right: 1px solid var(--border);
    color: var(--text-soft);
    font-size: 13px;
}}
.timeline-body {{ position: relative; }}
.timeline-row {{ position: relative; border-bottom: 1px solid var(--border-soft); }}
.timeline-row.group-row {{ background: var(--bg-group); }}
.grid-lines {{ position: absolute; inset: 0; display: flex; pointer-events: none; }}
.grid-line {{ flex-shrink: 0; height: 100%; border-right: 1px solid var(--border-soft); }}
.timeline-bar {{
    position: absolute;
    top: 50%;
    height: 18px;
    transform: translateY(-50%);
    border-radius: 4px;
}}
.today-line {{
    position: absolute;
    top: 0;
    bottom: 0;
    width: 2px;
    background: var(--today-line);
    z-index: 5;
}}
"""
    )
