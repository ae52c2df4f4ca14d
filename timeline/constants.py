MONTH_WIDTH_PX = 90
ROW_HEIGHT_PX = 54

# 365.25 / 12
AVG_DAYS_PER_MONTH = 30.4375

SINGLE_DAY_BAR_WIDTH_PX = 5
SINGLE_DAY_CENTER_ADJUST_PX = 1.5
BAR_RIGHT_MARGIN_PX = 10
MIN_BAR_WIDTH_PX = 0.1

MIN_VISIBLE_MONTHS = 12
DEFAULT_WINDOW_MONTHS = 6
RANGE_PAD_MONTHS_BEFORE = 1
RANGE_PAD_MONTHS_AFTER = 2

DRAG_SCROLL_SPEED = 1.5
# visible width of the scrollable chart area used to centre the today line
CHART_VIEWPORT_WIDTH_PX = 960

MONTH_NAMES_SHORT = [
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
]

GROUP_OPTIONS = ["Careers", "Travel", "Projects", "Education", "Personal"]
DEFAULT_GROUP = GROUP_OPTIONS[0]

ONGOING_LABEL = "present"

BAR_COLORS = {
    ("closed", "multi"): {"from": "#e67e22", "to": "#d35400", "hover": "#a04000"},
    ("closed", "single"): {"from": "#ff7f00", "to": "#ff5500", "hover": "#ff7000"},
    ("ongoing", "multi"): {"from": "#27ae60", "to": "#229954", "hover": "#196f3d"},
    ("ongoing", "single"): {"from": "#2ecc71", "to": "#27ae60", "hover": "#33dd81"},
}
SINGLE_DAY_GLOW = "0 0 8px rgba(255,127,0,0.6)"
