from models.category import CategoryStyle
from models.screen import Screen

APP_NAME = "Pocket Expenses"
APP_WIDTH = 480
APP_HEIGHT = 760
LOGGER_NAME = "pocket_expenses"

CURRENCY_SYMBOL = "Rp "
DISPLAY_DATE_FORMAT = "{d.day}/{d.month}/{d.year}"

PRIMARY_COLOR = "#2196F3"
DANGER_COLOR = "#E53935"

# lower-cased category -> display style
CATEGORY_STYLES = {
    "food":           CategoryStyle("orange", "restaurant"),
    "transportation": CategoryStyle("green",  "directions_car"),
    "utilities":      CategoryStyle("purple", "home"),
    "entertainment":  CategoryStyle("pink",   "movie"),
    "education":      CategoryStyle("blue",   "school"),
}
DEFAULT_CATEGORY_STYLE = CategoryStyle("grey", "attach_money")

# Render-side lookups for CategoryStyle keys
COLOR_HEX = {
    "orange": "#FF9800",
    "green":  "#4CAF50",
    "purple": "#9C27B0",
    "pink":   "#E91E63",
    "blue":   "#2196F3",
    "grey":   "#9E9E9E",
}

ICON_GLYPHS = {
    "restaurant":     "🍴",
    "directions_car": "🚗",
    "home":           "🏠",
    "movie":          "🎬",
    "school":         "🎓",
    "attach_money":   "💲",
    "person":         "👤",
    "message":        "✉",
    "settings":       "⚙",
    "logout":         "⎋",
}

DASHBOARD_CARDS = [
    # (title, icon_key, color_key, screen)
    ("Expenses", "attach_money", "green",  Screen.EXPENSE_LIST),
    ("Profile",  "person",       "blue",   Screen.PROFILE),
    ("Messages", "message",      "orange", Screen.MESSAGES),
    ("Settings", "settings",     "purple", Screen.SETTINGS),
]

MIN_PASSWORD_LENGTH = 6
