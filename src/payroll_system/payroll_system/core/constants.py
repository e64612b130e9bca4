"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

TAX_RATE = 0.12
JSON_INDENT = 2

AVATAR_URL_TEMPLATE = "https://i.pravatar.cc/150?img={n}"
AVATAR_COUNT = 70

MONTH_ABBREVIATIONS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
