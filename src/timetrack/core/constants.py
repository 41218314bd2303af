"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_SESSION_DAYS = 7
DEFAULT_DAILY_HOURS = 8.0
DEFAULT_PASSWORD = "changeme"
RECENT_ENTRIES_LIMIT = 6
MONTH_GRID_DAYS = 42
MIN_PASSWORD_LENGTH = 6
