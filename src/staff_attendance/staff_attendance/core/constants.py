"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_TIMEZONE = "Europe/London"
DEFAULT_REFRESH_SECONDS = 1
DEFAULT_PAGE_LIMIT = 200
DEFAULT_LOGS_API_TIMEOUT = 20

EMPTY_PLACEHOLDER = "—"
WORK_DATE_FORMAT = "%d/%m/%Y"
CLOCK_TIME_FORMAT = "%H:%M:%S"
BREAK_TIME_FORMAT = "%d-%m-%Y %H:%M:%S"
API_DATE_FORMAT = "%Y-%m-%d"
