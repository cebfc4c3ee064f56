"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_PAGE_SIZE = 100
MAX_PAGE_SIZE = 500
DEFAULT_EDIT_WINDOW_DAYS = 0
DEFAULT_HTTP_TIMEOUT = 10.0
LOW_ATTENDANCE_THRESHOLD = 75.0
ISO_DATE_FORMAT = "%Y-%m-%d"
