"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_PORT = 3000
DEFAULT_SUMMARY_LIMIT = 200
DEFAULT_ARCHIVE_POLL_SECONDS = 60
HOURS_FORMAT = "{:.2f}"
MAX_NAME_LENGTH = 100
