"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DAYS_BEFORE_ANCHOR = 7
DAYS_AFTER_ANCHOR = 7
WINDOW_LENGTH = DAYS_BEFORE_ANCHOR + 1 + DAYS_AFTER_ANCHOR

# Monday first, keyed for the translation layer.
DAYS_OF_WEEK = ("po", "ut", "st", "ct", "pa", "so", "ne")

WIRE_DATE_FORMAT = "%Y/%m/%d"
WIRE_DATETIME_FORMAT = "%Y/%m/%d %H:%M:%S"

DEFAULT_API_TIMEOUT_SECONDS = 10
