"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DAILY_HOURS_FORMAT = "{hours:02d}:{minutes:02d}"
TOTAL_HOURS_FORMAT = "{hours:d}:{minutes:02d}"

ISO_DATETIME_FORMAT = "%Y-%m-%dT%H:%M:%S"

MYSQL_DUPLICATE_ENTRY = 1062
