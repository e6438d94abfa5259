"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

PASS_MARK_PERCENT = 35
DEFAULT_TOTAL_MARKS = 100
PERIODS_PER_DAY = 8
SCHOOL_DAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday")
VOICE_NOTE_DURATION = "0:15s"
MAX_DOCUMENT_BYTES = 10 * 1024 * 1024
RECENT_LOGS_LIMIT = 10
