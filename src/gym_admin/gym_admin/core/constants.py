"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

EXPIRING_SOON_DAYS = 7
REMINDER_DAYS_AHEAD = 2
DEFAULT_OPEN_HOUR = 5
DEFAULT_CLOSE_HOUR = 23
DEFAULT_HISTORY_LIMIT = 30
DEFAULT_CURRENCY = "INR"
PAISE_PER_RUPEE = 100
DEFAULT_SESSION_DAYS = 7
