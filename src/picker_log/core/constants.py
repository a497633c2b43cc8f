"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Schema version lives in the key name; a new schema gets a new key.
# v2 was the berryType/rate/pieceUnit/kg/punnets/hours layout.
STORAGE_KEY = "picker_log_entries_v3"

DEFAULT_TAX_PERCENT = 15
UNKNOWN_PERIOD_KEY = "unknown"
UNKNOWN_CATEGORY = "Unknown"
