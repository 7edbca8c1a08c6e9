"""
Shared constants used across the platform.
"""

# Day name list for display ordering (Monday-first)
DAY_NAMES = [
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
]

# Short column headers for the schedule grid
DAY_LABELS = {
    "Monday": "MON",
    "Tuesday": "TUE",
    "Wednesday": "WED",
    "Thursday": "THU",
    "Friday": "FRI",
    "Saturday": "SAT",
    "Sunday": "SUN",
}

# Classes always start on the hour, so the grid has one row per hour
HOURS_PER_DAY = 24
