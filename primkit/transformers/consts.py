"""
Constants shared by the transformers.
"""

from typing import Dict, Tuple

# values needed to format a file size value into a readable string
FILE_SIZE_THRESHOLD = 1024
FILE_SIZE_UNITS: Tuple[str, ...] = ("kB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")

BADGE_COUNT_MAX = 9

# English names keep date output independent of the process locale
MONTH_NAMES: Tuple[str, ...] = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
WEEKDAY_NAMES: Tuple[str, ...] = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
)

# template -> example output for 2024-01-05 14:30:45 UTC
DATE_TEMPLATES: Dict[str, str] = {
    "date-short": "01/05/2024",
    "date-medium": "January 5, 2024",
    "date-long": "Friday, January 5, 2024",
    "time-short": "02:30 PM",
    "time-medium": "02:30:45 PM",
    "datetime-short": "01/5/2024, 02:30 PM",
    "datetime-medium": "January 5, 2024 at 02:30 PM",
    "datetime-long": "Friday, January 5, 2024 at 02:30:45 PM",
}
