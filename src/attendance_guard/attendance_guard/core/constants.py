"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from fractions import Fraction

SLOT_COUNT = 4
SLOT_TIMES = (
    "8:00 – 10:00",
    "10:00 – 12:00",
    "1:00 – 3:00",
    "3:00 – 5:00",
)
# Header labels used in CSV export (ASCII hyphen).
SLOT_EXPORT_LABELS = ("8:00-10:00", "10:00-12:00", "1:00-3:00", "3:00-5:00")

ATTENDANCE_THRESHOLD = Fraction(3, 4)
ATTENDANCE_THRESHOLD_PERCENT = 75

FREE_MARKER = "Free"

# date.weekday() value of the weekly rest day.
REST_WEEKDAY = 6

WEEKDAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
TIMETABLE_WEEKDAYS = WEEKDAY_NAMES[:6]

EXPORT_FILENAME_PREFIX = "attendance_guard_export_"
