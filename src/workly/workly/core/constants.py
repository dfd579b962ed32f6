"""Constants and defaults.

Note: Keep business policy constants here to avoid magic numbers spread across code.
"""

from datetime import time, timedelta

# Active window around one shift instance: 1h pre-roll, 2h post-roll.
ACTIVE_WINDOW_BEFORE_START = timedelta(hours=1)
ACTIVE_WINDOW_AFTER_END = timedelta(hours=2)

# Proximity gate used by the button state machine (check-in / check-out).
BUTTON_PROXIMITY_GATE = timedelta(minutes=30)

# A check-out earlier than office end minus this tolerance counts as "early".
EARLY_LEAVE_TOLERANCE = timedelta(minutes=30)

# Fixed night window 22:00 -> 06:00 (next day).
NIGHT_WINDOW_START = time(22, 0)
NIGHT_WINDOW_END = time(6, 0)

# Legacy whole-shift calculator caps standard hours at 8.
LEGACY_STANDARD_HOURS_CAP = 8.0

# Manual time edit bounds.
MANUAL_EDIT_MIN_DURATION = timedelta(hours=1)
MANUAL_EDIT_MAX_DURATION = timedelta(hours=16)
MANUAL_EDIT_MARGIN = timedelta(hours=4)

DEFAULT_LATE_THRESHOLD_MINUTES = 5
DEFAULT_RAPID_PRESS_THRESHOLD_SECONDS = 60
DEFAULT_REPORT_DAYS = 7

HOURS_PRECISION = 2

RAPID_PRESS_CONFIRMED_NOTE = "Xác nhận bấm nhanh - tính đủ công theo lịch trình"
