"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MINUTES_PER_DAY = 24 * 60
DEFAULT_MAX_DAILY_HOURS = 8
MORNING_CUTOFF = "12:00"

EMPLOYEE_ID_PREFIX = "E"
ID_DIGITS = 3

JSON_INDENT = 4
EMPLOYEES_FILE = "employees.json"
SHIFTS_FILE = "shifts.json"
ASSIGNMENTS_FILE = "assignments.json"

DEFAULT_PORT = 3090
