"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_START_TIME = "09:00"
DEFAULT_END_TIME = "17:00"

DEFAULT_CALENDAR_WEEKS = 5
DAYS_PER_WEEK = 7

WEEKDAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

SUPPORTED_TIMEZONES = (
    "Asia/Manila",
    "America/New_York",
    "America/Los_Angeles",
    "America/Chicago",
    "America/Denver",
    "Europe/London",
    "Europe/Paris",
    "Europe/Berlin",
    "Asia/Tokyo",
    "Asia/Seoul",
    "Asia/Shanghai",
    "Asia/Singapore",
    "Asia/Hong_Kong",
    "Australia/Sydney",
    "Australia/Melbourne",
    "Asia/Dubai",
    "Europe/Moscow",
    "America/Sao_Paulo",
)

DEFAULT_API_TIMEOUT_SECONDS = 10
