import os


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "shift-tracker-dev-key"

    # Remote shift store
    SHIFT_API_URL = os.environ.get("SHIFT_API_URL", "http://localhost:3000/")
    SHIFT_API_TIMEOUT = float(os.environ.get("SHIFT_API_TIMEOUT", "10"))

    # Calendar: 0 -> fit the month (4-6 rows)
    CALENDAR_WEEKS = int(os.environ.get("CALENDAR_WEEKS", "5"))
    # "local" or an IANA zone, e.g. "Asia/Manila"
    DISPLAY_TIMEZONE = os.environ.get("DISPLAY_TIMEZONE", "local")


SECRET_KEY = Config.SECRET_KEY
API_CONFIG = {
    "base_url": Config.SHIFT_API_URL,
    "timeout": Config.SHIFT_API_TIMEOUT,
}

DEBUG = bool(int(os.environ.get("DEBUG", "1")))

CALENDAR_WEEKS = Config.CALENDAR_WEEKS
DISPLAY_TIMEZONE = Config.DISPLAY_TIMEZONE
