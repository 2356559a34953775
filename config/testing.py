import os

SECRET_KEY = "test-secret"

API_CONFIG = {
    "base_url": os.getenv("SHIFT_API_URL", "http://localhost:3000/"),
    "timeout": 1,
}

DEBUG = False
TESTING = True

CALENDAR_WEEKS = 5
DISPLAY_TIMEZONE = "Asia/Manila"
