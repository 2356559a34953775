import os

from .config import API_CONFIG, CALENDAR_WEEKS, DISPLAY_TIMEZONE

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False

__all__ = ["SECRET_KEY", "API_CONFIG", "DEBUG", "CALENDAR_WEEKS", "DISPLAY_TIMEZONE"]
