"""Shift Tracker package.

This package is organized by feature modules (calendars, shifts, timezones, ...)
with a thin Flask controller layer over plain service classes and a remote store.
"""
from __future__ import annotations

from .main import create_app

__all__ = ["create_app"]
