from __future__ import annotations

import logging

from ..core.constants import SUPPORTED_TIMEZONES
from ..core.enums import Severity
from ..core.exceptions import StoreError, ValidationError
from ..notifications.notifier import Notifier
from .repository import TimezoneStore

logger = logging.getLogger(__name__)


class TimezoneService:
    def __init__(self, timezones: TimezoneStore, notifier: Notifier):
        self._store = timezones
        self._notifier = notifier

    def choices(self) -> list[str]:
        return list(SUPPORTED_TIMEZONES)

    def get_default(self) -> str:
        """Stored preference, or "" when the store cannot be reached."""
        try:
            return self._store.get_default()
        except StoreError as e:
            logger.error("Error fetching timezone: %s", e.message)
            return ""

    def save(self, name: str) -> str:
        name = (name or "").strip()
        if not name:
            raise ValidationError("Please select a timezone.")

        try:
            saved = self._store.set_default(name)
        except StoreError as e:
            logger.error("Error saving timezone %s: %s", name, e.message)
            raise ValidationError("Error saving timezone.") from e

        self._notifier.notify(f"Timezone saved successfully: {saved}", Severity.SUCCESS)
        return saved
