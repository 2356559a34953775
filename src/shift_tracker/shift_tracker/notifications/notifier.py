from __future__ import annotations

import logging
from typing import Protocol

from flask import flash, get_flashed_messages

from ..core.enums import Severity

logger = logging.getLogger(__name__)

# Flask flash categories used by the clients.
FLASH_CATEGORIES = {
    Severity.SUCCESS: "success",
    Severity.ERROR: "danger",
}


class Notifier(Protocol):
    def notify(self, title: str, severity: Severity) -> None:
        raise NotImplementedError


class FlashNotifier(Notifier):
    """Fire-and-forget notifications through Flask's message flashing."""

    def notify(self, title: str, severity: Severity) -> None:
        if severity == Severity.ERROR:
            logger.warning("notify error: %s", title)
        flash(title, FLASH_CATEGORIES[severity])


def error_title(message: str) -> str:
    return f"Error: {message}"


def drain_flashes() -> list[dict[str, str]]:
    """Pop flashed notifications for a JSON response."""
    return [{"category": c, "message": m} for c, m in get_flashed_messages(with_categories=True)]
