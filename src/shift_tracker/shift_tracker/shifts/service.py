from __future__ import annotations

import logging
from typing import Optional

from ..core.enums import Severity, ShiftAction
from ..core.exceptions import NotFoundError, StoreError
from ..notifications.notifier import Notifier, error_title
from .model import ShiftPayload, ShiftRecord
from .repository import ShiftStore

logger = logging.getLogger(__name__)

SUCCESS_TITLES = {
    ShiftAction.CREATE: "Shift saved successfully",
    ShiftAction.UPDATE: "Shift updated successfully",
    ShiftAction.DELETE: "Shift deleted successfully",
}


class ShiftService:
    """Holds the shift collection for one rendering context.

    Mutations never patch the collection locally: a successful create/update/delete is
    followed by a full re-fetch, a failure leaves the collection as it was.
    """

    def __init__(self, shifts: ShiftStore, notifier: Notifier):
        self._store = shifts
        self._notifier = notifier
        self.shifts: list[ShiftRecord] = []

    def refresh(self) -> list[ShiftRecord]:
        failure = self._reload()
        if failure is not None:
            self._notifier.notify(error_title(failure), Severity.ERROR)
        return self.shifts

    def _reload(self) -> Optional[str]:
        try:
            self.shifts = list(self._store.list_all())
        except StoreError as e:
            logger.error("Fetching shifts failed: %s", e.message)
            return e.message
        return None

    def find(self, shift_id: int) -> ShiftRecord:
        for record in self.shifts:
            if record.id == int(shift_id):
                return record
        raise NotFoundError(f"Shift {shift_id} not found")

    def save(self, payload: ShiftPayload, shift_id: Optional[int] = None) -> bool:
        if shift_id is None:
            action = ShiftAction.CREATE
            call = lambda: self._store.create(start=payload.start, end=payload.end)
        else:
            action = ShiftAction.UPDATE
            call = lambda: self._store.update(shift_id=int(shift_id), start=payload.start, end=payload.end)
        return self._mutate(action, call)

    def delete(self, shift_id: int) -> bool:
        return self._mutate(ShiftAction.DELETE, lambda: self._store.delete(shift_id=int(shift_id)))

    def _mutate(self, action: ShiftAction, call) -> bool:
        try:
            call()
        except StoreError as e:
            logger.error("%s shift failed: %s", action.value, e.message)
            self._notifier.notify(error_title(e.message), Severity.ERROR)
            return False

        # The write stands even when the re-fetch fails; report both, in that order.
        failure = self._reload()
        self._notifier.notify(SUCCESS_TITLES[action], Severity.SUCCESS)
        if failure is not None:
            self._notifier.notify(error_title(f"Could not reload shifts: {failure}"), Severity.ERROR)
        return True
