from __future__ import annotations

from datetime import date, tzinfo
from typing import Optional, Union

from ..core.enums import Severity
from ..core.exceptions import ValidationError
from ..notifications.notifier import Notifier, error_title
from .form import ShiftForm
from .model import ShiftRecord
from .service import ShiftService


class ShiftEditor:
    """Open/closed state of the shift form.

    ``save()`` and ``delete()`` always close the editor, whatever the outcome; results are
    reported through the notifier, never kept on the form.
    """

    def __init__(self, service: ShiftService, notifier: Notifier, *, tz: Optional[tzinfo] = None):
        self._service = service
        self._notifier = notifier
        self._tz = tz
        self.form: Optional[ShiftForm] = None

    @property
    def is_open(self) -> bool:
        return self.form is not None

    def open_new(self, day: Union[date, str]) -> ShiftForm:
        self.form = ShiftForm.for_new(day, tz=self._tz)
        return self.form

    def open_shift(self, record: ShiftRecord) -> ShiftForm:
        self.form = ShiftForm.for_shift(record, tz=self._tz)
        return self.form

    def open_fields(
        self,
        *,
        local_date: str,
        local_start_time: str,
        local_end_time: str,
        editing_id: Optional[int] = None,
    ) -> ShiftForm:
        """Restore a form from submitted fields (stateless HTTP round trip)."""
        self.form = ShiftForm(
            local_date=local_date,
            local_start_time=local_start_time,
            local_end_time=local_end_time,
            editing_id=editing_id,
            tz=self._tz,
        )
        return self.form

    def close(self) -> None:
        self.form = None

    def save(self) -> bool:
        form = self._require_open()
        try:
            payload = form.validate()
        except ValidationError as e:
            self._notifier.notify(error_title(str(e)), Severity.ERROR)
            return False
        finally:
            self.close()
        return self._service.save(payload, form.editing_id)

    def delete(self) -> bool:
        form = self._require_open()
        self.close()
        if not form.is_editing:
            return False
        return self._service.delete(form.editing_id)

    def _require_open(self) -> ShiftForm:
        if self.form is None:
            raise ValidationError("No shift is being edited")
        return self.form
