from __future__ import annotations

from ..core.exceptions import ValidationError


def require_month(month: int) -> int:
    if not 1 <= int(month) <= 12:
        raise ValidationError(f"Invalid month: {month!r}")
    return int(month)


def require_positive(value: int, field_name: str) -> int:
    if int(value) < 1:
        raise ValidationError(f"{field_name} must be at least 1")
    return int(value)
