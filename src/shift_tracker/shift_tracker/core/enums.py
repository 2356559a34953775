from __future__ import annotations

from enum import Enum


class Severity(str, Enum):
    """Mức độ thông báo hiển thị cho người dùng."""

    SUCCESS = "success"
    ERROR = "error"


class ShiftAction(str, Enum):
    """Loại thao tác ghi lên kho ca làm việc (dùng cho thông báo)."""

    CREATE = "CREATE"
    UPDATE = "UPDATE"
    DELETE = "DELETE"
