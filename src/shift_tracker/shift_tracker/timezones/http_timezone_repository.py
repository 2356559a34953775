from __future__ import annotations

import requests

from ..remote.connection import ApiConnection
from ..remote.http_base import api_call
from .repository import TimezoneStore

TIMEZONE_ROOT = "api/timezone"


def _zone_name(resp: requests.Response) -> str:
    # The store answers with a JSON string, {"timezone": "..."} or plain text.
    if not resp.content:
        return ""
    try:
        body = resp.json()
    except ValueError:
        body = resp.text
    if isinstance(body, dict):
        body = body.get("timezone")
    return str(body or "").strip()


class HttpTimezoneStore(TimezoneStore):
    def __init__(self, conn: ApiConnection):
        self._conn = conn

    def get_default(self) -> str:
        with api_call(self._conn, "GET", TIMEZONE_ROOT) as resp:
            return _zone_name(resp)

    def set_default(self, name: str) -> str:
        with api_call(self._conn, "PUT", TIMEZONE_ROOT, json={"timezone": name}) as resp:
            return _zone_name(resp) or name
