from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator, Optional

import requests

from ..core.exceptions import StoreError
from .connection import ApiConnection

logger = logging.getLogger(__name__)


def error_message(response: Optional[requests.Response], fallback: str) -> str:
    """Pull ``{"message": ...}`` out of an error body, else use the reason/fallback."""

    if response is None:
        return fallback
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return response.reason or fallback


@contextmanager
def api_call(conn: ApiConnection, method: str, path: str, **kwargs) -> Iterator[requests.Response]:
    """Perform one request and translate transport/HTTP failures into StoreError."""

    try:
        response = conn.request(method, path, **kwargs)
        response.raise_for_status()
    except requests.HTTPError as e:
        status = e.response.status_code if e.response is not None else None
        message = error_message(e.response, str(e))
        logger.error("%s %s failed (%s): %s", method, path, status, message)
        raise StoreError(message, status_code=status) from e
    except requests.RequestException as e:
        logger.error("%s %s failed: %s", method, path, e)
        raise StoreError(str(e)) from e
    yield response


def json_body(response: requests.Response) -> Any:
    if response.status_code == 204 or not response.content:
        return None
    try:
        return response.json()
    except ValueError as e:
        raise StoreError("Invalid JSON from shift store", status_code=response.status_code) from e
