from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from urllib.parse import urljoin

import requests

from ..core.constants import DEFAULT_API_TIMEOUT_SECONDS


@dataclass
class ApiConfig:
    base_url: str
    timeout: float = DEFAULT_API_TIMEOUT_SECONDS


class ApiConnection:
    """Singleton-like HTTP session factory for the remote shift store.

    Note: One ``requests.Session`` is reused so keep-alive connections are pooled.
    """

    _instance: Optional["ApiConnection"] = None

    def __init__(self, config: ApiConfig, *, session: Optional[requests.Session] = None):
        self._config = config
        self._session = session or requests.Session()
        self._session.headers.update({"Content-Type": "application/json"})

    @classmethod
    def get_instance(cls, config: ApiConfig) -> "ApiConnection":
        if cls._instance is None:
            cls._instance = ApiConnection(config)
        return cls._instance

    @property
    def timeout(self) -> float:
        return float(self._config.timeout)

    def url(self, path: str) -> str:
        base = self._config.base_url if self._config.base_url.endswith("/") else self._config.base_url + "/"
        return urljoin(base, path.lstrip("/"))

    def request(self, method: str, path: str, **kwargs) -> requests.Response:
        return self._session.request(method, self.url(path), timeout=self.timeout, **kwargs)
