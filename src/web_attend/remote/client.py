from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

import requests

from ..core.constants import FETCH_ERROR_MESSAGE
from ..core.exceptions import RemoteDataError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ApiConfig:
    base_url: str
    timeout: Optional[float] = None


class ApiClient:
    """Thin JSON-over-HTTP client for the attendance backend.

    Note: one requests.Session is shared by all repositories; the Flask app
    only issues a handful of calls per page.
    """

    def __init__(self, config: ApiConfig, *, session: Optional[requests.Session] = None):
        self._config = config
        self._session = session or requests.Session()

    @property
    def base_url(self) -> str:
        return self._config.base_url.rstrip("/")

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def get_json(self, path: str) -> Any:
        """GET a JSON document; any transport error or non-2xx becomes RemoteDataError."""
        url = self.url_for(path)
        try:
            response = self._session.get(url, timeout=self._config.timeout)
        except requests.RequestException as e:
            logger.warning("GET %s failed: %s", url, e)
            raise RemoteDataError(FETCH_ERROR_MESSAGE) from e

        if not response.ok:
            logger.warning("GET %s answered %s", url, response.status_code)
            raise RemoteDataError(FETCH_ERROR_MESSAGE, status_code=response.status_code)

        try:
            return response.json()
        except ValueError as e:
            logger.warning("GET %s returned a non-JSON body", url)
            raise RemoteDataError(FETCH_ERROR_MESSAGE, status_code=response.status_code) from e

    def post_json(self, path: str, payload: dict) -> requests.Response:
        """POST a JSON body and hand back the raw response.

        Callers decide what a non-2xx status means; only transport errors raise here.
        """
        url = self.url_for(path)
        try:
            return self._session.post(url, json=payload, timeout=self._config.timeout)
        except requests.RequestException as e:
            logger.warning("POST %s failed: %s", url, e)
            raise RemoteDataError(str(e)) from e
