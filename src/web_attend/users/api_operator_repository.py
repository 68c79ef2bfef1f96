from __future__ import annotations

import logging

from ..core.constants import LOGIN_FALLBACK_MESSAGE, LOGIN_UNEXPECTED_MESSAGE
from ..core.exceptions import AuthenticationError, RemoteDataError
from ..remote.client import ApiClient

logger = logging.getLogger(__name__)


class ApiOperatorRepository:
    PATH = "/api/login"

    def __init__(self, client: ApiClient):
        self._client = client

    def login(self, email: str, password: str) -> None:
        try:
            response = self._client.post_json(self.PATH, {"email": email, "password": password})
        except RemoteDataError as e:
            raise AuthenticationError(LOGIN_UNEXPECTED_MESSAGE) from e

        if response.ok:
            return

        try:
            body = response.json()
        except ValueError:
            body = None
        message = body.get("message") if isinstance(body, dict) else None
        logger.info("Login rejected for %s (status %s)", email, response.status_code)
        raise AuthenticationError(message or LOGIN_FALLBACK_MESSAGE)
