from __future__ import annotations

import logging

from ..core.exceptions import RemoteDataError
from ..remote.client import ApiClient
from .model import ClassDay

logger = logging.getLogger(__name__)


class ApiScheduleRepository:
    PATH = "/api/classDay"

    def __init__(self, client: ApiClient):
        self._client = client

    def submit(self, class_day: ClassDay) -> bool:
        try:
            response = self._client.post_json(self.PATH, class_day.to_payload())
        except RemoteDataError:
            return False
        if not response.ok:
            logger.warning("classDay rejected with status %s", response.status_code)
        return bool(response.ok)
