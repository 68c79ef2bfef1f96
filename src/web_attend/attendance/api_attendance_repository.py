from __future__ import annotations

import logging
from typing import List

from ..core.constants import FETCH_ERROR_MESSAGE
from ..core.exceptions import RemoteDataError, ValidationError
from ..remote.client import ApiClient
from .model import AttendanceRecord

logger = logging.getLogger(__name__)


class ApiAttendanceRepository:
    PATH = "/api/attendance"

    def __init__(self, client: ApiClient):
        self._client = client

    def list_all(self) -> List[AttendanceRecord]:
        payload = self._client.get_json(self.PATH)
        if not isinstance(payload, list):
            raise RemoteDataError(FETCH_ERROR_MESSAGE)

        # Feed order is authoritative; keep it.
        records: List[AttendanceRecord] = []
        for item in payload:
            try:
                records.append(AttendanceRecord.from_api(item))
            except (ValidationError, TypeError, AttributeError):
                logger.warning("Skipping malformed attendance payload: %r", item)
        return records
