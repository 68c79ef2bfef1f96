from __future__ import annotations

import logging
from typing import List

from ..core.constants import FETCH_ERROR_MESSAGE
from ..core.exceptions import RemoteDataError, ValidationError
from ..remote.client import ApiClient
from .model import Student

logger = logging.getLogger(__name__)


class ApiStudentRepository:
    PATH = "/api/students"

    def __init__(self, client: ApiClient):
        self._client = client

    def list_all(self) -> List[Student]:
        payload = self._client.get_json(self.PATH)
        if not isinstance(payload, list):
            raise RemoteDataError(FETCH_ERROR_MESSAGE)

        students: List[Student] = []
        for item in payload:
            try:
                students.append(Student.from_api(item))
            except (ValidationError, TypeError, AttributeError):
                logger.warning("Skipping malformed student payload: %r", item)
        return students
