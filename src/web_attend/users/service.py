from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional

from ..common.datetime_utils import now_local
from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_SESSION_MINUTES
from ..core.exceptions import AuthenticationError, ValidationError
from .model import OperatorSession
from .repository import OperatorRepository


class AuthService:
    """Use case: log the operator in against the backend."""

    def __init__(self, operators: OperatorRepository, *, session_minutes: int = DEFAULT_SESSION_MINUTES):
        self._operators = operators
        self._lifetime = timedelta(minutes=int(session_minutes))

    def authenticate(self, email: str, password: str, *, now: Optional[datetime] = None) -> OperatorSession:
        try:
            email = require_non_empty(email, "Email")
            require_non_empty(password, "Password")
        except ValidationError as e:
            raise AuthenticationError(str(e)) from e

        self._operators.login(email, password)
        return OperatorSession.start(email, now=now or now_local(), lifetime=self._lifetime)

    def current(self, data, *, now: Optional[datetime] = None) -> Optional[OperatorSession]:
        """Session from stored data, or None when missing or expired."""
        op = OperatorSession.from_session(data)
        if op is None or not op.is_valid(now or now_local()):
            return None
        return op
