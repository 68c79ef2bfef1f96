from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Mapping, Optional

SESSION_KEY = "operator"
_TS_FORMAT = "%Y-%m-%dT%H:%M:%S"


@dataclass(frozen=True)
class OperatorSession:
    """The logged-in operator, kept in the signed Flask session cookie.

    Created after the backend accepts a login and dropped on logout or once
    it expires. It gates the schedule form only and is not a security
    boundary: the backend remains responsible for authorising writes.
    """

    email: str
    created_at: datetime
    expires_at: datetime

    @classmethod
    def start(cls, email: str, *, now: datetime, lifetime: timedelta) -> "OperatorSession":
        return cls(email=email, created_at=now, expires_at=now + lifetime)

    def is_valid(self, now: datetime) -> bool:
        return now < self.expires_at

    def to_session(self) -> dict:
        return {
            "email": self.email,
            "created_at": self.created_at.strftime(_TS_FORMAT),
            "expires_at": self.expires_at.strftime(_TS_FORMAT),
        }

    @classmethod
    def from_session(cls, data: Optional[Mapping[str, Any]]) -> Optional["OperatorSession"]:
        if not data:
            return None
        try:
            return cls(
                email=str(data["email"]),
                created_at=datetime.strptime(data["created_at"], _TS_FORMAT),
                expires_at=datetime.strptime(data["expires_at"], _TS_FORMAT),
            )
        except (KeyError, TypeError, ValueError):
            return None
