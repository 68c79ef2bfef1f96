from __future__ import annotations

from enum import Enum
from typing import Any


class AttendanceStatus(str, Enum):
    """Attendance status as delivered by the attendance feed."""

    PRESENT = "present"
    ABSENT = "absent"
    LEAVE = "leave"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: Any) -> "AttendanceStatus":
        """Map a raw feed value onto a status; anything unrecognised is UNKNOWN."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                status = cls(value.strip().lower())
            except ValueError:
                return cls.UNKNOWN
            return status
        return cls.UNKNOWN

    @property
    def is_known(self) -> bool:
        return self is not AttendanceStatus.UNKNOWN


class Tab(str, Enum):
    """Top-level tabs of the dashboard shell."""

    DASHBOARD = "dashboard"
    STUDENTS = "students"
    REPORTS = "reports"
