from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..students.model import StudentId

RecordId = Union[int, str]


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one student's status on one day.

    `date` stays a YYYY-MM-DD string; every day-level comparison is done on
    that key, never on parsed datetimes.
    """

    id: RecordId
    student_id: StudentId
    date: str
    status: AttendanceStatus

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "AttendanceRecord":
        if data.get("student_id") is None:
            raise ValidationError("Attendance payload without student_id")
        if not data.get("date"):
            raise ValidationError("Attendance payload without date")
        return cls(
            id=data.get("id"),
            student_id=data["student_id"],
            date=str(data["date"]),
            status=AttendanceStatus.parse(data.get("status")),
        )


@dataclass(frozen=True)
class StatusTotals:
    present: int = 0
    absent: int = 0
    leave: int = 0

    @property
    def total(self) -> int:
        """Records with a known status; unknown ones never enter the denominator."""
        return self.present + self.absent + self.leave


@dataclass(frozen=True)
class DayCount:
    date: str
    label: str
    present: int
    absent: int
