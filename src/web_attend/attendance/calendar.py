from __future__ import annotations

import calendar
from dataclasses import dataclass
from typing import Optional, Sequence

from ..common.datetime_utils import date_key
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..students.model import StudentId
from .aggregation import records_for_student, status_on_date
from .model import AttendanceRecord

WEEKDAY_LABELS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


@dataclass(frozen=True)
class CalendarCell:
    """One slot of the month grid. Leading blanks have no day."""

    day: Optional[int] = None
    date: Optional[str] = None
    status: AttendanceStatus = AttendanceStatus.UNKNOWN

    @property
    def is_blank(self) -> bool:
        return self.day is None


@dataclass(frozen=True)
class MonthGrid:
    year: int
    month: int
    cells: tuple[CalendarCell, ...]
    weekday_labels: tuple[str, ...] = WEEKDAY_LABELS

    @property
    def title(self) -> str:
        return f"{calendar.month_name[self.month + 1]} {self.year}"

    @property
    def leading_blanks(self) -> int:
        return sum(1 for c in self.cells if c.is_blank)

    @property
    def days(self) -> list[CalendarCell]:
        return [c for c in self.cells if not c.is_blank]


def month_layout(year: int, month: int) -> tuple[int, int]:
    """Return (first_weekday_offset, days_in_month) for a zero-based month.

    The offset counts from Sunday = 0.
    """
    if not 0 <= month <= 11:
        raise ValidationError(f"Month index out of range: {month}")
    monday_based, days_in_month = calendar.monthrange(year, month + 1)
    return (monday_based + 1) % 7, days_in_month


def build_month_grid(
    records: Sequence[AttendanceRecord],
    student_id: StudentId,
    year: int,
    month: int,
) -> MonthGrid:
    offset, days_in_month = month_layout(year, month)
    own = records_for_student(records, student_id)

    cells = [CalendarCell() for _ in range(offset)]
    for day in range(1, days_in_month + 1):
        key = date_key(year, month, day)
        cells.append(CalendarCell(day=day, date=key, status=status_on_date(own, student_id, key)))

    # No trailing padding: the last week row stays ragged.
    return MonthGrid(year=year, month=month, cells=tuple(cells))
