"""Derived attendance numbers.

Every status rule used by the views lives here. All functions are pure: they
read the record sequence, never sort or mutate it, and treat feed order as
authoritative.
"""
from __future__ import annotations

import datetime
from typing import Iterable, List, Sequence, Union

from ..common.datetime_utils import to_date_key
from ..core.constants import NOT_APPLICABLE
from ..core.enums import AttendanceStatus
from ..students.model import StudentId, same_id
from .model import AttendanceRecord, DayCount, StatusTotals

Percentage = Union[int, str]


def count_by_status_for_date(records: Iterable[AttendanceRecord], date: str, status: AttendanceStatus) -> int:
    return sum(1 for r in records if r.date == date and r.status == status)


def records_for_student(records: Iterable[AttendanceRecord], student_id: StudentId) -> List[AttendanceRecord]:
    return [r for r in records if same_id(r.student_id, student_id)]


def status_totals(records: Iterable[AttendanceRecord], student_id: StudentId) -> StatusTotals:
    present = absent = leave = 0
    for r in records_for_student(records, student_id):
        if r.status == AttendanceStatus.PRESENT:
            present += 1
        elif r.status == AttendanceStatus.ABSENT:
            absent += 1
        elif r.status == AttendanceStatus.LEAVE:
            leave += 1
    return StatusTotals(present=present, absent=absent, leave=leave)


def percentage_of(present: int, total: int) -> Percentage:
    """Share of present records, rounded half up; N/A when there is nothing to divide."""
    if total <= 0:
        return NOT_APPLICABLE
    # Integer form of floor(100 * present / total + 0.5).
    return (200 * present + total) // (2 * total)


def attendance_percentage(records: Iterable[AttendanceRecord], student_id: StudentId) -> Percentage:
    totals = status_totals(records, student_id)
    return percentage_of(totals.present, totals.total)


def status_on_date(records: Iterable[AttendanceRecord], student_id: StudentId, date: str) -> AttendanceStatus:
    for r in records:
        if same_id(r.student_id, student_id) and r.date == date:
            return r.status
    return AttendanceStatus.UNKNOWN


def recent_activity(records: Iterable[AttendanceRecord], date: str, limit: int) -> List[AttendanceRecord]:
    if limit <= 0:
        return []
    out: List[AttendanceRecord] = []
    for r in records:
        if r.date == date:
            out.append(r)
            if len(out) >= limit:
                break
    return out


def records_in_range(records: Iterable[AttendanceRecord], start: str, end: str) -> List[AttendanceRecord]:
    """Records whose date-key lies in [start, end]; lexical order equals calendar order."""
    return [r for r in records if start <= r.date <= end]


def daily_counts(records: Sequence[AttendanceRecord], days: Sequence[datetime.date]) -> List[DayCount]:
    out = []
    for d in days:
        key = to_date_key(d)
        out.append(
            DayCount(
                date=key,
                label=d.strftime("%a"),
                present=count_by_status_for_date(records, key, AttendanceStatus.PRESENT),
                absent=count_by_status_for_date(records, key, AttendanceStatus.ABSENT),
            )
        )
    return out
