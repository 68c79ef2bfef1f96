from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any, Iterable, Mapping, Optional, Sequence

from ..common.datetime_utils import now_local, to_date_key
from ..core.constants import (
    AVATAR_URL_TEMPLATE,
    DEFAULT_CLASS_LABEL,
    DEFAULT_RECENT_LIMIT,
    FETCH_ERROR_MESSAGE,
    NOT_APPLICABLE,
)
from ..core.enums import AttendanceStatus
from ..core.exceptions import DomainError, RemoteDataError, ValidationError
from ..students.model import Student, StudentId, find_student
from ..students.repository import StudentRepository
from .aggregation import (
    attendance_percentage,
    count_by_status_for_date,
    daily_counts,
    percentage_of,
    recent_activity,
    status_on_date,
    status_totals,
)
from .calendar import build_month_grid
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)

STATUS_LABELS = {
    AttendanceStatus.PRESENT: "Present",
    AttendanceStatus.ABSENT: "Absent",
    AttendanceStatus.LEAVE: "Leave",
    AttendanceStatus.UNKNOWN: NOT_APPLICABLE,
}

STATUS_CSS = {
    AttendanceStatus.PRESENT: "bg-success",
    AttendanceStatus.ABSENT: "bg-danger",
    AttendanceStatus.LEAVE: "bg-warning text-dark",
    AttendanceStatus.UNKNOWN: "bg-secondary",
}


def avatar_url(student: Optional[Student], fallback_id: Any = None) -> str:
    if student and student.avatar:
        return student.avatar
    return AVATAR_URL_TEMPLATE.format(id=student.id if student else fallback_id)


def class_label(student: Student) -> str:
    return student.class_name or DEFAULT_CLASS_LABEL


def format_percentage(value) -> str:
    return value if value == NOT_APPLICABLE else f"{value}%"


@dataclass(frozen=True)
class Snapshot:
    """Both feeds as loaded for one page render."""

    students: tuple[Student, ...]
    records: tuple[AttendanceRecord, ...]


class AttendanceService:
    def __init__(
        self,
        students: StudentRepository,
        attendance: AttendanceRepository,
        *,
        recent_limit: int = DEFAULT_RECENT_LIMIT,
    ):
        self._students = students
        self._attendance = attendance
        self._recent_limit = int(recent_limit)

    def load_snapshot(self, local_records: Iterable[Mapping[str, Any]] = ()) -> Snapshot:
        """Fetch students and attendance together; if either fails, both fail."""
        with ThreadPoolExecutor(max_workers=2) as pool:
            students_future = pool.submit(self._students.list_all)
            records_future = pool.submit(self._attendance.list_all)
            try:
                students = students_future.result()
                records = records_future.result()
            except DomainError:
                raise
            except Exception as e:
                logger.exception("Loading feeds failed")
                raise RemoteDataError(FETCH_ERROR_MESSAGE) from e

        merged = list(records)
        for item in local_records:
            try:
                merged.append(AttendanceRecord.from_api(dict(item)))
            except (ValidationError, TypeError, AttributeError):
                logger.warning("Dropping malformed local mark: %r", item)

        logger.debug("Loaded %d students, %d records", len(students), len(merged))
        return Snapshot(students=tuple(students), records=tuple(merged))

    def mark_locally(
        self,
        local_records: Sequence[Mapping[str, Any]],
        *,
        student_id: StudentId,
        status: str = AttendanceStatus.PRESENT.value,
        today: Optional[date] = None,
    ) -> list[dict]:
        """Append an unconfirmed record for today.

        The result is kept in the operator's browser session only; it is never
        posted to the backend.
        """
        if student_id is None or not str(student_id).strip():
            raise ValidationError("Student is required")
        parsed = AttendanceStatus.parse(status)
        if not parsed.is_known:
            raise ValidationError(f"Unsupported attendance status: {status}")

        today = today or now_local().date()
        out = [dict(r) for r in local_records]
        out.append(
            {
                "id": f"local-{len(out) + 1}",
                "student_id": student_id,
                "date": to_date_key(today),
                "status": parsed.value,
            }
        )
        return out

    def dashboard_ui(self, snapshot: Snapshot, *, today: Optional[date] = None) -> dict:
        today = today or now_local().date()
        key = to_date_key(today)
        records = snapshot.records

        monday = today - timedelta(days=today.weekday())
        week = daily_counts(records, [monday + timedelta(days=i) for i in range(5)])
        chart_max = max([len(snapshot.students), 1] + [d.present + d.absent for d in week])

        recent = []
        for r in recent_activity(records, key, self._recent_limit):
            student = find_student(snapshot.students, r.student_id)
            recent.append(
                {
                    "student_id": r.student_id,
                    "name": student.name if student else f"Student #{r.student_id}",
                    "avatar": avatar_url(student, r.student_id),
                    "status": STATUS_LABELS[r.status],
                    "css_class": STATUS_CSS[r.status],
                    "known_student": student is not None,
                }
            )

        return {
            "date": key,
            "total_students": len(snapshot.students),
            "present_today": count_by_status_for_date(records, key, AttendanceStatus.PRESENT),
            "absent_today": count_by_status_for_date(records, key, AttendanceStatus.ABSENT),
            "leave_today": count_by_status_for_date(records, key, AttendanceStatus.LEAVE),
            "week": [
                {
                    "label": d.label,
                    "date": d.date,
                    "present": d.present,
                    "absent": d.absent,
                    "present_pct": round(d.present / chart_max * 100),
                    "absent_pct": round(d.absent / chart_max * 100),
                }
                for d in week
            ],
            "recent": recent,
        }

    def student_rows_ui(self, snapshot: Snapshot, *, query: str = "", today: Optional[date] = None) -> list[dict]:
        key = to_date_key(today or now_local().date())
        needle = (query or "").strip().lower()

        rows = []
        for s in snapshot.students:
            if needle and needle not in s.name.lower():
                continue
            status = status_on_date(snapshot.records, s.id, key)
            rows.append(
                {
                    "id": s.id,
                    "name": s.name,
                    "avatar": avatar_url(s),
                    "class_label": class_label(s),
                    "percentage": format_percentage(attendance_percentage(snapshot.records, s.id)),
                    "status": STATUS_LABELS[status],
                    "css_class": STATUS_CSS[status],
                }
            )
        return rows

    def student_detail_ui(
        self,
        snapshot: Snapshot,
        student_id: StudentId,
        *,
        year: Optional[int] = None,
        month: Optional[int] = None,
    ) -> Optional[dict]:
        """Detail card plus month calendar; month is zero-based, defaulting to the current one."""
        student = find_student(snapshot.students, student_id)
        if not student:
            return None

        now = now_local()
        year = now.year if year is None else int(year)
        month = now.month - 1 if month is None else int(month)

        totals = status_totals(snapshot.records, student.id)
        grid = build_month_grid(snapshot.records, student.id, year, month)
        prev_year, prev_month = (year - 1, 11) if month == 0 else (year, month - 1)
        next_year, next_month = (year + 1, 0) if month == 11 else (year, month + 1)

        return {
            "id": student.id,
            "name": student.name,
            "avatar": avatar_url(student),
            "class_label": class_label(student),
            "total_classes": totals.total,
            "present_classes": totals.present,
            "percentage": format_percentage(percentage_of(totals.present, totals.total)),
            "grid": grid,
            "cells": [
                {
                    "day": c.day,
                    "date": c.date,
                    "status": c.status.value,
                    "css_class": STATUS_CSS[c.status] if c.status.is_known else "",
                }
                for c in grid.cells
            ],
            "prev": {"year": prev_year, "month": prev_month},
            "next": {"year": next_year, "month": next_month},
        }
