from __future__ import annotations

from datetime import datetime

import pytest

from web_attend.attendance.model import AttendanceRecord
from web_attend.attendance.service import AttendanceService
from web_attend.container import Container
from web_attend.core.enums import AttendanceStatus
from web_attend.core.exceptions import AuthenticationError, RemoteDataError
from web_attend.main import create_app
from web_attend.reports.service import ReportService
from web_attend.schedules.service import ScheduleService
from web_attend.students.model import Student
from web_attend.users.service import AuthService


class InMemoryStudents:
    def __init__(self, students=(), *, error: Exception | None = None):
        self._students = list(students)
        self._error = error

    def list_all(self):
        if self._error:
            raise self._error
        return list(self._students)


class InMemoryAttendance:
    def __init__(self, records=(), *, error: Exception | None = None):
        self._records = list(records)
        self._error = error

    def list_all(self):
        if self._error:
            raise self._error
        return list(self._records)


class FakeOperators:
    def __init__(self, *, accept: bool = True, message: str = "Invalid credentials."):
        self._accept = accept
        self._message = message
        self.calls = []

    def login(self, email, password):
        self.calls.append((email, password))
        if not self._accept:
            raise AuthenticationError(self._message)


class FakeSchedules:
    def __init__(self, *, ok: bool = True):
        self._ok = ok
        self.submitted = []

    def submit(self, class_day):
        self.submitted.append(class_day)
        return self._ok


def rec(rid, student_id, date, status):
    return AttendanceRecord(id=rid, student_id=student_id, date=date, status=AttendanceStatus.parse(status))


@pytest.fixture
def fixed_now():
    return datetime(2024, 1, 10, 9, 30, 0)


@pytest.fixture
def students():
    return [
        Student(id=1, name="Asha Rao", class_name="I-BCA"),
        Student(id=2, name="Ben Okafor", avatar="https://img.test/ben.png"),
        Student(id=3, name="Chen Li"),
    ]


@pytest.fixture
def records():
    return [
        rec(1, 1, "2024-01-08", "present"),
        rec(2, 1, "2024-01-09", "absent"),
        rec(3, 1, "2024-01-10", "present"),
        rec(4, 2, "2024-01-10", "absent"),
        rec(5, 2, "2024-01-09", "leave"),
        rec(6, 99, "2024-01-10", "present"),
    ]


@pytest.fixture
def make_container(students, records):
    def _make(*, students_repo=None, attendance_repo=None, operators=None, schedules=None):
        return Container(
            client=None,
            attendance_service=AttendanceService(
                students_repo or InMemoryStudents(students),
                attendance_repo or InMemoryAttendance(records),
            ),
            auth_service=AuthService(operators or FakeOperators(), session_minutes=60),
            schedule_service=ScheduleService(schedules or FakeSchedules()),
            report_service=ReportService(),
        )

    return _make


@pytest.fixture
def make_client(make_container, monkeypatch, fixed_now):
    monkeypatch.setattr("web_attend.attendance.service.now_local", lambda: fixed_now)

    def _make(**kwargs):
        app = create_app(make_container(**kwargs), settings_module="web_attend.config.testing")
        return app.test_client()

    return _make


@pytest.fixture
def failing_feed():
    return InMemoryAttendance(error=RemoteDataError("Failed to fetch data from the server."))


@pytest.fixture
def make_record():
    return rec
