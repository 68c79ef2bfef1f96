from __future__ import annotations

import pytest
import requests

from web_attend.attendance.api_attendance_repository import ApiAttendanceRepository
from web_attend.core.enums import AttendanceStatus
from web_attend.core.exceptions import AuthenticationError, RemoteDataError
from web_attend.remote.client import ApiClient, ApiConfig
from web_attend.schedules.api_schedule_repository import ApiScheduleRepository
from web_attend.schedules.model import ClassDay
from web_attend.students.api_student_repository import ApiStudentRepository
from web_attend.users.api_operator_repository import ApiOperatorRepository


class FakeResponse:
    def __init__(self, status_code=200, body=None):
        self.status_code = status_code
        self._body = body

    @property
    def ok(self):
        return 200 <= self.status_code < 300

    def json(self):
        if self._body is None:
            raise ValueError("no json")
        return self._body


class FakeSession:
    def __init__(self, responses=None, *, error=None):
        self._responses = responses or {}
        self._error = error
        self.calls = []

    def get(self, url, timeout=None):
        self.calls.append(("GET", url, None, timeout))
        if self._error:
            raise self._error
        return self._responses[url]

    def post(self, url, json=None, timeout=None):
        self.calls.append(("POST", url, json, timeout))
        if self._error:
            raise self._error
        return self._responses[url]


def _client(session, timeout=None):
    return ApiClient(ApiConfig(base_url="http://api.test/", timeout=timeout), session=session)


def test_students_are_parsed_and_malformed_items_skipped():
    session = FakeSession(
        {"http://api.test/api/students": FakeResponse(body=[{"id": 1, "name": "Asha"}, {"name": "no id"}])}
    )

    students = ApiStudentRepository(_client(session, timeout=3)).list_all()

    assert [s.name for s in students] == ["Asha"]
    assert session.calls == [("GET", "http://api.test/api/students", None, 3)]


def test_attendance_keeps_feed_order():
    body = [
        {"id": 2, "student_id": 1, "date": "2024-01-02", "status": "absent"},
        {"id": 1, "student_id": 1, "date": "2024-01-01", "status": "present"},
    ]
    session = FakeSession({"http://api.test/api/attendance": FakeResponse(body=body)})

    records = ApiAttendanceRepository(_client(session)).list_all()

    assert [r.id for r in records] == [2, 1]
    assert records[0].status == AttendanceStatus.ABSENT


@pytest.mark.parametrize("response", [FakeResponse(500, {"message": "down"}), FakeResponse(200, None), FakeResponse(200, {"not": "a list"})])
def test_feed_failures_raise_remote_error(response):
    session = FakeSession({"http://api.test/api/attendance": response})

    with pytest.raises(RemoteDataError) as exc:
        ApiAttendanceRepository(_client(session)).list_all()
    assert str(exc.value) == "Failed to fetch data from the server."


def test_transport_error_raises_remote_error():
    session = FakeSession(error=requests.ConnectionError("refused"))

    with pytest.raises(RemoteDataError):
        ApiStudentRepository(_client(session)).list_all()


def test_schedule_submission_posts_payload():
    session = FakeSession({"http://api.test/api/classDay": FakeResponse(201)})
    repo = ApiScheduleRepository(_client(session))

    assert repo.submit(ClassDay(classes=("AI", "PS"), date="2024-02-01")) is True
    assert session.calls[0][2] == {"classes": ["AI", "PS"], "date": "2024-02-01"}


def test_schedule_submission_failure_is_false():
    assert ApiScheduleRepository(_client(FakeSession({"http://api.test/api/classDay": FakeResponse(400)}))).submit(
        ClassDay(classes=("AI",), date="2024-02-01")
    ) is False
    assert ApiScheduleRepository(_client(FakeSession(error=requests.Timeout("slow")))).submit(
        ClassDay(classes=("AI",), date="2024-02-01")
    ) is False


def test_login_success_and_messages():
    ok = FakeSession({"http://api.test/api/login": FakeResponse(200, {})})
    ApiOperatorRepository(_client(ok)).login("a@b.test", "pw")
    assert ok.calls[0][2] == {"email": "a@b.test", "password": "pw"}

    rejected = FakeSession({"http://api.test/api/login": FakeResponse(401, {"message": "Wrong password"})})
    with pytest.raises(AuthenticationError, match="Wrong password"):
        ApiOperatorRepository(_client(rejected)).login("a@b.test", "pw")

    bare = FakeSession({"http://api.test/api/login": FakeResponse(500, None)})
    with pytest.raises(AuthenticationError, match="Invalid credentials."):
        ApiOperatorRepository(_client(bare)).login("a@b.test", "pw")

    down = FakeSession(error=requests.ConnectionError("refused"))
    with pytest.raises(AuthenticationError, match="An unexpected error occurred"):
        ApiOperatorRepository(_client(down)).login("a@b.test", "pw")
