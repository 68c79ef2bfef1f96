from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from web_attend.core.exceptions import AuthenticationError
from web_attend.users.model import OperatorSession
from web_attend.users.service import AuthService

from conftest import FakeOperators


def test_authenticate_creates_session(fixed_now):
    operators = FakeOperators()
    auth = AuthService(operators, session_minutes=30)

    op = auth.authenticate(" admin@school.test ", "pw", now=fixed_now)

    assert operators.calls == [("admin@school.test", "pw")]
    assert op.email == "admin@school.test"
    assert op.expires_at == fixed_now + timedelta(minutes=30)


def test_authenticate_passes_backend_message(fixed_now):
    auth = AuthService(FakeOperators(accept=False, message="User not found"))

    with pytest.raises(AuthenticationError) as exc:
        auth.authenticate("a@b.test", "pw", now=fixed_now)
    assert str(exc.value) == "User not found"


def test_authenticate_requires_fields():
    operators = FakeOperators()
    auth = AuthService(operators)

    with pytest.raises(AuthenticationError):
        auth.authenticate("", "pw")
    assert operators.calls == []


def test_current_drops_expired_and_garbage(fixed_now):
    auth = AuthService(FakeOperators(), session_minutes=10)
    op = auth.authenticate("a@b.test", "pw", now=fixed_now)
    data = op.to_session()

    assert auth.current(data, now=fixed_now + timedelta(minutes=5)) == op
    assert auth.current(data, now=fixed_now + timedelta(minutes=10)) is None
    assert auth.current(None, now=fixed_now) is None
    assert auth.current({"email": "x"}, now=fixed_now) is None


def test_operator_session_round_trip():
    op = OperatorSession.start("a@b.test", now=datetime(2024, 1, 1, 8, 0), lifetime=timedelta(hours=1))
    assert OperatorSession.from_session(op.to_session()) == op
