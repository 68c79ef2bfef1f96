from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.api_attendance_repository import ApiAttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_RECENT_LIMIT, DEFAULT_SESSION_MINUTES
from .remote.client import ApiClient, ApiConfig
from .reports.service import ReportService
from .schedules.api_schedule_repository import ApiScheduleRepository
from .schedules.service import ScheduleService
from .students.api_student_repository import ApiStudentRepository
from .users.api_operator_repository import ApiOperatorRepository
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    client: Optional[ApiClient]

    attendance_service: AttendanceService
    auth_service: AuthService
    schedule_service: ScheduleService
    report_service: ReportService


def build_container(
    *,
    base_url: str,
    timeout: Optional[float] = None,
    session_minutes: int = DEFAULT_SESSION_MINUTES,
    recent_limit: int = DEFAULT_RECENT_LIMIT,
) -> Container:
    client = ApiClient(ApiConfig(base_url=str(base_url), timeout=timeout))

    students_repo = ApiStudentRepository(client)
    attendance_repo = ApiAttendanceRepository(client)
    operators_repo = ApiOperatorRepository(client)
    schedules_repo = ApiScheduleRepository(client)

    return Container(
        client=client,
        attendance_service=AttendanceService(students_repo, attendance_repo, recent_limit=recent_limit),
        auth_service=AuthService(operators_repo, session_minutes=session_minutes),
        schedule_service=ScheduleService(schedules_repo),
        report_service=ReportService(),
    )
