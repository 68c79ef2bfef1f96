from __future__ import annotations

from typing import Protocol

from .model import ClassDay


class ScheduleRepository(Protocol):
    def submit(self, class_day: ClassDay) -> bool:
        """True when the backend accepted the schedule."""

        raise NotImplementedError
