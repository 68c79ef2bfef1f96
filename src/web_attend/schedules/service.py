from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.validators import require_date_key
from ..core.constants import MAX_CLASSES_PER_DAY, SUBJECT_CODES, SUBMISSION_ERROR_MESSAGE
from ..core.exceptions import RemoteDataError, ValidationError
from .model import ClassDay
from .repository import ScheduleRepository

logger = logging.getLogger(__name__)

INCOMPLETE_MESSAGE = "Please select a date and fill all class fields."


def parse_class_count(value: Optional[str]) -> Optional[int]:
    """Class count picked on the form, or None while nothing valid is selected."""
    if not value or not str(value).isdigit():
        return None
    count = int(value)
    if not 1 <= count <= MAX_CLASSES_PER_DAY:
        return None
    return count


class ScheduleService:
    def __init__(self, schedules: ScheduleRepository):
        self._schedules = schedules

    def build(self, *, classes: Sequence[Optional[str]], date: Optional[str]) -> ClassDay:
        if not date or not classes or any(not c for c in classes):
            raise ValidationError(INCOMPLETE_MESSAGE)
        if len(classes) > MAX_CLASSES_PER_DAY:
            raise ValidationError(f"At most {MAX_CLASSES_PER_DAY} classes per day")

        unknown = [c for c in classes if c not in SUBJECT_CODES]
        if unknown:
            raise ValidationError(f"Unknown subject: {unknown[0]}")

        return ClassDay(classes=tuple(classes), date=require_date_key(date, "Date"))

    def submit(self, *, classes: Sequence[Optional[str]], date: Optional[str]) -> ClassDay:
        class_day = self.build(classes=classes, date=date)
        if not self._schedules.submit(class_day):
            raise RemoteDataError(SUBMISSION_ERROR_MESSAGE)
        logger.info("Submitted %d classes for %s", len(class_day.classes), class_day.date)
        return class_day
