from __future__ import annotations

from datetime import date, datetime

from ..core.exceptions import ValidationError

DATE_KEY_FORMAT = "%Y-%m-%d"


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, DATE_KEY_FORMAT).date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def to_date_key(value: date) -> str:
    return value.strftime(DATE_KEY_FORMAT)


def today_key() -> str:
    """Today's date-key from the local wall clock (no timezone conversion)."""
    return to_date_key(now_local().date())


def date_key(year: int, month: int, day: int) -> str:
    """Build a date-key from a zero-based month, zero-padding month and day."""
    if not 0 <= month <= 11:
        raise ValidationError(f"Month index out of range: {month}")
    return f"{year:04d}-{month + 1:02d}-{day:02d}"


def is_date_key(value: str) -> bool:
    try:
        parse_iso_date(value)
    except (TypeError, ValueError):
        return False
    return len(value) == 10
