from __future__ import annotations

from ..core.exceptions import ValidationError
from .datetime_utils import is_date_key


def require_non_empty(value: str | None, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_date_key(value: str | None, field_name: str) -> str:
    value = require_non_empty(value, field_name)
    if not is_date_key(value):
        raise ValidationError(f"{field_name} must be a YYYY-MM-DD date")
    return value
