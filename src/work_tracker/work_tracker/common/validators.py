from __future__ import annotations

from datetime import date

from ..core.enums import Period
from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date


def require_month(year: int, month: int) -> tuple[int, int]:
    if not 1 <= int(month) <= 12:
        raise ValidationError(f"Month must be between 1 and 12, got {month}")
    if not 1 <= int(year) <= 9999:
        raise ValidationError(f"Year out of range: {year}")
    return int(year), int(month)


def require_date(value: str | None, field_name: str = "date") -> date:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    try:
        return parse_iso_date(value.strip())
    except ValueError:
        raise ValidationError(f"{field_name} must be YYYY-MM-DD, got {value!r}") from None


def require_period(value: str | None) -> Period:
    try:
        return Period((value or "").strip().upper())
    except ValueError:
        raise ValidationError(f"period must be AM or PM, got {value!r}") from None
