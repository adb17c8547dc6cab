from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import Period


@dataclass(frozen=True)
class WorkShiftRecord:
    """Domain entity: one half-day cell of the calendar."""

    record_id: int
    work_date: date
    period: Period
    is_working: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def key(self) -> tuple[date, Period]:
        return self.work_date, self.period

    def to_dict(self) -> dict:
        return {
            "id": self.record_id,
            "date": self.work_date.isoformat(),
            "period": self.period.value,
            "is_working": self.is_working,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
