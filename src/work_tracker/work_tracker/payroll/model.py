from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from ..core.constants import MONEY_PLACES, WORKING_DAYS_PLACES
from ..holidays.model import Holiday


@dataclass(frozen=True)
class DayAggregate:
    """Per-date view fed to the calculator; only built for dates with work."""

    work_date: date
    worked_morning: bool
    worked_afternoon: bool
    holiday: Optional[Holiday] = None

    @property
    def is_full_day(self) -> bool:
        return self.worked_morning and self.worked_afternoon


@dataclass(frozen=True)
class DayCredit:
    day: DayAggregate
    credit: Decimal


@dataclass(frozen=True)
class MonthlyTotal:
    year: int
    month: int
    total_working_days: Decimal
    daily_rate: Decimal
    data_available: bool = True
    days: tuple[DayCredit, ...] = field(default=())

    @property
    def salary(self) -> Decimal:
        return self.total_working_days * self.daily_rate

    def to_dict(self, *, currency: str) -> dict:
        """Rounded for display: days to 0.1, money to 0.01."""
        return {
            "year": self.year,
            "month": self.month,
            "total_working_days": str(self.total_working_days.quantize(WORKING_DAYS_PLACES, rounding=ROUND_HALF_UP)),
            "salary": str(self.salary.quantize(MONEY_PLACES, rounding=ROUND_HALF_UP)),
            "daily_rate": str(self.daily_rate.quantize(MONEY_PLACES, rounding=ROUND_HALF_UP)),
            "currency": currency,
            "data_available": self.data_available,
            "days": [
                {
                    "date": d.day.work_date.isoformat(),
                    "am": d.day.worked_morning,
                    "pm": d.day.worked_afternoon,
                    "holiday": d.day.holiday.name if d.day.holiday else None,
                    "credit": str(d.credit),
                }
                for d in self.days
            ],
        }
