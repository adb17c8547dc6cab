from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import Optional

from ..common.datetime_utils import month_window
from ..common.validators import require_month
from ..core.enums import Period
from ..holidays.index import HolidayIndex
from ..holidays.service import HolidayIndexService
from ..shifts.ledger import ShiftLedger
from ..shifts.service import ShiftLedgerService
from .calculator.base import DayCreditCalculator
from .calculator.standard_calculator import StandardDayCreditCalculator
from .model import DayAggregate, DayCredit, MonthlyTotal

logger = logging.getLogger(__name__)


def build_day_aggregates(ledger: ShiftLedger, holidays: HolidayIndex, start: date, end: date) -> list[DayAggregate]:
    return [
        DayAggregate(
            work_date=d,
            worked_morning=ledger.is_working(d, Period.MORNING),
            worked_afternoon=ledger.is_working(d, Period.AFTERNOON),
            holiday=holidays.get(d),
        )
        for d in ledger.working_dates()
        if start <= d <= end
    ]


class MonthlySummaryService:
    def __init__(
        self,
        shifts: ShiftLedgerService,
        holidays: HolidayIndexService,
        *,
        daily_rate: Decimal,
        calculator: Optional[DayCreditCalculator] = None,
    ):
        self._shifts = shifts
        self._holidays = holidays
        self._daily_rate = Decimal(daily_rate)
        self._calculator = calculator or StandardDayCreditCalculator()

    @property
    def daily_rate(self) -> Decimal:
        return self._daily_rate

    def compute(self, year: int, month: int, ledger: ShiftLedger, holidays: HolidayIndex) -> MonthlyTotal:
        """Pure aggregation over already loaded snapshots."""
        start, end = month_window(year, month)
        days = tuple(
            DayCredit(day=day, credit=self._calculator.credit(day))
            for day in build_day_aggregates(ledger, holidays, start, end)
        )
        total = sum((d.credit for d in days), Decimal("0"))
        return MonthlyTotal(
            year=year,
            month=month,
            total_working_days=total,
            daily_rate=self._daily_rate,
            data_available=ledger.available and holidays.available,
            days=days,
        )

    def summarize(self, year: int, month: int) -> MonthlyTotal:
        year, month = require_month(year, month)
        start, end = month_window(year, month)
        ledger = self._shifts.load(start, end)
        holidays = self._holidays.load(year)
        total = self.compute(year, month, ledger, holidays)
        if not total.data_available:
            logger.info("Summary for %04d-%02d computed from partial data", year, month)
        return total
