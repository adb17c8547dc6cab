from __future__ import annotations

from decimal import Decimal

from ...core.constants import FULL_DAY_CREDIT, HALF_DAY_CREDIT
from ..model import DayAggregate
from .base import DayCreditCalculator


class StandardDayCreditCalculator(DayCreditCalculator):
    """Standard rule: 1.0 for AM+PM, 0.5 for one period, times the holiday's on-shift multiplier.

    The on-shift multiplier applies to half days as well; off_shift_multiplier
    is never used.
    """

    def credit(self, day: DayAggregate) -> Decimal:
        if day.is_full_day:
            base = FULL_DAY_CREDIT
        elif day.worked_morning or day.worked_afternoon:
            base = HALF_DAY_CREDIT
        else:
            return Decimal("0")

        if day.holiday is not None:
            return base * day.holiday.on_shift_multiplier
        return base
