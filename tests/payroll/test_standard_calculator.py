from datetime import date
from decimal import Decimal

from src.work_tracker.work_tracker.holidays.model import Holiday
from src.work_tracker.work_tracker.payroll.calculator.standard_calculator import StandardDayCreditCalculator
from src.work_tracker.work_tracker.payroll.model import DayAggregate


def _holiday(on: str, off: str = "1.0") -> Holiday:
    return Holiday(
        holiday_date=date(2026, 1, 7),
        name="Holiday",
        on_shift_multiplier=Decimal(on),
        off_shift_multiplier=Decimal(off),
    )


def test_full_day_without_holiday_is_one():
    day = DayAggregate(work_date=date(2026, 1, 5), worked_morning=True, worked_afternoon=True)
    assert StandardDayCreditCalculator().credit(day) == Decimal("1")


def test_single_period_is_half_day():
    calc = StandardDayCreditCalculator()
    am = DayAggregate(work_date=date(2026, 1, 6), worked_morning=True, worked_afternoon=False)
    pm = DayAggregate(work_date=date(2026, 1, 6), worked_morning=False, worked_afternoon=True)

    assert calc.credit(am) == Decimal("0.5")
    assert calc.credit(pm) == Decimal("0.5")


def test_no_period_worked_earns_nothing():
    day = DayAggregate(work_date=date(2026, 1, 6), worked_morning=False, worked_afternoon=False)
    assert StandardDayCreditCalculator().credit(day) == 0


def test_holiday_full_day_uses_on_shift_multiplier():
    day = DayAggregate(date(2026, 1, 7), True, True, holiday=_holiday("2.0"))
    assert StandardDayCreditCalculator().credit(day) == Decimal("2.0")


def test_holiday_half_day_also_uses_on_shift_multiplier():
    day = DayAggregate(date(2026, 1, 7), False, True, holiday=_holiday("3.0", off="5.0"))

    # off_shift_multiplier (5.0) must not influence the result
    assert StandardDayCreditCalculator().credit(day) == Decimal("1.5")


def test_zero_multiplier_holiday_zeroes_the_day():
    day = DayAggregate(date(2026, 1, 7), True, True, holiday=_holiday("0"))
    assert StandardDayCreditCalculator().credit(day) == 0
