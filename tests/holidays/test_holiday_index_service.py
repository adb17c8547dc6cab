from datetime import date
from decimal import Decimal

from src.work_tracker.work_tracker.holidays.index import HolidayIndex
from src.work_tracker.work_tracker.holidays.model import Holiday
from src.work_tracker.work_tracker.holidays.service import HolidayIndexService


def test_load_queries_whole_year(fake_holidays, january_holidays):
    repo = fake_holidays(january_holidays)

    index = HolidayIndexService(repo).load(2026)

    assert repo.last_args == {"start": date(2026, 1, 1), "end": date(2026, 12, 31)}
    assert index.available is True
    assert len(index) == 2
    assert index.get(date(2026, 1, 7)).on_shift_multiplier == Decimal("2.0")
    assert date(2026, 1, 8) not in index


def test_index_iterates_in_date_order(january_holidays):
    index = HolidayIndex(2026, january_holidays)

    assert [h.holiday_date for h in index] == [date(2026, 1, 1), date(2026, 1, 7)]


def test_index_drops_other_years():
    other = Holiday(date(2025, 12, 25), "Christmas", Decimal("2"), Decimal("1"))

    assert len(HolidayIndex(2026, [other])) == 0


def test_load_failure_returns_empty_index(fake_holidays, january_holidays):
    index = HolidayIndexService(fake_holidays(january_holidays, fail_reads=True)).load(2026)

    assert index.available is False
    assert len(index) == 0
